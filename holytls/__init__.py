"""Chrome-profile configuration, error and result types, low-level containers and benchmarks."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "bench",
    "buffer",
    "config",
    "containers",
    "errors",
    "linked_list",
    "result",
    "strings",
]