[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holytls"
version = "0.1.0"
description = "Chrome-profile client configuration, error and result types, and low-level building blocks: arenas, buffers, containers, linked lists and a benchmark harness."
requires-python = ">=3.10"
dependencies = []
keywords = ["tls", "http2", "chrome", "arena", "ring-buffer", "linked-list", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
holytls-bench = "holytls.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["holytls"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
