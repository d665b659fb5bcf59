"""A small benchmark harness and benchmarks of the core containers."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from holytls.arena import Arena
from holytls.buffer import ArenaBuf, RingBuf
from holytls.containers import FdTable, FixedArray
from holytls.linked_list import DLLNode, DoublyLinkedList

DEFAULT_TARGET_NS = 1e9
DEFAULT_CALIBRATION_NS = 1e8


class Timer:
    """Measures elapsed wall time with nanosecond resolution."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def start(self) -> None:
        self._start = time.perf_counter_ns()

    def elapsed_ns(self) -> float:
        return float(time.perf_counter_ns() - self._start)

    def elapsed_us(self) -> float:
        return self.elapsed_ns() / 1000.0

    def elapsed_ms(self) -> float:
        return self.elapsed_ns() / 1_000_000.0

    def elapsed_sec(self) -> float:
        return self.elapsed_ns() / 1_000_000_000.0


@dataclass
class BenchResult:
    """Timing of one benchmark."""

    name: str
    iterations: int
    total_ns: float
    ns_per_op: float
    ops_per_sec: float

    @classmethod
    def from_timing(cls, name: str, iterations: int, total_ns: float) -> "BenchResult":
        ops_per_sec = iterations / (total_ns / 1e9) if total_ns > 0 else float("inf")
        return cls(name, iterations, total_ns, total_ns / iterations, ops_per_sec)

    def format(self) -> str:
        return (
            f"{self.name:<40} {self.iterations:>12} iters "
            f"{self.ns_per_op:>12.2f} ns/op {self.ops_per_sec / 1e6:>12.2f} M ops/sec"
        )


def _time_calls(func: Callable[[], object], iterations: int) -> float:
    timer = Timer()
    for _ in range(iterations):
        func()
    return timer.elapsed_ns()


def run_benchmark(name: str, iterations: int, func: Callable[[], object]) -> BenchResult:
    """Run ``func`` a tenth of ``iterations`` plus one to warm up, then time ``iterations`` calls."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    for _ in range(iterations // 10 + 1):
        func()
    return BenchResult.from_timing(name, iterations, _time_calls(func, iterations))


def auto_benchmark(
    name: str,
    func: Callable[[], object],
    target_ns: float = DEFAULT_TARGET_NS,
    calibration_ns: float = DEFAULT_CALIBRATION_NS,
) -> BenchResult:
    """Time ``func`` over enough calls to take about ``target_ns``.

    The call count doubles until one batch takes ``calibration_ns``, then is
    scaled to the target.
    """
    iterations = 1
    elapsed = 0.0
    while elapsed < calibration_ns:
        iterations *= 2
        elapsed = _time_calls(func, iterations)
    if elapsed > 0:
        target_iterations = max(1, int(iterations * target_ns / elapsed))
    else:
        target_iterations = iterations
    total = _time_calls(func, target_iterations)
    return BenchResult.from_timing(name, target_iterations, total)


class Suite:
    """A named collection of benchmarks run together."""

    def __init__(self) -> None:
        self.target_ns = DEFAULT_TARGET_NS
        self.calibration_ns = DEFAULT_CALIBRATION_NS
        self._benchmarks: List[Tuple[str, Callable[[], object]]] = []
        self._results: List[BenchResult] = []

    def add(self, name: str, func: Callable[[], object]) -> None:
        self._benchmarks.append((name, func))

    def run(self, out: Optional[TextIO] = None) -> List[BenchResult]:
        """Run every benchmark, print a table to ``out`` and return this run's results."""
        out = sys.stdout if out is None else out
        print("\n=== Benchmark Results ===\n", file=out)
        print(f"{'Benchmark':<40} {'Iterations':>12} {'ns/op':>12} {'M ops/sec':>12}", file=out)
        print(f"{'---------':<40} {'----------':>12} {'-----':>12} {'---------':>12}", file=out)
        run_results = []
        for name, func in self._benchmarks:
            result = auto_benchmark(name, func, self.target_ns, self.calibration_ns)
            print(result.format(), file=out)
            run_results.append(result)
        print("", file=out)
        self._results.extend(run_results)
        return run_results

    def results(self) -> List[BenchResult]:
        return list(self._results)


_Bench = Tuple[str, Callable[[], object]]


def _memory_benchmarks() -> List[_Bench]:
    arena = Arena(64 * 1024)
    count = 0

    def arena_64() -> None:
        nonlocal count
        arena.push(64)
        count += 1
        if count >= 900:
            arena.clear()
            count = 0

    def arena_1k() -> None:
        nonlocal count
        arena.push(1024)
        count += 1
        if count >= 60:
            arena.clear()
            count = 0

    def reset_then(func: Callable[[], None]) -> Callable[[], None]:
        def first_call() -> None:
            nonlocal count
            if count and func is arena_1k and count >= 60:
                arena.clear()
                count = 0
            func()
        return first_call

    return [
        ("Arena: 64-byte alloc", arena_64),
        ("Arena: 1KB alloc", reset_then(arena_1k)),
        ("bytearray: 64-byte alloc", lambda: bytearray(64)),
        ("bytearray: 1KB alloc", lambda: bytearray(1024)),
    ]


def _lookup_benchmarks() -> List[_Bench]:
    value = 42
    table: FdTable[int] = FdTable()
    mapping = {}
    for i in range(1000):
        table.set(i * 10, value)
        mapping[i * 10] = value

    def table_set_remove() -> None:
        table.set(50000, value)
        table.remove(50000)

    def dict_insert_erase() -> None:
        mapping[50000] = value
        del mapping[50000]

    return [
        ("FdTable: lookup (hit)", lambda: table.get(5000)),
        ("FdTable: lookup (miss)", lambda: table.get(5001)),
        ("FdTable: set+remove", table_set_remove),
        ("dict: lookup (hit)", lambda: mapping.get(5000)),
        ("dict: lookup (miss)", lambda: mapping.get(5001)),
        ("dict: insert+erase", dict_insert_erase),
    ]


def _buffer_benchmarks() -> List[_Bench]:
    arena = Arena(256 * 1024)
    src = b"X" * 4096
    small = src[:64]
    abuf = ArenaBuf(arena, 4096)

    def append_small() -> None:
        abuf.append(small)
        if len(abuf) > 100000:
            abuf.clear()

    def append_large() -> None:
        abuf.append(src)
        if len(abuf) > 100000:
            abuf.clear()

    ring = RingBuf(64 * 1024)

    def ring_round_trip() -> None:
        ring.write(src)
        ring.read(4096)

    grown = bytearray()

    def bytearray_extend() -> None:
        grown.extend(small)
        if len(grown) > 100000:
            grown.clear()

    fixed: FixedArray[int] = FixedArray(65536)

    def fixed_push() -> None:
        for i in range(64):
            fixed.push(i)
        if len(fixed) > 60000:
            fixed.clear()

    return [
        ("ArenaBuf: append 64 bytes", append_small),
        ("ArenaBuf: append 4KB", append_large),
        ("RingBuf: write+read 4KB", ring_round_trip),
        ("bytearray: extend 64 bytes", bytearray_extend),
        ("FixedArray: push 64 items", fixed_push),
    ]


def _list_benchmarks() -> List[_Bench]:
    linked: DoublyLinkedList[DLLNode] = DoublyLinkedList()
    for i in range(1000):
        linked.push_back(DLLNode(i))

    def linked_rotate() -> None:
        node = linked.pop_front()
        if node is not None:
            linked.push_back(node)

    queue = deque(range(1000))

    return [
        ("DoublyLinkedList: iterate 1000", lambda: sum(linked.values())),
        ("DoublyLinkedList: remove+push_back", linked_rotate),
        ("deque: iterate 1000", lambda: sum(queue)),
        ("deque: rotate front->back", lambda: queue.rotate(-1)),
    ]


_SECTIONS: Sequence[Tuple[str, Callable[[], List[_Bench]]]] = (
    ("Memory Allocation", _memory_benchmarks),
    ("Lookup Tables", _lookup_benchmarks),
    ("Buffers", _buffer_benchmarks),
    ("Linked Lists", _list_benchmarks),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the core benchmarks and print their timings."""
    parser = argparse.ArgumentParser(prog="holytls-bench", description=main.__doc__)
    parser.add_argument("--target-ms", type=float, default=DEFAULT_TARGET_NS / 1e6,
                        help="approximate run time of each benchmark")
    parser.add_argument("--calibration-ms", type=float, default=DEFAULT_CALIBRATION_NS / 1e6,
                        help="batch time reached before scaling to the target")
    args = parser.parse_args(argv)
    if args.target_ms <= 0 or args.calibration_ms <= 0:
        parser.error("times must be positive")
    target_ns = args.target_ms * 1e6
    calibration_ns = args.calibration_ms * 1e6

    print("=== HolyTLS Core Benchmarks ===")
    print("Comparing the package containers with built-in equivalents\n")
    for title, build in _SECTIONS:
        print(f"--- {title} ---")
        for name, func in build():
            print(auto_benchmark(name, func, target_ns, calibration_ns).format())
        print()
    print("=== Benchmark Complete ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())