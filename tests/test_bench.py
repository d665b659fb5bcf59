import io
from unittest import mock

import pytest

from holytls.bench import (
    BenchResult,
    Suite,
    Timer,
    auto_benchmark,
    main,
    run_benchmark,
)


def test_timer_units_from_fixed_clock():
    with mock.patch("holytls.bench.time.perf_counter_ns", side_effect=[0, 2_000_000_000]):
        timer = Timer()
        assert timer.elapsed_ns() == 2e9
    with mock.patch("holytls.bench.time.perf_counter_ns", side_effect=[0, 2_000_000_000]):
        timer = Timer()
        assert timer.elapsed_sec() == 2.0
    with mock.patch("holytls.bench.time.perf_counter_ns", side_effect=[0, 2_000_000_000]):
        timer = Timer()
        assert timer.elapsed_ms() == 2000.0
    with mock.patch("holytls.bench.time.perf_counter_ns", side_effect=[0, 2_000_000_000]):
        timer = Timer()
        assert timer.elapsed_us() == 2e6


def test_timer_restart_resets_origin():
    with mock.patch("holytls.bench.time.perf_counter_ns", side_effect=[0, 500, 800]):
        timer = Timer()
        timer.start()
        assert timer.elapsed_ns() == 300.0


def test_run_benchmark_counts_calls():
    calls = []
    result = run_benchmark("count", 50, lambda: calls.append(1))
    assert result.name == "count"
    assert result.iterations == 50
    assert len(calls) == 50 + 50 // 10 + 1
    assert result.total_ns >= 0
    assert result.ns_per_op == pytest.approx(result.total_ns / 50)


def test_run_benchmark_rejects_zero_iterations():
    with pytest.raises(ValueError):
        run_benchmark("none", 0, lambda: None)


def test_auto_benchmark_runs_at_least_once():
    calls = []
    result = auto_benchmark("auto", lambda: calls.append(1),
                            target_ns=1e6, calibration_ns=1e5)
    assert result.iterations >= 1
    assert len(calls) > result.iterations
    assert result.ns_per_op * result.iterations == pytest.approx(result.total_ns)


def test_bench_result_format():
    line = BenchResult("x", 10, 1000.0, 100.0, 1e7).format()
    assert line.startswith("x" + " " * 39)
    assert "100.00 ns/op" in line
    assert "10.00 M ops/sec" in line
    assert " iters " in line


def test_suite_runs_and_reports():
    suite = Suite()
    suite.target_ns = 1e5
    suite.calibration_ns = 1e4
    suite.add("first", lambda: None)
    suite.add("second", lambda: sum(range(10)))
    out = io.StringIO()
    run_results = suite.run(out)
    text = out.getvalue()
    assert "=== Benchmark Results ===" in text
    assert "first" in text and "second" in text
    assert [r.name for r in run_results] == ["first", "second"]
    assert [r.name for r in suite.results()] == ["first", "second"]


def test_suite_results_accumulate():
    suite = Suite()
    suite.target_ns = 1e5
    suite.calibration_ns = 1e4
    suite.add("only", lambda: None)
    suite.run(io.StringIO())
    suite.run(io.StringIO())
    assert len(suite.results()) == 2


def test_main_runs_all_sections(capsys):
    assert main(["--target-ms", "0.5", "--calibration-ms", "0.05"]) == 0
    out = capsys.readouterr().out
    assert "=== Benchmark Complete ===" in out
    assert "--- Linked Lists ---" in out
    assert "FdTable: lookup (hit)" in out


def test_main_rejects_non_positive_time():
    with pytest.raises(SystemExit):
        main(["--target-ms", "0"])