import os
import sys
import csv

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from binheap import benchmark


def test_bench_operations_leave_valid_heaps():
    data = benchmark.generate_random_list(64)
    assert benchmark.bench_push(data).is_valid()
    assert len(benchmark.bench_pop(data)) == 0
    assert len(benchmark.bench_push_pop(data)) == 32
    assert benchmark.bench_from_items(data).peek() == min(data)


def test_measure_operation_time_rejects_zero_iterations():
    with pytest.raises(ValueError):
        benchmark.measure_operation_time(benchmark.bench_push, 10, iterations=0)


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "heap.csv"
    benchmark.main(["--output", str(out), "--base-input", "4", "--steps", "2", "--iterations", "2"])

    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"]
    assert len(rows) == 1 + 2 * len(benchmark.OPERATIONS)
    assert {r[1] for r in rows[1:]} == set(benchmark.OPERATIONS)
    assert "Benchmark completed" in capsys.readouterr().out


def test_run_benchmarks_rejects_bad_sizes(tmp_path):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), base_input=0)
