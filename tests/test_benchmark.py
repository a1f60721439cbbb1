# tests/test_benchmark.py

import pytest

from sqrtdecomp.benchmark import resolve_block_sizes, run_benchmark
from sqrtdecomp.utils.config_utils import BenchmarkArgs
from sqrtdecomp.utils.logger import Logger


def small_args(**overrides):
    benchmark = {
        'sizes': [50, 120],
        'block_sizes': [1, 'sqrt', 7, 200],
        'num_queries': 100,
        'repeats': 2,
        'seed': 5
    }
    benchmark.update(overrides)
    return BenchmarkArgs({'benchmark': benchmark})


def test_resolve_block_sizes():
    assert resolve_block_sizes(['sqrt', 4, 'sqrt'], 16) == [4]
    assert resolve_block_sizes([8, 'sqrt', 2], 100) == [8, 10, 2]


def test_run_benchmark(tmp_path):
    metrics_logger = Logger(tmp_path)
    results = run_benchmark(small_args(), metrics_logger=metrics_logger)

    # isqrt(50) == 7 collapses with the explicit 7; isqrt(120) == 10
    assert [(r['n'], r['block_size']) for r in results] == [
        (50, 1), (50, 7), (50, 200),
        (120, 1), (120, 10), (120, 7), (120, 200)
    ]
    for summary in results:
        assert summary['num_queries'] == 100
        assert summary['blocked_seconds'] > 0
        assert summary['naive_seconds'] > 0
        assert summary['speedup'] > 0
        assert summary['run_id'] == f"n{summary['n']}_b{summary['block_size']}"

    assert len(metrics_logger.metrics_file.read_text().splitlines()) == 7 * 2
    assert metrics_logger.get_metrics()['n'] == [50, 50, 50, 120, 120, 120, 120]


def test_run_benchmark_without_naive():
    results = run_benchmark(small_args(sizes=[30], block_sizes=[5], include_naive=False, repeats=1))
    assert len(results) == 1
    assert results[0]['naive_seconds'] is None
    assert results[0]['speedup'] is None
    assert 'run_id' not in results[0]


def test_run_benchmark_detects_disagreement(monkeypatch):
    from sqrtdecomp.structures import BlockedRangeAccumulator

    def broken_sum(self, l, r):
        return -1

    monkeypatch.setattr(BlockedRangeAccumulator, 'range_sum', broken_sum)
    with pytest.raises(RuntimeError):
        run_benchmark(small_args(sizes=[20], block_sizes=[4], add_ratio=0.0, repeats=1))
