# tests/test_metrics.py

import pytest

from sqrtdecomp.utils.metrics import max_latency, mean_latency, speedup, throughput


def test_throughput():
    assert throughput(100, 2.0) == 50.0


def test_throughput_zero_duration():
    with pytest.warns(UserWarning):
        assert throughput(100, 0) == 0.0


def test_latencies():
    timings = [0.1, 0.3, 0.2]
    assert mean_latency(timings) == pytest.approx(0.2)
    assert max_latency(timings) == pytest.approx(0.3)


def test_latencies_empty():
    with pytest.warns(UserWarning):
        assert mean_latency([]) == 0.0
    with pytest.warns(UserWarning):
        assert max_latency([]) == 0.0


def test_speedup():
    assert speedup(3.0, 1.5) == 2.0
    with pytest.warns(UserWarning):
        assert speedup(3.0, 0.0) == 0.0
