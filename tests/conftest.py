# tests/conftest.py

import matplotlib

matplotlib.use('Agg')

import pytest

from sqrtdecomp.structures import BlockedRangeAccumulator


@pytest.fixture
def scenario_accumulator():
    """Sequence 1..10 split into blocks of 3"""
    return BlockedRangeAccumulator(list(range(1, 11)), 3)
