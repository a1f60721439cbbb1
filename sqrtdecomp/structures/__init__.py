# sqrtdecomp/structures/__init__.py

from .blocked_accumulator import BlockedRangeAccumulator, optimal_block_size
from .naive_accumulator import NaiveRangeAccumulator

__all__ = [
    'BlockedRangeAccumulator',
    'NaiveRangeAccumulator',
    'optimal_block_size'
]
