# sqrtdecomp/structures/naive_accumulator.py

import operator
from typing import Iterable, List

import numpy as np

from ..errors import InvalidRange


class NaiveRangeAccumulator:
    """Plain list with linear-time range sums and range additions.

    Reference implementation for checking BlockedRangeAccumulator and the
    baseline for benchmarks.
    """

    def __init__(self, values: Iterable = None):
        if values is None:
            self.array = []
        elif isinstance(values, np.ndarray):
            self.array = values.tolist()
        else:
            self.array = list(values)

    def __len__(self) -> int:
        return len(self.array)

    def _check_range(self, l, r):
        try:
            l_idx = operator.index(l)
            r_idx = operator.index(r)
        except TypeError:
            raise InvalidRange(l, r, len(self.array)) from None
        if l_idx < 0 or r_idx >= len(self.array) or l_idx > r_idx:
            raise InvalidRange(l, r, len(self.array))
        return l_idx, r_idx

    def range_sum(self, l: int, r: int):
        l, r = self._check_range(l, r)
        return sum(self.array[l:r + 1], 0)

    def range_add(self, l: int, r: int, delta) -> None:
        l, r = self._check_range(l, r)
        for i in range(l, r + 1):
            self.array[i] += delta

    def __getitem__(self, idx: int):
        idx, _ = self._check_range(idx, idx)
        return self.array[idx]

    def __iter__(self):
        return iter(self.to_list())

    def to_list(self) -> List:
        return list(self.array)
