# sqrtdecomp/structures/blocked_accumulator.py

"""
Square-root decomposition over a numeric sequence.
Supports inclusive range sums and range additions in O(sqrt(n)) per operation.
"""

import logging
import math
import operator
from typing import Iterable, List

import numpy as np

from ..errors import InvalidConfiguration, InvalidRange

logger = logging.getLogger(__name__)


def optimal_block_size(n: int) -> int:
    """Block size that balances per-block and per-element work for n elements."""
    if n < 0:
        raise InvalidConfiguration(f"Sequence length must be non-negative, got {n}")
    return max(1, math.isqrt(n))


class BlockedRangeAccumulator:
    """Sequence split into contiguous blocks, each with a sum and a pending offset.

    The true value of element i in block b is ``base[i] + pending[b]``.
    ``block_sums[b]`` holds the sum of base values of block b only, so the
    true sum of a whole block is ``block_sums[b] + block_length(b) * pending[b]``.
    """

    def __init__(self, values: Iterable, block_size: int):
        """Initialize accumulator.

        Args:
            values (iterable): Initial numeric sequence, copied
            block_size (int): Number of elements per block, ideally close to sqrt(n)
        """
        try:
            block_size = operator.index(block_size)
        except TypeError:
            raise InvalidConfiguration(
                f"Block size must be an integer, got {type(block_size).__name__}"
            ) from None
        if block_size <= 0:
            raise InvalidConfiguration(f"Block size must be positive, got {block_size}")

        self.block_size = block_size
        self.base = values.tolist() if isinstance(values, np.ndarray) else list(values)
        self.n = len(self.base)
        self.num_blocks = -(-self.n // block_size)

        # Block sums start from base values, offsets from the additive identity
        self.block_sums = [
            sum(self.base[start:start + block_size], 0)
            for start in range(0, self.n, block_size)
        ]
        self.pending = [0] * self.num_blocks

        logger.debug("Built accumulator: n=%d block_size=%d blocks=%d",
                     self.n, self.block_size, self.num_blocks)

    @classmethod
    def create(cls, values: Iterable, block_size: int) -> "BlockedRangeAccumulator":
        return cls(values, block_size)

    @classmethod
    def with_optimal_block_size(cls, values: Iterable) -> "BlockedRangeAccumulator":
        if not isinstance(values, np.ndarray):
            values = list(values)
        return cls(values, optimal_block_size(len(values)))

    def __len__(self) -> int:
        return self.n

    def _check_range(self, l, r):
        try:
            l_idx = operator.index(l)
            r_idx = operator.index(r)
        except TypeError:
            raise InvalidRange(l, r, self.n) from None
        if l_idx < 0 or r_idx >= self.n or l_idx > r_idx:
            raise InvalidRange(l, r, self.n)
        return l_idx, r_idx

    def _check_block(self, block: int) -> int:
        try:
            block = operator.index(block)
        except TypeError:
            raise InvalidRange(block, block, self.num_blocks) from None
        if not 0 <= block < self.num_blocks:
            raise InvalidRange(block, block, self.num_blocks)
        return block

    def block_of(self, idx: int) -> int:
        """Index of the block containing element idx."""
        idx, _ = self._check_range(idx, idx)
        return idx // self.block_size

    def block_start(self, block: int) -> int:
        return self._check_block(block) * self.block_size

    def block_length(self, block: int) -> int:
        """Number of elements in block; only the final block may be shorter."""
        start = self.block_start(block)
        return min(self.block_size, self.n - start)

    def range_sum(self, l: int, r: int):
        """Returns sum of current values over the inclusive range [l, r]."""
        l, r = self._check_range(l, r)
        size = self.block_size
        total = 0

        i = l
        while i <= r:
            block = i // size
            block_end = min((block + 1) * size, self.n) - 1
            if i % size == 0 and block_end <= r:
                # Whole block inside the range
                total += self.block_sums[block] + (block_end - i + 1) * self.pending[block]
                i = block_end + 1
            else:
                total += self.base[i] + self.pending[block]
                i += 1

        return total

    def range_add(self, l: int, r: int, delta) -> None:
        """Adds delta to every element of the inclusive range [l, r]."""
        l, r = self._check_range(l, r)
        size = self.block_size

        i = l
        while i <= r:
            block = i // size
            block_end = min((block + 1) * size, self.n) - 1
            if i % size == 0 and block_end <= r:
                # Deferred: base values and block sum stay untouched
                self.pending[block] += delta
                i = block_end + 1
            else:
                self.base[i] += delta
                self.block_sums[block] += delta
                i += 1

    def __getitem__(self, idx: int):
        """Get current value of a single element."""
        idx, _ = self._check_range(idx, idx)
        return self.base[idx] + self.pending[idx // self.block_size]

    def __iter__(self):
        return iter(self.to_list())

    def to_list(self) -> List:
        """Current values of all elements."""
        size = self.block_size
        return [value + self.pending[i // size] for i, value in enumerate(self.base)]

    def flush(self) -> None:
        """Write every pending offset into the base values and reset it."""
        size = self.block_size
        for block in range(self.num_blocks):
            offset = self.pending[block]
            if not offset:
                continue
            start = block * size
            end = min(start + size, self.n)
            for i in range(start, end):
                self.base[i] += offset
            self.block_sums[block] += (end - start) * offset
            self.pending[block] = 0
        logger.debug("Flushed pending offsets for %d blocks", self.num_blocks)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(n={self.n}, block_size={self.block_size}, "
                f"num_blocks={self.num_blocks})")
