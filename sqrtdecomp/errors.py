# sqrtdecomp/errors.py

"""
Exception types raised by the block decomposition structures.
"""


class BlockDecompositionError(Exception):
    """Base class for all sqrtdecomp errors."""


class InvalidRange(BlockDecompositionError, IndexError):
    """Raised when a query range is not a valid inclusive range [l, r] inside [0, n)."""

    def __init__(self, l, r, n):
        self.l = l
        self.r = r
        self.n = n
        super().__init__(f"Invalid range [{l}, {r}] for sequence of length {n}")


# Older name kept for callers that spell it this way
OutOfRange = InvalidRange


class InvalidConfiguration(BlockDecompositionError, ValueError):
    """Raised for a bad block size or a malformed configuration section."""


class InvalidQuery(BlockDecompositionError, ValueError):
    """Raised when a query stream item is not a well-formed sum or add query."""
