# sqrtdecomp/utils/metrics.py

"""
Timing metrics for range query benchmarks.

Functions accept plain lists of durations in seconds and degrade to 0.0 with a
UserWarning on empty or degenerate input instead of raising, so a single bad
measurement does not abort a whole sweep.
"""

from typing import List, Union
import numpy as np
import warnings

Number = Union[int, float]


def throughput(num_ops: int, seconds: Number) -> float:
    """
    Operations per second.

    Args:
        num_ops (int): Number of operations executed
        seconds (float): Wall-clock duration of the execution

    Returns:
        float: Operations per second, 0 if the duration is not positive.
    """
    if seconds <= 0:
        warnings.warn(f"Non-positive duration {seconds}. Returning 0.", UserWarning)
        return 0.0
    return float(num_ops) / float(seconds)


def mean_latency(timings: List[Number]) -> float:
    """Average duration of a list of timings, 0 for an empty list."""
    if len(timings) == 0:
        warnings.warn("Empty timing list. Returning 0.", UserWarning)
        return 0.0
    return float(np.mean(timings))


def max_latency(timings: List[Number]) -> float:
    """Largest duration of a list of timings, 0 for an empty list."""
    if len(timings) == 0:
        warnings.warn("Empty timing list. Returning 0.", UserWarning)
        return 0.0
    return float(np.max(timings))


def speedup(baseline: Number, candidate: Number) -> float:
    """
    How many times faster the candidate ran than the baseline.

    Args:
        baseline (float): Duration of the reference run
        candidate (float): Duration of the measured run

    Returns:
        float: baseline / candidate, 0 if the candidate duration is not positive.
    """
    if candidate <= 0:
        warnings.warn(f"Non-positive candidate duration {candidate}. Returning 0.", UserWarning)
        return 0.0
    return float(baseline) / float(candidate)
