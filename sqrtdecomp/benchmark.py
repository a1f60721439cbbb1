# sqrtdecomp/benchmark.py

"""
Block size sweep: times query streams on the blocked accumulator against the
naive baseline for several sequence lengths and block sizes.
"""

import logging
import time

from .queries import QueryGenerator, QueryProcessor
from .structures import BlockedRangeAccumulator, NaiveRangeAccumulator, optimal_block_size
from .utils.config_utils import SQRT_BLOCK_SIZE
from .utils.metrics import mean_latency, max_latency, speedup, throughput


def resolve_block_sizes(block_sizes, n):
    """Replace 'sqrt' entries with isqrt(n) and drop duplicates, keeping order"""
    resolved = []
    for block_size in block_sizes:
        if block_size == SQRT_BLOCK_SIZE:
            block_size = optimal_block_size(n)
        if block_size not in resolved:
            resolved.append(block_size)
    return resolved


def _time_run(structure, queries):
    processor = QueryProcessor(structure)
    start = time.perf_counter()
    answers = processor.run(queries)
    return time.perf_counter() - start, answers


def run_benchmark(args, logger=None, metrics_logger=None):
    """
    Run the block size sweep described by args

    Args:
        args (BenchmarkArgs): Benchmark settings
        logger (logging.Logger, optional): Progress logger
        metrics_logger (Logger, optional): Recorder for steps and run summaries

    Returns:
        list: One summary dict per (n, block_size)

    Raises:
        RuntimeError: If the blocked accumulator disagrees with the naive baseline
    """
    logger = logger or logging.getLogger(__name__)
    results = []

    for size_idx, n in enumerate(args.sizes):
        seed = None if args.seed is None else args.seed + size_idx
        generator = QueryGenerator(n, seed=seed, add_ratio=args.add_ratio,
                                   max_delta=args.max_delta)
        values = generator.random_values()
        queries = generator.generate(args.num_queries)

        logger.info(f"n={n}: {len(queries)} queries, seed={seed}")

        naive_seconds = None
        reference = None
        if args.include_naive:
            naive_timings = []
            for _ in range(args.repeats):
                seconds, reference = _time_run(NaiveRangeAccumulator(values), queries)
                naive_timings.append(seconds)
            naive_seconds = mean_latency(naive_timings)
            logger.info(f"n={n}: naive {naive_seconds:.4f}s")

        for block_size in resolve_block_sizes(args.block_sizes, n):
            timings = []
            for repeat in range(args.repeats):
                structure = BlockedRangeAccumulator(values, block_size)
                seconds, answers = _time_run(structure, queries)
                timings.append(seconds)

                if reference is not None and answers != reference:
                    raise RuntimeError(
                        f"Blocked accumulator disagrees with naive baseline "
                        f"for n={n}, block_size={block_size}"
                    )

                if metrics_logger is not None:
                    metrics_logger.log_step({
                        'n': n,
                        'block_size': block_size,
                        'repeat': repeat,
                        'seconds': seconds
                    })

            blocked_seconds = mean_latency(timings)
            summary = {
                'n': n,
                'block_size': block_size,
                'num_queries': len(queries),
                'blocked_seconds': blocked_seconds,
                'blocked_max_seconds': max_latency(timings),
                'queries_per_second': throughput(len(queries), blocked_seconds),
                'naive_seconds': naive_seconds,
                'speedup': speedup(naive_seconds, blocked_seconds) if naive_seconds is not None else None
            }
            if metrics_logger is not None:
                summary = metrics_logger.log_run(f"n{n}_b{block_size}", summary)
            results.append(summary)

            logger.info(f"n={n} block_size={block_size}: {blocked_seconds:.4f}s "
                        f"({summary['queries_per_second']:.0f} queries/s)")

    return results
