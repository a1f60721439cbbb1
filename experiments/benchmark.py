#!/usr/bin/env python3
# experiments/benchmark.py

import sys
from pathlib import Path
import argparse
from datetime import datetime

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from sqrtdecomp.benchmark import run_benchmark
from sqrtdecomp.utils import BenchmarkArgs, Logger, load_config, save_metrics, setup_logger


def main():
    """Run the block size sweep from a YAML configuration"""
    parser = argparse.ArgumentParser(description='Benchmark the blocked range accumulator')
    parser.add_argument('--config', default='experiments/configs/benchmark.yaml',
                        help='Path to configuration file')
    parser.add_argument('--output-dir', default=None,
                        help='Directory for outputs (overrides the config)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (overrides the config)')
    parser.add_argument('--no-plot', action='store_true',
                        help='Skip plotting the sweep')
    cli_args = parser.parse_args()

    config = load_config(cli_args.config)
    args = BenchmarkArgs(config)
    if cli_args.output_dir:
        args.output_dir = cli_args.output_dir
    if cli_args.seed is not None:
        args.seed = cli_args.seed
    if cli_args.no_plot:
        args.plot = False

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_dir = Path(args.output_dir) / timestamp
    logger = setup_logger("benchmark", log_dir / "benchmark.log")
    metrics_logger = Logger(log_dir)

    logger.info(f"Loaded configuration from {cli_args.config}")
    results = run_benchmark(args, logger, metrics_logger)

    save_metrics(metrics_logger.get_metrics(), log_dir / "metrics.json")
    logger.info(f"Saved metrics to {log_dir / 'metrics.json'}")

    if args.plot:
        from sqrtdecomp.utils.visualization import plot_block_size_sweep
        plot_block_size_sweep(results, log_dir / "block_size_sweep.png")

    best = min(results, key=lambda run: run['blocked_seconds'])
    logger.info("\nBenchmark Summary:")
    logger.info(f"Runs completed: {len(results)}")
    logger.info(f"Fastest run: n={best['n']} block_size={best['block_size']} "
                f"({best['blocked_seconds']:.4f}s)")


if __name__ == '__main__':
    main()
