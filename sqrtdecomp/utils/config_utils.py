# sqrtdecomp/utils/config_utils.py

import yaml
from pathlib import Path

from ..errors import InvalidConfiguration

SQRT_BLOCK_SIZE = 'sqrt'

DEFAULT_BENCHMARK = {
    'sizes': [1000, 10000],
    'block_sizes': [SQRT_BLOCK_SIZE],
    'num_queries': 2000,
    'add_ratio': 0.5,
    'max_delta': 100,
    'seed': 42,
    'repeats': 1,
    'include_naive': True
}

DEFAULT_OUTPUT = {
    'dir': 'experiments/outputs/benchmark',
    'plot': True
}


def load_config(config_path):
    """Load configuration from YAML file"""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def _positive_int(section, key, value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfiguration(f"{section}.{key} must be a positive integer, got {value!r}")
    return value


def _non_negative_int(section, key, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidConfiguration(f"{section}.{key} must be a non-negative integer, got {value!r}")
    return value


def _flag(section, key, value):
    if not isinstance(value, bool):
        raise InvalidConfiguration(f"{section}.{key} must be true or false, got {value!r}")
    return value


class BenchmarkArgs:
    """Simple class to hold benchmark arguments"""
    def __init__(self, config_dict):
        if not isinstance(config_dict, dict) or not isinstance(config_dict.get('benchmark'), dict):
            raise InvalidConfiguration("Configuration must contain a 'benchmark' section")

        benchmark = dict(DEFAULT_BENCHMARK, **config_dict['benchmark'])
        output_section = config_dict.get('output') or {}
        if not isinstance(output_section, dict):
            raise InvalidConfiguration("The 'output' section must be a mapping")
        output = dict(DEFAULT_OUTPUT, **output_section)

        sizes = benchmark['sizes']
        if not isinstance(sizes, list) or not sizes:
            raise InvalidConfiguration("benchmark.sizes must be a non-empty list")
        self.sizes = [_positive_int('benchmark', 'sizes', n) for n in sizes]

        block_sizes = benchmark['block_sizes']
        if not isinstance(block_sizes, list) or not block_sizes:
            raise InvalidConfiguration("benchmark.block_sizes must be a non-empty list")
        self.block_sizes = [
            b if b == SQRT_BLOCK_SIZE else _positive_int('benchmark', 'block_sizes', b)
            for b in block_sizes
        ]

        self.num_queries = _positive_int('benchmark', 'num_queries', benchmark['num_queries'])
        self.repeats = _positive_int('benchmark', 'repeats', benchmark['repeats'])

        try:
            self.add_ratio = float(benchmark['add_ratio'])
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Invalid benchmark value: {e}") from e
        if not 0.0 <= self.add_ratio <= 1.0:
            raise InvalidConfiguration(f"benchmark.add_ratio must lie in [0, 1], got {self.add_ratio}")
        self.max_delta = _non_negative_int('benchmark', 'max_delta', benchmark['max_delta'])

        seed = benchmark['seed']
        if seed is not None:
            seed = _non_negative_int('benchmark', 'seed', seed)
        self.seed = seed
        self.include_naive = _flag('benchmark', 'include_naive', benchmark['include_naive'])
        self.output_dir = str(output['dir'])
        self.plot = _flag('output', 'plot', output['plot'])
