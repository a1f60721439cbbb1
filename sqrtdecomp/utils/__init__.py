# sqrtdecomp/utils/__init__.py

from .logger import get_logger, setup_logger, save_metrics, Logger
from .config_utils import load_config, BenchmarkArgs

__all__ = [
    'get_logger',
    'setup_logger',
    'save_metrics',
    'Logger',
    'load_config',
    'BenchmarkArgs'
]
