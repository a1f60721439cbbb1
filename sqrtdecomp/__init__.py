# sqrtdecomp/__init__.py

__version__ = '0.1.0'

from .errors import (
    BlockDecompositionError,
    InvalidRange,
    OutOfRange,
    InvalidConfiguration,
    InvalidQuery
)
from .structures import BlockedRangeAccumulator, NaiveRangeAccumulator, optimal_block_size
from .queries import Query, QueryProcessor, QueryGenerator, parse_query
from .utils.logger import get_logger
from . import structures
from . import queries
from . import utils

__all__ = [
    'structures',
    'queries',
    'utils',
    'BlockDecompositionError',
    'InvalidRange',
    'OutOfRange',
    'InvalidConfiguration',
    'InvalidQuery',
    'BlockedRangeAccumulator',
    'NaiveRangeAccumulator',
    'optimal_block_size',
    'Query',
    'QueryProcessor',
    'QueryGenerator',
    'parse_query',
    'get_logger'
]
