# sqrtdecomp/queries/__init__.py

from .query import Query, SUM, ADD, parse_query, sum_query, add_query
from .processor import QueryProcessor
from .generator import QueryGenerator

__all__ = [
    'Query',
    'SUM',
    'ADD',
    'parse_query',
    'sum_query',
    'add_query',
    'QueryProcessor',
    'QueryGenerator'
]
