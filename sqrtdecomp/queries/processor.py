# sqrtdecomp/queries/processor.py

import logging
from typing import Iterable, List, Optional

from .query import ADD, parse_query


class QueryProcessor:
    """Applies a stream of sum/add queries to a range accumulator"""

    def __init__(self, structure, logger: Optional[logging.Logger] = None):
        """
        Initialize processor

        Args:
            structure: Object exposing range_sum(l, r) and range_add(l, r, delta)
            logger: Logger for progress messages, defaults to the module logger
        """
        self.structure = structure
        self.logger = logger or logging.getLogger(__name__)
        self.reset_counters()

    def reset_counters(self):
        """Reset query counters"""
        self.num_sums = 0
        self.num_adds = 0

    def process(self, query):
        """
        Apply a single query.

        Returns:
            The range sum for a sum query, None for an add query
        """
        query = parse_query(query)
        if query.kind == ADD:
            self.structure.range_add(query.l, query.r, query.delta)
            self.num_adds += 1
            return None

        result = self.structure.range_sum(query.l, query.r)
        self.num_sums += 1
        return result

    def run(self, queries: Iterable) -> List:
        """Apply queries in order and collect the answers to sum queries"""
        answers = []
        for query in queries:
            result = self.process(query)
            if result is not None:
                answers.append(result)

        self.logger.debug(f"Processed {self.num_sums} sum and {self.num_adds} add queries")
        return answers
