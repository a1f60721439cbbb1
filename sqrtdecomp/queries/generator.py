# sqrtdecomp/queries/generator.py

import numpy as np
from typing import List, Optional

from ..errors import InvalidConfiguration
from .query import Query, add_query, sum_query


class QueryGenerator:
    """Reproducible random stream of valid sum/add queries over [0, n)"""

    def __init__(self, n: int, seed: Optional[int] = None, add_ratio: float = 0.5,
                 max_delta: int = 100):
        """
        Initialize generator

        Args:
            n: Length of the target sequence
            seed: Seed for the numpy random generator
            add_ratio: Probability that a generated query is an add
            max_delta: Add deltas are drawn uniformly from [-max_delta, max_delta]
        """
        if n <= 0:
            raise InvalidConfiguration(f"Sequence length must be positive, got {n}")
        if not 0.0 <= add_ratio <= 1.0:
            raise InvalidConfiguration(f"add_ratio must lie in [0, 1], got {add_ratio}")
        if max_delta < 0:
            raise InvalidConfiguration(f"max_delta must be non-negative, got {max_delta}")

        self.n = n
        self.add_ratio = add_ratio
        self.max_delta = max_delta
        self.rng = np.random.default_rng(seed)

    def random_values(self, low: int = -1000, high: int = 1000) -> List[int]:
        """Random initial sequence of length n"""
        return self.rng.integers(low, high, size=self.n, endpoint=True).tolist()

    def generate(self, count: int) -> List[Query]:
        """Generate count queries"""
        bounds = np.sort(self.rng.integers(0, self.n, size=(count, 2)), axis=1)
        is_add = self.rng.random(count) < self.add_ratio
        deltas = self.rng.integers(-self.max_delta, self.max_delta, size=count, endpoint=True)

        queries = []
        for (l, r), add, delta in zip(bounds.tolist(), is_add.tolist(), deltas.tolist()):
            if add:
                queries.append(add_query(l, r, delta))
            else:
                queries.append(sum_query(l, r))
        return queries
