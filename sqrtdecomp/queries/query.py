# sqrtdecomp/queries/query.py

import operator
from collections import namedtuple

from ..errors import InvalidQuery

SUM = 'sum'
ADD = 'add'

# Integer query codes used by judge-style input: "1 l r" and "2 l r delta"
_KIND_CODES = {1: SUM, 2: ADD}

Query = namedtuple('Query', ['kind', 'l', 'r', 'delta'], defaults=(None,))


def sum_query(l, r):
    return Query(SUM, l, r)


def add_query(l, r, delta):
    return Query(ADD, l, r, delta)


def _parse_kind(kind):
    if isinstance(kind, str):
        name = kind.strip().lower()
        if name in (SUM, ADD):
            return name
    elif not isinstance(kind, bool):
        try:
            code = operator.index(kind)
        except TypeError:
            code = None
        if code in _KIND_CODES:
            return _KIND_CODES[code]
    raise InvalidQuery(f"Unknown query kind: {kind!r}")


def parse_query(item):
    """
    Normalize a query stream item into a Query.

    Accepts a Query, a ('sum', l, r) / ('add', l, r, delta) sequence, or
    the integer-coded forms (1, l, r) / (2, l, r, delta).

    Raises:
        InvalidQuery: If the item has an unknown kind or the wrong arity
    """
    if isinstance(item, Query):
        kind = _parse_kind(item.kind)
        if kind == ADD and item.delta is None:
            raise InvalidQuery(f"Add query without delta: {item!r}")
        if kind == SUM and item.delta is not None:
            raise InvalidQuery(f"Sum query with delta: {item!r}")
        return item._replace(kind=kind)

    if not isinstance(item, (tuple, list)) or not item:
        raise InvalidQuery(f"Query must be a non-empty tuple or list, got {item!r}")

    kind = _parse_kind(item[0])
    if kind == SUM:
        if len(item) != 3:
            raise InvalidQuery(f"Sum query takes (kind, l, r), got {item!r}")
        return Query(SUM, item[1], item[2])

    if len(item) != 4 or item[3] is None:
        raise InvalidQuery(f"Add query takes (kind, l, r, delta), got {item!r}")
    return Query(ADD, item[1], item[2], item[3])
