"""Mo's algorithm for answering offline range queries."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt
from typing import Any, Callable, Sequence


@dataclass(frozen=True)
class Query:
    """An inclusive range [l, r]."""

    l: int
    r: int


def mo_algorithm(data: Sequence[Any], queries: Sequence[Query],
                 add: Callable[[Any], None], remove: Callable[[Any], None],
                 process: Callable[[Query], Any]) -> list[Any]:
    """Answer ``queries`` by sliding a window over ``data``.

    ``add`` and ``remove`` maintain the window state; ``process`` is called
    once per query when the window matches it. Queries are visited in Mo
    order; the results are returned in the order the queries were given.
    """
    n = len(data)
    if n == 0:
        raise ValueError("data must not be empty")
    for q in queries:
        if not 0 <= q.l <= q.r < n:
            raise ValueError(f"query out of range: {q}")
    block = max(1, isqrt(n))
    order = sorted(range(len(queries)),
                   key=lambda k: (queries[k].l // block, queries[k].r))
    results: list[Any] = [None] * len(queries)
    add(data[0])
    l = r = 0
    for k in order:
        q = queries[k]
        while l > q.l:
            l -= 1
            add(data[l])
        while r < q.r:
            r += 1
            add(data[r])
        while l < q.l:
            remove(data[l])
            l += 1
        while r > q.r:
            remove(data[r])
            r -= 1
        results[k] = process(q)
    return results