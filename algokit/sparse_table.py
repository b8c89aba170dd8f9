"""Sparse tables for O(1) static range-extreme queries."""

from __future__ import annotations

import operator
from typing import Any, Callable, Sequence


class SparseTable:
    """Range query over [a, b) returning the index of the extreme value.

    On ties the later index wins, as ``less`` decides strictly.
    """

    def __init__(self, values: Sequence[Any],
                 less: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._vals = list(values)
        self._less = less
        levels = [list(range(len(self._vals)))]
        pw = 1
        while 2 * pw <= len(self._vals):
            prev = levels[-1]
            levels.append([self._select(i, j) for i, j in zip(prev, prev[pw:])])
            pw *= 2
        self._table = levels

    def _select(self, a: int, b: int) -> int:
        return a if self._less(self._vals[a], self._vals[b]) else b

    def index(self, a: int, b: int) -> int:
        """Index of the extreme value in [a, b)."""
        if not 0 <= a < b <= len(self._vals):
            raise IndexError("invalid range")
        dep = (b - a).bit_length() - 1
        row = self._table[dep]
        return self._select(row[a], row[b - (1 << dep)])

    def value(self, a: int, b: int) -> Any:
        """Extreme value in [a, b)."""
        return self._vals[self.index(a, b)]


class SparseTable2D:
    """2D sparse table answering rectangle maximum queries."""

    def __init__(self, grid: Sequence[Sequence[Any]]) -> None:
        self._n = len(grid)
        self._m = len(grid[0]) if self._n else 0
        by_col = [[list(row) for row in grid]]
        jk = 1
        while (1 << jk) <= self._m:
            half = 1 << (jk - 1)
            by_col.append([[max(x, y) for x, y in zip(r, r[half:])]
                           for r in by_col[-1]])
            jk += 1
        table = [by_col]
        ik = 1
        while (1 << ik) <= self._n:
            half = 1 << (ik - 1)
            table.append([
                [[max(x, y) for x, y in zip(ra, rb)] for ra, rb in zip(g, g[half:])]
                for g in table[-1]
            ])
            ik += 1
        self._table = table

    def query(self, a: int, b: int, c: int, d: int) -> Any:
        """Maximum over rows a..c and columns b..d, inclusive."""
        if not (0 <= a <= c < self._n and 0 <= b <= d < self._m):
            raise IndexError("invalid rectangle")
        lr = (c - a + 1).bit_length() - 1
        lc = (d - b + 1).bit_length() - 1
        g = self._table[lr][lc]
        r2 = c - (1 << lr) + 1
        c2 = d - (1 << lc) + 1
        return max(g[a][b], g[a][c2], g[r2][b], g[r2][c2])