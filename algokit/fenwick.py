"""Binary indexed trees and prefix-sum range queries."""

from __future__ import annotations

from typing import Any, Sequence


class Fenwick:
    """One-based Fenwick tree for point updates and prefix sums."""

    def __init__(self, n: int, zero: Any = 0) -> None:
        self._n = n
        self._zero = zero
        self._data = [zero] * (n + 1)

    def add(self, idx: int, val: Any) -> None:
        if not 1 <= idx <= self._n:
            raise IndexError("index out of range")
        while idx <= self._n:
            self._data[idx] += val
            idx += idx & -idx

    def prefix_sum(self, idx: int) -> Any:
        """Sum over positions [1, idx]."""
        res = self._zero
        idx = min(idx, self._n)
        while idx > 0:
            res += self._data[idx]
            idx -= idx & -idx
        return res

    def range_sum(self, left: int, right: int) -> Any:
        """Sum over positions [left, right]."""
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class Fenwick2D:
    """One-based 2D Fenwick tree for point updates and rectangle sums."""

    def __init__(self, n: int, m: int, zero: Any = 0) -> None:
        self._n = n
        self._m = m
        self._zero = zero
        self._data = [[zero] * (m + 1) for _ in range(n + 1)]

    def add(self, a: int, b: int, value: Any) -> None:
        if not (1 <= a <= self._n and 1 <= b <= self._m):
            raise IndexError("index out of range")
        i = a
        while i <= self._n:
            row = self._data[i]
            j = b
            while j <= self._m:
                row[j] += value
                j += j & -j
            i += i & -i

    def prefix_sum(self, a: int, b: int) -> Any:
        """Sum of the rectangle from (1, 1) to (a, b)."""
        total = self._zero
        i = min(a, self._n)
        while i > 0:
            row = self._data[i]
            j = min(b, self._m)
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def rect_sum(self, a: int, b: int, c: int, d: int) -> Any:
        """Sum of the rectangle from (a, b) to (c, d), inclusive."""
        return (self.prefix_sum(c, d) - self.prefix_sum(c, b - 1)
                - self.prefix_sum(a - 1, d) + self.prefix_sum(a - 1, b - 1))


def range_sum(prefix: Sequence[Any], l: int, r: int) -> Any:
    """Sum over [l, r] given inclusive prefix sums, clamping to the bounds."""
    r = min(r, len(prefix) - 1)
    l = max(l, 0)
    if r < l:
        return 0
    ans = prefix[r]
    if l:
        ans -= prefix[l - 1]
    return ans