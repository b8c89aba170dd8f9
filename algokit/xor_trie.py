"""Binary trie answering xor queries over a multiset of integers."""

from __future__ import annotations


class XorTrie:
    """Multiset of non-negative integers below ``2**bits`` with xor queries."""

    def __init__(self, bits: int = 30) -> None:
        self._top = bits - 1
        self._child: list[list[int]] = [[0, 0]]
        self._count: list[list[int]] = [[0, 0]]

    def __len__(self) -> int:
        return sum(self._count[0])

    def _bits(self, x: int):
        return ((i, x >> i & 1) for i in range(self._top, -1, -1))

    def insert(self, x: int) -> None:
        j = 0
        for _, b in self._bits(x):
            if self._child[j][b] == 0:
                self._child[j][b] = len(self._child)
                self._child.append([0, 0])
                self._count.append([0, 0])
            self._count[j][b] += 1
            j = self._child[j][b]

    def erase(self, x: int) -> None:
        """Remove one copy of ``x``."""
        j = 0
        for _, b in self._bits(x):
            j = self._child[j][b]
            if j == 0:
                raise KeyError(x)
        j = 0
        for _, b in self._bits(x):
            nxt = self._child[j][b]
            self._count[j][b] -= 1
            if self._count[j][b] == 0:
                self._child[j][b] = 0
            j = nxt

    def _require_items(self) -> None:
        if not len(self):
            raise ValueError("trie is empty")

    def max_xor(self, x: int) -> int:
        """Largest ``x ^ y`` over stored ``y``."""
        self._require_items()
        j = best = 0
        for i, b in self._bits(x):
            if self._child[j][b ^ 1]:
                best |= 1 << i
                j = self._child[j][b ^ 1]
            else:
                j = self._child[j][b]
        return best

    def min_xor(self, x: int) -> int:
        """Smallest ``x ^ y`` over stored ``y``."""
        self._require_items()
        j = best = 0
        for i, b in self._bits(x):
            if self._child[j][b]:
                j = self._child[j][b]
            else:
                best |= 1 << i
                j = self._child[j][b ^ 1]
        return best

    def count_less(self, x: int, low: int) -> int:
        """Number of stored ``y`` with ``x ^ y < low``."""
        j = c = 0
        for i, xb in self._bits(x):
            if i != self._top and j == 0:
                break
            lb = low >> i & 1
            b = lb ^ xb
            if lb:
                c += self._count[j][b ^ 1]
            j = self._child[j][b]
        return c

    def count_greater(self, x: int, high: int) -> int:
        """Number of stored ``y`` with ``x ^ y > high``."""
        j = c = 0
        for i, xb in self._bits(x):
            if i != self._top and j == 0:
                break
            hb = high >> i & 1
            b = hb ^ xb
            if not hb:
                c += self._count[j][b ^ 1]
            j = self._child[j][b]
        return c