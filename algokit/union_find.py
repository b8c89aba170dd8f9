"""Disjoint-set structures: path-compressed and rollback-capable."""

from __future__ import annotations

from typing import Callable, Optional


class UnionFind:
    """Disjoint sets with union by size and path compression."""

    def __init__(self, n: int) -> None:
        self._e = [-1] * n

    def find(self, x: int) -> int:
        root = x
        while self._e[root] >= 0:
            root = self._e[root]
        while self._e[x] >= 0:
            self._e[x], x = root, self._e[x]
        return root

    def same_set(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def size(self, x: int) -> int:
        return -self._e[self.find(x)]

    def join(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were separate."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if self._e[a] > self._e[b]:
            a, b = b, a
        self._e[a] += self._e[b]
        self._e[b] = a
        return True


Hook = Callable[[int, int], None]


class RollbackUnionFind:
    """Disjoint sets that can undo individual unions.

    ``on_add(a, b)`` runs when root ``a`` is attached under root ``b``;
    ``on_sub(a, b)`` runs when that attachment is undone.
    """

    def __init__(self, n: int, on_add: Optional[Hook] = None,
                 on_sub: Optional[Hook] = None) -> None:
        self.parent = list(range(n))
        self.count = [1] * n
        self.ops: list[Optional[tuple[int, int]]] = []
        self._on_add = on_add
        self._on_sub = on_sub

    def find(self, i: int) -> int:
        while self.parent[i] != i:
            i = self.parent[i]
        return i

    def unite(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; the operation is always recorded."""
        a, b = self.find(i), self.find(j)
        if a == b:
            self.ops.append(None)
            return False
        if self.count[a] > self.count[b]:
            a, b = b, a
        self.ops.append((a, b))
        if self._on_add is not None:
            self._on_add(a, b)
        self.count[b] += self.count[a]
        self.parent[a] = b
        return True

    def rollback(self, k: int) -> None:
        """Undo the ``k``-th recorded operation without removing its record."""
        if not 0 <= k < len(self.ops):
            raise IndexError("no such operation")
        op = self.ops[k]
        if op is None:
            return
        a, b = op
        if self._on_sub is not None:
            self._on_sub(a, b)
        self.count[b] -= self.count[a]
        self.parent[a] = a

    def pop(self) -> None:
        """Undo the last operation and drop it from the record."""
        if not self.ops:
            raise IndexError("no operation to undo")
        self.rollback(len(self.ops) - 1)
        self.ops.pop()