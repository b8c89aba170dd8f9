"""Lowest common ancestor via an Euler tour and a sparse table."""

from __future__ import annotations

from typing import Sequence

from .sparse_table import SparseTable


class LCA:
    """Lowest common ancestors in a rooted tree: O(n log n) build, O(1) query."""

    def __init__(self, root: int, tree: Sequence[Sequence[int]]) -> None:
        n = len(tree)
        first = [-1] * n
        euler: list[int] = []
        depth: list[int] = []

        def visit(u: int, d: int) -> None:
            euler.append(u)
            depth.append(d)

        first[root] = 0
        visit(root, 0)
        stack = [(root, -1, 0, iter(tree[root]))]
        while stack:
            u, parent, d, it = stack[-1]
            for x in it:
                if x != parent:
                    first[x] = len(euler)
                    visit(x, d + 1)
                    stack.append((x, u, d + 1, iter(tree[x])))
                    break
            else:
                stack.pop()
                if stack:
                    visit(stack[-1][0], stack[-1][2])
        self._first = first
        self._euler = euler
        self._rmq = SparseTable(depth)

    def query(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        a, b = self._first[u], self._first[v]
        if a < 0 or b < 0:
            raise ValueError("vertex not reachable from the root")
        if a > b:
            a, b = b, a
        return self._euler[self._rmq.index(a, b + 1)]