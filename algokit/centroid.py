"""Centroid decomposition of a tree."""

from __future__ import annotations

from typing import Sequence


def centroid_decomposition(tree: Sequence[Sequence[int]]) -> list[int]:
    """Parent of each vertex in the centroid tree; the root's parent is -1.

    The decomposition starts from vertex 0 and has depth O(log n). Vertices
    not connected to vertex 0 also get -1.
    """
    n = len(tree)
    parent = [-1] * n
    if n == 0:
        return parent
    removed = [False] * n
    sizes = [0] * n
    walk_parent = [-1] * n
    work = [(0, -1)]
    while work:
        start, up = work.pop()
        walk_parent[start] = -1
        order = [start]
        for u in order:
            sizes[u] = 1
            for x in tree[u]:
                if x != walk_parent[u] and not removed[x]:
                    walk_parent[x] = u
                    order.append(x)
        for u in reversed(order):
            if walk_parent[u] != -1:
                sizes[walk_parent[u]] += sizes[u]
        half = len(order) // 2
        c = start
        while True:
            heavy = next((x for x in tree[c]
                          if x != walk_parent[c] and not removed[x] and sizes[x] > half),
                         None)
            if heavy is None:
                break
            c = heavy
        parent[c] = up
        removed[c] = True
        work.extend((x, c) for x in tree[c] if not removed[x])
    return parent