"""Eulerian paths in undirected and directed graphs (Hierholzer's algorithm)."""

from __future__ import annotations

from typing import Sequence


def eulerian_path_undirected(graph: Sequence[Sequence[int]],
                             edges: Sequence[Sequence[int]]) -> list[int]:
    """Vertices of a path using every edge exactly once, or [] if none exists.

    ``graph[v]`` lists the indices of the edges at ``v``; ``edges[i]`` is
    the pair of endpoints of edge ``i``. The inputs are not modified.
    """
    n, m = len(graph), len(edges)
    if n == 0:
        return []
    odd = [v for v in range(n) if len(graph[v]) % 2]
    if len(odd) == 2:
        start = odd[0]
    elif not odd:
        start = next((v for v in range(n) if graph[v]), 0)
    else:
        return []
    ptr = [0] * n
    used = [False] * m
    stack = [start]
    path: list[int] = []
    while stack:
        cur = stack[-1]
        adj = graph[cur]
        while ptr[cur] < len(adj) and used[adj[ptr[cur]]]:
            ptr[cur] += 1
        if ptr[cur] == len(adj):
            path.append(stack.pop())
        else:
            e = adj[ptr[cur]]
            ptr[cur] += 1
            used[e] = True
            a, b = edges[e]
            stack.append(b if a == cur else a)
    return path if len(path) == m + 1 else []


def eulerian_path_directed(graph: Sequence[Sequence[int]]) -> list[int]:
    """Vertices of a path using every edge exactly once, or [] if none exists.

    ``graph[v]`` lists the heads of the edges leaving ``v``. The input is
    not modified.
    """
    n = len(graph)
    if n == 0:
        return []
    indeg = [0] * n
    for succ in graph:
        for x in succ:
            indeg[x] += 1
    start = end = -1
    m = 0
    for v, succ in enumerate(graph):
        out = len(succ)
        m += out
        if out == indeg[v]:
            continue
        if out == indeg[v] + 1 and start == -1:
            start = v
        elif out == indeg[v] - 1 and end == -1:
            end = v
        else:
            return []
    if (start == -1) != (end == -1):
        return []
    if start == -1:
        start = next((v for v in range(n) if graph[v]), 0)
    ptr = [0] * n
    stack = [start]
    path: list[int] = []
    while stack:
        cur = stack[-1]
        if ptr[cur] == len(graph[cur]):
            path.append(stack.pop())
        else:
            stack.append(graph[cur][ptr[cur]])
            ptr[cur] += 1
    path.reverse()
    return path if len(path) == m + 1 else []