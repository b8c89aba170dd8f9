"""Maximum flow and minimum cut with Dinic's algorithm."""

from __future__ import annotations

from collections import deque
from typing import Optional


class Dinic:
    """Residual network on ``n`` vertices; max flow in O(E * V^2)."""

    def __init__(self, n: int) -> None:
        self._n = n
        self._adj: list[list[int]] = [[] for _ in range(n)]
        self._to: list[int] = []
        self._cap: list[int] = []
        self._level: list[int] = [-1] * n
        self._source: Optional[int] = None
        self._sink: Optional[int] = None
        self.flow = 0

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        """Add an edge ``u -> v`` and its zero-capacity reverse edge."""
        self._check_vertex(u)
        self._check_vertex(v)
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._adj[u].append(len(self._to))
        self._to.append(v)
        self._cap.append(capacity)
        self._adj[v].append(len(self._to))
        self._to.append(u)
        self._cap.append(0)

    def _bfs(self) -> bool:
        """Level every vertex reachable from the source; report if the sink is."""
        level = [-1] * self._n
        level[self._source] = 0
        queue = deque([self._source])
        while queue:
            u = queue.popleft()
            for e in self._adj[u]:
                x = self._to[e]
                if level[x] == -1 and self._cap[e] > 0:
                    level[x] = level[u] + 1
                    queue.append(x)
        self._level = level
        return level[self._sink] != -1

    def _augment(self, ptr: list[int]) -> int:
        """Push flow along one path of the level graph; return the amount."""
        to, cap, level = self._to, self._cap, self._level
        path: list[int] = []
        u = self._source
        while True:
            if u == self._sink:
                pushed = min(cap[e] for e in path)
                for e in path:
                    cap[e] -= pushed
                    cap[e ^ 1] += pushed
                return pushed
            adj = self._adj[u]
            i = ptr[u]
            while i < len(adj):
                e = adj[i]
                if cap[e] > 0 and level[to[e]] == level[u] + 1:
                    break
                i += 1
            ptr[u] = i
            if i == len(adj):
                if not path:
                    return 0
                e = path.pop()
                u = to[e ^ 1]
                ptr[u] += 1
            else:
                path.append(adj[i])
                u = to[adj[i]]

    def max_flow(self, s: int, t: int) -> int:
        """Value of the maximum flow from ``s`` to ``t``."""
        self._check_vertex(s)
        self._check_vertex(t)
        if s == t:
            raise ValueError("source and sink must differ")
        self._source, self._sink = s, t
        total = 0
        while self._bfs():
            ptr = [0] * self._n
            while True:
                pushed = self._augment(ptr)
                if not pushed:
                    break
                total += pushed
        self.flow = total
        return total

    def min_cut(self) -> list[tuple[int, int]]:
        """Edges ``(u, v)`` of a minimum cut; call after ``max_flow``."""
        if self._source is None:
            raise RuntimeError("max_flow must be run before min_cut")
        self._bfs()
        level = self._level
        return [
            (u, self._to[e])
            for u in range(self._n) if level[u] != -1
            for e in self._adj[u]
            if e % 2 == 0 and level[self._to[e]] == -1 and self._cap[e] <= 0
        ]