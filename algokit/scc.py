"""Strongly connected components with Kosaraju's algorithm."""

from __future__ import annotations


class SCC:
    """Directed graph on ``n`` vertices split into strongly connected components.

    After ``build``, ``components`` lists the components in topological
    order, ``component_of[v]`` is the index of ``v``'s component, and
    ``dag[i]`` lists the components that have an edge into component ``i``
    (once per such edge).
    """

    def __init__(self, n: int) -> None:
        self._n = n
        self._graph: list[list[int]] = [[] for _ in range(n)]
        self._rev: list[list[int]] = [[] for _ in range(n)]
        self.components: list[list[int]] = []
        self.component_of: list[int] = [-1] * n
        self.dag: list[list[int]] = []

    def add_edge(self, u: int, v: int) -> None:
        if not (0 <= u < self._n and 0 <= v < self._n):
            raise IndexError("vertex out of range")
        self._graph[u].append(v)
        self._rev[v].append(u)

    def _finish_order(self) -> list[int]:
        visited = [False] * self._n
        order: list[int] = []
        for start in range(self._n):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._graph[start]))]
            while stack:
                u, it = stack[-1]
                for x in it:
                    if not visited[x]:
                        visited[x] = True
                        stack.append((x, iter(self._graph[x])))
                        break
                else:
                    order.append(u)
                    stack.pop()
        return order

    def build(self) -> list[list[int]]:
        """Compute the components and their DAG; return the components."""
        comp = [-1] * self._n
        components: list[list[int]] = []
        dag: list[list[int]] = []
        for root in reversed(self._finish_order()):
            if comp[root] != -1:
                continue
            idx = len(components)
            comp[root] = idx
            members: list[int] = []
            into: list[int] = []
            stack = [root]
            while stack:
                u = stack.pop()
                members.append(u)
                for w in self._rev[u]:
                    if comp[w] == -1:
                        comp[w] = idx
                        stack.append(w)
                    elif comp[w] != idx:
                        into.append(comp[w])
            components.append(members)
            dag.append(into)
        self.components = components
        self.component_of = comp
        self.dag = dag
        return components