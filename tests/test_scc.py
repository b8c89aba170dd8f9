import random

import pytest

from algokit.scc import SCC


def _reach(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    result = []
    for s in range(n):
        seen = {s}
        stack = [s]
        while stack:
            u = stack.pop()
            for x in adj[u]:
                if x not in seen:
                    seen.add(x)
                    stack.append(x)
        result.append(seen)
    return result


def _random_graph(seed, n=8, m=12):
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(m)]


def _build(n, edges):
    scc = SCC(n)
    for u, v in edges:
        scc.add_edge(u, v)
    scc.build()
    return scc


def test_cycle_with_tail():
    scc = _build(4, [(0, 1), (1, 2), (2, 0), (2, 3)])
    assert len(scc.components) == 2
    assert sorted(scc.components[0]) == [0, 1, 2]
    assert scc.components[1] == [3]


def test_no_edges_gives_singletons():
    scc = _build(3, [])
    assert sorted(c for comp in scc.components for c in comp) == [0, 1, 2]
    assert all(len(comp) == 1 for comp in scc.components)


@pytest.mark.parametrize("seed", range(10))
def test_components_match_mutual_reachability(seed):
    n = 8
    edges = _random_graph(seed, n)
    scc = _build(n, edges)
    reach = _reach(n, edges)
    for u in range(n):
        for v in range(n):
            same = scc.component_of[u] == scc.component_of[v]
            assert same == (v in reach[u] and u in reach[v])


@pytest.mark.parametrize("seed", range(10))
def test_topological_order(seed):
    n = 8
    edges = _random_graph(seed, n)
    scc = _build(n, edges)
    for u, v in edges:
        assert scc.component_of[u] <= scc.component_of[v]


@pytest.mark.parametrize("seed", range(10))
def test_dag_edges(seed):
    n = 8
    edges = _random_graph(seed, n)
    scc = _build(n, edges)
    comp = scc.component_of
    expected = [set() for _ in scc.components]
    for u, v in edges:
        if comp[u] != comp[v]:
            expected[comp[v]].add(comp[u])
    assert [set(d) for d in scc.dag] == expected


@pytest.mark.parametrize("seed", range(5))
def test_components_partition_vertices(seed):
    n = 8
    scc = _build(n, _random_graph(seed, n))
    flat = sorted(v for comp in scc.components for v in comp)
    assert flat == list(range(n))
    for i, comp in enumerate(scc.components):
        assert all(scc.component_of[v] == i for v in comp)


def test_edge_out_of_range():
    with pytest.raises(IndexError):
        SCC(2).add_edge(0, 5)