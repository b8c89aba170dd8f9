import math
import random

import pytest

from algokit.centroid import centroid_decomposition


def _random_tree(seed, n):
    rng = random.Random(seed)
    tree = [[] for _ in range(n)]
    for v in range(1, n):
        p = rng.randrange(v)
        tree[p].append(v)
        tree[v].append(p)
    return tree


def _subtrees(parent):
    members = [set() for _ in parent]
    for v in range(len(parent)):
        u = v
        while u != -1:
            members[u].add(v)
            u = parent[u]
    return members


def _depths(parent):
    depths = []
    for v in range(len(parent)):
        depth = 0
        u = v
        while parent[u] != -1:
            u = parent[u]
            depth += 1
        depths.append(depth)
    return depths


def _connected(tree, vertices):
    start = next(iter(vertices))
    seen = {start}
    stack = [start]
    while stack:
        u = stack.pop()
        for x in tree[u]:
            if x in vertices and x not in seen:
                seen.add(x)
                stack.append(x)
    return seen == vertices


@pytest.mark.parametrize("seed", range(8))
def test_centroid_tree_properties(seed):
    n = 20
    tree = _random_tree(seed, n)
    parent = centroid_decomposition(tree)
    assert parent.count(-1) == 1
    members = _subtrees(parent)
    for c in range(n):
        assert _connected(tree, members[c])
        for child in (v for v in range(n) if parent[v] == c):
            assert len(members[child]) <= len(members[c]) // 2


@pytest.mark.parametrize("seed", range(4))
def test_depth_is_logarithmic(seed):
    n = 64
    parent = centroid_decomposition(_random_tree(seed, n))
    assert len(parent) == n
    assert parent.count(-1) == 1
    assert max(_depths(parent)) <= math.log2(n)


def test_path_root_is_middle():
    n = 7
    tree = [[x for x in (v - 1, v + 1) if 0 <= x < n] for v in range(n)]
    parent = centroid_decomposition(tree)
    assert parent[3] == -1


def test_star_root_is_center():
    tree = [[1], [0, 2, 3, 4], [1], [1], [1]]
    parent = centroid_decomposition(tree)
    assert parent == [1, -1, 1, 1, 1]


def test_single_and_empty():
    assert centroid_decomposition([[]]) == [-1]
    assert centroid_decomposition([]) == []