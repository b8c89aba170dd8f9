# algokit

Algorithms and data structures for competitive programming and algorithmic
work, in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Contents

**Containers**
- `algokit.linked_list`: `DoublyLinkedList` with a sentinel node and `Node`
  handles. `insert_before` and `insert_after` return the new node. `erase`
  unlinks a node. `find` returns the first matching node or `None`.
- `algokit.array_deque`: `ArrayDeque`, a ring buffer with a fixed capacity of
  at least 10. Pushing onto a full deque raises `IndexError`.
- `algokit.min_queue`: `MonotoneStack` and `MonotoneQueue`. `extreme()` returns
  the minimum, or the extreme under any `less` ordering you pass in.
- `algokit.xor_trie`: `XorTrie`, a multiset of integers below `2**bits`. It
  offers `max_xor`, `min_xor`, `count_less` and `count_greater`.

**Ranges**
- `algokit.fenwick`:
  - `Fenwick` and `Fenwick2D`, one-based binary indexed trees.
  - `range_sum` over an inclusive prefix-sum list.
- `algokit.sparse_table`:
  - `SparseTable`, with O(1) `index` and `value` queries over `[a, b)`.
  - `SparseTable2D`, answering rectangle maximum queries.
- `algokit.lazy_segtree`: `LazySegTree`, a segment tree over any monoid with
  lazily applied updates. It has `prod`, `apply`, `apply_range`, `max_right`
  and `min_left`.
- `algokit.mo`: `mo_algorithm` with `Query`, for offline range queries. The
  results come back in the order the queries were given.

**Graphs**
- `algokit.union_find`:
  - `UnionFind`, using union by size and path compression.
  - `RollbackUnionFind`, which can undo individual unions. It takes optional
    `on_add` and `on_sub` hooks.
- `algokit.dinic`: `Dinic`, for maximum flow. `min_cut` must come after
  `max_flow`.
- `algokit.scc`: `SCC`, strongly connected components in topological order.
  It also builds the component DAG.
- `algokit.lca`: `LCA`, lowest common ancestor by an Euler tour and a sparse
  table.
- `algokit.centroid`: `centroid_decomposition`, which returns the centroid-tree
  parent of each vertex.
- `algokit.eulerian`: `eulerian_path_undirected` and `eulerian_path_directed`.
  Each returns `[]` when no Eulerian path exists.

**Mathematics**
- `algokit.number_theory`:
  - `extended_gcd`, `linear_diophantine` and `count_diophantine_solutions`.
  - `legendre`, `mod_pow`, `phi` and `all_phi`.
- `algokit.sieve`:
  - `Sieve`, a smallest-prime-factor table with `factorize`.
  - `primes_up_to` and `primes_in_range`.
- `algokit.geometry`:
  - `Point`, with distances, dot and cross products, angles, distance to a
    segment and a convex-polygon test.
  - `convex_hull` and `convex_hull_indices`.
- `algokit.optimize`: `maximize_unimodal`, a hill climb with halving steps.

**Strings**
- `algokit.text`:
  - `prefix_function`, the KMP border array.
  - `split`, which drops empty pieces.
- `algokit.aho_corasick`: `AhoCorasick`. `find_all` yields
  `(word id, start index)` pairs.
- `algokit.polyhash`:
  - `PolyHash`, a double polynomial hash modulo a prime and modulo 2**64.
  - `compare_substrings` and `gen_base`.
- `algokit.mutable_hash`: `MutablePolyHash`, which also has `replace` for
  changing one character.
  - `compare_mutable_substrings`.

**Utilities**
- `algokit.generate`: `generate_vectors` and `generate_int_vectors`, for
  brute-force testing.
- `algokit.debugging`: `format_value`, `dbg` and `dba`. They print coloured
  debug output to standard error.
- `algokit.hashing`: `splitmix64`, `hash_combine` and `RandomizedHash`.
- `algokit.recursion`: `y_combinator`, for recursive lambdas.

## Examples

```python
from algokit.union_find import UnionFind
from algokit.dinic import Dinic
from algokit.number_theory import mod_pow
from algokit.sieve import primes_up_to

uf = UnionFind(5)
uf.join(0, 1)
uf.join(1, 2)
assert uf.same_set(0, 2)
assert uf.size(0) == 3

flow = Dinic(4)
flow.add_edge(0, 1, 3)
flow.add_edge(1, 3, 2)
flow.add_edge(0, 2, 2)
flow.add_edge(2, 3, 3)
assert flow.max_flow(0, 3) == 4

assert mod_pow(2, 10, 1000) == 24
assert primes_up_to(20) == [2, 3, 5, 7, 11, 13, 17, 19]
```

The example below uses range add together with range minimum:

```python
from algokit.lazy_segtree import LazySegTree

tree = LazySegTree(
    [5, 3, 8, 1],
    op=min,
    e=lambda: float("inf"),
    mapping=lambda f, x: x + f,
    composition=lambda f, g: f + g,
    id_=lambda: 0,
)
tree.apply_range(0, 2, 10)      # values become [15, 13, 8, 1]
assert tree.prod(0, 3) == 8
```

```python
from algokit.aho_corasick import AhoCorasick

ac = AhoCorasick()
for idx, word in enumerate(["he", "she", "hers"]):
    ac.insert(word, idx)
ac.build()
assert list(ac.find_all("ushers")) == [(1, 1), (0, 2), (2, 2)]
```

## What is not included

The package does not provide:

- a modular-integer number type;
- tables of factorials or binomial coefficients modulo a prime;
- matrix multiplication, matrix exponentiation or row reduction;
- a segment tree without lazy updates (`LazySegTree` covers that use with an
  identity update);
- heavy-light decomposition for path queries on trees.

For modular powers, use `algokit.number_theory.mod_pow` or Python's built-in
three-argument `pow`.