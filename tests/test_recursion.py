import math

import pytest

from algokit.recursion import y_combinator


def test_factorial():
    fact = y_combinator(lambda self, n: 1 if n <= 1 else n * self(n - 1))
    assert fact(5) == 120
    for n in range(10):
        assert fact(n) == math.factorial(n)


def test_gcd_matches_math():
    gcd = y_combinator(lambda self, a, b: a if b == 0 else self(b, a % b))
    for a, b in [(12, 18), (17, 5), (0, 9), (100, 75)]:
        assert gcd(a, b) == math.gcd(a, b)


def test_keyword_arguments_are_passed():
    count = y_combinator(lambda self, n, acc=0: acc if n == 0 else self(n - 1, acc=acc + 2))
    assert count(4) == 8


def test_tree_walk_collects_nodes():
    tree = {0: [1, 2], 1: [3], 2: [], 3: []}

    def walk(self, u):
        order = [u]
        for v in tree[u]:
            order.extend(self(v))
        return order

    assert y_combinator(walk)(0) == [0, 1, 3, 2]


def test_exception_propagates():
    def boom(self, n):
        if n == 0:
            raise KeyError("bottom")
        return self(n - 1)

    with pytest.raises(KeyError):
        y_combinator(boom)(3)


def test_wraps_preserves_name():
    def fib(self, n):
        return n if n < 2 else self(n - 1) + self(n - 2)

    f = y_combinator(fib)
    assert f.__name__ == "fib"
    assert f(10) == f(9) + f(8)