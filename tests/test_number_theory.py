import math

import pytest

from algokit.number_theory import (
    all_phi,
    count_diophantine_solutions,
    extended_gcd,
    legendre,
    linear_diophantine,
    mod_pow,
    phi,
)


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (0, 9), (9, 0), (1, 1),
                                 (-30, 12), (30, -12), (123456789, 987654321)])
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert a * x + b * y == g
    assert abs(g) == math.gcd(a, b)


@pytest.mark.parametrize("a,b,c", [(3, 5, 7), (-4, 6, 10), (6, -9, 3),
                                   (-2, -3, 11), (0, 4, 8), (7, 0, -14)])
def test_linear_diophantine_solves(a, b, c):
    x, y, g = linear_diophantine(a, b, c)
    assert a * x + b * y == c
    assert g == math.gcd(a, b)


def test_linear_diophantine_no_solution():
    assert linear_diophantine(4, 6, 7) is None
    assert linear_diophantine(0, 0, 5) is None


def test_linear_diophantine_trivial():
    assert linear_diophantine(0, 0, 0) == (0, 0, 0)


def _brute(a, b, c, minx, maxx, miny, maxy):
    return sum(1 for x in range(minx, maxx + 1)
               for y in range(miny, maxy + 1) if a * x + b * y == c)


@pytest.mark.parametrize("args", [
    (2, 3, 12, 0, 10, 0, 10),
    (3, 5, 7, -10, 10, -10, 10),
    (4, 6, 7, -10, 10, -10, 10),
    (1, 1, 5, 0, 5, 0, 5),
    (6, 4, 20, -20, 20, -5, 5),
    (3, -5, 1, -10, 10, -10, 10),
    (5, 7, 100, 50, 60, 0, 3),
    (2, 0, 4, -3, 3, -2, 2),
    (0, 3, 9, -2, 2, -5, 5),
])
def test_count_matches_brute_force(args):
    assert count_diophantine_solutions(*args) == _brute(*args)


def test_count_all_zero_coefficients():
    assert count_diophantine_solutions(0, 0, 0, 1, 4, 2, 7) == 4 * 6
    assert count_diophantine_solutions(0, 0, 3, 1, 4, 2, 7) == 0


def _factorial_exponent(n, p):
    f = math.factorial(n)
    e = 0
    while f % p == 0:
        f //= p
        e += 1
    return e


@pytest.mark.parametrize("n,p", [(0, 2), (10, 2), (25, 5), (100, 3), (50, 7), (6, 7)])
def test_legendre(n, p):
    assert legendre(n, p) == _factorial_exponent(n, p)


def test_legendre_bad_prime():
    with pytest.raises(ValueError):
        legendre(10, 1)


@pytest.mark.parametrize("a,b,m", [(2, 10, 1000), (3, 200, 1_000_000_007), (7, 0, 13), (10, 5, 7)])
def test_mod_pow(a, b, m):
    assert mod_pow(a, b, m) == pow(a, b, m)


def test_mod_pow_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 5)


def test_phi_counts_coprimes():
    for n in range(1, 80):
        assert phi(n) == sum(1 for k in range(1, n + 1) if math.gcd(k, n) == 1)


def test_phi_of_prime():
    for p in (2, 3, 13, 1_000_000_007):
        assert phi(p) == p - 1


def test_phi_divisor_sum():
    for n in (12, 36, 97, 360):
        assert sum(phi(d) for d in range(1, n + 1) if n % d == 0) == n


def test_all_phi_agrees():
    table = all_phi(200)
    assert len(table) == 201
    assert all(table[i] == phi(i) for i in range(201))


def test_phi_negative_raises():
    with pytest.raises(ValueError):
        phi(-1)
    with pytest.raises(ValueError):
        all_phi(-1)