"""Euclid's algorithm, linear Diophantine equations and arithmetic functions."""

from __future__ import annotations

from typing import Optional


def _tdiv(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``abs(g) == gcd(a, b)``."""
    x, x1, y, y1 = 1, 0, 0, 1
    while b:
        q = _tdiv(a, b)
        x, x1 = x1, x - q * x1
        y, y1 = y1, y - q * y1
        a, b = b, a - q * b
    return a, x, y


def linear_diophantine(a: int, b: int, c: int) -> Optional[tuple[int, int, int]]:
    """Solve ``a*x + b*y == c``.

    Returns ``(x, y, g)`` with ``g = gcd(|a|, |b|)``, or None if there is no
    integer solution.
    """
    if a == 0 and b == 0:
        return (0, 0, 0) if c == 0 else None
    g, x, y = extended_gcd(abs(a), abs(b))
    if c % g:
        return None
    x *= c // g
    y *= c // g
    if a < 0:
        x = -x
    if b < 0:
        y = -y
    return x, y, g


def count_diophantine_solutions(a: int, b: int, c: int, minx: int, maxx: int,
                                miny: int, maxy: int) -> int:
    """Count solutions of ``a*x + b*y == c`` with x and y in the given ranges."""
    if a == 0 and b == 0:
        return (maxx - minx + 1) * (maxy - miny + 1) if c == 0 else 0
    if b == 0:
        if c % a:
            return 0
        return max(0, maxy - miny + 1) if minx <= c // a <= maxx else 0
    if a == 0:
        if c % b:
            return 0
        return max(0, maxx - minx + 1) if miny <= c // b <= maxy else 0
    sol = linear_diophantine(a, b, c)
    if sol is None:
        return 0
    x, y, g = sol
    a //= g
    b //= g
    sign_a = 1 if a > 0 else -1
    sign_b = 1 if b > 0 else -1

    def shift(x: int, y: int, cnt: int) -> tuple[int, int]:
        return x + cnt * b, y - cnt * a

    x, y = shift(x, y, _tdiv(minx - x, b))
    if x < minx:
        x, y = shift(x, y, sign_b)
    if x > maxx:
        return 0
    lx1 = x
    x, y = shift(x, y, _tdiv(maxx - x, b))
    if x > maxx:
        x, y = shift(x, y, -sign_b)
    rx1 = x
    x, y = shift(x, y, -_tdiv(miny - y, a))
    if y < miny:
        x, y = shift(x, y, -sign_a)
    if y > maxy:
        return 0
    lx2 = x
    x, y = shift(x, y, -_tdiv(maxy - y, a))
    if y > maxy:
        x, y = shift(x, y, sign_a)
    rx2 = x
    if lx2 > rx2:
        lx2, rx2 = rx2, lx2
    lx, rx = max(lx1, lx2), min(rx1, rx2)
    if lx > rx:
        return 0
    return (rx - lx) // abs(b) + 1


def legendre(n: int, p: int) -> int:
    """Largest ``i`` such that ``p**i`` divides ``n!``, for prime ``p``."""
    if p < 2:
        raise ValueError("p must be a prime")
    digit_sum = 0
    m = n
    while m > 0:
        digit_sum += m % p
        m //= p
    return (n - digit_sum) // (p - 1)


def mod_pow(a: int, b: int, m: int) -> int:
    """``a**b`` modulo ``m`` for non-negative ``b``."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    return pow(a, b, m)


def phi(n: int) -> int:
    """Euler's totient: how many of 1..n are coprime to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            while n % i == 0:
                n //= i
            result -= result // i
        i += 1
    if n > 1:
        result -= result // n
    return result


def all_phi(n: int) -> list[int]:
    """Totients of 0..n, by sieving."""
    if n < 0:
        raise ValueError("n must be non-negative")
    ph = list(range(n + 1))
    for i in range(2, n + 1):
        if ph[i] == i:
            for j in range(i, n + 1, i):
                ph[j] -= ph[j] // i
    return ph