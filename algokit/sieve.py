"""Prime sieves: smallest prime factors, primes up to n and in a range."""

from __future__ import annotations

from math import isqrt


class Sieve:
    """Smallest-prime-factor table for 0..limit, with factorisation."""

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        spf = [0] * (limit + 1)
        primes: list[int] = []
        for i in range(2, limit + 1):
            if spf[i] == 0:
                spf[i] = i
                primes.append(i)
                for j in range(i * i, limit + 1, i):
                    if spf[j] == 0:
                        spf[j] = i
        self.limit = limit
        self.primes = primes
        self.spf = spf

    def factorize(self, x: int) -> list[tuple[int, int]]:
        """Prime factors of ``x`` as ``(prime, exponent)``, smallest first."""
        if not 1 <= x <= self.limit:
            raise ValueError(f"{x} is outside 1..{self.limit}")
        factors = []
        while x > 1:
            p = self.spf[x]
            count = 0
            while x % p == 0:
                x //= p
                count += 1
            factors.append((p, count))
        return factors


def primes_up_to(n: int) -> list[int]:
    """Every prime less than or equal to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    flags = bytearray([1]) * (n + 1)
    flags[:2] = bytes(len(flags[:2]))
    for i in range(2, isqrt(n) + 1):
        if flags[i]:
            flags[i * i::i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, f in enumerate(flags) if f]


def primes_in_range(low: int, high: int) -> list[int]:
    """Every prime in [low, high], by a segmented sieve."""
    low = max(low, 2)
    if high < low:
        return []
    flags = bytearray([1]) * (high - low + 1)
    for p in primes_up_to(isqrt(high)):
        start = max(p * p, -(-low // p) * p)
        flags[start - low::p] = bytes(len(range(start, high + 1, p)))
    return [low + i for i, f in enumerate(flags) if f]