"""Polynomial rolling hashes of strings, modulo a prime and modulo 2**64."""

from __future__ import annotations

import random
from functools import lru_cache
from typing import Protocol

MOD = 1_000_000_123
DEFAULT_BASE = 1_000_000_007
_MASK = (1 << 64) - 1


def gen_base(before: int, after: int) -> int:
    """Random odd base drawn from the interval (before, after]."""
    if after <= before:
        raise ValueError("empty interval")
    base = random.randint(before + 1, after)
    return base - 1 if base % 2 == 0 else base


class _PowerTable:
    """Powers of a base, modulo MOD and modulo 2**64, grown on demand."""

    def __init__(self, base: int) -> None:
        self.base = base
        self.pow1 = [1]
        self.pow2 = [1]

    def power(self, k: int) -> tuple[int, int]:
        while len(self.pow1) <= k:
            self.pow1.append(self.pow1[-1] * self.base % MOD)
            self.pow2.append(self.pow2[-1] * self.base & _MASK)
        return self.pow1[k], self.pow2[k]


@lru_cache(maxsize=None)
def _power_table(base: int) -> _PowerTable:
    return _PowerTable(base)


def _codes(s: str, base: int) -> list[int]:
    if not 0 < base < MOD:
        raise ValueError(f"base must lie in (0, {MOD})")
    codes = [ord(c) for c in s]
    if any(code >= base for code in codes):
        raise ValueError("character code not below the base")
    return codes


def _normalize(h1: int, h2: int, table: _PowerTable, end: int, mx_pow: int) -> tuple[int, int]:
    if mx_pow:
        k = mx_pow - (end - 1)
        if k < 0:
            raise ValueError("mx_pow is smaller than the substring's end")
        p1, p2 = table.power(k)
        h1 = h1 * p1 % MOD
        h2 = h2 * p2 & _MASK
    return h1, h2


class PolyHash:
    """Prefix hashes of a fixed string for O(1) substring hashes."""

    def __init__(self, s: str, base: int = DEFAULT_BASE) -> None:
        codes = _codes(s, base)
        self.base = base
        self._table = _power_table(base)
        self._table.power(len(codes))
        self._pref1 = [0]
        self._pref2 = [0]
        for code, p1, p2 in zip(codes, self._table.pow1, self._table.pow2):
            self._pref1.append((self._pref1[-1] + code * p1) % MOD)
            self._pref2.append((self._pref2[-1] + code * p2) & _MASK)

    def __len__(self) -> int:
        return len(self._pref1) - 1

    def get(self, pos: int, length: int, mx_pow: int = 0) -> tuple[int, int]:
        """Hash of ``s[pos:pos + length]``.

        With a non-zero ``mx_pow`` the hash is shifted so that substrings at
        different positions can be compared; ``mx_pow`` should be at least
        the longest hashed string's length.
        """
        end = pos + length
        if pos < 0 or length < 0 or end > len(self):
            raise IndexError("substring out of range")
        h1 = (self._pref1[end] - self._pref1[pos]) % MOD
        h2 = (self._pref2[end] - self._pref2[pos]) & _MASK
        return _normalize(h1, h2, self._table, end, mx_pow)


class _SubstringHasher(Protocol):
    base: int

    def get(self, pos: int, length: int, mx_pow: int = 0) -> tuple[int, int]: ...


def compare_substrings(one: str, one_hash: _SubstringHasher, one_start: int, one_len: int,
                       two: str, two_hash: _SubstringHasher, two_start: int, two_len: int,
                       mx_pow: int) -> bool:
    """Whether ``one``'s substring sorts before ``two``'s, found by binary search on hashes."""
    if one_hash.base != two_hash.base:
        raise ValueError("hashes use different bases")
    loc = None
    low, high = 1, min(one_len, two_len)
    while low <= high:
        mid = (low + high) // 2
        if one_hash.get(one_start, mid, mx_pow) == two_hash.get(two_start, mid, mx_pow):
            low = mid + 1
        else:
            loc = mid
            high = mid - 1
    if loc is None:
        return one_len < two_len
    return one[one_start + loc - 1] < two[two_start + loc - 1]