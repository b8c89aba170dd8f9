"""Polynomial string hash that supports changing single characters."""

from __future__ import annotations

from .fenwick import Fenwick
from .polyhash import (DEFAULT_BASE, MOD, _MASK, _codes, _normalize, _power_table,
                       compare_substrings)


class MutablePolyHash:
    """Substring hashes in O(log n), with O(log n) character replacement."""

    def __init__(self, s: str, base: int = DEFAULT_BASE) -> None:
        self._codes = _codes(s, base)
        self.base = base
        self._table = _power_table(base)
        self._table.power(len(self._codes))
        n = len(self._codes)
        self._f1 = Fenwick(n)
        self._f2 = Fenwick(n)
        for i, (code, p1, p2) in enumerate(
                zip(self._codes, self._table.pow1, self._table.pow2), start=1):
            self._f1.add(i, code * p1 % MOD)
            self._f2.add(i, code * p2 & _MASK)

    def __len__(self) -> int:
        return len(self._codes)

    @property
    def text(self) -> str:
        """The string as it currently stands."""
        return "".join(map(chr, self._codes))

    def replace(self, i: int, old_char: str, new_char: str) -> None:
        """Change the character at ``i`` from ``old_char`` to ``new_char``."""
        if not 0 <= i < len(self._codes):
            raise IndexError("position out of range")
        old, new = ord(old_char), ord(new_char)
        if old != self._codes[i]:
            raise ValueError(f"position {i} does not hold {old_char!r}")
        if new >= self.base:
            raise ValueError("character code not below the base")
        p1, p2 = self._table.power(i)
        self._f1.add(i + 1, (new - old) * p1 % MOD)
        self._f2.add(i + 1, (new - old) * p2 & _MASK)
        self._codes[i] = new

    def get(self, pos: int, length: int, mx_pow: int = 0) -> tuple[int, int]:
        """Hash of the substring at ``pos`` of ``length``; see ``PolyHash.get``."""
        end = pos + length
        if pos < 0 or length < 0 or end > len(self._codes):
            raise IndexError("substring out of range")
        h1 = (self._f1.prefix_sum(end) - self._f1.prefix_sum(pos)) % MOD
        h2 = (self._f2.prefix_sum(end) - self._f2.prefix_sum(pos)) & _MASK
        return _normalize(h1, h2, self._table, end, mx_pow)


def compare_mutable_substrings(one: str, one_hash: MutablePolyHash, one_start: int,
                               one_len: int, two: str, two_hash: MutablePolyHash,
                               two_start: int, two_len: int, mx_pow: int) -> bool:
    """Whether ``one``'s substring sorts before ``two``'s."""
    return compare_substrings(one, one_hash, one_start, one_len,
                              two, two_hash, two_start, two_len, mx_pow)