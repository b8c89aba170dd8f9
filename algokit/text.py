"""String utilities: prefix function and splitting."""

from __future__ import annotations

from typing import Sequence


def prefix_function(s: Sequence) -> list[int]:
    """Length of the longest proper border of each prefix of ``s``."""
    pi = [0] * len(s)
    for i in range(1, len(s)):
        j = pi[i - 1]
        while j > 0 and s[i] != s[j]:
            j = pi[j - 1]
        if s[i] == s[j]:
            j += 1
        pi[i] = j
    return pi


def split(s: str, split_char: str = " ") -> list[str]:
    """Split on ``split_char``, dropping empty pieces."""
    return [part for part in s.split(split_char) if part]