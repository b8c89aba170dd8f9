"""Hash mixing with splitmix64 and a per-instance random key."""

from __future__ import annotations

import os
import time
from typing import Optional

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1


def splitmix64(x: int) -> int:
    """The splitmix64 finaliser of ``x`` taken modulo 2**64."""
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    x = ((x ^ (x >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    x = ((x ^ (x >> 27)) * 0x94D049BB133111EB) & _MASK64
    return x ^ (x >> 31)


def hash_combine(a: int, b: int) -> int:
    """Combine two 32-bit hashes as ``a * 31 + b`` modulo 2**32."""
    return ((a & _MASK32) * 31 + (b & _MASK32)) & _MASK32


class RandomizedHash:
    """Hash function keyed with a random value, resistant to crafted inputs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = int.from_bytes(os.urandom(8), "little") ^ time.perf_counter_ns()
        self.seed = seed & _MASK64

    def __call__(self, x: int) -> int:
        return splitmix64(x) ^ self.seed