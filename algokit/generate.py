"""Exhaustive generation of fixed-length vectors, for stress testing."""

from __future__ import annotations

from itertools import product
from typing import Any, Iterable, Iterator


def generate_vectors(options: Iterable[Any], length: int) -> Iterator[list[Any]]:
    """Yield every list of ``length`` items drawn from ``options``, in order."""
    for combo in product(list(options), repeat=length):
        yield list(combo)


def generate_int_vectors(min_num: int, max_num: int, length: int) -> Iterator[list[int]]:
    """Yield every list of ``length`` integers in [min_num, max_num]."""
    return generate_vectors(range(min_num, max_num + 1), length)