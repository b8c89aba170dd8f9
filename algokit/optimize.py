"""Maximisation of single-variable unimodal functions."""

from __future__ import annotations

from typing import Callable

_TOLERANCE = 1e-18


def maximize_unimodal(start: float, f: Callable[[float], float],
                      span: float) -> tuple[float, float]:
    """Hill-climb from ``start`` with halving steps beginning at ``2 * span``.

    Returns ``(best value, argument)``.
    """
    best = (f(start), start)
    jmp = span * 2
    while jmp >= _TOLERANCE:
        for d in (best[1] + jmp, best[1] - jmp):
            best = max(best, (f(d), d))
        jmp /= 2
    return best