"""Recursive lambdas via a fixed-point combinator."""

from __future__ import annotations

import functools
from typing import Any, Callable


def y_combinator(fun: Callable[..., Any]) -> Callable[..., Any]:
    """Turn ``fun(self, *args)`` into a callable that passes itself as ``self``."""

    @functools.wraps(fun)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return fun(bound, *args, **kwargs)

    return bound