"""Coloured debug printing of variables and nested arrays to standard error."""

from __future__ import annotations

import inspect
import sys
from collections.abc import Iterable, Mapping
from types import FrameType
from typing import Any, Optional

GREEN = "\033[32m"
MAGENTA = "\033[35m"
RESET = "\033[0m"


def format_value(value: Any) -> str:
    """Render a value the way the debug printers show it.

    Pairs (two-element tuples) appear as ``(a, b)``; other containers as
    ``{a, b, ...}`` on a new line; mappings show their items as pairs.
    """
    if isinstance(value, (str, bytes)):
        return str(value)
    if isinstance(value, tuple) and len(value) == 2:
        first, second = value
        return f"({format_value(first)}, {format_value(second)})"
    if isinstance(value, Mapping):
        items: Iterable[Any] = value.items()
    elif isinstance(value, Iterable):
        items = value
    else:
        return str(value)
    return "\n{" + ", ".join(format_value(x) for x in items) + "}"


def _split_arguments(text: str) -> list[str]:
    """Split argument text at commas that are not nested in brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for j, c in enumerate(text):
        if c in "([{":
            depth += 1
        elif c in ")]}":
            depth -= 1
        elif c == "," and depth == 0:
            parts.append(text[start:j].strip())
            start = j + 1
    tail = text[start:].strip()
    if tail:
        parts.append(tail)
    return parts


def _call_site(frame: Optional[FrameType], name: str) -> tuple[int, str]:
    """Line number of the call and the source text of its arguments."""
    if frame is None:
        return 0, ""
    info = inspect.getframeinfo(frame, context=1)
    lineno = info.lineno
    if not info.code_context:
        return lineno, ""
    line = info.code_context[0]
    start = line.find(name + "(")
    if start < 0:
        return lineno, ""
    begin = start + len(name) + 1
    depth = 0
    for j in range(begin, len(line)):
        c = line[j]
        if c in "([{":
            depth += 1
        elif c in ")]}":
            if depth == 0:
                return lineno, line[begin:j].strip()
            depth -= 1
    return lineno, line[begin:].strip()


def _emit(lineno: int, label: str, body: str) -> None:
    sys.stdout.flush()
    err = sys.stderr
    err.write(f"{MAGENTA}{lineno} [{label}]: {GREEN}{body}{RESET}")
    err.flush()


def dbg(*args: Any) -> None:
    """Print the caller's line, the argument text and the values to stderr."""
    frame = inspect.currentframe()
    try:
        lineno, text = _call_site(frame.f_back if frame else None, "dbg")
    finally:
        del frame
    _emit(lineno, text, ", ".join(format_value(a) for a in args) + "\n")


def _format_array(array: Any, dims: tuple[int, ...], depth: int) -> str:
    if depth == len(dims):
        return format_value(array)
    inner = ", ".join(_format_array(array[i], dims, depth + 1)
                      for i in range(dims[depth]))
    return "\n{" + inner + "}"


def dba(array: Any, *args: int) -> None:
    """Print the leading ``args[0] x args[1] x ...`` block of a nested array."""
    if any(d < 0 for d in args):
        raise ValueError("dimensions must be non-negative")
    frame = inspect.currentframe()
    try:
        lineno, text = _call_site(frame.f_back if frame else None, "dba")
    finally:
        del frame
    parts = _split_arguments(text)
    label = parts[0] if parts else ""
    body = _format_array(array, tuple(args), 0)
    if args:
        body += "\n"
    _emit(lineno, label, body)