"""Stack and queue that report their minimum (or other extreme) in O(1)."""

from __future__ import annotations

import operator
from typing import Any, Callable

Less = Callable[[Any, Any], bool]


class MonotoneStack:
    """Stack that tracks the extreme element under the ordering ``less``."""

    def __init__(self, less: Less = operator.lt) -> None:
        self._less = less
        self._items: list[tuple[Any, Any]] = []

    def push(self, value: Any) -> None:
        if not self._items or self._less(value, self._items[-1][1]):
            best = value
        else:
            best = self._items[-1][1]
        self._items.append((value, best))

    def pop(self) -> Any:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> Any:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1][0]

    def extreme(self) -> Any:
        """The smallest element under ``less``."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class MonotoneQueue:
    """FIFO queue built from two monotone stacks."""

    def __init__(self, less: Less = operator.lt) -> None:
        self._less = less
        self._in = MonotoneStack(less)
        self._out = MonotoneStack(less)

    def _transfer(self) -> None:
        if not len(self._out):
            while len(self._in):
                self._out.push(self._in.pop())

    def push(self, value: Any) -> None:
        self._transfer()
        self._in.push(value)

    def pop(self) -> Any:
        self._transfer()
        if not len(self._out):
            raise IndexError("pop from empty queue")
        return self._out.pop()

    def front(self) -> Any:
        self._transfer()
        if not len(self._out):
            raise IndexError("queue is empty")
        return self._out.top()

    def extreme(self) -> Any:
        """The smallest element under ``less``."""
        self._transfer()
        if not len(self._out):
            raise IndexError("queue is empty")
        if not len(self._in):
            return self._out.extreme()
        a, b = self._in.extreme(), self._out.extreme()
        return a if self._less(a, b) else b

    def __len__(self) -> int:
        return len(self._in) + len(self._out)