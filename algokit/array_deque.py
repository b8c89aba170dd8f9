"""Fixed-capacity double-ended queue over a ring buffer."""

from __future__ import annotations

from typing import Any, Iterator


class ArrayDeque:
    """Deque backed by a circular array of fixed capacity (at least 10)."""

    def __init__(self, capacity: int = 10) -> None:
        self._cap = max(capacity, 10)
        self._data: list[Any] = [None] * self._cap
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._cap

    def _slot(self, i: int) -> int:
        return (self._head + i) % self._cap

    def push_back(self, x: Any) -> None:
        if self._count >= self._cap:
            raise IndexError("deque is full")
        self._data[self._slot(self._count)] = x
        self._count += 1

    def push_front(self, x: Any) -> None:
        if self._count >= self._cap:
            raise IndexError("deque is full")
        self._head = (self._head - 1) % self._cap
        self._data[self._head] = x
        self._count += 1

    def pop_back(self) -> Any:
        if not self._count:
            raise IndexError("pop from empty deque")
        self._count -= 1
        slot = self._slot(self._count)
        value, self._data[slot] = self._data[slot], None
        return value

    def pop_front(self) -> Any:
        if not self._count:
            raise IndexError("pop from empty deque")
        value, self._data[self._head] = self._data[self._head], None
        self._head = (self._head + 1) % self._cap
        self._count -= 1
        return value

    def back(self) -> Any:
        if not self._count:
            raise IndexError("deque is empty")
        return self._data[self._slot(self._count - 1)]

    def front(self) -> Any:
        if not self._count:
            raise IndexError("deque is empty")
        return self._data[self._head]

    def __getitem__(self, i: int) -> Any:
        if not 0 <= i < self._count:
            raise IndexError("deque index out of range")
        return self._data[self._slot(i)]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        return (self._data[self._slot(i)] for i in range(self._count))