"""Circular doubly linked list with a sentinel node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A list node holding one value."""

    data: Optional[T] = None
    prev: Optional["Node[T]"] = field(default=None, repr=False)
    next: Optional["Node[T]"] = field(default=None, repr=False)


class DoublyLinkedList(Generic[T]):
    """Doubly linked list with O(1) insertion and removal around a known node.

    The sentinel node marks both ends: inserting before it appends,
    inserting after it prepends.
    """

    def __init__(self) -> None:
        self._sentinel: Node[T] = Node()
        self._sentinel.prev = self._sentinel
        self._sentinel.next = self._sentinel
        self._len = 0

    @property
    def sentinel(self) -> Node[T]:
        """The node that marks both ends of the list."""
        return self._sentinel

    def insert_before(self, before: Node[T], data: Any) -> Node[T]:
        """Insert a new node holding ``data`` before ``before`` and return it."""
        node = Node(data)
        node.prev = before.prev
        before.prev.next = node
        node.next = before
        before.prev = node
        self._len += 1
        return node

    def insert_after(self, after: Node[T], data: Any) -> Node[T]:
        """Insert a new node holding ``data`` after ``after`` and return it."""
        node = Node(data)
        node.next = after.next
        after.next.prev = node
        node.prev = after
        after.next = node
        self._len += 1
        return node

    def erase(self, node: Node[T]) -> None:
        """Unlink ``node`` from the list."""
        if node is self._sentinel:
            raise ValueError("cannot erase the sentinel node")
        node.next.prev = node.prev
        node.prev.next = node.next
        node.prev = node.next = None
        self._len -= 1

    def find(self, value: Any) -> Optional[Node[T]]:
        """Return the first node whose data equals ``value``, or None."""
        cur = self._sentinel.next
        while cur is not self._sentinel:
            if cur.data == value:
                return cur
            cur = cur.next
        return None

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        cur = self._sentinel.next
        while cur is not self._sentinel:
            yield cur.data
            cur = cur.next