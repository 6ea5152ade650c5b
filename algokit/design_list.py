"""A singly linked list with index-based access and a tail pointer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    val: int = 0
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list supporting insertion and deletion by index.

    Insertions and deletions at an invalid index are ignored.
    """

    def __init__(self) -> None:
        self._sentinel = _Node()
        self._tail = self._sentinel
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._sentinel.next
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _node_before(self, index: int) -> _Node:
        node = self._sentinel
        for _ in range(index):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``; raise IndexError if out of range."""
        if not 0 <= index < self._size:
            raise IndexError("linked list index out of range")
        return self._node_before(index).next.val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self.add_at_index(0, val)

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        node = _Node(val)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` so it lands at ``index``; index may equal the length."""
        if not 0 <= index <= self._size:
            return
        previous = self._node_before(index)
        node = _Node(val, previous.next)
        previous.next = node
        if node.next is None:
            self._tail = node
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index`` if it exists."""
        if not 0 <= index < self._size:
            return
        previous = self._node_before(index)
        removed = previous.next
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1