"""A fixed-capacity first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class CircularQueue:
    """A FIFO queue that holds at most ``capacity`` integers."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r}, capacity={self.capacity})"

    def enqueue(self, value: int) -> bool:
        """Append ``value`` at the rear; return False if the queue is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def dequeue(self) -> bool:
        """Drop the front item; return False if the queue is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def front(self) -> int:
        """Return the front item; raise IndexError if the queue is empty."""
        if self.is_empty():
            raise IndexError("front of empty queue")
        return self._items[0]

    def rear(self) -> int:
        """Return the rear item; raise IndexError if the queue is empty."""
        if self.is_empty():
            raise IndexError("rear of empty queue")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the queue has reached its capacity."""
        return len(self._items) >= self.capacity