"""Stack structures and the algorithms that are built on a stack."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100
_OPERATORS = frozenset({"+", "-", "*", "/", "^"})


class BoundedStack(Generic[T]):
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"

    def push(self, item: T) -> None:
        """Put ``item`` on top; raise OverflowError if the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError if the stack is empty."""
        if self.is_empty():
            raise IndexError("stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the stack has reached its capacity."""
        return len(self._items) >= self.capacity


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters on a stack and popping them."""
    stack: BoundedStack[str] = BoundedStack(max(len(text), DEFAULT_CAPACITY))
    for ch in text:
        stack.push(ch)
    reversed_chars = []
    while not stack.is_empty():
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)


class MinStack:
    """A stack that also reports its smallest item in constant time."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MinStack({self._items!r})"

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        self._items.append(val)
        if not self._minimums or self._minimums[-1] >= val:
            self._minimums.append(val)

    def pop(self) -> int:
        """Remove and return the top item; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        value = self._items.pop()
        if self._minimums[-1] == value:
            self._minimums.pop()
        return value

    def top(self) -> int:
        """Return the top item; raise IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest item; raise IndexError if the stack is empty."""
        if not self._minimums:
            raise IndexError("minimum of empty stack")
        return self._minimums[-1]


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value after it in ``nums2``.

    Values with no larger successor, or absent from ``nums2``, map to -1.
    """
    greater: dict[int, int] = {}
    pending: list[int] = []
    for value in nums2:
        while pending and pending[-1] < value:
            greater[pending.pop()] = value
        pending.append(value)
    return [greater.get(value, -1) for value in nums1]


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        # Floor division: -8 / 3 gives -3.
        return left // right
    if right >= 0:
        return left**right
    return int(left**right)


def evaluate_postfix(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens in reverse Polish notation with + - * / ^.

    Division rounds toward negative infinity. Raises ValueError for a
    malformed expression and ZeroDivisionError for division by zero.
    """
    stack: list[int] = []
    for token in tokens:
        if token in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} needs two operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply(token, left, right))
        else:
            try:
                stack.append(int(token))
            except ValueError:
                raise ValueError(f"invalid token {token!r}") from None
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, negative values move left; when two meet the
    smaller one explodes, and both explode when they are the same size.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            stack.append(asteroid)
            continue
        while stack and stack[-1] > 0 and stack[-1] < -asteroid:
            stack.pop()
        if not stack or stack[-1] < 0:
            stack.append(asteroid)
        elif stack[-1] == -asteroid:
            stack.pop()
    return stack