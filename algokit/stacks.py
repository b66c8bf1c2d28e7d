"""Last-in first-out stacks: one with a fixed capacity, one built from linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["ArrayStack", "LinkedStack"]


class ArrayStack:
    """A stack that holds at most ``capacity`` elements."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __repr__(self) -> str:
        return f"ArrayStack({self.capacity}, {self._items!r})"

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack whose elements are chained nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        return node.value

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self._top is None:
            raise IndexError("peek at an empty stack")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None