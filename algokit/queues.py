"""Queues: ring buffer, bounded deque, linked FIFO, priority queue and a two-stack queue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "CircularQueue",
    "BoundedDeque",
    "LinkedQueue",
    "PriorityQueue",
    "TwoStackQueue",
]


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class CircularQueue:
    """A first-in first-out ring buffer of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        if self.is_empty():
            raise IndexError("queue is empty")
        return self._slots[(self._head + self._size - 1) % self.capacity]


class BoundedDeque:
    """A double-ended queue of fixed capacity stored in a ring."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def _tail(self) -> int:
        return (self._head + self._size - 1) % self.capacity

    def insert_front(self, value: Any) -> None:
        """Add ``value`` before the first element."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._head = (self._head - 1) % self.capacity
        self._slots[self._head] = value
        self._size += 1

    def insert_rear(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        if self.is_full():
            raise OverflowError("deque is full")
        self._slots[(self._head + self._size) % self.capacity] = value
        self._size += 1

    def delete_front(self) -> Any:
        """Remove and return the first element."""
        if self.is_empty():
            raise IndexError("deque is empty")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return value

    def delete_rear(self) -> Any:
        """Remove and return the last element."""
        if self.is_empty():
            raise IndexError("deque is empty")
        tail = self._tail()
        value = self._slots[tail]
        self._slots[tail] = None
        self._size -= 1
        return value

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        if self.is_empty():
            raise IndexError("deque is empty")
        return self._slots[self._tail()]


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """An unbounded first-in first-out queue of chained nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is not None:
            self._rear.next = node
        self._rear = node
        if self._front is None:
            self._front = node

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        return node.value

    def peek(self) -> Any:
        if self._front is None:
            raise IndexError("peek at an empty queue")
        return self._front.value


class PriorityQueue:
    """A bounded queue kept ordered from highest to lowest priority.

    Elements of equal priority keep their insertion order. ``front`` gives the
    highest-priority element; ``dequeue`` drops the element at the far end,
    the one with the lowest priority.
    """

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._entries: list[tuple[Any, Any]] = []

    def enqueue(self, value: Any, priority: Any) -> None:
        """Insert ``value`` after every element whose priority is at least ``priority``."""
        if len(self._entries) == self.capacity:
            raise OverflowError("queue is full")
        index = next(
            (i for i, (existing, _) in enumerate(self._entries) if existing < priority),
            len(self._entries),
        )
        self._entries.insert(index, (priority, value))

    def dequeue(self) -> Any:
        """Remove and return the lowest-priority element."""
        if not self._entries:
            raise IndexError("dequeue from an empty queue")
        return self._entries.pop()[1]

    def front(self) -> Any:
        """Return the highest-priority element."""
        if not self._entries:
            raise IndexError("queue is empty")
        return self._entries[0][1]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)


class TwoStackQueue:
    """A first-in first-out queue made of an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def _refill(self) -> None:
        if not self._outbox:
            if not self._inbox:
                raise IndexError("queue is empty")
            self._outbox = self._inbox[::-1]
            self._inbox.clear()

    def enqueue(self, value: Any) -> None:
        self._inbox.append(value)

    def dequeue(self) -> Any:
        """Remove and return the element at the front."""
        self._refill()
        return self._outbox.pop()

    def front(self) -> Any:
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox