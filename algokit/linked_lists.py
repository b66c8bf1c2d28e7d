"""Singly, doubly and circular linked lists, plus cycle detection on node chains."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = [
    "ListNode",
    "SinglyLinkedList",
    "DoublyLinkedList",
    "CircularLinkedList",
    "has_cycle",
]


@dataclass(eq=False)
class ListNode:
    """A node holding a value and a link to the next node."""

    value: Any
    next: ListNode | None = None


class SinglyLinkedList:
    """A list of nodes each linked forward to the next one."""

    def __init__(self) -> None:
        self.head: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def _find(self, value: Any) -> ListNode | None:
        node = self.head
        while node is not None and node.value != value:
            node = node.next
        return node

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        new = ListNode(value)
        if self.head is None:
            self.head = new
            return
        node = self.head
        while node.next is not None:
            node = node.next
        node.next = new

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        self.head = ListNode(value, self.head)

    def insert_after(self, previous: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``previous``; do nothing if absent."""
        node = self._find(previous)
        if node is not None:
            node.next = ListNode(value, node.next)

    def delete_from_end(self) -> None:
        """Remove the last node, if any."""
        if self.head is None:
            return
        if self.head.next is None:
            self.head = None
            return
        node = self.head
        while node.next.next is not None:
            node = node.next
        node.next = None

    def delete_from_beginning(self) -> None:
        """Remove the first node, if any."""
        if self.head is not None:
            self.head = self.head.next

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``; do nothing if absent."""
        if self.head is None:
            return
        if self.head.value == value:
            self.head = self.head.next
            return
        node = self.head
        while node.next is not None and node.next.value != value:
            node = node.next
        if node.next is not None:
            node.next = node.next.next

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: ListNode | None = None
        node = self.head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.head = previous


@dataclass(eq=False)
class _DoublyNode:
    value: Any
    prev: _DoublyNode | None = None
    next: _DoublyNode | None = None


class DoublyLinkedList:
    """A list of nodes linked both forward and backward."""

    def __init__(self) -> None:
        self._head: _DoublyNode | None = None
        self._tail: _DoublyNode | None = None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def insert_at_beginning(self, value: Any) -> None:
        """Put ``value`` in front of the first node."""
        new = _DoublyNode(value)
        if self._head is None:
            self._head = self._tail = new
        else:
            new.next = self._head
            self._head.prev = new
            self._head = new

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        new = _DoublyNode(value)
        if self._tail is None:
            self._head = self._tail = new
        else:
            new.prev = self._tail
            self._tail.next = new
            self._tail = new

    def insert_after(self, previous: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``previous``; do nothing if absent."""
        node = self._head
        while node is not None and node.value != previous:
            node = node.next
        if node is None:
            return
        new = _DoublyNode(value, prev=node, next=node.next)
        if node.next is not None:
            node.next.prev = new
        else:
            self._tail = new
        node.next = new

    def _unlink(self, node: _DoublyNode) -> None:
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev

    def delete_from_beginning(self) -> None:
        """Remove the first node, if any."""
        if self._head is not None:
            self._unlink(self._head)

    def delete_from_end(self) -> None:
        """Remove the last node, if any."""
        if self._tail is not None:
            self._unlink(self._tail)

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``; do nothing if absent."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is not None:
            self._unlink(node)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self) -> None:
        self.head: ListNode | None = None

    def __iter__(self) -> Iterator[Any]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.value
            node = node.next
            if node is self.head:
                return

    def _last(self) -> ListNode:
        node = self.head
        while node.next is not self.head:
            node = node.next
        return node

    def insert_at_end(self, value: Any) -> None:
        """Add ``value`` after the last node, linking it back to the head."""
        new = ListNode(value)
        if self.head is None:
            new.next = new
            self.head = new
            return
        last = self._last()
        last.next = new
        new.next = self.head

    def insert_at_beginning(self, value: Any) -> None:
        """Add ``value`` before the head and make it the new head."""
        self.insert_at_end(value)
        if self.head.next is not self.head:
            self.head = self._last()

    def insert_after(self, previous: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``previous``.

        On an empty list the value becomes the only node. Raises ValueError
        when no node holds ``previous``.
        """
        new = ListNode(value)
        if self.head is None:
            new.next = new
            self.head = new
            return
        node = self.head
        while True:
            if node.value == previous:
                new.next = node.next
                node.next = new
                return
            node = node.next
            if node is self.head:
                raise ValueError(f"node with value {previous!r} not found")

    def delete_from_beginning(self) -> None:
        """Remove the head node, if any."""
        if self.head is None:
            return
        if self.head.next is self.head:
            self.head = None
            return
        last = self._last()
        self.head = self.head.next
        last.next = self.head

    def delete_from_end(self) -> None:
        """Remove the last node, if any."""
        if self.head is None:
            return
        if self.head.next is self.head:
            self.head = None
            return
        node = self.head
        while node.next.next is not self.head:
            node = node.next
        node.next = self.head

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if none does."""
        if self.head is None:
            return
        previous: ListNode | None = None
        node = self.head
        while node.value != value:
            if node.next is self.head:
                raise ValueError(f"node with value {value!r} not found")
            previous, node = node, node.next
        if node is self.head:
            self.delete_from_beginning()
        else:
            previous.next = node.next


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` links from ``head`` loops (Floyd's algorithm)."""
    if head is None or head.next is None:
        return False
    slow: ListNode | None = head
    fast: ListNode | None = head.next
    while slow is not fast:
        if fast is None or fast.next is None:
            return False
        slow = slow.next
        fast = fast.next.next
    return True