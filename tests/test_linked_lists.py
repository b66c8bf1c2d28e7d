import pytest

from algokit.linked_lists import (
    CircularLinkedList,
    DoublyLinkedList,
    ListNode,
    SinglyLinkedList,
    has_cycle,
)


def _singly(*values):
    lst = SinglyLinkedList()
    for value in values:
        lst.insert_at_end(value)
    return lst


def _doubly(*values):
    lst = DoublyLinkedList()
    for value in values:
        lst.insert_at_end(value)
    return lst


def _circular(*values):
    lst = CircularLinkedList()
    for value in values:
        lst.insert_at_end(value)
    return lst


# Singly linked list

def test_singly_insert_at_end_keeps_order():
    assert list(_singly(1, 2, 3)) == [1, 2, 3]


def test_singly_insert_at_beginning_prepends():
    lst = _singly(2, 3)
    lst.insert_at_beginning(1)
    assert list(lst) == [1, 2, 3]


def test_singly_insert_after_existing_and_missing():
    lst = _singly(1, 3)
    lst.insert_after(1, 2)
    assert list(lst) == [1, 2, 3]
    lst.insert_after(99, 4)
    assert list(lst) == [1, 2, 3]


def test_singly_delete_from_end_and_beginning():
    lst = _singly(1, 2, 3)
    lst.delete_from_end()
    assert list(lst) == [1, 2]
    lst.delete_from_beginning()
    assert list(lst) == [2]
    lst.delete_from_end()
    assert list(lst) == []
    lst.delete_from_end()
    lst.delete_from_beginning()
    assert list(lst) == []


def test_singly_delete_value():
    lst = _singly(1, 2, 3, 2)
    lst.delete(2)
    assert list(lst) == [1, 3, 2]
    lst.delete(1)
    assert list(lst) == [3, 2]
    lst.delete(42)
    assert list(lst) == [3, 2]


def test_singly_reverse():
    lst = _singly(1, 2, 3, 4)
    lst.reverse()
    assert list(lst) == [4, 3, 2, 1]
    lst.reverse()
    assert list(lst) == [1, 2, 3, 4]


def test_singly_str_format():
    assert str(_singly(1, 2)) == "1 -> 2 -> NULL"
    assert str(SinglyLinkedList()) == "NULL"


def test_singly_chain_has_no_cycle():
    assert has_cycle(_singly(1, 2, 3).head) is False


# Doubly linked list

def test_doubly_insertions():
    lst = DoublyLinkedList()
    lst.insert_at_end(2)
    lst.insert_at_beginning(1)
    lst.insert_at_end(4)
    lst.insert_after(2, 3)
    assert list(lst) == [1, 2, 3, 4]
    assert list(reversed(lst)) == [4, 3, 2, 1]


def test_doubly_insert_after_last_updates_tail():
    lst = _doubly(1, 2)
    lst.insert_after(2, 3)
    assert list(reversed(lst)) == [3, 2, 1]


def test_doubly_insert_after_missing_does_nothing():
    lst = _doubly(1, 2)
    lst.insert_after(7, 3)
    assert list(lst) == [1, 2]


def test_doubly_deletions():
    lst = _doubly(1, 2, 3, 4, 5)
    lst.delete_from_beginning()
    lst.delete_from_end()
    assert list(lst) == [2, 3, 4]
    lst.delete(3)
    assert list(lst) == [2, 4]
    assert list(reversed(lst)) == [4, 2]
    lst.delete(4)
    assert list(reversed(lst)) == [2]
    lst.delete(2)
    assert list(lst) == []
    assert list(reversed(lst)) == []


def test_doubly_delete_on_empty_is_harmless():
    lst = DoublyLinkedList()
    lst.delete_from_beginning()
    lst.delete_from_end()
    lst.delete(1)
    lst.insert_at_end(5)
    assert list(lst) == [5]


def test_doubly_reverse_then_append():
    lst = _doubly(1, 2, 3)
    lst.reverse()
    assert list(lst) == [3, 2, 1]
    lst.insert_at_end(0)
    assert list(lst) == [3, 2, 1, 0]
    assert list(reversed(lst)) == [0, 1, 2, 3]


# Circular linked list

def test_circular_insert_and_wraparound():
    lst = _circular(1, 2, 3)
    assert list(lst) == [1, 2, 3]
    last = lst.head.next.next
    assert last.next is lst.head
    assert has_cycle(lst.head) is True


def test_circular_insert_at_beginning():
    lst = _circular(2, 3)
    lst.insert_at_beginning(1)
    assert list(lst) == [1, 2, 3]
    empty = CircularLinkedList()
    empty.insert_at_beginning(9)
    assert list(empty) == [9]
    assert empty.head.next is empty.head


def test_circular_insert_after():
    lst = _circular(1, 3)
    lst.insert_after(1, 2)
    assert list(lst) == [1, 2, 3]
    lst.insert_after(3, 4)
    assert list(lst) == [1, 2, 3, 4]


def test_circular_insert_after_on_empty_creates_head():
    lst = CircularLinkedList()
    lst.insert_after(5, 7)
    assert list(lst) == [7]


def test_circular_insert_after_missing_raises():
    lst = _circular(1, 2)
    with pytest.raises(ValueError):
        lst.insert_after(8, 3)
    assert list(lst) == [1, 2]


def test_circular_delete_from_ends():
    lst = _circular(1, 2, 3, 4)
    lst.delete_from_beginning()
    assert list(lst) == [2, 3, 4]
    lst.delete_from_end()
    assert list(lst) == [2, 3]
    lst.delete_from_end()
    lst.delete_from_beginning()
    assert list(lst) == []
    assert lst.head is None


def test_circular_delete_value():
    lst = _circular(1, 2, 3, 4)
    lst.delete(1)
    assert list(lst) == [2, 3, 4]
    lst.delete(4)
    assert list(lst) == [2, 3]
    lst.delete(3)
    assert list(lst) == [2]
    lst.delete(2)
    assert list(lst) == []


def test_circular_delete_missing_raises():
    lst = _circular(1, 2)
    with pytest.raises(ValueError):
        lst.delete(5)
    assert list(lst) == [1, 2]


# Cycle detection

def test_has_cycle_source_example():
    head = ListNode(3)
    second = ListNode(2)
    head.next = second
    second.next = ListNode(0)
    second.next.next = ListNode(-4)
    second.next.next.next = second
    assert has_cycle(head) is True


@pytest.mark.parametrize("length", [0, 1, 2, 5])
def test_has_cycle_false_for_straight_chain(length):
    head = None
    for value in range(length):
        head = ListNode(value, head)
    assert has_cycle(head) is False


def test_has_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True