import pytest

from algokit.hashing import ChainingHashTable, OpenAddressingHashTable


def test_chaining_insert_search_remove():
    table = ChainingHashTable(7)
    for key in (10, 20, 15, 7):
        table.insert(key)
    assert all(table.search(key) for key in (10, 20, 15, 7))
    assert table.search(15)
    assert table.remove(15) is True
    assert not table.search(15)
    assert table.remove(15) is False


def test_chaining_keys_live_in_their_buckets():
    table = ChainingHashTable(7)
    keys = [10, 20, 15, 7, 3, 17]
    for key in keys:
        table.insert(key)
    buckets = table.buckets()
    assert len(buckets) == 7
    for key in keys:
        assert key in buckets[table.hash(key)]
    assert sorted(k for bucket in buckets for k in bucket) == sorted(keys)


def test_chaining_collisions_share_a_bucket_in_order():
    table = ChainingHashTable(5)
    table.insert(2)
    table.insert(7)
    table.insert(12)
    assert table.hash(2) == table.hash(7) == table.hash(12)
    assert table.buckets()[table.hash(2)] == [2, 7, 12]


def test_chaining_remove_drops_every_copy():
    table = ChainingHashTable(3)
    table.insert(4)
    table.insert(4)
    table.insert(7)
    table.remove(4)
    assert table.buckets()[table.hash(4)] == [7]


def test_chaining_rejects_zero_buckets():
    with pytest.raises(ValueError):
        ChainingHashTable(0)


def test_open_addressing_linear_probing():
    table = OpenAddressingHashTable(7)
    for key in (3, 10, 17):
        table.insert(key)
    start = table.hash(3)
    slots = table.slots()
    assert slots[start] == 3
    assert slots[(start + 1) % 7] == 10
    assert slots[(start + 2) % 7] == 17
    assert len(table) == 3


def test_open_addressing_tombstone_keeps_chain_searchable():
    table = OpenAddressingHashTable(7)
    for key in (3, 10, 17):
        table.insert(key)
    assert table.remove(10) is True
    assert not table.search(10)
    assert table.search(17)
    start = table.hash(3)
    assert table.slots()[(start + 1) % 7] is None
    assert len(table) == 2
    table.insert(24)
    assert table.slots()[(start + 1) % 7] == 24
    assert table.search(24)


def test_open_addressing_wraps_around_the_end():
    table = OpenAddressingHashTable(4)
    table.insert(3)
    table.insert(7)
    assert table.slots()[3] == 3
    assert table.slots()[0] == 7
    assert table.search(7)


def test_open_addressing_full_table():
    table = OpenAddressingHashTable(3)
    for key in (1, 2, 3):
        table.insert(key)
    with pytest.raises(OverflowError):
        table.insert(4)
    assert not table.search(4)
    assert table.remove(4) is False
    assert len(table) == 3


def test_open_addressing_matches_source_example():
    table = OpenAddressingHashTable(7)
    for key in (10, 20, 15, 7):
        table.insert(key)
    assert table.search(15)
    table.remove(15)
    assert not table.search(15)
    assert sorted(k for k in table.slots() if k is not None) == [7, 10, 20]


def test_open_addressing_rejects_zero_capacity():
    with pytest.raises(ValueError):
        OpenAddressingHashTable(0)