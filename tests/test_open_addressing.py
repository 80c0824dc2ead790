import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.open_addressing import (
    DoubleHashTable,
    HashMapFull,
    LinearProbingMap,
    QuadraticProbingMap,
)


def test_insert_then_contains_and_len():
    for m in (LinearProbingMap(7), QuadraticProbingMap(7)):
        m.insert(3, "three")
        m.insert(10, "ten")
        assert 3 in m
        assert 10 in m
        assert 17 not in m
        assert len(m) == 2


def test_delete_returns_value_and_removes():
    for m in (LinearProbingMap(7), QuadraticProbingMap(7)):
        m.insert(4, "four")
        assert m.delete(4) == "four"
        assert 4 not in m
        assert len(m) == 0
        assert m.items() == []


def test_delete_missing_raises_key_error():
    for m in (LinearProbingMap(5), QuadraticProbingMap(5)):
        m.insert(1, "a")
        with pytest.raises(KeyError):
            m.delete(2)


def test_full_map_raises():
    for m in (LinearProbingMap(3), QuadraticProbingMap(3)):
        for key in range(3):
            m.insert(key, str(key))
        with pytest.raises(HashMapFull):
            m.insert(9, "nine")
        assert len(m) == 3


def test_lookup_passes_deleted_slot():
    for m in (LinearProbingMap(5), QuadraticProbingMap(5)):
        m.insert(1, "a")
        m.insert(6, "b")
        m.delete(1)
        assert 6 in m
        assert m.delete(6) == "b"


def test_deleted_slot_is_reused():
    for m in (LinearProbingMap(2), QuadraticProbingMap(2)):
        m.insert(0, "x")
        m.insert(1, "y")
        m.delete(0)
        m.insert(2, "z")
        assert m.items() == [(2, "z"), (1, "y")]


def test_duplicate_keys_take_two_slots():
    for m in (LinearProbingMap(5), QuadraticProbingMap(5)):
        m.insert(2, "first")
        m.insert(2, "second")
        assert len(m) == 2
        assert m.delete(2) == "first"
        assert m.delete(2) == "second"
        assert 2 not in m


def test_non_positive_capacity_rejected():
    with pytest.raises(ValueError):
        LinearProbingMap(0)
    with pytest.raises(ValueError):
        QuadraticProbingMap(0)


def test_linear_probing_places_collisions_in_next_slot():
    m = LinearProbingMap(5)
    m.insert(1, "a")
    m.insert(6, "b")
    m.insert(4, "c")
    m.insert(9, "d")
    assert m.items() == [(9, "d"), (1, "a"), (6, "b"), (4, "c")]


def test_quadratic_probing_order():
    m = QuadraticProbingMap(10)
    for key in (0, 10, 20, 30):
        m.insert(key, key)
    assert [k for k, _ in m.items()] == [0, 10, 30, 20]


@given(
    capacity=st.integers(min_value=1, max_value=20),
    keys=st.lists(st.integers(min_value=0, max_value=200), unique=True),
)
def test_all_inserted_keys_are_found(capacity, keys):
    stored = keys[:capacity]
    for m in (LinearProbingMap(capacity), QuadraticProbingMap(capacity)):
        for key in stored:
            m.insert(key, -key)
        assert len(m) == len(stored)
        assert sorted(m.items()) == sorted((k, -k) for k in stored)
        assert all(key in m for key in stored)


@given(keys=st.lists(st.integers(min_value=0, max_value=100), unique=True, max_size=10))
def test_delete_every_key_empties_map(keys):
    for m in (LinearProbingMap(10), QuadraticProbingMap(10)):
        for key in keys:
            m.insert(key, key)
        for key in reversed(keys):
            assert m.delete(key) == key
        assert len(m) == 0
        assert all(key not in m for key in keys)


def test_double_hash_worked_example():
    table = DoubleHashTable(20)
    for key in (5, 2, 10, 27):
        table.insert(key)
    assert list(table) == [2, 5, 27, 10]
    table.remove(27)
    table.remove(5)
    assert list(table) == [2, 10]
    assert len(table) == 2


def test_double_hash_unreachable_slot_raises():
    table = DoubleHashTable(20)
    table.insert(5)
    with pytest.raises(HashMapFull):
        table.insert(25)
    assert list(table) == [5]


def test_double_hash_full_raises():
    table = DoubleHashTable(1)
    table.insert(3)
    with pytest.raises(HashMapFull):
        table.insert(4)


def test_double_hash_remove_missing_raises():
    table = DoubleHashTable(10)
    table.insert(1)
    with pytest.raises(KeyError):
        table.remove(2)
    assert 1 in table


def test_double_hash_rejects_bad_capacity():
    with pytest.raises(ValueError):
        DoubleHashTable(-1)


@given(keys=st.lists(st.integers(min_value=0, max_value=500), unique=True, max_size=30))
def test_double_hash_inserted_keys_found_or_rejected(keys):
    table = DoubleHashTable(13)
    stored = []
    for key in keys:
        try:
            table.insert(key)
        except HashMapFull:
            assert key not in table
        else:
            stored.append(key)
    assert len(table) == len(stored)
    assert sorted(table) == sorted(stored)
    assert all(key in table for key in stored)