"""Hash tables that resolve collisions by open addressing.

``LinearProbingMap`` and ``QuadraticProbingMap`` store key/value pairs
and mark deleted slots with a tombstone so that later lookups keep
probing past them. ``DoubleHashTable`` stores bare integer keys and
steps through the table by a second hash of the key.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional, Union


class HashMapFull(Exception):
    """Raised when no free slot is left for a new entry."""


class _Tombstone:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<deleted>"


_DELETED = _Tombstone()

_Slot = Union[None, _Tombstone, "tuple[int, Any]"]


class _ProbingSlots:
    """Key/value slot storage shared by the probing maps; keys may repeat."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[_Slot] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _home(self, key: int) -> int:
        return key % len(self._slots)

    def _probe(self, key: int) -> Iterator[int]:
        raise NotImplementedError

    def _locate(self, key: int) -> Optional[int]:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:
                return index
        return None

    def _put(self, key: int, value: Any) -> None:
        if self._size == len(self._slots):
            raise HashMapFull("hash map full")
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None or slot is _DELETED:
                self._slots[index] = (key, value)
                self._size += 1
                return
        raise HashMapFull("no free slot on the probe path")

    def _take(self, key: int) -> Any:
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        slot = self._slots[index]
        assert isinstance(slot, tuple)
        self._slots[index] = _DELETED
        self._size -= 1
        return slot[1]

    def _has(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self._locate(key) is not None

    def _pairs(self) -> list[tuple[int, Any]]:
        return [
            slot
            for slot in self._slots
            if slot is not None and slot is not _DELETED
        ]


class LinearProbingMap(_ProbingSlots):
    """Collisions move on to the next slot, wrapping at the end."""

    def _probe(self, key: int) -> Iterator[int]:
        capacity = len(self._slots)
        home = self._home(key)
        for step in range(capacity):
            yield (home + step) % capacity

    def insert(self, key: int, value: Any) -> None:
        """Store the pair in the first free or deleted slot on the probe path.

        A key already present is stored again in another slot. Raises
        HashMapFull when every slot holds an entry.
        """
        self._put(key, value)

    def delete(self, key: int) -> Any:
        """Remove the first pair found for ``key`` and return its value.

        Raises KeyError if the key is absent.
        """
        return self._take(key)

    def __contains__(self, key: object) -> bool:
        return self._has(key)

    def __len__(self) -> int:
        return self._size

    def items(self) -> list[tuple[int, Any]]:
        """Stored (key, value) pairs in slot order."""
        return self._pairs()


class QuadraticProbingMap(_ProbingSlots):
    """Collisions step by 1, 4, 9, ... while the square stays below the
    capacity, then continue one slot at a time."""

    def _probe(self, key: int) -> Iterator[int]:
        capacity = len(self._slots)
        index = self._home(key)
        yield index
        i = 1
        while i * i < capacity:
            index = (index + i * i) % capacity
            yield index
            i += 1
        for _ in range(capacity):
            index = (index + 1) % capacity
            yield index

    def insert(self, key: int, value: Any) -> None:
        """Store the pair in the first free or deleted slot on the probe path.

        A key already present is stored again in another slot. Raises
        HashMapFull when every slot holds an entry.
        """
        self._put(key, value)

    def delete(self, key: int) -> Any:
        """Remove the first pair found for ``key`` and return its value.

        Raises KeyError if the key is absent.
        """
        return self._take(key)

    def __contains__(self, key: object) -> bool:
        return self._has(key)

    def __len__(self) -> int:
        return self._size

    def items(self) -> list[tuple[int, Any]]:
        """Stored (key, value) pairs in slot order."""
        return self._pairs()


class DoubleHashTable:
    """Integer keys placed by a primary hash and stepped by a second one.

    The primary hash is ``key % capacity``; the step is
    ``capacity // 2 - (capacity // 2) * key``. Keys may repeat.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._table: list[Optional[int]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._table)

    def _probe(self, key: int) -> Iterator[int]:
        capacity = len(self._table)
        half = capacity // 2
        home = key % capacity
        step = half - half * key
        yield home
        for i in range(1, capacity):
            yield (home + i * step) % capacity

    def insert(self, key: int) -> None:
        """Place ``key`` in the first empty slot of its probe sequence.

        Raises HashMapFull when the table is full or the sequence
        reaches no empty slot.
        """
        if self._size == len(self._table):
            raise HashMapFull("map is full")
        for index in self._probe(key):
            if self._table[index] is None:
                self._table[index] = key
                self._size += 1
                return
        raise HashMapFull(f"no free slot reachable for key {key}")

    def _locate(self, key: int) -> Optional[int]:
        for index in self._probe(key):
            if self._table[index] == key:
                return index
        return None

    def remove(self, key: int) -> None:
        """Remove one occurrence of ``key``; raise KeyError if absent."""
        index = self._locate(key)
        if index is None:
            raise KeyError(key)
        self._table[index] = None
        self._size -= 1

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self._locate(key) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield stored keys in slot order."""
        return iter([key for key in self._table if key is not None])