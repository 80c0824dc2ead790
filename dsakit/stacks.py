"""Array-backed and keyed stacks.

``FixedStack`` holds five integer slots, ``BoundedStack`` holds as many
as it is given, and ``KeyedStack`` is an unbounded stack of key/data
entries in which each key may appear only once.
"""

from __future__ import annotations

from collections.abc import Iterator


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when reading from or popping an empty stack."""


class _ArrayStack:
    """Integer slots, all zero at first, filled from position 0 upwards."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._slots = [0] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def __len__(self) -> int:
        return self._size

    def push(self, value: int) -> None:
        """Place ``value`` on top; raise StackOverflow when full."""
        if self.is_full():
            raise StackOverflow("stack overflow")
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value, zeroing its slot."""
        if self.is_empty():
            raise StackUnderflow("stack underflow")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = 0
        return value

    def slots(self) -> tuple[int, ...]:
        """Every slot, from the highest position down to position 0."""
        return tuple(reversed(self._slots))

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self._slots):
            raise IndexError(f"invalid position {position}")


class FixedStack(_ArrayStack):
    """A stack of exactly five integer slots."""

    CAPACITY = 5

    def __init__(self) -> None:
        super().__init__(self.CAPACITY)

    def push(self, value: int) -> None:
        super().push(value)

    def pop(self) -> int:
        return super().pop()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def __len__(self) -> int:
        return super().__len__()

    def peek(self, position: int) -> int:
        """Return the slot at ``position``; the stack must not be empty."""
        if self.is_empty():
            raise StackUnderflow("stack underflow")
        self._check_position(position)
        return self._slots[position]

    def change(self, value: int, position: int) -> None:
        """Overwrite the slot at ``position`` without changing the size."""
        self._check_position(position)
        self._slots[position] = value

    def slots(self) -> tuple[int, ...]:
        return super().slots()


class BoundedStack(_ArrayStack):
    """A stack with a capacity chosen when it is created."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def push(self, value: int) -> None:
        super().push(value)

    def pop(self) -> int:
        return super().pop()

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def __len__(self) -> int:
        return super().__len__()

    def peek(self, position: int) -> int:
        """Return the slot at ``position``.

        Raises IndexError for a position past the capacity and
        StackUnderflow when the stack is empty.
        """
        if position >= self.capacity:
            raise IndexError(f"invalid position {position}")
        if self.is_empty():
            raise StackUnderflow("stack underflow")
        self._check_position(position)
        return self._slots[position]

    def change(self, value: int, position: int) -> None:
        """Pop one value per slot above ``position``, then write ``value``.

        The write succeeds only if the slot at ``position`` is then the
        first free one; the value lands in that slot without being
        counted in the size. Otherwise ValueError is raised, after the
        values have been popped.
        """
        self._check_position(position)
        for _ in range(self.capacity - 1 - position):
            if not self.is_empty():
                self.pop()
        if position != self._size:
            raise ValueError(f"the value cannot be changed at position {position}")
        self._slots[position] = value

    def slots(self) -> tuple[int, ...]:
        return super().slots()


class KeyedStack:
    """An unbounded stack of (key, data) entries with unique keys."""

    def __init__(self) -> None:
        self._entries: list[list[int]] = []

    def _find(self, key: int) -> int:
        for index, (entry_key, _) in enumerate(self._entries):
            if entry_key == key:
                return index
        raise KeyError(key)

    def is_empty(self) -> bool:
        return not self._entries

    def push(self, key: int, data: int) -> None:
        """Push an entry; raise ValueError if ``key`` is already present."""
        if key in self:
            raise ValueError(f"element already exists with key {key}")
        self._entries.append([key, data])

    def pop(self) -> tuple[int, int]:
        """Remove and return the top (key, data) entry."""
        if not self._entries:
            raise StackUnderflow("stack underflow")
        key, data = self._entries.pop()
        return key, data

    def peek(self, key: int) -> int:
        """Return the data stored under ``key``; raise KeyError if absent."""
        return self._entries[self._find(key)][1]

    def change(self, key: int, data: int) -> None:
        """Set the data under ``key`` and make that entry the new top.

        Every entry above it is discarded. Raises KeyError if absent.
        """
        index = self._find(key)
        self._entries[index][1] = data
        del self._entries[index + 1 :]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self._entries)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield (key, data) entries from the top down."""
        for key, data in reversed(self._entries):
            yield key, data