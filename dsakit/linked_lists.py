"""Singly linked lists: a keyed list, a patient register and a digit list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


class DuplicateKeyError(ValueError):
    """Raised when a key that is already in a list is added again."""


class _Node:
    __slots__ = ("key", "data", "next")

    def __init__(self, key: int, data: int, next: Optional[_Node] = None) -> None:
        self.key = key
        self.data = data
        self.next = next


class SinglyLinkedList:
    """A singly linked list of (key, data) nodes with unique keys."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _find(self, key: int) -> Optional[_Node]:
        for node in self._nodes():
            if node.key == key:
                return node
        return None

    def _require_new(self, key: int) -> None:
        if self._find(key) is not None:
            raise DuplicateKeyError(f"node already exists with key {key}")

    def append(self, key: int, data: int) -> None:
        """Attach a node at the end."""
        self._require_new(key)
        node = _Node(key, data)
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node

    def prepend(self, key: int, data: int) -> None:
        """Attach a node at the start."""
        self._require_new(key)
        self._head = _Node(key, data, self._head)

    def insert_after(self, after_key: int, key: int, data: int) -> None:
        """Insert a node right after the node holding ``after_key``.

        Raises KeyError if ``after_key`` is absent and DuplicateKeyError
        if ``key`` is already present.
        """
        anchor = self._find(after_key)
        if anchor is None:
            raise KeyError(after_key)
        self._require_new(key)
        anchor.next = _Node(key, data, anchor.next)

    def delete(self, key: int) -> None:
        """Unlink the node holding ``key``; raise KeyError if absent."""
        if self._head is None:
            raise KeyError(key)
        if self._head.key == key:
            self._head = self._head.next
            return
        previous = self._head
        while previous.next is not None and previous.next.key != key:
            previous = previous.next
        if previous.next is None:
            raise KeyError(key)
        previous.next = previous.next.next

    def update(self, key: int, data: int) -> None:
        """Replace the data under ``key``; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        node.data = data

    def get(self, key: int) -> int:
        """Return the data under ``key``; raise KeyError if absent."""
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.data

    def bubble_pass(self) -> None:
        """Make one pass swapping the data of adjacent out-of-order nodes.

        Keys stay where they are. Raises ValueError on an empty list.
        """
        if self._head is None:
            raise ValueError("empty list")
        for node in self._nodes():
            following = node.next
            if following is not None and node.data > following.data:
                node.data, following.data = following.data, node.data

    def __iter__(self) -> Iterator[tuple[int, int]]:
        for node in self._nodes():
            yield node.key, node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, key: object) -> bool:
        return any(node.key == key for node in self._nodes())


@dataclass(frozen=True)
class Date:
    """A calendar date written day/month/year."""

    day: int = 0
    month: int = 0
    year: int = 0

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


@dataclass
class Patient:
    """One admitted patient."""

    id: int
    name: str
    age: int
    admitted: Date


_TABLE_HEADER = "ID       NAME       AGE       DATE OF ADMISSION"
_TABLE_RULE = "-----------------------------------------------"


class PatientRegistry:
    """Patients in order of admission, numbered from 1."""

    def __init__(self) -> None:
        self._patients: list[Patient] = []

    def add(self, name: str, age: int, admitted: Date) -> Patient:
        """Register a patient at the end and return the record."""
        patient = Patient(len(self._patients) + 1, name, age, admitted)
        self._patients.append(patient)
        return patient

    def remove_last(self) -> Patient:
        """Remove and return the most recently added patient."""
        if not self._patients:
            raise IndexError("registry is already empty")
        return self._patients.pop()

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __len__(self) -> int:
        return len(self._patients)

    def format_table(self) -> str:
        """Render the registry as a text table, or "Empty"."""
        if not self._patients:
            return "Empty"
        rows = [
            f"{p.id}        {p.name}       {p.age}       {p.admitted}"
            for p in self._patients
        ]
        return "\n".join([_TABLE_HEADER, _TABLE_RULE, *rows])


class DigitList:
    """A number held as a list of decimal digits, least significant first."""

    def __init__(self, digits: Iterable[int] = ()) -> None:
        self._digits: list[int] = list(digits)

    def append(self, value: int) -> None:
        self._digits.append(value)

    def prepend(self, value: int) -> None:
        self._digits.insert(0, value)

    def __len__(self) -> int:
        return len(self._digits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._digits)

    def to_int(self) -> int:
        """The number the digits stand for."""
        return sum(digit * 10**power for power, digit in enumerate(self._digits))

    @classmethod
    def from_int(cls, number: int) -> DigitList:
        """Split a non-negative number into digits; zero gives no digits."""
        if number < 0:
            raise ValueError(f"number must not be negative, got {number}")
        result = cls()
        while number > 0:
            number, digit = divmod(number, 10)
            result.append(digit)
        return result

    def __add__(self, other: DigitList) -> DigitList:
        if not isinstance(other, DigitList):
            return NotImplemented
        return DigitList.from_int(self.to_int() + other.to_int())

    def __repr__(self) -> str:
        return f"DigitList({self._digits!r})"