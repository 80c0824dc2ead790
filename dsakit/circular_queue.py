"""A first-in, first-out queue of (key, value) entries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class QueueEmpty(Exception):
    """Raised when dequeuing from an empty queue."""


class CircularQueue:
    """Entries leave in the order they arrived."""

    def __init__(self) -> None:
        self._entries: deque[tuple[int, str]] = deque()

    def enqueue(self, key: int, value: str) -> None:
        """Add an entry at the rear."""
        self._entries.append((key, value))

    def dequeue(self) -> tuple[int, str]:
        """Remove and return the entry at the front."""
        if not self._entries:
            raise QueueEmpty("queue empty")
        return self._entries.popleft()

    def __iter__(self) -> Iterator[tuple[int, str]]:
        """Yield entries from front to rear."""
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def format(self) -> str:
        """Render entries as "(key, value) -> " pieces, front first."""
        return "".join(f"({key}, {value}) -> " for key, value in self._entries)