"""A presence table for bounded integers and a separately chained hash table."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_LIMIT = 1000


class PresenceTable:
    """Records which integers in ``-limit .. limit`` have been seen.

    Positive values and non-positive values are kept in separate
    columns indexed by absolute value.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        self.limit = limit
        self._positive = [False] * (limit + 1)
        self._non_positive = [False] * (limit + 1)

    def add(self, value: int) -> None:
        """Mark ``value`` present; raise ValueError if beyond the limit."""
        if abs(value) > self.limit:
            raise ValueError(f"value {value} beyond the limit {self.limit}")
        if value > 0:
            self._positive[value] = True
        else:
            self._non_positive[-value] = True

    def update(self, values: Iterable[int]) -> None:
        for value in values:
            self.add(value)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int) or abs(value) > self.limit:
            return False
        if value > 0:
            return self._positive[value]
        return self._non_positive[-value]


class ChainedHashTable:
    """Integer keys hashed by remainder into buckets of chained keys."""

    def __init__(self, buckets: int) -> None:
        if buckets <= 0:
            raise ValueError(f"bucket count must be positive, got {buckets}")
        self._table: list[list[int]] = [[] for _ in range(buckets)]

    @property
    def buckets(self) -> int:
        return len(self._table)

    def bucket_of(self, key: int) -> int:
        """The bucket index of ``key``."""
        return key % len(self._table)

    def insert(self, key: int) -> None:
        """Append ``key`` to its bucket's chain; duplicates are kept."""
        self._table[self.bucket_of(key)].append(key)

    def remove(self, key: int) -> None:
        """Remove every copy of ``key``; raise KeyError if absent."""
        chain = self._table[self.bucket_of(key)]
        if key not in chain:
            raise KeyError(key)
        chain[:] = [k for k in chain if k != key]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return key in self._table[self.bucket_of(key)]

    def chains(self) -> list[tuple[int, ...]]:
        """The keys of each bucket, in insertion order."""
        return [tuple(chain) for chain in self._table]

    def format(self) -> str:
        """One line per bucket: its index followed by " -> key" pieces."""
        return "\n".join(
            f"{index}" + "".join(f" -> {key}" for key in chain)
            for index, chain in enumerate(self._table)
        )