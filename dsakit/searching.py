"""Linear and binary search returning the position of a value."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional, TypeVar

T = TypeVar("T")


def linear_search(values: Iterable[T], target: T) -> Optional[int]:
    """Return the index of the first item equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def binary_search(values: Sequence[T], target: T) -> Optional[int]:
    """Return an index of ``target`` in ascending ``values``, or None.

    When the value occurs more than once, the index of whichever
    occurrence the halving meets first is returned.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None