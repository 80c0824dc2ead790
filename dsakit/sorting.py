"""Classic comparison and distribution sorts, plus inversion counting.

Every sort takes any iterable of values and returns a new list; the
input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")

DEFAULT_COUNTING_RANGE = 10


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by exchanging each position with every later, smaller value."""
    items = list(values)
    n = len(items)
    for i in range(n):
        for j in range(i + 1, n):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly moving the smallest remaining value forward."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] >= left[i]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[T]) -> list[T]:
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(values: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    return _merge_sorted(list(values))


def _partition(items: list[T], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start
    for i in range(start, end):
        if items[i] <= pivot:
            items[boundary], items[i] = items[i], items[boundary]
            boundary += 1
    items[end], items[boundary] = items[boundary], items[end]
    return boundary


def quick_sort(values: Iterable[T]) -> list[T]:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            p = _partition(items, start, end)
            pending.append((p + 1, end))
            pending.append((start, p - 1))
    return items


def counting_sort(
    values: Iterable[int], value_range: int = DEFAULT_COUNTING_RANGE
) -> list[int]:
    """Sort integers in ``0 .. value_range - 1`` by counting occurrences.

    Raises ValueError for a non-positive range or a value outside it.
    """
    if value_range <= 0:
        raise ValueError(f"value range must be positive, got {value_range}")
    counts = [0] * value_range
    for value in values:
        if not 0 <= value < value_range:
            raise ValueError(
                f"value {value} outside the range 0 to {value_range - 1}"
            )
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def shell_sort(values: Iterable[T]) -> list[T]:
    """Shell sort with gaps halving from n // 2 down to 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def modified_shell_sort(values: Iterable[T]) -> list[T]:
    """Single-sweep compare-and-swap passes at halving gaps.

    Each pass looks once at every position and swaps it with the
    neighbours one gap away on either side when they are out of order.
    The passes reorder the values but do not guarantee a fully sorted
    result for every input.
    """
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(n):
            if i + gap < n and items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
            if i - gap >= 0 and items[i - gap] > items[i]:
                items[i], items[i - gap] = items[i - gap], items[i]
        gap //= 2
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    divisor = 1
    while largest // divisor > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        divisor *= 10
    return items


def _sort_and_count(items: list[T]) -> tuple[list[T], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged: list[T] = []
    inversions = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def count_inversions(values: Iterable[T]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values))[1]