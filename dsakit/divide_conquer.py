"""Majority detection and counting segments that cover points."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Hashable


def has_majority(values: Iterable[Hashable]) -> bool:
    """True when one value makes up more than half of ``values``."""
    counts = Counter(values)
    total = sum(counts.values())
    if not total:
        return False
    return max(counts.values()) * 2 > total


def count_segments(
    segments: Iterable[tuple[int, int]], points: Sequence[int]
) -> list[int]:
    """For each point, how many closed segments [a, b] contain it.

    A segment whose start lies after its end contains no point.
    """
    valid = [(a, b) for a, b in segments if a <= b]
    starts = sorted(a for a, _ in valid)
    ends = sorted(b for _, b in valid)
    return [bisect_right(starts, p) - bisect_left(ends, p) for p in points]