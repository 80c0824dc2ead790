"""Greedy algorithms: refuelling, fractional loot and the largest number."""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from itertools import pairwise
from typing import Optional, Union


def refills_between_stations(stations: Iterable[int], tank: int) -> Optional[int]:
    """Fewest refills to drive from the first station to the last.

    ``stations`` are ascending positions; the car starts full at the
    first one and can refill at any station. Returns None when some gap
    between stations is longer than a full tank.
    """
    if tank < 0:
        raise ValueError(f"tank must not be negative, got {tank}")
    fuel = tank
    refills = 0
    for previous, current in pairwise(stations):
        leg = current - previous
        if leg < 0:
            raise ValueError("stations must be in ascending order")
        if leg <= fuel:
            fuel -= leg
        elif leg <= tank:
            fuel = tank - leg
            refills += 1
        else:
            return None
    return refills


def min_refills(distance: int, tank: int, stops: Iterable[int]) -> Optional[int]:
    """Fewest refills to cover ``distance`` from 0 with the given stops.

    Returns None when the destination cannot be reached.
    """
    return refills_between_stations([0, *stops, distance], tank)


def maximum_loot(capacity: float, items: Iterable[tuple[float, float]]) -> float:
    """Most value that fits in ``capacity`` when items may be split.

    ``items`` are (value, weight) pairs; weights must be positive.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    pairs = list(items)
    if any(weight <= 0 for _, weight in pairs):
        raise ValueError("item weights must be positive")
    pairs.sort(key=lambda item: item[0] / item[1], reverse=True)
    load = 0.0
    value = 0.0
    for item_value, weight in pairs:
        if load + weight <= capacity:
            load += weight
            value += item_value
        else:
            value += item_value * (capacity - load) / weight
            break
    return value


def _before(x: str, y: str) -> int:
    if x + y > y + x:
        return -1
    if x + y < y + x:
        return 1
    return 0


def largest_number(numbers: Iterable[Union[int, str]]) -> str:
    """The largest number formed by concatenating all of ``numbers``."""
    parts = [str(number) for number in numbers]
    return "".join(sorted(parts, key=cmp_to_key(_before)))