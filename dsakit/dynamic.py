"""Dynamic programming: change making, knapsacks and parenthesisation."""

from __future__ import annotations

import operator
import re
from collections.abc import Iterable
from typing import Optional

DEFAULT_COINS = (1, 3, 4)

_EXPRESSION = re.compile(r"\d+(?:[-+*]\d+)*")
_APPLY = {"+": operator.add, "-": operator.sub, "*": operator.mul}


def money_change(money: int, coins: Iterable[int] = DEFAULT_COINS) -> Optional[int]:
    """Fewest coins summing to ``money``, or None if it cannot be made."""
    if money < 0:
        raise ValueError(f"amount must not be negative, got {money}")
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    fewest: list[Optional[int]] = [0] + [None] * money
    for amount in range(1, money + 1):
        options = [
            fewest[amount - coin] + 1
            for coin in denominations
            if coin <= amount and fewest[amount - coin] is not None
        ]
        fewest[amount] = min(options, default=None)
    return fewest[money]


def max_gold(capacity: int, weights: Iterable[int]) -> int:
    """Largest total of bars, each used at most once, not above ``capacity``."""
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    mask = (1 << (capacity + 1)) - 1
    reachable = 1
    for weight in weights:
        if weight < 0:
            raise ValueError(f"weights must not be negative, got {weight}")
        reachable = (reachable | (reachable << weight)) & mask
    return reachable.bit_length() - 1


def repetitive_knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Most value within ``capacity`` when each (weight, value) item may repeat."""
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    pairs = list(items)
    if any(weight <= 0 for weight, _ in pairs):
        raise ValueError("item weights must be positive")
    best = [0] * (capacity + 1)
    for load in range(1, capacity + 1):
        best[load] = max(
            (best[load - weight] + value for weight, value in pairs if weight <= load),
            default=0,
        )
        best[load] = max(best[load], 0)
    return best[capacity]


def max_expression_value(expression: str) -> int:
    """Largest value reachable by parenthesising ``expression``.

    The expression alternates non-negative integers with ``+``, ``-``
    and ``*``. Raises ValueError for anything else.
    """
    if not _EXPRESSION.fullmatch(expression):
        raise ValueError(f"malformed expression {expression!r}")
    operands = [int(token) for token in re.findall(r"\d+", expression)]
    operators = re.findall(r"[-+*]", expression)
    n = len(operands)
    low = [[0] * n for _ in range(n)]
    high = [[0] * n for _ in range(n)]
    for i, value in enumerate(operands):
        low[i][i] = high[i][i] = value
    for span in range(1, n):
        for i in range(n - span):
            j = i + span
            candidates = [
                _APPLY[operators[k]](a, b)
                for k in range(i, j)
                for a in (low[i][k], high[i][k])
                for b in (low[k + 1][j], high[k + 1][j])
            ]
            low[i][j] = min(candidates)
            high[i][j] = max(candidates)
    return high[0][n - 1]