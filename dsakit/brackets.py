"""Checking that brackets in a text are balanced."""

from __future__ import annotations

from typing import Optional

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = set(_PAIRS.values())


def check_brackets(text: str) -> Optional[int]:
    """Return the 1-based position of the first bracket error, or None.

    A closing bracket with no matching opener is reported at its own
    position. If every closer matches, the earliest opener left
    unclosed is reported.
    """
    open_brackets: list[tuple[str, int]] = []
    for position, ch in enumerate(text, start=1):
        if ch in _OPENERS:
            open_brackets.append((ch, position))
        elif ch in _PAIRS:
            if not open_brackets or open_brackets[-1][0] != _PAIRS[ch]:
                return position
            open_brackets.pop()
    if open_brackets:
        return open_brackets[0][1]
    return None