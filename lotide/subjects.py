"""
Small example functions the assertions are run against.

These are subjects under test, not part of the assertion engine.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Any

from .comparison import is_sequence


def count_letters(text: str) -> dict[str, int]:
    """
    Count each character of a string, ignoring spaces.

    Counting is case-sensitive and keys appear in first-seen order.

    Example:
        count_letters("LHL") == {"L": 2, "H": 1}
    """
    return dict(Counter(ch for ch in text if ch != " "))


def is_even(number: int) -> bool:
    return number % 2 == 0


def middle(items: Any) -> list[int]:
    """
    1-based positions of the middle element(s) of a sequence.

    Sequences shorter than three elements have no middle and give [].
    Odd lengths give one position, even lengths the two central ones.

    Example:
        middle([1, 2, 3, 4]) == [2, 3]
    """
    if not is_sequence(items) or len(items) < 3:
        return []

    size = len(items)
    positions = [math.ceil(size / 2)]
    if is_even(size):
        positions.append(math.ceil((size + 1) / 2))
    return positions
