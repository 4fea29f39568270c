"""Linear summation over a numeric sequence."""

from __future__ import annotations

from typing import Iterable


def calculate_sum(numbers: Iterable[int]) -> int:
    """Add up ``numbers`` left to right, starting from 0.

    Elements are not validated; a non-numeric element raises whatever
    ``+`` raises for it.
    """
    total = 0
    for n in numbers:
        total += n
    return total
