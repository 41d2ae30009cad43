"""Summary statistics over sequences of numbers."""

from __future__ import annotations

import statistics
from collections.abc import Sequence

MAX_AVERAGE_ELEMENTS = 100


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of between 1 and 100 numbers."""
    if not 1 <= len(values) <= MAX_AVERAGE_ELEMENTS:
        raise ValueError(
            f"number of elements should be in range of (1 to {MAX_AVERAGE_ELEMENTS}), "
            f"got {len(values)}"
        )
    return statistics.fmean(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation of a non-empty sequence."""
    if not values:
        raise ValueError("standard deviation needs at least one value")
    return statistics.pstdev(float(v) for v in values)


def largest(values: Sequence[float]) -> float:
    """The largest number in a non-empty sequence."""
    if not values:
        raise ValueError("largest needs at least one value")
    return max(values)