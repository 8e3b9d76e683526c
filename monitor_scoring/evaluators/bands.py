"""Ordered threshold tables shared by the banded evaluators."""

from typing import TypeVar

T = TypeVar("T")

# (lower bound inclusive, value), checked top to bottom
BandTable = tuple[tuple[float, T], ...]


def first_match(value: float, table: "BandTable[T]", default: T) -> T:
    """Return the value of the first band whose lower bound is <= value.

    Args:
        value: Measured value (percentage, ratio, ...)
        table: Bands ordered from the strictest bound down
        default: Result when no band matches

    Returns:
        The matched band's value, or default
    """
    for lower_bound, result in table:
        if value >= lower_bound:
            return result
    return default
