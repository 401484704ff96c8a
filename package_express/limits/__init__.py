"""
Package Express Limits Package

Exports all limit classes.

Limits are checked in the order the values are collected: weight first,
then the dimensions. A package that exceeds any limit gets no quote.

Usage:
    from package_express.limits import ALL, Heavy, Big
"""

from .base import Limit, ThresholdExceeded
from .too_heavy import Heavy
from .too_big import Big


# All limits, in the order they are checked
ALL: list[type[Limit]] = [Heavy, Big]


def dimension_sum(width: float, height: float, length: float) -> float:
    """Value compared against the Big limit."""
    return width + height + length


__all__ = [
    "Limit",
    "ThresholdExceeded",
    "Heavy",
    "Big",
    "ALL",
    "dimension_sum",
]
