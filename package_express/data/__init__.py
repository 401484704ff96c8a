"""
Package Express Data

Reference data for acceptance limits and the quote rule.

Structure:
    - reference/: Static reference data (limits, quote divisor)
"""

from .reference.limits import (
    MAX_WEIGHT,
    MAX_DIMENSION_SUM,
    QUOTE_DIVISOR,
)

__all__ = [
    "MAX_WEIGHT",
    "MAX_DIMENSION_SUM",
    "QUOTE_DIVISOR",
]
