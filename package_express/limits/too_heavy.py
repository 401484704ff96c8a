"""
Too Heavy Limit

Packages heavier than the maximum weight are not shipped.
"""

from .base import Limit
from ..data import MAX_WEIGHT


class Heavy(Limit):
    """Too heavy - weight over the maximum."""

    # Identity
    name = "HEAVY"

    # Rule
    field = "weight"
    threshold = MAX_WEIGHT

    # Outcome
    message = "Package too heavy to be shipped via Package Express. Have a good day."
