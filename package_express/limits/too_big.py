"""
Too Big Limit

Packages whose width + height + length is over the maximum are not shipped.
"""

from .base import Limit
from ..data import MAX_DIMENSION_SUM


class Big(Limit):
    """Too big - sum of dimensions over the maximum."""

    # Identity
    name = "BIG"

    # Rule
    field = "dimension_sum"
    threshold = MAX_DIMENSION_SUM

    # Outcome
    message = "Package too big to be shipped via Package Express."
