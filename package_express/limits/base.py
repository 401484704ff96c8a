"""
Limit Base Class

Shared base class for Package Express acceptance limits.
"""

from abc import ABC
import polars as pl


# =============================================================================
# EXCEPTIONS
# =============================================================================

class ThresholdExceeded(ValueError):
    """A package value is over one of the acceptance limits."""

    def __init__(self, limit: type["Limit"], value: float):
        self.limit = limit
        self.value = value
        super().__init__(
            f"{limit.name}: {limit.field} {value} exceeds limit of {limit.threshold}"
        )


# =============================================================================
# BASE CLASS
# =============================================================================

class Limit(ABC):
    """
    Base class for all acceptance limits.

    Attributes:
        IDENTITY
            name        - Short code (e.g., "HEAVY", "BIG")

        RULE
            field       - Column (or value) compared against the threshold
            threshold   - Largest accepted value (inclusive)

        OUTCOME
            message     - Text shown to the user when the package is rejected
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # RULE
    # -------------------------------------------------------------------------
    field: str
    threshold: float

    # -------------------------------------------------------------------------
    # OUTCOME
    # -------------------------------------------------------------------------
    message: str

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def flag_column(cls) -> str:
        """Output column holding this limit's flag (e.g., "limit_heavy")."""
        return f"limit_{cls.name.lower()}"

    @classmethod
    def exceeded(cls, value: float) -> bool:
        """True if value is over the threshold."""
        return value > cls.threshold

    @classmethod
    def check(cls, value: float) -> float:
        """Return value unchanged, or raise ThresholdExceeded if it is over the limit."""
        if cls.exceeded(value):
            raise ThresholdExceeded(cls, value)
        return value

    @classmethod
    def conditions(cls) -> pl.Expr:
        """Polars expression that is True when this limit is exceeded."""
        return pl.col(cls.field) > cls.threshold
