"""
Package Express Shipping Quote Calculator

DataFrame in, DataFrame out. The input can come from any source (the
interactive calculator, CSV, manual creation) as long as it contains the
required columns. The output is the same DataFrame with limit flags and the
quote appended.

REQUIRED INPUT COLUMNS
----------------------
    weight              - Package weight
    width               - Package width
    height              - Package height
    length              - Package length

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - dimension_sum, cubic_size

    calculate() adds:
        - limit_* flags (heavy, big)
        - is_shippable
        - cost_quote (null when the package is not shippable)
        - calculator_version

USAGE
-----
    from package_express.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

from decimal import Decimal, ROUND_HALF_UP

import polars as pl

from .version import VERSION
from .data import QUOTE_DIVISOR
from .limits import ALL


REQUIRED_COLUMNS = ["weight", "width", "height", "length"]


# =============================================================================
# SCALAR QUOTE
# =============================================================================

def quote(weight: float, width: float, height: float, length: float) -> float:
    """
    Quote for a single accepted package.

    No validation is done here; callers check the limits first.
    """
    return (width * height * length * weight) / QUOTE_DIVISOR


def format_quote(amount: float) -> str:
    """
    Format a quote as dollars with two decimals (e.g., "$1.20").

    Halves round away from zero (0.125 -> "$0.13"). Decimal(amount) is the
    exact binary value, so only true midpoints round up.
    """
    cents = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"${cents}"


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate shipping quotes for a package DataFrame.

    This is the main entry point. Takes raw package data and returns
    the same DataFrame with limit flags and quotes appended.

    Args:
        df: Raw package DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with supplemented data, limit flags, and quotes
    """
    df = supplement_shipments(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Supplement package data with calculated dimensions.

    Args:
        df: Raw package DataFrame

    Returns:
        DataFrame with added columns:
            - dimension_sum, cubic_size

    Raises:
        ValueError: If any required column is missing
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required column(s): {', '.join(missing)}")

    return df.with_columns([
        (pl.col("width") + pl.col("height") + pl.col("length"))
        .alias("dimension_sum"),

        (pl.col("width") * pl.col("height") * pl.col("length"))
        .alias("cubic_size"),
    ])


# =============================================================================
# CALCULATE
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate quotes for supplemented packages.

    Args:
        df: Supplemented package DataFrame from supplement_shipments

    Returns:
        DataFrame with limit flags, shippable flag, quote and version

    Processing order:
        1. Limit flags   - one boolean column per limit
        2. Shippable     - no limit exceeded
        3. Quote         - only for shippable packages
        4. Version stamp
    """
    df = _apply_limits(df)
    df = _calculate_quote(df)
    df = _stamp_version(df)
    return df


def _apply_limits(df: pl.DataFrame) -> pl.DataFrame:
    """Add a flag per limit and the combined is_shippable column."""
    df = df.with_columns([limit.conditions().alias(limit.flag_column()) for limit in ALL])
    return df.with_columns(
        (~pl.any_horizontal([limit.flag_column() for limit in ALL])).alias("is_shippable")
    )


def _calculate_quote(df: pl.DataFrame) -> pl.DataFrame:
    """Quote = width * height * length * weight / QUOTE_DIVISOR, null if rejected."""
    return df.with_columns(
        pl.when(pl.col("is_shippable"))
        .then(
            pl.col("width") * pl.col("height") * pl.col("length") * pl.col("weight")
            / QUOTE_DIVISOR
        )
        .otherwise(pl.lit(None, dtype=pl.Float64))
        .alias("cost_quote")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_costs",
    "supplement_shipments",
    "calculate",
    "quote",
    "format_quote",
]
