"""
Package Express

Shipping quote calculator for Package Express (single package, flat quote rule).
"""

from .calculate_costs import calculate_costs, quote, format_quote
from .version import VERSION

__all__ = ["calculate_costs", "quote", "format_quote", "VERSION"]
