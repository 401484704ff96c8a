"""
Package Limits Configuration

Package Express acceptance limits and quote rule.
"""

# Acceptance limits (inclusive - a value equal to the limit is accepted)
MAX_WEIGHT = 50               # Heaviest package accepted
MAX_DIMENSION_SUM = 50        # Largest width + height + length accepted

# Quote rule: width * height * length * weight / QUOTE_DIVISOR
QUOTE_DIVISOR = 100
