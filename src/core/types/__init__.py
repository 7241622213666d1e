"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    CURRENCY_DECIMALS,
    HUNDRED,
    INFINITY_SYMBOL,
    LEVERAGE_DECIMALS,
    ONE,
    PLACEHOLDER,
    QUANTITY_DECIMALS,
    RATIO_DECIMALS,
    ZERO,
    format_currency,
    format_leverage,
    format_number,
    format_quantity,
    format_ratio,
    format_signed_currency,
    percent_of,
)

__all__ = [
    # Utility functions
    "percent_of",
    "format_number",
    "format_currency",
    "format_quantity",
    "format_leverage",
    "format_ratio",
    "format_signed_currency",
    # Constants
    "CURRENCY_DECIMALS",
    "QUANTITY_DECIMALS",
    "LEVERAGE_DECIMALS",
    "RATIO_DECIMALS",
    "PLACEHOLDER",
    "INFINITY_SYMBOL",
    "ZERO",
    "ONE",
    "HUNDRED",
]
