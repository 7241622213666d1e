"""
Financial value helpers and display formatting.

All calculator arithmetic runs on plain floats. Rounding happens only when a
value is rendered, using the fixed precisions below:

- currency amounts (margin, PnL, fees, prices): 2 decimals
- asset quantity (position size): 6 decimals
- leverage multiplier: 1 decimal
- risk/reward ratio: 2 decimals

Absent values render as a placeholder dash, never as zero.
"""

import math

# Display precision (number of decimal places)
CURRENCY_DECIMALS = 2
QUANTITY_DECIMALS = 6
LEVERAGE_DECIMALS = 1
RATIO_DECIMALS = 2

# Common financial values as float constants
ZERO = 0.0
ONE = 1.0
HUNDRED = 100.0

PLACEHOLDER = "-"
INFINITY_SYMBOL = "∞"


def percent_of(amount: float, percent: float) -> float:
    """Return ``percent`` percent of ``amount``."""
    return amount * percent / HUNDRED


def format_number(value: float | None, decimals: int) -> str:
    """Format a number with thousands separators and fixed decimals.

    Args:
        value: Number to format, or None when not applicable
        decimals: Number of decimal places

    Returns:
        Formatted string, or the placeholder dash for None
    """
    if value is None:
        return PLACEHOLDER
    return f"{value:,.{decimals}f}"


def format_currency(value: float | None) -> str:
    """Format a currency amount with 2 decimals."""
    return format_number(value, CURRENCY_DECIMALS)


def format_quantity(value: float | None) -> str:
    """Format an asset quantity with 6 decimals."""
    return format_number(value, QUANTITY_DECIMALS)


def format_leverage(value: float | None) -> str:
    """Format a leverage multiplier with 1 decimal, e.g. ``10.0x``."""
    if value is None:
        return PLACEHOLDER
    return f"{value:.{LEVERAGE_DECIMALS}f}x"


def format_ratio(value: float | None) -> str:
    """Format a risk/reward ratio.

    Examples:
        >>> format_ratio(0.3333)
        '0.33'
        >>> format_ratio(math.inf)
        '∞'
        >>> format_ratio(None)
        '-'
    """
    if value is None:
        return PLACEHOLDER
    if math.isinf(value):
        return INFINITY_SYMBOL
    return f"{value:.{RATIO_DECIMALS}f}"


def format_signed_currency(value: float | None) -> str:
    """Format a PnL amount with an explicit sign for gains."""
    if value is None:
        return PLACEHOLDER
    sign = "+" if value > ZERO else ""
    return f"{sign}{format_currency(value)}"
