"""
Validation utilities for calculator inputs and configuration.

``parse_valid_number`` is the gate for every user-supplied number: it never
raises and returns None for anything unusable. The ``validate_*`` helpers are
for configuration values and raise ``ConfigurationError``.
"""

import math
from typing import Any

from src.core.exceptions.calculator import ConfigurationError


def parse_valid_number(
    raw: Any,
    min_value: float = -math.inf,
    max_value: float = math.inf,
    allow_zero: bool = False,
) -> float | None:
    """Parse a raw input into a bounded float.

    Args:
        raw: Number or string as entered by the user
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound
        allow_zero: Accept ``>= 0`` instead of ``> 0``

    Returns:
        The parsed value, or None if it is missing, non-numeric or out of range

    Examples:
        >>> parse_valid_number(" 1.5 ")
        1.5
        >>> parse_valid_number("abc") is None
        True
        >>> parse_valid_number(0, allow_zero=True)
        0.0
    """
    value = to_finite_float(raw)
    if value is None:
        return None

    if allow_zero and value < 0:
        return None
    if not allow_zero and value <= 0:
        return None
    if value < min_value or value > max_value:
        return None

    return value


def to_finite_float(raw: Any) -> float | None:
    """Convert a number or numeric string to a finite float.

    Booleans, blank strings, NaN, infinities and integers too large for a
    float are rejected.
    """
    if isinstance(raw, bool):
        return None

    if isinstance(raw, int | float):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


def is_numeric_input(raw: Any) -> bool:
    """Check whether a raw input holds a number, regardless of its range."""
    return to_finite_float(raw) is not None


def validate_margin_rate(rate: float, param_name: str = "maintenance_margin_rate") -> float:
    """Validate that a margin rate is in ``[0, 1)``.

    Args:
        rate: Rate to validate
        param_name: Parameter name for error messages

    Returns:
        The validated rate

    Raises:
        ConfigurationError: If rate is outside ``[0, 1)``
    """
    if not 0 <= rate < 1:
        raise ConfigurationError(f"{param_name} must be in [0, 1), got {rate}")
    return rate


def validate_fee_rate(rate: float, param_name: str = "fee_rate") -> float:
    """Validate that a fee rate is in ``[0, 1)``.

    Raises:
        ConfigurationError: If rate is outside ``[0, 1)``
    """
    if not 0 <= rate < 1:
        raise ConfigurationError(f"{param_name} must be in [0, 1), got {rate}")
    return rate


def validate_leverage_bounds(min_leverage: float, max_leverage: float) -> tuple[float, float]:
    """Validate that ``1 <= min_leverage <= max_leverage``.

    Raises:
        ConfigurationError: If the bounds are inconsistent
    """
    if min_leverage < 1:
        raise ConfigurationError(f"min_leverage must be at least 1, got {min_leverage}")
    if max_leverage < min_leverage:
        raise ConfigurationError(
            f"max_leverage ({max_leverage}) must not be below min_leverage ({min_leverage})"
        )
    return min_leverage, max_leverage


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Raises:
        ConfigurationError: If value is not positive
    """
    if value <= 0:
        raise ConfigurationError(f"{param_name} must be positive, got {value}")
    return value
