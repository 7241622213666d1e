"""
Core enumerations for the trade calculator.

This module provides centralized enumerations for domain concepts
like position direction, leverage source and validation reasons.
"""

from .calculation import ErrorReason, FetchStatus, LeverageSource
from .position_types import PositionType

__all__ = ["PositionType", "LeverageSource", "ErrorReason", "FetchStatus"]
