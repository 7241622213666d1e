"""
Position direction enumeration.

This module defines the allowed directions of a perpetual-futures position.
"""

from enum import StrEnum


class PositionType(StrEnum):
    """
    Allowed position types.

    Defines whether a position is long or short.
    """

    LONG = "long"
    SHORT = "short"

    @property
    def is_long(self) -> bool:
        """Check if position type is long."""
        return self == self.LONG

    @property
    def is_short(self) -> bool:
        """Check if position type is short."""
        return self == self.SHORT
