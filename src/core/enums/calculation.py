"""
Calculation outcome enumerations.

Tags attached to resolved leverage, validation failures and the
exchange-rate fetch state.
"""

from enum import StrEnum


class LeverageSource(StrEnum):
    """Where the leverage used in a calculation came from."""

    MANUAL = "manual"  # Entered directly by the user
    DERIVED = "derived"  # Inverted from a preset liquidation price

    @property
    def is_manual(self) -> bool:
        """Check if leverage was set manually."""
        return self == self.MANUAL


class ErrorReason(StrEnum):
    """
    Tagged reasons for a failed calculation.

    Members are listed in the order the pipeline checks them.
    """

    FUNDS_INVALID = "funds_invalid"
    LEVERAGE_OUT_OF_RANGE = "leverage_out_of_range"
    LONG_LIQUIDATION_NOT_BELOW_ENTRY = "long_liquidation_not_below_entry"
    SHORT_LIQUIDATION_NOT_ABOVE_ENTRY = "short_liquidation_not_above_entry"
    DEGENERATE_DENOMINATOR = "degenerate_denominator"
    DERIVED_LEVERAGE_OUT_OF_RANGE = "derived_leverage_out_of_range"

    @property
    def is_liquidation_ordering(self) -> bool:
        """Check if the reason is a directional liquidation-price violation."""
        return self in [
            self.LONG_LIQUIDATION_NOT_BELOW_ENTRY,
            self.SHORT_LIQUIDATION_NOT_ABOVE_ENTRY,
        ]


class FetchStatus(StrEnum):
    """State of the most recent exchange-rate refresh."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
