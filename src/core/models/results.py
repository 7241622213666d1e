"""
Calculation result models.

A calculation produces either a ``CalculationResult`` or a
``CalculationError``; both are immutable values.
"""

import math
from dataclasses import dataclass

from src.core.enums import ErrorReason, LeverageSource


@dataclass(frozen=True)
class ResolvedLeverage:
    """Leverage used for a calculation and where it came from."""

    value: float
    source: LeverageSource

    @property
    def is_manual(self) -> bool:
        """Check if leverage was entered manually."""
        return self.source.is_manual


@dataclass(frozen=True)
class CalculationError:
    """A failed calculation.

    ``value`` carries the offending number for diagnostics (the derived
    leverage when it is out of range). ``margin`` is whatever margin had been
    computed before the failure.
    """

    reason: ErrorReason
    message: str
    value: float | None = None
    margin: float | None = None

    def with_margin(self, margin: float) -> "CalculationError":
        """Return a copy carrying the margin computed before the failure."""
        return CalculationError(self.reason, self.message, self.value, margin)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class PnlBreakdown:
    """Profit, fees and risk for a position closed at the target price."""

    entry_value: float
    exit_value: float
    entry_fee: float
    exit_fee: float
    gross_pnl: float
    net_pnl: float
    net_pnl_local: float | None
    risk_reward_ratio: float | None
    actual_liquidation_price: float | None

    @property
    def total_fee(self) -> float:
        """Entry fee plus exit fee."""
        return self.entry_fee + self.exit_fee


@dataclass(frozen=True)
class CalculationResult:
    """Metrics for one trade setup.

    Position size and margin fall back to zero when their inputs are
    missing. PnL fields are None unless a target price was given and a
    position could be sized.
    """

    margin: float
    leverage: ResolvedLeverage | None
    position_size: float
    pnl: PnlBreakdown | None = None

    @property
    def has_pnl(self) -> bool:
        """Check if the PnL stage ran."""
        return self.pnl is not None

    @property
    def gross_pnl(self) -> float | None:
        return self.pnl.gross_pnl if self.pnl else None

    @property
    def total_fee(self) -> float | None:
        return self.pnl.total_fee if self.pnl else None

    @property
    def net_pnl(self) -> float | None:
        return self.pnl.net_pnl if self.pnl else None

    @property
    def net_pnl_local(self) -> float | None:
        return self.pnl.net_pnl_local if self.pnl else None

    @property
    def risk_reward_ratio(self) -> float | None:
        """Reward/risk as a float, ``math.inf`` if there is no risk, else None."""
        return self.pnl.risk_reward_ratio if self.pnl else None

    @property
    def actual_liquidation_price(self) -> float | None:
        return self.pnl.actual_liquidation_price if self.pnl else None

    @property
    def is_risk_free(self) -> bool:
        """Check if the risk/reward ratio is infinite."""
        ratio = self.risk_reward_ratio
        return ratio is not None and math.isinf(ratio)


CalculationOutcome = CalculationResult | CalculationError
