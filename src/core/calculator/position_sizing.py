"""
Margin and position size.

Missing inputs produce a zero result rather than an error so that margin
can still be shown while the rest of the form is incomplete.
"""

from src.core.models.results import ResolvedLeverage
from src.core.types.financial import ZERO, percent_of


def calculate_margin(funds: float | None, position_percent: float | None) -> float:
    """Margin committed to the position.

    Args:
        funds: Parsed available funds
        position_percent: Parsed share of funds to commit (1-100)

    Returns:
        ``funds * position_percent / 100``, or zero if either is missing
    """
    if funds is None or position_percent is None:
        return ZERO
    return percent_of(funds, position_percent)


def calculate_position_size(
    margin: float, leverage: ResolvedLeverage | None, entry_price: float | None
) -> float:
    """Position size in units of the underlying asset.

    Args:
        margin: Committed margin
        leverage: Resolved leverage, or None
        entry_price: Parsed entry price, or None

    Returns:
        ``margin * leverage / entry_price``, or zero if it cannot be sized
    """
    if margin <= ZERO or leverage is None or entry_price is None:
        return ZERO
    return margin * leverage.value / entry_price
