"""
Trade metrics pipeline.

validate funds -> margin -> resolve leverage -> position size -> PnL.
The first fatal validation failure ends the pipeline; missing optional
inputs only blank out the fields that depend on them.
"""

from loguru import logger

from src.core.constants import (
    MAX_POSITION_PERCENT,
    MIN_FUNDS,
    MIN_POSITION_PERCENT,
    MIN_PRICE,
)
from src.core.enums import ErrorReason
from src.core.models.config import CalculatorConstants
from src.core.models.inputs import TradeInputs
from src.core.models.results import CalculationError, CalculationOutcome, CalculationResult
from src.core.types.financial import ZERO
from src.core.utils.decorators import log_calculation
from src.core.utils.validation import parse_valid_number

from .leverage_resolver import resolve_leverage
from .pnl import calculate_pnl
from .position_sizing import calculate_margin, calculate_position_size

DEFAULT_CONSTANTS = CalculatorConstants()


@log_calculation
def compute(
    inputs: TradeInputs,
    constants: CalculatorConstants = DEFAULT_CONSTANTS,
    exchange_rate: float | None = None,
) -> CalculationOutcome:
    """Compute all trade metrics for one input set.

    Args:
        inputs: Raw trade inputs
        constants: Leverage bounds, maintenance margin and fee rates
        exchange_rate: Local currency per unit of stable token, if available

    Returns:
        ``CalculationResult`` on success, ``CalculationError`` describing the
        first fatal validation failure otherwise
    """
    funds = parse_valid_number(inputs.funds, MIN_FUNDS)
    if funds is None:
        return CalculationError(
            reason=ErrorReason.FUNDS_INVALID,
            message="please enter valid available funds (> 0)",
        )

    position_percent = parse_valid_number(
        inputs.position_percent, MIN_POSITION_PERCENT, MAX_POSITION_PERCENT
    )
    entry_price = parse_valid_number(inputs.entry_price, MIN_PRICE)
    target_price = parse_valid_number(inputs.target_price, MIN_PRICE)
    local_rate = parse_valid_number(exchange_rate)

    margin = calculate_margin(funds, position_percent)

    leverage = resolve_leverage(
        inputs.direction,
        inputs.manual_leverage,
        entry_price,
        inputs.preset_liquidation_price,
        constants,
    )
    if isinstance(leverage, CalculationError):
        logger.debug(f"Calculation rejected: {leverage.reason}: {leverage.message}")
        return leverage.with_margin(margin)

    position_size = calculate_position_size(margin, leverage, entry_price)

    if (
        position_size <= ZERO
        or leverage is None
        or entry_price is None
        or target_price is None
    ):
        return CalculationResult(margin=margin, leverage=leverage, position_size=position_size)

    pnl = calculate_pnl(
        inputs.direction,
        position_size,
        entry_price,
        target_price,
        leverage.value,
        constants,
        local_rate,
    )
    return CalculationResult(
        margin=margin, leverage=leverage, position_size=position_size, pnl=pnl
    )
