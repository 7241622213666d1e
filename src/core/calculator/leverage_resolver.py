"""
Leverage resolution.

Leverage comes either from a manual entry or from inverting the
liquidation-price formula for a preset liquidation price:

    long:  L = 1 / (1 + mmr - liq / entry)
    short: L = 1 / (liq / entry - 1 + mmr)
"""

from loguru import logger

from src.core.constants import EPSILON, MIN_PRICE
from src.core.enums import ErrorReason, LeverageSource, PositionType
from src.core.models.config import CalculatorConstants
from src.core.models.inputs import RawNumber
from src.core.models.results import CalculationError, ResolvedLeverage
from src.core.types.financial import ONE
from src.core.utils.validation import is_numeric_input, parse_valid_number


def derive_leverage(
    direction: PositionType,
    entry_price: float,
    liquidation_price: float,
    maintenance_margin_rate: float,
) -> float | CalculationError:
    """Invert the liquidation-price formula.

    The result is not bounds-checked. Directional ordering of the prices is
    expected to be validated by the caller.

    Args:
        direction: Position direction
        entry_price: Entry price (positive)
        liquidation_price: Target liquidation price (positive)
        maintenance_margin_rate: Maintenance margin rate

    Returns:
        Leverage, or a degenerate-denominator error when the denominator is
        not above epsilon (zero or negative leverage requirement)
    """
    ratio = liquidation_price / entry_price
    if direction.is_long:
        denominator = ONE + maintenance_margin_rate - ratio
    else:
        denominator = ratio - ONE + maintenance_margin_rate

    if denominator <= EPSILON:
        return CalculationError(
            reason=ErrorReason.DEGENERATE_DENOMINATOR,
            message="cannot derive leverage from the given prices",
            value=denominator,
        )
    return ONE / denominator


def _check_liquidation_ordering(
    direction: PositionType, entry_price: float, liquidation_price: float
) -> CalculationError | None:
    """Check that the preset liquidation price sits on the losing side of entry."""
    if direction.is_long and liquidation_price >= entry_price:
        return CalculationError(
            reason=ErrorReason.LONG_LIQUIDATION_NOT_BELOW_ENTRY,
            message="preset liquidation price must be below entry price for long",
        )
    if direction.is_short and liquidation_price <= entry_price:
        return CalculationError(
            reason=ErrorReason.SHORT_LIQUIDATION_NOT_ABOVE_ENTRY,
            message="preset liquidation price must be above entry price for short",
        )
    return None


def _bounds_text(constants: CalculatorConstants) -> str:
    return f"{constants.min_leverage:g}~{constants.max_leverage:g}"


def resolve_leverage(
    direction: PositionType,
    manual_leverage: RawNumber,
    entry_price: float | None,
    preset_liquidation_price: RawNumber,
    constants: CalculatorConstants,
) -> ResolvedLeverage | CalculationError | None:
    """Decide which leverage a calculation uses.

    Args:
        direction: Position direction
        manual_leverage: Raw manual leverage entry
        entry_price: Parsed entry price, or None
        preset_liquidation_price: Raw preset liquidation price entry
        constants: Calculator constants

    Returns:
        The resolved leverage, a ``CalculationError``, or None when there is
        not enough input to resolve a leverage
    """
    if is_numeric_input(manual_leverage):
        leverage = parse_valid_number(
            manual_leverage, constants.min_leverage, constants.max_leverage
        )
        if leverage is None:
            return CalculationError(
                reason=ErrorReason.LEVERAGE_OUT_OF_RANGE,
                message=f"leverage must be between {_bounds_text(constants)}",
            )
        return ResolvedLeverage(leverage, LeverageSource.MANUAL)

    liquidation_price = parse_valid_number(preset_liquidation_price, MIN_PRICE)
    if entry_price is None or liquidation_price is None:
        return None

    ordering_error = _check_liquidation_ordering(direction, entry_price, liquidation_price)
    if ordering_error is not None:
        return ordering_error

    derived = derive_leverage(
        direction, entry_price, liquidation_price, constants.maintenance_margin_rate
    )
    if isinstance(derived, CalculationError):
        logger.debug(f"Leverage derivation failed: denominator={derived.value}")
        return derived

    if not constants.is_leverage_in_range(derived):
        return CalculationError(
            reason=ErrorReason.DERIVED_LEVERAGE_OUT_OF_RANGE,
            message=(
                f"derived leverage ({derived:.2f}x) out of range ({_bounds_text(constants)})"
            ),
            value=derived,
        )

    return ResolvedLeverage(derived, LeverageSource.DERIVED)
