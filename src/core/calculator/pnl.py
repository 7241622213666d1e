"""
Liquidation price, profit/loss, fees and risk/reward.

Optional inputs degrade individual fields to None instead of failing the
calculation.
"""

import math

from src.core.constants import EPSILON
from src.core.enums import PositionType
from src.core.models.config import CalculatorConstants
from src.core.models.results import PnlBreakdown
from src.core.types.financial import ONE, ZERO


def calculate_liquidation_price(
    direction: PositionType,
    entry_price: float,
    leverage: float,
    maintenance_margin_rate: float,
) -> float | None:
    """Estimated liquidation price of a leveraged position.

    Args:
        direction: Position direction
        entry_price: Entry price
        leverage: Leverage multiplier (positive)
        maintenance_margin_rate: Maintenance margin rate

    Returns:
        Liquidation price, or None when the formula gives a non-positive price
    """
    if direction.is_long:
        price = entry_price * (ONE - ONE / leverage + maintenance_margin_rate)
    else:
        price = entry_price * (ONE + ONE / leverage - maintenance_margin_rate)

    if price <= ZERO:
        return None
    return price


def calculate_gross_pnl(direction: PositionType, entry_value: float, exit_value: float) -> float:
    """PnL before fees from entry and exit notional values."""
    if direction.is_long:
        return exit_value - entry_value
    return entry_value - exit_value


def calculate_risk_reward(
    direction: PositionType,
    position_size: float,
    entry_value: float,
    entry_fee: float,
    net_pnl: float,
    liquidation_price: float | None,
    fee_rate: float,
) -> float | None:
    """Reward at the target price relative to the loss at liquidation.

    The risk is the loss when the position is liquidated plus the entry fee
    and the fee on the liquidation exit.

    Returns:
        ``|net_pnl| / risk``; ``math.inf`` if the risk is not above epsilon and
        the trade is profitable; None if the liquidation price is unknown or
        there is neither risk nor profit
    """
    if liquidation_price is None:
        return None

    risk_exit_value = position_size * liquidation_price
    if direction.is_long:
        potential_loss = entry_value - risk_exit_value
    else:
        potential_loss = risk_exit_value - entry_value

    total_risk = potential_loss + entry_fee + risk_exit_value * fee_rate

    if total_risk > EPSILON:
        return abs(net_pnl) / total_risk
    if net_pnl > ZERO:
        return math.inf
    return None


def calculate_pnl(
    direction: PositionType,
    position_size: float,
    entry_price: float,
    target_price: float,
    leverage: float,
    constants: CalculatorConstants,
    exchange_rate: float | None = None,
) -> PnlBreakdown:
    """Full profit/loss breakdown for closing the position at ``target_price``.

    Args:
        direction: Position direction
        position_size: Position size in asset units (positive)
        entry_price: Entry price
        target_price: Exit price
        leverage: Leverage used to size the position
        constants: Calculator constants (fee and maintenance margin rates)
        exchange_rate: Local currency per unit of stable token, if known

    Returns:
        PnL breakdown
    """
    fee_rate = constants.fee_rate

    liquidation_price = calculate_liquidation_price(
        direction, entry_price, leverage, constants.maintenance_margin_rate
    )

    entry_value = position_size * entry_price
    exit_value = position_size * target_price
    gross_pnl = calculate_gross_pnl(direction, entry_value, exit_value)

    entry_fee = entry_value * fee_rate
    exit_fee = exit_value * fee_rate
    net_pnl = gross_pnl - (entry_fee + exit_fee)

    net_pnl_local = net_pnl * exchange_rate if exchange_rate is not None else None

    risk_reward_ratio = calculate_risk_reward(
        direction,
        position_size,
        entry_value,
        entry_fee,
        net_pnl,
        liquidation_price,
        fee_rate,
    )

    return PnlBreakdown(
        entry_value=entry_value,
        exit_value=exit_value,
        entry_fee=entry_fee,
        exit_fee=exit_fee,
        gross_pnl=gross_pnl,
        net_pnl=net_pnl,
        net_pnl_local=net_pnl_local,
        risk_reward_ratio=risk_reward_ratio,
        actual_liquidation_price=liquidation_price,
    )
