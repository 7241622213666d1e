"""
Trade metrics calculator for leveraged perpetual-futures positions.
"""

from .leverage_resolver import derive_leverage, resolve_leverage
from .pnl import (
    calculate_gross_pnl,
    calculate_liquidation_price,
    calculate_pnl,
    calculate_risk_reward,
)
from .position_sizing import calculate_margin, calculate_position_size
from .trade_metrics import DEFAULT_CONSTANTS, compute

__all__ = [
    "compute",
    "DEFAULT_CONSTANTS",
    "resolve_leverage",
    "derive_leverage",
    "calculate_margin",
    "calculate_position_size",
    "calculate_liquidation_price",
    "calculate_gross_pnl",
    "calculate_risk_reward",
    "calculate_pnl",
]
