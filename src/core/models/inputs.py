"""
Trade input model.

Values are kept exactly as the user supplied them; parsing and validation
happen inside the calculator.
"""

from dataclasses import dataclass, replace

from src.core.constants import DEFAULT_POSITION_PERCENT
from src.core.enums import PositionType

RawNumber = str | int | float | None


@dataclass(frozen=True)
class TradeInputs:
    """One set of calculator inputs.

    ``manual_leverage`` takes precedence over ``preset_liquidation_price``
    when both are present.
    """

    direction: PositionType = PositionType.SHORT
    funds: RawNumber = None
    position_percent: RawNumber = DEFAULT_POSITION_PERCENT
    entry_price: RawNumber = None
    manual_leverage: RawNumber = None
    preset_liquidation_price: RawNumber = None
    target_price: RawNumber = None

    def __post_init__(self) -> None:
        """Coerce direction strings into ``PositionType``."""
        if not isinstance(self.direction, PositionType):
            object.__setattr__(self, "direction", PositionType(self.direction))

    def with_changes(self, **changes: RawNumber | PositionType) -> "TradeInputs":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def defaults(cls) -> "TradeInputs":
        """Initial input set: short, 10% of funds, everything else empty."""
        return cls()
