"""
Flat snapshot of calculator inputs for persistence.

Loading never fails: any field that is absent or unusable falls back to
its default.
"""

import json
from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError, field_validator

from src.core.constants import (
    DEFAULT_POSITION_PERCENT,
    MAX_POSITION_PERCENT,
    MIN_POSITION_PERCENT,
    SETTINGS_STORAGE_KEY,
)
from src.core.enums import PositionType
from src.core.models.inputs import RawNumber, TradeInputs
from src.core.protocols import SettingsStore
from src.core.utils.validation import is_numeric_input, parse_valid_number

NUMERIC_TEXT_FIELDS = (
    "manual_leverage",
    "funds",
    "entry_price",
    "preset_liquidation_price",
    "target_price",
)


class InputSnapshot(BaseModel):
    """Stored form of ``TradeInputs``; empty strings mean "not entered"."""

    direction: PositionType = PositionType.SHORT
    manual_leverage: str = ""
    funds: str = ""
    position_percent: int = DEFAULT_POSITION_PERCENT
    entry_price: str = ""
    preset_liquidation_price: str = ""
    target_price: str = ""

    @field_validator("direction", mode="before")
    @classmethod
    def default_direction(cls, v: Any) -> Any:
        """Unknown directions fall back to short."""
        if isinstance(v, str) and v.strip().lower() in {p.value for p in PositionType}:
            return v.strip().lower()
        return PositionType.SHORT

    @field_validator(*NUMERIC_TEXT_FIELDS, mode="before")
    @classmethod
    def default_numeric_text(cls, v: Any) -> str:
        """Keep numeric entries as text; anything else becomes empty."""
        if not is_numeric_input(v):
            return ""
        return v.strip() if isinstance(v, str) else str(v)

    @field_validator("position_percent", mode="before")
    @classmethod
    def default_position_percent(cls, v: Any) -> int:
        """Whole percentages in 1-100 are kept; anything else becomes the default."""
        percent = parse_valid_number(v, MIN_POSITION_PERCENT, MAX_POSITION_PERCENT)
        if percent is None or not percent.is_integer():
            return DEFAULT_POSITION_PERCENT
        return int(percent)

    @classmethod
    def from_inputs(cls, inputs: TradeInputs) -> "InputSnapshot":
        """Build a snapshot from an input set."""
        return cls.model_validate(
            {
                "direction": inputs.direction.value,
                "manual_leverage": inputs.manual_leverage,
                "funds": inputs.funds,
                "position_percent": inputs.position_percent,
                "entry_price": inputs.entry_price,
                "preset_liquidation_price": inputs.preset_liquidation_price,
                "target_price": inputs.target_price,
            }
        )

    def to_inputs(self) -> TradeInputs:
        """Convert back into an input set."""

        def _raw(text: str) -> RawNumber:
            return text or None

        return TradeInputs(
            direction=self.direction,
            funds=_raw(self.funds),
            position_percent=self.position_percent,
            entry_price=_raw(self.entry_price),
            manual_leverage=_raw(self.manual_leverage),
            preset_liquidation_price=_raw(self.preset_liquidation_price),
            target_price=_raw(self.target_price),
        )


def save_inputs(
    store: SettingsStore, inputs: TradeInputs, key: str = SETTINGS_STORAGE_KEY
) -> InputSnapshot:
    """Serialize inputs into the store.

    Raises:
        StorageError: If the store cannot be written
    """
    snapshot = InputSnapshot.from_inputs(inputs)
    store.set(key, snapshot.model_dump_json())
    return snapshot


def load_inputs(store: SettingsStore, key: str = SETTINGS_STORAGE_KEY) -> TradeInputs:
    """Restore inputs from the store, substituting defaults for bad fields.

    Raises:
        StorageError: If the store itself cannot be read
    """
    raw = store.get(key)
    if raw is None:
        return TradeInputs.defaults()

    try:
        data = json.loads(raw)
        snapshot = InputSnapshot.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to load saved settings: {e}")
        return TradeInputs.defaults()

    return snapshot.to_inputs()


def clear_inputs(store: SettingsStore, key: str = SETTINGS_STORAGE_KEY) -> None:
    """Remove saved inputs from the store."""
    store.remove(key)
