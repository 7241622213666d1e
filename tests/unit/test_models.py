"""
Unit tests for input, configuration and result models.
"""

import dataclasses
import math

import pytest

from src.core.constants import DEFAULT_FEE_RATE, MAINTENANCE_MARGIN_RATE_DEFAULT
from src.core.enums import ErrorReason, LeverageSource, PositionType
from src.core.exceptions.calculator import ConfigurationError
from src.core.models.config import CalculatorConstants, ExchangeRateConfig
from src.core.models.inputs import TradeInputs
from src.core.models.results import (
    CalculationError,
    CalculationResult,
    PnlBreakdown,
    ResolvedLeverage,
)


class TestTradeInputs:
    """Test suite for TradeInputs."""

    def test_should_default_to_short_with_ten_percent(self) -> None:
        """Test default inputs."""
        inputs = TradeInputs.defaults()

        assert inputs.direction == PositionType.SHORT
        assert inputs.position_percent == 10
        assert inputs.funds is None
        assert inputs.manual_leverage is None

    def test_should_coerce_direction_string(self) -> None:
        """Test direction strings become PositionType."""
        assert TradeInputs(direction="long").direction is PositionType.LONG

    def test_should_reject_unknown_direction(self) -> None:
        """Test invalid direction raises."""
        with pytest.raises(ValueError):
            TradeInputs(direction="flat")

    def test_should_be_immutable(self) -> None:
        """Test inputs cannot be mutated in place."""
        inputs = TradeInputs(funds="100")
        with pytest.raises(dataclasses.FrozenInstanceError):
            inputs.funds = "200"  # type: ignore[misc]

    def test_should_copy_with_changes(self) -> None:
        """Test with_changes returns a new instance."""
        inputs = TradeInputs(funds="100")
        changed = inputs.with_changes(funds="200", direction="long")

        assert changed.funds == "200"
        assert changed.direction == PositionType.LONG
        assert inputs.funds == "100"


class TestCalculatorConstants:
    """Test suite for CalculatorConstants."""

    def test_should_use_default_constants(self) -> None:
        """Test default values."""
        constants = CalculatorConstants()

        assert constants.min_leverage == 1
        assert constants.max_leverage == 125
        assert constants.maintenance_margin_rate == MAINTENANCE_MARGIN_RATE_DEFAULT == 0.004
        assert constants.fee_rate == DEFAULT_FEE_RATE == 0.0005
        assert constants.fee_rate_percent == pytest.approx(0.05)

    def test_should_check_leverage_range(self) -> None:
        """Test inclusive leverage bounds."""
        constants = CalculatorConstants()

        assert constants.is_leverage_in_range(1)
        assert constants.is_leverage_in_range(125)
        assert not constants.is_leverage_in_range(0.99)
        assert not constants.is_leverage_in_range(125.01)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"fee_rate": -0.1},
            {"fee_rate": 1.0},
            {"maintenance_margin_rate": -0.001},
            {"min_leverage": 0},
            {"min_leverage": 50, "max_leverage": 10},
        ],
    )
    def test_should_reject_invalid_configuration(self, kwargs: dict) -> None:
        """Test invalid constants raise ConfigurationError."""
        with pytest.raises(ConfigurationError):
            CalculatorConstants(**kwargs)

    def test_should_convert_to_dict(self) -> None:
        """Test to_dict."""
        assert CalculatorConstants(fee_rate=0.001).to_dict() == {
            "min_leverage": 1.0,
            "max_leverage": 125.0,
            "maintenance_margin_rate": 0.004,
            "fee_rate": 0.001,
        }


class TestExchangeRateConfig:
    """Test suite for ExchangeRateConfig."""

    def test_should_default_to_hourly_twd(self) -> None:
        """Test default configuration."""
        config = ExchangeRateConfig()

        assert config.currency == "TWD"
        assert config.refresh_interval_seconds == 3600
        assert config.url.endswith("/USD")

    @pytest.mark.parametrize(
        "kwargs",
        [{"url": ""}, {"currency": ""}, {"refresh_interval_seconds": 0}, {"timeout_seconds": -1}],
    )
    def test_should_reject_invalid_configuration(self, kwargs: dict) -> None:
        """Test invalid configuration raises."""
        with pytest.raises(ConfigurationError):
            ExchangeRateConfig(**kwargs)


class TestResults:
    """Test suite for result models."""

    def test_should_expose_pnl_fields_through_result(self) -> None:
        """Test result properties delegate to the PnL breakdown."""
        pnl = PnlBreakdown(
            entry_value=1000.0,
            exit_value=1100.0,
            entry_fee=0.5,
            exit_fee=0.55,
            gross_pnl=100.0,
            net_pnl=98.95,
            net_pnl_local=None,
            risk_reward_ratio=math.inf,
            actual_liquidation_price=None,
        )
        result = CalculationResult(
            margin=100.0,
            leverage=ResolvedLeverage(10.0, LeverageSource.MANUAL),
            position_size=0.02,
            pnl=pnl,
        )

        assert result.has_pnl
        assert result.total_fee == pytest.approx(1.05)
        assert result.net_pnl == 98.95
        assert result.is_risk_free
        assert result.leverage is not None and result.leverage.is_manual

    def test_should_return_none_fields_without_pnl(self) -> None:
        """Test PnL properties are None when the stage did not run."""
        result = CalculationResult(margin=0.0, leverage=None, position_size=0.0)

        assert not result.has_pnl
        assert result.gross_pnl is None
        assert result.total_fee is None
        assert result.net_pnl_local is None
        assert result.actual_liquidation_price is None
        assert not result.is_risk_free

    def test_should_attach_margin_to_error(self) -> None:
        """Test with_margin keeps reason and message."""
        error = CalculationError(ErrorReason.LEVERAGE_OUT_OF_RANGE, "leverage must be between 1~125")

        with_margin = error.with_margin(100.0)

        assert with_margin.reason == error.reason
        assert with_margin.margin == 100.0
        assert error.margin is None
        assert str(with_margin) == "leverage must be between 1~125"
