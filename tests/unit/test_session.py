"""
Unit tests for the calculator session.
"""

from pathlib import Path

import pytest

from src.app.session import (
    STATUS_LOAD_FAILED,
    STATUS_LOADED,
    STATUS_RESET,
    STATUS_SAVE_FAILED,
    STATUS_SAVED,
    TradeCalculatorSession,
)
from src.core.enums import ErrorReason, PositionType
from src.core.models.config import CalculatorConstants
from src.core.models.inputs import TradeInputs
from src.core.models.results import CalculationError, CalculationResult
from src.infrastructure.exchange_rate import ExchangeRateRefresher
from src.infrastructure.storage import InMemorySettingsStore, JsonFileSettingsStore


class StaticRateSource:
    """Always reports the same rate."""

    currency = "TWD"

    def __init__(self, rate: float | None):
        self.rate = rate

    def get_rate(self) -> float | None:
        return self.rate


@pytest.fixture
def session() -> TradeCalculatorSession:
    return TradeCalculatorSession(store=InMemorySettingsStore())


class TestSessionCalculation:
    """Test suite for recalculation on input changes."""

    def test_should_start_with_default_inputs(self, session: TradeCalculatorSession) -> None:
        """Test a new session has default inputs and no outcome."""
        assert session.inputs == TradeInputs.defaults()
        assert session.outcome is None

    def test_should_recalculate_on_update(self, session: TradeCalculatorSession) -> None:
        """Test each update produces a fresh outcome."""
        first = session.update(funds="1000")
        assert isinstance(first, CalculationResult)
        assert first.margin == pytest.approx(100.0)

        second = session.update(position_percent=50)
        assert isinstance(second, CalculationResult)
        assert second.margin == pytest.approx(500.0)
        assert session.outcome is second

    def test_should_report_validation_errors(self, session: TradeCalculatorSession) -> None:
        """Test an invalid input set yields the error as the outcome."""
        outcome = session.update(funds="")

        assert isinstance(outcome, CalculationError)
        assert outcome.reason == ErrorReason.FUNDS_INVALID

    def test_should_use_configured_constants(self) -> None:
        """Test the session passes its constants to the calculator."""
        session = TradeCalculatorSession(constants=CalculatorConstants(fee_rate=0.0))

        outcome = session.update(
            funds="1000", entry_price="100", manual_leverage="2", target_price="110"
        )

        assert isinstance(outcome, CalculationResult)
        assert outcome.total_fee == 0.0


class TestSessionExchangeRate:
    """Test suite for exchange-rate handling."""

    def test_should_use_explicit_rate(self, session: TradeCalculatorSession) -> None:
        """Test set_exchange_rate feeds the local-currency PnL."""
        session.update(
            funds="1000", entry_price="60000", manual_leverage="10", target_price="58000"
        )

        outcome = session.set_exchange_rate(32.0)

        assert isinstance(outcome, CalculationResult)
        assert outcome.net_pnl_local == pytest.approx(outcome.net_pnl * 32.0)

    @pytest.mark.asyncio
    async def test_should_read_rate_from_refresher(self) -> None:
        """Test the refresher's latest rate is used when no rate is set."""
        refresher = ExchangeRateRefresher(StaticRateSource(30.0))
        session = TradeCalculatorSession(refresher=refresher)
        session.update(funds="1000", entry_price="60000", manual_leverage="10", target_price="58000")
        assert session.exchange_rate is None

        await refresher.refresh()
        outcome = session.calculate()

        assert session.exchange_rate == 30.0
        assert isinstance(outcome, CalculationResult)
        assert outcome.net_pnl_local == pytest.approx(outcome.net_pnl * 30.0)


class TestSessionPersistence:
    """Test suite for save/load/reset."""

    def test_should_save_and_load_inputs(self) -> None:
        """Test inputs survive a new session sharing the store."""
        store = InMemorySettingsStore()
        first = TradeCalculatorSession(store=store)
        first.update(direction="long", funds="1000", entry_price="50000")

        assert first.save() is True
        assert first.status_message == STATUS_SAVED

        second = TradeCalculatorSession(store=store)
        inputs = second.load()

        assert inputs.direction == PositionType.LONG
        assert inputs.funds == "1000"
        assert second.status_message == STATUS_LOADED
        assert isinstance(second.outcome, CalculationResult)

    def test_should_report_failed_save(self, tmp_path: Path) -> None:
        """Test storage errors become a failure status."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        session = TradeCalculatorSession(store=JsonFileSettingsStore(blocker / "settings.json"))

        assert session.save() is False
        assert session.status_message == STATUS_SAVE_FAILED

    def test_should_fall_back_to_defaults_on_failed_load(self, tmp_path: Path) -> None:
        """Test a corrupt store loads defaults."""
        path = tmp_path / "settings.json"
        path.write_text("{corrupt", encoding="utf-8")
        session = TradeCalculatorSession(store=JsonFileSettingsStore(path))
        session.update(funds="999")

        inputs = session.load()

        assert inputs == TradeInputs.defaults()
        assert session.status_message == STATUS_LOAD_FAILED

    def test_should_reset_inputs_and_result(self, session: TradeCalculatorSession) -> None:
        """Test reset restores defaults and clears the outcome."""
        session.update(funds="1000", direction="long")
        session.save()

        inputs = session.reset()

        assert inputs == TradeInputs.defaults()
        assert session.outcome is None
        assert session.status_message == STATUS_RESET
        assert session.load().funds == "1000"

    def test_should_forget_saved_inputs_on_reset(self, session: TradeCalculatorSession) -> None:
        """Test reset can also delete saved inputs."""
        session.update(funds="1000")
        session.save()

        session.reset(forget_saved=True)

        assert session.load() == TradeInputs.defaults()
