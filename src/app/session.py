"""
Calculator session.

Owns the current inputs of the calculator form, recalculates whenever they
change, and handles saving, loading and resetting them.
"""

from loguru import logger

from src.core.calculator import compute
from src.core.constants import SETTINGS_STORAGE_KEY
from src.core.exceptions.calculator import StorageError
from src.core.models.config import CalculatorConstants
from src.core.models.inputs import RawNumber, TradeInputs
from src.core.models.results import CalculationOutcome
from src.core.protocols import SettingsStore
from src.infrastructure.exchange_rate import ExchangeRateRefresher
from src.infrastructure.storage import (
    InMemorySettingsStore,
    clear_inputs,
    load_inputs,
    save_inputs,
)

STATUS_SAVED = "Settings saved"
STATUS_SAVE_FAILED = "Save failed"
STATUS_LOADED = "Settings loaded"
STATUS_LOAD_FAILED = "Load failed"
STATUS_RESET = "All settings reset"


class TradeCalculatorSession:
    """Stateful wrapper around the stateless ``compute`` function.

    The exchange rate comes from the refresher when one is attached; an
    explicitly set rate takes precedence.
    """

    def __init__(
        self,
        constants: CalculatorConstants | None = None,
        store: SettingsStore | None = None,
        refresher: ExchangeRateRefresher | None = None,
        storage_key: str = SETTINGS_STORAGE_KEY,
    ):
        self.constants = constants or CalculatorConstants()
        self.store = store if store is not None else InMemorySettingsStore()
        self.refresher = refresher
        self.storage_key = storage_key
        self.status_message = ""
        self._inputs = TradeInputs.defaults()
        self._exchange_rate: float | None = None
        self._outcome: CalculationOutcome | None = None

    @property
    def inputs(self) -> TradeInputs:
        return self._inputs

    @property
    def outcome(self) -> CalculationOutcome | None:
        """Outcome of the most recent calculation, None after a reset."""
        return self._outcome

    @property
    def exchange_rate(self) -> float | None:
        if self._exchange_rate is not None:
            return self._exchange_rate
        if self.refresher is not None:
            return self.refresher.rate
        return None

    def set_exchange_rate(self, rate: float | None) -> CalculationOutcome:
        """Use a fixed exchange rate and recalculate."""
        self._exchange_rate = rate
        return self.calculate()

    def calculate(self) -> CalculationOutcome:
        """Recalculate from the current inputs."""
        self._outcome = compute(self._inputs, self.constants, self.exchange_rate)
        return self._outcome

    def update(self, **changes: RawNumber | str) -> CalculationOutcome:
        """Change one or more inputs and recalculate."""
        self._inputs = self._inputs.with_changes(**changes)
        return self.calculate()

    def save(self) -> bool:
        """Persist the current inputs."""
        try:
            save_inputs(self.store, self._inputs, self.storage_key)
        except StorageError as e:
            logger.error(f"Failed to save settings: {e}")
            self.status_message = STATUS_SAVE_FAILED
            return False

        self.status_message = STATUS_SAVED
        logger.info(STATUS_SAVED)
        return True

    def load(self) -> TradeInputs:
        """Restore saved inputs, falling back to defaults, and recalculate."""
        try:
            self._inputs = load_inputs(self.store, self.storage_key)
        except StorageError as e:
            logger.error(f"Failed to load settings: {e}")
            self._inputs = TradeInputs.defaults()
            self.status_message = STATUS_LOAD_FAILED
        else:
            self.status_message = STATUS_LOADED

        self.calculate()
        return self._inputs

    def reset(self, forget_saved: bool = False) -> TradeInputs:
        """Restore default inputs and clear the last result.

        Args:
            forget_saved: Also delete the saved inputs from the store
        """
        self._inputs = TradeInputs.defaults()
        self._outcome = None
        if forget_saved:
            try:
                clear_inputs(self.store, self.storage_key)
            except StorageError as e:
                logger.error(f"Failed to clear saved settings: {e}")

        self.status_message = STATUS_RESET
        logger.info(STATUS_RESET)
        return self._inputs
