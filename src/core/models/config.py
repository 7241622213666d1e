"""
Calculator and exchange-rate configuration models.
"""

from dataclasses import dataclass

from src.core.constants import (
    DEFAULT_FEE_RATE,
    EXCHANGE_RATE_CURRENCY,
    EXCHANGE_RATE_REFRESH_SECONDS,
    EXCHANGE_RATE_TIMEOUT_SECONDS,
    EXCHANGE_RATE_URL,
    MAINTENANCE_MARGIN_RATE_DEFAULT,
    MAX_LEVERAGE,
    MIN_LEVERAGE,
)
from src.core.exceptions.calculator import ConfigurationError
from src.core.types.financial import HUNDRED
from src.core.utils.validation import (
    validate_fee_rate,
    validate_leverage_bounds,
    validate_margin_rate,
    validate_positive,
)


@dataclass(frozen=True)
class CalculatorConstants:
    """Fixed parameters for a calculation.

    The fee rate may be chosen when the calculator is set up but is never
    changed by a calculation.
    """

    min_leverage: float = MIN_LEVERAGE
    max_leverage: float = MAX_LEVERAGE
    maintenance_margin_rate: float = MAINTENANCE_MARGIN_RATE_DEFAULT
    fee_rate: float = DEFAULT_FEE_RATE

    def __post_init__(self) -> None:
        """Validate configuration values."""
        validate_leverage_bounds(self.min_leverage, self.max_leverage)
        validate_margin_rate(self.maintenance_margin_rate)
        validate_fee_rate(self.fee_rate)

    @property
    def fee_rate_percent(self) -> float:
        """Fee rate expressed as a percentage (0.0005 -> 0.05)."""
        return self.fee_rate * HUNDRED

    def is_leverage_in_range(self, leverage: float) -> bool:
        """Check a leverage value against the configured bounds."""
        return self.min_leverage <= leverage <= self.max_leverage

    def to_dict(self) -> dict[str, float]:
        """Convert constants to dictionary."""
        return {
            "min_leverage": self.min_leverage,
            "max_leverage": self.max_leverage,
            "maintenance_margin_rate": self.maintenance_margin_rate,
            "fee_rate": self.fee_rate,
        }


@dataclass(frozen=True)
class ExchangeRateConfig:
    """Where and how often to fetch the USD to local-currency rate."""

    url: str = EXCHANGE_RATE_URL
    currency: str = EXCHANGE_RATE_CURRENCY
    refresh_interval_seconds: float = EXCHANGE_RATE_REFRESH_SECONDS
    timeout_seconds: float = EXCHANGE_RATE_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.url:
            raise ConfigurationError("url must not be empty")
        if not self.currency:
            raise ConfigurationError("currency must not be empty")
        validate_positive(self.refresh_interval_seconds, "refresh_interval_seconds")
        validate_positive(self.timeout_seconds, "timeout_seconds")
