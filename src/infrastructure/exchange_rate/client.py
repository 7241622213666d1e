"""
HTTP client for the USD to local-currency exchange rate.

Fetches the latest USD rates table and picks out one currency.
"""

import requests
from loguru import logger

from src.core.exceptions.calculator import ExchangeRateError
from src.core.models.config import ExchangeRateConfig
from src.core.utils.validation import parse_valid_number


class ExchangeRateClient:
    """Fetches the USD to local-currency rate over HTTP."""

    def __init__(
        self,
        config: ExchangeRateConfig | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or ExchangeRateConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    @property
    def currency(self) -> str:
        return self.config.currency

    def fetch_rate(self) -> float:
        """Fetch the current rate.

        Returns:
            Units of local currency per USD

        Raises:
            ExchangeRateError: On network errors, bad status codes, or a
                payload without a usable rate for the configured currency
        """
        url = self.config.url
        currency = self.config.currency
        logger.debug(f"Fetching USD/{currency} rate from {url}")

        try:
            response = self.session.get(url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            raise ExchangeRateError(f"Exchange rate request failed: {e}", currency) from e
        except ValueError as e:
            raise ExchangeRateError(f"Exchange rate response is not JSON: {e}", currency) from e

        return self._extract_rate(payload)

    def _extract_rate(self, payload: object) -> float:
        """Pull the configured currency out of a ``{"rates": {...}}`` payload."""
        currency = self.config.currency
        rates = payload.get("rates") if isinstance(payload, dict) else None
        if not isinstance(rates, dict):
            raise ExchangeRateError("Invalid exchange rate payload: missing 'rates'", currency)

        rate = parse_valid_number(rates.get(currency))
        if rate is None:
            raise ExchangeRateError(
                f"Invalid exchange rate payload: no usable rate for {currency}", currency
            )
        return rate

    def get_rate(self) -> float | None:
        """Fetch the current rate, logging and returning None on failure."""
        try:
            rate = self.fetch_rate()
        except ExchangeRateError as e:
            logger.warning(f"Failed to fetch USD/{self.config.currency} rate: {e}")
            return None

        logger.info(f"Fetched USD/{self.config.currency} rate: {rate}")
        return rate
