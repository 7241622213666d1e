"""
Exchange-rate infrastructure.

Fetches the USD to local-currency rate used to express PnL in a second
currency.
"""

from .client import ExchangeRateClient
from .refresher import ExchangeRateRefresher

__all__ = ["ExchangeRateClient", "ExchangeRateRefresher"]
