"""
Periodic exchange-rate refresher.

Fetches once at startup and then on a fixed interval in a background
asyncio task. A failed refresh keeps the last successful rate.
"""

import asyncio
import contextlib
from collections.abc import Callable
from datetime import UTC, datetime

from loguru import logger

from src.core.constants import EXCHANGE_RATE_REFRESH_SECONDS
from src.core.enums import FetchStatus
from src.core.protocols import ExchangeRateSource
from src.core.utils.validation import validate_positive


class ExchangeRateRefresher:
    """Keeps the latest exchange rate available to the calculator."""

    def __init__(
        self,
        source: ExchangeRateSource,
        interval_seconds: float = EXCHANGE_RATE_REFRESH_SECONDS,
        on_update: Callable[[float | None], None] | None = None,
    ):
        self.source = source
        self.interval_seconds = validate_positive(interval_seconds, "interval_seconds")
        self.on_update = on_update
        self._rate: float | None = None
        self._status = FetchStatus.LOADING
        self._last_updated: datetime | None = None
        self._task: asyncio.Task[None] | None = None

    @property
    def rate(self) -> float | None:
        """Last successfully fetched rate, or None if none has succeeded."""
        return self._rate

    @property
    def status(self) -> FetchStatus:
        return self._status

    @property
    def last_updated(self) -> datetime | None:
        """Time of the last successful refresh."""
        return self._last_updated

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh(self) -> float | None:
        """Fetch the rate once.

        The blocking source runs in the default executor.

        Returns:
            The rate now held by the refresher (possibly a stale one)
        """
        self._status = FetchStatus.LOADING
        loop = asyncio.get_running_loop()
        rate = await loop.run_in_executor(None, self.source.get_rate)

        if rate is None:
            self._status = FetchStatus.ERROR
            if self._rate is not None:
                logger.warning(f"Exchange rate refresh failed, keeping last rate {self._rate}")
        else:
            self._rate = rate
            self._status = FetchStatus.SUCCESS
            self._last_updated = datetime.now(UTC)
            logger.success(f"Exchange rate updated: 1 USD = {rate} {self.source.currency}")

        if self.on_update is not None:
            self.on_update(self._rate)
        return self._rate

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.refresh()
            except Exception:
                self._status = FetchStatus.ERROR
                logger.exception("Exchange rate refresh raised, retrying next interval")

    async def start(self) -> None:
        """Fetch immediately, then keep refreshing in the background."""
        if self.is_running:
            return
        await self.refresh()
        self._task = asyncio.create_task(self._run())
        logger.debug(f"Exchange rate refresher started (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Cancel the background refresh loop."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.debug("Exchange rate refresher stopped")
