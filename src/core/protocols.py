"""
Core protocols for the calculator's external collaborators.

The calculator itself never talks to these; the application layer wires
them in.
"""

from typing import Protocol


class ExchangeRateSource(Protocol):
    """Protocol for anything that can report the USD to local-currency rate."""

    currency: str

    def get_rate(self) -> float | None:
        """Return the current rate, or None when it is unavailable."""
        ...


class SettingsStore(Protocol):
    """Protocol for an opaque string key-value store."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""
        ...

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        ...
