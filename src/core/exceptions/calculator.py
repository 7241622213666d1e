"""
Custom exception hierarchy for the trade calculator.

Validation of trade inputs is reported through return values; these
exceptions cover configuration, exchange-rate fetching and settings storage.
"""


class CalculatorException(Exception):
    """Base exception for all calculator-related errors."""

    pass


class ValidationError(CalculatorException):
    """Raised when input validation fails."""

    pass


class ConfigurationError(ValidationError):
    """Raised when configuration is invalid."""

    pass


class ExchangeRateError(CalculatorException):
    """Raised when the exchange rate cannot be fetched or parsed."""

    def __init__(self, message: str, currency: str | None = None):
        self.currency = currency
        super().__init__(message)


class StorageError(CalculatorException):
    """Raised when settings cannot be read from or written to storage."""

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(message)
