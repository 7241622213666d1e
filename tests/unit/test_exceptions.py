"""
Unit tests for custom exceptions.
"""

from src.core.exceptions.calculator import (
    CalculatorException,
    ConfigurationError,
    ExchangeRateError,
    StorageError,
    ValidationError,
)


class TestCalculatorException:
    """Tests for CalculatorException base class."""

    def test_should_create_base_exception_with_message(self) -> None:
        """Test creating base exception with message."""
        exc = CalculatorException("Test error message")
        assert str(exc) == "Test error message"
        assert isinstance(exc, Exception)


class TestValidationErrors:
    """Tests for ValidationError and ConfigurationError."""

    def test_should_derive_configuration_error_from_validation_error(self) -> None:
        """Test the configuration error hierarchy."""
        exc = ConfigurationError("fee_rate must be in [0, 1), got 2")
        assert isinstance(exc, ValidationError)
        assert isinstance(exc, CalculatorException)
        assert "fee_rate" in str(exc)


class TestExchangeRateError:
    """Tests for ExchangeRateError."""

    def test_should_carry_currency(self) -> None:
        """Test currency attribute."""
        exc = ExchangeRateError("request failed", "TWD")
        assert exc.currency == "TWD"
        assert str(exc) == "request failed"

    def test_should_default_currency_to_none(self) -> None:
        """Test optional currency."""
        assert ExchangeRateError("boom").currency is None


class TestStorageError:
    """Tests for StorageError."""

    def test_should_carry_key(self) -> None:
        """Test key attribute."""
        exc = StorageError("cannot write", key="tradeCalculatorSettings")
        assert exc.key == "tradeCalculatorSettings"
        assert isinstance(exc, CalculatorException)
