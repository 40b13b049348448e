"""Tests for custom exception hierarchy."""

import pytest

from hangul_drill.core.exceptions import (
    ConfigurationError,
    HangulDrillException,
    UnknownMatchUnitError,
)


class TestHangulDrillException:
    """Tests for base HangulDrillException."""

    def test_default_message(self) -> None:
        """Test exception with default empty message."""
        exc = HangulDrillException()
        assert exc.message == ""
        assert str(exc) == ""

    def test_custom_message(self) -> None:
        """Test exception with custom message."""
        exc = HangulDrillException("Custom error message")
        assert exc.message == "Custom error message"
        assert str(exc) == "Custom error message"

    def test_error_code(self) -> None:
        """Test the generic error code."""
        assert HangulDrillException().error_code == "HANGUL_DRILL_ERROR"

    def test_status_code(self) -> None:
        """Test errors default to a client status."""
        assert HangulDrillException().status_code == 400


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_default_message(self) -> None:
        """Test exception with default message."""
        exc = ConfigurationError()
        assert exc.message == "Invalid configuration"
        assert exc.error_code == "CONFIGURATION_ERROR"
        assert exc.status_code == 500

    def test_inheritance(self) -> None:
        """Test that ConfigurationError inherits from HangulDrillException."""
        assert isinstance(ConfigurationError(), HangulDrillException)


class TestUnknownMatchUnitError:
    """Tests for UnknownMatchUnitError."""

    def test_default_message(self) -> None:
        """Test exception with default message."""
        exc = UnknownMatchUnitError()
        assert exc.message == "Unknown match unit"
        assert exc.error_code == "UNKNOWN_MATCH_UNIT"
        assert exc.status_code == 400

    def test_custom_message(self) -> None:
        """Test exception with custom message."""
        exc = UnknownMatchUnitError("Unknown match unit: 'syllable'")
        assert exc.message == "Unknown match unit: 'syllable'"

    def test_can_be_caught_as_base(self) -> None:
        """Test that the exception can be caught through the base class."""
        with pytest.raises(HangulDrillException, match="Unknown match unit"):
            raise UnknownMatchUnitError()
