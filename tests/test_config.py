"""
Tests for settings, logging setup and option models.
"""

import logging

import pytest
import structlog
from pydantic import ValidationError

from barcode1d.config import Settings, configure_logging, get_settings
from barcode1d.models import BarcodeOptions
from barcode1d.symbologies import EAN13, Code11, Code128


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        """Test default pattern characters."""
        settings = Settings()
        assert settings.line_character == "1"
        assert settings.space_character == "0"
        assert settings.w_character == "w"
        assert settings.n_character == "n"
        assert settings.wn_ratio == 2

    def test_env_override(self, monkeypatch, fresh_settings):
        """Test reading defaults from the environment."""
        monkeypatch.setenv("WN_RATIO", "3")
        monkeypatch.setenv("LINE_CHARACTER", "#")
        settings = get_settings()
        assert settings.wn_ratio == 3
        assert settings.pattern_defaults()["line_character"] == "#"

    def test_invalid_ratio(self):
        """Test that a ratio below 2 is rejected."""
        with pytest.raises(ValidationError):
            Settings(wn_ratio=1)

    def test_cached(self, fresh_settings):
        """Test that settings are loaded once."""
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for structlog configuration."""

    def test_configure_text(self):
        """Test configuring the console renderer."""
        try:
            configure_logging(Settings(log_format="text", log_level="DEBUG"))
            structlog.get_logger("barcode1d.test").debug("configured", renderer="text")
        finally:
            structlog.reset_defaults()
            logging.getLogger("barcode1d").setLevel(logging.NOTSET)

    def test_configure_json_unknown_level(self):
        """Test that an unknown level falls back to INFO."""
        try:
            configure_logging(Settings(log_format="json", log_level="NOISY"))
            structlog.get_logger("barcode1d.test").info("configured", renderer="json")
        finally:
            structlog.reset_defaults()
            logging.getLogger("barcode1d").setLevel(logging.NOTSET)

    def test_configure_sets_package_level(self):
        """Test that the package logger follows the configured level."""
        try:
            configure_logging(Settings(log_level="WARNING"))
            assert logging.getLogger("barcode1d").level == logging.WARNING
        finally:
            structlog.reset_defaults()
            logging.getLogger("barcode1d").setLevel(logging.NOTSET)

    def test_unconfigured_library_is_silent(self, capsys):
        """Test that encoding and decoding print nothing when the host sets up no logging."""
        structlog.reset_defaults()
        Code128("HELLO")
        Code11.decode(Code11("123-45").wn[::-1])
        EAN13.decode(EAN13("400638133393").rle[::-1])
        assert capsys.readouterr().out == ""


class TestBarcodeOptions:
    """Tests for the BarcodeOptions model."""

    def test_defaults(self):
        """Test option defaults."""
        options = BarcodeOptions()
        assert not options.checksum_included
        assert not options.skip_checksum
        assert options.check_digit == "mod 10"
        assert options.check_style == "ibm"

    def test_frozen(self):
        """Test that options cannot change after construction."""
        options = BarcodeOptions()
        with pytest.raises(ValidationError):
            options.wn_ratio = 3

    def test_unknown_option(self):
        """Test that unknown options are rejected."""
        with pytest.raises(ValidationError):
            BarcodeOptions(colour="red")

    def test_invalid_check_digit_method(self):
        """Test that only known MSI schemes are accepted."""
        with pytest.raises(ValidationError):
            BarcodeOptions(check_digit="mod 7")
