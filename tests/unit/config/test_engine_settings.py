"""Test engine settings configuration.

Settings are read from ``BIKRAM_SAMBAT_*`` environment variables.
"""

import pytest
from pydantic import ValidationError

from bikram_sambat.config import Settings, get_settings


class TestSettings:
    """Test settings loading."""

    def test_defaults(self):
        """Test settings with default values."""
        settings = Settings()

        assert settings.app_name == "Bikram Sambat"
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"
        assert settings.default_locale == "en"
        assert settings.range_separator == " – "

    def test_environment_overrides(self, monkeypatch):
        """Test values from environment variables."""
        monkeypatch.setenv("BIKRAM_SAMBAT_LOG_LEVEL", "debug")
        monkeypatch.setenv("BIKRAM_SAMBAT_LOG_FORMAT", "json")
        monkeypatch.setenv("BIKRAM_SAMBAT_DEFAULT_LOCALE", " ne-NP ")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.default_locale == "ne-NP"

    def test_invalid_log_level(self, monkeypatch):
        """Test unknown log levels are rejected."""
        monkeypatch.setenv("BIKRAM_SAMBAT_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_log_format(self, monkeypatch):
        """Test unknown log formats are rejected."""
        monkeypatch.setenv("BIKRAM_SAMBAT_LOG_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings()

    def test_empty_default_locale(self, monkeypatch):
        """Test an empty default locale is rejected."""
        monkeypatch.setenv("BIKRAM_SAMBAT_DEFAULT_LOCALE", "  ")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        """Test get_settings returns one shared instance."""
        assert get_settings() is get_settings()
