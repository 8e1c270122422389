"""Base configuration settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings, read from ``BIKRAM_SAMBAT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BIKRAM_SAMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Bikram Sambat"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Formatting
    default_locale: str = Field(
        default="en", description="Locale used when a formatter gets none"
    )
    range_separator: str = Field(
        default=" – ", description="Literal placed between the ends of a range"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level names a standard logging level."""
        allowed = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {sorted(allowed)}")
        return v.upper()

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject an empty default locale."""
        if not v.strip():
            raise ValueError("default_locale must not be empty")
        return v.strip()
