"""Application configuration with Pydantic validation.

All settings are loaded from .env file or environment variables.
Validation happens at import time - app fails fast with clear errors.

Usage:
    import config
    print(config.CALENDAR_TIMEZONE)  # "America/Sao_Paulo"
    print(config.TIMESTAMP_FIELD)  # "data_criacao"
"""

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validated application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    # Calendar context used to derive start/end of day and month
    calendar_timezone: str = Field(default="America/Sao_Paulo")

    # Record field holding the creation timestamp
    timestamp_field: str = Field(default="data_criacao")

    # Logging
    log_level: str = Field(default="INFO")

    @field_validator("calendar_timezone")
    @classmethod
    def validate_calendar_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(
                f"CALENDAR_TIMEZONE '{v}' is not a known IANA timezone "
                "(examples: UTC, America/Sao_Paulo, Europe/Lisbon)"
            )
        return v

    @field_validator("timestamp_field")
    @classmethod
    def validate_timestamp_field(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("TIMESTAMP_FIELD must not be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL '{v}' is not a logging level")
        return level


# Validate at import time - fail fast with clear errors
settings = Settings()

# =============================================================================
# Module-level exports
# =============================================================================

CALENDAR_TIMEZONE = settings.calendar_timezone
TIMESTAMP_FIELD = settings.timestamp_field
LOG_LEVEL = settings.log_level
