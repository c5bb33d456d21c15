"""
Tests for config.Settings validation.

Run: pytest crm_dashboard/tests/test_config.py -v
"""

import pytest

from pydantic import ValidationError

from config import Settings


class TestSettings:
    """Environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("CALENDAR_TIMEZONE", "TIMESTAMP_FIELD", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.calendar_timezone == "America/Sao_Paulo"
        assert settings.timestamp_field == "data_criacao"
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_TIMEZONE", "UTC")
        monkeypatch.setenv("TIMESTAMP_FIELD", "data_fechamento")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.calendar_timezone == "UTC"
        assert settings.timestamp_field == "data_fechamento"
        assert settings.log_level == "DEBUG"

    def test_unknown_timezone(self, monkeypatch):
        monkeypatch.setenv("CALENDAR_TIMEZONE", "Mars/Olympus_Mons")
        with pytest.raises(ValidationError, match="IANA"):
            Settings(_env_file=None)

    def test_empty_timestamp_field(self, monkeypatch):
        monkeypatch.setenv("TIMESTAMP_FIELD", "  ")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestSetupLogging:
    """Logging level comes from config unless given."""

    def test_default_level(self, monkeypatch):
        import logging
        import config
        from crm_dashboard import setup_logging

        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")

        setup_logging()
        setup_logging("debug")

        assert calls[0]["level"] == "WARNING"
        assert calls[1]["level"] == "DEBUG"
