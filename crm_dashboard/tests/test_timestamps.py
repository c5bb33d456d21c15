"""
Unit tests for timestamps.py

Run: pytest crm_dashboard/tests/test_timestamps.py -v
"""

import pytest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pandas as pd

from crm_dashboard.errors import MalformedTimestamp
from crm_dashboard.timestamps import is_absent, parse_instant

UTC = timezone.utc


class TestParseInstant:
    """Accepted absolute-time representations."""

    def test_zulu(self):
        assert parse_instant("2024-03-15T13:00:00Z") == datetime(2024, 3, 15, 13, tzinfo=UTC)

    def test_milliseconds(self):
        result = parse_instant("2024-03-15T23:59:59.999Z")
        assert result.microsecond == 999000

    def test_offset_kept(self):
        result = parse_instant("2024-03-15T10:00:00-03:00")
        assert result.utcoffset() == timedelta(hours=-3)
        assert result == datetime(2024, 3, 15, 13, tzinfo=UTC)

    def test_space_separator(self):
        assert parse_instant("2024-03-15 13:00:00+00:00") == datetime(2024, 3, 15, 13, tzinfo=UTC)

    def test_surrounding_whitespace(self):
        assert parse_instant("  2024-03-15T13:00:00Z ") == datetime(2024, 3, 15, 13, tzinfo=UTC)

    def test_aware_datetime_passthrough(self):
        value = datetime(2024, 3, 15, 10, tzinfo=ZoneInfo("America/Sao_Paulo"))
        assert parse_instant(value) is value

    def test_pandas_timestamp_keeps_nanoseconds(self):
        value = pd.Timestamp("2024-03-15T13:00:00.000000001Z")
        assert parse_instant(value).nanosecond == 1

    def test_nanosecond_string(self):
        result = parse_instant("2024-03-15T13:00:00.000000001Z")
        assert result.nanosecond == 1
        assert result > datetime(2024, 3, 15, 13, tzinfo=UTC)

    def test_nanosecond_string_keeps_offset(self):
        result = parse_instant("2024-03-15T10:00:00.123456789-03:00")
        assert result.utcoffset() == timedelta(hours=-3)
        assert result.nanosecond == 789

    def test_years_outside_pandas_range(self):
        assert parse_instant("1500-01-01T00:00:00Z") == datetime(1500, 1, 1, tzinfo=UTC)


class TestRejected:
    """Ambiguous input raises MalformedTimestamp."""

    @pytest.mark.parametrize("value", [
        "not-a-date",
        "2024-03-15",
        "2024-03-15T13:00:00",
        "2024-13-40T13:00:00Z",
        "yesterday at noon",
        "2024-03-15T13:00:00.000000001",
        datetime(2024, 3, 15, 13),
        date(2024, 3, 15),
        1710507600,
        12.5,
        ["2024-03-15T13:00:00Z"],
    ])
    def test_rejected(self, value):
        with pytest.raises(MalformedTimestamp) as exc_info:
            parse_instant(value)
        assert exc_info.value.value is value

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_instant("2024-03-15")

    def test_message_names_value(self):
        with pytest.raises(MalformedTimestamp, match="2024-03-15"):
            parse_instant("2024-03-15")


class TestIsAbsent:
    """Values meaning "no timestamp"."""

    @pytest.mark.parametrize("value", [None, "", "  ", float("nan"), pd.NaT, pd.NA])
    def test_absent(self, value):
        assert is_absent(value) is True

    @pytest.mark.parametrize("value", ["2024-03-15T13:00:00Z", "x", 0, datetime(2024, 1, 1)])
    def test_present(self, value):
        assert is_absent(value) is False
