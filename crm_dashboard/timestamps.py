"""
Parse record timestamps into absolute instants.

Accepted:
    - timezone-aware datetime (pandas Timestamp included, nanoseconds kept)
    - ISO-8601 string with explicit offset: "2024-03-15T13:00:00Z",
      "2024-03-15T10:00:00.250-03:00"

Rejected with MalformedTimestamp:
    - date-only strings ("2024-03-15")
    - strings or datetimes without offset
    - anything else (numbers, garbage text)

No default timezone is ever assumed.
"""

import logging
import re
from datetime import date, datetime

import pandas as pd

from crm_dashboard.errors import MalformedTimestamp

logger = logging.getLogger(__name__)

# Seconds fraction, e.g. ":59.999000001" -> "999000001"
_FRACTION = re.compile(r":\d{2}[.,](\d+)")


def is_absent(value) -> bool:
    """None, blank strings and pandas NaN/NaT mean "no timestamp recorded"."""
    if isinstance(value, str):
        return not value.strip()
    return pd.api.types.is_scalar(value) and bool(pd.isna(value))


def parse_instant(value) -> datetime:
    """
    Convert a raw timestamp value to an aware datetime.

    Args:
        value: datetime or ISO-8601 string

    Returns:
        Timezone-aware datetime (offset preserved as given)

    Raises:
        MalformedTimestamp: If value is not an unambiguous absolute time
    """
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            logger.warning(f"Rejected naive datetime: {value!r}")
            raise MalformedTimestamp(value, "datetime has no UTC offset")
        return value

    if isinstance(value, date):
        logger.warning(f"Rejected date without time: {value!r}")
        raise MalformedTimestamp(value, "date without time and offset")

    if not isinstance(value, str):
        logger.warning(f"Rejected timestamp of type {type(value).__name__}: {value!r}")
        raise MalformedTimestamp(value, f"unsupported type {type(value).__name__}")

    text = value.strip()
    # Date-only: "YYYY-MM-DD" has no time-of-day separator
    if "T" not in text.upper() and " " not in text:
        logger.warning(f"Rejected date-only timestamp: {value!r}")
        raise MalformedTimestamp(value, "date-only value, timezone would be a guess")

    try:
        parsed = _parse_iso(text)
    except ValueError:
        logger.warning(f"Rejected unparseable timestamp: {value!r}")
        raise MalformedTimestamp(value)

    if parsed.tzinfo is None:
        logger.warning(f"Rejected timestamp without offset: {value!r}")
        raise MalformedTimestamp(value, "no UTC offset")
    return parsed


def _parse_iso(text: str) -> datetime:
    """
    ISO-8601 string to datetime at its full precision.

    datetime.fromisoformat keeps at most microseconds and silently drops
    further digits, so sub-microsecond fractions are parsed by pandas
    (nanosecond Timestamp, years 1677-2262).
    """
    fraction = _FRACTION.search(text)
    if fraction and len(fraction.group(1)) > 6:
        try:
            return pd.Timestamp(text)
        except pd.errors.OutOfBoundsDatetime:
            raise ValueError(f"nanosecond timestamp outside 1677-2262: {text}")
    return datetime.fromisoformat(text.replace("Z", "+00:00"))
