"""
Period Filter — membership of a record's creation timestamp in an Interval.

Boundary policy (single, canonical): closed interval, inclusive on both ends.

    interval is None            -> include
    record timestamp absent     -> include
    start <= timestamp <= end   -> include
    otherwise                   -> exclude
    timestamp unparseable       -> MalformedTimestamp

The record timestamp is never truncated to the day before comparing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import config
from crm_dashboard.timestamps import is_absent, parse_instant
from crm_dashboard.types import Interval

_MISSING = object()


def get_timestamp(record: Any, field: str | None = None) -> Any:
    """Raw timestamp value from a mapping key or attribute, None if missing."""
    name = field or config.TIMESTAMP_FIELD
    if isinstance(record, Mapping):
        value = record.get(name, _MISSING)
    else:
        value = getattr(record, name, _MISSING)
    return None if value is _MISSING else value


def includes(record: Any, interval: Interval | None, field: str | None = None) -> bool:
    """
    Decide whether record belongs to interval.

    Args:
        record: Mapping or object exposing the timestamp field
        interval: Closed Interval, or None when no range filter is active
        field: Timestamp field name (default: config.TIMESTAMP_FIELD)

    Returns:
        True to include the record

    Raises:
        MalformedTimestamp: Timestamp present but not an absolute instant
    """
    if interval is None:
        return True

    raw = get_timestamp(record, field)
    if is_absent(raw):
        return True

    return interval.contains(parse_instant(raw))


def filter_records(
    records: Iterable[Any],
    interval: Interval | None,
    field: str | None = None,
) -> list[Any]:
    """Records included by the interval, input order kept."""
    return [record for record in records if includes(record, interval, field)]


def period_predicate(interval: Interval | None, field: str | None = None):
    """Single-argument predicate for composition with all_of()."""

    def predicate(record: Any) -> bool:
        return includes(record, interval, field)

    return predicate
