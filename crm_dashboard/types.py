"""
Pydantic models for date-range filtering.

Interval is the single closed-range type used by every filter path:
start <= instant <= end, both bounds inclusive.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


# =============================================================================
# PERIOD KINDS
# =============================================================================

class PeriodKind(str, Enum):
    """
    Named ways of deriving an Interval from a reference instant.

    - DAY: calendar day containing the reference ("hoje")
    - LAST_7_DAYS: six full days before the reference day plus that day
    - MONTH: calendar month containing the reference ("mês atual")
    - CUSTOM: explicit first/last day, see date_resolver.custom_range
    """
    DAY = "day"
    LAST_7_DAYS = "last_7_days"
    MONTH = "month"
    CUSTOM = "custom"


# =============================================================================
# INTERVAL
# =============================================================================

class Interval(BaseModel):
    """Closed range [start, end] of timezone-aware instants."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def require_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("Interval bounds must be timezone-aware")
        return v

    @model_validator(mode="after")
    def validate_order(self):
        if _utc(self.start) > _utc(self.end):
            raise ValueError(
                f"start ({self.start.isoformat()}) must be <= end ({self.end.isoformat()})"
            )
        return self

    def contains(self, instant: datetime) -> bool:
        """Inclusive on both ends. Compares absolute time, no truncation."""
        return _utc(self.start) <= _utc(instant) <= _utc(self.end)


class DateFilter(BaseModel):
    """
    Filter state as held by the caller: either bound may be unset.

    Usage:
        DateFilter().to_interval()  # None — no active range filter
        DateFilter(start=s, end=e).to_interval()  # Interval(start=s, end=e)
    """

    model_config = ConfigDict(frozen=True)

    start: datetime | None = None
    end: datetime | None = None

    def to_interval(self) -> Interval | None:
        if self.start is None or self.end is None:
            return None
        return Interval(start=self.start, end=self.end)


def _utc(value: datetime) -> datetime:
    # Same-tzinfo datetimes compare by wall clock and ignore fold;
    # UTC has no repeated hours
    return value.astimezone(timezone.utc)
