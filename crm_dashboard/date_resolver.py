"""
Resolve a named period to an absolute closed Interval.

Converts a reference instant plus PeriodKind into [start, end] aligned to
calendar days in a declared calendar context (IANA timezone).

Conventions:
    - start is the first instant of the first day (00:00:00.000 local)
    - end is the instant 1 ms before the next day's start
      (23:59:59.999 local, millisecond resolution)

Usage:
    from crm_dashboard.date_resolver import build_range

    interval = build_range(reference, PeriodKind.DAY, tz="UTC")
"""

import calendar
import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import config
from crm_dashboard.errors import InvalidPeriod, InvalidTimezone, MalformedTimestamp
from crm_dashboard.types import Interval, PeriodKind

logger = logging.getLogger(__name__)

# Smallest step of interval bounds: end = next day start - END_OF_DAY_PRECISION
END_OF_DAY_PRECISION = timedelta(milliseconds=1)

# Dashboard preset names accepted as aliases
PRESET_ALIASES = {
    "hoje": PeriodKind.DAY,
    "today": PeriodKind.DAY,
    "ultimos7": PeriodKind.LAST_7_DAYS,
    "mesatual": PeriodKind.MONTH,
    "this_month": PeriodKind.MONTH,
    "personalizado": PeriodKind.CUSTOM,
}


def resolve_timezone(tz: str | tzinfo | None = None) -> tzinfo:
    """
    IANA name or tzinfo; None falls back to config.CALENDAR_TIMEZONE.

    Raises:
        InvalidTimezone: Name not found in the timezone database
    """
    if tz is None:
        tz = config.CALENDAR_TIMEZONE
    if not isinstance(tz, str):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise InvalidTimezone(tz)


def build_range(
    reference: datetime,
    period: PeriodKind | str,
    tz: str | tzinfo | None = None,
) -> Interval:
    """
    Convert reference instant + period to a closed Interval.

    Args:
        reference: Aware datetime the period is anchored to (usually "now")
        period: PeriodKind or its value / preset alias ("day", "hoje", ...)
        tz: Calendar context for day boundaries

    Returns:
        Interval with both bounds expressed in the calendar context

    Raises:
        InvalidPeriod: Unknown period, CUSTOM (needs explicit days),
            or range past 9999-12-31
        InvalidTimezone: tz is not an IANA name
        MalformedTimestamp: reference is a naive datetime
    """
    kind = coerce_period(period)
    zone = resolve_timezone(tz)
    local_day = _local_date(reference, zone)

    if kind == PeriodKind.DAY:
        first_day, last_day = local_day, local_day

    elif kind == PeriodKind.LAST_7_DAYS:
        # Six full days back + today = 7 calendar days
        first_day, last_day = local_day - timedelta(days=6), local_day

    elif kind == PeriodKind.MONTH:
        days_in_month = calendar.monthrange(local_day.year, local_day.month)[1]
        first_day = local_day.replace(day=1)
        last_day = local_day.replace(day=days_in_month)

    else:
        raise InvalidPeriod(
            period,
            "Custom period has no reference-derived bounds, use custom_range(first_day, last_day)",
        )

    interval = _day_span(first_day, last_day, zone, kind)
    logger.debug(
        f"Range {kind.value} @ {reference.isoformat()} ({zone}): "
        f"{interval.start.isoformat()} .. {interval.end.isoformat()}"
    )
    return interval


def custom_range(
    first_day: date | datetime,
    last_day: date | datetime,
    tz: str | tzinfo | None = None,
) -> Interval:
    """
    Closed Interval from start of first_day to end of last_day.

    Aware datetimes are first converted to their calendar day in tz.

    Raises:
        InvalidPeriod: first_day is after last_day, or a bound outside
            0001-01-01 .. 9999-12-31 in tz
        MalformedTimestamp: naive datetime given
    """
    zone = resolve_timezone(tz)
    first = _local_date(first_day, zone) if isinstance(first_day, datetime) else first_day
    last = _local_date(last_day, zone) if isinstance(last_day, datetime) else last_day

    if first > last:
        raise InvalidPeriod(
            PeriodKind.CUSTOM,
            f"Custom range starts after it ends: {first.isoformat()} > {last.isoformat()}",
        )
    return _day_span(first, last, zone, PeriodKind.CUSTOM)


def previous_period(
    interval: Interval,
    months: int = 1,
    tz: str | tzinfo | None = None,
) -> Interval:
    """
    Same interval N calendar months earlier (month-over-month comparison).

    Wall-clock times are kept; the day is clamped to the target month's
    length (Mar 31 -> Feb 29 in 2024).
    """
    zone = resolve_timezone(tz)
    try:
        start = _shift_months(interval.start.astimezone(zone), -months)
        end = _shift_months(interval.end.astimezone(zone), -months)
    except (OverflowError, ValueError) as exc:
        raise InvalidPeriod(
            PeriodKind.CUSTOM,
            f"Shifting by {months} months leaves the supported calendar: {exc}",
        )
    return Interval(start=start, end=end)


def coerce_period(period) -> PeriodKind:
    """PeriodKind from enum, value or preset alias."""
    if isinstance(period, PeriodKind):
        return period
    if not isinstance(period, str):
        raise InvalidPeriod(period)

    key = period.strip().lower()
    if key in PRESET_ALIASES:
        return PRESET_ALIASES[key]
    try:
        return PeriodKind(key)
    except ValueError:
        valid = ", ".join(k.value for k in PeriodKind)
        raise InvalidPeriod(period, f"Invalid period: '{period}'. Expected one of: {valid}")


# =============================================================================
# Helpers
# =============================================================================

def start_of_day(day: date, zone: tzinfo) -> datetime:
    """First instant of the calendar day in zone."""
    return datetime.combine(day, time.min, tzinfo=zone)


def end_of_day(day: date, zone: tzinfo) -> datetime:
    """Instant 1 ms before the next day's start, computed on absolute time."""
    next_start = start_of_day(day + timedelta(days=1), zone)
    return (next_start.astimezone(timezone.utc) - END_OF_DAY_PRECISION).astimezone(zone)


def _day_span(first_day: date, last_day: date, zone: tzinfo, period: PeriodKind) -> Interval:
    try:
        return Interval(start=start_of_day(first_day, zone), end=end_of_day(last_day, zone))
    except OverflowError:
        # end of 9999-12-31 (or start of 0001-01-01 east of UTC) is not representable
        raise InvalidPeriod(
            period,
            f"Range {first_day.isoformat()} .. {last_day.isoformat()} ({zone}) "
            "is outside the supported calendar (0001-01-01 .. 9999-12-31)",
        )


def _local_date(value: datetime, zone: tzinfo) -> date:
    if value.tzinfo is None or value.utcoffset() is None:
        raise MalformedTimestamp(value, "reference datetime has no UTC offset")
    return value.astimezone(zone).date()


def _shift_months(value: datetime, months: int) -> datetime:
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
