"""
CRM Dashboard — date-range filtering of CRM deals by creation timestamp.

Usage:
    from crm_dashboard import build_range, includes, PeriodKind

    interval = build_range(now, PeriodKind.DAY, tz="America/Sao_Paulo")
    deals_today = [d for d in deals if includes(d, interval)]

Public API:
    - build_range / custom_range / previous_period: Interval construction
    - includes / filter_records / filter_frame: membership filter
    - all_of / period_predicate: AND-composition with other filters
    - Interval, DateFilter, PeriodKind: types
    - InvalidPeriod, InvalidTimezone, MalformedTimestamp: errors
"""

import logging

import config

from .types import Interval, DateFilter, PeriodKind
from .errors import InvalidPeriod, InvalidTimezone, MalformedTimestamp
from .timestamps import parse_instant
from .date_resolver import build_range, custom_range, previous_period
from .filters import includes, filter_records, period_predicate, all_of
from .frame import filter_frame


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once at process start (default: config.LOG_LEVEL)."""
    logging.basicConfig(
        level=(level or config.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = [
    # Types
    "Interval",
    "DateFilter",
    "PeriodKind",
    # Errors
    "InvalidPeriod",
    "InvalidTimezone",
    "MalformedTimestamp",
    # Range construction
    "build_range",
    "custom_range",
    "previous_period",
    # Filtering
    "parse_instant",
    "includes",
    "filter_records",
    "period_predicate",
    "all_of",
    "filter_frame",
    "setup_logging",
]
