"""DataFrame variant of the period filter, same boundary policy as filters.period."""

import logging

import pandas as pd

import config
from crm_dashboard.errors import MalformedTimestamp
from crm_dashboard.timestamps import is_absent, parse_instant
from crm_dashboard.types import Interval

logger = logging.getLogger(__name__)


def filter_frame(
    df: pd.DataFrame,
    interval: Interval | None,
    column: str | None = None,
) -> pd.DataFrame:
    """
    Keep rows whose timestamp lies in interval (inclusive) or is missing.

    Args:
        df: Deals, one row per record
        interval: Closed Interval, or None for no range filter
        column: Timestamp column (default: config.TIMESTAMP_FIELD)

    Returns:
        Filtered copy, original index kept

    Raises:
        MalformedTimestamp: Naive datetime column or unparseable value
        KeyError: Column not in df
    """
    column = column or config.TIMESTAMP_FIELD
    if interval is None:
        return df.copy()

    mask = _membership_mask(df[column], interval)
    logger.debug(f"filter_frame: kept {int(mask.sum())}/{len(df)} rows on '{column}'")
    return df[mask].copy()


def _membership_mask(values: pd.Series, interval: Interval) -> pd.Series:
    """
    Per-row result of the record filter: missing or interval.contains().

    Each value goes through parse_instant and Interval.contains like
    filters.period.includes, so instants outside the nanosecond Timestamp
    range (before 1677, after 2262) are still compared, not rejected.
    """
    if pd.api.types.is_datetime64_dtype(values.dtype):
        logger.warning(f"Column '{values.name}' holds naive datetimes")
        raise MalformedTimestamp(values.name, "datetime column has no timezone")

    kept = [is_absent(value) or interval.contains(parse_instant(value)) for value in values]
    return pd.Series(kept, index=values.index, dtype=bool)
