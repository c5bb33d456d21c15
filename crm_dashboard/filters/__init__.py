"""Record filters. Period filter + AND-composition of independent predicates."""

from .period import includes, filter_records, period_predicate, get_timestamp
from .combined import all_of

__all__ = [
    "includes",
    "filter_records",
    "period_predicate",
    "get_timestamp",
    "all_of",
]
