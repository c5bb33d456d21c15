"""
Combined Filter — AND-composition of independent record predicates.

The period filter owns only the temporal test; source, UF or regional
filters are supplied by the caller and combined here.

Usage:
    keep = all_of(
        period_predicate(interval),
        lambda deal: deal["fonte"] == "Google",
    )
    deals = [d for d in deals if keep(d)]
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Predicate = Callable[[Any], bool]


def all_of(*predicates: Predicate) -> Predicate:
    """
    Predicate that is True when every predicate is True.

    Evaluated left to right with short-circuit, so errors raised by a later
    predicate (e.g. MalformedTimestamp) only surface for records that passed
    the earlier ones. No predicates means "include everything".
    """
    checks = list(predicates)

    def combined(record: Any) -> bool:
        return all(check(record) for check in checks)

    return combined
