"""Containment and equality predicates."""

from __future__ import annotations
from datetime import datetime
from typing import Optional, Union

from temporalperiods.adapters.adapterapi import DEFAULT_ADAPTER
from temporalperiods.period.periodidentity import as_datetime, create_period
from temporalperiods.period.periodtypes import Period, TemporalContext
from temporalperiods.shared_utils import STABLE_MONTH, js_weekday, validate_period


def _containment_bounds(period: Period, context: Optional[TemporalContext]) -> tuple[datetime, datetime]:
    """
    Bounds used by contains().

    A stableMonth contains only its reference calendar month, not the
    neighbouring days shown in its grid.
    """
    if period.type != STABLE_MONTH:
        return period.start, period.end

    adapter = context.adapter if context is not None else DEFAULT_ADAPTER
    return adapter.start_of(period.date, "month"), adapter.end_of(period.date, "month")


def contains(
    period: Period,
    target: Union[datetime, Period],
    context: Optional[TemporalContext] = None,
) -> bool:
    """
    Check whether period contains an instant or another period.

    Instants: start <= target <= end. Periods: full inclusive containment.
    For stableMonth periods the bounds are the calendar month of
    period.date instead of the grid.

    Args:
        period: Containing period
        target: datetime (or date) or Period
        context: Used for stableMonth month bounds (default adapter otherwise)

    Raises:
        InvalidPeriodError: If period or target period is malformed

    Examples:
        >>> feb = create_period(ctx, datetime(2024, 2, 15), "stableMonth")
        >>> contains(feb, datetime(2024, 1, 31)), contains(feb, datetime(2024, 2, 29))
        (False, True)
    """
    validate_period(period)
    start, end = _containment_bounds(period, context)

    if isinstance(target, Period):
        validate_period(target)
        return start <= target.start and target.end <= end

    instant = as_datetime(target)
    return start <= instant <= end


def is_same(context: TemporalContext, a, b, unit: str) -> bool:
    """
    True if a and b fall in the same period of the given unit.

    Compares normalized boundaries, so two instants in the same week (per
    week_starts_on) are the same week even on different days. None inputs
    are never the same.

    Examples:
        >>> is_same(ctx, datetime(2024, 3, 1), datetime(2024, 3, 31, 23), "month")
        True
        >>> is_same(ctx, datetime(2024, 3, 31), datetime(2024, 4, 1), "quarter")
        False
    """
    if a is None or b is None:
        return False
    return create_period(context, a, unit) == create_period(context, b, unit)


def is_today(context: TemporalContext, period: Period, now) -> bool:
    """
    True if the period's anchor falls on the same day as now.

    The engine never reads the clock; callers pass their current instant.
    """
    return is_same(context, period.date, now, "day")


def is_weekend(period: Period) -> bool:
    """True if the period's anchor date is a Saturday or Sunday."""
    return js_weekday(period.date) in (0, 6)


def is_weekday(period: Period) -> bool:
    """True if the period's anchor date is Monday through Friday."""
    return not is_weekend(period)


__all__ = [
    "contains",
    "is_same",
    "is_today",
    "is_weekend",
    "is_weekday",
]
