"""Period Factory
--------------

Core constructors turning an anchor date plus a unit into a canonical Period.

Supports:
  - Calendar units: year, quarter, month, week, day, hour, minute, second
  - stableMonth: 6-week (42 day) grid around a calendar month
  - custom: explicit start/end spans (create_custom_period)
  - ISO weeks: from_iso_week (isoweek library)

Key Design Principles:
  1. Week boundaries always honor context.week_starts_on
  2. A stableMonth grid is always exactly 42 days, so calendar views never
     change size between months
  3. The anchor date is kept on the period for navigation; for stableMonth
     it is the month's reference date, not the grid start
"""

from __future__ import annotations
from datetime import date as date_type, datetime
from typing import Optional

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

from temporalperiods.period.periodnormalize import resolve_unit
from temporalperiods.errors import InvalidPeriodError
from temporalperiods.period.periodtypes import Period, TemporalContext, get_unit_plugin
from temporalperiods.shared_utils import (
    ADAPTER_UNITS,
    CUSTOM,
    STABLE_MONTH,
    STABLE_MONTH_DAYS,
    TICK,
    validate_period,
)

# Units the factory can build from an anchor date
FACTORY_UNITS = ADAPTER_UNITS + (STABLE_MONTH,)


def as_datetime(value) -> datetime:
    """
    Coerce a date to a datetime at midnight; datetimes pass through.

    Raises:
        TypeError: If value is neither a date nor a datetime
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f"Expected datetime or date, got {type(value).__name__}")


# ---- Stable Month ----

def stable_month_bounds(context: TemporalContext, anchor: datetime) -> tuple[datetime, datetime]:
    """
    Grid boundaries of the stable month containing anchor.

    The calendar month is widened to whole weeks (per week_starts_on); when
    that covers fewer than 6 weeks, trailing weeks from the following month
    are appended.

    Example:
        >>> ctx = create_context(week_starts_on=1)
        >>> stable_month_bounds(ctx, datetime(2024, 2, 15))
        (datetime(2024, 1, 29, 0, 0), datetime(2024, 3, 10, 23, 59, 59, 999999))
    """
    adapter = context.adapter
    week_starts_on = context.week_starts_on

    month_start = adapter.start_of(anchor, "month")
    month_end = adapter.end_of(anchor, "month")

    grid_start = adapter.start_of(month_start, "week", week_starts_on=week_starts_on)
    grid_end = adapter.end_of(month_end, "week", week_starts_on=week_starts_on)

    weeks = adapter.diff(grid_start, grid_end + TICK, "week")
    target_weeks = STABLE_MONTH_DAYS // 7
    if weeks < target_weeks:
        grid_end = adapter.add(grid_end, target_weeks - weeks, "week")

    return grid_start, grid_end


# ---- Factory ----

def _create_plugin_period(context: TemporalContext, anchor: datetime, unit: str, plugin) -> Period:
    start, end = plugin.bounds(anchor, context.adapter)
    start = as_datetime(start)
    end = as_datetime(end)
    if not start <= anchor <= end:
        raise InvalidPeriodError(
            f"Unit {unit!r} bounds {start.isoformat()} - {end.isoformat()} do not contain {anchor.isoformat()}"
        )
    return Period(start=start, end=end, type=unit, date=anchor)


def create_period(context: TemporalContext, date, unit: str) -> Period:
    """
    Create the period of the given unit containing date.

    Args:
        context: Temporal context (adapter + week_starts_on)
        date: Anchor datetime (a plain date means midnight)
        unit: Unit tag or alias, or a unit defined on the context (custom
            is not accepted, see create_custom_period)

    Returns:
        Period with start/end boundaries, type=unit, date=anchor

    Raises:
        UnknownUnitError: If unit is not a factory unit or context unit
        InvalidPeriodError: If a context unit returns bounds that do not
            contain date

    Examples:
        >>> ctx = create_context(week_starts_on=1)
        >>> p = create_period(ctx, datetime(2024, 1, 10, 15, 30), "week")
        >>> p.start, p.end
        (datetime(2024, 1, 8, 0, 0), datetime(2024, 1, 14, 23, 59, 59, 999999))

        >>> create_period(ctx, datetime(2024, 2, 15), "month").end
        datetime(2024, 2, 29, 23, 59, 59, 999999)
    """
    plugin = get_unit_plugin(context, unit)
    if plugin is not None:
        return _create_plugin_period(context, as_datetime(date), unit, plugin)

    unit = resolve_unit(unit, FACTORY_UNITS + tuple(context.units))
    anchor = as_datetime(date)

    if unit == STABLE_MONTH:
        start, end = stable_month_bounds(context, anchor)
    else:
        adapter = context.adapter
        start = adapter.start_of(anchor, unit, week_starts_on=context.week_starts_on)
        end = adapter.end_of(anchor, unit, week_starts_on=context.week_starts_on)

    return Period(start=start, end=end, type=unit, date=anchor)


def to_period(context: TemporalContext, date, unit: str = "day") -> Period:
    """
    Convert a point in time (e.g. an event timestamp) to its containing period.

    Same semantics as create_period, with the unit defaulting to "day".

    Examples:
        >>> to_period(ctx, datetime(2024, 3, 15, 10, 45)).type
        'day'
        >>> to_period(ctx, datetime(2024, 3, 15, 10, 45), "hour").start
        datetime(2024, 3, 15, 10, 0)
    """
    return create_period(context, date, unit)


def create_custom_period(start, end, date=None) -> Period:
    """
    Create a custom-typed period with explicit boundaries.

    Args:
        start: First instant
        end: Last instant (inclusive)
        date: Anchor instant (default: start)

    Raises:
        InvalidPeriodError: If end < start
        ValueError: If date lies outside [start, end]
    """
    start = as_datetime(start)
    end = as_datetime(end)
    anchor = start if date is None else as_datetime(date)

    period = Period(start=start, end=end, type=CUSTOM, date=anchor)
    validate_period(period)
    if not start <= anchor <= end:
        raise ValueError(f"Anchor {anchor.isoformat()} is outside the period")
    return period


def from_iso_week(context: TemporalContext, year: int, week: int) -> Period:
    """
    Week period for an ISO 8601 week number.

    The period is anchored on the ISO week's Monday (isoweek library) and
    built with the context's week_starts_on, so with a Monday start it is
    exactly the ISO week.

    Args:
        year: ISO year
        week: ISO week number (1-53)

    Raises:
        ValueError: If week is out of range or the ISO year has no such week

    Example:
        >>> from_iso_week(create_context(week_starts_on=1), 2025, 2).start
        datetime(2025, 1, 6, 0, 0)
    """
    if not 1 <= week <= 53:
        raise ValueError(f"ISO week must be 1..53, got {week}")

    iso_week = Week(year, week)
    # Week() rolls a missing week 53 over into the next year
    if iso_week.year != year or iso_week.week != week:
        raise ValueError(f"ISO year {year} has no week {week}")

    monday = iso_week.monday()
    anchor = datetime(monday.year, monday.month, monday.day)
    return create_period(context, anchor, "week")


def period_number(period: Period) -> int:
    """
    Numeric label of a period, taken from its anchor date.

    year -> 2024, quarter -> 1..4, month/stableMonth -> 1..12,
    week -> ISO week number, day -> day of month, hour/minute/second ->
    clock field, custom -> 0.

    Examples:
        >>> period_number(create_period(ctx, datetime(2024, 12, 5), "month"))
        12
        >>> period_number(create_period(ctx, datetime(2024, 8, 20), "quarter"))
        3
    """
    date = period.date
    kind = period.type

    if kind == "year":
        return date.year
    elif kind == "quarter":
        return (date.month - 1) // 3 + 1
    elif kind in ("month", STABLE_MONTH):
        return date.month
    elif kind == "week":
        return Week.withdate(date).week
    elif kind == "day":
        return date.day
    elif kind == "hour":
        return date.hour
    elif kind == "minute":
        return date.minute
    elif kind == "second":
        return date.second

    return 0


__all__ = [
    "FACTORY_UNITS",
    "as_datetime",
    "stable_month_bounds",
    "create_period",
    "to_period",
    "create_custom_period",
    "from_iso_week",
    "period_number",
]
