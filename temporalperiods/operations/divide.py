"""Divide and split periods into contiguous sub-periods.

divide() walks a cursor from period.start, building one calendar period of
the target unit at a time and clipping it to the parent's bounds. split()
generalizes it with count- and duration-based partitions.

Every result is ordered, gap-free and overlap-free, and its union is exactly
[period.start, period.end].
"""

from __future__ import annotations
from datetime import datetime
from typing import Mapping, Optional

from temporalperiods.errors import (
    InvalidDivisionError,
    InvalidSplitOptionsError,
    UnknownUnitError,
)
from temporalperiods.period.periodidentity import as_datetime, create_period
from temporalperiods.period.periodnormalize import resolve_unit
from temporalperiods.period.periodtypes import (
    Period,
    TemporalContext,
    UNIT_DEFINITIONS,
    get_unit_plugin,
    registered_units,
)
from temporalperiods.shared_utils import CUSTOM, STABLE_MONTH, TICK, validate_period


# Duration keys (coarsest first) -> adapter unit
DURATION_UNITS = {
    "years": "year",
    "quarters": "quarter",
    "months": "month",
    "weeks": "week",
    "days": "day",
    "hours": "hour",
    "minutes": "minute",
    "seconds": "second",
}

SPLIT_OPTIONS = ("by", "count", "duration")


# ============================================================================
# Divide
# ============================================================================

def _allowed_divisions(context: TemporalContext, kind: str) -> tuple:
    """Units a period of type kind may be divided into."""
    plugin = get_unit_plugin(context, kind)
    if plugin is not None:
        return tuple(plugin.divisions)

    definition = UNIT_DEFINITIONS.get(kind)
    if definition is None:
        raise UnknownUnitError(kind)
    return definition.divisions


def divide(context: TemporalContext, period: Period, unit: str) -> list[Period]:
    """
    Divide a period into consecutive periods of a finer unit.

    Sub-periods that straddle the parent's boundaries (e.g. the weeks at the
    edges of a month) are clipped to the parent.

    Args:
        context: Temporal context
        period: Period to divide
        unit: Target unit, strictly finer than period.type (for a unit
            defined on the context, one listed in its divisions)

    Returns:
        Ordered list of unit-typed periods covering the parent exactly

    Raises:
        InvalidPeriodError: If period.end < period.start
        InvalidDivisionError: If unit is not finer than period.type, or is
            stableMonth/custom
        UnknownUnitError: If unit or period.type is not recognized

    Examples:
        >>> len(divide(ctx, create_period(ctx, datetime(2024, 2, 1), "month"), "day"))
        29
        >>> len(divide(ctx, create_period(ctx, datetime(2024, 5, 1), "stableMonth"), "week"))
        6
    """
    validate_period(period)
    if get_unit_plugin(context, unit) is None:
        unit = resolve_unit(unit, registered_units(context))

    if unit in (STABLE_MONTH, CUSTOM):
        raise InvalidDivisionError(f"Cannot divide by {unit}")

    divisions = _allowed_divisions(context, period.type)
    if unit not in divisions:
        raise InvalidDivisionError(f"Cannot divide {period.type} into {unit}")

    result = []
    cursor = period.start
    while cursor <= period.end:
        sub = create_period(context, cursor, unit)
        start = max(sub.start, period.start)
        end = min(sub.end, period.end)
        result.append(Period(start=start, end=end, type=unit, date=cursor))
        cursor = end + TICK

    return result


# ============================================================================
# Durations
# ============================================================================

def _validate_duration(duration) -> dict:
    """
    Check a duration mapping such as {"months": 1, "days": 15}.

    Raises:
        InvalidSplitOptionsError: If the mapping is empty, has unknown keys,
            non-integer or negative amounts, or no positive component
    """
    if not isinstance(duration, Mapping) or not duration:
        raise InvalidSplitOptionsError(f"Duration must be a non-empty mapping, got {duration!r}")

    unknown = set(duration) - set(DURATION_UNITS)
    if unknown:
        raise InvalidSplitOptionsError(
            f"Unknown duration keys: {sorted(unknown)}. Use {list(DURATION_UNITS)}"
        )

    for key, amount in duration.items():
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidSplitOptionsError(f"Duration {key} must be a non-negative integer, got {amount!r}")

    if not any(duration.values()):
        raise InvalidSplitOptionsError("Duration must have at least one positive component")

    return dict(duration)


def _advance(context: TemporalContext, date: datetime, duration: dict) -> datetime:
    """Shift date by one duration, applying each component via the adapter."""
    for key, unit in DURATION_UNITS.items():
        amount = duration.get(key)
        if amount:
            date = context.adapter.add(date, amount, unit)
    return date


def each(
    context: TemporalContext,
    start,
    end,
    step: Optional[Mapping] = None,
) -> list[datetime]:
    """
    Dates from start stepping by a duration while <= end.

    Each date is the previous one advanced by the step, so month-end clamping
    carries forward (Jan 31, Feb 29, Mar 29, ...).

    Args:
        start: First date
        end: Last allowed date (inclusive)
        step: Duration mapping (default: {"months": 1})

    Examples:
        >>> each(ctx, datetime(2024, 1, 31), datetime(2024, 4, 30))
        [datetime(2024, 1, 31), datetime(2024, 2, 29), datetime(2024, 3, 29), datetime(2024, 4, 29)]
    """
    duration = _validate_duration(step if step is not None else {"months": 1})
    start = as_datetime(start)
    end = as_datetime(end)

    dates = []
    current = start
    while current <= end:
        dates.append(current)
        current = _advance(context, current, duration)

    return dates


# ============================================================================
# Split
# ============================================================================

def _split_by_count(period: Period, count) -> list[Period]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidSplitOptionsError(f"count must be a positive integer, got {count!r}")

    total = period.duration // TICK
    if count > total:
        raise InvalidSplitOptionsError(f"Cannot split {total} microseconds into {count} spans")

    size = total // count
    spans = []
    for i in range(count):
        start = period.start + TICK * (i * size)
        # Remainder ticks go to the final span
        if i == count - 1:
            end = period.end
        else:
            end = period.start + TICK * ((i + 1) * size - 1)
        spans.append(Period(start=start, end=end, type=CUSTOM, date=start))

    return spans


def _split_by_duration(context: TemporalContext, period: Period, duration) -> list[Period]:
    boundaries = each(context, period.start, period.end, duration)

    spans = []
    for i, start in enumerate(boundaries):
        if i + 1 < len(boundaries):
            end = boundaries[i + 1] - TICK
        else:
            end = period.end
        spans.append(Period(start=start, end=end, type=CUSTOM, date=start))

    return spans


def split(
    context: TemporalContext,
    period: Period,
    options: Optional[Mapping] = None,
    *,
    by: Optional[str] = None,
    count: Optional[int] = None,
    duration: Optional[Mapping] = None,
) -> list[Period]:
    """
    Split a period by unit, by count, or by duration.

    Exactly one of by / count / duration must be given, either as keyword
    arguments or in an options mapping ({"by": "day"}, {"count": 4},
    {"duration": {"days": 10}}).

    Args:
        context: Temporal context
        period: Period to split
        options: Mapping with one of the keys by / count / duration
        by: Unit tag, same as divide()
        count: Number of equal clock-time spans (remainder to the last)
        duration: Duration mapping, final span truncated to period.end

    Returns:
        Ordered list of periods; typed by unit for ``by``, custom otherwise

    Raises:
        InvalidSplitOptionsError: If zero or several options are given, or an
            option value is unusable
        InvalidPeriodError: If period.end < period.start

    Examples:
        >>> [p.start.day for p in split(ctx, week, count=7)][:3]
        [8, 9, 10]
        >>> len(split(ctx, month, {"duration": {"days": 10}}))
        3
    """
    chosen = {"by": by, "count": count, "duration": duration}

    if options is not None:
        if not isinstance(options, Mapping):
            raise InvalidSplitOptionsError(f"Split options must be a mapping, got {type(options).__name__}")
        unknown = set(options) - set(SPLIT_OPTIONS)
        if unknown:
            raise InvalidSplitOptionsError(f"Unknown split options: {sorted(unknown)}")
        for name in SPLIT_OPTIONS:
            value = options.get(name)
            if value is None:
                continue
            if chosen[name] is not None:
                raise InvalidSplitOptionsError(f"Split option {name!r} given both in options and as keyword")
            chosen[name] = value

    supplied = [name for name in SPLIT_OPTIONS if chosen[name] is not None]
    if len(supplied) != 1:
        raise InvalidSplitOptionsError(
            f"Exactly one of by, count, duration is required (got {supplied or 'none'})"
        )

    validate_period(period)

    if chosen["by"] is not None:
        return divide(context, period, chosen["by"])
    if chosen["count"] is not None:
        return _split_by_count(period, chosen["count"])
    return _split_by_duration(context, period, chosen["duration"])


__all__ = [
    "DURATION_UNITS",
    "divide",
    "split",
    "each",
]
