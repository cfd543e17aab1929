"""Navigate between periods of the same type, and zoom between units.

Calendar periods are re-derived from their shifted anchor date rather than
shifted by a fixed length, because months, quarters and years vary in
length. Custom periods have no calendar unit, so they move by their own
clock duration. Units defined on the context walk neighbour by neighbour,
each re-derived from the instant just past the current boundary, so units
of varying length (fiscal quarters) stay aligned.
"""

from __future__ import annotations

from temporalperiods.errors import UnknownUnitError
from temporalperiods.operations.divide import divide
from temporalperiods.period.periodidentity import create_period
from temporalperiods.period.periodnormalize import resolve_unit
from temporalperiods.period.periodtypes import (
    Period,
    TemporalContext,
    UNIT_DEFINITIONS,
    get_unit_plugin,
    unit_rank,
)
from temporalperiods.shared_utils import CUSTOM, TICK, validate_period


def _shift_custom(period: Period, steps: int) -> Period:
    offset = period.duration * steps
    return Period(
        start=period.start + offset,
        end=period.end + offset,
        type=CUSTOM,
        date=period.date + offset,
    )


def _shift_plugin(context: TemporalContext, period: Period, steps: int) -> Period:
    current = period
    for _ in range(abs(steps)):
        # Neighbours start one tick past either boundary, whatever their length
        anchor = current.end + TICK if steps > 0 else current.start - TICK
        current = create_period(context, anchor, period.type)
    return current


def go(context: TemporalContext, period: Period, steps: int) -> Period:
    """
    Move a period forward (steps > 0) or backward (steps < 0).

    One adapter.add of the anchor by steps units, then the factory rebuilds
    the period; this equals stepping one at a time because month carry only
    clamps the day, never the month.

    Args:
        context: Temporal context
        period: Starting period
        steps: Number of periods to move (0 returns period unchanged)

    Raises:
        InvalidPeriodError: If period.end < period.start
        UnknownUnitError: If period.type is not recognized

    Examples:
        >>> go(ctx, create_period(ctx, datetime(2024, 1, 31), "month"), 1).end
        datetime(2024, 2, 29, 23, 59, 59, 999999)
        >>> go(ctx, create_period(ctx, datetime(2024, 1, 15), "quarter"), -1).start
        datetime(2023, 10, 1, 0, 0)
    """
    validate_period(period)
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise TypeError(f"steps must be an integer, got {type(steps).__name__}")
    if steps == 0:
        return period

    plugin = get_unit_plugin(context, period.type)
    if plugin is not None:
        return _shift_plugin(context, period, steps)

    definition = UNIT_DEFINITIONS.get(period.type)
    if definition is None:
        raise UnknownUnitError(period.type)

    if period.type == CUSTOM:
        return _shift_custom(period, steps)

    anchor = context.adapter.add(period.date, steps * definition.step_amount, definition.step_unit)
    return create_period(context, anchor, period.type)


def next_period(context: TemporalContext, period: Period) -> Period:
    """The period of the same type immediately after period."""
    return go(context, period, 1)


def previous_period(context: TemporalContext, period: Period) -> Period:
    """The period of the same type immediately before period."""
    return go(context, period, -1)


# ============================================================================
# Zoom
# ============================================================================

def zoom_in(context: TemporalContext, period: Period, unit: str) -> list[Period]:
    """Finer periods making up period (same as divide)."""
    return divide(context, period, unit)


def zoom_out(context: TemporalContext, period: Period, unit: str) -> Period:
    """
    Coarser period containing the period's anchor date.

    Periods of custom or context-defined type have no rank, so any built-in
    unit with a rank is coarser.

    Raises:
        ValueError: If unit is not coarser than period.type
    """
    validate_period(period)
    if get_unit_plugin(context, unit) is not None:
        raise ValueError(f"Cannot zoom out to {unit}, units defined on the context have no rank")
    unit = resolve_unit(unit)

    if get_unit_plugin(context, period.type) is not None:
        current = None
    else:
        current = unit_rank(resolve_unit(period.type))
    target = unit_rank(unit)
    if target is None or (current is not None and target <= current):
        raise ValueError(f"Cannot zoom out from {period.type} to {unit}")

    return create_period(context, period.date, unit)


def zoom_to(context: TemporalContext, period: Period, unit: str) -> Period:
    """Period of any unit containing the period's anchor date."""
    validate_period(period)
    return create_period(context, period.date, unit)


__all__ = [
    "go",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
]
