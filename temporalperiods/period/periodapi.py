"""Period engine API.

Public entry points of the period engine, gathered in one module. Every
operation takes the TemporalContext explicitly; none reads global state or
the clock.

Factory:
    create_period(ctx, date, unit), to_period(ctx, date, unit="day"),
    create_custom_period(start, end), from_iso_week(ctx, year, week)

Operations:
    divide(ctx, period, unit), split(ctx, period, by=|count=|duration=),
    merge(ctx, periods), next_period(ctx, period),
    previous_period(ctx, period), go(ctx, period, steps),
    contains(period, target), is_same(ctx, a, b, unit)
"""

from temporalperiods.period.periodtypes import (
    Period,
    TemporalContext,
    UNIT_DEFINITIONS,
    UnitPlugin,
    create_context,
    define_unit,
    get_unit_plugin,
    has_unit,
    registered_units,
)
from temporalperiods.period.periodidentity import (
    create_period,
    to_period,
    create_custom_period,
    from_iso_week,
    period_number,
    stable_month_bounds,
)
from temporalperiods.period.periodnormalize import normalize_unit_name, resolve_unit
from temporalperiods.operations import (
    divide,
    split,
    each,
    merge,
    NaturalUnitRule,
    DEFAULT_NATURAL_UNIT_RULES,
    match_natural_unit,
    go,
    next_period,
    previous_period,
    zoom_in,
    zoom_out,
    zoom_to,
    contains,
    is_same,
    is_today,
    is_weekend,
    is_weekday,
)


__all__ = [
    "Period",
    "TemporalContext",
    "UNIT_DEFINITIONS",
    "UnitPlugin",
    "create_context",
    "define_unit",
    "get_unit_plugin",
    "has_unit",
    "registered_units",
    "create_period",
    "to_period",
    "create_custom_period",
    "from_iso_week",
    "period_number",
    "stable_month_bounds",
    "normalize_unit_name",
    "resolve_unit",
    "divide",
    "split",
    "each",
    "merge",
    "NaturalUnitRule",
    "DEFAULT_NATURAL_UNIT_RULES",
    "match_natural_unit",
    "go",
    "next_period",
    "previous_period",
    "zoom_in",
    "zoom_out",
    "zoom_to",
    "contains",
    "is_same",
    "is_today",
    "is_weekend",
    "is_weekday",
]
