"""Period values, context and factory.

Public API:
    create_context(adapter=None, week_starts_on=None) -> TemporalContext
        Context with defaults from periodconfig.yaml / environment

    create_period(context, date, unit) -> Period
        Period of the given unit containing date

    to_period(context, date, unit="day") -> Period
        Same as create_period, for converting timestamps

Examples:
    >>> from temporalperiods.period import create_context, create_period
    >>> ctx = create_context(week_starts_on=1)
    >>> create_period(ctx, datetime(2024, 2, 15), "stableMonth").start
    datetime(2024, 1, 29, 0, 0)
"""

from temporalperiods.period.periodtypes import (
    Period,
    TemporalContext,
    UnitDefinition,
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
)
from temporalperiods.period.periodnormalize import normalize_unit_name, resolve_unit

__all__ = [
    "Period",
    "TemporalContext",
    "UnitDefinition",
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
    "normalize_unit_name",
    "resolve_unit",
]
