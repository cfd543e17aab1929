"""Temporal Periods - hierarchical time-period arithmetic

Public API for computing calendar periods, dividing and merging them, and
navigating between them.

Usage:
    from datetime import datetime
    from temporalperiods import create_context, create_period, divide, merge, go

    ctx = create_context(week_starts_on=1)  # Monday

    # Period of a unit containing a date
    month = create_period(ctx, datetime(2024, 2, 15), "month")  # Feb 1 - Feb 29 2024

    # Split into days, and merge them back into the month
    days = divide(ctx, month, "day")  # 29 day periods
    merge(ctx, days).type  # 'month'

    # Six-week calendar grid that never changes size
    grid = create_period(ctx, datetime(2024, 2, 15), "stableMonth")  # Jan 29 - Mar 10

    # Navigation
    go(ctx, month, 1)  # March 2024

See README.md for the full list of operations.
"""

__version__ = "0.1.0"

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    PeriodError,
    UnknownUnitError,
    InvalidDivisionError,
    InvalidPeriodError,
    InvalidSplitOptionsError,
)

# ============================================================================
# Adapters
# ============================================================================
# Primary interface: temporalperiods.adapters.adapterapi
# Unit handlers: temporalperiods.adapters.adapterunits (internal)

from .adapters import (
    DateAdapter,            # Adapter built from a unit handler registry
    create_dateutil_adapter,  # dateutil.relativedelta month carry (default)
    create_native_adapter,  # standard library month carry
    get_adapter,            # Resolve adapter by explicit name
)

# ============================================================================
# Periods and Operations
# ============================================================================

from .period.periodapi import (
    Period,                 # Immutable {start, end, type, date} value
    TemporalContext,        # {adapter, week_starts_on, natural_units}
    create_context,         # Context with configured defaults
    UnitPlugin,             # Caller-defined unit (bounds + divisions)
    define_unit,            # Context copy with an extra unit
    has_unit,
    registered_units,
    create_period,          # Period of a unit containing a date
    to_period,              # Same as create_period, unit defaults to day
    create_custom_period,   # Explicit start/end span
    from_iso_week,          # ISO 8601 week -> week period
    period_number,          # Numeric label (year, month number, ISO week, ...)
    normalize_unit_name,    # Unit alias -> canonical tag
    divide,                 # Period -> finer contiguous periods
    split,                  # divide by unit, count or duration
    each,                   # Dates stepping by a duration
    merge,                  # Periods -> containing period (natural units detected)
    NaturalUnitRule,        # Merge classification rule
    DEFAULT_NATURAL_UNIT_RULES,
    go,                     # Move by N periods
    next_period,
    previous_period,
    zoom_in,
    zoom_out,
    zoom_to,
    contains,               # Instant / period containment
    is_same,                # Same period of a unit
    is_today,
    is_weekend,
    is_weekday,
)

# ============================================================================
# Utilities
# ============================================================================

from .shared_utils import periods_to_frame, TICK


__all__ = [
    "__version__",
    # Errors
    "PeriodError",
    "UnknownUnitError",
    "InvalidDivisionError",
    "InvalidPeriodError",
    "InvalidSplitOptionsError",
    # Adapters
    "DateAdapter",
    "create_dateutil_adapter",
    "create_native_adapter",
    "get_adapter",
    # Periods
    "Period",
    "TemporalContext",
    "create_context",
    "UnitPlugin",
    "define_unit",
    "has_unit",
    "registered_units",
    "create_period",
    "to_period",
    "create_custom_period",
    "from_iso_week",
    "period_number",
    "normalize_unit_name",
    # Operations
    "divide",
    "split",
    "each",
    "merge",
    "NaturalUnitRule",
    "DEFAULT_NATURAL_UNIT_RULES",
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
    # Utilities
    "periods_to_frame",
    "TICK",
]
