"""Period operations: divide/split, merge, navigation and predicates."""

from temporalperiods.operations.divide import divide, split, each, DURATION_UNITS
from temporalperiods.operations.merge import (
    NaturalUnitRule,
    DEFAULT_NATURAL_UNIT_RULES,
    is_contiguous,
    match_natural_unit,
    merge,
)
from temporalperiods.operations.navigation import (
    go,
    next_period,
    previous_period,
    zoom_in,
    zoom_out,
    zoom_to,
)
from temporalperiods.operations.predicates import (
    contains,
    is_same,
    is_today,
    is_weekend,
    is_weekday,
)

__all__ = [
    "divide",
    "split",
    "each",
    "DURATION_UNITS",
    "NaturalUnitRule",
    "DEFAULT_NATURAL_UNIT_RULES",
    "is_contiguous",
    "match_natural_unit",
    "merge",
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
