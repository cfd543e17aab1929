"""Merge periods, recognizing when they form a standard calendar unit.

Natural-unit detection is an ordered list of NaturalUnitRule entries. Each
rule pairs a structural predicate (how many periods of which type) with an
anchor selector; a rule matches only when the period the factory builds at
that anchor has exactly the merged start and end. One extra or missing day
therefore always falls through to a custom period.

Default order (most specific first):
  1. week         7 consecutive days starting on week_starts_on
  2. month        28-31 consecutive days covering one calendar month
  3. stableMonth  42 consecutive days aligned to a month's week grid
  4. quarter      3 consecutive months starting Jan/Apr/Jul/Oct
  5. year         12 months from January, or 4 quarters

Extra rules (e.g. fiscal years) are added by passing a longer tuple as
TemporalContext.natural_units.
"""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Iterable, NamedTuple, Optional

from temporalperiods.period.periodidentity import create_period
from temporalperiods.period.periodtypes import Period, TemporalContext
from temporalperiods.shared_utils import (
    CUSTOM,
    STABLE_MONTH,
    STABLE_MONTH_DAYS,
    TICK,
    validate_periods,
)

logger = logging.getLogger(__name__)


class NaturalUnitRule(NamedTuple):
    """
    One merge classification rule.

    unit: unit tag the periods are reconstructed as
    predicate: structural test over the periods sorted by start
    anchor: picks the anchor date passed to create_period
    """

    unit: str
    predicate: Callable[[list], bool]
    anchor: Callable[[list], datetime]


# ---- Predicates ----

def _all_of_type(periods: list, kind: str) -> bool:
    return all(p.type == kind for p in periods)


def _is_week_of_days(periods: list) -> bool:
    return len(periods) == 7 and _all_of_type(periods, "day")


def _is_month_of_days(periods: list) -> bool:
    return 28 <= len(periods) <= 31 and _all_of_type(periods, "day")


def _is_stable_month_of_days(periods: list) -> bool:
    return len(periods) == STABLE_MONTH_DAYS and _all_of_type(periods, "day")


def _is_quarter_of_months(periods: list) -> bool:
    return len(periods) == 3 and _all_of_type(periods, "month")


def _is_year_of_months_or_quarters(periods: list) -> bool:
    return (
        (len(periods) == 12 and _all_of_type(periods, "month"))
        or (len(periods) == 4 and _all_of_type(periods, "quarter"))
    )


# ---- Anchors ----

def _first_start(periods: list) -> datetime:
    return periods[0].start


def _grid_first_row_end(periods: list) -> datetime:
    # The 7th grid day always falls inside the referenced month
    return periods[6].start


DEFAULT_NATURAL_UNIT_RULES = (
    NaturalUnitRule("week", _is_week_of_days, _first_start),
    NaturalUnitRule("month", _is_month_of_days, _first_start),
    NaturalUnitRule(STABLE_MONTH, _is_stable_month_of_days, _grid_first_row_end),
    NaturalUnitRule("quarter", _is_quarter_of_months, _first_start),
    NaturalUnitRule("year", _is_year_of_months_or_quarters, _first_start),
)


# ============================================================================
# Helpers
# ============================================================================

def is_contiguous(periods: list) -> bool:
    """
    True if each period starts exactly one tick after the previous one ends.

    Args:
        periods: Periods sorted by start
    """
    return all(
        later.start == earlier.end + TICK
        for earlier, later in zip(periods, periods[1:])
    )


def match_natural_unit(
    context: TemporalContext,
    periods: list,
    rules: Optional[Iterable[NaturalUnitRule]] = None,
) -> Optional[Period]:
    """
    Reconstruct contiguous sorted periods as a standard unit, if they form one.

    Rules are tried in order; the first whose predicate holds and whose
    reconstruction has exactly the periods' combined bounds wins.

    Args:
        context: Temporal context
        periods: Contiguous periods sorted by start
        rules: Rules to try (default: context.natural_units, then built-ins)

    Returns:
        Reconstructed Period or None
    """
    if not periods:
        return None
    if rules is None:
        rules = context.natural_units
    if rules is None:
        rules = DEFAULT_NATURAL_UNIT_RULES

    start = periods[0].start
    end = periods[-1].end

    for rule in rules:
        if not rule.predicate(periods):
            continue
        candidate = create_period(context, rule.anchor(periods), rule.unit)
        if candidate.start == start and candidate.end == end:
            return candidate

    return None


# ============================================================================
# Merge
# ============================================================================

def merge(context: TemporalContext, periods: Iterable[Period]) -> Optional[Period]:
    """
    Merge periods into one containing period.

    Steps:
      1. Empty input -> None; a single period is returned unchanged
      2. Sort by start; the result spans the first start to the latest end
      3. If contiguous, try natural-unit detection
      4. Otherwise (or no rule matched) return a custom period, date = start

    Raises:
        InvalidPeriodError: If any period has end < start

    Examples:
        >>> merge(ctx, [])
        None
        >>> merge(ctx, divide(ctx, week, "day")).type
        'week'
        >>> merge(ctx, [monday, wednesday]).type
        'custom'
    """
    periods = list(periods)
    if not periods:
        return None

    validate_periods(periods)
    if len(periods) == 1:
        return periods[0]

    ordered = sorted(periods, key=lambda p: (p.start, p.end))
    start = ordered[0].start
    end = max(p.end for p in ordered)

    if is_contiguous(ordered):
        natural = match_natural_unit(context, ordered)
        if natural is not None:
            logger.debug(f"Merged {len(ordered)} periods into natural unit {natural.type}")
            return natural

    logger.debug(f"Merged {len(ordered)} periods into custom span {start.isoformat()} - {end.isoformat()}")
    return Period(start=start, end=end, type=CUSTOM, date=start)


__all__ = [
    "NaturalUnitRule",
    "DEFAULT_NATURAL_UNIT_RULES",
    "is_contiguous",
    "match_natural_unit",
    "merge",
]
