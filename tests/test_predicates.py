"""Tests for containment and equality predicates.

Run with: pytest tests/test_predicates.py -v
"""

import pytest
from datetime import date, datetime

from temporalperiods.errors import InvalidPeriodError
from temporalperiods.operations.divide import divide
from temporalperiods.operations.predicates import (
    contains,
    is_same,
    is_today,
    is_weekday,
    is_weekend,
)
from temporalperiods.period.periodidentity import create_period
from temporalperiods.period.periodtypes import Period
from temporalperiods.shared_utils import TICK
from tests.conftest import end_of_day


# ============================================================================
# contains
# ============================================================================

class TestContainsInstant:
    """Instants are inside when start <= instant <= end"""

    def test_bounds_inclusive(self, ctx):
        february = create_period(ctx, datetime(2024, 2, 10), "month")
        assert contains(february, datetime(2024, 2, 1))
        assert contains(february, end_of_day(2024, 2, 29))
        assert not contains(february, end_of_day(2024, 2, 29) + TICK)
        assert not contains(february, end_of_day(2024, 1, 31))

    def test_plain_date(self, ctx):
        february = create_period(ctx, datetime(2024, 2, 10), "month")
        assert contains(february, date(2024, 2, 29))
        assert not contains(february, date(2024, 3, 1))

    def test_unsupported_target(self, ctx):
        february = create_period(ctx, datetime(2024, 2, 10), "month")
        with pytest.raises(TypeError):
            contains(february, "2024-02-10")


class TestContainsPeriod:
    """Periods are inside when fully enclosed"""

    def test_month_contains_its_days(self, ctx):
        february = create_period(ctx, datetime(2024, 2, 10), "month")
        assert all(contains(february, day) for day in divide(ctx, february, "day"))

    def test_period_contains_itself(self, ctx):
        week = create_period(ctx, datetime(2024, 2, 10), "week")
        assert contains(week, week)

    def test_straddling_week(self, ctx):
        """Jan 29 - Feb 4 starts before February"""
        february = create_period(ctx, datetime(2024, 2, 10), "month")
        week = create_period(ctx, datetime(2024, 2, 1), "week")
        assert not contains(february, week)

    def test_transitive(self, ctx):
        year = create_period(ctx, datetime(2024, 7, 4), "year")
        month = create_period(ctx, datetime(2024, 7, 4), "month")
        day = create_period(ctx, datetime(2024, 7, 4), "day")
        assert contains(year, month) and contains(month, day)
        assert contains(year, day)

    def test_malformed_target(self, ctx):
        february = create_period(ctx, datetime(2024, 2, 10), "month")
        bad = Period(datetime(2024, 2, 5), datetime(2024, 2, 4), "custom", datetime(2024, 2, 4))
        with pytest.raises(InvalidPeriodError):
            contains(february, bad)


class TestContainsStableMonth:
    """A stable month contains only its reference month"""

    def test_instants(self, ctx):
        grid = create_period(ctx, datetime(2024, 2, 15), "stableMonth")
        assert grid.start == datetime(2024, 1, 29)
        assert not contains(grid, datetime(2024, 1, 31), ctx)
        assert contains(grid, datetime(2024, 2, 1), ctx)
        assert contains(grid, datetime(2024, 2, 29, 12), ctx)
        assert not contains(grid, datetime(2024, 3, 1), ctx)

    def test_periods(self, ctx):
        grid = create_period(ctx, datetime(2024, 2, 15), "stableMonth")
        assert contains(grid, create_period(ctx, datetime(2024, 2, 10), "day"), ctx)
        assert not contains(grid, create_period(ctx, datetime(2024, 1, 30), "day"), ctx)
        assert not contains(grid, create_period(ctx, datetime(2024, 3, 5), "day"), ctx)

    def test_without_context(self, ctx):
        grid = create_period(ctx, datetime(2024, 2, 15), "stableMonth")
        assert not contains(grid, datetime(2024, 1, 31))
        assert contains(grid, datetime(2024, 2, 29))


# ============================================================================
# is_same
# ============================================================================

class TestIsSame:
    """Same period of a unit"""

    def test_same_month(self, ctx):
        assert is_same(ctx, datetime(2024, 3, 1), datetime(2024, 3, 31, 23), "month")

    def test_different_quarter(self, ctx):
        assert not is_same(ctx, datetime(2024, 3, 31), datetime(2024, 4, 1), "quarter")

    def test_week_depends_on_week_start(self, ctx, sunday_ctx):
        """Saturday June 15 and Sunday June 16, 2024"""
        saturday = datetime(2024, 6, 15, 9)
        sunday = datetime(2024, 6, 16, 18)
        assert is_same(ctx, saturday, sunday, "week")
        assert not is_same(sunday_ctx, saturday, sunday, "week")

    def test_plain_dates(self, ctx):
        assert is_same(ctx, date(2024, 5, 1), datetime(2024, 5, 1, 23, 59), "day")

    def test_none_never_same(self, ctx):
        assert not is_same(ctx, None, datetime(2024, 5, 1), "day")
        assert not is_same(ctx, None, None, "day")

    def test_unit_alias(self, ctx):
        assert is_same(ctx, datetime(2024, 1, 1), datetime(2024, 12, 31), "years")


# ============================================================================
# is_today / weekend
# ============================================================================

class TestCalendarPredicates:
    """Anchor-date predicates"""

    def test_is_today(self, ctx):
        hour = create_period(ctx, datetime(2024, 6, 15, 10, 30), "hour")
        assert is_today(ctx, hour, datetime(2024, 6, 15, 23, 0))
        assert not is_today(ctx, hour, datetime(2024, 6, 16, 0, 0))

    @pytest.mark.parametrize("day, weekend", [
        (15, True),   # Saturday
        (16, True),   # Sunday
        (17, False),  # Monday
        (21, False),  # Friday
    ])
    def test_weekend(self, ctx, day, weekend):
        period = create_period(ctx, datetime(2024, 6, day), "day")
        assert is_weekend(period) is weekend
        assert is_weekday(period) is not weekend
