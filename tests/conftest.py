"""Shared test fixtures and utilities for temporalperiods tests."""

import pytest
from datetime import datetime

from temporalperiods.adapters import ADAPTER_FACTORIES, create_dateutil_adapter
from temporalperiods.period.periodtypes import TemporalContext


def end_of_day(year: int, month: int, day: int) -> datetime:
    """Last microsecond of a day, the end of every day-based period."""
    return datetime(year, month, day, 23, 59, 59, 999999)


@pytest.fixture(params=sorted(ADAPTER_FACTORIES))
def adapter(request):
    """Every shipped adapter; tests using it run once per adapter."""
    return ADAPTER_FACTORIES[request.param]()


@pytest.fixture
def ctx(adapter):
    """Context with Monday week start, parametrized over adapters."""
    return TemporalContext(adapter=adapter, week_starts_on=1)


@pytest.fixture
def sunday_ctx(adapter):
    """Context with Sunday week start, parametrized over adapters."""
    return TemporalContext(adapter=adapter, week_starts_on=0)


@pytest.fixture
def monday_ctx():
    """Monday-start context on the default dateutil adapter only."""
    return TemporalContext(adapter=create_dateutil_adapter(), week_starts_on=1)


@pytest.fixture
def test_date():
    """June 15, 2024 14:30:45.123 (a Saturday)."""
    return datetime(2024, 6, 15, 14, 30, 45, 123000)
