"""Adapter Unit Handlers
---------------------

Per-unit date arithmetic used by the adapters. Each calendar unit maps to a
UnitHandler holding four pure functions (start_of, end_of, add, diff); an
adapter is nothing more than one of these handler registries.

Two registries are built here:
  - DATEUTIL_HANDLERS: month/quarter/year carry via dateutil.relativedelta
  - NATIVE_HANDLERS: month/quarter/year carry via the calendar module

Fixed-length units (second, minute, hour, day, week) use timedelta in both.

Key Behaviors:
  1. Inputs are never mutated, datetime.replace/arithmetic return new values
  2. end_of is the last microsecond of the unit (e.g. 23:59:59.999999)
  3. Month carry clamps to the last valid day (Jan 31 + 1 month = Feb 29 2024)
  4. diff(a, b) counts whole units from a to b, truncated toward zero
"""

from __future__ import annotations
import calendar
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Callable, NamedTuple, Optional

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e

from temporalperiods.shared_utils import TICK, js_weekday


class UnitHandler(NamedTuple):
    """Pure arithmetic for one calendar unit."""

    start_of: Callable[[datetime, Optional[int]], datetime]
    end_of: Callable[[datetime, Optional[int]], datetime]
    add: Callable[[datetime, int], datetime]
    diff: Callable[[datetime, datetime], int]


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division truncated toward zero."""
    q = abs(value) // divisor
    return q if value >= 0 else -q


# ---- Start of unit ----

def _start_of_second(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    return dt.replace(microsecond=0)


def _start_of_minute(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    return dt.replace(second=0, microsecond=0)


def _start_of_hour(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    return dt.replace(minute=0, second=0, microsecond=0)


def _start_of_day(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _start_of_week(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    """
    Start of the week containing dt.

    week_starts_on: 0=Sunday .. 6=Saturday (defaults to Monday)

    Examples:
        >>> _start_of_week(datetime(2024, 1, 10), 1)  # Wednesday
        datetime(2024, 1, 8, 0, 0)  # Monday

        >>> _start_of_week(datetime(2024, 1, 10), 0)
        datetime(2024, 1, 7, 0, 0)  # Sunday
    """
    if week_starts_on is None:
        week_starts_on = 1
    day = _start_of_day(dt)
    offset = (js_weekday(day) - week_starts_on) % 7
    return day - timedelta(days=offset)


def _start_of_month(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def _start_of_quarter(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    # Q1 = Jan-Mar, Q2 = Apr-Jun, Q3 = Jul-Sep, Q4 = Oct-Dec
    first_month = ((dt.month - 1) // 3) * 3 + 1
    return dt.replace(month=first_month, day=1, hour=0, minute=0, second=0, microsecond=0)


def _start_of_year(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
    return dt.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)


# ---- Fixed-length units ----

def _fixed_add(step: timedelta) -> Callable[[datetime, int], datetime]:
    def add(dt: datetime, amount: int) -> datetime:
        return dt + step * amount
    return add


def _fixed_diff(step: timedelta) -> Callable[[datetime, datetime], int]:
    step_us = step // TICK

    def diff(a: datetime, b: datetime) -> int:
        return _trunc_div((b - a) // TICK, step_us)
    return diff


# ---- Month carry: dateutil ----

def _dateutil_add_months(dt: datetime, months: int) -> datetime:
    return dt + relativedelta(months=months)


def _dateutil_diff_months(a: datetime, b: datetime) -> int:
    rd = relativedelta(b, a)
    return rd.years * 12 + rd.months


# ---- Month carry: native ----

def _native_add_months(dt: datetime, months: int) -> datetime:
    """
    Shift by whole months, clamping the day to the target month's length.

    Examples:
        >>> _native_add_months(datetime(2024, 1, 31), 1)
        datetime(2024, 2, 29, 0, 0)

        >>> _native_add_months(datetime(2024, 3, 31), -1)
        datetime(2024, 2, 29, 0, 0)
    """
    total = dt.year * 12 + (dt.month - 1) + months
    year, month_index = divmod(total, 12)
    month = month_index + 1
    last_day = calendar.monthrange(year, month)[1]
    return dt.replace(year=year, month=month, day=min(dt.day, last_day))


def _native_diff_months(a: datetime, b: datetime) -> int:
    months = (b.year - a.year) * 12 + (b.month - a.month)
    # Back off one month when the clamped shift overshoots b
    shifted = _native_add_months(a, months)
    if months > 0 and shifted > b:
        months -= 1
    elif months < 0 and shifted < b:
        months += 1
    return months


# ---- Handler construction ----

def _handler(start_of, add, diff) -> UnitHandler:
    """Build a UnitHandler whose end_of is one tick before the next unit start."""

    def end_of(dt: datetime, week_starts_on: Optional[int] = None) -> datetime:
        return add(start_of(dt, week_starts_on), 1) - TICK

    return UnitHandler(start_of=start_of, end_of=end_of, add=add, diff=diff)


def _calendar_handlers(add_months, diff_months) -> MappingProxyType:
    """Build the full registry around one month-carry implementation."""
    second = timedelta(seconds=1)
    minute = timedelta(minutes=1)
    hour = timedelta(hours=1)
    day = timedelta(days=1)
    week = timedelta(weeks=1)

    def add_quarters(dt: datetime, amount: int) -> datetime:
        return add_months(dt, amount * 3)

    def diff_quarters(a: datetime, b: datetime) -> int:
        return _trunc_div(diff_months(a, b), 3)

    def add_years(dt: datetime, amount: int) -> datetime:
        return add_months(dt, amount * 12)

    def diff_years(a: datetime, b: datetime) -> int:
        return _trunc_div(diff_months(a, b), 12)

    return MappingProxyType({
        "second": _handler(_start_of_second, _fixed_add(second), _fixed_diff(second)),
        "minute": _handler(_start_of_minute, _fixed_add(minute), _fixed_diff(minute)),
        "hour": _handler(_start_of_hour, _fixed_add(hour), _fixed_diff(hour)),
        "day": _handler(_start_of_day, _fixed_add(day), _fixed_diff(day)),
        "week": _handler(_start_of_week, _fixed_add(week), _fixed_diff(week)),
        "month": _handler(_start_of_month, add_months, diff_months),
        "quarter": _handler(_start_of_quarter, add_quarters, diff_quarters),
        "year": _handler(_start_of_year, add_years, diff_years),
    })


DATEUTIL_HANDLERS = _calendar_handlers(_dateutil_add_months, _dateutil_diff_months)
NATIVE_HANDLERS = _calendar_handlers(_native_add_months, _native_diff_months)


__all__ = [
    "UnitHandler",
    "DATEUTIL_HANDLERS",
    "NATIVE_HANDLERS",
]
