"""Date adapter API.

An adapter supplies calendar-correct primitive arithmetic (start_of, end_of,
add, diff) for the units year, quarter, month, week, day, hour, minute and
second. It knows nothing about periods, stable months or custom spans; those
are composed from the primitives by the period engine.

Adapters are always passed explicitly inside a TemporalContext. get_adapter()
only resolves an explicit name, it never guesses "the best" library.
"""

from __future__ import annotations
from datetime import datetime
from typing import Mapping, Optional

from temporalperiods.adapters.adapterunits import (
    DATEUTIL_HANDLERS,
    NATIVE_HANDLERS,
    UnitHandler,
)
from temporalperiods.errors import UnknownUnitError
from temporalperiods.shared_utils import (
    ADAPTER_UNITS,
    suggest_unit,
    validate_week_starts_on,
)


class DateAdapter:
    """
    Date arithmetic backend built from a unit -> UnitHandler registry.

    Args:
        name: Adapter name (e.g. "dateutil", "native")
        handlers: Mapping of unit tag to UnitHandler
        week_starts_on: Week start used when a call does not pass one
            (0=Sunday .. 6=Saturday, default Monday)

    Examples:
        >>> adapter = create_dateutil_adapter()
        >>> adapter.start_of(datetime(2024, 6, 15, 14, 30), "month")
        datetime(2024, 6, 1, 0, 0)

        >>> adapter.add(datetime(2024, 1, 31), 1, "month")
        datetime(2024, 2, 29, 0, 0)

        >>> adapter.diff(datetime(2024, 1, 1), datetime(2024, 12, 31), "month")
        11
    """

    def __init__(
        self,
        name: str,
        handlers: Mapping[str, UnitHandler],
        week_starts_on: int = 1,
    ):
        self.name = name
        self.week_starts_on = validate_week_starts_on(week_starts_on)
        self._handlers = handlers

    def __repr__(self) -> str:
        return f"DateAdapter(name={self.name!r}, week_starts_on={self.week_starts_on})"

    @property
    def units(self) -> tuple:
        """Unit tags this adapter supports."""
        return tuple(self._handlers)

    def _handler(self, unit: str) -> UnitHandler:
        try:
            return self._handlers[unit]
        except (KeyError, TypeError):
            raise UnknownUnitError(unit, suggest_unit(unit, ADAPTER_UNITS)) from None

    def _week_start(self, week_starts_on: Optional[int]) -> int:
        if week_starts_on is None:
            return self.week_starts_on
        return validate_week_starts_on(week_starts_on)

    def start_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        """Earliest instant of the unit containing date."""
        return self._handler(unit).start_of(date, self._week_start(week_starts_on))

    def end_of(self, date: datetime, unit: str, *, week_starts_on: Optional[int] = None) -> datetime:
        """Latest instant (last microsecond) of the unit containing date."""
        return self._handler(unit).end_of(date, self._week_start(week_starts_on))

    def add(self, date: datetime, amount: int, unit: str) -> datetime:
        """Shift date by amount units with calendar-correct carry."""
        handler = self._handler(unit)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"amount must be an integer, got {type(amount).__name__}")
        return handler.add(date, amount)

    def diff(self, a: datetime, b: datetime, unit: str) -> int:
        """Whole units from a to b (negative when b < a)."""
        return self._handler(unit).diff(a, b)


# ============================================================================
# Adapter Factories
# ============================================================================

def create_dateutil_adapter(week_starts_on: int = 1) -> DateAdapter:
    """Adapter whose month/quarter/year carry uses dateutil.relativedelta."""
    return DateAdapter("dateutil", DATEUTIL_HANDLERS, week_starts_on=week_starts_on)


def create_native_adapter(week_starts_on: int = 1) -> DateAdapter:
    """Adapter built on the standard calendar module only."""
    return DateAdapter("native", NATIVE_HANDLERS, week_starts_on=week_starts_on)


ADAPTER_FACTORIES = {
    "dateutil": create_dateutil_adapter,
    "native": create_native_adapter,
}


def get_adapter(name: str, week_starts_on: int = 1) -> DateAdapter:
    """
    Create an adapter by explicit name.

    Args:
        name: "dateutil" or "native" (case-insensitive)
        week_starts_on: Default week start for the adapter

    Raises:
        ValueError: If the name is not a known adapter
    """
    key = (name or "").strip().lower()
    factory = ADAPTER_FACTORIES.get(key)
    if factory is None:
        raise ValueError(f"Unknown adapter: {name}. Use one of {sorted(ADAPTER_FACTORIES)}")
    return factory(week_starts_on=week_starts_on)


# Shared default instance, adapters hold no mutable state
DEFAULT_ADAPTER = create_dateutil_adapter()


__all__ = [
    "DateAdapter",
    "create_dateutil_adapter",
    "create_native_adapter",
    "get_adapter",
    "ADAPTER_FACTORIES",
    "DEFAULT_ADAPTER",
]
