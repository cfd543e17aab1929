"""Period Types
------------

Core value types of the period engine and its unit registry.

  - Period: immutable {start, end, type, date} value
  - TemporalContext: {adapter, week_starts_on, natural_units, units} configuration
  - UnitPlugin / define_unit: caller-defined units scoped to one context
  - UNIT_DEFINITIONS: read-only unit registry (granularity rank, allowed
    divisions, navigation step)
  - create_context: build a context, filling gaps from periodconfig.yaml
    and environment overrides

Key Design Principles:
  1. Periods are plain data: two timestamps and two tags
  2. Equality compares start, end and type; date is informational
  3. Nothing here holds mutable process-wide state
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Optional

from temporalperiods.adapters.adapterapi import DateAdapter, get_adapter, ADAPTER_FACTORIES
from temporalperiods.shared_utils import (
    ADAPTER_UNITS,
    ALL_UNITS,
    CUSTOM,
    STABLE_MONTH,
    TICK,
    load_yaml_file,
    validate_week_starts_on,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Period
# ============================================================================

@dataclass(frozen=True)
class Period:
    """
    Inclusive span of time tagged with a unit kind.

    Attributes:
        start: First instant of the period
        end: Last instant of the period (inclusive)
        type: Unit tag (year, quarter, month, week, day, hour, minute,
            second, stableMonth, custom, or a unit defined on the context)
        date: Anchor instant the period was derived from (not compared)

    Examples:
        >>> p = Period(datetime(2024, 1, 1), datetime(2024, 1, 1, 23, 59, 59, 999999),
        ...            "day", datetime(2024, 1, 1, 12))
        >>> p == Period(p.start, p.end, "day", p.start)
        True
        >>> p.to_dict()["type"]
        'day'
    """

    start: datetime
    end: datetime
    type: str
    date: datetime = field(compare=False)

    @property
    def duration(self) -> timedelta:
        """Clock length of the period (end - start + one tick)."""
        return self.end - self.start + TICK

    def to_dict(self) -> dict:
        """Plain-data representation."""
        return {
            "start": self.start,
            "end": self.end,
            "type": self.type,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Period":
        """Rebuild a Period from to_dict() output (date defaults to start)."""
        return cls(
            start=data["start"],
            end=data["end"],
            type=data["type"],
            date=data.get("date") or data["start"],
        )


# ============================================================================
# Unit Registry
# ============================================================================

class UnitDefinition(NamedTuple):
    """
    Static facts about one unit.

    rank: granularity (higher is coarser), None for custom
    divisions: units a period of this type may be divided into
    step_unit / step_amount: adapter unit and amount for one navigation step
    """

    rank: Optional[int]
    divisions: tuple
    step_unit: Optional[str]
    step_amount: int = 1


def _finer_than(rank: int) -> tuple:
    return tuple(u for u in ADAPTER_UNITS if ADAPTER_UNITS.index(u) < rank)


UNIT_DEFINITIONS = MappingProxyType({
    **{
        unit: UnitDefinition(rank=rank, divisions=_finer_than(rank), step_unit=unit)
        for rank, unit in enumerate(ADAPTER_UNITS)
    },
    # Month-sized grid, only day and week rows make sense inside it
    STABLE_MONTH: UnitDefinition(
        rank=ADAPTER_UNITS.index("month"),
        divisions=("week", "day"),
        step_unit="month",
    ),
    CUSTOM: UnitDefinition(rank=None, divisions=ADAPTER_UNITS, step_unit=None),
})


def unit_rank(unit: str) -> Optional[int]:
    """Granularity rank of a unit (second=0 .. year=7, custom=None)."""
    return UNIT_DEFINITIONS[unit].rank


class UnitPlugin(NamedTuple):
    """
    Caller-defined unit (sprint, fiscal quarter, semester, ...).

    bounds: (date, adapter) -> (start, end) of the unit containing date;
        end is inclusive, like every built-in unit
    divisions: units a period of this type may be divided into

    Example:
        >>> epoch = datetime(2024, 1, 1)
        >>> def sprint_bounds(date, adapter):
        ...     days = adapter.diff(epoch, adapter.start_of(date, "day"), "day")
        ...     start = adapter.add(epoch, (days // 14) * 14, "day")
        ...     return start, adapter.add(start, 14, "day") - TICK
        >>> sprint = UnitPlugin(bounds=sprint_bounds, divisions=("week", "day"))
    """

    bounds: Callable[[datetime, DateAdapter], tuple]
    divisions: tuple = ()


def _validate_plugins(units: Mapping) -> MappingProxyType:
    """Check caller-defined units and freeze them into a read-only mapping."""
    for name, plugin in units.items():
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Unit name must be a non-empty string, got {name!r}")
        if name in ALL_UNITS:
            raise ValueError(f"Cannot redefine built-in unit {name!r}")
        if not isinstance(plugin, UnitPlugin):
            raise ValueError(f"Unit {name!r} must be a UnitPlugin, got {type(plugin).__name__}")
        if not callable(plugin.bounds):
            raise ValueError(f"Unit {name!r} bounds must be callable")
        for division in plugin.divisions:
            if division not in ADAPTER_UNITS and division not in units:
                raise ValueError(f"Unit {name!r} cannot divide into unknown unit {division!r}")
    return MappingProxyType(dict(units))


# ============================================================================
# Configuration
# ============================================================================

CONFIG_PATH = Path(__file__).parent / "periodconfig.yaml"

ENV_WEEK_STARTS_ON = "TEMPORALPERIODS_WEEK_STARTS_ON"
ENV_ADAPTER = "TEMPORALPERIODS_ADAPTER"


def _load_config() -> dict:
    """Load default settings from periodconfig.yaml.

    Returns:
        Dictionary of settings (empty if the file is missing)
    """
    try:
        return load_yaml_file(CONFIG_PATH)
    except FileNotFoundError:
        logger.warning(f"Config file {CONFIG_PATH} not found, using built-in defaults")
        return {}


# Cache config on module load
_CONFIG = _load_config()


def default_week_starts_on() -> int:
    """
    Configured week start day.

    Priority: TEMPORALPERIODS_WEEK_STARTS_ON env var, periodconfig.yaml, Monday.
    """
    fallback = _CONFIG.get("week_starts_on", 1)
    try:
        fallback = validate_week_starts_on(fallback)
    except ValueError:
        logger.warning(f"Invalid week_starts_on in {CONFIG_PATH}: {fallback!r}, using 1")
        fallback = 1

    env_value = os.environ.get(ENV_WEEK_STARTS_ON)
    if env_value is None or not env_value.strip():
        return fallback

    try:
        return validate_week_starts_on(int(env_value))
    except ValueError:
        logger.warning(f"Ignoring invalid {ENV_WEEK_STARTS_ON}={env_value!r}, using {fallback}")
        return fallback


def default_adapter_name() -> str:
    """
    Configured adapter name.

    Priority: TEMPORALPERIODS_ADAPTER env var, periodconfig.yaml, "dateutil".
    """
    fallback = str(_CONFIG.get("adapter", "dateutil")).strip().lower()
    if fallback not in ADAPTER_FACTORIES:
        logger.warning(f"Invalid adapter in {CONFIG_PATH}: {fallback!r}, using 'dateutil'")
        fallback = "dateutil"

    env_value = os.environ.get(ENV_ADAPTER)
    if env_value is None or not env_value.strip():
        return fallback

    name = env_value.strip().lower()
    if name not in ADAPTER_FACTORIES:
        logger.warning(f"Ignoring invalid {ENV_ADAPTER}={env_value!r}, using {fallback!r}")
        return fallback
    return name


# ============================================================================
# Temporal Context
# ============================================================================

@dataclass(frozen=True)
class TemporalContext:
    """
    Configuration passed explicitly to every engine operation.

    Attributes:
        adapter: Date arithmetic backend
        week_starts_on: 0=Sunday .. 6=Saturday
        natural_units: Ordered merge classification rules (None = defaults)
        units: Caller-defined units, name -> UnitPlugin (read-only)
    """

    adapter: DateAdapter
    week_starts_on: int = 1
    natural_units: Optional[tuple] = None
    units: Mapping = field(default_factory=dict, hash=False)

    def __post_init__(self):
        validate_week_starts_on(self.week_starts_on)
        object.__setattr__(self, "units", _validate_plugins(self.units or {}))


# ---- Caller-defined units ----

def define_unit(context: TemporalContext, name: str, plugin: UnitPlugin) -> TemporalContext:
    """
    Return a copy of context that also knows the unit ``name``.

    The original context is unchanged. Redefining a unit replaces it with a
    warning.

    Examples:
        >>> ctx = define_unit(ctx, "sprint", UnitPlugin(sprint_bounds, ("week", "day")))
        >>> create_period(ctx, datetime(2024, 1, 10), "sprint").start
        datetime(2024, 1, 1, 0, 0)
    """
    if name in context.units:
        logger.warning(f"Unit {name!r} is already defined, overwriting previous definition")
    units = dict(context.units)
    units[name] = plugin
    return replace(context, units=units)


def get_unit_plugin(context: TemporalContext, name) -> Optional[UnitPlugin]:
    """The caller-defined unit registered under name, or None."""
    if not isinstance(name, str):
        return None
    return context.units.get(name)


def has_unit(context: TemporalContext, name) -> bool:
    """True for built-in units and units defined on the context."""
    return name in ALL_UNITS or get_unit_plugin(context, name) is not None


def registered_units(context: TemporalContext) -> tuple:
    """Built-in unit tags followed by the context's own units."""
    return ALL_UNITS + tuple(context.units)


def create_context(
    adapter: Optional[DateAdapter] = None,
    week_starts_on: Optional[int] = None,
    natural_units: Optional[tuple] = None,
    units: Optional[Mapping] = None,
) -> TemporalContext:
    """
    Build a TemporalContext, filling missing values from configuration.

    Args:
        adapter: Adapter instance (default: configured adapter name)
        week_starts_on: 0=Sunday .. 6=Saturday (default: configured value)
        natural_units: Merge rules (default: built-in rules)
        units: Caller-defined units, name -> UnitPlugin

    Returns:
        TemporalContext

    Examples:
        >>> ctx = create_context(week_starts_on=0)
        >>> ctx.week_starts_on
        0

        >>> create_context(adapter=create_native_adapter()).adapter.name
        'native'
    """
    if week_starts_on is None:
        week_starts_on = default_week_starts_on()
    week_starts_on = validate_week_starts_on(week_starts_on)

    if adapter is None:
        adapter = get_adapter(default_adapter_name(), week_starts_on=week_starts_on)

    if natural_units is not None:
        natural_units = tuple(natural_units)

    adapter_name = getattr(adapter, "name", type(adapter).__name__)
    logger.debug(f"Created context: adapter={adapter_name}, week_starts_on={week_starts_on}")
    return TemporalContext(
        adapter=adapter,
        week_starts_on=week_starts_on,
        natural_units=natural_units,
        units=units or {},
    )


__all__ = [
    "Period",
    "UnitDefinition",
    "UNIT_DEFINITIONS",
    "unit_rank",
    "UnitPlugin",
    "TemporalContext",
    "define_unit",
    "get_unit_plugin",
    "has_unit",
    "registered_units",
    "create_context",
    "default_week_starts_on",
    "default_adapter_name",
]
