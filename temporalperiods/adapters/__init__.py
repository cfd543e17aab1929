"""Date adapters for the period engine.

Public API:
    create_dateutil_adapter(week_starts_on=1) -> DateAdapter
        Adapter using dateutil.relativedelta for month carry (default)

    create_native_adapter(week_starts_on=1) -> DateAdapter
        Adapter using the standard calendar module

    get_adapter(name) -> DateAdapter
        Resolve an adapter by explicit name ("dateutil" or "native")

Examples:
    >>> from temporalperiods.adapters import create_native_adapter
    >>> adapter = create_native_adapter()
    >>> adapter.end_of(datetime(2023, 2, 10), "month")
    datetime(2023, 2, 28, 23, 59, 59, 999999)
"""

from temporalperiods.adapters.adapterapi import (
    DateAdapter,
    create_dateutil_adapter,
    create_native_adapter,
    get_adapter,
    ADAPTER_FACTORIES,
    DEFAULT_ADAPTER,
)
from temporalperiods.adapters.adapterunits import UnitHandler

__all__ = [
    "DateAdapter",
    "UnitHandler",
    "create_dateutil_adapter",
    "create_native_adapter",
    "get_adapter",
    "ADAPTER_FACTORIES",
    "DEFAULT_ADAPTER",
]
