"""Unit Name Normalization
-----------------------

Map free-form unit names to canonical unit tags before they reach the
engine.

Examples:
  >>> normalize_unit_name("Months")
  'month'

  >>> normalize_unit_name("stable-month")
  'stableMonth'

  >>> normalize_unit_name("qtr")
  'quarter'

  >>> resolve_unit("mnth")
  Traceback (most recent call last):
  UnknownUnitError: Unknown unit: 'mnth' (did you mean 'month'?)
"""

from __future__ import annotations
import re
import unicodedata
from typing import Optional

from temporalperiods.errors import UnknownUnitError
from temporalperiods.shared_utils import ALL_UNITS, STABLE_MONTH, suggest_unit


# Normalized alias -> canonical unit tag
UNIT_ALIASES = {
    "y": "year",
    "yr": "year",
    "yrs": "year",
    "year": "year",
    "years": "year",
    "annual": "year",
    "q": "quarter",
    "qtr": "quarter",
    "qtrs": "quarter",
    "quarter": "quarter",
    "quarters": "quarter",
    "mo": "month",
    "mon": "month",
    "mos": "month",
    "month": "month",
    "months": "month",
    "w": "week",
    "wk": "week",
    "wks": "week",
    "week": "week",
    "weeks": "week",
    "d": "day",
    "day": "day",
    "days": "day",
    "h": "hour",
    "hr": "hour",
    "hrs": "hour",
    "hour": "hour",
    "hours": "hour",
    "min": "minute",
    "mins": "minute",
    "minute": "minute",
    "minutes": "minute",
    "s": "second",
    "sec": "second",
    "secs": "second",
    "second": "second",
    "seconds": "second",
    "stablemonth": STABLE_MONTH,
    "stablemonths": STABLE_MONTH,
    "stable month": STABLE_MONTH,
    "calendar grid": STABLE_MONTH,
    "custom": "custom",
}


def _normalize_text(text: str) -> str:
    """
    Lowercase, NFC-normalize, and collapse separators to single spaces.

    Examples:
        >>> _normalize_text("  Stable_Month ")
        'stable month'
    """
    text = unicodedata.normalize("NFC", str(text)).strip().lower()
    text = re.sub(r"[\s_\-]+", " ", text)
    return text.strip()


def normalize_unit_name(text) -> Optional[str]:
    """
    Resolve a unit name or alias to its canonical tag.

    Canonical tags pass through unchanged, including the camelCase
    "stableMonth".

    Args:
        text: Unit name (e.g. "Months", "qtr", "stable month")

    Returns:
        Canonical unit tag or None if not recognized
    """
    if text is None:
        return None
    if text in ALL_UNITS:
        return text

    norm = _normalize_text(text)
    if not norm:
        return None
    if norm in UNIT_ALIASES:
        return UNIT_ALIASES[norm]

    # "stablemonth" written with a separator dropped
    compact = norm.replace(" ", "")
    return UNIT_ALIASES.get(compact)


def resolve_unit(text, allowed=ALL_UNITS) -> str:
    """
    Resolve a unit name, raising when it is not recognized or not allowed.

    Args:
        text: Unit name or alias
        allowed: Canonical tags accepted by the caller

    Returns:
        Canonical unit tag

    Raises:
        UnknownUnitError: If the name does not resolve to an allowed tag
    """
    unit = normalize_unit_name(text)
    if unit is None or unit not in allowed:
        raise UnknownUnitError(text, suggest_unit(str(text), allowed))
    return unit


__all__ = [
    "UNIT_ALIASES",
    "normalize_unit_name",
    "resolve_unit",
]
