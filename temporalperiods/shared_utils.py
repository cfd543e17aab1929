"""
Shared Utility Functions
------------------------

Common helpers used across the adapters, period and operations modules.

Functions:
  - js_weekday: weekday number with 0=Sunday..6=Saturday
  - validate_week_starts_on: check a week start configuration value
  - validate_period: reject malformed periods (end < start)
  - suggest_unit: RapidFuzz "did you mean" lookup for unit names
  - periods_to_frame: tabular view of a list of periods
  - load_yaml_file: load and parse YAML file
"""

from __future__ import annotations
from datetime import datetime, timedelta
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pandas as pd

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from temporalperiods.errors import InvalidPeriodError


# ============================================================================
# Unit Tags
# ============================================================================

# Smallest step between two instants (datetime resolution)
TICK = timedelta(microseconds=1)

# Units every adapter must support, finest first
ADAPTER_UNITS = ("second", "minute", "hour", "day", "week", "month", "quarter", "year")

STABLE_MONTH = "stableMonth"
CUSTOM = "custom"

ALL_UNITS = ADAPTER_UNITS + (STABLE_MONTH, CUSTOM)

# Days covered by a stable month grid (6 full weeks)
STABLE_MONTH_DAYS = 42


# ============================================================================
# Weekday Helpers
# ============================================================================

def js_weekday(dt: datetime) -> int:
    """
    Return weekday number with Sunday as 0.

    datetime.weekday() counts from Monday; week_starts_on counts from Sunday.

    Examples:
        >>> js_weekday(datetime(2024, 1, 7))  # Sunday
        0

        >>> js_weekday(datetime(2024, 1, 8))  # Monday
        1
    """
    return dt.isoweekday() % 7


def validate_week_starts_on(value) -> int:
    """
    Validate a week start day (0=Sunday .. 6=Saturday).

    Raises:
        ValueError: If value is not an integer in 0..6
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ValueError(f"week_starts_on must be an integer 0..6 (0=Sunday), got {value!r}")
    return value


# ============================================================================
# Period Validation
# ============================================================================

def validate_period(period) -> None:
    """
    Reject a malformed period.

    Args:
        period: Period-like object with start/end attributes

    Raises:
        InvalidPeriodError: If end is before start
    """
    if period.end < period.start:
        raise InvalidPeriodError(
            f"Period end {period.end.isoformat()} is before start {period.start.isoformat()}"
        )


def validate_periods(periods: Iterable) -> None:
    """Validate every period in an iterable."""
    for period in periods:
        validate_period(period)


# ============================================================================
# Fuzzy Unit Suggestion
# ============================================================================

def suggest_unit(
    text: str,
    choices: Sequence[str] = ALL_UNITS,
    score_cutoff: float = 60.0,
) -> Optional[str]:
    """
    Suggest the closest known unit for an unrecognized name.

    Uses RapidFuzz WRatio scorer against the canonical unit tags.

    Args:
        text: Unrecognized unit text
        choices: Candidate unit tags
        score_cutoff: Minimum score (0-100) for a suggestion

    Returns:
        Best matching unit tag, or None if nothing scores above the cutoff

    Examples:
        >>> suggest_unit("monht")
        'month'

        >>> suggest_unit("xyz")
        None
    """
    if not text or not str(text).strip():
        return None

    match = process.extractOne(
        str(text).strip(),
        list(choices),
        scorer=fuzz.WRatio,
        score_cutoff=score_cutoff,
    )
    if match is None:
        return None
    return match[0]


# ============================================================================
# Tabular Export
# ============================================================================

def periods_to_frame(periods: Iterable) -> pd.DataFrame:
    """
    Build a DataFrame with one row per period.

    Columns: start, end, type, date (in input order).

    Examples:
        >>> df = periods_to_frame(divide(ctx, year, "month"))
        >>> len(df)
        12
        >>> list(df.columns)
        ['start', 'end', 'type', 'date']
    """
    rows = [
        {
            "start": p.start,
            "end": p.end,
            "type": p.type,
            "date": p.date,
        }
        for p in periods
    ]
    return pd.DataFrame(rows, columns=["start", "end", "type", "date"])


# ============================================================================
# Config Files
# ============================================================================

def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


__all__ = [
    "TICK",
    "ADAPTER_UNITS",
    "STABLE_MONTH",
    "CUSTOM",
    "ALL_UNITS",
    "STABLE_MONTH_DAYS",
    "js_weekday",
    "validate_week_starts_on",
    "validate_period",
    "validate_periods",
    "suggest_unit",
    "periods_to_frame",
    "load_yaml_file",
]
