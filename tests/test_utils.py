"""Tests for shared utilities."""

import pytest
from datetime import datetime
from pathlib import Path
import pandas as pd
import tempfile

from temporalperiods.errors import InvalidPeriodError
from temporalperiods.operations.divide import divide
from temporalperiods.period.periodidentity import create_period
from temporalperiods.period.periodtypes import Period
from temporalperiods.shared_utils import (
    js_weekday,
    load_yaml_file,
    periods_to_frame,
    suggest_unit,
    validate_period,
    validate_periods,
    validate_week_starts_on,
)


class TestWeekdayHelpers:
    """Test Sunday-based weekday numbers"""

    def test_js_weekday(self):
        assert js_weekday(datetime(2024, 1, 7)) == 0   # Sunday
        assert js_weekday(datetime(2024, 1, 8)) == 1   # Monday
        assert js_weekday(datetime(2024, 1, 13)) == 6  # Saturday

    @pytest.mark.parametrize("value", range(7))
    def test_valid_week_start(self, value):
        assert validate_week_starts_on(value) == value

    @pytest.mark.parametrize("value", [-1, 7, 1.0, "1", None, True])
    def test_invalid_week_start(self, value):
        with pytest.raises(ValueError):
            validate_week_starts_on(value)


class TestValidatePeriod:
    """Test malformed period detection"""

    def test_valid_period(self):
        validate_period(Period(datetime(2024, 1, 1), datetime(2024, 1, 1), "custom", datetime(2024, 1, 1)))

    def test_end_before_start(self):
        bad = Period(datetime(2024, 1, 2), datetime(2024, 1, 1), "custom", datetime(2024, 1, 1))
        with pytest.raises(InvalidPeriodError, match="before start"):
            validate_period(bad)

    def test_validate_periods(self):
        good = Period(datetime(2024, 1, 1), datetime(2024, 1, 2), "custom", datetime(2024, 1, 1))
        bad = Period(datetime(2024, 1, 2), datetime(2024, 1, 1), "custom", datetime(2024, 1, 1))
        validate_periods([good, good])
        with pytest.raises(InvalidPeriodError):
            validate_periods([good, bad])


class TestSuggestUnit:
    """Test fuzzy unit suggestions"""

    def test_typo(self):
        assert suggest_unit("monht") == "month"

    def test_plural_typo(self):
        assert suggest_unit("secnds") == "second"

    def test_no_match(self):
        assert suggest_unit("xyz") is None

    def test_empty(self):
        assert suggest_unit("") is None
        assert suggest_unit("   ") is None

    def test_restricted_choices(self):
        assert suggest_unit("yaer", choices=["year", "day"]) == "year"


class TestPeriodsToFrame:
    """Test tabular export"""

    def test_frame_columns(self, monday_ctx):
        year = create_period(monday_ctx, datetime(2024, 5, 1), "year")
        df = periods_to_frame(divide(monday_ctx, year, "month"))
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["start", "end", "type", "date"]
        assert len(df) == 12
        assert (df["type"] == "month").all()
        assert df.iloc[1]["start"] == pd.Timestamp(2024, 2, 1)

    def test_empty_frame(self):
        df = periods_to_frame([])
        assert len(df) == 0
        assert list(df.columns) == ["start", "end", "type", "date"]


class TestLoadYamlFile:
    """Test config file loading"""

    def test_load_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.yaml"
            path.write_text("week_starts_on: 0\nadapter: native\n")
            assert load_yaml_file(path) == {"week_starts_on": 0, "adapter": "native"}

    def test_empty_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "empty.yaml"
            path.write_text("")
            assert load_yaml_file(path) == {}

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError, match="Required file not found"):
            load_yaml_file(Path("/nonexistent/periodconfig.yaml"))
