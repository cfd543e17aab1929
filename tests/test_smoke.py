"""Smoke tests - fast, lightweight tests for basic functionality.

These tests verify that the package imports successfully and core functions
are available. They run quickly (<1 second) and are suitable for CI/CD.

Run with: pytest tests/test_smoke.py
"""

import pytest
from datetime import datetime


class TestPackageBasics:
    """Test basic package functionality"""

    def test_version_exists(self):
        """Test that package version is defined"""
        from temporalperiods import __version__

        assert __version__ is not None
        assert isinstance(__version__, str)
        assert len(__version__) > 0

    def test_package_imports(self):
        """Test that package imports successfully"""
        import temporalperiods
        assert temporalperiods is not None

    def test_all_exports_resolve(self):
        """Every name in __all__ is importable"""
        import temporalperiods

        for name in temporalperiods.__all__:
            assert hasattr(temporalperiods, name), name


class TestAPIImports:
    """Test that all primary API functions can be imported"""

    def test_period_api_imports(self):
        """Test factory imports"""
        from temporalperiods import (
            create_context,
            create_period,
            to_period,
            create_custom_period,
            from_iso_week,
        )

        assert callable(create_context)
        assert callable(create_period)
        assert callable(to_period)
        assert callable(create_custom_period)
        assert callable(from_iso_week)

    def test_operation_imports(self):
        """Test operation imports"""
        from temporalperiods import divide, split, merge, go, contains, is_same

        assert callable(divide)
        assert callable(split)
        assert callable(merge)
        assert callable(go)
        assert callable(contains)
        assert callable(is_same)

    def test_facade_matches_package(self):
        """periodapi facade re-exports the same objects"""
        import temporalperiods
        from temporalperiods.period import periodapi

        assert periodapi.divide is temporalperiods.divide
        assert periodapi.create_period is temporalperiods.create_period


class TestBasicFunctionality:
    """Test basic end-to-end behaviour"""

    def test_month_round_trip(self):
        """Divide a month into days and merge them back"""
        from temporalperiods import create_context, create_period, divide, merge

        ctx = create_context(week_starts_on=1)
        month = create_period(ctx, datetime(2024, 2, 15), "month")
        days = divide(ctx, month, "day")

        assert len(days) == 29
        assert merge(ctx, days) == month

    def test_errors_are_value_errors(self):
        """Engine errors can be caught as ValueError"""
        from temporalperiods import create_context, create_period

        ctx = create_context()
        with pytest.raises(ValueError):
            create_period(ctx, datetime(2024, 2, 15), "fortnight")
