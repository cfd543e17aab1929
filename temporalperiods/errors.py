"""Period Engine Errors
--------------------

Exception taxonomy for the period engine. Every error is raised
synchronously at the call site and derives from ValueError, so callers that
already guard against bad input with ``except ValueError`` keep working.

  - PeriodError: base class
  - UnknownUnitError: unit tag not recognized
  - InvalidDivisionError: target unit equal to or coarser than the period
  - InvalidPeriodError: malformed period (end before start)
  - InvalidSplitOptionsError: split() called without exactly one option

Note: merging an empty list is not an error, merge([]) returns None.
"""

from __future__ import annotations
from typing import Optional


class PeriodError(ValueError):
    """Base class for all period engine errors."""


class UnknownUnitError(PeriodError):
    """Raised when a unit tag is not recognized by the engine or adapter."""

    def __init__(self, unit, suggestion: Optional[str] = None):
        self.unit = unit
        self.suggestion = suggestion
        message = f"Unknown unit: {unit!r}"
        if suggestion:
            message += f" (did you mean {suggestion!r}?)"
        super().__init__(message)


class InvalidDivisionError(PeriodError):
    """Raised when a period is divided into an equal or coarser unit."""


class InvalidPeriodError(PeriodError):
    """Raised when a supplied period has end < start."""


class InvalidSplitOptionsError(PeriodError):
    """Raised when split() options are missing, ambiguous or unusable."""


__all__ = [
    "PeriodError",
    "UnknownUnitError",
    "InvalidDivisionError",
    "InvalidPeriodError",
    "InvalidSplitOptionsError",
]
