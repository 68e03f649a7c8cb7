"""Errors raised by the data-access layer.

Only argument validation and result assembly failures originate here.
Backend failures (connectivity, constraint violations, timeouts) surface as
the SQLAlchemy / driver exceptions that caused them and are never wrapped.
"""

from __future__ import annotations


class DataAccessError(Exception):
    """Base class for errors raised by the data-access layer itself."""


class InvalidArgumentError(DataAccessError, ValueError):
    """A required argument was missing, blank, or refers to something unknown."""


class TooManyResultsError(DataAccessError):
    """A single-row lookup matched more than one row."""

    def __init__(self, expected: int = 1, actual: int | None = None) -> None:
        self.expected = expected
        self.actual = actual
        if actual is None:
            message = f"Expected {expected} result but found more"
        else:
            message = f"Expected {expected} result but found {actual}"
        super().__init__(message)
