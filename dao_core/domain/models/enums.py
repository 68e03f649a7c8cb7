"""Domain enumerations for the data-access layer.

All string-valued enums use str mixin so they serialize cleanly to JSON
and remain comparable to plain strings (Pydantic default behaviour).
"""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """Sort direction for one ordering term."""

    ASC = "asc"
    DESC = "desc"

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESC

    @classmethod
    def from_string(cls, value: str) -> Direction:
        """Case-insensitive lookup ("ASC", "desc", ...)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid value {value!r} for orders given; has to be either 'desc' or 'asc'"
            ) from None


class DbExecuteType(str, Enum):
    """Operation kind for a named statement run through execute_sql / run_sql."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"

    @property
    def returns_rows(self) -> bool:
        return self is DbExecuteType.SELECT
