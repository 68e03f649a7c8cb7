"""Primary-key generation used by insert().

An IdGenerator is a zero-argument callable returning a new key. Returning
None defers to the backend (autoincrement column or sequence); the DAO then
reads the assigned key back from the flushed row.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable
from typing import Any

IdGenerator = Callable[[], Any]


def uuid_hex() -> str:
    """32 lowercase hex characters from a random UUID4."""
    return uuid.uuid4().hex


def backend_assigned() -> None:
    return None


def is_blank_key(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
