"""Entity contract shared by every record managed through a DAO.

Entities are mutable Pydantic models. Which fields count as "set" is taken
from ``model_fields_set``: a field is set when it was passed at construction
or assigned afterwards, whatever its value. That distinction drives
query-by-example filtering and selective updates, so a field explicitly set
to ``0`` or ``""`` is still written, and an omitted field is not.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

ID_FIELD = "id"


class Entity(BaseModel):
    """Base class for DAO-managed records.

    Subclasses narrow ``id`` to their key type, e.g. ``id: str | None = None``.
    The key may be absent before insert; the DAO generates one when needed.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Any = None

    def get_id(self) -> Any:
        return self.id

    def set_id(self, value: Any) -> None:
        self.id = value

    def explicit_values(self) -> dict[str, Any]:
        """Return {field: value} for every field that was explicitly set."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    def is_set(self, field: str) -> bool:
        return field in self.model_fields_set
