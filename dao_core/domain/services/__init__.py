"""Domain services for the data-access layer."""

from .id_generation import IdGenerator, backend_assigned, is_blank_key, uuid_hex

__all__ = [
    "IdGenerator",
    "backend_assigned",
    "is_blank_key",
    "uuid_hex",
]
