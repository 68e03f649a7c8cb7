"""Domain data-access interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.
Concrete implementations live in dao_core/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import BaseDao, StatementParams

__all__ = [
    "BaseDao",
    "StatementParams",
]
