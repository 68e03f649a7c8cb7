"""Persistence package.

Exports the SQLAlchemy DAO implementation, its factory, and the named
statement registry.
"""

from dao_core.infrastructure.persistence.repositories import SqlBaseDao, dao_scope, get_dao
from dao_core.infrastructure.persistence.statements import StatementRegistry

__all__ = [
    "SqlBaseDao",
    "StatementRegistry",
    "dao_scope",
    "get_dao",
]
