"""Concrete SQLAlchemy DAO implementation.

Exports SqlBaseDao, the get_dao() factory for wiring at the application
boundary (dependency injection), and dao_scope() for one-off units of work.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from dao_core.domain.repositories.base import T
from dao_core.domain.services.id_generation import IdGenerator, uuid_hex
from dao_core.infrastructure.database import session_scope
from dao_core.infrastructure.persistence.statements import StatementRegistry

from .base import SqlBaseDao


def get_dao(
    session: AsyncSession,
    orm_model: type[DeclarativeBase],
    entity_type: type[T],
    statements: StatementRegistry | None = None,
    id_generator: IdGenerator = uuid_hex,
) -> SqlBaseDao:
    """Construct a DAO bound to the given session.

    Intended for use inside a unit of work:

        async with session_scope() as session:
            users = get_dao(session, UserRow, User, statements=registry)
            user = await users.select_by_id(user_id)
    """
    return SqlBaseDao(
        session,
        orm_model,
        entity_type,
        statements=statements,
        id_generator=id_generator,
    )


@asynccontextmanager
async def dao_scope(
    orm_model: type[DeclarativeBase],
    entity_type: type[T],
    statements: StatementRegistry | None = None,
    id_generator: IdGenerator = uuid_hex,
) -> AsyncIterator[SqlBaseDao]:
    """Open a session_scope() and yield a DAO bound to it.

        async with dao_scope(UserRow, User) as users:
            await users.update_in_batch(changed)
    """
    async with session_scope() as session:
        yield get_dao(session, orm_model, entity_type, statements, id_generator)


__all__ = [
    "SqlBaseDao",
    "dao_scope",
    "get_dao",
]
