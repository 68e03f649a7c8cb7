"""Unit tests for dao_core/infrastructure/database.py.

Tests cover Settings defaults, env var override, object types, and the
transaction handling of session_scope(). No database connection is required.
"""

import inspect
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from dao_core.infrastructure import database
from dao_core.infrastructure.database import AsyncSessionLocal, Base, Settings, engine, get_session


def _fake_session_factory(monkeypatch):
    session = AsyncMock()
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False
    transaction = AsyncMock()
    transaction.__aexit__.return_value = False
    session.begin = MagicMock(return_value=transaction)
    monkeypatch.setattr(database, "AsyncSessionLocal", MagicMock(return_value=session))
    return session, transaction


def test_settings_default_url_uses_asyncpg():
    assert "postgresql+asyncpg" in Settings().database_url


def test_settings_default_url_targets_localhost():
    assert "localhost" in Settings().database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_sql_echo_defaults_off():
    assert Settings().sql_echo is False


def test_settings_reads_sql_echo_from_env(monkeypatch):
    monkeypatch.setenv("SQL_ECHO", "true")
    assert Settings().sql_echo is True


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


def test_session_factory_does_not_expire_on_commit():
    assert AsyncSessionLocal.kw["expire_on_commit"] is False


def test_get_session_is_async_generator():
    assert inspect.isasyncgenfunction(get_session)


async def test_session_scope_yields_session_inside_transaction(monkeypatch):
    session, transaction = _fake_session_factory(monkeypatch)
    async with database.session_scope() as scoped:
        assert scoped is session
        transaction.__aenter__.assert_awaited_once()
    transaction.__aexit__.assert_awaited_once()
    assert transaction.__aexit__.await_args.args[0] is None


async def test_session_scope_passes_errors_to_transaction(monkeypatch):
    _, transaction = _fake_session_factory(monkeypatch)
    with pytest.raises(RuntimeError):
        async with database.session_scope():
            raise RuntimeError("boom")
    assert transaction.__aexit__.await_args.args[0] is RuntimeError


async def test_get_session_yields_scoped_session(monkeypatch):
    session, transaction = _fake_session_factory(monkeypatch)
    yielded = [s async for s in get_session()]
    assert yielded == [session]
    transaction.__aexit__.assert_awaited_once()
