"""Tests for StatementRegistry."""

import pytest
from sqlalchemy import column, select, table
from sqlalchemy.sql.elements import TextClause

from dao_core.domain.exceptions import InvalidArgumentError
from dao_core.infrastructure.persistence.statements import StatementRegistry

_users = table("users", column("id"), column("name"))


def test_register_and_get():
    stmt = select(_users)
    registry = StatementRegistry()
    registry.register("user.all", stmt)
    assert registry.get("user.all") is stmt


def test_plain_string_is_wrapped_in_text():
    registry = StatementRegistry({"user.raw": "SELECT id FROM users"})
    assert isinstance(registry.get("user.raw"), TextClause)


def test_constructor_registers_mapping():
    registry = StatementRegistry({"a": select(_users), "b": "SELECT 1"})
    assert len(registry) == 2
    assert "a" in registry
    assert registry.ids() == ["a", "b"]


def test_duplicate_registration_raises():
    registry = StatementRegistry({"user.all": select(_users)})
    with pytest.raises(InvalidArgumentError):
        registry.register("user.all", select(_users))


@pytest.mark.parametrize("statement_id", ["", "   "])
def test_blank_statement_id_rejected_on_register(statement_id):
    with pytest.raises(InvalidArgumentError):
        StatementRegistry().register(statement_id, select(_users))


def test_get_unknown_statement_raises():
    with pytest.raises(InvalidArgumentError):
        StatementRegistry().get("missing")


def test_get_none_statement_id_raises():
    with pytest.raises(InvalidArgumentError):
        StatementRegistry().get(None)


def test_iteration_yields_ids():
    registry = StatementRegistry({"a": "SELECT 1"})
    assert list(registry) == ["a"]
