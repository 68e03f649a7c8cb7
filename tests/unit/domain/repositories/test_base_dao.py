"""Tests for dao_core/domain/repositories/base.py."""

import pytest

from dao_core.domain.repositories.base import BaseDao

_METHODS = [
    "select_one",
    "select_by_id",
    "select_list",
    "select_all",
    "select_map",
    "select_page_list",
    "select_count",
    "insert",
    "delete",
    "delete_by_id",
    "delete_all",
    "update_by_id",
    "update_by_id_selective",
    "delete_by_id_in_batch",
    "insert_in_batch",
    "update_in_batch",
    "execute_sql",
    "run_sql",
    "select_one_by_statement",
    "select_all_by_statement",
    "select_page_by_statement",
    "select_page_by_query",
]


async def _noop(self, *args, **kwargs):
    return None


def test_base_dao_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        BaseDao()  # type: ignore[abstract]


def test_base_dao_declares_every_operation_abstract():
    assert BaseDao.__abstractmethods__ == frozenset(_METHODS)


def test_base_dao_concrete_subclass_must_implement_all_methods():
    partial = type(BaseDao)("_Partial", (BaseDao,), {"select_by_id": _noop})
    with pytest.raises(TypeError):
        partial()


def test_base_dao_full_concrete_subclass_instantiates():
    full = type(BaseDao)("_Full", (BaseDao,), {name: _noop for name in _METHODS})
    assert full() is not None
