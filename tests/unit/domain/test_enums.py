"""Tests for dao_core/domain/models/enums.py."""

from dao_core.domain.models.enums import DbExecuteType, Direction


def test_direction_values_compare_to_strings():
    assert Direction.ASC == "asc"
    assert Direction.DESC == "desc"


def test_direction_flags():
    assert Direction.ASC.is_ascending and not Direction.ASC.is_descending
    assert Direction.DESC.is_descending and not Direction.DESC.is_ascending


def test_db_execute_type_members():
    assert {t.value for t in DbExecuteType} == {"select", "insert", "update", "delete"}


def test_only_select_returns_rows():
    assert [t for t in DbExecuteType if t.returns_rows] == [DbExecuteType.SELECT]
