"""Tests for dao_core/domain/services/id_generation.py."""

import string

import pytest

from dao_core.domain.services.id_generation import backend_assigned, is_blank_key, uuid_hex


def test_uuid_hex_is_32_lowercase_hex_chars():
    key = uuid_hex()
    assert len(key) == 32
    assert set(key) <= set(string.hexdigits.lower())


def test_uuid_hex_is_unique():
    assert len({uuid_hex() for _ in range(100)}) == 100


def test_backend_assigned_returns_none():
    assert backend_assigned() is None


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_blank_keys(value):
    assert is_blank_key(value) is True


@pytest.mark.parametrize("value", ["a", " a ", 0, 42])
def test_non_blank_keys(value):
    assert is_blank_key(value) is False
