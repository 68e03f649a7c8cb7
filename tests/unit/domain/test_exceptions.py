"""Tests for dao_core/domain/exceptions.py."""

from dao_core.domain.exceptions import DataAccessError, InvalidArgumentError, TooManyResultsError


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgumentError, ValueError)


def test_invalid_argument_is_data_access_error():
    assert issubclass(InvalidArgumentError, DataAccessError)


def test_too_many_results_is_data_access_error():
    assert issubclass(TooManyResultsError, DataAccessError)


def test_too_many_results_carries_counts():
    exc = TooManyResultsError(expected=1, actual=2)
    assert (exc.expected, exc.actual) == (1, 2)
    assert "found 2" in str(exc)


def test_too_many_results_without_actual_count():
    assert "found more" in str(TooManyResultsError())
