"""
Unit tests for utils/numeric.py
"""

import pytest

from acra_statements.utils.numeric import as_number, is_number, is_out_of_range


@pytest.mark.parametrize("value", [0, -5, 1835156, 0.25, 1e308, 10**300])
def test_finite_amounts_are_numbers(value):
    assert is_number(value) is True
    assert is_out_of_range(value) is False


@pytest.mark.parametrize("value", [10**400, -(10**400), float("inf"), float("-inf"), float("nan")])
def test_values_beyond_float_range(value):
    """Oversized ints are rejected instead of raising OverflowError."""
    assert is_number(value) is False
    assert is_out_of_range(value) is True
    assert as_number(value) is None


@pytest.mark.parametrize("value", [None, True, "100", [1], {"a": 1}])
def test_non_numbers_are_not_out_of_range(value):
    assert is_number(value) is False
    assert is_out_of_range(value) is False
