import pytest

from core import Operators
from core.operators import WORKING_MIN, WORKING_MAX


def test_working_range_is_int64():
    assert WORKING_MAX == 2 ** 63 - 1
    assert WORKING_MIN == -2 ** 63


@pytest.mark.parametrize("a, b, q, r", [
    (7, 2, 3, 1),
    (-7, 2, -3, -1),
    (7, -2, -3, 1),
    (-7, -2, 3, -1),
    (0, 5, 0, 0),
])
def test_division_truncates_toward_zero(a, b, q, r):
    assert Operators.div(a, b) == q
    assert Operators.mod(a, b) == r
    assert Operators.div(a, b) * b + Operators.mod(a, b) == a


@pytest.mark.parametrize("method", [Operators.div, Operators.mod])
def test_zero_divisor_raises(method):
    with pytest.raises(ZeroDivisionError):
        method(3, 0)


def test_pow():
    assert Operators.pow(3, 4) == 81
    assert Operators.pow(-2, 3) == -8
    assert Operators.pow(0, 0) == 1
    assert Operators.pow(5, -2) == 0
    assert Operators.pow(0, -1) == WORKING_MAX
    assert Operators.pow(0, -2) == WORKING_MAX


def test_pow_saturates_without_computing_huge_values():
    assert Operators.pow(2, 10 ** 9) == WORKING_MAX
    assert Operators.pow(-2, 10 ** 9 + 1) == WORKING_MIN
    assert Operators.pow(-2, 10 ** 9) == WORKING_MAX
    assert Operators.pow(2, 63) == WORKING_MAX
    assert Operators.pow(-2, 63) == WORKING_MIN


def test_saturate():
    assert Operators.saturate(10 ** 30) == WORKING_MAX
    assert Operators.saturate(-10 ** 30) == WORKING_MIN
    assert Operators.saturate(42) == 42
    assert Operators.mul(WORKING_MAX, 2) == WORKING_MAX
    assert Operators.add(WORKING_MIN, -1) == WORKING_MIN
