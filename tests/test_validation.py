import math
import sys

import numpy as np
import pytest

from circlegeometry.model.errors import CircleError, InvalidNumber, TypeMismatch
from circlegeometry.model.validation import is_number, validate_bool, validate_number


@pytest.mark.parametrize("value", [0, -3, 2.5, -0.0, np.float64(1.5), np.int32(7), np.float32(2.0)])
def test_accepts_finite_numbers(value):
    validate_number(value, "Radius")


@pytest.mark.parametrize("value", ["5", None, True, False, np.bool_(True), [1], 1 + 2j])
def test_rejects_non_numbers(value):
    assert not is_number(value)
    with pytest.raises(TypeMismatch, match="Radius must be a number"):
        validate_number(value, "Radius")


def test_rejects_nan():
    with pytest.raises(InvalidNumber, match="Area cannot be NaN"):
        validate_number(math.nan, "Area")


@pytest.mark.parametrize("value", [math.inf, -math.inf, np.float64("inf"), 10 ** 400])
def test_rejects_infinity(value):
    with pytest.raises(InvalidNumber, match="Infinity"):
        validate_number(value, "X")


def test_type_check_comes_before_value_check():
    # a string "nan" is a type problem, not a value problem
    with pytest.raises(TypeMismatch):
        validate_number("nan", "X")


def test_errors_share_base_and_builtin_types():
    assert issubclass(TypeMismatch, TypeError)
    assert issubclass(InvalidNumber, ValueError)
    assert issubclass(TypeMismatch, CircleError)


def test_validate_bool():
    validate_bool(True, "Round")
    validate_bool(np.bool_(False), "Round")
    with pytest.raises(TypeMismatch, match="Round must be a boolean"):
        validate_bool(1, "Round")


def test_integer_that_rounds_to_float_max_is_accepted():
    validate_number(int(sys.float_info.max) + 1, "Radius")


def test_integer_beyond_float_range_is_infinite():
    with pytest.raises(InvalidNumber, match="Infinity"):
        validate_number(-(10 ** 400), "Radius")
