"""Input checks shared by every Circle mutator."""
from __future__ import annotations

import math
from typing import Any

import numpy as np

from circlegeometry.model.errors import TypeMismatch, InvalidNumber

_NUMBER_TYPES = (int, float, np.integer, np.floating)
_BOOL_TYPES = (bool, np.bool_)


def is_number(value: Any) -> bool:
    """True for real numeric scalars. Booleans are not numbers here."""
    return isinstance(value, _NUMBER_TYPES) and not isinstance(value, _BOOL_TYPES)


def validate_number(value: Any, value_name: str) -> None:
    """
    Check that `value` is a finite real number.

    Args:
        value: Candidate value.
        value_name: Human readable field name used in the error message.

    Raises:
        TypeMismatch: `value` is not numeric.
        InvalidNumber: `value` is NaN, Infinity or -Infinity.
    """
    if not is_number(value):
        raise TypeMismatch(f"{value_name} must be a number")

    # Integers are never NaN, but a large one may not fit in a double
    if isinstance(value, (int, np.integer)):
        try:
            float(value)
        except OverflowError:
            raise InvalidNumber(f"{value_name} cannot be Infinity nor -Infinity") from None
        return

    if math.isnan(value):
        raise InvalidNumber(f"{value_name} cannot be NaN")

    if math.isinf(value):
        raise InvalidNumber(f"{value_name} cannot be Infinity nor -Infinity")


def validate_bool(value: Any, value_name: str) -> None:
    if not isinstance(value, _BOOL_TYPES):
        raise TypeMismatch(f"{value_name} must be a boolean")
