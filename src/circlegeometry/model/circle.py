"""
Circle Value Object
===================
A circle whose size properties stay consistent under mutation.

The radius is the only stored size. Diameter, area and circumference are
computed from it on read and converted back into it on write, using the
instance's own value of pi (see `Circle.set_precision`).

Classes:
    Circle: The circle value object.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Optional, TYPE_CHECKING

from circlegeometry.config import (
    DEFAULT_PI,
    DEFAULT_POLYLINE_SEGMENTS,
    PI_MAX_DECIMAL_PLACES,
    PI_MIN_DECIMAL_PLACES,
)
from circlegeometry.model.errors import NegativeValue
from circlegeometry.model.geometry_primitives import Point, PointPosition
from circlegeometry.model.geometry_utils import circle_to_polyline
from circlegeometry.model.validation import validate_bool, validate_number

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # round() would round halves to even; floor(value + 0.5) misrounds 0.49999999999999994
    floored = math.floor(value)
    return floored + 1 if value - floored >= 0.5 else floored


class Circle:
    """
    A circle with a center, a radius and a configurable value of pi.

    Args:
        radius: Optional initial radius. Validated like a direct assignment.

    Raises:
        TypeMismatch: A numeric argument is not a number.
        InvalidNumber: A numeric argument is NaN or infinite.
        NegativeValue: A size quantity is negative.
    """

    def __init__(self, radius: Optional[float] = None) -> None:
        self._pi: float = DEFAULT_PI
        self._radius: float = 0.0
        self._center_x: float = 0.0
        self._center_y: float = 0.0

        if radius is not None:
            self.radius = radius

    # --------------------------------------------------------------------------
    # Pi
    # --------------------------------------------------------------------------
    def set_precision(self, decimal_places: float, should_round: bool = False) -> None:
        """
        Set the value of pi used by this circle, cut to a number of decimal places.

        The stored radius is kept as is; only derived quantities change.

        Args:
            decimal_places: Number of decimal places. Rounded to the nearest
                integer and clamped into [0, 15].
            should_round: Round the last decimal place instead of truncating it.
        """
        validate_number(decimal_places, "Decimal places")
        validate_bool(should_round, "Round")

        places = _round_half_up(decimal_places)
        places = max(PI_MIN_DECIMAL_PLACES, min(PI_MAX_DECIMAL_PLACES, places))

        factor = 10 ** places
        fix_method = _round_half_up if should_round else math.trunc
        self._pi = fix_method(DEFAULT_PI * factor) / factor
        logger.debug(f"Pi set to {self._pi} ({places} decimal places, round={bool(should_round)})")

    @property
    def pi_constant(self) -> float:
        return self._pi

    # --------------------------------------------------------------------------
    # Size
    # --------------------------------------------------------------------------
    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        validate_number(value, "Radius")

        if value < 0:
            raise NegativeValue("Radius cannot be negative")
        self._radius = float(value)
        logger.debug(f"Radius set to {self._radius}")

    @property
    def diameter(self) -> float:
        return self.radius * 2

    @diameter.setter
    def diameter(self, value: float) -> None:
        validate_number(value, "Diameter")

        if value < 0:
            raise NegativeValue("Diameter cannot be negative")
        self.radius = value / 2

    @property
    def area(self) -> float:
        return self._pi * self.radius * self.radius

    @area.setter
    def area(self, value: float) -> None:
        validate_number(value, "Area")

        if value < 0:
            raise NegativeValue("Area cannot be negative")
        # Goes through the radius setter so a non-finite result is rejected
        self.radius = math.sqrt(value / self._pi)

    @property
    def circumference(self) -> float:
        return 2 * self._pi * self.radius

    @circumference.setter
    def circumference(self, value: float) -> None:
        validate_number(value, "Circumference")

        if value < 0:
            raise NegativeValue("Circumference cannot be negative")
        self.radius = value / 2 / self._pi

    # --------------------------------------------------------------------------
    # Center
    # --------------------------------------------------------------------------
    @property
    def center_x(self) -> float:
        return self._center_x

    @center_x.setter
    def center_x(self, value: float) -> None:
        validate_number(value, "X")
        self._center_x = float(value)

    @property
    def center_y(self) -> float:
        return self._center_y

    @center_y.setter
    def center_y(self, value: float) -> None:
        validate_number(value, "Y")
        self._center_y = float(value)

    # Short aliases
    x = center_x
    y = center_y

    @property
    def center(self) -> Point:
        return Point(self._center_x, self._center_y)

    def move_to(self, x: float, y: float) -> None:
        """Move the center. Both coordinates are checked before either is written."""
        validate_number(x, "X")
        validate_number(y, "Y")
        self._center_x = float(x)
        self._center_y = float(y)
        logger.debug(f"Center moved to ({self._center_x}, {self._center_y})")

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------
    def compare_point_to_circle(self, x: float, y: float) -> PointPosition:
        """
        Calculate the relationship of a point P(x, y) to the circle.

        The boundary test is an exact float comparison, so points that are
        only numerically on the circle may be reported as inside or outside.

        Args:
            x: X-coordinate of the point.
            y: Y-coordinate of the point.

        Returns:
            PointPosition.ON (0) if the point lies on the circle,
            PointPosition.INSIDE (-1) if it is inside it,
            PointPosition.OUTSIDE (1) if it is outside.
        """
        validate_number(x, "pX")
        validate_number(y, "pY")

        distance_from_center = Point(float(x), float(y)).distance_to(self.center)

        if distance_from_center < self.radius:
            return PointPosition.INSIDE
        if distance_from_center > self.radius:
            return PointPosition.OUTSIDE
        return PointPosition.ON

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point is inside the circle or on its boundary."""
        return self.compare_point_to_circle(x, y) <= PointPosition.ON

    def to_polyline(self, n_segments: int = DEFAULT_POLYLINE_SEGMENTS) -> npt.NDArray[np.float64]:
        return circle_to_polyline(self, n_segments)

    # --------------------------------------------------------------------------
    # Value semantics
    # --------------------------------------------------------------------------
    def copy(self) -> Circle:
        other = Circle.__new__(Circle)
        other._pi = self._pi
        other._radius = self._radius
        other._center_x = self._center_x
        other._center_y = self._center_y
        return other

    __copy__ = copy

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return (
            self._pi == other._pi
            and self._radius == other._radius
            and self._center_x == other._center_x
            and self._center_y == other._center_y
        )

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Circle(radius={self._radius!r}, center=({self._center_x!r}, {self._center_y!r}), "
            f"pi={self._pi!r})"
        )
