"""
Geometric Primitives used by the circle model.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class PointPosition(IntEnum):
    """Where a point lies relative to a circle boundary."""
    INSIDE = -1
    ON = 0
    OUTSIDE = 1


@dataclass(frozen=True)
class Point:
    """A simple geometric point in the XY plane."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        # hypot does not overflow on the intermediate squares
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])
