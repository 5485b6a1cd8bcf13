from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from circlegeometry.config import MIN_POLYLINE_SEGMENTS

if TYPE_CHECKING:
    from numpy import typing as npt

    from circlegeometry.model.circle import Circle


def circle_to_polyline(
    circle: Circle,
    n_segments: int
) -> npt.NDArray[np.float64]:
    """
    Discretize a circle in XY into an (N+1,2) polyline (closed).

    Uses the true value of pi for the angles; the circle's configured
    pi only affects its area and circumference.

    Args:
        circle: The Circle object.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n_segments + 1, 2) containing the (x, y) coordinates
        of the points along the circle. The last row repeats the first.

    Raises:
        ValueError: `n_segments` is not an integer of at least 3.
    """
    if isinstance(n_segments, bool) or not isinstance(n_segments, (int, np.integer)):
        raise ValueError(f"n_segments must be an integer, got {n_segments!r}")
    if n_segments < MIN_POLYLINE_SEGMENTS:
        raise ValueError(f"n_segments must be at least {MIN_POLYLINE_SEGMENTS}, got {n_segments}")

    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    pts = np.c_[
        circle.center_x + circle.radius * np.cos(theta),
        circle.center_y + circle.radius * np.sin(theta)
    ]

    # close the ring
    return np.vstack((pts, pts[0]))
