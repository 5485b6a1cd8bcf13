import numpy as np
import pytest

from circlegeometry import Circle, Point, PointPosition
from circlegeometry.model.geometry_utils import circle_to_polyline


def test_point_distance():
    assert Point(0, 0).distance_to(Point(3, 4)) == 5
    assert Point(-1, -1).distance_to(Point(-1, -1)) == 0


def test_point_is_frozen():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 3


def test_point_to_array():
    np.testing.assert_array_equal(Point(1.5, -2).to_array(), [1.5, -2.0])


def test_point_position_values():
    assert PointPosition.INSIDE == -1
    assert PointPosition.ON == 0
    assert PointPosition.OUTSIDE == 1


def test_polyline_is_closed_and_on_boundary():
    circle = Circle(2)
    circle.move_to(1, -1)
    pts = circle_to_polyline(circle, 36)

    assert pts.shape == (37, 2)
    np.testing.assert_array_equal(pts[0], pts[-1])
    distances = np.hypot(pts[:, 0] - 1, pts[:, 1] + 1)
    np.testing.assert_allclose(distances, 2.0)


def test_polyline_ignores_configured_pi():
    circle = Circle(1)
    circle.set_precision(0)
    pts = circle.to_polyline(4)
    np.testing.assert_allclose(pts[2], [-1.0, 0.0], atol=1e-12)


def test_polyline_default_segments():
    assert Circle(1).to_polyline().shape == (181, 2)


@pytest.mark.parametrize("n_segments", [2, 0, -4, 3.0, "8", True])
def test_polyline_rejects_bad_segment_count(n_segments):
    with pytest.raises(ValueError):
        circle_to_polyline(Circle(1), n_segments)


def test_point_distance_does_not_overflow():
    assert Point(0, 0).distance_to(Point(1e200, 0)) == 1e200
    assert Point(-1e308, 0).distance_to(Point(1e308, 0)) == float("inf")
