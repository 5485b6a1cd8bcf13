import pytest

from circlegeometry import Circle


@pytest.fixture
def circle() -> Circle:
    """Radius 5 circle centred at the origin."""
    return Circle(5)
