"""
circlegeometry
==============
A circle value object with consistent radius, diameter, area and
circumference, a configurable pi and point classification.
"""
from importlib.metadata import version, PackageNotFoundError

from circlegeometry.logging_config import install_null_handler, setup_logging
from circlegeometry.model.circle import Circle
from circlegeometry.model.errors import CircleError, TypeMismatch, InvalidNumber, NegativeValue
from circlegeometry.model.geometry_primitives import Point, PointPosition

try:
    __version__ = version("circlegeometry")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

install_null_handler()

__all__ = [
    "Circle",
    "CircleError",
    "InvalidNumber",
    "NegativeValue",
    "Point",
    "PointPosition",
    "TypeMismatch",
    "setup_logging",
]
