"""
Global Constants
================
This module serves as the central registry for the numeric constants used
by the circle model.

Exports:
    DEFAULT_PI (float): Value of pi a new Circle starts with.
    PI_MIN_DECIMAL_PLACES (int): Lower clamp for Circle.set_precision.
    PI_MAX_DECIMAL_PLACES (int): Upper clamp for Circle.set_precision.
    DEFAULT_POLYLINE_SEGMENTS (int): Segments used by Circle.to_polyline.
    MIN_POLYLINE_SEGMENTS (int): Smallest segment count accepted for a polyline.
"""
import math


DEFAULT_PI: float = math.pi

# Beyond 15 decimal places a double no longer holds distinct digits of pi
PI_MIN_DECIMAL_PLACES: int = 0
PI_MAX_DECIMAL_PLACES: int = 15

DEFAULT_POLYLINE_SEGMENTS: int = 180
MIN_POLYLINE_SEGMENTS: int = 3
