"""Exceptions raised when a circle is given invalid input."""


class CircleError(Exception):
    """Base class for all circle input errors."""


class TypeMismatch(CircleError, TypeError):
    """An argument is not of the expected type (number or boolean)."""


class InvalidNumber(CircleError, ValueError):
    """A numeric argument is NaN or infinite."""


class NegativeValue(CircleError, ValueError):
    """A size quantity (radius, diameter, area, circumference) is negative."""
