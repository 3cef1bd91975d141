"""
Input validation utilities for elbow routing.

Provides centralized validation for the overshoot distance, endpoint
coordinates and facing directions. Raises descriptive exceptions on
invalid input, before any routing work is done.
"""

from __future__ import annotations

import math
from typing import Any


class ValidationError(ValueError):
    """Base exception for elbow routing validation errors."""

    pass


class InvalidOvershootError(ValidationError):
    """Raised when the overshoot distance is negative or not finite."""

    pass


class InvalidCoordinateError(ValidationError):
    """Raised when an endpoint coordinate is not a finite number."""

    pass


class InvalidDirectionError(ValidationError):
    """Raised when a facing direction is not recognised."""

    pass


class InvalidStartDirectionError(InvalidDirectionError):
    """Raised when a normalized start faces anything other than +x or nothing."""

    pass


def validate_overshoot(overshoot: float) -> float:
    """
    Validate the overshoot distance.

    Args:
        overshoot: Distance a connector travels straight out of a point

    Returns:
        Validated overshoot as float

    Raises:
        InvalidOvershootError: If overshoot is not a number, negative or not finite
    """
    try:
        value = float(overshoot)
    except (TypeError, ValueError):
        raise InvalidOvershootError(f"overshoot must be a number, got {overshoot!r}") from None
    if value < 0:
        raise InvalidOvershootError(f"overshoot must be non-negative, got {value}")
    if not math.isfinite(value):
        raise InvalidOvershootError(f"overshoot must be finite, got {value}")
    return value


def validate_coordinates(*points: Any) -> None:
    """
    Validate that every point has finite x and y.

    Args:
        points: Objects with x and y attributes

    Raises:
        InvalidCoordinateError: If any coordinate is infinite or NaN
    """
    for i, point in enumerate(points):
        for axis in ("x", "y"):
            value = getattr(point, axis)
            if not _is_finite_number(value):
                raise InvalidCoordinateError(
                    f"All coordinates must be finite numbers, got {axis}={value!r} for point {i}"
                )


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


__all__ = [
    "ValidationError",
    "InvalidOvershootError",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "InvalidStartDirectionError",
    "validate_overshoot",
    "validate_coordinates",
]
