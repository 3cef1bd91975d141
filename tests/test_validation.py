"""Tests for input validation module."""

import math

import pytest

from elbow_routing import Endpoint, Point
from elbow_routing.validation import (
    InvalidCoordinateError,
    InvalidDirectionError,
    InvalidOvershootError,
    InvalidStartDirectionError,
    ValidationError,
    validate_coordinates,
    validate_overshoot,
)


class TestOvershootValidation:
    """Tests for overshoot validation."""

    def test_valid_overshoot(self):
        """Valid overshoot is returned as float."""
        value = validate_overshoot(50)
        assert value == 50.0
        assert isinstance(value, float)

    def test_zero_overshoot(self):
        """Zero is allowed."""
        assert validate_overshoot(0) == 0.0

    def test_negative_overshoot_raises(self):
        """Negative overshoot raises InvalidOvershootError."""
        with pytest.raises(InvalidOvershootError, match="must be non-negative"):
            validate_overshoot(-1)

    def test_infinite_overshoot_raises(self):
        """Infinite overshoot raises InvalidOvershootError."""
        with pytest.raises(InvalidOvershootError, match="finite"):
            validate_overshoot(math.inf)

    def test_nan_overshoot_raises(self):
        """NaN overshoot raises InvalidOvershootError."""
        with pytest.raises(InvalidOvershootError):
            validate_overshoot(math.nan)

    def test_non_numeric_overshoot_raises(self):
        """A string that is not a number raises InvalidOvershootError."""
        with pytest.raises(InvalidOvershootError, match="must be a number, got 'abc'"):
            validate_overshoot("abc")

    def test_none_overshoot_raises(self):
        """None raises InvalidOvershootError rather than TypeError."""
        with pytest.raises(InvalidOvershootError, match="got None"):
            validate_overshoot(None)


class TestCoordinateValidation:
    """Tests for coordinate validation."""

    def test_valid_points(self):
        """Finite coordinates pass."""
        validate_coordinates(Point(0, 0), Endpoint(1.5, -2.5, "x+"))

    def test_infinite_x_raises(self):
        """Infinite x raises InvalidCoordinateError."""
        with pytest.raises(InvalidCoordinateError, match="All coordinates must be finite"):
            validate_coordinates(Point(math.inf, 0))

    def test_nan_y_raises(self):
        """NaN y raises InvalidCoordinateError."""
        with pytest.raises(InvalidCoordinateError, match="point 1"):
            validate_coordinates(Point(0, 0), Point(0, math.nan))

    def test_non_numeric_raises(self):
        """Non-numeric coordinates raise InvalidCoordinateError."""
        with pytest.raises(InvalidCoordinateError):
            validate_coordinates(Point("a", 0))

    def test_bool_raises(self):
        """Booleans are not coordinates."""
        with pytest.raises(InvalidCoordinateError):
            validate_coordinates(Point(True, 0))


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_validation_error_is_value_error(self):
        """ValidationError inherits from ValueError."""
        assert issubclass(ValidationError, ValueError)

    def test_all_errors_are_validation_errors(self):
        """All specific errors inherit from ValidationError."""
        assert issubclass(InvalidOvershootError, ValidationError)
        assert issubclass(InvalidCoordinateError, ValidationError)
        assert issubclass(InvalidDirectionError, ValidationError)

    def test_start_direction_error_is_direction_error(self):
        assert issubclass(InvalidStartDirectionError, InvalidDirectionError)

    def test_can_catch_as_value_error(self):
        """Validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_overshoot(-5)
