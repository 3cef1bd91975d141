"""
Type definitions for elbow connector routing.

Provides the data structures shared by the bend calculation and the
normalization layer:
- Direction: Facing direction of a connector endpoint
- Point: Immutable (x, y) coordinate pair
- Endpoint: Point with an optional facing direction
- NormalizedStart: Endpoint restricted to facing none or +x
- ElbowCase: Identifier of the routing template that produced a path
- ElbowRoute: Path plus the template that produced it
- PathSegment: One axis-aligned piece of a path
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, NamedTuple, Sequence, Tuple, Union

from .validation import InvalidDirectionError, InvalidStartDirectionError


class Direction(Enum):
    """Axis and sign along which a connector leaves or enters a point."""

    NONE = "none"
    POS_X = "x+"
    NEG_X = "x-"
    POS_Y = "y+"
    NEG_Y = "y-"

    @classmethod
    def parse(cls, value: FacingLike) -> Direction:
        """
        Classify an optional facing tag.

        Args:
            value: None, a Direction, or one of "x+", "x-", "y+", "y-", "none"

        Returns:
            The matching Direction (NONE when value is None)

        Raises:
            InvalidDirectionError: If the tag is not recognised
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidDirectionError(
                f"facing direction must be one of 'x+', 'x-', 'y+', 'y-' or None, got {value!r}"
            ) from None

    @classmethod
    def from_vector(cls, dx: float, dy: float) -> Direction:
        """Get the direction whose unit vector is (dx, dy)."""
        for direction in cls:
            if direction.vector == (dx, dy):
                return direction
        raise InvalidDirectionError(f"({dx}, {dy}) is not an axis unit vector")

    @property
    def vector(self) -> tuple[int, int]:
        """Unit vector of this direction ((0, 0) for NONE)."""
        return _VECTORS[self]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.NONE: (0, 0),
    Direction.POS_X: (1, 0),
    Direction.NEG_X: (-1, 0),
    Direction.POS_Y: (0, 1),
    Direction.NEG_Y: (0, -1),
}

# Accepted spellings of a facing direction
FacingLike = Union[Direction, str, None]


class Point(NamedTuple):
    """An (x, y) coordinate. Compares equal to a plain tuple."""

    x: float
    y: float


# Connector polyline, start point first
Path = Tuple[Point, ...]


def advance(point: Point, direction: Direction, amount: float) -> Point:
    """
    Move a point along a facing direction.

    Args:
        point: Point to move
        direction: Facing direction (NONE leaves the point unchanged)
        amount: Distance to travel

    Returns:
        The projected point
    """
    if direction is Direction.POS_X:
        return Point(point.x + amount, point.y)
    elif direction is Direction.NEG_X:
        return Point(point.x - amount, point.y)
    elif direction is Direction.POS_Y:
        return Point(point.x, point.y + amount)
    elif direction is Direction.NEG_Y:
        return Point(point.x, point.y - amount)
    return point


@dataclass(frozen=True)
class Endpoint:
    """
    A connector endpoint.

    The facing is kept as given ("x+", a Direction, None, ...) and
    classified on access through ``direction``.
    """

    x: float
    y: float
    facing: FacingLike = None

    @property
    def direction(self) -> Direction:
        """Classified facing direction."""
        return Direction.parse(self.facing)

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    @classmethod
    def coerce(cls, value: EndpointLike) -> Endpoint:
        """
        Build an endpoint from any supported spelling.

        Accepts an Endpoint, an (x, y) or (x, y, facing) sequence, or a
        mapping with "x", "y" and optionally "facing" keys.
        """
        if isinstance(value, Endpoint):
            return value
        if isinstance(value, Mapping):
            return cls(value["x"], value["y"], value.get("facing"))
        if len(value) == 2:
            x, y = value
            return cls(x, y)
        x, y, facing = value
        return cls(x, y, facing)


# Accepted spellings of an endpoint
EndpointLike = Union[Endpoint, Sequence[Any], Mapping[str, Any]]


@dataclass(frozen=True)
class NormalizedStart(Endpoint):
    """
    Start endpoint after normalization.

    Only facing none or +x is allowed; anything else is rejected on
    construction.
    """

    def __post_init__(self) -> None:
        direction = self.direction
        if direction not in (Direction.NONE, Direction.POS_X):
            raise InvalidStartDirectionError(
                f"normalized start must face 'x+' or nothing, got {direction.value!r}"
            )

    @classmethod
    def from_endpoint(cls, endpoint: Endpoint) -> NormalizedStart:
        """Check an endpoint and convert it into a normalized start."""
        if isinstance(endpoint, cls):
            return endpoint
        return cls(endpoint.x, endpoint.y, endpoint.facing)


class ElbowCase(Enum):
    """
    Routing template selected for a connector.

    Values are the template labels; the first digit groups templates by
    (start direction, end direction).
    """

    FREE_TO_FREE = "1"
    POS_X_TO_POS_Y_BEHIND_BELOW = "2.1"
    POS_X_TO_POS_Y_AHEAD_ABOVE = "2.2"
    POS_X_TO_POS_Y_X_ALIGNED = "2.3"
    POS_X_TO_POS_Y_AHEAD = "2.4"
    POS_X_TO_POS_Y_WRAP = "2.5"
    POS_X_TO_POS_Y_SPLIT = "2.6"
    POS_X_TO_POS_X = "3"
    POS_X_TO_POS_X_Y_ALIGNED = "3.1"
    POS_X_TO_NEG_Y_X_ALIGNED_BELOW = "4.11"
    POS_X_TO_NEG_Y_X_ALIGNED_ABOVE = "4.12"
    POS_X_TO_NEG_Y_AHEAD_BELOW = "4.2"
    POS_X_TO_NEG_Y_BEHIND_BELOW = "4.3"
    POS_X_TO_NEG_Y_BEHIND_ABOVE = "4.4"
    POS_X_TO_NEG_Y_LEVEL = "4.5"
    POS_X_TO_NEG_Y_AHEAD_ABOVE = "4.6"
    POS_X_TO_NEG_X_OVERLAP = "5"
    POS_X_TO_NEG_X_LEVEL_AHEAD = "6"
    POS_X_TO_NEG_X_LEVEL = "7"
    MIDPOINT_FALLBACK = "8"


class ElbowRoute(NamedTuple):
    """A computed connector path and the template that produced it."""

    path: Path
    case: ElbowCase

    @property
    def bends(self) -> Path:
        """Interior points of the path."""
        return self.path[1:-1]


@dataclass(frozen=True)
class PathSegment:
    """
    A segment of an elbow path.

    Elbow paths consist of horizontal and vertical segments.
    """

    start: Point
    end: Point
    is_horizontal: bool

    @property
    def length(self) -> float:
        """Get segment length."""
        if self.is_horizontal:
            return abs(self.end.x - self.start.x)
        return abs(self.end.y - self.start.y)

    @property
    def direction(self) -> Direction:
        """Direction of travel from start to end (NONE for zero length)."""
        if self.is_horizontal:
            delta = self.end.x - self.start.x
            if delta == 0:
                return Direction.NONE
            return Direction.POS_X if delta > 0 else Direction.NEG_X
        delta = self.end.y - self.start.y
        if delta == 0:
            return Direction.NONE
        return Direction.POS_Y if delta > 0 else Direction.NEG_Y


__all__ = [
    "Direction",
    "FacingLike",
    "Point",
    "Path",
    "advance",
    "Endpoint",
    "EndpointLike",
    "NormalizedStart",
    "ElbowCase",
    "ElbowRoute",
    "PathSegment",
]
