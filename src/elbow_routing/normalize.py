"""Normalization layer for elbow connectors.

The bend calculation only handles a start point facing +x or nothing.
This module maps arbitrary endpoint pairs into that frame, routes them,
and maps the resulting path back:

1. If only the second endpoint has a facing, the endpoints are swapped so
   the directed one leads (the path is reversed afterwards). Two undirected
   endpoints are ordered by x, then y.
2. An ``Orientation`` (axis swap plus sign flips) turns the start facing
   into +x. The end facing is turned by the same orientation.
3. The path is computed in that frame and every point is mapped back.

Orientations only swap and negate coordinates, so the original endpoint
coordinates are reproduced exactly at both ends of the path.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .bends import CaseObserver, alignment_tolerance, compute_elbow_path
from .types import Direction, Endpoint, EndpointLike, Path, Point
from .validation import validate_coordinates, validate_overshoot

DEFAULT_OVERSHOOT = 0.1


class DegenerateConnectorWarning(UserWarning):
    """Warning issued when both endpoints of a connector coincide."""

    pass


@dataclass(frozen=True)
class Orientation:
    """
    An axis-aligned change of frame.

    Maps (x, y) to (sx * u, sy * v) where (u, v) is (y, x) when ``swap``
    is set and (x, y) otherwise.
    """

    swap: bool = False
    sx: int = 1
    sy: int = 1

    @classmethod
    def facing_pos_x(cls, direction: Direction) -> Orientation:
        """Orientation that turns ``direction`` into +x (identity for NONE)."""
        return _TO_POS_X[direction]

    def apply(self, point: Point) -> Point:
        u, v = (point.y, point.x) if self.swap else (point.x, point.y)
        return Point(self.sx * u, self.sy * v)

    def unapply(self, point: Point) -> Point:
        return self.inverse().apply(point)

    def apply_direction(self, direction: Direction) -> Direction:
        if direction is Direction.NONE:
            return direction
        dx, dy = direction.vector
        turned = self.apply(Point(dx, dy))
        return Direction.from_vector(turned.x, turned.y)

    def apply_endpoint(self, endpoint: Endpoint) -> Endpoint:
        pt = self.apply(endpoint.point)
        return Endpoint(pt.x, pt.y, self.apply_direction(endpoint.direction))

    def inverse(self) -> Self:
        """Orientation undoing this one."""
        if not self.swap:
            return self
        return type(self)(swap=True, sx=self.sy, sy=self.sx)


_TO_POS_X: dict[Direction, Orientation] = {
    Direction.NONE: Orientation(),
    Direction.POS_X: Orientation(),
    Direction.NEG_X: Orientation(sx=-1),
    Direction.NEG_Y: Orientation(swap=True, sx=-1),
    Direction.POS_Y: Orientation(swap=True, sy=-1),
}


def normalize_endpoints(
    point1: Endpoint,
    point2: Endpoint,
) -> tuple[Endpoint, Endpoint, Orientation, bool]:
    """
    Bring two endpoints into the frame expected by the bend calculation.

    Args:
        point1: First endpoint, any facing
        point2: Second endpoint, any facing

    Returns:
        (start, end, orientation, swapped): the oriented endpoints, the
        orientation used, and whether point1 and point2 were exchanged
    """
    first_dir = point1.direction
    second_dir = point2.direction

    swapped = False
    if first_dir is Direction.NONE:
        if second_dir is not Direction.NONE:
            swapped = True
        elif (point2.x, point2.y) < (point1.x, point1.y):
            swapped = True
    if swapped:
        point1, point2 = point2, point1

    orientation = Orientation.facing_pos_x(point1.direction)
    return (
        orientation.apply_endpoint(point1),
        orientation.apply_endpoint(point2),
        orientation,
        swapped,
    )


def calculate_elbow(
    point1: EndpointLike,
    point2: EndpointLike,
    overshoot: float = DEFAULT_OVERSHOOT,
    on_case: Optional[CaseObserver] = None,
) -> Path:
    """
    Compute an elbow connector between two arbitrary endpoints.

    Args:
        point1: Start endpoint. Endpoint, (x, y[, facing]) or mapping.
        point2: End endpoint, same spellings
        overshoot: Distance to travel straight out before turning
        on_case: Optional callback receiving the selected ElbowCase

    Returns:
        Tuple of points from point1 to point2

    Raises:
        InvalidOvershootError: If overshoot is negative or not finite
        InvalidCoordinateError: If any coordinate is not finite
        InvalidDirectionError: If a facing tag is not recognised

    Example:
        >>> calculate_elbow((100, 100, "y-"), (300, 200, "y-"), overshoot=50)
        (Point(x=100, y=100), Point(x=100, y=50), Point(x=300, y=50), Point(x=300, y=200))
    """
    p1 = Endpoint.coerce(point1)
    p2 = Endpoint.coerce(point2)
    overshoot = validate_overshoot(overshoot)
    validate_coordinates(p1, p2)

    tol = alignment_tolerance(overshoot)
    if abs(p1.x - p2.x) <= tol and abs(p1.y - p2.y) <= tol:
        warnings.warn(
            f"Connector endpoints ({p1.x}, {p1.y}) and ({p2.x}, {p2.y}) coincide; "
            "the elbow path will be degenerate.",
            DegenerateConnectorWarning,
            stacklevel=2,
        )

    start, end, orientation, swapped = normalize_endpoints(p1, p2)
    oriented = compute_elbow_path(start, end, overshoot, on_case=on_case)

    path = [orientation.unapply(pt) for pt in oriented]
    if swapped:
        path.reverse()
    return tuple(path)


__all__ = [
    "DEFAULT_OVERSHOOT",
    "DegenerateConnectorWarning",
    "Orientation",
    "normalize_endpoints",
    "calculate_elbow",
]
