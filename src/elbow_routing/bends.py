"""Bend calculation for orthogonal ("elbow") connectors.

Given a normalized start endpoint (facing +x or nothing) and an end
endpoint facing any direction, computes the axis-aligned polyline joining
them. The relative geometry is classified into one of the routing
templates listed in ``ElbowCase``; each template contributes up to four
intermediate points before the end point.

Templates are grouped by (start direction, end direction). Each group is a
matcher that either returns a template or declines, in which case the
midpoint fallback routes the connector.

The selected template is reported only through the return value of
``route_elbow`` or the ``on_case`` observer of ``compute_elbow_path``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .types import (
    Direction,
    ElbowCase,
    ElbowRoute,
    Endpoint,
    EndpointLike,
    NormalizedStart,
    Path,
    Point,
    advance,
)
from .validation import validate_coordinates, validate_overshoot

MIN_ALIGNMENT_TOLERANCE = 1e-8
ALIGNMENT_TOLERANCE_RATIO = 0.01
DEDUPE_EPSILON = 1e-10

CaseObserver = Callable[[ElbowCase], None]


def alignment_tolerance(overshoot: float) -> float:
    """Tolerance below which two coordinates count as aligned."""
    return max(MIN_ALIGNMENT_TOLERANCE, overshoot * ALIGNMENT_TOLERANCE_RATIO)


def check_alignment(p1: Point, p2: Point, overshoot: float) -> tuple[bool, bool]:
    """
    Determine whether two points share an x or y coordinate.

    Args:
        p1: First point
        p2: Second point
        overshoot: Overshoot distance, scales the tolerance

    Returns:
        (x_aligned, y_aligned)
    """
    tol = alignment_tolerance(overshoot)
    return abs(p1.x - p2.x) <= tol, abs(p1.y - p2.y) <= tol


@dataclass(frozen=True)
class _Geometry:
    """Everything a template needs to know about one connector."""

    start: Point
    end: Point
    overshoot: float
    target: Point
    x_aligned: bool
    y_aligned: bool

    @property
    def mid_x(self) -> float:
        return (self.start.x + self.end.x) / 2

    @property
    def mid_y(self) -> float:
        return (self.start.y + self.end.y) / 2


_Template = tuple[ElbowCase, list[Point]]
_Matcher = Callable[[_Geometry], Optional[_Template]]


def _route_free(g: _Geometry) -> _Template:
    return ElbowCase.FREE_TO_FREE, [Point(g.mid_x, g.start.y), Point(g.mid_x, g.end.y)]


def _route_pos_x_to_pos_y(g: _Geometry) -> _Template:
    x1, y1 = g.start
    x2, y2 = g.end
    o = g.overshoot

    if x1 > x2 and y1 < y2:
        return ElbowCase.POS_X_TO_POS_Y_BEHIND_BELOW, [
            Point(x1 + o, y1),
            Point(x1 + o, y2 + o),
            Point(x2, y2 + o),
        ]
    if x1 < x2 and y1 > y2:
        return ElbowCase.POS_X_TO_POS_Y_AHEAD_ABOVE, [Point(x2, y1)]
    if g.x_aligned:
        return ElbowCase.POS_X_TO_POS_Y_X_ALIGNED, [
            Point(x1 + o, y1),
            Point(x1 + o, y2 + o),
            Point(x2, y2 + o),
        ]
    if x1 < x2:
        return ElbowCase.POS_X_TO_POS_Y_AHEAD, [
            Point(g.mid_x, y1),
            Point(g.mid_x, g.target.y),
            Point(x2, g.target.y),
        ]
    if y1 <= y2 + o:
        return ElbowCase.POS_X_TO_POS_Y_WRAP, [
            Point(x1 + o, y1),
            Point(x1 + o, y1 + o),
            Point(x2, y1 + o),
            Point(x2, y2),
        ]
    return ElbowCase.POS_X_TO_POS_Y_SPLIT, [
        Point(x1 + o, y1),
        Point(x1 + o, g.mid_y),
        Point(x2, g.mid_y),
    ]


def _route_pos_x_to_pos_x(g: _Geometry) -> _Template:
    x1, y1 = g.start
    x2, y2 = g.end
    o = g.overshoot

    if not g.y_aligned:
        common_x = max(x1 + o, g.target.x)
        return ElbowCase.POS_X_TO_POS_X, [Point(common_x, y1), Point(common_x, y2)]
    # Level with each other: step aside so the path does not run back over itself
    return ElbowCase.POS_X_TO_POS_X_Y_ALIGNED, [
        Point(x1 + o, y1),
        Point(x1 + o, y1 + o),
        Point(x2 + o, y1 + o),
        Point(x2 + o, y2),
    ]


def _route_pos_x_to_neg_y(g: _Geometry) -> _Template:
    x1, y1 = g.start
    x2, y2 = g.end
    o = g.overshoot

    if g.x_aligned:
        if y1 <= y2:
            return ElbowCase.POS_X_TO_NEG_Y_X_ALIGNED_BELOW, [
                Point(x1 + o, y1),
                Point(x1 + o, g.mid_y),
                Point(x2, g.mid_y),
            ]
        return ElbowCase.POS_X_TO_NEG_Y_X_ALIGNED_ABOVE, [
            Point(x1 + o, y1),
            Point(x1 + o, y2 - o),
            Point(x2, y2 - o),
        ]
    if x1 < x2 and y1 < y2:
        return ElbowCase.POS_X_TO_NEG_Y_AHEAD_BELOW, [Point(x2, y1)]
    if x1 > x2 and y1 < y2:
        return ElbowCase.POS_X_TO_NEG_Y_BEHIND_BELOW, [
            Point(x1 + o, y1),
            Point(x1 + o, g.mid_y),
            Point(x2, g.mid_y),
        ]
    if x1 > x2 and y1 > y2:
        return ElbowCase.POS_X_TO_NEG_Y_BEHIND_ABOVE, [
            Point(x1 + o, y1),
            Point(x1 + o, g.target.y),
            Point(x2, g.target.y),
        ]
    if y1 == y2:
        return ElbowCase.POS_X_TO_NEG_Y_LEVEL, [
            Point(x1 + o, y1),
            Point(x1 + o, y1 - o),
            Point(x2, y1 - o),
        ]
    return ElbowCase.POS_X_TO_NEG_Y_AHEAD_ABOVE, [
        Point(g.mid_x, y1),
        Point(g.mid_x, g.target.y),
        Point(x2, g.target.y),
    ]


def _route_pos_x_to_neg_x(g: _Geometry) -> Optional[_Template]:
    x1, y1 = g.start
    x2, y2 = g.end
    o = g.overshoot

    if x1 + o >= x2 - o and y1 != y2:
        return ElbowCase.POS_X_TO_NEG_X_OVERLAP, [
            Point(x1 + o, y1),
            Point(x1 + o, g.mid_y),
            Point(g.target.x, g.mid_y),
            g.target,
        ]
    if y1 == y2 and x2 > x1:
        return ElbowCase.POS_X_TO_NEG_X_LEVEL_AHEAD, [
            Point(x1 + o, y1),
            Point(x1 + o, y1 + o),
            Point(x2 - o, y1 + o),
            Point(x2 - o, y2),
        ]
    if y1 == y2:
        return ElbowCase.POS_X_TO_NEG_X_LEVEL, [
            Point(x1 + o, y1),
            Point(x1 + o, y1 + o),
            Point(x2 - o, y1 + o),
            Point(x2 - o, y1),
        ]
    return None


def _route_midpoint(g: _Geometry, start_dir: Direction) -> _Template:
    """Generic route through the vertical midline; valid for any input."""
    points: list[Point] = []
    last_y = g.start.y
    if start_dir is Direction.POS_X:
        points.append(advance(g.start, start_dir, g.overshoot))
    points.extend(
        [
            Point(g.mid_x, last_y),
            Point(g.mid_x, g.target.y),
            g.target,
        ]
    )
    return ElbowCase.MIDPOINT_FALLBACK, points


_MATCHERS: dict[tuple[Direction, Direction], _Matcher] = {
    (Direction.NONE, Direction.NONE): _route_free,
    (Direction.POS_X, Direction.POS_Y): _route_pos_x_to_pos_y,
    (Direction.POS_X, Direction.POS_X): _route_pos_x_to_pos_x,
    (Direction.POS_X, Direction.NEG_Y): _route_pos_x_to_neg_y,
    (Direction.POS_X, Direction.NEG_X): _route_pos_x_to_neg_x,
}


def select_elbow_template(
    start: Point,
    start_dir: Direction,
    end: Point,
    end_dir: Direction,
    overshoot: float,
) -> _Template:
    """
    Pick the routing template for a connector.

    Args:
        start: Start point (already normalized)
        start_dir: NONE or POS_X
        end: End point
        end_dir: Any direction
        overshoot: Non-negative overshoot distance

    Returns:
        (case, intermediate points). The end point itself is not included.
    """
    x_aligned, y_aligned = check_alignment(start, end, overshoot)
    geometry = _Geometry(
        start=start,
        end=end,
        overshoot=overshoot,
        target=advance(end, end_dir, overshoot),
        x_aligned=x_aligned,
        y_aligned=y_aligned,
    )

    matcher = _MATCHERS.get((start_dir, end_dir))
    routed = matcher(geometry) if matcher is not None else None
    if routed is None:
        routed = _route_midpoint(geometry, start_dir)
    return routed


class _PathBuilder:
    """Collects path points, dropping any that repeat the previous one."""

    def __init__(self, start: Point, epsilon: float = DEDUPE_EPSILON) -> None:
        self._points: list[Point] = [start]
        self._epsilon = epsilon

    def _is_repeat(self, pt: Point) -> bool:
        last = self._points[-1]
        return abs(last.x - pt.x) <= self._epsilon and abs(last.y - pt.y) <= self._epsilon

    def push(self, pt: Point) -> None:
        if not self._is_repeat(pt):
            self._points.append(pt)

    def finish(self, end: Point) -> Path:
        """Terminate the path exactly at ``end``."""
        if not self._is_repeat(end):
            self._points.append(end)
        elif len(self._points) > 1:
            # Snap the near-identical last bend onto the exact end point
            self._points[-1] = end
        elif self._points[0] != end:
            self._points.append(end)
        return tuple(self._points)


def route_elbow(
    start: EndpointLike,
    end: EndpointLike,
    overshoot: float,
) -> ElbowRoute:
    """
    Compute an elbow path and report which template produced it.

    Args:
        start: Normalized start endpoint (facing +x or nothing). A plain
            Endpoint is accepted and checked.
        end: End endpoint, any facing
        overshoot: Distance to travel straight out before turning

    Returns:
        ElbowRoute with the path and the selected ElbowCase

    Raises:
        InvalidOvershootError: If overshoot is negative or not finite
        InvalidCoordinateError: If any coordinate is not finite
        InvalidStartDirectionError: If start faces -x, +y or -y
    """
    start = Endpoint.coerce(start)
    end = Endpoint.coerce(end)
    overshoot = validate_overshoot(overshoot)
    validate_coordinates(start, end)
    start = NormalizedStart.from_endpoint(start)

    start_pt = start.point
    end_pt = end.point
    case, bends = select_elbow_template(
        start_pt, start.direction, end_pt, end.direction, overshoot
    )

    builder = _PathBuilder(start_pt)
    for pt in bends:
        builder.push(pt)
    return ElbowRoute(path=builder.finish(end_pt), case=case)


def compute_elbow_path(
    start: EndpointLike,
    end: EndpointLike,
    overshoot: float,
    on_case: Optional[CaseObserver] = None,
) -> Path:
    """
    Compute the waypoints of an elbow connector.

    The first point is ``start`` and the last is ``end``, both exactly;
    every segment in between is horizontal or vertical.

    Args:
        start: Normalized start endpoint (facing +x or nothing)
        end: End endpoint, any facing
        overshoot: Distance to travel straight out before turning
        on_case: Optional callback receiving the selected ElbowCase

    Returns:
        Tuple of points from start to end

    Raises:
        InvalidOvershootError: If overshoot is negative or not finite
        InvalidCoordinateError: If any coordinate is not finite
        InvalidStartDirectionError: If start faces -x, +y or -y
    """
    route = route_elbow(start, end, overshoot)
    if on_case is not None:
        on_case(route.case)
    return route.path


__all__ = [
    "MIN_ALIGNMENT_TOLERANCE",
    "ALIGNMENT_TOLERANCE_RATIO",
    "DEDUPE_EPSILON",
    "CaseObserver",
    "alignment_tolerance",
    "check_alignment",
    "select_elbow_template",
    "route_elbow",
    "compute_elbow_path",
]
