"""
Elbow path quality metrics.

Provides quantitative measures of a computed connector path:
- Segments: The path split into horizontal/vertical pieces
- Bends: Number of direction changes along the path
- Length: Total travelled (Manhattan) distance
- Orthogonality: Whether every segment is axis-aligned
- Duplicates: Whether any segment has zero length

All metrics work with any sequence of (x, y) points, including the
tuples returned by ``compute_elbow_path`` and ``calculate_elbow``.
"""

from __future__ import annotations

from typing import Any, Sequence

from .bends import DEDUPE_EPSILON
from .types import PathSegment, Point


def path_segments(
    path: Sequence[Sequence[float]], tolerance: float = DEDUPE_EPSILON
) -> list[PathSegment]:
    """
    Split a path into segments.

    A segment counts as horizontal when its endpoints share y within
    ``tolerance``; otherwise it is treated as vertical.

    Args:
        path: Sequence of (x, y) points
        tolerance: Maximum y difference for a horizontal segment

    Returns:
        One PathSegment per consecutive pair of points
    """
    points = [Point(p[0], p[1]) for p in path]
    return [
        PathSegment(start=a, end=b, is_horizontal=abs(a.y - b.y) <= tolerance)
        for a, b in zip(points, points[1:])
    ]


def is_orthogonal(
    path: Sequence[Sequence[float]], tolerance: float = DEDUPE_EPSILON
) -> bool:
    """Check that every segment changes at most one coordinate."""
    for a, b in zip(path, path[1:]):
        if abs(a[0] - b[0]) > tolerance and abs(a[1] - b[1]) > tolerance:
            return False
    return True


def has_duplicate_points(
    path: Sequence[Sequence[float]], tolerance: float = DEDUPE_EPSILON
) -> bool:
    """Check whether any two consecutive points coincide within tolerance."""
    for a, b in zip(path, path[1:]):
        if abs(a[0] - b[0]) <= tolerance and abs(a[1] - b[1]) <= tolerance:
            return True
    return False


def path_length(path: Sequence[Sequence[float]]) -> float:
    """
    Total length of the path.

    Uses Manhattan distance per segment, which equals the Euclidean
    length for axis-aligned segments.
    """
    return sum(abs(a[0] - b[0]) + abs(a[1] - b[1]) for a, b in zip(path, path[1:]))


def bend_count(
    path: Sequence[Sequence[float]], tolerance: float = DEDUPE_EPSILON
) -> int:
    """
    Count direction changes along the path.

    Zero-length segments are ignored; a reversal (e.g. +x followed by -x)
    counts as a bend.

    Time Complexity: O(n) where n = number of points
    """
    directions = [
        seg.direction
        for seg in path_segments(path, tolerance)
        if seg.length > tolerance
    ]
    return sum(1 for prev, cur in zip(directions, directions[1:]) if prev is not cur)


def path_quality_summary(
    path: Sequence[Sequence[float]], tolerance: float = DEDUPE_EPSILON
) -> dict[str, Any]:
    """
    Compute all path metrics.

    Args:
        path: Sequence of (x, y) points
        tolerance: Tolerance for coordinate comparisons

    Returns:
        Dictionary with metric names and values
    """
    return {
        "points": len(path),
        "segments": max(0, len(path) - 1),
        "bends": bend_count(path, tolerance),
        "length": path_length(path),
        "orthogonal": is_orthogonal(path, tolerance),
        "has_duplicates": has_duplicate_points(path, tolerance),
    }


__all__ = [
    "path_segments",
    "is_orthogonal",
    "has_duplicate_points",
    "path_length",
    "bend_count",
    "path_quality_summary",
]
