"""
elbow-routing: Orthogonal ("elbow") connector routing in Python.

Computes the waypoints of a connector made only of horizontal and vertical
segments between two points, each optionally constrained to leave or
enter along an axis direction.

Entry points:
- calculate_elbow: Route between two arbitrary endpoints
- compute_elbow_path: Route from a normalized start (facing +x or nothing)
- route_elbow: Same as compute_elbow_path, also reporting the template used
"""

__version__ = "0.1.0"

# Bend calculation
from .bends import (
    ALIGNMENT_TOLERANCE_RATIO,
    DEDUPE_EPSILON,
    MIN_ALIGNMENT_TOLERANCE,
    alignment_tolerance,
    check_alignment,
    compute_elbow_path,
    route_elbow,
)

# Path metrics
from .metrics import (
    bend_count,
    has_duplicate_points,
    is_orthogonal,
    path_length,
    path_quality_summary,
    path_segments,
)

# Normalization layer
from .normalize import (
    DEFAULT_OVERSHOOT,
    DegenerateConnectorWarning,
    Orientation,
    calculate_elbow,
    normalize_endpoints,
)
from .types import (
    Direction,
    ElbowCase,
    ElbowRoute,
    Endpoint,
    EndpointLike,
    FacingLike,
    NormalizedStart,
    Path,
    PathSegment,
    Point,
    advance,
)

# Validation utilities
from .validation import (
    InvalidCoordinateError,
    InvalidDirectionError,
    InvalidOvershootError,
    InvalidStartDirectionError,
    ValidationError,
    validate_coordinates,
    validate_overshoot,
)

__all__ = [
    # Version
    "__version__",
    # Types
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
    # Bend calculation
    "MIN_ALIGNMENT_TOLERANCE",
    "ALIGNMENT_TOLERANCE_RATIO",
    "DEDUPE_EPSILON",
    "alignment_tolerance",
    "check_alignment",
    "compute_elbow_path",
    "route_elbow",
    # Normalization
    "DEFAULT_OVERSHOOT",
    "DegenerateConnectorWarning",
    "Orientation",
    "normalize_endpoints",
    "calculate_elbow",
    # Metrics
    "path_segments",
    "is_orthogonal",
    "has_duplicate_points",
    "path_length",
    "bend_count",
    "path_quality_summary",
    # Validation
    "ValidationError",
    "InvalidOvershootError",
    "InvalidCoordinateError",
    "InvalidDirectionError",
    "InvalidStartDirectionError",
    "validate_overshoot",
    "validate_coordinates",
]
