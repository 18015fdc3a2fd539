# MIT License (see LICENSE)
"""
Free-function helpers over vectors and segments.

Thin wrappers for code that prefers dot(a, b) over a.dot(b), plus a few
scalar helpers (square, average, degree/radian conversion).
"""
from __future__ import annotations

from .constants import PI
from .errors import ShapeMismatchError
from .segment import Segment2
from .vector import Vec2, Vector


def sqr(a):
    """a * a, in a's own type."""
    return a * a


def avg(*values: float) -> float:
    """Arithmetic mean of one or more numbers, as a float."""
    if not values:
        raise ValueError("avg() needs at least one value")
    return float(sum(values)) / len(values)


def midpoint(v1: Vector, v2: Vector) -> Vector:
    """Element-wise average of two same-length vectors (float64)."""
    _check_same_length(v1, v2)
    return (v1.to_float64() + v2.to_float64()) * 0.5


def distance_sq(p1: Vector, p2: Vector) -> float:
    _check_same_length(p1, p2)
    return (p2.to_float64() - p1.to_float64()).mag_sq()


def distance(p1: Vector, p2: Vector) -> float:
    """Euclidean distance between two points of the same dimension."""
    _check_same_length(p1, p2)
    return (p2.to_float64() - p1.to_float64()).mag()


def point_line_distance(segment: Segment2, point: Vec2) -> float:
    """Distance from point to the infinite line through segment."""
    return segment.distance_to_point(point)


def dot(v1: Vector, v2: Vector) -> float:
    return v1.dot(v2)


def deg_to_rad(d: float) -> float:
    return d * (PI / 180)


def rad_to_deg(r: float) -> float:
    return r * (180 / PI)


def rotate(v: Vec2, rad: float) -> None:
    v.rotate(rad)


def rotate_90_cw(v: Vec2) -> None:
    v.rotate_90_cw()


def rotate_90_ccw(v: Vec2) -> None:
    v.rotate_90_ccw()


def _check_same_length(v1: Vector, v2: Vector) -> None:
    if len(v1) != len(v2):
        raise ShapeMismatchError(f"points have different dimensions: {len(v1)} and {len(v2)}")
