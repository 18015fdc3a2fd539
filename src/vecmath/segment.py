# MIT License (see LICENSE)
"""
2D line segments.

A Segment2 is an oriented pair of endpoints a -> b, both Vec2 of the same
element type. Derived geometry (length, center, delta, direction) is
computed in float64.

Point distance:
    distance_to_point() measures the distance to the infinite line through
    a and b using the implicit line A·x + B·y + C = 0 with
        A = ay - by,  B = bx - ax,  C = ax·by - bx·ay.
    It does not clamp to the segment. clamped_distance() is the true
    point-to-segment distance.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import ShapeMismatchError
from .promotion import Scalar, as_dtype, is_scalar, promote
from .vector import Vec2, Vector

logger = logging.getLogger(__name__)


def _as_vec2(p: Vec2 | tuple[Scalar, Scalar] | Vector) -> Vec2:
    if isinstance(p, Vec2):
        return p
    if isinstance(p, Vector):
        if len(p) != 2:
            raise ShapeMismatchError(f"expected a 2D point, got length {len(p)}")
        return Vec2(*p.to_numpy(), dtype=p.dtype)
    return Vec2(*p)


@dataclass(eq=False)
class Segment2:
    """
    Oriented line segment from a to b.

    Attributes:
        a: Start point. Tuples are accepted and converted to Vec2.
        b: End point.

    Note:
        Endpoints are copied on construction and converted to a common
        element type chosen by the promotion rule. a == b is allowed; such a
        degenerate segment has no direction.
    """
    a: Vec2
    b: Vec2

    def __post_init__(self) -> None:
        a, b = _as_vec2(self.a), _as_vec2(self.b)
        dt = promote(a.dtype, b.dtype)
        self.a = a.astype(dt)
        self.b = b.astype(dt)

    @classmethod
    def from_coords(cls, ax: Scalar, ay: Scalar, bx: Scalar, by: Scalar, dtype: Any = None) -> "Segment2":
        return cls(Vec2(ax, ay, dtype=dtype), Vec2(bx, by, dtype=dtype))

    @property
    def dtype(self) -> np.dtype:
        return self.a.dtype

    def astype(self, dtype: Any) -> "Segment2":
        dt = as_dtype(dtype)
        return Segment2(self.a.astype(dt), self.b.astype(dt))

    def copy(self) -> "Segment2":
        return Segment2(self.a.copy(), self.b.copy())

    # -------------------------------------------------------------------------
    # Derived geometry
    # -------------------------------------------------------------------------

    def length(self) -> float:
        return self.delta().mag()

    def length_sq(self) -> float:
        return self.delta().mag_sq()

    def center_x(self) -> float:
        return (float(self.a.x) + float(self.b.x)) / 2

    def center_y(self) -> float:
        return (float(self.a.y) + float(self.b.y)) / 2

    def center(self) -> Vec2:
        """Midpoint of the segment (float64)."""
        return Vec2(self.center_x(), self.center_y(), dtype=np.float64)

    def delta(self) -> Vec2:
        """b - a in float64."""
        return self.b.to_float64() - self.a.to_float64()

    def delta_x(self) -> float:
        return float(self.b.x) - float(self.a.x)

    def delta_y(self) -> float:
        return float(self.b.y) - float(self.a.y)

    def direction(self) -> Vec2:
        """
        Unit vector pointing from b toward a.

        For a degenerate segment this is the zero vector (see
        Vector.normalize).
        """
        return -(self.delta().normalize())

    def distance_to_point(self, p: Vec2 | tuple[Scalar, Scalar]) -> float:
        """
        Distance from p to the infinite line through a and b.

        Returns nan for a degenerate segment, where the line is undefined.
        """
        p = _as_vec2(p)
        ax, ay = float(self.a.x), float(self.a.y)
        bx, by = float(self.b.x), float(self.b.y)
        A = ay - by
        B = bx - ax
        C = ax * by - bx * ay
        denom = math.sqrt(A * A + B * B)
        if denom == 0:
            logger.debug("distance_to_point() on degenerate segment %s", self)
            return math.nan
        return abs(A * float(p.x) + B * float(p.y) + C) / denom

    def clamped_distance(self, p: Vec2 | tuple[Scalar, Scalar]) -> float:
        """Distance from p to the closest point of the segment itself."""
        p = _as_vec2(p).to_float64()
        a = self.a.to_float64()
        d = self.delta()
        len_sq = d.mag_sq()
        if len_sq == 0:
            return (p - a).mag()
        t = float(np.clip((p - a).dot(d) / len_sq, 0.0, 1.0))
        closest = a + d * t
        return (p - closest).mag()

    # -------------------------------------------------------------------------
    # In-place arithmetic (applied to both endpoints)
    # -------------------------------------------------------------------------

    def _inplace(self, other: Any, op: str) -> "Segment2":
        if isinstance(other, Segment2):
            rhs_a, rhs_b = other.a, other.b
        elif is_scalar(other):
            rhs_a = rhs_b = other
        else:
            return NotImplemented
        # Both endpoints are computed before either is written, so a failure
        # (e.g. integer division by zero) leaves the segment untouched.
        new_a, new_b = self.a.copy(), self.b.copy()
        new_a._inplace(rhs_a, op)
        new_b._inplace(rhs_b, op)
        self.a._data[...] = new_a._data
        self.b._data[...] = new_b._data
        return self

    def __iadd__(self, other):
        return self._inplace(other, "+")

    def __isub__(self, other):
        return self._inplace(other, "-")

    def __imul__(self, other):
        return self._inplace(other, "*")

    def __itruediv__(self, other):
        return self._inplace(other, "/")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment2):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __str__(self) -> str:
        return f"({self.a}) ({self.b})"
