# MIT License (see LICENSE)
"""
vecmath - Small fixed-size vector and matrix algebra on numpy.

Vectors keep their element type and length for life. Binary operators pick
the result element type with a promotion rule and combine vectors of
different lengths by truncation (the longer operand supplies the tail).

Main entry points:
    - Vector, Vec2, Vec3, Vec4: Fixed-length numeric vectors.
    - Segment2: Oriented 2D line segment.
    - Matrix: Small matrix with the matrix-vector product.
    - promote: The element-type promotion rule.

Submodules:
    - aliases: Typed constructors (vec2i, color4b, segment2d, ...).
    - functions: Free-function helpers (distance, dot, rotation, ...).
    - config: Environment-driven settings.
    - errors: Exception types.

Example:
    from vecmath import Vec2, Vector

    Vec2(1, 2) + Vector([10, 20, 30, 40])   # Vec4(11, 22, 30, 40, dtype=int64)
"""
from .constants import PI, PI2, PI_2, PI_3, PI_4, PI_6
from .errors import VecMathError, IndexOutOfRangeError, ShapeMismatchError
from .promotion import promote, result_dtype
from .vector import Vector, Vec2, Vec3, Vec4
from .segment import Segment2
from .matrix import Matrix

__all__ = [
    # Types
    "Vector",
    "Vec2",
    "Vec3",
    "Vec4",
    "Segment2",
    "Matrix",
    # Promotion
    "promote",
    "result_dtype",
    # Errors
    "VecMathError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    # Constants
    "PI",
    "PI2",
    "PI_2",
    "PI_3",
    "PI_4",
    "PI_6",
]
