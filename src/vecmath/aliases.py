# MIT License (see LICENSE)
"""
Typed constructors for common element types.

Suffixes: i = int32, f = float32, d = float64, b = uint8 (colors).
point* and pos* build the same vectors as vec*; line2* and edge2* build
the same segments as segment2*.

    vec2i(1, 2)                  -> Vec2(1, 2, dtype=int32)
    color4b(255, 128, 0, 255)    -> Vec4(..., dtype=uint8)
    segment2d(0, 0, 4, 0)        -> Segment2 with float64 endpoints
"""
from __future__ import annotations
from typing import Any, Callable

import numpy as np

from .segment import Segment2
from .vector import Vec2, Vec3, Vec4


def _typed(factory: Callable[..., Any], dtype: Any, name: str) -> Callable[..., Any]:
    def build(*coords):
        return factory(*coords, dtype=dtype)

    build.__name__ = build.__qualname__ = name
    build.__doc__ = f"{getattr(factory, '__qualname__', factory)} with {np.dtype(dtype)} elements."
    return build


vec2i = _typed(Vec2, np.int32, "vec2i")
vec2f = _typed(Vec2, np.float32, "vec2f")
vec2d = _typed(Vec2, np.float64, "vec2d")

point2i = _typed(Vec2, np.int32, "point2i")
point2f = _typed(Vec2, np.float32, "point2f")
point2d = _typed(Vec2, np.float64, "point2d")

pos2i = _typed(Vec2, np.int32, "pos2i")
pos2f = _typed(Vec2, np.float32, "pos2f")
pos2d = _typed(Vec2, np.float64, "pos2d")

vec3i = _typed(Vec3, np.int32, "vec3i")
vec3f = _typed(Vec3, np.float32, "vec3f")
vec3d = _typed(Vec3, np.float64, "vec3d")

point3i = _typed(Vec3, np.int32, "point3i")
point3f = _typed(Vec3, np.float32, "point3f")
point3d = _typed(Vec3, np.float64, "point3d")

pos3i = _typed(Vec3, np.int32, "pos3i")
pos3f = _typed(Vec3, np.float32, "pos3f")
pos3d = _typed(Vec3, np.float64, "pos3d")

vec4i = _typed(Vec4, np.int32, "vec4i")
vec4f = _typed(Vec4, np.float32, "vec4f")
vec4d = _typed(Vec4, np.float64, "vec4d")

point4i = _typed(Vec4, np.int32, "point4i")
point4f = _typed(Vec4, np.float32, "point4f")
point4d = _typed(Vec4, np.float64, "point4d")

pos4i = _typed(Vec4, np.int32, "pos4i")
pos4f = _typed(Vec4, np.float32, "pos4f")
pos4d = _typed(Vec4, np.float64, "pos4d")

color3b = _typed(Vec3, np.uint8, "color3b")
color3f = _typed(Vec3, np.float32, "color3f")
color4b = _typed(Vec4, np.uint8, "color4b")
color4f = _typed(Vec4, np.float32, "color4f")

segment2i = _typed(Segment2.from_coords, np.int32, "segment2i")
segment2f = _typed(Segment2.from_coords, np.float32, "segment2f")
segment2d = _typed(Segment2.from_coords, np.float64, "segment2d")

line2i = _typed(Segment2.from_coords, np.int32, "line2i")
line2f = _typed(Segment2.from_coords, np.float32, "line2f")
line2d = _typed(Segment2.from_coords, np.float64, "line2d")

edge2i = _typed(Segment2.from_coords, np.int32, "edge2i")
edge2f = _typed(Segment2.from_coords, np.float32, "edge2f")
edge2d = _typed(Segment2.from_coords, np.float64, "edge2d")
