import logging
import math

import numpy as np
import pytest

from vecmath.errors import ShapeMismatchError
from vecmath.segment import Segment2
from vecmath.vector import Vec2, Vec3, Vector


def test_basic_geometry():
    s = Segment2((0, 0), (4, 0))
    assert s.length() == 4.0
    assert s.length_sq() == 16.0
    assert s.center() == Vec2(2.0, 0.0)
    assert s.center().dtype == np.float64
    assert s.center_x() == 2.0
    assert s.center_y() == 0.0
    assert s.delta() == Vec2(4.0, 0.0)
    assert s.delta_x() == 4.0
    assert s.delta_y() == 0.0


def test_direction_points_from_b_to_a():
    s = Segment2((0, 0), (4, 0))
    assert s.direction().tolist() == pytest.approx([-1.0, 0.0])
    d = Segment2((1, 1), (4, 5)).direction()
    assert d.tolist() == pytest.approx([-0.6, -0.8])
    assert d.mag() == pytest.approx(1.0)


def test_degenerate_direction_is_zero_not_nan():
    d = Segment2((1, 1), (1, 1)).direction()
    assert not np.any(np.isnan(d.to_numpy()))
    assert d.tolist() == pytest.approx([0.0, 0.0])


def test_distance_to_infinite_line():
    s = Segment2((0, 0), (10, 0))
    assert s.distance_to_point((0, 5)) == 5.0
    assert s.distance_to_point(Vec2(5, -2)) == 2.0
    # Past the end point the line, not the segment, is measured
    assert s.distance_to_point((20, -3)) == 3.0


def test_clamped_distance():
    s = Segment2((0, 0), (10, 0))
    assert s.clamped_distance((5, 5)) == pytest.approx(5.0)
    assert s.clamped_distance((20, -3)) == pytest.approx(math.sqrt(109))
    assert s.clamped_distance((-3, 4)) == pytest.approx(5.0)


def test_degenerate_distances(caplog):
    s = Segment2((1, 1), (1, 1))
    with caplog.at_level(logging.DEBUG, logger="vecmath.segment"):
        assert math.isnan(s.distance_to_point((4, 5)))
    assert "degenerate" in caplog.text
    assert s.clamped_distance((4, 5)) == pytest.approx(5.0)


def test_endpoints_share_a_promoted_type():
    s = Segment2(Vec2(0, 0, dtype=np.int32), Vec2(1.5, 2.5))
    assert s.dtype == np.float64
    assert s.a.dtype == s.b.dtype


def test_endpoints_are_copied():
    p = Vec2(0, 0)
    s = Segment2(p, Vec2(1, 1))
    p[0] = 9
    assert s.a == Vec2(0, 0)


def test_endpoint_must_be_2d():
    with pytest.raises(ShapeMismatchError):
        Segment2((0, 0), Vec3(1, 2, 3))
    with pytest.raises(ShapeMismatchError):
        Segment2((0, 0), (0, 0)).distance_to_point(Vector([1, 2, 3, 4, 5]))


def test_generic_length_2_vectors_are_points():
    s = Segment2(Vector([0, 0]), Vector([10, 0], dtype=np.int32))
    assert isinstance(s.a, Vec2) and isinstance(s.b, Vec2)
    assert s.dtype == np.int64
    assert s.distance_to_point(Vector([0, 5])) == 5.0
    assert s.clamped_distance(Vector([-3.0, 4.0])) == pytest.approx(5.0)


def test_compound_ops_apply_to_both_endpoints():
    s = Segment2.from_coords(0, 0, 4, 0, dtype=np.int32)
    s += 1
    assert s == Segment2((1, 1), (5, 1))
    s *= Segment2((2, 2), (1, 1))
    assert s == Segment2((2, 2), (5, 1))
    s -= 1.5
    assert s == Segment2((1, 1), (4, 0))
    assert s.dtype == np.int32
    with pytest.raises(TypeError):
        s += "x"


def test_failed_compound_op_leaves_segment_unchanged():
    s = Segment2.from_coords(4, 4, 8, 8, dtype=np.int32)
    with pytest.raises(ZeroDivisionError):
        s /= Segment2((2, 2), (0, 1))
    assert s == Segment2((4, 4), (8, 8))
    assert s.dtype == np.int32

    s /= Segment2((2, 2), (4, 1))
    assert s == Segment2((2, 2), (2, 8))


def test_astype_and_text():
    s = Segment2((0.5, 1.5), (4.9, -0.2))
    t = s.astype(np.int32)
    assert t == Segment2((0, 1), (4, 0))
    assert str(Segment2((0, 0), (4, 0))) == "(0, 0) (4, 0)"
