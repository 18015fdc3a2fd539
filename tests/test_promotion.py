import numpy as np
import pytest

from vecmath.config import reset_settings
from vecmath.promotion import promote, result_dtype, scalar_dtype
from vecmath.vector import Vec2


@pytest.fixture
def env(monkeypatch):
    """Environment patching with the settings cache cleared on both sides."""
    reset_settings()
    yield monkeypatch
    reset_settings()


def test_same_type_is_kept():
    assert promote(np.int32, np.int32) == np.int32
    assert promote(np.float32, np.float32) == np.float32


def test_float_beats_integer_on_either_side():
    assert promote(np.int32, np.float64) == np.float64
    assert promote(np.float64, np.int32) == np.float64
    # Float wins by kind even when narrower
    assert promote(np.int64, np.float32) == np.float32
    assert promote(np.int8, np.float16) == np.float16


def test_wider_type_wins_within_a_kind():
    assert promote(np.int32, np.int64) == np.int64
    assert promote(np.int64, np.int32) == np.int64
    assert promote(np.float32, np.float64) == np.float64
    assert promote(np.uint8, np.int16) == np.int16


def test_equal_width_keeps_left():
    assert promote(np.uint32, np.int32) == np.uint32
    assert promote(np.int32, np.uint32) == np.int32


def test_legacy_prefers_float_only_on_the_left():
    """The asymmetric rule lets a right-hand float fall through to width."""
    assert promote(np.float32, np.int32, legacy=True) == np.float32
    assert promote(np.int32, np.float32, legacy=True) == np.int32
    assert promote(np.int64, np.float32, legacy=True) == np.int64
    # Width still decides when the float is wider
    assert promote(np.int32, np.float64, legacy=True) == np.float64


def test_legacy_from_environment(env):
    env.setenv("VECMATH_LEGACY_PROMOTION", "1")
    reset_settings()
    assert promote(np.int32, np.float32) == np.int32
    assert promote(np.int32, np.float32, legacy=False) == np.float32


def test_unsupported_types_rejected():
    for dt in (np.bool_, np.complex128, object):
        with pytest.raises(TypeError):
            promote(dt, np.int32)


def test_scalar_dtype_is_by_type_not_value():
    assert scalar_dtype(3) == np.int64
    assert scalar_dtype(2**40) == np.int64
    assert scalar_dtype(2.5) == np.float64
    assert scalar_dtype(np.float32(1.0)) == np.float32
    assert scalar_dtype(np.uint8(7)) == np.uint8
    with pytest.raises(TypeError):
        scalar_dtype(True)
    with pytest.raises(TypeError):
        scalar_dtype("1")


def test_result_dtype_of_containers_and_scalars():
    v = Vec2(1, 2, dtype=np.int32)
    assert result_dtype(v, 2.5) == np.float64
    assert result_dtype(v, Vec2(1, 2, dtype=np.int64)) == np.int64
    assert result_dtype(np.float32, v) == np.float32
