import numpy as np
import pytest

from vecmath.constants import PI_2
from vecmath.errors import IndexOutOfRangeError, ShapeMismatchError
from vecmath.matrix import Matrix
from vecmath.vector import Vec2, Vec3, Vector


def test_identity_leaves_vector_unchanged():
    v = Vec2(3, 4)
    out = Matrix.identity() @ v
    assert out == v
    assert out.dtype == np.float64

    out = Matrix.identity(2, np.int32) @ Vec2(3, 4, dtype=np.int32)
    assert out.dtype == np.int32
    assert out.tolist() == [3, 4]


def test_product_promotes_element_type():
    out = Matrix.identity(2, np.int32) @ Vec2(1.5, 2.5)
    assert out.dtype == np.float64
    assert out.tolist() == [1.5, 2.5]


def test_scale_and_flip():
    assert (Matrix.scale(3) @ Vec2(1, 2)).tolist() == [3, 6]
    assert Matrix.scale(2.0, 3).tolist() == [[2.0, 0.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, 2.0]]
    assert (Matrix.flip_vertical() @ Vec2(1.0, 2.0)).tolist() == [1.0, -2.0]


def test_rotation():
    out = Matrix.rotation(PI_2) @ Vec2(1.0, 0.0)
    assert out.tolist() == pytest.approx([0.0, 1.0], abs=1e-12)


def test_rectangular_product():
    m = Matrix(3, 2, [[1, 2], [3, 4], [5, 6]])
    out = m @ Vec2(1, 1)
    assert isinstance(out, Vec3)
    assert out.tolist() == [3, 7, 11]
    assert (m * Vec2(1, 1)) == out


def test_shape_mismatch_fails_fast():
    with pytest.raises(ShapeMismatchError):
        Matrix(2, 3) @ Vec2(1, 2)
    with pytest.raises(ShapeMismatchError):
        Matrix.identity(2).transform(Vector([1, 2, 3, 4, 5]))
    with pytest.raises(TypeError):
        Matrix.identity(2) @ 3


def test_partial_rows_stay_zero():
    m = Matrix(3, 3, [[1, 2], [3]])
    assert m.tolist() == [[1, 2, 0], [3, 0, 0], [0, 0, 0]]
    assert m.dtype == np.int64
    assert Matrix(2, 2).tolist() == [[0.0, 0.0], [0.0, 0.0]]


def test_oversized_input_rejected():
    with pytest.raises(ShapeMismatchError):
        Matrix(2, 2, [[1, 2], [3, 4], [5, 6]])
    with pytest.raises(ShapeMismatchError):
        Matrix(2, 2, [[1, 2, 3]])
    with pytest.raises(ShapeMismatchError):
        Matrix(0, 2)


def test_factories_reject_empty_shape():
    with pytest.raises(ShapeMismatchError):
        Matrix.scale(1, 0)
    with pytest.raises(ShapeMismatchError):
        Matrix.identity(-1)
    assert Matrix.scale(5, 1).tolist() == [[5]]


def test_indexing():
    m = Matrix(2, 2, [[1, 2], [3, 4]], dtype=np.int32)
    assert m[0, 1] == 2
    m[1, 0] = 9.7
    assert m[1, 0] == 9
    with pytest.raises(IndexOutOfRangeError):
        m[2, 0]
    with pytest.raises(IndexOutOfRangeError):
        m[0, -1]
    with pytest.raises(TypeError):
        m[0]


def test_rows_and_columns():
    m = Matrix(2, 3, [[1, 2, 3], [4, 5, 6]])
    assert m.shape == (2, 3)
    assert m.row(1).tolist() == [4, 5, 6]
    assert m.column(2) == Vec2(3, 6)
    with pytest.raises(IndexOutOfRangeError):
        m.row(2)


def test_equality_and_text():
    m = Matrix.identity(2, np.int32)
    assert m == Matrix(2, 2, [[1], [0, 1]])
    assert m != Matrix.flip_vertical(np.int32)
    assert str(m) == "[1, 0]\n[0, 1]"
    assert m.astype(np.float64).dtype == np.float64
