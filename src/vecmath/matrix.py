# MIT License (see LICENSE)
"""
Small fixed-shape matrices.

Only what the vector types need: construction, common 2D transforms and the
matrix-vector product. No general matrix multiplication, inversion or
solving.
"""
from __future__ import annotations
from typing import Any, Iterable

import numpy as np

from .errors import IndexOutOfRangeError, ShapeMismatchError
from .promotion import Scalar, as_dtype, promote, scalar_dtype
from .vector import Vector, cast_scalar, from_array


class Matrix:
    """
    rows x cols grid of one numeric dtype, stored row-major.

    Args:
        rows, cols: Shape, fixed for the life of the matrix.
        elements: Optional row-major nested rows. Missing rows and missing
                  trailing elements stay zero.
        dtype: Element type. Inferred from elements when omitted, else
               float64.

    Raises:
        ShapeMismatchError: More rows or columns supplied than the shape holds.
    """
    __slots__ = ("_data",)
    __hash__ = None
    __array_ufunc__ = None

    def __init__(
        self,
        rows: int,
        cols: int,
        elements: Iterable[Iterable[Scalar]] | None = None,
        dtype: Any = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ShapeMismatchError(f"Matrix shape must be positive, got {rows}x{cols}")
        given = [np.asarray(list(row)) for row in elements] if elements is not None else []
        if len(given) > rows:
            raise ShapeMismatchError(f"{len(given)} rows supplied for a {rows}x{cols} matrix")
        if dtype is not None:
            dt = as_dtype(dtype)
        else:
            kinds = [row.dtype for row in given if row.size]
            dt = as_dtype(np.result_type(*kinds)) if kinds else np.dtype(np.float64)
        data = np.zeros((rows, cols), dtype=dt)
        for r, row in enumerate(given):
            if row.ndim != 1 or row.size > cols:
                raise ShapeMismatchError(f"row {r} does not fit in {cols} columns")
            data[r, :row.size] = row.astype(dt)
        self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def scale(cls, factor: Scalar, n: int = 2, dtype: Any = None) -> "Matrix":
        """n x n matrix with factor on the diagonal."""
        if n < 1:
            raise ShapeMismatchError(f"Matrix shape must be positive, got {n}x{n}")
        dt = as_dtype(dtype) if dtype is not None else scalar_dtype(factor)
        data = np.zeros((n, n), dtype=dt)
        np.fill_diagonal(data, cast_scalar(factor, dt))
        return cls._wrap(data)

    @classmethod
    def identity(cls, n: int = 2, dtype: Any = np.float64) -> "Matrix":
        return cls.scale(1, n, dtype)

    @classmethod
    def flip_vertical(cls, dtype: Any = np.float64) -> "Matrix":
        """2x2 matrix negating the y axis."""
        return cls(2, 2, [[1, 0], [0, -1]], dtype=dtype)

    @classmethod
    def rotation(cls, angle_rad: float) -> "Matrix":
        """2x2 counterclockwise rotation by angle_rad (float64)."""
        c, s = np.cos(angle_rad), np.sin(angle_rad)
        return cls(2, 2, [[c, -s], [s, c]], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def _check_index(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be (row, col) pairs")
        r, c = key
        for i, n, axis in ((r, self.rows, "row"), (c, self.cols, "column")):
            if isinstance(i, (bool, np.bool_)) or not isinstance(i, (int, np.integer)):
                raise TypeError(f"Matrix {axis} index must be an integer, not {type(i).__name__}")
            if not 0 <= i < n:
                raise IndexOutOfRangeError(int(i), n, f"Matrix {axis}")
        return int(r), int(c)

    def __getitem__(self, key: tuple[int, int]) -> np.generic:
        return self._data[self._check_index(key)]

    def __setitem__(self, key: tuple[int, int], value: Scalar) -> None:
        self._data[self._check_index(key)] = cast_scalar(value, self.dtype)

    def row(self, i: int) -> Vector:
        self._check_index((i, 0))
        return from_array(self._data[i].copy())

    def column(self, j: int) -> Vector:
        self._check_index((0, j))
        return from_array(self._data[:, j].copy())

    def astype(self, dtype: Any) -> "Matrix":
        return Matrix._wrap(self._data.astype(as_dtype(dtype)))

    def tolist(self) -> list[list]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    # -------------------------------------------------------------------------
    # Matrix-vector product
    # -------------------------------------------------------------------------

    def transform(self, vec: Vector) -> Vector:
        """
        Matrix-vector product.

        Element i of the result is row i dotted with vec, computed in
        promote(self.dtype, vec.dtype). The result has self.rows elements.

        Raises:
            ShapeMismatchError: len(vec) != self.cols.
        """
        if not isinstance(vec, Vector):
            raise TypeError(f"transform() needs a Vector, got {type(vec).__name__}")
        if len(vec) != self.cols:
            raise ShapeMismatchError(
                f"cannot multiply {self.rows}x{self.cols} matrix by length-{len(vec)} vector"
            )
        dt = promote(self.dtype, vec.dtype)
        out = self._data.astype(dt) @ vec.to_numpy().astype(dt)
        return from_array(np.asarray(out).astype(dt, copy=False))

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.transform(other)

    def __mul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.transform(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __str__(self) -> str:
        return "\n".join("[" + ", ".join(str(e) for e in row) + "]" for row in self._data.tolist())

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()}, dtype={self.dtype})"
