# MIT License (see LICENSE)
"""
Fixed-length numeric vectors.

A Vector wraps a 1-D numpy array whose dtype (element type) and length are
fixed when the vector is built. Element values are mutable; the length is
not. Lengths 2, 3 and 4 are represented by Vec2, Vec3 and Vec4, which add
named accessors and bounds-checked indexing messages naming the type.

Binary operators promote element types through promotion.promote() and
combine vectors of different lengths by truncation:

    result length  = max(len(lhs), len(rhs))
    result[i]      = lhs[i] op rhs[i]       for i < min(len(lhs), len(rhs))
    result[i]      = longer[i]              otherwise (converted, untouched)

So [1, 2] + [10, 20, 30, 40] == [11, 22, 30, 40]. The shorter operand is
not zero-padded: for subtraction and division the tail is the longer
operand's value as-is.

Conversions between element types truncate like a C cast (float to int
drops the fraction). Integer division truncates toward zero and raises
ZeroDivisionError on a zero divisor; float division follows IEEE rules.
"""
from __future__ import annotations
import logging
from typing import Any, Iterable, Iterator

import numpy as np

from .errors import IndexOutOfRangeError, ShapeMismatchError
from .promotion import Scalar, as_dtype, is_scalar, promote, scalar_dtype

logger = logging.getLogger(__name__)

_UFUNCS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
}


# =============================================================================
# Element-wise kernels
# =============================================================================

def cast_scalar(value: Scalar, dt: np.dtype) -> np.generic:
    """Convert a scalar to dtype dt with C-style (truncating, wrapping) semantics."""
    return np.asarray(value).astype(dt)[()]


def divide(a, b, dt: np.dtype) -> np.ndarray:
    """
    Element-wise a / b in dtype dt.

    Float dtypes yield inf/nan on zero divisors without warnings.
    Integer dtypes truncate toward zero and reject zero divisors.
    """
    if dt.kind == "f":
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.asarray(np.divide(a, b)).astype(dt, copy=False)
    if np.any(np.asarray(b) == 0):
        raise ZeroDivisionError(f"integer division by zero ({dt})")
    q = np.floor_divide(a, b)
    r = a - q * b
    # floor -> trunc: step back toward zero when signs differ and there is a remainder
    fix = (r != 0) & ((np.asarray(a) < 0) != (np.asarray(b) < 0))
    return np.asarray(q + fix).astype(dt, copy=False)


def apply_op(op: str, a, b, dt: np.dtype) -> np.ndarray:
    """Apply one of '+', '-', '*', '/' element-wise, result in dtype dt."""
    if op == "/":
        return divide(a, b, dt)
    return np.asarray(_UFUNCS[op](a, b)).astype(dt, copy=False)


def from_array(data: np.ndarray) -> "Vector":
    """Wrap a 1-D array in the class matching its length."""
    cls = _SPECIALIZED.get(data.size, Vector)
    return cls._wrap(data)


def combine(lhs: "Vector", rhs: "Vector", op: str) -> "Vector":
    """
    Combine two vectors of any lengths with broadcast-by-truncation.

    The result dtype is promote(lhs.dtype, rhs.dtype) and its length is the
    longer operand's. Only the common prefix is combined with op.
    """
    dt = promote(lhs.dtype, rhs.dtype)
    a = lhs._data.astype(dt)
    b = rhs._data.astype(dt)
    k = min(a.size, b.size)
    out = a if a.size >= b.size else b
    out[:k] = apply_op(op, a[:k], b[:k], dt)
    return from_array(out)


def combine_scalar(vec: "Vector", scalar: Scalar, op: str, reflected: bool = False) -> "Vector":
    """
    Combine every element of vec with a scalar.

    reflected=True computes scalar op vec[i]; the scalar is then the left
    operand for promotion tie-breaks as well.
    """
    sdt = scalar_dtype(scalar)
    dt = promote(sdt, vec.dtype) if reflected else promote(vec.dtype, sdt)
    data = vec._data.astype(dt)
    s = cast_scalar(scalar, dt)
    if reflected:
        return from_array(apply_op(op, s, data, dt))
    return from_array(apply_op(op, data, s, dt))


# =============================================================================
# Vector
# =============================================================================

class Vector:
    """
    Ordered, fixed-length sequence of numeric elements of one dtype.

    Args:
        elements: Iterable of numbers (or another Vector to copy).
        dtype: Element type. Inferred from the elements when omitted
               (Python ints -> int64, floats -> float64).

    Vector(...) of length 2, 3 or 4 returns a Vec2, Vec3 or Vec4, the same
    class arithmetic on it produces.

    Raises:
        TypeError: Unsupported element type (bool, complex, object).
        ShapeMismatchError: Empty input, nested input, or wrong length for
                            a fixed-arity subclass.
    """
    __slots__ = ("_data",)
    __hash__ = None
    # Keep numpy scalars on the left of an operator from treating a Vector
    # as an array-like; Python falls back to the reflected method instead.
    __array_ufunc__ = None

    _length: int | None = None

    # Construction lives in __new__ so Vector([x, y]) can return a Vec2.
    def __new__(cls, elements: Iterable[Scalar] | "Vector", dtype: Any = None) -> "Vector":
        if isinstance(elements, Vector):
            data = elements._data.copy()
        else:
            data = np.asarray(list(elements))
        if dtype is not None:
            data = data.astype(as_dtype(dtype))
        else:
            as_dtype(data.dtype)
        if data.ndim != 1 or data.size == 0:
            raise ShapeMismatchError(f"{cls.__name__} needs a flat, non-empty element list")
        if cls._length is not None and data.size != cls._length:
            raise ShapeMismatchError(
                f"{cls.__name__} needs {cls._length} elements, got {data.size}"
            )
        if cls is Vector:
            return from_array(data)
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Vector":
        obj = object.__new__(cls)
        obj._data = data
        return obj

    def __reduce__(self):
        return (from_array, (self._data.copy(),))

    @classmethod
    def _resolve_length(cls, length: int | None) -> int:
        if cls._length is not None:
            if length is not None and length != cls._length:
                raise ShapeMismatchError(f"{cls.__name__} has length {cls._length}, not {length}")
            return cls._length
        if length is None:
            raise TypeError("length is required for a generic Vector")
        if length < 1:
            raise ShapeMismatchError(f"Vector length must be positive, got {length}")
        return int(length)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def full(cls, value: Scalar, length: int | None = None, dtype: Any = None) -> "Vector":
        """Vector with every element set to value (dtype defaults to the value's)."""
        n = cls._resolve_length(length)
        dt = as_dtype(dtype) if dtype is not None else scalar_dtype(value)
        return from_array(np.full(n, cast_scalar(value, dt), dtype=dt))

    @classmethod
    def zeros(cls, length: int | None = None, dtype: Any = np.float64) -> "Vector":
        n = cls._resolve_length(length)
        return from_array(np.zeros(n, dtype=as_dtype(dtype)))

    @classmethod
    def empty(cls, length: int | None = None, dtype: Any = np.float64) -> "Vector":
        """Vector with unspecified contents. Fill before reading."""
        n = cls._resolve_length(length)
        return from_array(np.empty(n, dtype=as_dtype(dtype)))

    def copy(self) -> "Vector":
        return type(self)._wrap(self._data.copy())

    # -------------------------------------------------------------------------
    # Element access
    # -------------------------------------------------------------------------

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.size

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._data)

    def _check_index(self, i: Any) -> int:
        if isinstance(i, (bool, np.bool_)) or not isinstance(i, (int, np.integer)):
            raise TypeError(f"{type(self).__name__} indices must be integers, not {type(i).__name__}")
        if not 0 <= i < self._data.size:
            raise IndexOutOfRangeError(int(i), self._data.size, type(self).__name__)
        return int(i)

    def __getitem__(self, i: int) -> np.generic:
        return self._data[self._check_index(i)]

    def __setitem__(self, i: int, value: Scalar) -> None:
        self._data[self._check_index(i)] = cast_scalar(value, self.dtype)

    def tolist(self) -> list:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Copy of the elements as a numpy array."""
        return self._data.copy()

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def astype(self, dtype: Any) -> "Vector":
        """Copy converted to dtype. Float to int truncates toward zero."""
        return from_array(self._data.astype(as_dtype(dtype)))

    def to_float64(self) -> "Vector":
        return self.astype(np.float64)

    def to_float32(self) -> "Vector":
        return self.astype(np.float32)

    def to_int32(self) -> "Vector":
        return self.astype(np.int32)

    def to_int64(self) -> "Vector":
        return self.astype(np.int64)

    # -------------------------------------------------------------------------
    # Reductions
    # -------------------------------------------------------------------------

    def sum(self) -> np.generic:
        return self._data.sum(dtype=self.dtype)

    def product(self) -> np.generic:
        return self._data.prod(dtype=self.dtype)

    def average(self) -> np.generic:
        """Mean in the element dtype; integer dtypes truncate toward zero."""
        total = self.sum()
        n = self._data.size
        if self.dtype.kind == "f":
            return self.dtype.type(total / n)
        q = abs(int(total)) // n
        return self.dtype.type(q if total >= 0 else -q)

    def min(self) -> np.generic:
        return self._data.min()

    def max(self) -> np.generic:
        return self._data.max()

    def mag_sq(self) -> float:
        """Squared magnitude, accumulated in float64."""
        f = self._data.astype(np.float64)
        return float(np.dot(f, f))

    def mag(self) -> float:
        return float(np.sqrt(self.mag_sq()))

    def dot(self, other: "Vector") -> float:
        """Dot product with a vector of the same length, accumulated in float64."""
        if not isinstance(other, Vector):
            raise TypeError(f"dot() needs a Vector, got {type(other).__name__}")
        if len(other) != len(self):
            raise ShapeMismatchError(f"dot() of lengths {len(self)} and {len(other)}")
        return float(np.dot(self._data.astype(np.float64), other._data.astype(np.float64)))

    def normalize(self) -> "Vector":
        """
        Unit vector in float64.

        A zero-magnitude vector is returned unchanged (as float64) instead of
        dividing by zero. The result then has no direction; it is not a unit
        vector.
        """
        out = self.to_float64()
        mag = self.mag()
        if mag == 0:
            logger.debug("normalize() on zero-magnitude %s; returned unchanged", type(self).__name__)
            return out
        out._data /= mag
        return out

    def zero(self) -> None:
        """Set every element to 0 in place."""
        self._data.fill(0)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def _binary(self, other: Any, op: str, reflected: bool = False) -> "Vector":
        if isinstance(other, Vector):
            return combine(other, self, op) if reflected else combine(self, other, op)
        if is_scalar(other):
            return combine_scalar(self, other, op, reflected)
        return NotImplemented

    def __add__(self, other):
        return self._binary(other, "+")

    def __radd__(self, other):
        return self._binary(other, "+", reflected=True)

    def __sub__(self, other):
        return self._binary(other, "-")

    def __rsub__(self, other):
        return self._binary(other, "-", reflected=True)

    def __mul__(self, other):
        return self._binary(other, "*")

    def __rmul__(self, other):
        return self._binary(other, "*", reflected=True)

    def __truediv__(self, other):
        return self._binary(other, "/")

    def __rtruediv__(self, other):
        return self._binary(other, "/", reflected=True)

    def __neg__(self) -> "Vector":
        return type(self)._wrap(np.negative(self._data))

    def __pos__(self) -> "Vector":
        return self.copy()

    def _inplace(self, other: Any, op: str) -> "Vector":
        dt = self.dtype
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ShapeMismatchError(
                    f"in-place {op} needs equal lengths, got {len(self)} and {len(other)}"
                )
            rhs = other._data.astype(dt)
        elif is_scalar(other):
            rhs = cast_scalar(other, dt)
        else:
            return NotImplemented
        self._data[...] = apply_op(op, self._data, rhs, dt)
        return self

    def __iadd__(self, other):
        return self._inplace(other, "+")

    def __isub__(self, other):
        return self._inplace(other, "-")

    def __imul__(self, other):
        return self._inplace(other, "*")

    def __itruediv__(self, other):
        return self._inplace(other, "/")

    # Equality is element-wise; ordering compares squared magnitude.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._data, other._data))

    def __lt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.mag_sq() < other.mag_sq()

    def __le__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.mag_sq() <= other.mag_sq()

    def __gt__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.mag_sq() > other.mag_sq()

    def __ge__(self, other: "Vector") -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.mag_sq() >= other.mag_sq()

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return ", ".join(str(e) for e in self._data.tolist())

    def __repr__(self) -> str:
        if self._length is None:
            return f"{type(self).__name__}({self._data.tolist()}, dtype={self.dtype})"
        return f"{type(self).__name__}({self}, dtype={self.dtype})"


# =============================================================================
# Fixed-arity specializations
# =============================================================================

def _axis(index: int, name: str) -> property:
    def fget(self: Vector) -> np.generic:
        return self._data[index]

    def fset(self: Vector, value: Scalar) -> None:
        self[index] = value

    return property(fget, fset, doc=f"Element {index} ({name}).")


class Vec2(Vector):
    """2D vector with x, y accessors."""
    __slots__ = ()
    _length = 2

    x = _axis(0, "x")
    y = _axis(1, "y")

    def __new__(cls, x: Scalar, y: Scalar, dtype: Any = None) -> "Vec2":
        return super().__new__(cls, (x, y), dtype)

    def rotate(self, rad: float) -> None:
        """
        Rotate counterclockwise by rad in place.

        Computed in float64 and written back with truncating conversion, so
        integer vectors lose the fractional part.
        """
        cs, sn = np.cos(rad), np.sin(rad)
        x, y = self._data.astype(np.float64)
        self._data[:] = np.array([x * cs - y * sn, x * sn + y * cs]).astype(self.dtype)

    def rotate_90_cw(self) -> None:
        """(x, y) -> (y, -x) in place."""
        x, y = self._data.copy()
        self._data[0], self._data[1] = y, -x

    def rotate_90_ccw(self) -> None:
        """(x, y) -> (-y, x) in place."""
        x, y = self._data.copy()
        self._data[0], self._data[1] = -y, x


class Vec3(Vector):
    """3D vector with x, y, z accessors."""
    __slots__ = ()
    _length = 3

    x = _axis(0, "x")
    y = _axis(1, "y")
    z = _axis(2, "z")

    def __new__(cls, x: Scalar, y: Scalar, z: Scalar, dtype: Any = None) -> "Vec3":
        return super().__new__(cls, (x, y, z), dtype)


class Vec4(Vector):
    """4D vector with x, y, z, w accessors."""
    __slots__ = ()
    _length = 4

    x = _axis(0, "x")
    y = _axis(1, "y")
    z = _axis(2, "z")
    w = _axis(3, "w")

    def __new__(cls, x: Scalar, y: Scalar, z: Scalar, w: Scalar, dtype: Any = None) -> "Vec4":
        return super().__new__(cls, (x, y, z, w), dtype)


_SPECIALIZED: dict[int, type[Vector]] = {2: Vec2, 3: Vec3, 4: Vec4}
