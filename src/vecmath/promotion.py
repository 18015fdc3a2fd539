# MIT License (see LICENSE)
"""
Element-type promotion for binary operations.

Given the element types of the two operands, pick the element type of the
result. The decision looks only at dtypes, never at values, so the result
type of an expression is fixed before any element is computed. Decisions are
memoized per (left, right, mode).

Rules, first match wins:
  1. Same dtype             -> that dtype.
  2. Exactly one is float   -> the floating-point dtype.
  3. Different item sizes   -> the wider dtype.
  4. Tie                    -> the left operand's dtype.

Legacy mode reproduces an older asymmetric variant of rule 2 where a float
only wins when it is on the left. A float on the right then falls through to
rules 3 and 4, so int32 with float32 stays int32.
"""
from __future__ import annotations
from functools import lru_cache
from typing import Any

import numpy as np

from .config import get_settings

SUPPORTED_KINDS = "iuf"

Scalar = int | float | np.integer | np.floating


def as_dtype(t: Any) -> np.dtype:
    """Coerce t to a numpy dtype, rejecting non-real-numeric kinds."""
    dt = np.dtype(t)
    if dt.kind not in SUPPORTED_KINDS:
        raise TypeError(f"Unsupported element type: {dt}")
    return dt


def is_floating(dt: np.dtype) -> bool:
    return dt.kind == "f"


def is_scalar(value: Any) -> bool:
    """True for real numeric scalars (bool excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def scalar_dtype(value: Any) -> np.dtype:
    """
    Element type of a scalar operand.

    numpy scalars carry their own dtype. Plain Python ints and floats map by
    type to the configured scalar dtypes, regardless of magnitude.
    """
    if not is_scalar(value):
        raise TypeError(f"Not a numeric scalar: {value!r}")
    if isinstance(value, np.generic):
        return as_dtype(value.dtype)
    settings = get_settings()
    if isinstance(value, int):
        return settings.scalar_int_dtype
    return settings.scalar_float_dtype


def dtype_of(operand: Any) -> np.dtype:
    """Element type of a container, scalar, dtype or scalar type."""
    if isinstance(operand, (np.dtype, type)):
        return as_dtype(operand)
    if is_scalar(operand):
        return scalar_dtype(operand)
    if hasattr(operand, "dtype"):
        return as_dtype(operand.dtype)
    raise TypeError(f"Cannot determine element type of {type(operand).__name__}")


@lru_cache(maxsize=None)
def _promote(t: np.dtype, c: np.dtype, legacy: bool) -> np.dtype:
    if t == c:
        return t
    t_float, c_float = is_floating(t), is_floating(c)
    if t_float and not c_float:
        return t
    if c_float and not t_float and not legacy:
        return c
    if c.itemsize > t.itemsize:
        return c
    return t


def promote(t: Any, c: Any, *, legacy: bool | None = None) -> np.dtype:
    """
    Result element type for an operation between element types t and c.

    Args:
        t: Left operand element type (anything np.dtype accepts).
        c: Right operand element type.
        legacy: Force (True) or disable (False) the asymmetric rule.
                None uses the configured default.

    Returns:
        The chosen numpy dtype; always one of the two inputs.
    """
    if legacy is None:
        legacy = get_settings().legacy_promotion
    return _promote(as_dtype(t), as_dtype(c), legacy)


def result_dtype(lhs: Any, rhs: Any, *, legacy: bool | None = None) -> np.dtype:
    """promote() applied to the element types of two operands."""
    return promote(dtype_of(lhs), dtype_of(rhs), legacy=legacy)
