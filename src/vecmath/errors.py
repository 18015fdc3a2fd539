# MIT License (see LICENSE)
"""
Exception types raised by vecmath.

Library errors subclass both VecMathError and the matching built-in
exception family, so callers may catch either.
"""
from __future__ import annotations


class VecMathError(Exception):
    """Base class for all vecmath errors."""


class IndexOutOfRangeError(VecMathError, IndexError):
    """
    Raised when a vector or matrix is indexed outside its valid range.

    Attributes:
        index: The offending index.
        length: Number of valid positions along the indexed axis.
    """

    def __init__(self, index: int, length: int, owner: str = "Vector") -> None:
        self.index = index
        self.length = length
        allowed = ", ".join(str(i) for i in range(length))
        super().__init__(
            f"Index out of range. Allowed indices for {owner}: {allowed}. Got {index}."
        )


class ShapeMismatchError(VecMathError, ValueError):
    """Raised when operand lengths or matrix shapes are incompatible."""
