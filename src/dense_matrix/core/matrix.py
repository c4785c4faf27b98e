"""Matrix: immutable dense float64 matrix value type."""

from __future__ import annotations

import logging
import operator
from typing import Any

import numpy as np
import pandas as pd

from .errors import DimensionMismatchError, IndexOutOfBoundsError
from .validation import validate_dataframe_matrix, validate_grid

logger = logging.getLogger(__name__)


def _zeros(height: int, width: int) -> np.ndarray:
    """Zero-filled scratch array for building a result before it is frozen."""
    return np.zeros((height, width), dtype=np.float64)


class Matrix:
    """Immutable rectangular grid of double-precision values.

    The values live in an owned, C-contiguous, read-only float64 array.
    Every operation returns a new Matrix; operands are never modified.
    """

    __slots__ = ("_values",)

    def __init__(self, data: Any) -> None:
        object.__setattr__(self, "_values", validate_grid(data))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> Matrix:
        """Create a Matrix from the values of a numeric DataFrame (labels are dropped)."""
        return cls._from_array(validate_dataframe_matrix(df))

    @classmethod
    def _from_array(cls, values: np.ndarray) -> Matrix:
        """Adopt an already-validated float64 array (bypasses validation)."""
        obj = object.__new__(cls)
        values.flags.writeable = False
        object.__setattr__(obj, "_values", values)
        return obj

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Matrix is immutable; cannot set attribute {name!r}.")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Matrix is immutable; cannot delete attribute {name!r}.")

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def width(self) -> int:
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    @property
    def values(self) -> np.ndarray:
        """Float64 matrix (height, width), read-only view."""
        v = self._values.view()
        v.flags.writeable = False
        return v

    def get(self, row: int, col: int) -> float:
        """Return the element at (row, col).

        Raises IndexOutOfBoundsError unless 0 <= row < height and
        0 <= col < width. Negative indices do not wrap.
        """
        row = operator.index(row)
        col = operator.index(col)
        if not (0 <= row < self.height and 0 <= col < self.width):
            logger.debug("get(%d, %d) outside %dx%d matrix", row, col, *self.shape)
            raise IndexOutOfBoundsError(row, col, self.shape)
        return float(self._values[row, col])

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product self x other.

        Each cell is a running sum over k = 0 .. width-1, accumulated in
        that order with plain float64 additions.
        """
        _require_matrix(other, "multiply")
        if self.width != other.height:
            logger.debug("multiply: %s x %s", self.shape, other.shape)
            raise DimensionMismatchError("multiply", self.shape, other.shape)
        left, right = self._values, other._values
        result = _zeros(self.height, other.width)
        for k in range(self.width):
            result += np.multiply.outer(left[:, k], right[k, :])
        return Matrix._from_array(result)

    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum of two matrices of identical shape."""
        _require_matrix(other, "add")
        if self.shape != other.shape:
            logger.debug("add: %s + %s", self.shape, other.shape)
            raise DimensionMismatchError("add", self.shape, other.shape)
        result = _zeros(self.height, self.width)
        np.add(self._values, other._values, out=result)
        return Matrix._from_array(result)

    def transpose(self) -> Matrix:
        """Return a new (width x height) matrix with rows and columns swapped."""
        return Matrix._from_array(self._values.T.copy(order="C"))

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def to_list(self) -> list[list[float]]:
        """Fresh nested list of Python floats."""
        return self._values.tolist()

    def to_dataframe(self) -> pd.DataFrame:
        """Fresh DataFrame with a default integer index and columns."""
        return pd.DataFrame(self._values.copy())

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._values, other._values)
        )

    def __hash__(self) -> int:
        # -0.0 == 0.0, so normalize signed zeros before hashing the bytes
        return hash((self.shape, (self._values + 0.0).tobytes()))

    def __str__(self) -> str:
        return str(self._values.tolist())

    def __repr__(self) -> str:
        return f"Matrix({self._values.tolist()!r})"


def _require_matrix(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise TypeError(
            f"{operation} expects a Matrix, got {type(other).__name__}."
        )
