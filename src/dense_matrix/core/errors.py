"""Error types raised by Matrix construction and arithmetic."""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix errors."""


class MalformedShapeError(MatrixError, ValueError):
    """Input grid is empty, zero-width, ragged, or not two-dimensional."""


class DimensionMismatchError(MatrixError, ValueError):
    """Two matrices have incompatible shapes for the requested operation."""

    def __init__(
        self,
        operation: str,
        left_shape: tuple[int, int],
        right_shape: tuple[int, int],
    ) -> None:
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
        super().__init__(
            f"Dimension mismatch in {operation}: "
            f"{left_shape[0]}x{left_shape[1]} and {right_shape[0]}x{right_shape[1]}."
        )


class IndexOutOfBoundsError(MatrixError, IndexError):
    """Element access outside [0, height) x [0, width)."""

    def __init__(self, row: int, col: int, shape: tuple[int, int]) -> None:
        self.row = row
        self.col = col
        self.shape = shape
        super().__init__(
            f"Index ({row}, {col}) is out of bounds for a "
            f"{shape[0]}x{shape[1]} matrix."
        )
