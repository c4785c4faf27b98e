"""dense-matrix: a small immutable float64 matrix value type."""

from ._version import __version__
from .core.errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    MalformedShapeError,
    MatrixError,
)
from .core.matrix import Matrix

__all__ = [
    "__version__",
    "Matrix",
    "MatrixError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "MalformedShapeError",
]
