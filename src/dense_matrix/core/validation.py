"""Input validation that turns caller data into owned float64 storage."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd

from .errors import MalformedShapeError

logger = logging.getLogger(__name__)


def _freeze(values: np.ndarray) -> np.ndarray:
    """Return an owned, C-contiguous, read-only float64 copy of values."""
    owned = np.array(values, dtype=np.float64, order="C", copy=True)
    owned.flags.writeable = False
    return owned


def _malformed(message: str) -> MalformedShapeError:
    logger.debug("Rejected matrix input: %s", message)
    return MalformedShapeError(message)


def _is_real(value: Any) -> bool:
    return isinstance(value, (numbers.Real, np.bool_))


def _validate_array(data: np.ndarray) -> np.ndarray:
    if data.dtype.kind not in "biuf":
        raise TypeError(
            f"Matrix values must be real numbers, got an array of dtype {data.dtype}."
        )
    if data.ndim != 2:
        raise _malformed(f"Expected a 2-D array, got {data.ndim} dimension(s).")
    if data.shape[0] == 0 or data.shape[1] == 0:
        raise _malformed(
            f"Matrix must have at least one row and one column, got shape {data.shape}."
        )
    return _freeze(data)


def _as_row(row: Any, index: int) -> list:
    if isinstance(row, np.ndarray):
        if row.ndim != 1:
            raise _malformed(f"Row {index} must be one-dimensional.")
        return row.tolist()
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        raise _malformed(
            f"Row {index} must be a sequence of numbers, got {type(row).__name__}."
        )
    return list(row)


def validate_grid(data: Any) -> np.ndarray:
    """Validate a 2-D grid of real numbers and return an owned copy.

    Accepts a nested sequence (list of lists, tuple of tuples, ...) or a
    2-D numpy array. Every row must have the same, non-zero length.

    Returns a read-only float64 array of shape (height, width).
    """
    if isinstance(data, np.ndarray):
        return _validate_array(data)
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise _malformed(
            f"Expected a 2-D sequence of numbers, got {type(data).__name__}."
        )
    if len(data) == 0:
        raise _malformed("Matrix must have at least one row.")

    rows = [_as_row(row, i) for i, row in enumerate(data)]
    width = len(rows[0])
    if width == 0:
        raise _malformed("Matrix must have at least one column.")
    for i, row in enumerate(rows):
        if len(row) != width:
            raise _malformed(
                f"Row {i} has {len(row)} values but row 0 has {width}. "
                "All rows must have the same length."
            )
        for j, value in enumerate(row):
            if not _is_real(value):
                raise TypeError(
                    f"Matrix values must be real numbers. "
                    f"Found {type(value).__name__} at ({i}, {j})."
                )
    return _freeze(np.array(rows, dtype=np.float64))


def validate_dataframe_matrix(data: Any) -> np.ndarray:
    """Validate that data is a non-empty numeric DataFrame.

    Row and column labels are ignored; only the values are kept.
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(data).__name__}."
        )
    if data.empty:
        raise _malformed(
            "DataFrame is empty. Provide at least one row and one column."
        )
    numeric_df = data.select_dtypes(include=[np.number, "bool"])
    if numeric_df.shape[1] != data.shape[1]:
        non_numeric = [c for c in data.columns if c not in numeric_df.columns]
        raise TypeError(
            f"All columns must be numeric. Non-numeric columns: {non_numeric[:5]}"
            + (f" (and {len(non_numeric) - 5} more)" if len(non_numeric) > 5 else "")
        )
    if any(dtype.kind == "c" for dtype in data.dtypes):
        raise TypeError("Complex-valued columns are not supported.")
    return _freeze(data.to_numpy(dtype=np.float64))
