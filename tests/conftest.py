"""Shared test fixtures for dense-matrix."""

import numpy as np
import pytest

from dense_matrix import Matrix


@pytest.fixture
def m2x3():
    """2x3 matrix [[1, 2, 3], [4, 5, 6]]."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def m2x3_other():
    """Second 2x3 matrix, shape-compatible with m2x3 for addition."""
    return Matrix([[7, 8, 9], [10, 11, 12]])


@pytest.fixture
def m3x3():
    """3x3 matrix [[7, 8, 9], [10, 11, 12], [13, 14, 15]]."""
    return Matrix([[7, 8, 9], [10, 11, 12], [13, 14, 15]])


@pytest.fixture
def random_pair():
    """Two 6x4 random matrices for property-style checks."""
    rng = np.random.default_rng(42)
    return (
        Matrix(rng.standard_normal((6, 4))),
        Matrix(rng.standard_normal((6, 4))),
    )
