"""
Pytest configuration and shared fixtures for tilematrix tests.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import tilematrix
from tilematrix import Matrix


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_config():
    """Reset global configuration around every test."""
    tilematrix.reset_config()
    yield
    tilematrix.reset_config()


@pytest.fixture
def square_matrix():
    """Create a 3x3 integer matrix.

    Matrix:
    | 1     2  0 |
    | 4  -100  0 |
    | 7     8  9 |
    """
    return Matrix.from_rows([
        [1, 2, 0],
        [4, -100, 0],
        [7, 8, 9],
    ])


@pytest.fixture
def wide_matrix():
    """Create a 2x3 integer matrix.

    Matrix:
    | 1  2  3 |
    | 4  5  6 |
    """
    return Matrix.from_rows([
        [1, 2, 3],
        [4, 5, 6],
    ])


@pytest.fixture
def ragged_rows():
    """Rows of unequal length."""
    return [[1, 2, 3], [4, 5]]


@pytest.fixture
def dense_array():
    """Create a small dense numpy array for interop."""
    return np.array([
        [1.0, 0.0, 2.0, 0.0],
        [0.0, 3.0, 0.0, 4.0],
        [5.0, 0.0, 0.0, 6.0],
    ], dtype=np.float64)


# =============================================================================
# Helper Functions
# =============================================================================

def cells(matrix):
    """All (i, j, value) triples of a matrix."""
    return [
        (i, j, matrix.get(i, j))
        for i in range(matrix.rows)
        for j in range(matrix.cols)
    ]
