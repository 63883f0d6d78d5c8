"""Pytest setup: put v1code/ on the import path and share the simulated datasets."""

import os
import sys

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")


def _add_v1code_to_path() -> None:
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    v1code = os.path.join(root, "v1code")
    if v1code not in sys.path:
        sys.path.insert(0, v1code)


_add_v1code_to_path()


@pytest.fixture
def sparse_data():
    """100×3 standard-normal X with y = 2·x1 − x2 + noise (x3 has no effect)."""
    rs = np.random.RandomState(42)
    X = rs.standard_normal((100, 3))
    y = 2.0 * X[:, 0] - 1.0 * X[:, 1] + 0.5 * rs.standard_normal(100)
    return X, y


@pytest.fixture
def scaled_data():
    """Predictors on very different scales with a non-zero mean, plus an intercept."""
    rs = np.random.RandomState(7)
    X = rs.standard_normal((80, 4)) * np.array([1.0, 10.0, 0.1, 3.0]) + np.array([5.0, -2.0, 0.0, 1.0])
    y = 3.0 + X @ np.array([1.5, 0.2, -4.0, 0.0]) + 0.3 * rs.standard_normal(80)
    return X, y
