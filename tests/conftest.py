import os

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from cvengine.core.dataset import Dataset
from cvengine.datasets import make_grouped_regression, make_nonlinear_regression


@pytest.fixture
def wiggly_data() -> Dataset:
    return make_nonlinear_regression(60, signal="wiggly", noise=2.0, seed=7)


@pytest.fixture
def ordered_data() -> Dataset:
    return make_nonlinear_regression(12, signal="cubic", noise=1.0, sort=True, seed=3)


@pytest.fixture
def grouped_data() -> Dataset:
    return make_grouped_regression(n_groups=6, per_group=4, seed=0)


@pytest.fixture
def cubic_exact() -> Dataset:
    x = np.linspace(-2.0, 2.0, 25)
    y = 0.5 * x**3 - x**2 + 2.0 * x - 1.0
    return Dataset.from_arrays(x, y)


@pytest.fixture
def three_feature_data() -> Dataset:
    rng = np.random.default_rng(11)
    X = rng.normal(size=(60, 3))
    y = np.sin(X[:, 0]) + X[:, 1] ** 2 - 0.5 * X[:, 2] + rng.normal(0.0, 0.2, size=60)
    return Dataset.from_arrays(X, y)
