import numpy as np

from cvengine.datasets import (
    cubic_signal,
    make_grouped_regression,
    make_nonlinear_regression,
)
from cvengine.runtime.random.rng import RngManager


def test_nonlinear_regression_is_seeded():
    a = make_nonlinear_regression(50, seed=3)
    b = make_nonlinear_regression(50, seed=3)
    assert a.X.shape == (50, 1)
    np.testing.assert_array_equal(a.y, b.y)


def test_noise_free_signal():
    ds = make_nonlinear_regression(20, signal="cubic", noise=0.0, sort=True, seed=0)
    assert np.all(np.diff(ds.X[:, 0]) >= 0)
    np.testing.assert_allclose(ds.y, cubic_signal(ds.X[:, 0]))


def test_grouped_regression_labels():
    ds = make_grouped_regression(n_groups=4, per_group=5, seed=1)
    assert ds.n_samples == 20
    assert sorted(set(ds.strata.tolist())) == ["g0", "g1", "g2", "g3"]


def test_child_seeds_are_stable_and_named():
    assert RngManager(1).child_seed("split") == RngManager(1).child_seed("split")
    assert RngManager(1).child_seed("split") != RngManager(1).child_seed("other")
    assert RngManager(1).child_seed("split") != RngManager(2).child_seed("split")
