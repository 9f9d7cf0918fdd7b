import numpy as np
import pytest
from sklearn.dummy import DummyRegressor

from cvengine.api import fit, predict
from cvengine.components.models.builders import PolynomialFamilyBuilder, SplineFamilyBuilder
from cvengine.contracts.model_configs import PolynomialFamilyConfig, SplineFamilyConfig
from cvengine.core.dataset import Dataset
from cvengine.errors import FitError, InvalidParameterError


def test_spline_df_one_is_training_mean(cubic_exact):
    model = fit(cubic_exact, 1)
    assert isinstance(model.estimator, DummyRegressor)
    np.testing.assert_allclose(predict(model, [[0.0], [1.0]]), cubic_exact.y.mean())


def test_spline_low_df_is_polynomial():
    x = np.linspace(0.0, 1.0, 10)
    ds = Dataset.from_arrays(x, 2.0 * x + 1.0)
    model = fit(ds, 2)
    np.testing.assert_allclose(predict(model, [[3.0]]), [7.0], atol=1e-8)


@pytest.mark.parametrize("df", [4, 7])
def test_spline_reproduces_cubic(cubic_exact, df):
    model = fit(cubic_exact, df)
    np.testing.assert_allclose(predict(model, cubic_exact.X), cubic_exact.y, atol=1e-6)


def test_fit_is_deterministic(wiggly_data):
    a = predict(fit(wiggly_data, 6), wiggly_data.X)
    b = predict(fit(wiggly_data, 6), wiggly_data.X)
    np.testing.assert_array_equal(a, b)


def test_too_few_records_for_flexibility():
    ds = Dataset.from_arrays([0.0, 1.0, 2.0], [1.0, 0.0, 2.0])
    with pytest.raises(FitError):
        fit(ds, 5)


def test_polynomial_family(cubic_exact):
    model = fit(cubic_exact, 3, family="polynomial")
    np.testing.assert_allclose(predict(model, cubic_exact.X), cubic_exact.y, atol=1e-6)
    flat = fit(cubic_exact, 0, family="polynomial")
    np.testing.assert_allclose(predict(flat, [[5.0]]), [cubic_exact.y.mean()])


def _n_coefficients(model) -> int:
    est = model.estimator
    if isinstance(est, DummyRegressor):
        return 1
    return int(est.named_steps["reg"].coef_.size) + 1


@pytest.mark.parametrize(
    "family, grid, builder",
    [
        ("spline", range(1, 8), SplineFamilyBuilder(cfg=SplineFamilyConfig())),
        ("polynomial", range(0, 5), PolynomialFamilyBuilder(cfg=PolynomialFamilyConfig())),
    ],
)
def test_coefficients_grow_with_flexibility(three_feature_data, family, grid, builder):
    counts = [_n_coefficients(fit(three_feature_data, f, family=family)) for f in grid]
    assert all(b > a for a, b in zip(counts, counts[1:]))
    assert counts == [builder.n_parameters(f, 3) for f in grid]


def test_spline_has_no_cross_terms(three_feature_data):
    # df = degree + 1 is a per-feature cubic: 3 terms per feature plus intercept
    assert _n_coefficients(fit(three_feature_data, 4)) == 10


@pytest.mark.parametrize("family, ok, too_many", [("spline", 4, 5), ("polynomial", 2, 3)])
def test_multi_feature_subset_too_small(three_feature_data, family, ok, too_many):
    small = three_feature_data.subset(range(12))
    fit(small, ok, family=family)
    with pytest.raises(FitError):
        fit(small, too_many, family=family)


def test_parameter_counts():
    spline = SplineFamilyBuilder(cfg=SplineFamilyConfig())
    assert spline.n_parameters(4, 1) == 4
    assert spline.n_parameters(4, 2) == 7
    poly = PolynomialFamilyBuilder(cfg=PolynomialFamilyConfig())
    assert poly.n_parameters(3, 1) == 4
    assert poly.n_parameters(2, 2) == 6


def test_flexibility_below_minimum():
    with pytest.raises(InvalidParameterError):
        SplineFamilyBuilder(cfg=SplineFamilyConfig()).make_estimator(0)


def test_unknown_family(cubic_exact):
    with pytest.raises(InvalidParameterError):
        fit(cubic_exact, 2, family="lasso")
