from __future__ import annotations

"""Basis-expansion regression families.

Each builder maps one integer flexibility to an unfitted sklearn estimator.
Nothing here draws random numbers, so a fit is a pure function of the
training subset and the flexibility value.
"""

from dataclasses import dataclass

from scipy.special import comb
from sklearn.dummy import DummyRegressor
from sklearn.linear_model import LinearRegression
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import PolynomialFeatures, SplineTransformer

from cvengine.contracts.model_configs import PolynomialFamilyConfig, SplineFamilyConfig
from cvengine.components.interfaces import ModelBuilder

from .common import _check_flexibility, _filtered_kwargs


def _polynomial_pipeline(degree: int, *, fit_intercept: bool = True) -> Pipeline:
    return Pipeline(
        [
            ("basis", PolynomialFeatures(degree=degree, include_bias=False)),
            ("reg", LinearRegression(fit_intercept=fit_intercept)),
        ]
    )


@dataclass
class SplineFamilyBuilder(ModelBuilder):
    """Additive regression spline with ``df`` degrees of freedom per feature.

    - df == 1: constant (training mean)
    - 2 <= df <= degree + 1: per-feature polynomial of degree df - 1, i.e. a
      B-spline of that degree with no interior knots
    - df > degree + 1: B-spline basis with df - degree + 1 knots

    Features are expanded independently (no cross terms), so every df costs
    exactly ``n_features`` more coefficients than df - 1.
    """

    cfg: SplineFamilyConfig
    min_flexibility: int = 1

    def make_estimator(self, flexibility: int):
        df = _check_flexibility(flexibility, self.min_flexibility, name="df")
        degree = int(self.cfg.degree)

        if df == 1:
            return DummyRegressor(strategy="mean")

        kw = _filtered_kwargs(SplineTransformer, self.cfg)
        if df <= degree + 1:
            kw["degree"] = df - 1
            kw["n_knots"] = 2
        else:
            kw["n_knots"] = df - degree + 1
        kw["include_bias"] = False
        return Pipeline(
            [
                ("basis", SplineTransformer(**kw)),
                ("reg", LinearRegression()),
            ]
        )

    def n_parameters(self, flexibility: int, n_features: int) -> int:
        # additive across features; the intercept is shared
        return 1 + int(n_features) * (int(flexibility) - 1)


@dataclass
class PolynomialFamilyBuilder(ModelBuilder):
    cfg: PolynomialFamilyConfig
    min_flexibility: int = 0

    def make_estimator(self, flexibility: int):
        degree = _check_flexibility(flexibility, self.min_flexibility, name="degree")
        if degree == 0:
            return DummyRegressor(strategy="mean")

        kw = _filtered_kwargs(LinearRegression, self.cfg)
        return _polynomial_pipeline(degree, **kw)

    def n_parameters(self, flexibility: int, n_features: int) -> int:
        # all monomials up to `degree`, constant term included
        return int(comb(int(n_features) + int(flexibility), int(flexibility), exact=True))
