from __future__ import annotations
from typing import Any, Iterator, Protocol

import numpy as np

from cvengine.components.splitters.types import Fold
from cvengine.core.dataset import Dataset


class DataLoader(Protocol):
    def load(self) -> Dataset:
        ...


class Splitter(Protocol):
    def split(self, dataset: Dataset) -> Iterator[Fold]:
        """Yield the folds of one partitioning scheme.

        Implementations must yield :class:`cvengine.components.splitters.types.Fold`
        and raise configuration errors no later than the first ``next()``.
        """
        ...


class ModelBuilder(Protocol):
    """One model family indexed by an integer flexibility (degrees of freedom)."""

    min_flexibility: int

    def make_estimator(self, flexibility: int) -> Any:
        """Return a configured, unfitted sklearn-style regressor."""
        ...

    def n_parameters(self, flexibility: int, n_features: int) -> int:
        """Number of fitted coefficients, intercept included."""
        ...


class Trainer(Protocol):
    def fit(self, train: Dataset, flexibility: int) -> Any:
        """Fit one family member on exactly ``train``; returns a fitted model."""
        ...

    def predict(self, model: Any, X: np.ndarray) -> np.ndarray:
        ...


class Evaluator(Protocol):
    def score(self, y_pred: np.ndarray, y_true: np.ndarray) -> float:
        """Return a scalar loss (lower is better)."""
        ...
