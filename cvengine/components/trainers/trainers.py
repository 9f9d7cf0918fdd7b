from __future__ import annotations
from dataclasses import dataclass
from typing import Any

import numpy as np

from cvengine.components.interfaces import ModelBuilder, Trainer
from cvengine.components.trainers.fitting import fit_model
from cvengine.core.dataset import Dataset
from cvengine.core.shapes import coerce_X
from cvengine.errors import FitError


@dataclass(frozen=True)
class FittedModel:
    """A family member fitted on one training subset.

    Bound to a single (training subset, flexibility) pair; the orchestrator
    scores it and drops it.
    """

    estimator: Any
    flexibility: int
    n_train: int

    def predict(self, X: Any) -> np.ndarray:
        return np.asarray(self.estimator.predict(coerce_X(X)), dtype=float).ravel()


@dataclass
class FamilyTrainer(Trainer):
    """Fits members of one model family; no RNG or state."""

    builder: ModelBuilder

    def fit(self, train: Dataset, flexibility: int) -> FittedModel:
        estimator = self.builder.make_estimator(flexibility)
        n_params = self.builder.n_parameters(flexibility, train.n_features)
        fitted = fit_model(estimator, train.X, train.y, n_parameters=n_params)
        return FittedModel(estimator=fitted, flexibility=int(flexibility), n_train=train.n_samples)

    def predict(self, model: FittedModel, X: np.ndarray) -> np.ndarray:
        try:
            return model.predict(X)
        except ValueError as e:
            raise FitError(f"predict failed for flexibility={model.flexibility}: {e}") from e
