"""Public engine API.

This module is the **stable public surface** for invoking use-cases.

Prefer importing from here instead of reaching into internal subpackages:

    from cvengine.api import Dataset, evaluate, build_folds

The underlying implementations live under :mod:`cvengine.use_cases`.
"""

from __future__ import annotations

import numpy as np

from cvengine.use_cases.facade import build_folds, evaluate, run_cross_validation

# Non-use-case helpers that are still part of the stable public surface.
from cvengine.components.evaluation.error_matrix import ErrorMatrix
from cvengine.components.evaluation.scoring import list_losses, score
from cvengine.components.evaluation.selection import min_error_index, one_standard_error_index
from cvengine.components.splitters.types import Fold
from cvengine.components.trainers.trainers import FittedModel
from cvengine.core.dataset import Dataset
from cvengine.core.progress import ProgressCallback
from cvengine.factories.model_factory import family_config_from_name, make_trainer
from cvengine.io.readers.tabular_reader import load_dataset_table


def fit(train: Dataset, flexibility: int, *, family="spline") -> FittedModel:
    """Fit one member of ``family`` on exactly ``train``."""
    return make_trainer(family_config_from_name(family)).fit(train, flexibility)


def predict(model: FittedModel, X) -> np.ndarray:
    return model.predict(X)


__all__ = [
    "build_folds",
    "evaluate",
    "run_cross_validation",
    "fit",
    "predict",
    "score",
    "list_losses",
    "min_error_index",
    "one_standard_error_index",
    "ErrorMatrix",
    "Fold",
    "FittedModel",
    "Dataset",
    "ProgressCallback",
    "load_dataset_table",
]
