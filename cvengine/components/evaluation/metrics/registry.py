from __future__ import annotations

from typing import Any

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, median_absolute_error

from cvengine.errors import InvalidParameterError

from .helpers import _as_1d, _check_len, _check_non_empty


# every entry is a loss: lower is better
_LOSSES = {
    "mse": lambda y, yhat: mean_squared_error(y, yhat),
    "rmse": lambda y, yhat: np.sqrt(mean_squared_error(y, yhat)),
    "mae": lambda y, yhat: mean_absolute_error(y, yhat),
    "median_ae": lambda y, yhat: median_absolute_error(y, yhat),
}


def list_losses() -> list[str]:
    return sorted(_LOSSES)


def score(
    y_pred: Any,
    y_true: Any,
    *,
    metric: str = "mse",
) -> float:
    """Loss between predictions and held-out targets (default: mean squared error)."""
    if metric not in _LOSSES:
        raise InvalidParameterError(
            f"Unknown loss '{metric}'. Supported: {list_losses()}"
        )

    y_true = _as_1d(y_true, "y_true")
    y_pred = _as_1d(y_pred, "y_pred")
    _check_len(y_true, y_pred)
    _check_non_empty(y_true)

    return float(_LOSSES[metric](y_true, y_pred))
