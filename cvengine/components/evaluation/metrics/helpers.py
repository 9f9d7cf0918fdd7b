from __future__ import annotations

from typing import Any

import numpy as np

from cvengine.core.shapes import as_1d
from cvengine.errors import InvalidInputError


def _as_1d(a: Any, name: str) -> np.ndarray:
    return as_1d(a, name=name).astype(float)


def _check_len(y_true: np.ndarray, y_pred: np.ndarray) -> None:
    if y_true.shape[0] != y_pred.shape[0]:
        raise InvalidInputError(
            f"Length mismatch: y_true({y_true.shape[0]}) vs y_pred({y_pred.shape[0]})."
        )


def _check_non_empty(y_true: np.ndarray) -> None:
    # sklearn would return NaN (or raise deep inside) on empty input
    if y_true.shape[0] == 0:
        raise InvalidInputError("Cannot score an empty set of predictions.")
