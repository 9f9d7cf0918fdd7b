from __future__ import annotations

"""Model selection over a cross-validation error curve."""

from typing import Any

import numpy as np

from cvengine.errors import InvalidInputError


def _curve(values: Any, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float).ravel()
    if arr.size == 0:
        raise InvalidInputError(f"{name} is empty.")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} contains non-finite values: {arr.tolist()}")
    return arr


def min_error_index(cv_error: Any) -> int:
    """Index of the smallest CV error; ties go to the simpler (lower) index."""
    return int(np.argmin(_curve(cv_error, "cv_error")))


def one_standard_error_index(cv_error: Any, se: Any) -> int:
    """Least-complex index whose error is within one SE of the minimum.

    ``cv_error`` and ``se`` must be ordered from least to most flexible.
    """
    err = _curve(cv_error, "cv_error")
    se_arr = _curve(se, "se")
    if err.shape != se_arr.shape:
        raise InvalidInputError(
            f"cv_error and se length mismatch: {err.shape[0]} vs {se_arr.shape[0]}."
        )

    best = int(np.argmin(err))
    threshold = err[best] + se_arr[best]
    return int(np.flatnonzero(err <= threshold)[0])
