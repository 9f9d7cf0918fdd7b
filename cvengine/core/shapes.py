from __future__ import annotations

"""Public shape/orientation utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
- y is 1D: (n_samples,)
- strata, when present, are 1D: (n_samples,)
"""

from typing import Any, Optional, Tuple

import numpy as np

from cvengine.errors import InvalidInputError


def coerce_X(X: Any) -> np.ndarray:
    """Coerce a feature array to 2D float.

    - Accepts 1D and reshapes to (n_samples, 1)
    - Enforces 2D and non-empty.
    """

    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X[:, None]

    if X.ndim != 2:
        raise InvalidInputError(f"X must be 2D; got {X.shape}")

    n_rows, n_cols = X.shape
    if n_rows < 1 or n_cols < 1:
        raise InvalidInputError(f"X must have at least 1 sample and 1 feature; got {X.shape}")

    return X


def as_1d(v: Any, *, name: str) -> np.ndarray:
    arr = np.asarray(v)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.ravel()
    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be 1D; got {arr.shape}")
    return arr


def ensure_xy_aligned(
    X: Any,
    y: Any,
    strata: Optional[Any] = None,
) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]:
    """Strict alignment check: no transposition, no truncation.

    - X must be 2D (n_samples, n_features) (1D is promoted to one feature)
    - y must be 1D (n_samples,)
    - strata, if given, must be 1D (n_samples,)
    """

    X = coerce_X(X)
    y = as_1d(y, name="y").astype(float)

    if X.shape[0] != y.shape[0]:
        raise InvalidInputError(f"X and y length mismatch: {X.shape[0]} vs {y.shape[0]}.")

    if strata is not None:
        strata = as_1d(strata, name="strata")
        if strata.shape[0] != y.shape[0]:
            raise InvalidInputError(
                f"strata and y length mismatch: {strata.shape[0]} vs {y.shape[0]}."
            )

    return X, y, strata
