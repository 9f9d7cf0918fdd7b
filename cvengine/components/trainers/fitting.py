from __future__ import annotations

from typing import Any

import numpy as np

from cvengine.errors import FitError


def fit_model(
    model: Any,
    X_train: np.ndarray,
    y_train: np.ndarray,
    *,
    n_parameters: int = 1,
) -> Any:
    """
    Fit a scikit-learn–style estimator on training data.

    Parameters
    ----------
    model : Any
        Estimator exposing `fit(X, y)`.
    X_train : array-like of shape (n_samples, n_features)
    y_train : array-like of shape (n_samples,)
    n_parameters : int
        Coefficients the model estimates (intercept included). A subset with
        fewer records than this is degenerate and is refused.

    Returns
    -------
    model : Any
        The same estimator, after fitting (standard sklearn behavior).

    Raises
    ------
    AttributeError
        If `model` does not have a `fit` method.
    FitError
        If the subset is degenerate or the estimator rejects it.
    """
    if not hasattr(model, "fit"):
        raise AttributeError("`model` has no `.fit(...)` method.")

    X_train = np.asarray(X_train)
    y_train = np.asarray(y_train).ravel()

    if X_train.ndim != 2:
        raise FitError(f"X_train must be 2D; got {X_train.shape}.")
    if X_train.shape[0] != y_train.shape[0]:
        raise FitError(
            f"X_train and y_train length mismatch: {X_train.shape[0]} vs {y_train.shape[0]}."
        )
    if X_train.shape[0] < int(n_parameters):
        raise FitError(
            f"{X_train.shape[0]} training records cannot determine {n_parameters} parameters."
        )

    try:
        model.fit(X_train, y_train)
    except (ValueError, np.linalg.LinAlgError) as e:
        raise FitError(f"{type(model).__name__} fit failed: {e}") from e

    return model
