from __future__ import annotations

from typing import Any, Dict, Optional

from cvengine.components.evaluation.error_matrix import ErrorMatrix
from cvengine.contracts.model_configs import ModelFamilyConfig, get_flexibility_name
from cvengine.contracts.results.common import sanitize_floats
from cvengine.contracts.results.cv import CVResult


def build_cv_result(
    matrix: ErrorMatrix,
    *,
    scheme: str,
    model_cfg: ModelFamilyConfig,
    n_samples: int,
    seed: Optional[int] = None,
    one_se_rule: bool = True,
) -> CVResult:
    """Aggregate an :class:`ErrorMatrix` into the :class:`CVResult` contract.

    Raises ``InsufficientDataError`` (from the matrix) when a flexibility
    column has no valid fold.
    """
    grid = [int(v) for v in matrix.flexibility_grid.tolist()]

    cv_error = matrix.cv_error()
    se = matrix.standard_error()
    train_cv = matrix.train_cv_error()
    best = matrix.best_index()
    selected = matrix.one_se_index() if one_se_rule else best

    notes: list[str] = []
    if matrix.n_folds == 1:
        notes.append("Single fold: standard errors are reported as 0 and the one-SE rule reduces to the minimum.")
    if matrix.invalid:
        notes.append(f"{len(matrix.invalid)} of {matrix.errors.size} cells could not be scored and were excluded.")
    if selected != best:
        notes.append(
            f"One-SE rule chose {grid[selected]} over the minimum at {grid[best]}."
        )

    payload: Dict[str, Any] = {
        "scheme": scheme,
        "metric_name": matrix.metric,
        "family": model_cfg.family,
        "flexibility_name": get_flexibility_name(model_cfg),
        "seed": seed,
        "n_samples": int(n_samples),
        "n_folds": matrix.n_folds,
        "flexibility_grid": grid,
        "fold_errors": [sanitize_floats(row) for row in matrix.errors.tolist()],
        "train_errors": (
            None
            if matrix.train_errors is None
            else [sanitize_floats(row) for row in matrix.train_errors.tolist()]
        ),
        "train_cv_error": (
            None if train_cv is None else sanitize_floats(train_cv.tolist())
        ),
        "invalid_cells": [
            {"fold": fold_id, "flexibility": flex, "reason": reason}
            for fold_id, flex, reason in matrix.invalid_cells()
        ],
        "cv_error": sanitize_floats(cv_error.tolist()),
        "cv_se": sanitize_floats(se.tolist()),
        "n_valid": [int(v) for v in matrix.n_valid.tolist()],
        "best_index": best,
        "best_flexibility": grid[best],
        "selected_index": selected,
        "selected_flexibility": grid[selected],
        "notes": notes,
    }
    return CVResult.model_validate(payload)
