from __future__ import annotations

"""Cross-validation orchestration (engine use-case).

This package splits the evaluation loop into small units:

- cells: fit/predict/score for one (fold, flexibility) pair
- run: partition, fan cells out, assemble the error matrix
- result: aggregates + selection -> JSON-friendly result contract

Correctness requirement
-----------------------
Every model is fitted on exactly one fold's training rows and scored on that
fold's test rows. Aggregates are computed only after every cell has joined.
"""

import logging
import warnings
from typing import Any, List, Optional, Sequence, Union

from joblib import Parallel, delayed
from pydantic import BaseModel

from cvengine.components.evaluation.error_matrix import ErrorMatrix
from cvengine.components.interfaces import Evaluator, Trainer
from cvengine.components.splitters.types import Fold
from cvengine.contracts.results.cv import CVResult
from cvengine.contracts.run_config import CVRunConfig
from cvengine.core.dataset import Dataset
from cvengine.core.progress import ProgressCallback
from cvengine.factories.data_loading_factory import make_data_loader
from cvengine.factories.eval_factory import eval_config_from_options, make_evaluator
from cvengine.factories.model_factory import family_config_from_name, make_trainer
from cvengine.use_cases._deps import resolve_grid
from cvengine.use_cases.partition import build_folds

from .cells import run_cell
from .result import build_cv_result
from .types import CellOutcome

logger = logging.getLogger(__name__)


def run_cells(
    *,
    dataset: Dataset,
    folds: Sequence[Fold],
    grid: Sequence[int],
    trainer: Trainer,
    evaluator: Evaluator,
    metric: str,
    n_jobs: int = 1,
    with_train_error: bool = False,
    progress: Optional[ProgressCallback] = None,
) -> ErrorMatrix:
    """Fill a folds x grid :class:`ErrorMatrix`, one independent unit per cell."""

    matrix = ErrorMatrix.empty(
        grid,
        [f.fold_id for f in folds],
        metric=metric,
        with_train=with_train_error,
    )
    jobs = [
        dict(
            trainer=trainer,
            evaluator=evaluator,
            dataset=dataset,
            fold=fold,
            row=row,
            col=col,
            flexibility=flex,
            with_train_error=with_train_error,
        )
        for row, fold in enumerate(folds)
        for col, flex in enumerate(grid)
    ]

    if progress is not None:
        progress.init(total=len(jobs), label="cross-validation")

    outcomes: List[CellOutcome]
    if n_jobs == 1:
        outcomes = []
        for i, job in enumerate(jobs, start=1):
            outcomes.append(run_cell(**job))
            if progress is not None:
                progress.update(current=i)
    else:
        outcomes = Parallel(n_jobs=n_jobs)(delayed(run_cell)(**job) for job in jobs)
        if progress is not None:
            progress.update(current=len(jobs))

    # written only after every unit has joined; each outcome owns one cell
    for out in outcomes:
        matrix.errors[out.row, out.col] = out.error
        if matrix.train_errors is not None and out.train_error is not None:
            matrix.train_errors[out.row, out.col] = out.train_error
        if not out.valid:
            matrix.invalid[(out.row, out.col)] = str(out.reason)

    if progress is not None:
        progress.finalize(label="cross-validation")

    return matrix


def evaluate(
    dataset: Dataset,
    scheme: Union[str, BaseModel],
    flexibility_grid: Sequence[int],
    k: Optional[int] = None,
    seed: Optional[int] = None,
    *,
    family: Union[str, BaseModel] = "spline",
    metric: str = "mse",
    n_jobs: int = 1,
    return_train_error: bool = False,
    progress: Optional[ProgressCallback] = None,
    **split_options: Any,
) -> ErrorMatrix:
    """Cross-validate a model family over ``flexibility_grid``.

    Parameters
    ----------
    dataset : Dataset
    scheme : str or split config
        "holdout", "kfold", "loo", "lpo", "stratified_kfold", "rolling", or a
        config model from :mod:`cvengine.contracts.split_configs`.
    flexibility_grid : sequence of int
        Strictly ascending; reported in this order.
    k : int, optional
        Folds for k-fold variants, ``p`` for leave-p-out, chunks for rolling.
    seed : int, optional
        Drives the partition only (fits are deterministic). ``None`` partitions
        non-deterministically.
    family : str or family config
        Model family key ("spline", "polynomial") or config.
    metric : str
        Loss name; see :func:`cvengine.components.evaluation.scoring.list_losses`.
    n_jobs : int
        joblib workers for the (fold, flexibility) units.
    return_train_error : bool
        Also record each model's loss on its own training rows.
    **split_options
        Extra split config fields (``train_frac``, ``grouped``, ``max_folds``, ...).

    Returns
    -------
    ErrorMatrix
        Raw folds x flexibility losses; aggregates and selection are methods.

    Raises
    ------
    InvalidParameterError, ResourceLimitExceededError
        Bad scheme/grid/family parameters; nothing is fitted.
    InsufficientDataError
        The scheme produced no folds.
    """
    family_cfg = family_config_from_name(family)
    trainer = make_trainer(family_cfg)
    grid = resolve_grid(flexibility_grid, minimum=trainer.builder.min_flexibility)
    evaluator = make_evaluator(eval_config_from_options(metric=metric, seed=seed, n_jobs=n_jobs))

    folds = build_folds(dataset, scheme, k, seed=seed, **split_options)

    logger.info(
        "Evaluating %s family over %d flexibility values x %d folds (%d records)",
        family_cfg.family,
        len(grid),
        len(folds),
        dataset.n_samples,
    )

    matrix = run_cells(
        dataset=dataset,
        folds=folds,
        grid=grid,
        trainer=trainer,
        evaluator=evaluator,
        metric=metric,
        n_jobs=n_jobs,
        with_train_error=return_train_error,
        progress=progress,
    )

    if matrix.invalid:
        warnings.warn(
            f"{len(matrix.invalid)} of {matrix.errors.size} (fold, flexibility) cells could not be scored "
            "and are excluded from the aggregates; see ErrorMatrix.invalid_cells().",
            UserWarning,
        )
    return matrix


def run_cross_validation(
    run_config: CVRunConfig,
    *,
    dataset: Optional[Dataset] = None,
    progress: Optional[ProgressCallback] = None,
) -> CVResult:
    """Config-driven evaluation returning a typed :class:`CVResult`.

    Loads the dataset from ``run_config.data`` unless one is passed in.
    """
    cfg = run_config

    # --- Load data ---------------------------------------------------------
    if dataset is None:
        dataset = make_data_loader(cfg.data).load()

    # --- Evaluate ----------------------------------------------------------
    matrix = evaluate(
        dataset,
        cfg.split,
        cfg.flexibility_grid,
        seed=cfg.eval.seed,
        family=cfg.model,
        metric=cfg.eval.metric,
        n_jobs=cfg.eval.n_jobs,
        return_train_error=cfg.eval.return_train_error,
        progress=progress,
    )

    # --- Aggregate + select ------------------------------------------------
    result = build_cv_result(
        matrix,
        scheme=cfg.split.mode,
        model_cfg=cfg.model,
        n_samples=dataset.n_samples,
        seed=cfg.eval.seed,
        one_se_rule=cfg.eval.one_se_rule,
    )
    logger.info(
        "CV %s: best %s=%d, selected %s=%d",
        result.scheme,
        result.flexibility_name,
        result.best_flexibility,
        result.flexibility_name,
        result.selected_flexibility,
    )
    return result
