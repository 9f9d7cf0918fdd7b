from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from cvengine.contracts.results.cv import CVResult
from cvengine.core.dataset import Dataset


def _as_float(values) -> np.ndarray:
    return np.array([np.nan if v is None else float(v) for v in values], dtype=float)


def plot_cv_curve(
    result: CVResult,
    *,
    ax: Optional[plt.Axes] = None,
    show_folds: bool = False,
    show_train: bool = True,
    title: Optional[str] = None,
) -> plt.Axes:
    """
    CV error vs flexibility with ±1 SE bars, marking the minimum and the
    one-standard-error choice.

    Per-fold curves (thin grey) and the mean training error are optional overlays.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    grid = np.asarray(result.flexibility_grid, dtype=float)
    mean = _as_float(result.cv_error)
    se = _as_float(result.cv_se)

    if show_folds:
        for row in result.fold_errors:
            ax.plot(grid, _as_float(row), color="0.8", linewidth=0.8, zorder=1)

    if show_train and result.train_cv_error is not None:
        train = _as_float(result.train_cv_error)
        ax.plot(grid, train, color="tab:gray", linestyle="--", linewidth=1, label="train")

    ax.errorbar(grid, mean, yerr=se, color="tab:blue", marker="o", markersize=4, capsize=3, label="CV")
    ax.axhline(mean[result.best_index] + se[result.best_index], color="tab:blue", linestyle=":", linewidth=1)
    ax.scatter([result.best_flexibility], [mean[result.best_index]], s=80, facecolors="none",
               edgecolors="tab:red", zorder=3, label="minimum")
    ax.axvline(result.selected_flexibility, color="tab:green", linestyle="--", linewidth=1, label="one-SE choice")

    ax.set_xlabel(result.flexibility_name)
    ax.set_ylabel(result.metric_name.upper())
    ax.set_title(title or f"{result.scheme} ({result.n_folds} folds)")
    ax.legend(loc="best", fontsize="small")
    return ax


def plot_fits(
    dataset: Dataset,
    models: Sequence,
    *,
    labels: Optional[Sequence[str]] = None,
    ax: Optional[plt.Axes] = None,
    n_points: int = 300,
) -> plt.Axes:
    """Scatter a one-feature dataset and overlay fitted models' curves."""
    if dataset.n_features != 1:
        raise ValueError(f"plot_fits needs a one-feature dataset; got {dataset.n_features} features.")
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))

    x = dataset.X[:, 0]
    ax.scatter(x, dataset.y, s=8, color="0.4", label="data")

    xs = np.linspace(x.min(), x.max(), n_points)
    for i, model in enumerate(models):
        label = labels[i] if labels is not None else f"flexibility={getattr(model, 'flexibility', i)}"
        ax.plot(xs, model.predict(xs[:, None]), linewidth=1.2, label=label)

    ax.legend(loc="best", fontsize="small")
    return ax
