# scripts/run_cv_local.py
from __future__ import annotations

import logging

import matplotlib.pyplot as plt

from cvengine.api import run_cross_validation
from cvengine.contracts.eval_configs import EvalModel
from cvengine.contracts.model_configs import SplineFamilyConfig
from cvengine.contracts.run_config import CVRunConfig, DataModel
from cvengine.contracts.split_configs import SplitKFoldModel
from cvengine.datasets import make_nonlinear_regression
from visualizations.general.plot_cv_curves import plot_cv_curve

# ==== EDIT THESE AS YOU LIKE ==================================================
# Example A: delimited table on disk
# DATA = DataModel(path=r"./data/sample.csv", target="y", stratum=None)
# DATASET = None

# Example B: simulated data (DataModel unused)
DATA = DataModel()
DATASET = make_nonlinear_regression(100, signal="wiggly", noise=3.0, seed=0)

SPLIT = SplitKFoldModel(
    mode="kfold",
    n_splits=10,
    shuffle=True,
)
# Other schemes:
#   SplitHoldoutModel(train_frac=0.7, n_repeats=10)
#   SplitLeaveOneOutModel()
#   SplitLeavePOutModel(p=2, max_folds=5000)
#   SplitStratifiedKFoldModel(n_splits=5, grouped=True)
#   SplitRollingModel(n_chunks=10)

MODEL = SplineFamilyConfig(degree=3, knots="quantile", extrapolation="linear")

EVAL = EvalModel(
    metric="mse",
    seed=42,
    n_jobs=1,
    return_train_error=True,
)

GRID = list(range(1, 21))
PLOT_PATH = "cv_curve.png"
# ============================================================================


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = CVRunConfig(data=DATA, split=SPLIT, model=MODEL, eval=EVAL, flexibility_grid=GRID)
    result = run_cross_validation(cfg, dataset=DATASET)

    print("\n=== CV RESULT ===")
    print(f"Scheme: {result.scheme} ({result.n_folds} folds, {result.n_samples} records)")
    for flex, err, se in zip(result.flexibility_grid, result.cv_error, result.cv_se):
        print(f"  {result.flexibility_name}={flex:>3}  {result.metric_name}={err:.4f} ± {se:.4f}")
    print(f"Minimum at {result.flexibility_name}={result.best_flexibility}")
    print(f"One-SE choice: {result.flexibility_name}={result.selected_flexibility}")
    if result.notes:
        print("Notes:")
        for n in result.notes:
            print(f"- {n}")

    ax = plot_cv_curve(result, show_folds=True)
    ax.figure.tight_layout()
    ax.figure.savefig(PLOT_PATH)
    plt.close(ax.figure)
    print(f"Saved {PLOT_PATH}")


if __name__ == "__main__":
    main()
