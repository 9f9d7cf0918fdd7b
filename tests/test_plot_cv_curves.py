import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from cvengine.api import fit, run_cross_validation
from cvengine.contracts.eval_configs import EvalModel
from cvengine.contracts.run_config import CVRunConfig
from cvengine.core.dataset import Dataset
from visualizations.general.plot_cv_curves import plot_cv_curve, plot_fits


def test_cv_curve_renders(wiggly_data):
    cfg = CVRunConfig(eval=EvalModel(seed=0, return_train_error=True), flexibility_grid=[1, 2, 4, 6])
    result = run_cross_validation(cfg, dataset=wiggly_data)
    ax = plot_cv_curve(result, show_folds=True)
    assert ax.get_xlabel() == "df"
    plt.close(ax.figure)


def test_fit_overlay(wiggly_data):
    models = [fit(wiggly_data, df) for df in (2, 8)]
    ax = plot_fits(wiggly_data, models)
    assert len(ax.get_lines()) == 2
    plt.close(ax.figure)

    with pytest.raises(ValueError):
        plot_fits(Dataset.from_arrays([[1.0, 2.0]], [1.0]), [])
