import json

import numpy as np
import pandas as pd
import pytest

from cvengine.api import run_cross_validation
from cvengine.contracts.eval_configs import EvalModel
from cvengine.contracts.model_configs import PolynomialFamilyConfig
from cvengine.contracts.run_config import CVRunConfig, DataModel
from cvengine.contracts.split_configs import SplitHoldoutModel, SplitKFoldModel
from cvengine.errors import InvalidParameterError


def test_result_contract(wiggly_data):
    cfg = CVRunConfig(
        split=SplitKFoldModel(n_splits=5),
        eval=EvalModel(seed=42, return_train_error=True),
        flexibility_grid=list(range(1, 9)),
    )
    result = run_cross_validation(cfg, dataset=wiggly_data)

    assert result.scheme == "kfold"
    assert result.family == "spline"
    assert result.flexibility_name == "df"
    assert result.n_folds == 5
    assert result.n_samples == 60
    assert len(result.fold_errors) == 5
    assert len(result.train_errors[0]) == 8
    assert len(result.train_cv_error) == 8
    assert all(v is not None for v in result.train_cv_error)
    assert result.selected_index <= result.best_index
    assert result.best_flexibility == result.flexibility_grid[result.best_index]
    assert result.cv_error[result.best_index] == pytest.approx(min(result.cv_error))

    payload = json.loads(result.model_dump_json())
    assert payload["seed"] == 42


def test_same_seed_same_result(wiggly_data):
    cfg = CVRunConfig(eval=EvalModel(seed=7), flexibility_grid=[1, 3, 5])
    a = run_cross_validation(cfg, dataset=wiggly_data)
    b = run_cross_validation(cfg, dataset=wiggly_data)
    assert a.fold_errors == b.fold_errors


def test_single_holdout_fold_notes(wiggly_data):
    cfg = CVRunConfig(
        split=SplitHoldoutModel(train_frac=0.75),
        model=PolynomialFamilyConfig(),
        eval=EvalModel(seed=0, one_se_rule=False),
        flexibility_grid=[0, 1, 2, 3],
    )
    result = run_cross_validation(cfg, dataset=wiggly_data)
    assert result.n_folds == 1
    assert result.cv_se == [0.0, 0.0, 0.0, 0.0]
    assert result.selected_index == result.best_index
    assert result.flexibility_name == "degree"
    assert any("Single fold" in n for n in result.notes)


def test_loads_table_from_config(tmp_path):
    rng = np.random.default_rng(0)
    x = rng.uniform(-3, 3, size=40)
    frame = pd.DataFrame({"x": x, "y": x**2 + rng.normal(0, 0.1, size=40)})
    path = tmp_path / "data.csv"
    frame.to_csv(path, index=False)

    cfg = CVRunConfig(
        data=DataModel(path=str(path), target="y"),
        split=SplitKFoldModel(n_splits=4),
        eval=EvalModel(seed=1),
        flexibility_grid=[1, 2, 3, 4],
    )
    result = run_cross_validation(cfg)
    assert result.n_samples == 40
    assert result.best_flexibility >= 3


def test_config_without_data_source():
    with pytest.raises(InvalidParameterError):
        run_cross_validation(CVRunConfig())
