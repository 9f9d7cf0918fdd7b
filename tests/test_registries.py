import pytest

from cvengine.contracts.split_configs import SplitKFoldModel, SplitLeavePOutModel
from cvengine.errors import InvalidParameterError
from cvengine.factories.eval_factory import eval_config_from_options
from cvengine.factories.model_factory import family_config_from_name
from cvengine.factories.split_factory import split_config_from_scheme
from cvengine.registries.base import Registry
from cvengine.registries.models import list_model_families
from cvengine.registries.splitters import list_split_modes


def test_builtins_are_registered():
    assert list_split_modes() == sorted(
        ["holdout", "kfold", "loo", "lpo", "stratified_kfold", "rolling"]
    )
    assert list_model_families() == ["polynomial", "spline"]


def test_registry_lookup_and_duplicates():
    reg = Registry(_name="thing")
    reg.register("a")(len)
    assert reg.get("a") is len
    assert reg.try_get("b") is None
    with pytest.raises(KeyError):
        reg.get("b")
    with pytest.raises(InvalidParameterError):
        reg.require("b")
    with pytest.raises(KeyError):
        reg.register("a")(abs)


def test_k_fills_the_mode_specific_field():
    assert split_config_from_scheme("kfold", 7).n_splits == 7
    assert split_config_from_scheme("stratified_kfold", 3).n_splits == 3
    assert split_config_from_scheme("lpo", 3).p == 3
    assert split_config_from_scheme("rolling", 4).n_chunks == 4
    holdout = split_config_from_scheme("holdout", 9, train_frac=0.8)
    assert holdout.train_frac == 0.8


def test_config_objects_accept_overrides():
    cfg = split_config_from_scheme(SplitKFoldModel(n_splits=3, shuffle=False), 6)
    assert cfg.n_splits == 6
    assert cfg.shuffle is False
    lpo = split_config_from_scheme(SplitLeavePOutModel(), max_folds=20)
    assert lpo.max_folds == 20


def test_invalid_options():
    with pytest.raises(InvalidParameterError):
        split_config_from_scheme("kfold", shuffle="maybe")
    with pytest.raises(InvalidParameterError):
        family_config_from_name("spline", degree="cubic")
    with pytest.raises(InvalidParameterError):
        eval_config_from_options(n_jobs=0)
    assert eval_config_from_options(n_jobs=-1).n_jobs == -1
