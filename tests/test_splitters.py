import numpy as np
import pytest

from cvengine.api import build_folds
from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidParameterError, ResourceLimitExceededError


def _ds(n: int, strata=None) -> Dataset:
    x = np.arange(n, dtype=float)
    return Dataset.from_arrays(x, 2.0 * x, strata=strata)


def _assert_partition(fold, n):
    assert np.intersect1d(fold.train_idx, fold.test_idx).size == 0
    assert fold.n_train > 0 and fold.n_test > 0
    assert set(fold.train_idx) | set(fold.test_idx) <= set(range(n))


def test_kfold_tests_cover_every_record_once():
    folds = build_folds(_ds(23), "kfold", 5, seed=42)
    assert len(folds) == 5
    tests = np.concatenate([f.test_idx for f in folds])
    np.testing.assert_array_equal(np.sort(tests), np.arange(23))
    assert sorted(f.n_test for f in folds) == [4, 4, 5, 5, 5]
    for f in folds:
        _assert_partition(f, 23)
        assert f.n_train + f.n_test == 23


def test_kfold_same_seed_same_folds():
    a = build_folds(_ds(30), "kfold", 5, seed=42)
    b = build_folds(_ds(30), "kfold", 5, seed=42)
    for fa, fb in zip(a, b):
        np.testing.assert_array_equal(fa.test_idx, fb.test_idx)


def test_kfold_rejects_bad_k():
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(10), "kfold", 1, seed=0)
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(10), "kfold", 11, seed=0)


def test_leave_one_out():
    folds = build_folds(_ds(7), "loo")
    assert len(folds) == 7
    assert [f.test_idx.tolist() for f in folds] == [[i] for i in range(7)]
    assert all(f.n_train == 6 for f in folds)


def test_leave_p_out_counts_and_cap():
    folds = build_folds(_ds(5), "lpo", 2)
    assert len(folds) == 10
    assert {tuple(f.test_idx) for f in folds} == {
        (i, j) for i in range(5) for j in range(i + 1, 5)
    }
    with pytest.raises(ResourceLimitExceededError):
        build_folds(_ds(5), "lpo", 2, max_folds=5)


def test_leave_p_out_rejects_p_out_of_range():
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(5), "lpo", 5)
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(5), "lpo", 0)


def test_holdout_sizes_and_repeats():
    folds = build_folds(_ds(10), "holdout", seed=1, train_frac=0.7, n_repeats=3)
    assert len(folds) == 3
    assert all((f.n_train, f.n_test) == (7, 3) for f in folds)


def test_holdout_rejects_degenerate_fraction():
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(10), "holdout", train_frac=1.0)
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(2), "holdout", train_frac=0.2)


def test_grouped_stratified_keeps_strata_whole(grouped_data):
    folds = build_folds(grouped_data, "stratified_kfold", 3, seed=5)
    assert len(folds) == 3
    strata = grouped_data.strata
    seen = []
    for f in folds:
        train_groups = set(strata[f.train_idx])
        test_groups = set(strata[f.test_idx])
        assert train_groups.isdisjoint(test_groups)
        assert len(test_groups) == 2
        seen.extend(test_groups)
    assert sorted(seen) == sorted(set(strata))


def test_grouped_stratified_needs_k_distinct_strata():
    ds = _ds(10, strata=["a"] * 5 + ["b"] * 5)
    with pytest.raises(InvalidParameterError):
        build_folds(ds, "stratified_kfold", 3, seed=0)


def test_per_record_stratified_balances_labels():
    strata = np.array(["a"] * 9 + ["b"] * 6)
    folds = build_folds(_ds(15), "stratified_kfold", 3, strata=strata, seed=0, grouped=False)
    for f in folds:
        labels = strata[f.test_idx].tolist()
        assert labels.count("a") == 3
        assert labels.count("b") == 2


def test_per_record_stratified_rejects_small_stratum():
    strata = ["a"] * 5 + ["b"] * 2
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(7), "stratified_kfold", 3, strata=strata, grouped=False)


def test_stratified_without_strata():
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(10), "stratified_kfold", 2)


def test_rolling_is_chronological():
    folds = build_folds(_ds(10), "rolling", 5)
    assert len(folds) == 4
    for i, f in enumerate(folds, start=1):
        assert f.train_idx.max() < f.test_idx.min()
        assert f.train_idx.tolist() == list(range(2 * i))
        assert f.test_idx.tolist() == [2 * i, 2 * i + 1]


def test_rolling_remainder_goes_to_first_chunk():
    folds = build_folds(_ds(11), "rolling", 5)
    assert folds[0].train_idx.tolist() == [0, 1, 2]
    assert all(f.n_test == 2 for f in folds)


def test_rolling_window_limits_training_chunks():
    folds = build_folds(_ds(10), "rolling", 5, max_train_chunks=1)
    assert folds[-1].train_idx.tolist() == [6, 7]
    assert folds[-1].test_idx.tolist() == [8, 9]


def test_rolling_defaults_to_one_record_chunks():
    folds = build_folds(_ds(6), "rolling")
    assert len(folds) == 5
    assert all(f.n_test == 1 for f in folds)


def test_unknown_scheme():
    with pytest.raises(InvalidParameterError):
        build_folds(_ds(10), "bootstrap", 3)
