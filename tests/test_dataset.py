import numpy as np
import pytest

from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidInputError


def test_from_records_two_and_three_tuples():
    ds = Dataset.from_records([(1.0, 2.0), (2.0, 4.0), (3.0, 6.0)])
    assert ds.n_samples == 3
    assert ds.n_features == 1
    assert ds.strata is None

    ds3 = Dataset.from_records([([1.0, 0.5], 2.0, "a"), ([2.0, 0.1], 4.0, "b")])
    assert ds3.X.shape == (2, 2)
    assert ds3.strata.tolist() == ["a", "b"]


def test_from_records_rejects_ragged_features():
    with pytest.raises(InvalidInputError):
        Dataset.from_records([([1.0, 2.0], 1.0), ([1.0], 2.0)])


def test_from_records_rejects_mixed_arity():
    with pytest.raises(InvalidInputError):
        Dataset.from_records([(1.0, 2.0), (2.0, 3.0, "a")])


def test_from_records_rejects_empty():
    with pytest.raises(InvalidInputError):
        Dataset.from_records([])


def test_from_arrays_length_mismatch():
    with pytest.raises(InvalidInputError):
        Dataset.from_arrays(np.arange(5.0), np.arange(4.0))


def test_subset_keeps_strata_aligned(grouped_data):
    idx = [0, 5, 9]
    sub = grouped_data.subset(idx)
    assert sub.n_samples == 3
    np.testing.assert_array_equal(sub.y, grouped_data.y[idx])
    np.testing.assert_array_equal(sub.strata, grouped_data.strata[idx])
