import numpy as np
import pytest

from cvengine.api import list_losses, min_error_index, one_standard_error_index, score
from cvengine.errors import InvalidInputError, InvalidParameterError


def test_mse_small_example():
    assert score([1, 2, 3], [1, 2, 4]) == pytest.approx(1 / 3)


def test_other_losses():
    assert score([0, 0], [3, 4], metric="mae") == pytest.approx(3.5)
    assert score([0, 0], [3, 3], metric="rmse") == pytest.approx(3.0)
    assert set(list_losses()) >= {"mse", "rmse", "mae", "median_ae"}


def test_score_rejects_empty_and_mismatched():
    with pytest.raises(InvalidInputError):
        score([], [])
    with pytest.raises(InvalidInputError):
        score([1, 2], [1, 2, 3])


def test_score_rejects_unknown_metric():
    with pytest.raises(InvalidParameterError):
        score([1], [1], metric="r2")


def test_one_standard_error_prefers_simpler_model():
    err = [5.0, 4.1, 4.0, 4.05]
    se = [0.2, 0.2, 0.2, 0.2]
    assert min_error_index(err) == 2
    assert one_standard_error_index(err, se) == 1


def test_one_standard_error_with_zero_se_is_minimum():
    err = np.array([3.0, 2.0, 2.5])
    assert one_standard_error_index(err, np.zeros(3)) == 1


def test_selection_rejects_nan():
    with pytest.raises(InvalidInputError):
        min_error_index([1.0, np.nan])


def test_one_standard_error_documented_curve():
    err = [0.5, 0.3, 0.28, 0.31, 0.4]
    se = [0.05, 0.04, 0.03, 0.03, 0.05]
    assert min_error_index(err) == 2
    assert one_standard_error_index(err, se) == 1
