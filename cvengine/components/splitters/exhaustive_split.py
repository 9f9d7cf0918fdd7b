from __future__ import annotations

"""Exhaustive splitters: leave-one-out and leave-p-out."""

import logging
from typing import Iterator

import numpy as np
from scipy.special import comb
from sklearn.model_selection import LeaveOneOut, LeavePOut

from cvengine.components.splitters.types import Fold, make_fold
from cvengine.errors import InvalidParameterError, ResourceLimitExceededError

logger = logging.getLogger(__name__)


def generate_loo_folds(n_samples: int) -> Iterator[Fold]:
    if n_samples < 2:
        raise InvalidParameterError(f"Leave-one-out needs at least 2 records; got {n_samples}.")

    idx = np.arange(n_samples)
    for fold_id, (train_idx, test_idx) in enumerate(LeaveOneOut().split(idx), start=1):
        yield make_fold(fold_id, train_idx, test_idx)


def count_lpo_folds(n_samples: int, p: int) -> int:
    return int(comb(n_samples, p, exact=True))


def generate_lpo_folds(n_samples: int, p: int, *, max_folds: int) -> Iterator[Fold]:
    """Every size-``p`` subset as test set, in lexicographic order.

    The combination count is checked against ``max_folds`` eagerly, so an
    oversized request fails before the first fold is produced.
    """
    p = int(p)
    if p < 1 or p >= n_samples:
        raise InvalidParameterError(
            f"Leave-p-out needs 1 <= p < n_samples; got p={p}, n_samples={n_samples}."
        )

    n_folds = count_lpo_folds(n_samples, p)
    if n_folds > int(max_folds):
        raise ResourceLimitExceededError(
            f"Leave-{p}-out over {n_samples} records enumerates {n_folds} folds; "
            f"cap is {max_folds}."
        )
    logger.debug("Leave-%d-out: enumerating %d folds", p, n_folds)
    return _iter_lpo(n_samples, p)


def _iter_lpo(n_samples: int, p: int) -> Iterator[Fold]:
    idx = np.arange(n_samples)
    for fold_id, (train_idx, test_idx) in enumerate(LeavePOut(p).split(idx), start=1):
        yield make_fold(fold_id, train_idx, test_idx)
