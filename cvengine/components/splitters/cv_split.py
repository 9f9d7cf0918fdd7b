from __future__ import annotations
import logging
from typing import Any, Iterator, Optional

import numpy as np
from sklearn.model_selection import KFold, StratifiedKFold

from cvengine.components.splitters.types import Fold, make_fold
from cvengine.errors import InvalidParameterError

logger = logging.getLogger(__name__)


def check_n_splits(n_splits: int, n_samples: int, *, unit: str = "records") -> None:
    if int(n_splits) < 2:
        raise InvalidParameterError(f"k must be >= 2; got {n_splits}.")
    if int(n_splits) > n_samples:
        raise InvalidParameterError(
            f"k={n_splits} exceeds the number of {unit} ({n_samples})."
        )


def generate_kfolds(
    n_samples: int,
    n_splits: int = 5,
    *,
    shuffle: bool = True,
    random_state: Optional[int] = None,
) -> Iterator[Fold]:
    """Yield :class:`Fold` for each of ``n_splits`` near-equal folds.

    Fold sizes differ by at most one; the first ``n_samples % n_splits`` folds
    get the extra record.
    """
    check_n_splits(n_splits, n_samples)

    splitter = KFold(
        n_splits=int(n_splits),
        shuffle=shuffle,
        random_state=(random_state if shuffle else None),
    )
    idx = np.arange(n_samples)
    for fold_id, (train_idx, test_idx) in enumerate(splitter.split(idx), start=1):
        yield make_fold(fold_id, train_idx, test_idx)


def generate_stratified_kfolds(
    strata: Any,
    n_splits: int = 5,
    *,
    shuffle: bool = True,
    random_state: Optional[int] = None,
) -> Iterator[Fold]:
    """Per-record stratification: each fold approximates the global label mix."""
    strata = np.asarray(strata).ravel()
    n_samples = strata.shape[0]
    check_n_splits(n_splits, n_samples)

    labels, counts = np.unique(strata, return_counts=True)
    too_small = labels[counts < int(n_splits)]
    if too_small.size:
        raise InvalidParameterError(
            f"Stratified k-fold with k={n_splits}: strata {too_small.tolist()} "
            f"have fewer than {n_splits} members."
        )

    splitter = StratifiedKFold(
        n_splits=int(n_splits),
        shuffle=shuffle,
        random_state=(random_state if shuffle else None),
    )
    placeholder = np.zeros((n_samples, 1))
    for fold_id, (train_idx, test_idx) in enumerate(splitter.split(placeholder, strata), start=1):
        yield make_fold(fold_id, train_idx, test_idx)


def generate_grouped_kfolds(
    strata: Any,
    n_splits: int = 5,
    *,
    shuffle: bool = True,
    random_state: Optional[int] = None,
) -> Iterator[Fold]:
    """Grouped stratification: k-fold over unique strata, then expand to members.

    Every stratum lands wholly in either train or test of each fold.
    """
    strata = np.asarray(strata).ravel()
    groups = np.unique(strata)
    check_n_splits(n_splits, groups.shape[0], unit="distinct strata")

    if shuffle:
        groups = np.random.default_rng(random_state).permutation(groups)

    logger.debug("Grouped k-fold: %d strata over %d folds", groups.shape[0], n_splits)

    splitter = KFold(n_splits=int(n_splits), shuffle=False)
    for fold_id, (_, test_groups) in enumerate(splitter.split(groups), start=1):
        in_test = np.isin(strata, groups[test_groups])
        yield make_fold(fold_id, np.flatnonzero(~in_test), np.flatnonzero(in_test))
