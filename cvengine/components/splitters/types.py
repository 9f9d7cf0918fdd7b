from __future__ import annotations

"""Splitter return contracts.

Splitters yield a *single, stable* fold payload shape: index arrays into the
original dataset. Sub-datasets are materialised by the orchestrator, which
keeps partitions cheap to enumerate and easy to check.
"""

from dataclasses import dataclass

import numpy as np

from cvengine.errors import InvalidParameterError


@dataclass(frozen=True)
class Fold:
    """A single train/test split (fold).

    Notes
    -----
    - `train_idx` / `test_idx` are sorted row indices into the *original* dataset.
    - `fold_id` is 1-based, in the order the splitter produced the folds.
    """

    fold_id: int
    train_idx: np.ndarray
    test_idx: np.ndarray

    @property
    def n_train(self) -> int:
        return int(self.train_idx.shape[0])

    @property
    def n_test(self) -> int:
        return int(self.test_idx.shape[0])


def make_fold(fold_id: int, train_idx, test_idx) -> Fold:
    """Normalise index arrays and enforce non-empty, disjoint partitions."""
    tr = np.sort(np.asarray(train_idx, dtype=int).ravel())
    te = np.sort(np.asarray(test_idx, dtype=int).ravel())

    if tr.size == 0 or te.size == 0:
        raise InvalidParameterError(
            f"Fold {fold_id} has an empty partition (n_train={tr.size}, n_test={te.size})."
        )
    if np.intersect1d(tr, te, assume_unique=True).size:
        raise InvalidParameterError(f"Fold {fold_id}: train and test indices overlap.")

    return Fold(fold_id=int(fold_id), train_idx=tr, test_idx=te)
