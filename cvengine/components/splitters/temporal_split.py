from __future__ import annotations

"""Forward-chaining splits for ordered (time-series) datasets."""

from typing import Iterator, Optional

import numpy as np
from sklearn.model_selection import TimeSeriesSplit

from cvengine.components.splitters.types import Fold, make_fold
from cvengine.errors import InvalidParameterError


def generate_rolling_folds(
    n_samples: int,
    *,
    n_chunks: Optional[int] = None,
    max_train_chunks: Optional[int] = None,
) -> Iterator[Fold]:
    """Yield ``n_chunks - 1`` forward-chaining folds.

    Rows are cut into ``n_chunks`` consecutive chunks of ``n_samples // n_chunks``
    records, the remainder going to the first chunk. Fold i trains on chunks
    1..i (or the last ``max_train_chunks`` of them) and tests on chunk i + 1.
    """
    chunks = n_samples if n_chunks is None else int(n_chunks)
    if chunks < 2 or chunks > n_samples:
        raise InvalidParameterError(
            f"n_chunks must be in [2, {n_samples}]; got {chunks}."
        )

    chunk_size = n_samples // chunks
    max_train_size = None
    if max_train_chunks is not None:
        if int(max_train_chunks) < 1:
            raise InvalidParameterError(f"max_train_chunks must be >= 1; got {max_train_chunks}.")
        max_train_size = int(max_train_chunks) * chunk_size

    tss = TimeSeriesSplit(n_splits=chunks - 1, max_train_size=max_train_size)
    idx = np.arange(n_samples)
    for fold_id, (train_idx, test_idx) in enumerate(tss.split(idx), start=1):
        yield make_fold(fold_id, train_idx, test_idx)
