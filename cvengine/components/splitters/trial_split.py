from __future__ import annotations

from typing import Iterator, Optional

import numpy as np
from sklearn.model_selection import ShuffleSplit

from cvengine.components.splitters.types import Fold, make_fold
from cvengine.errors import InvalidParameterError


def holdout_sizes(n_samples: int, train_frac: float) -> tuple[int, int]:
    """Return (n_train, n_test) for a cut at ``train_frac``."""
    if not (0.0 < float(train_frac) < 1.0):
        raise InvalidParameterError(f"train_frac must be in (0, 1); got {train_frac}.")

    n_train = int(round(float(train_frac) * n_samples))
    n_test = n_samples - n_train
    if n_train < 1 or n_test < 1:
        raise InvalidParameterError(
            f"train_frac={train_frac} on {n_samples} records leaves an empty side "
            f"(n_train={n_train}, n_test={n_test})."
        )
    return n_train, n_test


def split(
    n_samples: int,
    train_frac: float = 0.7,
    *,
    n_repeats: int = 1,
    random_state: Optional[int] = None,
) -> Iterator[Fold]:
    """
    Shuffled train/test cut, repeated ``n_repeats`` times.

    Sizes are passed to sklearn as integers so that every repeat has exactly
    the same train/test counts.
    """
    if int(n_repeats) < 1:
        raise InvalidParameterError(f"n_repeats must be >= 1; got {n_repeats}.")

    n_train, n_test = holdout_sizes(n_samples, train_frac)

    ss = ShuffleSplit(
        n_splits=int(n_repeats),
        train_size=n_train,
        test_size=n_test,
        random_state=random_state,
    )
    idx = np.arange(n_samples)
    for fold_id, (train_idx, test_idx) in enumerate(ss.split(idx), start=1):
        yield make_fold(fold_id, train_idx, test_idx)
