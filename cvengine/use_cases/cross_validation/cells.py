from __future__ import annotations

import logging

import numpy as np

from cvengine.components.interfaces import Evaluator, Trainer
from cvengine.components.splitters.types import Fold
from cvengine.core.dataset import Dataset
from cvengine.errors import FitError

from .types import CellOutcome

logger = logging.getLogger(__name__)


def run_cell(
    *,
    trainer: Trainer,
    evaluator: Evaluator,
    dataset: Dataset,
    fold: Fold,
    row: int,
    col: int,
    flexibility: int,
    with_train_error: bool = False,
) -> CellOutcome:
    """Fit on the fold's train rows, score on its test rows.

    Shares no state with other cells, so cells may run in any order or in
    separate workers. A :class:`FitError` is contained in the returned
    outcome; anything else propagates.
    """
    train = dataset.subset(fold.train_idx)
    test = dataset.subset(fold.test_idx)

    try:
        model = trainer.fit(train, flexibility)
        y_pred = trainer.predict(model, test.X)
        train_error = None
        if with_train_error:
            train_error = evaluator.score(trainer.predict(model, train.X), train.y)
    except FitError as e:
        logger.warning(
            "fold %d, flexibility %d: cell marked invalid (%s)", fold.fold_id, flexibility, e
        )
        return CellOutcome(row=row, col=col, error=np.nan, reason=str(e))

    error = evaluator.score(y_pred, test.y)
    if not np.isfinite(error):
        logger.warning("fold %d, flexibility %d: non-finite loss", fold.fold_id, flexibility)
        return CellOutcome(row=row, col=col, error=np.nan, reason="non-finite loss")
    return CellOutcome(row=row, col=col, error=float(error), train_error=train_error)
