from __future__ import annotations
from dataclasses import dataclass
import numpy as np

from cvengine.contracts.eval_configs import EvalModel
from cvengine.components.interfaces import Evaluator
from cvengine.components.evaluation.scoring import score as score_fn


@dataclass
class LossEvaluator(Evaluator):
    """Scores held-out predictions with the loss named in ``EvalModel.metric``."""

    cfg: EvalModel

    @property
    def metric(self) -> str:
        return str(self.cfg.metric)

    def score(self, y_pred: np.ndarray, y_true: np.ndarray) -> float:
        return score_fn(y_pred, y_true, metric=self.metric)
