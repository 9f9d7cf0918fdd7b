from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, field_validator

from .choices import LossName


class EvalModel(BaseModel):
    metric: LossName = "mse"
    seed: Optional[int] = None
    # joblib workers for (fold, flexibility) units; 1 runs inline, -1 all cores
    n_jobs: int = 1
    # also score each fitted model on its own training subset
    return_train_error: bool = False
    # False selects the plain minimum instead of the one-standard-error choice
    one_se_rule: bool = True

    @field_validator("n_jobs")
    @classmethod
    def _nonzero_workers(cls, v: int) -> int:
        if v == 0:
            raise ValueError("n_jobs must be a positive worker count or negative (all cores); got 0.")
        return v
