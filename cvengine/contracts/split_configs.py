from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class SplitHoldoutModel(BaseModel):
    mode: Literal["holdout"] = "holdout"
    train_frac: float = 0.7
    # >1 draws independent random holdout splits (one fold each)
    n_repeats: int = 1


class SplitKFoldModel(BaseModel):
    mode: Literal["kfold"] = "kfold"
    n_splits: int = 5
    shuffle: bool = True


class SplitLeaveOneOutModel(BaseModel):
    mode: Literal["loo"] = "loo"


class SplitLeavePOutModel(BaseModel):
    mode: Literal["lpo"] = "lpo"
    p: int = 2
    # checked against C(n, p) before any fold is enumerated
    max_folds: int = 10_000


class SplitStratifiedKFoldModel(BaseModel):
    mode: Literal["stratified_kfold"] = "stratified_kfold"
    n_splits: int = 5
    shuffle: bool = True
    # grouped: whole strata go to train or test; otherwise per-record proportions
    grouped: bool = True


class SplitRollingModel(BaseModel):
    mode: Literal["rolling"] = "rolling"
    # None -> one chunk per record
    n_chunks: Optional[int] = None
    # None -> expanding window (all earlier chunks)
    max_train_chunks: Optional[int] = None


SplitConfig = Annotated[
    Union[
        SplitHoldoutModel,
        SplitKFoldModel,
        SplitLeaveOneOutModel,
        SplitLeavePOutModel,
        SplitStratifiedKFoldModel,
        SplitRollingModel,
    ],
    Field(discriminator="mode"),
]
