from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from ..choices import LossName, ModelFamilyName, SplitModeName
from .common import ResultModel


class InvalidCell(ResultModel):
    fold: int
    flexibility: int
    reason: str


class CVResult(ResultModel):
    scheme: SplitModeName
    metric_name: LossName
    family: ModelFamilyName
    flexibility_name: str = "flexibility"
    seed: Optional[int] = None

    n_samples: int
    n_folds: int
    flexibility_grid: List[int] = Field(default_factory=list)

    # folds x flexibility, None where the cell could not be scored
    fold_errors: List[List[Optional[float]]] = Field(default_factory=list)
    train_errors: Optional[List[List[Optional[float]]]] = None
    # mean training loss per flexibility; None unless train errors were recorded
    train_cv_error: Optional[List[Optional[float]]] = None
    invalid_cells: List[InvalidCell] = Field(default_factory=list)

    cv_error: List[Optional[float]] = Field(default_factory=list)
    cv_se: List[Optional[float]] = Field(default_factory=list)
    n_valid: List[int] = Field(default_factory=list)

    best_index: int
    best_flexibility: int
    selected_index: int
    selected_flexibility: int

    notes: List[str] = Field(default_factory=list)
