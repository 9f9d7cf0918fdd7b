from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .eval_configs import EvalModel
from .model_configs import ModelFamilyConfig, SplineFamilyConfig
from .split_configs import SplitConfig, SplitKFoldModel


class DataModel(BaseModel):
    path: Optional[str] = None
    target: str = "y"
    # None -> every column except target/stratum
    features: Optional[List[str]] = None
    stratum: Optional[str] = None

    # Optional parsing hints for delimited tables.
    delimiter: Optional[str] = None
    encoding: Optional[str] = None


class CVRunConfig(BaseModel):
    data: DataModel = Field(default_factory=DataModel)
    split: SplitConfig = Field(default_factory=SplitKFoldModel)
    model: ModelFamilyConfig = Field(default_factory=SplineFamilyConfig)
    eval: EvalModel = Field(default_factory=EvalModel)
    flexibility_grid: List[int] = Field(default_factory=lambda: list(range(1, 11)))
