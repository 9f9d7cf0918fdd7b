"""Shared schema contracts.

This package contains Pydantic models and Literal-based choice types used to
validate configuration payloads across cvengine.

Export policy:
- Keep module imports explicit in most of the codebase:
    from cvengine.contracts.run_config import CVRunConfig
- The names re-exported here are a small set of convenience imports for
  callers that prefer a single namespace.
"""

from cvengine.contracts.choices import (
    LossName,
    ModelFamilyName,
    SplineExtrapolation,
    SplineKnots,
    SplitModeName,
)
from cvengine.contracts.eval_configs import EvalModel
from cvengine.contracts.model_configs import (
    ModelFamilyConfig,
    PolynomialFamilyConfig,
    SplineFamilyConfig,
)
from cvengine.contracts.run_config import CVRunConfig, DataModel
from cvengine.contracts.split_configs import (
    SplitConfig,
    SplitHoldoutModel,
    SplitKFoldModel,
    SplitLeaveOneOutModel,
    SplitLeavePOutModel,
    SplitRollingModel,
    SplitStratifiedKFoldModel,
)
from cvengine.contracts.results import CVResult, InvalidCell

__all__ = [
    # choice types
    "LossName",
    "ModelFamilyName",
    "SplineExtrapolation",
    "SplineKnots",
    "SplitModeName",
    # configs
    "DataModel",
    "CVRunConfig",
    "EvalModel",
    "ModelFamilyConfig",
    "SplineFamilyConfig",
    "PolynomialFamilyConfig",
    "SplitConfig",
    "SplitHoldoutModel",
    "SplitKFoldModel",
    "SplitLeaveOneOutModel",
    "SplitLeavePOutModel",
    "SplitStratifiedKFoldModel",
    "SplitRollingModel",
    # results
    "CVResult",
    "InvalidCell",
]
