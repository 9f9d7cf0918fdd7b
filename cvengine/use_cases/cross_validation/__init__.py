"""Cross-validation orchestration."""

from .result import build_cv_result
from .run import evaluate, run_cells, run_cross_validation

__all__ = ["evaluate", "run_cells", "run_cross_validation", "build_cv_result"]
