"""Engine use-cases.

Scripts and downstream consumers should go through :mod:`cvengine.api`.
"""

from .facade import build_folds, evaluate, run_cross_validation

__all__ = ["build_folds", "evaluate", "run_cross_validation"]
