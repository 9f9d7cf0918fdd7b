"""Engine exception types.

Configuration and partitioning errors abort an evaluation. Only
:class:`FitError` is contained by the orchestrator, where it marks a single
(fold, flexibility) cell invalid.

Each kind also derives from the closest builtin so that callers catching
``ValueError`` / ``RuntimeError`` keep working.
"""

from __future__ import annotations


class CVEngineError(Exception):
    """Base class for all cvengine errors."""


class InvalidParameterError(CVEngineError, ValueError):
    """Raised for bad split/selection parameters (k, ratio, p, grid, ...)."""


class InvalidInputError(CVEngineError, ValueError):
    """Raised for empty or misaligned data (records, predictions, targets)."""


class InsufficientDataError(CVEngineError, ValueError):
    """Raised when a flexibility column has no scoreable fold left."""


class ResourceLimitExceededError(CVEngineError, RuntimeError):
    """Raised when an exhaustive enumeration would exceed its configured cap."""


class FitError(CVEngineError, RuntimeError):
    """Raised when a model cannot be fitted on a training subset."""
