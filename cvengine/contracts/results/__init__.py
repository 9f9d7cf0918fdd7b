"""Result contracts.

These models define the *output* shapes produced by use-cases. Callers are
expected to serialize via `model_dump()` at the boundary.
"""

from .common import ResultModel, sanitize_floats
from .cv import CVResult, InvalidCell

__all__ = [
    "ResultModel",
    "sanitize_floats",
    "CVResult",
    "InvalidCell",
]
