from __future__ import annotations

"""Result contracts for the engine.

These models represent *outputs* produced by use-cases and are intended to be
stable for downstream consumers (reports, plots, exports).

Design goals:
- JSON-friendly field types (lists, dicts, scalars) at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.

Note: contracts should only depend on stdlib + pydantic.
"""

import math
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


JSONDict = Dict[str, Any]


def sanitize_floats(values: Sequence[Any]) -> List[Optional[float]]:
    """Map NaN/inf (and non-numeric) entries to None for JSON output."""
    out: List[Optional[float]] = []
    for v in values:
        try:
            fv = float(v)
        except (TypeError, ValueError):
            out.append(None)
            continue
        out.append(fv if math.isfinite(fv) else None)
    return out
