from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CellOutcome:
    """Result of one (fold, flexibility) fit/predict/score unit."""

    row: int
    col: int
    error: float
    train_error: Optional[float] = None
    reason: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.reason is None
