from __future__ import annotations

"""Fixed-shape folds x flexibility loss grid.

Cells that could not be fitted or scored hold NaN and carry a reason. Raw
per-fold losses stay available so that consumers can compute their own
summaries (percentiles, paired differences, ...) without re-running folds.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

from cvengine.components.evaluation.selection import min_error_index, one_standard_error_index
from cvengine.errors import InsufficientDataError, InvalidInputError


@dataclass
class ErrorMatrix:
    flexibility_grid: np.ndarray
    fold_ids: np.ndarray
    errors: np.ndarray
    metric: str = "mse"
    train_errors: Optional[np.ndarray] = None
    # (row, column) -> reason
    invalid: Dict[Tuple[int, int], str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.flexibility_grid = np.asarray(self.flexibility_grid, dtype=int).ravel()
        self.fold_ids = np.asarray(self.fold_ids, dtype=int).ravel()
        self.errors = np.asarray(self.errors, dtype=float)

        expected = (self.fold_ids.shape[0], self.flexibility_grid.shape[0])
        if self.errors.shape != expected:
            raise InvalidInputError(
                f"errors must have shape (n_folds, n_flexibility)={expected}; got {self.errors.shape}."
            )
        if self.train_errors is not None:
            self.train_errors = np.asarray(self.train_errors, dtype=float)
            if self.train_errors.shape != expected:
                raise InvalidInputError(
                    f"train_errors must have shape {expected}; got {self.train_errors.shape}."
                )

    @classmethod
    def empty(
        cls,
        flexibility_grid,
        fold_ids,
        *,
        metric: str = "mse",
        with_train: bool = False,
    ) -> "ErrorMatrix":
        shape = (len(fold_ids), len(flexibility_grid))
        return cls(
            flexibility_grid=flexibility_grid,
            fold_ids=fold_ids,
            errors=np.full(shape, np.nan),
            metric=metric,
            train_errors=np.full(shape, np.nan) if with_train else None,
        )

    # --- shape ------------------------------------------------------------

    @property
    def n_folds(self) -> int:
        return int(self.errors.shape[0])

    @property
    def n_flexibility(self) -> int:
        return int(self.errors.shape[1])

    @property
    def valid_mask(self) -> np.ndarray:
        return np.isfinite(self.errors)

    @property
    def n_valid(self) -> np.ndarray:
        return self.valid_mask.sum(axis=0).astype(int)

    def column(self, flexibility: int) -> np.ndarray:
        """Raw per-fold losses for one flexibility value (NaN where invalid)."""
        hits = np.flatnonzero(self.flexibility_grid == int(flexibility))
        if hits.size == 0:
            raise KeyError(f"flexibility {flexibility!r} not in grid {self.flexibility_grid.tolist()}")
        return self.errors[:, int(hits[0])].copy()

    def invalid_cells(self) -> List[Tuple[int, int, str]]:
        """(fold_id, flexibility, reason) for every unscored cell, row-major."""
        return [
            (int(self.fold_ids[r]), int(self.flexibility_grid[c]), reason)
            for (r, c), reason in sorted(self.invalid.items())
        ]

    # --- aggregates -------------------------------------------------------

    def _check_columns(self) -> None:
        empty = np.flatnonzero(self.n_valid == 0)
        if empty.size:
            flex = self.flexibility_grid[empty].tolist()
            raise InsufficientDataError(
                f"No fold could be scored for flexibility {flex}; "
                "refusing to report a mean over zero folds."
            )

    def cv_error(self) -> np.ndarray:
        """Per-flexibility mean loss over valid folds."""
        self._check_columns()
        return np.nanmean(self.errors, axis=0)

    def standard_error(self) -> np.ndarray:
        """Per-flexibility ``std(ddof=1) / sqrt(n_valid)``; 0 where only one fold is valid."""
        self._check_columns()
        n_valid = self.n_valid
        se = np.zeros(self.n_flexibility, dtype=float)
        multi = n_valid > 1
        if multi.any():
            std = np.nanstd(self.errors[:, multi], axis=0, ddof=1)
            se[multi] = std / np.sqrt(n_valid[multi])
        return se

    def train_cv_error(self) -> Optional[np.ndarray]:
        if self.train_errors is None:
            return None
        # Columns whose every fit failed are NaN here rather than an error.
        with np.errstate(all="ignore"):
            counts = np.isfinite(self.train_errors).sum(axis=0)
            sums = np.nansum(self.train_errors, axis=0)
            return np.where(counts > 0, sums / np.maximum(counts, 1), np.nan)

    # --- selection --------------------------------------------------------

    def best_index(self) -> int:
        return min_error_index(self.cv_error())

    def one_se_index(self) -> int:
        return one_standard_error_index(self.cv_error(), self.standard_error())

    def best_flexibility(self) -> int:
        return int(self.flexibility_grid[self.best_index()])

    def selected_flexibility(self, *, one_se_rule: bool = True) -> int:
        idx = self.one_se_index() if one_se_rule else self.best_index()
        return int(self.flexibility_grid[idx])
