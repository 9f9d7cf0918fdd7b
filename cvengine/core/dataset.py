from __future__ import annotations

"""In-memory dataset contract.

Every component below the orchestrator works on row indices into one
:class:`Dataset`; sub-datasets are materialised only right before a fit or a
predict call.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from cvengine.core.shapes import ensure_xy_aligned
from cvengine.errors import InvalidInputError


@dataclass(frozen=True)
class Dataset:
    """Ordered records: features ``X``, scalar target ``y``, optional ``strata``.

    Row order is meaningful (rolling splits treat it as chronological).
    """

    X: np.ndarray
    y: np.ndarray
    strata: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        X, y, strata = ensure_xy_aligned(self.X, self.y, self.strata)
        object.__setattr__(self, "X", X)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "strata", strata)

    @classmethod
    def from_arrays(cls, X: Any, y: Any, strata: Optional[Any] = None) -> "Dataset":
        return cls(X=X, y=y, strata=strata)

    @classmethod
    def from_records(cls, records: Iterable[Sequence[Any]]) -> "Dataset":
        """Build from ``(features, target)`` or ``(features, target, stratum)`` tuples.

        A scalar ``features`` entry is treated as a one-dimensional vector. All
        records must share the same feature dimensionality and tuple arity.
        """
        rows = list(records)
        if not rows:
            raise InvalidInputError("Dataset needs at least one record.")

        arity = len(rows[0])
        if arity not in (2, 3):
            raise InvalidInputError(
                f"Records must be (features, target[, stratum]); got arity {arity}."
            )

        feats: list[np.ndarray] = []
        targets: list[Any] = []
        strata: list[Any] = []
        for i, rec in enumerate(rows):
            if len(rec) != arity:
                raise InvalidInputError(
                    f"Record {i} has arity {len(rec)}; expected {arity} like record 0."
                )
            fv = np.atleast_1d(np.asarray(rec[0], dtype=float))
            if fv.ndim != 1:
                raise InvalidInputError(f"Record {i}: features must be a flat vector; got {fv.shape}.")
            if feats and fv.shape[0] != feats[0].shape[0]:
                raise InvalidInputError(
                    f"Record {i} has {fv.shape[0]} features; expected {feats[0].shape[0]}."
                )
            feats.append(fv)
            targets.append(rec[1])
            if arity == 3:
                strata.append(rec[2])

        return cls(
            X=np.vstack(feats),
            y=np.asarray(targets, dtype=float),
            strata=np.asarray(strata) if arity == 3 else None,
        )

    @property
    def n_samples(self) -> int:
        return int(self.y.shape[0])

    @property
    def n_features(self) -> int:
        return int(self.X.shape[1])

    def __len__(self) -> int:
        return self.n_samples

    def with_strata(self, strata: Any) -> "Dataset":
        return Dataset(X=self.X, y=self.y, strata=strata)

    def subset(self, indices: Any) -> "Dataset":
        idx = np.asarray(indices, dtype=int)
        return Dataset(
            X=self.X[idx],
            y=self.y[idx],
            strata=None if self.strata is None else self.strata[idx],
        )
