from __future__ import annotations

"""Reader base contracts and shared helpers."""

from pathlib import Path
from typing import Protocol, Union

import numpy as np

from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidInputError


class Reader(Protocol):
    """Protocol for parsing adapters."""

    def read(self, path: Union[str, Path]) -> Dataset: ...


def coerce_numeric_matrix(arr: np.ndarray, *, context: str) -> np.ndarray:
    """Ensure a numeric, contiguous float array.

    - Coerces object dtype to float where possible
    - Rejects NaNs and non-numeric data
    """

    arr = np.asarray(arr)
    if arr.dtype == object:
        try:
            arr = arr.astype(float)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"{context}: could not convert to float; found non-numeric values.") from e

    if not np.issubdtype(arr.dtype, np.number):
        raise InvalidInputError(f"{context}: expected numeric data; got dtype={arr.dtype}")

    arr = np.asarray(arr, dtype=float)
    if np.isnan(arr).any():
        raise InvalidInputError(f"{context}: contains NaN after parsing; check missing/invalid values.")

    return np.ascontiguousarray(arr)
