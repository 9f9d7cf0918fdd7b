from __future__ import annotations

"""Delimited text table reader (CSV/TSV/TXT) producing a :class:`Dataset`."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd

from cvengine.core.dataset import Dataset
from cvengine.errors import InvalidInputError

from .base import coerce_numeric_matrix


def _read_first_line(path: Path, encoding: Optional[str] = None) -> str:
    with path.open("r", encoding=encoding or "utf-8", errors="replace") as f:
        return f.readline().strip("\n")


def _infer_delimiter(sample_line: str) -> str:
    if "\t" in sample_line:
        return "\t"
    if "," in sample_line:
        return ","
    if ";" in sample_line:
        return ";"
    return "whitespace"


def load_dataset_table(
    file_path: Union[str, Path],
    *,
    target: str,
    features: Optional[Sequence[str]] = None,
    stratum: Optional[str] = None,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> Dataset:
    """Load a headed table into a :class:`Dataset`.

    - ``features=None`` uses every column other than ``target`` and ``stratum``.
    - Feature and target columns must be numeric without missing cells; the
      stratum column may hold any labels.
    - If delimiter is None, it is inferred from the header line.
    """

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Table file not found: {path}")

    delim = delimiter or _infer_delimiter(_read_first_line(path, encoding))
    if delim == "\\t":
        delim = "\t"
    sep = r"\s+" if delim == "whitespace" else delim

    df = pd.read_csv(path.as_posix(), sep=sep, header=0, encoding=encoding or "utf-8", engine="python")
    df.columns = [str(c).strip() for c in df.columns]

    if target not in df.columns:
        raise InvalidInputError(f"{path.name}: target column {target!r} not found in {list(df.columns)}.")
    if stratum is not None and stratum not in df.columns:
        raise InvalidInputError(f"{path.name}: stratum column {stratum!r} not found in {list(df.columns)}.")

    if features is None:
        feature_cols = [c for c in df.columns if c not in {target, stratum}]
    else:
        feature_cols = [str(c) for c in features]
        missing = [c for c in feature_cols if c not in df.columns]
        if missing:
            raise InvalidInputError(f"{path.name}: feature columns {missing} not found.")
    if not feature_cols:
        raise InvalidInputError(f"{path.name}: no feature columns left besides target/stratum.")

    numeric = df[feature_cols + [target]].apply(pd.to_numeric, errors="coerce")
    if numeric.isna().to_numpy().any():
        n_bad = int(numeric.isna().to_numpy().sum())
        raise InvalidInputError(
            f"{path.name}: found {n_bad} non-numeric/missing cells in feature/target columns."
        )

    X = coerce_numeric_matrix(numeric[feature_cols].to_numpy(), context=f"Table '{path.name}'")
    y = numeric[target].to_numpy(dtype=float)
    strata = None if stratum is None else np.asarray(df[stratum].to_numpy())

    return Dataset(X=X, y=y, strata=strata)


@dataclass
class TabularReader:
    target: str
    features: Optional[Sequence[str]] = None
    stratum: Optional[str] = None
    delimiter: Optional[str] = None
    encoding: Optional[str] = None

    def read(self, path: Union[str, Path]) -> Dataset:
        return load_dataset_table(
            path,
            target=self.target,
            features=self.features,
            stratum=self.stratum,
            delimiter=self.delimiter,
            encoding=self.encoding,
        )
