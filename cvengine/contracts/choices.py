from __future__ import annotations

"""Literal-based "choice" types used across contracts.

Keep this file dependency-free (stdlib + typing only) and import choice sets
from here rather than repeating Literal[...] in multiple contract modules.
"""

from typing import Literal, TypeAlias


# -----------------------------
# Partitioning
# -----------------------------

SplitModeName: TypeAlias = Literal[
    "holdout",
    "kfold",
    "loo",
    "lpo",
    "stratified_kfold",
    "rolling",
]


# -----------------------------
# Model families
# -----------------------------

ModelFamilyName: TypeAlias = Literal["spline", "polynomial"]

SplineKnots: TypeAlias = Literal["uniform", "quantile"]
SplineExtrapolation: TypeAlias = Literal["error", "constant", "linear", "continue"]


# -----------------------------
# Losses (lower is better)
# -----------------------------

LossName: TypeAlias = Literal["mse", "rmse", "mae", "median_ae"]


__all__ = [
    "SplitModeName",
    "ModelFamilyName",
    "SplineKnots",
    "SplineExtrapolation",
    "LossName",
]
