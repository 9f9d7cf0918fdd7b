"""Public use-case entry points.

This module is the sanctioned invocation surface for engine use-cases; the
implementations live in sibling modules and are imported lazily.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel

from cvengine.components.evaluation.error_matrix import ErrorMatrix
from cvengine.components.splitters.types import Fold
from cvengine.contracts.results.cv import CVResult
from cvengine.contracts.run_config import CVRunConfig
from cvengine.core.dataset import Dataset
from cvengine.core.progress import ProgressCallback


def build_folds(
    dataset: Dataset,
    scheme: Union[str, BaseModel],
    k: Optional[int] = None,
    strata: Optional[Any] = None,
    seed: Optional[int] = None,
    **options: Any,
) -> List[Fold]:
    """Partition ``dataset`` according to ``scheme`` and return every fold."""

    from cvengine.use_cases.partition import build_folds as _build

    return _build(dataset, scheme, k, strata=strata, seed=seed, **options)


def evaluate(
    dataset: Dataset,
    scheme: Union[str, BaseModel],
    flexibility_grid: Sequence[int],
    k: Optional[int] = None,
    seed: Optional[int] = None,
    **kwargs: Any,
) -> ErrorMatrix:
    """Cross-validate a model family and return the raw :class:`ErrorMatrix`."""

    from cvengine.use_cases.cross_validation import evaluate as _evaluate

    return _evaluate(dataset, scheme, flexibility_grid, k, seed, **kwargs)


def run_cross_validation(
    run_config: CVRunConfig,
    *,
    dataset: Optional[Dataset] = None,
    progress: Optional[ProgressCallback] = None,
) -> CVResult:
    """Run a config-driven evaluation and return a typed :class:`CVResult`."""

    from cvengine.use_cases.cross_validation import run_cross_validation as _run

    return _run(run_config, dataset=dataset, progress=progress)
