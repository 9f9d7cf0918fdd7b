from __future__ import annotations

"""Partitioner entry point: dataset + scheme -> materialised folds."""

import logging
from typing import Any, List, Optional, Union

from pydantic import BaseModel

from cvengine.components.splitters.types import Fold
from cvengine.core.dataset import Dataset
from cvengine.errors import InsufficientDataError
from cvengine.factories.split_factory import make_splitter, split_config_from_scheme
from cvengine.runtime.random.rng import RngManager

logger = logging.getLogger(__name__)

SPLIT_STREAM = "split"


def build_folds(
    dataset: Dataset,
    scheme: Union[str, BaseModel],
    k: Optional[int] = None,
    strata: Optional[Any] = None,
    seed: Optional[int] = None,
    **options: Any,
) -> List[Fold]:
    """Return every fold of ``scheme`` over ``dataset``.

    ``strata`` overrides ``dataset.strata``. The split seed is derived from
    ``seed`` the same way :func:`evaluate` derives it, so both see identical
    folds for the same arguments. Parameter errors surface before any fold is
    returned.
    """
    cfg = split_config_from_scheme(scheme, k, **options)
    if strata is not None:
        dataset = dataset.with_strata(strata)

    rngm = RngManager(seed)
    splitter = make_splitter(cfg, seed=rngm.child_seed(SPLIT_STREAM))
    folds = list(splitter.split(dataset))
    if not folds:
        raise InsufficientDataError(f"Scheme {cfg.mode!r} produced no folds.")

    logger.debug("Built %d %s folds over %d records", len(folds), cfg.mode, dataset.n_samples)
    return folds
