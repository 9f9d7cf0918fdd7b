from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from cvengine.contracts.split_configs import SplitConfig
from cvengine.components.interfaces import Splitter
from cvengine.errors import InvalidParameterError
from cvengine.registries.splitters import make_splitter as _make_splitter

_SPLIT_CONFIG = TypeAdapter(SplitConfig)

# which config field a positional ``k`` fills for each mode
_K_FIELD = {
    "kfold": "n_splits",
    "stratified_kfold": "n_splits",
    "lpo": "p",
    "rolling": "n_chunks",
}


def split_config_from_scheme(
    scheme: Union[str, BaseModel],
    k: Optional[int] = None,
    **options: Any,
) -> SplitConfig:
    """Resolve a scheme name (or config) plus ``k`` and options into a split config.

    ``k`` means the fold count for k-fold variants, ``p`` for leave-p-out and the
    chunk count for rolling splits; holdout and leave-one-out ignore it.
    """
    if isinstance(scheme, BaseModel):
        payload = scheme.model_dump()
    else:
        payload = {"mode": str(scheme).lower()}

    payload.update(options)
    field = _K_FIELD.get(str(payload.get("mode")))
    if k is not None and field is not None:
        payload[field] = int(k)

    try:
        return _SPLIT_CONFIG.validate_python(payload)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid split configuration {payload!r}: {e}") from e


def make_splitter(cfg: SplitConfig, seed: Optional[int] = None) -> Splitter:
    """Thin wrapper around cvengine registries."""
    return _make_splitter(cfg, seed=seed)
