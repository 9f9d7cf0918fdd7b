from __future__ import annotations

import inspect
from typing import Any, Dict

from cvengine.errors import InvalidParameterError


def _filtered_kwargs(estimator_cls: type, cfg_obj: Any, *, exclude: set[str] = {"family"}) -> Dict[str, Any]:
    """Dump cfg to dict, drop None, remove 'family', and keep only kwargs accepted by estimator."""
    raw = cfg_obj.model_dump(exclude=exclude, exclude_none=True, by_alias=True)
    sig = inspect.signature(estimator_cls)
    allowed = set(sig.parameters.keys())
    return {k: v for k, v in raw.items() if k in allowed}


def _check_flexibility(flexibility: Any, minimum: int, *, name: str) -> int:
    if isinstance(flexibility, bool) or int(flexibility) != flexibility:
        raise InvalidParameterError(f"{name} must be an integer; got {flexibility!r}.")
    if int(flexibility) < minimum:
        raise InvalidParameterError(f"{name} must be >= {minimum}; got {flexibility}.")
    return int(flexibility)
