from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from cvengine.contracts.model_configs import ModelFamilyConfig
from cvengine.components.interfaces import Trainer
from cvengine.components.trainers.trainers import FamilyTrainer
from cvengine.errors import InvalidParameterError
from cvengine.registries.models import make_model_builder

_FAMILY_CONFIG = TypeAdapter(ModelFamilyConfig)


def family_config_from_name(family: Union[str, BaseModel], **options: Any) -> ModelFamilyConfig:
    if isinstance(family, BaseModel):
        payload = family.model_dump()
    else:
        payload = {"family": str(family).lower()}
    payload.update(options)

    try:
        return _FAMILY_CONFIG.validate_python(payload)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid model family configuration {payload!r}: {e}") from e


def make_trainer(cfg: ModelFamilyConfig) -> Trainer:
    """Trainer bound to one model family."""
    return FamilyTrainer(builder=make_model_builder(cfg))
