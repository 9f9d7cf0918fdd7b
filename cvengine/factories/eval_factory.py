from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from cvengine.contracts.eval_configs import EvalModel
from cvengine.components.interfaces import Evaluator
from cvengine.components.evaluation.evaluators import LossEvaluator
from cvengine.errors import InvalidParameterError


def eval_config_from_options(**options: Any) -> EvalModel:
    try:
        return EvalModel(**options)
    except ValidationError as e:
        raise InvalidParameterError(f"Invalid evaluation options {options!r}: {e}") from e


def make_evaluator(cfg: EvalModel) -> Evaluator:
    """
    Create an evaluator strategy from config.
    """
    return LossEvaluator(cfg=cfg)
