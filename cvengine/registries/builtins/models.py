"""Built-in model family registrations."""

from __future__ import annotations

from cvengine.contracts.model_configs import PolynomialFamilyConfig, SplineFamilyConfig
from cvengine.registries.models import register_model_family

from cvengine.components.models.builders import PolynomialFamilyBuilder, SplineFamilyBuilder


@register_model_family("spline")
def _spline(cfg: SplineFamilyConfig):
    return SplineFamilyBuilder(cfg=cfg)


@register_model_family("polynomial")
def _polynomial(cfg: PolynomialFamilyConfig):
    return PolynomialFamilyBuilder(cfg=cfg)
