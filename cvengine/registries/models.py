from __future__ import annotations

from typing import Callable

from cvengine.contracts.model_configs import ModelFamilyConfig
from cvengine.components.interfaces import ModelBuilder
from cvengine.registries.base import Registry

# Factory takes the family config and returns a ModelBuilder.
ModelBuilderFactory = Callable[[ModelFamilyConfig], ModelBuilder]

_FAMILIES: Registry[str, ModelBuilderFactory] = Registry(_name="model family")

_BUILTINS_LOADED = False


def register_model_family(family: str) -> Callable[[ModelBuilderFactory], ModelBuilderFactory]:
    """Decorator to register a ModelBuilder factory under a family key.

    Adding a family = adding a config model + registering its builder here.
    """
    return _FAMILIES.register(family.lower())


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from cvengine.registries.builtins import models as _  # noqa: F401

    _BUILTINS_LOADED = True


def make_model_builder(cfg: ModelFamilyConfig) -> ModelBuilder:
    """Return a ModelBuilder for the provided family config."""
    _ensure_builtins()
    family = getattr(cfg, "family", "spline")
    return _FAMILIES.require(str(family).lower())(cfg)


def list_model_families() -> list[str]:
    _ensure_builtins()
    return sorted(list(_FAMILIES.keys()))
