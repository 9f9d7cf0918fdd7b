"""Model family builders.

Builder classes convert typed family configs into concrete sklearn
estimators, one per flexibility value:
    from cvengine.components.models.builders import SplineFamilyBuilder
"""

from .basis import PolynomialFamilyBuilder, SplineFamilyBuilder

__all__ = ["SplineFamilyBuilder", "PolynomialFamilyBuilder"]
