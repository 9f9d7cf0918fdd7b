from __future__ import annotations

from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, Field

from .choices import SplineExtrapolation, SplineKnots


# -----------------------------
# Model families (flexibility = degrees of freedom)
# -----------------------------

class SplineFamilyConfig(BaseModel):
    """Regression spline; flexibility is total df including the intercept."""

    family: Literal["spline"] = "spline"

    flexibility_name: ClassVar[str] = "df"

    degree: int = 3
    knots: SplineKnots = "quantile"
    extrapolation: SplineExtrapolation = "linear"


class PolynomialFamilyConfig(BaseModel):
    """Global polynomial; flexibility is the polynomial degree."""

    family: Literal["polynomial"] = "polynomial"

    flexibility_name: ClassVar[str] = "degree"

    fit_intercept: bool = True


ModelFamilyConfig = Annotated[
    Union[SplineFamilyConfig, PolynomialFamilyConfig],
    Field(discriminator="family"),
]


def get_flexibility_name(cfg: "SplineFamilyConfig | PolynomialFamilyConfig") -> str:
    return getattr(cfg.__class__, "flexibility_name", "flexibility")
