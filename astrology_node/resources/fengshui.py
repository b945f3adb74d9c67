"""Feng shui flying stars."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import current_year, read_language, read_optional
from ..context import RequestContext
from ._base import Resource

__all__ = ["FengshuiOperation", "resource"]


class FengshuiOperation(str, Enum):
    FLYING_STARS_CHART = "flyingStarsChart"
    FLYING_STARS_ANNUAL = "flyingStarsAnnual"
    AFFLICTIONS = "afflictions"
    GLOSSARY_STARS = "glossaryStars"


FENGSHUI_ENDPOINTS = {
    FengshuiOperation.FLYING_STARS_CHART: "/api/v3/fengshui/flying-stars/chart",
    FengshuiOperation.FLYING_STARS_ANNUAL: "/api/v3/fengshui/flying-stars/annual/{year}",
    FengshuiOperation.AFFLICTIONS: "/api/v3/fengshui/afflictions/{year}",
    FengshuiOperation.GLOSSARY_STARS: "/api/v3/fengshui/glossary/stars",
}

resource: Resource[FengshuiOperation] = Resource(
    "fengshui",
    FengshuiOperation,
    FENGSHUI_ENDPOINTS,
    description="Flying stars charts and afflictions",
)


@resource.handles(FengshuiOperation.GLOSSARY_STARS)
def _glossary(ctx: RequestContext, op: FengshuiOperation) -> Any:
    return ctx.get(resource.endpoint(op), params={"language": read_language(ctx)})


@resource.handles(FengshuiOperation.FLYING_STARS_ANNUAL, FengshuiOperation.AFFLICTIONS)
def _yearly(ctx: RequestContext, op: FengshuiOperation) -> Any:
    year = ctx.param("year", current_year())
    return ctx.get(resource.endpoint(op, year=year), params={"language": read_language(ctx)})


@resource.handles(FengshuiOperation.FLYING_STARS_CHART)
def _chart(ctx: RequestContext, op: FengshuiOperation) -> Any:
    body: Dict[str, Any] = {
        "facing_degrees": ctx.param("facingDegrees", 180),
        "period": ctx.param("period", 9),
        "include_annual": ctx.param("includeAnnual", True),
        "include_monthly": ctx.param("includeMonthly", False),
        "language": read_language(ctx),
    }
    analysis_date = read_optional(ctx, "analysisDate")
    if analysis_date:
        body["analysis_date"] = analysis_date
    return ctx.post(resource.endpoint(op), body)
