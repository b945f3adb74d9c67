"""Horary astrology: charts cast for the moment a question is asked."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_city_moment, read_language
from ..context import RequestContext
from ._base import Resource

__all__ = ["HoraryOperation", "resource"]


class HoraryOperation(str, Enum):
    ANALYZE = "analyze"
    ASPECTS = "aspects"
    CHART = "chart"
    FERTILITY_ANALYSIS = "fertilityAnalysis"
    GLOSSARY_CATEGORIES = "glossaryCategories"
    GLOSSARY_CONSIDERATIONS = "glossaryConsiderations"


HORARY_ENDPOINTS = {
    HoraryOperation.ANALYZE: "/api/v3/horary/analyze",
    HoraryOperation.ASPECTS: "/api/v3/horary/aspects",
    HoraryOperation.CHART: "/api/v3/horary/chart",
    HoraryOperation.FERTILITY_ANALYSIS: "/api/v3/horary/fertility-analysis",
    HoraryOperation.GLOSSARY_CATEGORIES: "/api/v3/horary/glossary/categories",
    HoraryOperation.GLOSSARY_CONSIDERATIONS: "/api/v3/horary/glossary/considerations",
}

resource: Resource[HoraryOperation] = Resource(
    "horary",
    HoraryOperation,
    HORARY_ENDPOINTS,
    description="Horary question charts",
)


@resource.handles(HoraryOperation.GLOSSARY_CATEGORIES, HoraryOperation.GLOSSARY_CONSIDERATIONS)
def _glossary(ctx: RequestContext, op: HoraryOperation) -> Any:
    return ctx.get(resource.endpoint(op), params={"language": read_language(ctx)})


@resource.handles(
    HoraryOperation.ANALYZE,
    HoraryOperation.ASPECTS,
    HoraryOperation.CHART,
    HoraryOperation.FERTILITY_ANALYSIS,
)
def _question(ctx: RequestContext, op: HoraryOperation) -> Any:
    body: Dict[str, Any] = {
        "question_time": build_city_moment(ctx, "question").to_payload(),
        "options": {
            "include_fixed_stars": ctx.param("horaryIncludeFixedStars", False),
            "language": read_language(ctx),
        },
    }
    if op in (HoraryOperation.ANALYZE, HoraryOperation.ASPECTS):
        body["question"] = ctx.param("question", "")
    if op is HoraryOperation.ANALYZE:
        body["question_category"] = ctx.param("questionCategory", "general")
    return ctx.post(resource.endpoint(op), body)
