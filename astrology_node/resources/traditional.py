"""Traditional (Hellenistic/medieval) techniques: dignities, lots, profections."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_birth_data, create_subject_request
from ..context import RequestContext
from ._base import Resource

__all__ = ["TraditionalOperation", "resource"]


class TraditionalOperation(str, Enum):
    CAPABILITIES = "capabilities"
    GLOSSARY_TRADITIONAL_POINTS = "glossaryTraditionalPoints"
    GLOSSARY_DIGNITIES = "glossaryDignities"
    GLOSSARY_PROFECTION_HOUSES = "glossaryProfectionHouses"
    ANALYSIS = "analysis"
    ANNUAL_PROFECTION = "annualProfection"
    PROFECTION_TIMELINE = "profectionTimeline"
    DIGNITIES = "dignities"
    LOTS = "lots"
    PROFECTIONS = "profections"


_Op = TraditionalOperation

TRADITIONAL_ENDPOINTS = {
    _Op.CAPABILITIES: "/api/v3/traditional/capabilities",
    _Op.GLOSSARY_TRADITIONAL_POINTS: "/api/v3/traditional/glossary/traditional-points",
    _Op.GLOSSARY_DIGNITIES: "/api/v3/traditional/glossary/dignities",
    _Op.GLOSSARY_PROFECTION_HOUSES: "/api/v3/traditional/glossary/profection-houses",
    _Op.ANALYSIS: "/api/v3/traditional/analysis",
    _Op.ANNUAL_PROFECTION: "/api/v3/traditional/analysis/annual-profection",
    _Op.PROFECTION_TIMELINE: "/api/v3/traditional/analysis/profection-timeline",
    _Op.DIGNITIES: "/api/v3/traditional/dignities",
    _Op.LOTS: "/api/v3/traditional/lots",
    _Op.PROFECTIONS: "/api/v3/traditional/profections",
}

LOOKUP_OPERATIONS = (
    _Op.CAPABILITIES,
    _Op.GLOSSARY_TRADITIONAL_POINTS,
    _Op.GLOSSARY_DIGNITIES,
    _Op.GLOSSARY_PROFECTION_HOUSES,
)
CHART_OPERATIONS = tuple(op for op in TraditionalOperation if op not in LOOKUP_OPERATIONS)
AGE_OPERATIONS = frozenset({_Op.ANNUAL_PROFECTION, _Op.PROFECTION_TIMELINE, _Op.PROFECTIONS})

resource: Resource[TraditionalOperation] = Resource(
    "traditional",
    TraditionalOperation,
    TRADITIONAL_ENDPOINTS,
    description="Traditional astrology techniques",
)


@resource.handles(*LOOKUP_OPERATIONS)
def _lookup(ctx: RequestContext, op: TraditionalOperation) -> Any:
    return ctx.get(resource.endpoint(op))


@resource.handles(*CHART_OPERATIONS)
def _chart(ctx: RequestContext, op: TraditionalOperation) -> Any:
    body = create_subject_request(build_birth_data(ctx))
    if op in (_Op.ANALYSIS, _Op.DIGNITIES):
        options: Dict[str, Any] = {
            "include_asteroids": ctx.param("includeAsteroids", False),
            "include_fixed_stars": ctx.param("includeFixedStars", True),
        }
        if op is _Op.DIGNITIES:
            options["dignity_system"] = ctx.param("dignitySystem", "traditional")
        body["options"] = options
        body["orbs"] = {"major_aspects_deg": ctx.param("majorAspectsOrb", 2.0)}
    if op in AGE_OPERATIONS:
        body["current_age"] = ctx.param("currentAge", 30)
    return ctx.post(resource.endpoint(op), body)
