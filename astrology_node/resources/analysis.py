"""Interpretive analysis reports (natal, relationship, transit, life areas)."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_date_range,
    build_second_subject_birth_data,
    build_transit_time,
    create_subject_request,
    create_two_subject_request,
)
from ..context import RequestContext
from ..options import build_report_options
from ._base import Resource

__all__ = ["AnalysisOperation", "resource"]


class AnalysisOperation(str, Enum):
    NATAL_REPORT = "natalReport"
    SYNASTRY_REPORT = "synastryReport"
    TRANSIT_REPORT = "transitReport"
    COMPOSITE_REPORT = "compositeReport"
    SOLAR_RETURN_REPORT = "solarReturnReport"
    LUNAR_RETURN_REPORT = "lunarReturnReport"
    PROGRESSION_REPORT = "progressionReport"
    DIRECTION_REPORT = "directionReport"
    NATAL_TRANSIT_REPORT = "natalTransitReport"
    SOLAR_RETURN_TRANSIT_REPORT = "solarReturnTransitReport"
    LUNAR_RETURN_TRANSIT_REPORT = "lunarReturnTransitReport"
    LUNAR_ANALYSIS = "lunarAnalysis"
    COMPATIBILITY = "compatibility"
    COMPATIBILITY_SCORE = "compatibilityScore"
    RELATIONSHIP = "relationship"
    RELATIONSHIP_SCORE = "relationshipScore"
    CAREER = "career"
    VOCATIONAL = "vocational"
    HEALTH = "health"
    PSYCHOLOGICAL = "psychological"
    SPIRITUAL = "spiritual"
    KARMIC = "karmic"
    PREDICTIVE = "predictive"
    RELOCATION = "relocation"


_PATHS = {
    AnalysisOperation.NATAL_REPORT: "natal-report",
    AnalysisOperation.SYNASTRY_REPORT: "synastry-report",
    AnalysisOperation.TRANSIT_REPORT: "transit-report",
    AnalysisOperation.COMPOSITE_REPORT: "composite-report",
    AnalysisOperation.SOLAR_RETURN_REPORT: "solar-return-report",
    AnalysisOperation.LUNAR_RETURN_REPORT: "lunar-return-report",
    AnalysisOperation.PROGRESSION_REPORT: "progression-report",
    AnalysisOperation.DIRECTION_REPORT: "direction-report",
    AnalysisOperation.NATAL_TRANSIT_REPORT: "natal-transit-report",
    AnalysisOperation.SOLAR_RETURN_TRANSIT_REPORT: "solar-return-transit-report",
    AnalysisOperation.LUNAR_RETURN_TRANSIT_REPORT: "lunar-return-transit-report",
    AnalysisOperation.LUNAR_ANALYSIS: "lunar-analysis",
    AnalysisOperation.COMPATIBILITY: "compatibility",
    AnalysisOperation.COMPATIBILITY_SCORE: "compatibility-score",
    AnalysisOperation.RELATIONSHIP: "relationship",
    AnalysisOperation.RELATIONSHIP_SCORE: "relationship-score",
    AnalysisOperation.CAREER: "career",
    AnalysisOperation.VOCATIONAL: "vocational",
    AnalysisOperation.HEALTH: "health",
    AnalysisOperation.PSYCHOLOGICAL: "psychological",
    AnalysisOperation.SPIRITUAL: "spiritual",
    AnalysisOperation.KARMIC: "karmic",
    AnalysisOperation.PREDICTIVE: "predictive",
    AnalysisOperation.RELOCATION: "relocation",
}
ANALYSIS_ENDPOINTS = {op: f"/api/v3/analysis/{path}" for op, path in _PATHS.items()}

TWO_SUBJECT_OPERATIONS = (
    AnalysisOperation.SYNASTRY_REPORT,
    AnalysisOperation.COMPOSITE_REPORT,
    AnalysisOperation.COMPATIBILITY,
    AnalysisOperation.COMPATIBILITY_SCORE,
    AnalysisOperation.RELATIONSHIP,
    AnalysisOperation.RELATIONSHIP_SCORE,
)
TRANSIT_OPERATIONS = (
    AnalysisOperation.TRANSIT_REPORT,
    AnalysisOperation.NATAL_TRANSIT_REPORT,
    AnalysisOperation.SOLAR_RETURN_TRANSIT_REPORT,
    AnalysisOperation.LUNAR_RETURN_TRANSIT_REPORT,
)
SINGLE_SUBJECT_OPERATIONS = tuple(
    op for op in AnalysisOperation if op not in TWO_SUBJECT_OPERATIONS + TRANSIT_OPERATIONS
)

resource: Resource[AnalysisOperation] = Resource(
    "analysis",
    AnalysisOperation,
    ANALYSIS_ENDPOINTS,
    description="Written analysis reports",
)


def _report_fields(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "report_options": build_report_options(ctx),
        "include_aspect_patterns": ctx.param("includeAspectPatterns", False),
    }


@resource.handles(*TWO_SUBJECT_OPERATIONS)
def _two_subject_report(ctx: RequestContext, op: AnalysisOperation) -> Any:
    body = create_two_subject_request(
        build_birth_data(ctx),
        build_second_subject_birth_data(ctx),
        _report_fields(ctx),
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*TRANSIT_OPERATIONS)
def _transit_report(ctx: RequestContext, op: AnalysisOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx),
        {
            "transit_time": {"datetime": build_transit_time(ctx).to_payload()},
            **_report_fields(ctx),
            **build_date_range(ctx),
        },
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*SINGLE_SUBJECT_OPERATIONS)
def _subject_report(ctx: RequestContext, op: AnalysisOperation) -> Any:
    body = create_subject_request(build_birth_data(ctx), _report_fields(ctx))
    return ctx.post(resource.endpoint(op), body)
