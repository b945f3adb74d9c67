"""Enhanced personal and global analyses."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..builders import build_birth_data, read_subject_name, subject_payload
from ..context import RequestContext
from ._base import Resource

__all__ = ["EnhancedOperation", "resource"]


class EnhancedOperation(str, Enum):
    PERSONAL_ANALYSIS = "personalAnalysis"
    GLOBAL_ANALYSIS = "globalAnalysis"
    CHARTS_PERSONAL_ANALYSIS = "chartsPersonalAnalysis"
    CHARTS_GLOBAL_ANALYSIS = "chartsGlobalAnalysis"


ENHANCED_ENDPOINTS = {
    EnhancedOperation.PERSONAL_ANALYSIS: "/api/v3/enhanced/personal-analysis",
    EnhancedOperation.GLOBAL_ANALYSIS: "/api/v3/enhanced/global-analysis",
    EnhancedOperation.CHARTS_PERSONAL_ANALYSIS: "/api/v3/enhanced_charts/personal-analysis",
    EnhancedOperation.CHARTS_GLOBAL_ANALYSIS: "/api/v3/enhanced_charts/global-analysis",
}

resource: Resource[EnhancedOperation] = Resource(
    "enhanced",
    EnhancedOperation,
    ENHANCED_ENDPOINTS,
    description="Enhanced personal and global analysis",
)


@resource.handles(EnhancedOperation.GLOBAL_ANALYSIS, EnhancedOperation.CHARTS_GLOBAL_ANALYSIS)
def _global(ctx: RequestContext, op: EnhancedOperation) -> Any:
    return ctx.post(resource.endpoint(op), {})


@resource.handles(
    EnhancedOperation.PERSONAL_ANALYSIS, EnhancedOperation.CHARTS_PERSONAL_ANALYSIS
)
def _personal(ctx: RequestContext, op: EnhancedOperation) -> Any:
    body = {
        "subject": subject_payload(build_birth_data(ctx), read_subject_name(ctx, "name")),
        "options": {
            "house_system": ctx.param("houseSystem", "whole_sign"),
            "include_fixed_stars": ctx.param("includeFixedStars", True),
            "include_traditional": ctx.param("includeTraditional", True),
        },
    }
    return ctx.post(resource.endpoint(op), body)
