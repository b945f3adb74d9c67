"""Solar and lunar eclipses: upcoming events, natal contacts, interpretation."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_birth_date,
    build_city_moment,
    create_subject_request,
    read_language,
    read_optional,
)
from ..context import RequestContext
from ..errors import ParameterError
from ._base import Resource

__all__ = ["EclipsesOperation", "resource"]


class EclipsesOperation(str, Enum):
    UPCOMING = "upcoming"
    NATAL_CHECK = "natalCheck"
    INTERPRETATION = "interpretation"


ECLIPSES_ENDPOINTS = {
    EclipsesOperation.UPCOMING: "/api/v3/eclipses/upcoming",
    EclipsesOperation.NATAL_CHECK: "/api/v3/eclipses/natal-check",
    EclipsesOperation.INTERPRETATION: "/api/v3/eclipses/interpretation",
}

resource: Resource[EclipsesOperation] = Resource(
    "eclipses",
    EclipsesOperation,
    ECLIPSES_ENDPOINTS,
    description="Eclipse listings and natal eclipse checks",
)


@resource.handles(EclipsesOperation.UPCOMING)
def _upcoming(ctx: RequestContext, op: EclipsesOperation) -> Any:
    return ctx.get(resource.endpoint(op), params={"count": ctx.param("count", 10)})


@resource.handles(EclipsesOperation.NATAL_CHECK)
def _natal_check(ctx: RequestContext, op: EclipsesOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx),
        {
            "date_range": {
                "start_date": build_birth_date(ctx, "start").to_payload(),
                "end_date": build_birth_date(ctx, "end").to_payload(),
            },
            "max_orb": ctx.param("maxOrb", 5),
        },
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(EclipsesOperation.INTERPRETATION)
def _interpretation(ctx: RequestContext, op: EclipsesOperation) -> Any:
    eclipse_id = read_optional(ctx, "eclipseId")
    if not eclipse_id:
        raise ParameterError("eclipseId", ctx.item_index)
    body: Dict[str, Any] = {"eclipse_id": eclipse_id, "language": read_language(ctx)}
    if ctx.param("includePersonal", False):
        body["birth_data"] = build_city_moment(ctx, "birth").to_payload()
    return ctx.post(resource.endpoint(op), body)
