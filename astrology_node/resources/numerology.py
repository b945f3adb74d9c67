"""Numerology core numbers, full profiles and compatibility."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_birth_date, read_language, read_optional
from ..context import RequestContext
from ..errors import ParameterError
from ._base import Resource

__all__ = ["NumerologyOperation", "resource"]


class NumerologyOperation(str, Enum):
    CORE_NUMBERS = "coreNumbers"
    COMPREHENSIVE = "comprehensive"
    COMPATIBILITY = "compatibility"


NUMEROLOGY_ENDPOINTS = {
    NumerologyOperation.CORE_NUMBERS: "/api/v3/numerology/core-numbers",
    NumerologyOperation.COMPREHENSIVE: "/api/v3/numerology/comprehensive",
    NumerologyOperation.COMPATIBILITY: "/api/v3/numerology/compatibility",
}

resource: Resource[NumerologyOperation] = Resource(
    "numerology",
    NumerologyOperation,
    NUMEROLOGY_ENDPOINTS,
    description="Name and birth date numerology",
)


def _person(ctx: RequestContext, name_param: str, prefix: str) -> Dict[str, Any]:
    # Numerology needs the full name; the birth date carries no time or place.
    name = read_optional(ctx, name_param)
    if not name:
        raise ParameterError(name_param, ctx.item_index)
    return {"name": name, "birth_data": build_birth_date(ctx, prefix).to_payload()}


def _options(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "language": read_language(ctx),
        "include_interpretations": ctx.param("includeInterpretations", True),
    }


@resource.handles(NumerologyOperation.CORE_NUMBERS, NumerologyOperation.COMPREHENSIVE)
def _profile(ctx: RequestContext, op: NumerologyOperation) -> Any:
    body = {"subject": _person(ctx, "subjectName", ""), "options": _options(ctx)}
    return ctx.post(resource.endpoint(op), body)


@resource.handles(NumerologyOperation.COMPATIBILITY)
def _compatibility(ctx: RequestContext, op: NumerologyOperation) -> Any:
    body = {
        "subjects": [
            _person(ctx, "subjectName", ""),
            _person(ctx, "subject2Name", "subject2"),
        ],
        "options": _options(ctx),
    }
    return ctx.post(resource.endpoint(op), body)
