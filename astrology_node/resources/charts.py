"""Chart calculations: natal, relationship, transit, return and predictive charts."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_date_range,
    build_location,
    build_second_subject_birth_data,
    build_transit_time,
    create_two_subject_request,
    read_int,
    read_optional,
    read_subject_name,
)
from ..context import RequestContext
from ..options import build_chart_options
from ._base import Resource

__all__ = ["ChartsOperation", "resource"]


class ChartsOperation(str, Enum):
    NATAL = "natal"
    SYNASTRY = "synastry"
    COMPOSITE = "composite"
    TRANSIT = "transit"
    SOLAR_RETURN = "solarReturn"
    SOLAR_RETURN_TRANSITS = "solarReturnTransits"
    LUNAR_RETURN = "lunarReturn"
    LUNAR_RETURN_TRANSITS = "lunarReturnTransits"
    PROGRESSIONS = "progressions"
    DIRECTIONS = "directions"
    NATAL_TRANSITS = "natalTransits"


_Op = ChartsOperation

_PATHS = {
    _Op.NATAL: "natal",
    _Op.SYNASTRY: "synastry",
    _Op.COMPOSITE: "composite",
    _Op.TRANSIT: "transit",
    _Op.SOLAR_RETURN: "solar-return",
    _Op.SOLAR_RETURN_TRANSITS: "solar-return-transits",
    _Op.LUNAR_RETURN: "lunar-return",
    _Op.LUNAR_RETURN_TRANSITS: "lunar-return-transits",
    _Op.PROGRESSIONS: "progressions",
    _Op.DIRECTIONS: "directions",
    _Op.NATAL_TRANSITS: "natal-transits",
}
CHARTS_ENDPOINTS = {op: f"/api/v3/charts/{path}" for op, path in _PATHS.items()}

SOLAR_RETURN_OPERATIONS = (_Op.SOLAR_RETURN, _Op.SOLAR_RETURN_TRANSITS)
LUNAR_RETURN_OPERATIONS = (_Op.LUNAR_RETURN, _Op.LUNAR_RETURN_TRANSITS)
# Operations whose window is a date range and whose hits are filtered by orb.
RANGE_OPERATIONS = frozenset(
    {_Op.SOLAR_RETURN_TRANSITS, _Op.LUNAR_RETURN_TRANSITS, _Op.NATAL_TRANSITS}
)
_TARGET_DATE_KEYS = {
    _Op.PROGRESSIONS: "progression_date",
    _Op.DIRECTIONS: "direction_date",
}

resource: Resource[ChartsOperation] = Resource(
    "charts",
    ChartsOperation,
    CHARTS_ENDPOINTS,
    description="Natal, relationship, transit, return and predictive charts",
)


def _subject(ctx: RequestContext, *, with_second: bool = False) -> Dict[str, Any]:
    birth_data = build_birth_data(ctx).to_payload()
    if with_second:
        second = read_int(ctx, "second")
        if second > 0:
            birth_data["second"] = second
    subject: Dict[str, Any] = {"birth_data": birth_data}
    name = read_subject_name(ctx)
    if name:
        subject["name"] = name
    return subject


def _range_fields(ctx: RequestContext, op: ChartsOperation) -> Dict[str, Any]:
    if op not in RANGE_OPERATIONS:
        return {}
    return {**build_date_range(ctx), "orb": ctx.param("orb", 1.0)}


@resource.handles(_Op.NATAL)
def _natal(ctx: RequestContext, op: ChartsOperation) -> Any:
    body = {"subject": _subject(ctx, with_second=True), "options": build_chart_options(ctx)}
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.SYNASTRY, _Op.COMPOSITE)
def _pair(ctx: RequestContext, op: ChartsOperation) -> Any:
    body = create_two_subject_request(
        build_birth_data(ctx),
        build_second_subject_birth_data(ctx),
        {"options": build_chart_options(ctx)},
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.TRANSIT)
def _transit(ctx: RequestContext, op: ChartsOperation) -> Any:
    body = {
        "subject": _subject(ctx),
        "transit_time": {"datetime": build_transit_time(ctx).to_payload()},
        "options": build_chart_options(ctx),
    }
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*SOLAR_RETURN_OPERATIONS)
def _solar_return(ctx: RequestContext, op: ChartsOperation) -> Any:
    body: Dict[str, Any] = {
        "subject": _subject(ctx),
        "return_year": ctx.param("returnYear", 2024),
    }
    if ctx.param("useRelocatedReturn", False):
        body["return_location"] = build_location(ctx, "return")
    body.update(_range_fields(ctx, op))
    body["options"] = build_chart_options(ctx)
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*LUNAR_RETURN_OPERATIONS)
def _lunar_return(ctx: RequestContext, op: ChartsOperation) -> Any:
    body: Dict[str, Any] = {"subject": _subject(ctx)}
    return_date = read_optional(ctx, "lunarReturnDate")
    if return_date:
        body["return_date"] = return_date
    body.update(_range_fields(ctx, op))
    body["options"] = build_chart_options(ctx)
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*_TARGET_DATE_KEYS)
def _predictive(ctx: RequestContext, op: ChartsOperation) -> Any:
    body: Dict[str, Any] = {"subject": _subject(ctx)}
    target_date = read_optional(ctx, "targetDate")
    if target_date:
        body[_TARGET_DATE_KEYS[op]] = target_date
    body["options"] = build_chart_options(ctx)
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.NATAL_TRANSITS)
def _natal_transits(ctx: RequestContext, op: ChartsOperation) -> Any:
    body = {
        "subject": _subject(ctx),
        **_range_fields(ctx, op),
        "options": build_chart_options(ctx),
    }
    return ctx.post(resource.endpoint(op), body)
