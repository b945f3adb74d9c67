"""Vedic (Jyotish) charts, dashas, doshas and panchang."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_second_subject_birth_data,
    create_subject_request,
    create_two_subject_request,
    read_language,
)
from ..context import RequestContext
from ..options import build_vedic_options
from ._base import Resource

__all__ = ["VedicOperation", "resource"]


class VedicOperation(str, Enum):
    CHART = "chart"
    CHART_RENDER = "chartRender"
    BIRTH_DETAILS = "birthDetails"
    VIMSHOTTARI_DASHA = "vimshottariDasha"
    CHARA_DASHA = "charaDasha"
    YOGINI_DASHA = "yoginiDasha"
    NAKSHATRA = "nakshatra"
    DIVISIONAL_CHART = "divisionalChart"
    ASHTAKVARGA = "ashtakvarga"
    SHADBALA = "shadbala"
    YOGA_ANALYSIS = "yogaAnalysis"
    KUNDLI_MATCHING = "kundliMatching"
    MANGLIK_DOSHA = "manglikDosha"
    KAAL_SARPA_DOSHA = "kaalSarpaDosha"
    SADE_SATI = "sadeSati"
    TRANSIT = "transit"
    VARSHAPHAL = "varshaphal"
    PANCHANG = "panchang"
    REGIONAL_PANCHANG = "regionalPanchang"
    FESTIVAL_CALENDAR = "festivalCalendar"
    KP_SYSTEM = "kpSystem"
    REMEDIES = "remedies"


_Op = VedicOperation

_PATHS = {
    _Op.CHART: "chart",
    # Only the SVG rendering is requested.
    _Op.CHART_RENDER: "chart/render/svg",
    _Op.BIRTH_DETAILS: "birth-details",
    _Op.VIMSHOTTARI_DASHA: "vimshottari-dasha",
    _Op.CHARA_DASHA: "chara-dasha",
    _Op.YOGINI_DASHA: "yogini-dasha",
    _Op.NAKSHATRA: "nakshatra-predictions",
    _Op.DIVISIONAL_CHART: "divisional-chart",
    _Op.ASHTAKVARGA: "ashtakvarga",
    _Op.SHADBALA: "shadbala",
    _Op.YOGA_ANALYSIS: "yoga-analysis",
    _Op.KUNDLI_MATCHING: "kundli-matching",
    _Op.MANGLIK_DOSHA: "manglik-dosha",
    _Op.KAAL_SARPA_DOSHA: "kaal-sarpa-dosha",
    _Op.SADE_SATI: "sade-sati",
    _Op.TRANSIT: "transit",
    _Op.VARSHAPHAL: "varshaphal",
    _Op.PANCHANG: "panchang",
    _Op.REGIONAL_PANCHANG: "regional-panchang",
    _Op.FESTIVAL_CALENDAR: "festival-calendar",
    _Op.KP_SYSTEM: "kp-system",
    _Op.REMEDIES: "remedies",
}
VEDIC_ENDPOINTS = {op: f"/api/v3/vedic/{path}" for op, path in _PATHS.items()}

DASHA_OPERATIONS = (_Op.VIMSHOTTARI_DASHA, _Op.CHARA_DASHA, _Op.YOGINI_DASHA)
LOCALISED_OPERATIONS = (_Op.NAKSHATRA, _Op.REMEDIES, _Op.YOGA_ANALYSIS)
PANCHANG_OPERATIONS = (_Op.PANCHANG, _Op.REGIONAL_PANCHANG)
NATAL_OPERATIONS = (
    _Op.BIRTH_DETAILS,
    _Op.ASHTAKVARGA,
    _Op.SHADBALA,
    _Op.MANGLIK_DOSHA,
    _Op.KAAL_SARPA_DOSHA,
    _Op.SADE_SATI,
    _Op.TRANSIT,
    _Op.KP_SYSTEM,
)

resource: Resource[VedicOperation] = Resource(
    "vedic",
    VedicOperation,
    VEDIC_ENDPOINTS,
    description="Vedic astrology",
)


def _subject_body(ctx: RequestContext, **fields: Any) -> Dict[str, Any]:
    """``{subject, **fields, chart_options}`` for the primary subject."""

    return create_subject_request(
        build_birth_data(ctx), {**fields, "chart_options": build_vedic_options(ctx)}
    )


@resource.handles(*NATAL_OPERATIONS)
def _natal(ctx: RequestContext, op: VedicOperation) -> Any:
    return ctx.post(resource.endpoint(op), _subject_body(ctx))


@resource.handles(_Op.CHART, _Op.CHART_RENDER)
def _chart(ctx: RequestContext, op: VedicOperation) -> Any:
    body = _subject_body(ctx, style=ctx.param("vedicStyle", "north_indian"))
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.DIVISIONAL_CHART)
def _divisional(ctx: RequestContext, op: VedicOperation) -> Any:
    body = _subject_body(ctx, division=ctx.param("divisionalChart", "D9"))
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*DASHA_OPERATIONS)
def _dasha(ctx: RequestContext, op: VedicOperation) -> Any:
    return ctx.post(resource.endpoint(op), _subject_body(ctx, years=ctx.param("dashaYears", 120)))


@resource.handles(_Op.VARSHAPHAL)
def _varshaphal(ctx: RequestContext, op: VedicOperation) -> Any:
    return ctx.post(resource.endpoint(op), _subject_body(ctx, year=ctx.param("targetYear")))


@resource.handles(*LOCALISED_OPERATIONS)
def _localised(ctx: RequestContext, op: VedicOperation) -> Any:
    return ctx.post(resource.endpoint(op), _subject_body(ctx, language=read_language(ctx)))


@resource.handles(_Op.KUNDLI_MATCHING)
def _kundli(ctx: RequestContext, op: VedicOperation) -> Any:
    body = create_two_subject_request(
        build_birth_data(ctx),
        build_second_subject_birth_data(ctx),
        {"chart_options": build_vedic_options(ctx)},
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*PANCHANG_OPERATIONS)
def _panchang(ctx: RequestContext, op: VedicOperation) -> Any:
    body = {
        "datetime_location": build_birth_data(ctx).to_payload(),
        **build_vedic_options(ctx),
    }
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.FESTIVAL_CALENDAR)
def _festivals(ctx: RequestContext, op: VedicOperation) -> Any:
    body = {"year": ctx.param("targetYear"), **build_vedic_options(ctx)}
    return ctx.post(resource.endpoint(op), body)
