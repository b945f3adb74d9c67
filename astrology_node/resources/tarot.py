"""Tarot glossary, draws, reports and astro-tarot analysis."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_second_subject_birth_data,
    read_int,
    read_optional,
)
from ..context import RequestContext
from ..errors import ParameterError
from ..options import build_tarot_options, split_csv
from ._base import Resource

__all__ = ["TarotOperation", "resource"]


class TarotOperation(str, Enum):
    GLOSSARY_CARDS = "glossaryCards"
    GLOSSARY_SPREADS = "glossarySpreads"
    GLOSSARY_CARD_DETAIL = "glossaryCardDetail"
    SEARCH_CARDS = "searchCards"
    DAILY_CARD = "dailyCard"
    DRAW_CARDS = "drawCards"
    REPORT_SINGLE = "reportSingle"
    REPORT_THREE_CARD = "reportThreeCard"
    REPORT_CELTIC_CROSS = "reportCelticCross"
    REPORT_SYNASTRY = "reportSynastry"
    REPORT_HOUSES = "reportHouses"
    REPORT_TREE_OF_LIFE = "reportTreeOfLife"
    ANALYSIS_QUINTESSENCE = "analysisQuintessence"
    ANALYSIS_BIRTH_CARDS = "analysisBirthCards"
    ANALYSIS_DIGNITIES = "analysisDignities"
    ANALYSIS_TIMING = "analysisTiming"
    ANALYSIS_OPTIMAL_TIMES = "analysisOptimalTimes"
    ANALYSIS_TRANSIT_REPORT = "analysisTransitReport"
    ANALYSIS_NATAL_REPORT = "analysisNatalReport"


_Op = TarotOperation

TAROT_ENDPOINTS = {
    _Op.GLOSSARY_CARDS: "/api/v3/tarot/glossary/cards",
    _Op.GLOSSARY_SPREADS: "/api/v3/tarot/glossary/spreads",
    _Op.GLOSSARY_CARD_DETAIL: "/api/v3/tarot/glossary/cards/{card_id}",
    _Op.SEARCH_CARDS: "/api/v3/tarot/cards/search",
    _Op.DAILY_CARD: "/api/v3/tarot/cards/daily",
    _Op.DRAW_CARDS: "/api/v3/tarot/cards/draw",
    _Op.REPORT_SINGLE: "/api/v3/tarot/reports/single",
    _Op.REPORT_THREE_CARD: "/api/v3/tarot/reports/three-card",
    _Op.REPORT_CELTIC_CROSS: "/api/v3/tarot/reports/celtic-cross",
    _Op.REPORT_SYNASTRY: "/api/v3/tarot/reports/synastry",
    _Op.REPORT_HOUSES: "/api/v3/tarot/reports/houses",
    _Op.REPORT_TREE_OF_LIFE: "/api/v3/tarot/reports/tree-of-life",
    _Op.ANALYSIS_QUINTESSENCE: "/api/v3/tarot/analysis/quintessence",
    _Op.ANALYSIS_BIRTH_CARDS: "/api/v3/tarot/analysis/birth-cards",
    _Op.ANALYSIS_DIGNITIES: "/api/v3/tarot/analysis/dignities",
    _Op.ANALYSIS_TIMING: "/api/v3/tarot/analysis/timing",
    _Op.ANALYSIS_OPTIMAL_TIMES: "/api/v3/tarot/analysis/optimal-times",
    _Op.ANALYSIS_TRANSIT_REPORT: "/api/v3/tarot/analysis/transit-report",
    _Op.ANALYSIS_NATAL_REPORT: "/api/v3/tarot/analysis/natal-report",
}

LOOKUP_OPERATIONS = (
    _Op.GLOSSARY_CARDS,
    _Op.GLOSSARY_SPREADS,
    _Op.GLOSSARY_CARD_DETAIL,
    _Op.SEARCH_CARDS,
    _Op.DAILY_CARD,
)
SPREAD_REPORTS = (
    _Op.REPORT_SINGLE,
    _Op.REPORT_THREE_CARD,
    _Op.REPORT_CELTIC_CROSS,
    _Op.REPORT_HOUSES,
    _Op.REPORT_TREE_OF_LIFE,
)
CARD_ANALYSES = (_Op.ANALYSIS_QUINTESSENCE, _Op.ANALYSIS_DIGNITIES, _Op.ANALYSIS_TIMING)
BIRTH_ANALYSES = (
    _Op.ANALYSIS_BIRTH_CARDS,
    _Op.ANALYSIS_TRANSIT_REPORT,
    _Op.ANALYSIS_NATAL_REPORT,
)

# Card attribute filters shared by the glossary listing and the search.
_CARD_FILTERS = ("arcana", "suit", "element", "planet", "sign")
_BIRTH_QUERY = ("year", "month", "day", "hour", "minute")

resource: Resource[TarotOperation] = Resource(
    "tarot",
    TarotOperation,
    TAROT_ENDPOINTS,
    raw=LOOKUP_OPERATIONS,
    description="Tarot cards, spreads and astro-tarot analysis",
)


def _card_filters(ctx: RequestContext) -> Dict[str, Any]:
    query: Dict[str, Any] = {}
    for name in _CARD_FILTERS:
        value = read_optional(ctx, name)
        if value:
            query[name] = value
    return query


def _with_life_area(ctx: RequestContext, body: Dict[str, Any]) -> Dict[str, Any]:
    life_area = read_optional(ctx, "lifeArea")
    if life_area:
        body["life_area"] = life_area
    return body


@resource.handles(_Op.GLOSSARY_CARDS)
def _glossary_cards(ctx: RequestContext, op: TarotOperation) -> Any:
    query = _card_filters(ctx)
    house = read_int(ctx, "house")
    if house > 0:
        query["house"] = house
    return ctx.get(resource.endpoint(op), params=query)


@resource.handles(_Op.GLOSSARY_SPREADS)
def _glossary_spreads(ctx: RequestContext, op: TarotOperation) -> Any:
    return ctx.get(resource.endpoint(op))


@resource.handles(_Op.GLOSSARY_CARD_DETAIL)
def _card_detail(ctx: RequestContext, op: TarotOperation) -> Any:
    card_id = read_optional(ctx, "cardId")
    if not card_id:
        raise ParameterError("cardId", ctx.item_index)
    return ctx.get(resource.endpoint(op, card_id=card_id))


@resource.handles(_Op.SEARCH_CARDS)
def _search(ctx: RequestContext, op: TarotOperation) -> Any:
    query: Dict[str, Any] = {}
    keyword = read_optional(ctx, "keyword")
    if keyword:
        query["keyword"] = keyword
    life_area = read_optional(ctx, "lifeArea")
    if life_area:
        query["life_area"] = life_area
    query.update(_card_filters(ctx))
    query["page"] = ctx.param("page", 1)
    query["page_size"] = ctx.param("pageSize", 20)
    return ctx.get(resource.endpoint(op), params=query)


@resource.handles(_Op.DAILY_CARD)
def _daily(ctx: RequestContext, op: TarotOperation) -> Any:
    """Daily card for ``userId``; birth fields personalise it when a year is given.

    Zero means "not set" for every birth field, and month through minute are
    ignored without a year.
    """

    query: Dict[str, Any] = {"user_id": ctx.param("userId")}
    life_area = read_optional(ctx, "lifeArea")
    if life_area:
        query["life_area"] = life_area
    if read_int(ctx, "year") > 0:
        for name in _BIRTH_QUERY:
            value = read_int(ctx, name)
            if value > 0:
                query[f"birth_{name}"] = value
    return ctx.get(resource.endpoint(op), params=query)


@resource.handles(_Op.DRAW_CARDS)
def _draw(ctx: RequestContext, op: TarotOperation) -> Any:
    body = {
        "count": ctx.param("drawCount", 1),
        "exclude_reversed": ctx.param("excludeReversed", False),
        "exclude_majors": ctx.param("excludeMajors", False),
        "exclude_minors": ctx.param("excludeMinors", False),
    }
    return ctx.post(resource.endpoint(op), _with_life_area(ctx, body))


@resource.handles(*SPREAD_REPORTS)
def _report(ctx: RequestContext, op: TarotOperation) -> Any:
    body = {"birth_data": build_birth_data(ctx).to_payload(), **build_tarot_options(ctx)}
    return ctx.post(resource.endpoint(op), _with_life_area(ctx, body))


@resource.handles(_Op.REPORT_SYNASTRY)
def _report_synastry(ctx: RequestContext, op: TarotOperation) -> Any:
    body = {
        "birth_data": build_birth_data(ctx).to_payload(),
        "partner_birth_data": build_second_subject_birth_data(ctx).to_payload(),
        **build_tarot_options(ctx),
    }
    return ctx.post(resource.endpoint(op), _with_life_area(ctx, body))


@resource.handles(*CARD_ANALYSES)
def _card_analysis(ctx: RequestContext, op: TarotOperation) -> Any:
    body = {"cards": split_csv(ctx.param("cardIds")), **build_tarot_options(ctx)}
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*BIRTH_ANALYSES)
def _birth_analysis(ctx: RequestContext, op: TarotOperation) -> Any:
    body = {"birth_data": build_birth_data(ctx).to_payload(), **build_tarot_options(ctx)}
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.ANALYSIS_OPTIMAL_TIMES)
def _optimal_times(ctx: RequestContext, op: TarotOperation) -> Any:
    return ctx.post(resource.endpoint(op), build_tarot_options(ctx))
