"""Chinese astrology: zodiac, solar terms, BaZi and forecasts."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_second_subject_birth_data,
    create_two_subject_request,
    read_language,
    subject_payload,
)
from ..context import RequestContext
from ._base import Resource

__all__ = ["ChineseOperation", "resource"]


class ChineseOperation(str, Enum):
    ZODIAC_ANIMAL = "zodiacAnimal"
    SOLAR_TERMS = "solarTerms"
    ELEMENTS_BALANCE = "elementsBalance"
    BAZI = "bazi"
    COMPATIBILITY = "compatibility"
    LUCK_PILLARS = "luckPillars"
    MING_GUA = "mingGua"
    YEARLY_FORECAST = "yearlyForecast"


CHINESE_ENDPOINTS = {
    ChineseOperation.ZODIAC_ANIMAL: "/api/v3/chinese/zodiac/{animal}",
    ChineseOperation.SOLAR_TERMS: "/api/v3/chinese/calendar/solar-terms/{year}",
    ChineseOperation.ELEMENTS_BALANCE: "/api/v3/chinese/elements/balance/{year}",
    ChineseOperation.BAZI: "/api/v3/chinese/bazi",
    ChineseOperation.COMPATIBILITY: "/api/v3/chinese/compatibility",
    ChineseOperation.LUCK_PILLARS: "/api/v3/chinese/luck-pillars",
    ChineseOperation.MING_GUA: "/api/v3/chinese/ming-gua",
    ChineseOperation.YEARLY_FORECAST: "/api/v3/chinese/yearly-forecast",
}

resource: Resource[ChineseOperation] = Resource(
    "chinese",
    ChineseOperation,
    CHINESE_ENDPOINTS,
    description="Chinese zodiac, calendar and BaZi",
)


@resource.handles(ChineseOperation.ZODIAC_ANIMAL)
def _zodiac_animal(ctx: RequestContext, op: ChineseOperation) -> Any:
    animal = ctx.param("zodiacAnimal", "dragon")
    return ctx.get(resource.endpoint(op, animal=animal))


@resource.handles(ChineseOperation.SOLAR_TERMS, ChineseOperation.ELEMENTS_BALANCE)
def _calendar_year(ctx: RequestContext, op: ChineseOperation) -> Any:
    year = ctx.param("chineseYear", 2024)
    return ctx.get(resource.endpoint(op, year=year))


@resource.handles(ChineseOperation.COMPATIBILITY)
def _compatibility(ctx: RequestContext, op: ChineseOperation) -> Any:
    body = create_two_subject_request(
        build_birth_data(ctx),
        build_second_subject_birth_data(ctx),
        {"language": read_language(ctx)},
    )
    return ctx.post(resource.endpoint(op), body)


def _tradition_fields(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "tradition": ctx.param("chineseTradition", "classical"),
        "analysis_depth": ctx.param("analysisDepth", "standard"),
    }


@resource.handles(
    ChineseOperation.BAZI,
    ChineseOperation.LUCK_PILLARS,
    ChineseOperation.MING_GUA,
    ChineseOperation.YEARLY_FORECAST,
)
def _birth_chart(ctx: RequestContext, op: ChineseOperation) -> Any:
    subject = subject_payload(build_birth_data(ctx))
    body: Dict[str, Any] = {"subject": subject, "language": read_language(ctx)}
    if op in (ChineseOperation.BAZI, ChineseOperation.LUCK_PILLARS):
        subject["gender"] = ctx.param("gender", "male")
    if op is ChineseOperation.BAZI:
        body["include_luck_pillars"] = ctx.param("includeLuckPillars", False)
        body["include_annual_pillars"] = ctx.param("includeAnnualPillars", False)
    if op in (ChineseOperation.BAZI, ChineseOperation.YEARLY_FORECAST):
        body.update(_tradition_fields(ctx))
    return ctx.post(resource.endpoint(op), body)
