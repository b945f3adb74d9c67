"""Sun-sign and personal horoscopes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Tuple

from ..builders import (
    build_birth_data,
    create_subject_request,
    current_year,
    read_language,
    read_optional,
)
from ..context import RequestContext
from ._base import Resource

__all__ = ["HoroscopeOperation", "resource"]


class HoroscopeOperation(str, Enum):
    SIGN_DAILY = "signDaily"
    SIGN_DAILY_TEXT = "signDailyText"
    SIGN_WEEKLY = "signWeekly"
    SIGN_WEEKLY_TEXT = "signWeeklyText"
    SIGN_MONTHLY = "signMonthly"
    SIGN_MONTHLY_TEXT = "signMonthlyText"
    SIGN_YEARLY = "signYearly"
    SIGN_YEARLY_TEXT = "signYearlyText"
    PERSONAL_DAILY = "personalDaily"
    PERSONAL_DAILY_TEXT = "personalDailyText"
    PERSONAL_WEEKLY = "personalWeekly"
    PERSONAL_WEEKLY_TEXT = "personalWeeklyText"
    PERSONAL_MONTHLY = "personalMonthly"
    PERSONAL_MONTHLY_TEXT = "personalMonthlyText"
    PERSONAL_YEARLY = "personalYearly"
    PERSONAL_YEARLY_TEXT = "personalYearlyText"
    CHINESE_BAZI = "chineseBazi"

    @property
    def period(self) -> Tuple[str, str, bool]:
        """``(scope, period, is_text)``, e.g. ``("sign", "weekly", True)``."""

        name = self.value
        is_text = name.endswith("Text")
        if is_text:
            name = name[: -len("Text")]
        scope = "sign" if name.startswith("sign") else "personal"
        return scope, name[len(scope):].lower(), is_text


_Op = HoroscopeOperation


def _horoscope_path(op: HoroscopeOperation) -> str:
    scope, period, is_text = op.period
    suffix = "/text" if is_text else ""
    return f"/api/v3/horoscope/{scope}/{period}{suffix}"


HOROSCOPE_ENDPOINTS = {op: _horoscope_path(op) for op in HoroscopeOperation if op is not _Op.CHINESE_BAZI}
HOROSCOPE_ENDPOINTS[_Op.CHINESE_BAZI] = "/api/v3/horoscope/chinese/bazi"

SIGN_OPERATIONS = tuple(op for op in HoroscopeOperation if op.value.startswith("sign"))
PERSONAL_OPERATIONS = tuple(op for op in HoroscopeOperation if op.value.startswith("personal"))

resource: Resource[HoroscopeOperation] = Resource(
    "horoscope",
    HoroscopeOperation,
    HOROSCOPE_ENDPOINTS,
    simplify=False,
    description="Daily, weekly, monthly and yearly horoscopes",
)


def _forecast_fields(ctx: RequestContext, op: HoroscopeOperation, date_key: str) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "language": read_language(ctx),
        "tradition": ctx.param("tradition", "universal"),
    }
    target_date = read_optional(ctx, "targetDate")
    if target_date:
        fields[date_key] = target_date
    if op.period[2]:
        fields["format"] = ctx.param("textFormat", "paragraph")
        fields["emoji"] = ctx.param("emoji", True)
    return fields


@resource.handles(*SIGN_OPERATIONS)
def _sign(ctx: RequestContext, op: HoroscopeOperation) -> Any:
    body = {"sign": ctx.param("sign", "aries"), **_forecast_fields(ctx, op, "date")}
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*PERSONAL_OPERATIONS)
def _personal(ctx: RequestContext, op: HoroscopeOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx), _forecast_fields(ctx, op, "target_date")
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.CHINESE_BAZI)
def _bazi(ctx: RequestContext, op: HoroscopeOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx),
        {"year": ctx.param("baziYear", current_year()), "language": read_language(ctx)},
    )
    return ctx.post(resource.endpoint(op), body)
