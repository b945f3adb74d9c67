"""PDF horoscopes and natal reports."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_city_moment,
    create_subject_request,
    read_optional,
    read_subject_name,
)
from ..context import RequestContext
from ..options import build_pdf_options, build_pdf_sections
from ._base import Resource

__all__ = ["PdfOperation", "resource"]


class PdfOperation(str, Enum):
    HOROSCOPE_DAILY = "horoscopeDaily"
    HOROSCOPE_WEEKLY = "horoscopeWeekly"
    HOROSCOPE_DATA = "horoscopeData"
    NATAL_REPORT = "natalReport"


PDF_ENDPOINTS = {
    PdfOperation.HOROSCOPE_DAILY: "/api/v3/pdf/horoscope/daily",
    PdfOperation.HOROSCOPE_WEEKLY: "/api/v3/pdf/horoscope/weekly",
    PdfOperation.HOROSCOPE_DATA: "/api/v3/pdf/horoscope/data/{sign}/{date}",
    PdfOperation.NATAL_REPORT: "/api/v3/pdf/natal-report",
}

# Documents come back as-is; only the horoscope data lookup is trimmed.
resource: Resource[PdfOperation] = Resource(
    "pdf",
    PdfOperation,
    PDF_ENDPOINTS,
    raw=(
        PdfOperation.HOROSCOPE_DAILY,
        PdfOperation.HOROSCOPE_WEEKLY,
        PdfOperation.NATAL_REPORT,
    ),
    description="PDF horoscopes and reports",
)


def _today() -> str:
    return datetime.now(UTC).date().isoformat()


@resource.handles(PdfOperation.HOROSCOPE_DATA)
def _horoscope_data(ctx: RequestContext, op: PdfOperation) -> Any:
    sign = ctx.param("horoscopeSign", "Ari")
    target_date = read_optional(ctx, "targetDate") or _today()
    return ctx.get(resource.endpoint(op, sign=sign, date=target_date))


@resource.handles(PdfOperation.HOROSCOPE_DAILY, PdfOperation.HOROSCOPE_WEEKLY)
def _horoscope(ctx: RequestContext, op: PdfOperation) -> Any:
    body: Dict[str, Any] = {
        "sections": build_pdf_sections(ctx),
        "pdf_options": build_pdf_options(ctx),
    }
    target_date = read_optional(ctx, "targetDate")
    if target_date:
        body["target_date"] = target_date
    if ctx.param("pdfMode", "sunSign") == "sunSign":
        body["sign"] = ctx.param("sunSign", "Ari")
    else:
        body["birth_data"] = build_city_moment(ctx, "pdfBirth").to_payload()
    return ctx.post(resource.endpoint(op), body)


@resource.handles(PdfOperation.NATAL_REPORT)
def _natal_report(ctx: RequestContext, op: PdfOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx),
        {"pdf_options": build_pdf_options(ctx)},
        name=read_subject_name(ctx, "name"),
    )
    return ctx.post(resource.endpoint(op), body)
