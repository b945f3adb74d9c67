"""Zi Wei Dou Shu (Purple Star) charts."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_birth_data, read_language, read_subject_name
from ..context import RequestContext
from ._base import Resource

__all__ = ["ZiweiOperation", "resource"]


class ZiweiOperation(str, Enum):
    CHART = "chart"


ZIWEI_ENDPOINTS = {ZiweiOperation.CHART: "/api/v3/ziwei/chart"}

resource: Resource[ZiweiOperation] = Resource(
    "ziwei",
    ZiweiOperation,
    ZIWEI_ENDPOINTS,
    description="Zi Wei Dou Shu charts",
)


@resource.handles(ZiweiOperation.CHART)
def _chart(ctx: RequestContext, op: ZiweiOperation) -> Any:
    body: Dict[str, Any] = {
        "birth_data": build_birth_data(ctx).to_payload(),
        "gender": ctx.param("gender", "male"),
        "language": read_language(ctx),
    }
    name = read_subject_name(ctx, "name")
    if name:
        body["name"] = name
    return ctx.post(resource.endpoint(op), body)
