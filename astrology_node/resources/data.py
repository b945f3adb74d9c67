"""Raw ephemeris data: positions, house cusps, aspects and lunar metrics."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..builders import build_birth_data, build_utc_datetime, create_subject_request
from ..context import RequestContext
from ._base import Resource

__all__ = ["DataOperation", "resource"]


class DataOperation(str, Enum):
    NOW = "now"
    POSITIONS = "positions"
    POSITIONS_ENHANCED = "positionsEnhanced"
    HOUSE_CUSPS = "houseCusps"
    ASPECTS = "aspects"
    ASPECTS_ENHANCED = "aspectsEnhanced"
    LUNAR_METRICS = "lunarMetrics"
    LUNAR_METRICS_ENHANCED = "lunarMetricsEnhanced"
    GLOBAL_POSITIONS = "globalPositions"


DATA_ENDPOINTS = {
    DataOperation.NOW: "/api/v3/data/now",
    DataOperation.POSITIONS: "/api/v3/data/positions",
    DataOperation.POSITIONS_ENHANCED: "/api/v3/data/positions/enhanced",
    DataOperation.HOUSE_CUSPS: "/api/v3/data/house-cusps",
    DataOperation.ASPECTS: "/api/v3/data/aspects",
    DataOperation.ASPECTS_ENHANCED: "/api/v3/data/aspects/enhanced",
    DataOperation.LUNAR_METRICS: "/api/v3/data/lunar-metrics",
    DataOperation.LUNAR_METRICS_ENHANCED: "/api/v3/data/lunar-metrics/enhanced",
    DataOperation.GLOBAL_POSITIONS: "/api/v3/data/global-positions",
}

resource: Resource[DataOperation] = Resource(
    "data",
    DataOperation,
    DATA_ENDPOINTS,
    raw={DataOperation.NOW},
    description="Planetary positions, aspects and lunar metrics",
)


@resource.handles(DataOperation.NOW)
def _now(ctx: RequestContext, op: DataOperation) -> Any:
    # Current sky; birth parameters are ignored.
    return ctx.get(resource.endpoint(op))


@resource.handles(DataOperation.GLOBAL_POSITIONS)
def _global_positions(ctx: RequestContext, op: DataOperation) -> Any:
    return ctx.post(resource.endpoint(op), {"datetime": build_utc_datetime(ctx)})


@resource.handles(
    DataOperation.POSITIONS,
    DataOperation.POSITIONS_ENHANCED,
    DataOperation.HOUSE_CUSPS,
    DataOperation.ASPECTS,
    DataOperation.ASPECTS_ENHANCED,
    DataOperation.LUNAR_METRICS,
    DataOperation.LUNAR_METRICS_ENHANCED,
)
def _subject_data(ctx: RequestContext, op: DataOperation) -> Any:
    body = create_subject_request(build_birth_data(ctx))
    return ctx.post(resource.endpoint(op), body)
