"""Chart wheel images."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..builders import (
    build_birth_data,
    build_second_subject_birth_data,
    build_transit_time,
    create_subject_request,
    create_two_subject_request,
)
from ..context import RequestContext
from ..options import build_render_options
from ._base import Resource

__all__ = ["RenderOperation", "resource"]


class RenderOperation(str, Enum):
    NATAL = "natal"
    TRANSIT = "transit"
    SYNASTRY = "synastry"
    COMPOSITE = "composite"


RENDER_ENDPOINTS = {
    RenderOperation.NATAL: "/api/v3/render/natal",
    RenderOperation.TRANSIT: "/api/v3/render/transit",
    RenderOperation.SYNASTRY: "/api/v3/render/synastry",
    RenderOperation.COMPOSITE: "/api/v3/render/composite",
}

resource: Resource[RenderOperation] = Resource(
    "render",
    RenderOperation,
    RENDER_ENDPOINTS,
    simplify=False,
    description="Rendered chart images (SVG/PNG)",
)


@resource.handles(RenderOperation.NATAL)
def _natal(ctx: RequestContext, op: RenderOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx), {"render_options": build_render_options(ctx)}
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(RenderOperation.TRANSIT)
def _transit(ctx: RequestContext, op: RenderOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx),
        {
            "transit_time": {"datetime": build_transit_time(ctx).to_payload()},
            "render_options": build_render_options(ctx),
        },
    )
    return ctx.post(resource.endpoint(op), body)


@resource.handles(RenderOperation.SYNASTRY, RenderOperation.COMPOSITE)
def _pair(ctx: RequestContext, op: RenderOperation) -> Any:
    body = create_two_subject_request(
        build_birth_data(ctx),
        build_second_subject_birth_data(ctx),
        {"render_options": build_render_options(ctx)},
    )
    return ctx.post(resource.endpoint(op), body)
