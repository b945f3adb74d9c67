"""Fixed star positions, conjunctions and reports."""

from __future__ import annotations

from enum import Enum
from typing import Any

from ..builders import build_birth_data, read_subject_name, subject_payload
from ..context import RequestContext
from ..options import build_fixed_star_options
from ._base import Resource

__all__ = ["FixedStarsOperation", "resource"]


class FixedStarsOperation(str, Enum):
    POSITIONS = "positions"
    CONJUNCTIONS = "conjunctions"
    REPORT = "report"
    PRESETS = "presets"


FIXED_STARS_ENDPOINTS = {
    FixedStarsOperation.POSITIONS: "/api/v3/fixed-stars/positions",
    FixedStarsOperation.CONJUNCTIONS: "/api/v3/fixed-stars/conjunctions",
    FixedStarsOperation.REPORT: "/api/v3/fixed-stars/report",
    FixedStarsOperation.PRESETS: "/api/v3/fixed-stars/presets",
}

resource: Resource[FixedStarsOperation] = Resource(
    "fixedStars",
    FixedStarsOperation,
    FIXED_STARS_ENDPOINTS,
    description="Fixed star positions and conjunctions",
)


@resource.handles(FixedStarsOperation.PRESETS)
def _presets(ctx: RequestContext, op: FixedStarsOperation) -> Any:
    return ctx.get(resource.endpoint(op))


@resource.handles(
    FixedStarsOperation.POSITIONS,
    FixedStarsOperation.CONJUNCTIONS,
    FixedStarsOperation.REPORT,
)
def _stars(ctx: RequestContext, op: FixedStarsOperation) -> Any:
    body = {
        "subject": subject_payload(build_birth_data(ctx), read_subject_name(ctx, "name")),
        "fixed_stars": build_fixed_star_options(
            ctx, custom_orbs=op is not FixedStarsOperation.POSITIONS
        ),
    }
    return ctx.post(resource.endpoint(op), body)
