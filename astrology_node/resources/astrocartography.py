"""Astrocartography: planetary lines, relocation and location scoring."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_birth_data, create_subject_request
from ..context import RequestContext
from ..options import build_map_options, build_target_location, build_visual_options
from ._base import Resource

__all__ = ["AstrocartographyOperation", "resource"]


class AstrocartographyOperation(str, Enum):
    SUPPORTED_FEATURES = "supportedFeatures"
    LINE_MEANINGS = "lineMeanings"
    MAP = "map"
    RENDER = "render"
    LINES = "lines"
    LOCATION_ANALYSIS = "locationAnalysis"
    SEARCH_LOCATIONS = "searchLocations"
    COMPARE_LOCATIONS = "compareLocations"
    RELOCATION_CHART = "relocationChart"
    POWER_ZONES = "powerZones"
    PARAN_MAP = "paranMap"
    ASTRODYNES = "astrodynes"
    ASTRODYNES_COMPARE = "astrodynesCompare"


_Op = AstrocartographyOperation

ASTROCARTOGRAPHY_ENDPOINTS = {
    _Op.SUPPORTED_FEATURES: "/api/v3/astrocartography/supported-features",
    _Op.LINE_MEANINGS: "/api/v3/astrocartography/line-meanings",
    _Op.MAP: "/api/v3/astrocartography/map",
    _Op.RENDER: "/api/v3/astrocartography/render",
    _Op.LINES: "/api/v3/astrocartography/lines",
    _Op.LOCATION_ANALYSIS: "/api/v3/astrocartography/location-analysis",
    _Op.SEARCH_LOCATIONS: "/api/v3/astrocartography/search-locations",
    _Op.COMPARE_LOCATIONS: "/api/v3/astrocartography/compare-locations",
    _Op.RELOCATION_CHART: "/api/v3/astrocartography/relocation-chart",
    _Op.POWER_ZONES: "/api/v3/astrocartography/power-zones",
    _Op.PARAN_MAP: "/api/v3/astrocartography/paran-map",
    _Op.ASTRODYNES: "/api/v3/astrocartography/astrodynes",
    _Op.ASTRODYNES_COMPARE: "/api/v3/astrocartography/astrodynes/compare",
}

PLANET_OPERATIONS = frozenset({_Op.MAP, _Op.RENDER, _Op.LINES, _Op.PARAN_MAP})
LINE_TYPE_OPERATIONS = frozenset({_Op.MAP, _Op.RENDER, _Op.LINES})
VISUAL_OPERATIONS = frozenset({_Op.MAP, _Op.RENDER, _Op.PARAN_MAP})
TARGET_OPERATIONS = frozenset({_Op.LOCATION_ANALYSIS, _Op.RELOCATION_CHART, _Op.ASTRODYNES})
POWER_TYPE_OPERATIONS = frozenset({_Op.POWER_ZONES, _Op.SEARCH_LOCATIONS})

resource: Resource[AstrocartographyOperation] = Resource(
    "astrocartography",
    AstrocartographyOperation,
    ASTROCARTOGRAPHY_ENDPOINTS,
    description="Relocation maps and location analysis",
)


@resource.handles(_Op.SUPPORTED_FEATURES, _Op.LINE_MEANINGS)
def _reference(ctx: RequestContext, op: AstrocartographyOperation) -> Any:
    return ctx.get(resource.endpoint(op))


def build_body(ctx: RequestContext, op: AstrocartographyOperation) -> Dict[str, Any]:
    body = create_subject_request(build_birth_data(ctx))
    map_options = build_map_options(
        ctx,
        planets=op in PLANET_OPERATIONS,
        line_types=op in LINE_TYPE_OPERATIONS,
        coordinate_precision=op is _Op.LINES,
    )
    if map_options:
        body["map_options"] = map_options
    if op is _Op.LINES:
        body["coordinate_density"] = ctx.param("coordinateDensity", 100)
    if op in VISUAL_OPERATIONS:
        body["visual_options"] = build_visual_options(ctx)
    if op in TARGET_OPERATIONS:
        target = build_target_location(ctx)
        if target:
            body["target_location"] = target
    if op in POWER_TYPE_OPERATIONS:
        body["power_type"] = ctx.param("powerType", "overall")
    return body


@resource.handles(
    _Op.MAP,
    _Op.RENDER,
    _Op.LINES,
    _Op.LOCATION_ANALYSIS,
    _Op.SEARCH_LOCATIONS,
    _Op.COMPARE_LOCATIONS,
    _Op.RELOCATION_CHART,
    _Op.POWER_ZONES,
    _Op.PARAN_MAP,
    _Op.ASTRODYNES,
    _Op.ASTRODYNES_COMPARE,
)
def _chart_request(ctx: RequestContext, op: AstrocartographyOperation) -> Any:
    return ctx.post(resource.endpoint(op), build_body(ctx, op))
