"""Reference glossaries: cities, countries, house systems and other lookups."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import read_language, read_optional
from ..context import RequestContext
from ._base import Resource

__all__ = ["GlossaryOperation", "build_query", "resource"]


class GlossaryOperation(str, Enum):
    CITIES = "cities"
    COUNTRIES = "countries"
    HOUSE_SYSTEMS = "houseSystems"
    HOUSES = "houses"
    ZODIAC_TYPES = "zodiacTypes"
    ELEMENTS = "elements"
    KEYWORDS = "keywords"
    ACTIVE_POINTS = "activePoints"
    ACTIVE_POINTS_PRIMARY = "activePointsPrimary"
    FIXED_STARS = "fixedStars"
    HORARY_CATEGORIES = "horaryCategories"
    LIFE_AREAS = "lifeAreas"
    THEMES = "themes"
    LANGUAGES = "languages"


_PATHS = {
    GlossaryOperation.CITIES: "cities",
    GlossaryOperation.COUNTRIES: "countries",
    GlossaryOperation.HOUSE_SYSTEMS: "house-systems",
    GlossaryOperation.HOUSES: "houses",
    GlossaryOperation.ZODIAC_TYPES: "zodiac-types",
    GlossaryOperation.ELEMENTS: "elements",
    GlossaryOperation.KEYWORDS: "keywords",
    GlossaryOperation.ACTIVE_POINTS: "active-points",
    GlossaryOperation.ACTIVE_POINTS_PRIMARY: "active-points/primary",
    GlossaryOperation.FIXED_STARS: "fixed-stars",
    GlossaryOperation.HORARY_CATEGORIES: "horary-categories",
    GlossaryOperation.LIFE_AREAS: "life-areas",
    GlossaryOperation.THEMES: "themes",
    GlossaryOperation.LANGUAGES: "languages",
}
GLOSSARY_ENDPOINTS = {op: f"/api/v3/glossary/{path}" for op, path in _PATHS.items()}

PAGINATED = frozenset({GlossaryOperation.CITIES, GlossaryOperation.COUNTRIES})

resource: Resource[GlossaryOperation] = Resource(
    "glossary",
    GlossaryOperation,
    GLOSSARY_ENDPOINTS,
    description="Reference lists used by other resources",
)


def build_query(ctx: RequestContext, op: GlossaryOperation) -> Dict[str, Any]:
    """Query string for ``op``: search and sort for cities, paging, language."""

    query: Dict[str, Any] = {}
    if op is GlossaryOperation.CITIES:
        search = read_optional(ctx, "search")
        if search:
            query["search"] = search
        country_code = read_optional(ctx, "countryCode")
        if country_code:
            query["country_code"] = country_code
    if op in PAGINATED:
        query["limit"] = ctx.param("limit", 50)
        query["offset"] = ctx.param("offset", 0)
    if op is GlossaryOperation.CITIES:
        query["sort_by"] = ctx.param("sortBy", "name")
        query["sort_order"] = ctx.param("sortOrder", "asc")
    if op is not GlossaryOperation.LANGUAGES:
        query["language"] = read_language(ctx)
    return query


@resource.handles(*GlossaryOperation)
def _lookup(ctx: RequestContext, op: GlossaryOperation) -> Any:
    return ctx.get(resource.endpoint(op), params=build_query(ctx, op) or None)
