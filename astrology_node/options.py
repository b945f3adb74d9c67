"""Option-bag builders.

Each function reads a fixed set of named parameters (with the defaults the
host form renders) and returns a flat or one-level nested ``dict``. No
cross-field validation happens here; the API validates option values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .builders import read_language, read_optional
from .context import RequestContext

__all__ = [
    "ACTIVE_POINTS_PRESETS",
    "build_chart_options",
    "build_fixed_star_options",
    "build_map_options",
    "build_owner",
    "build_pdf_options",
    "build_pdf_sections",
    "build_pet_options",
    "build_render_options",
    "build_report_options",
    "build_target_location",
    "build_tarot_options",
    "build_vedic_options",
    "build_visual_options",
    "resolve_active_points",
    "split_csv",
]


def split_csv(value: Any) -> List[str]:
    """Split a comma separated string (or pass through a list), dropping blanks."""

    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item).strip() for item in value if str(item).strip()]
    return [part.strip() for part in str(value).split(",") if part.strip()]


# ---- Analysis ----


def build_report_options(ctx: RequestContext) -> Dict[str, Any]:
    """``{"tradition", "language"}`` for analysis reports; blank values are left out."""

    options: Dict[str, Any] = {}
    tradition = ctx.param("tradition", "western")
    if tradition:
        options["tradition"] = tradition
    language = read_language(ctx)
    if language:
        options["language"] = language
    return options


# ---- Astrocartography ----

DEFAULT_MAP_PLANETS = ("Sun", "Moon", "Venus", "Mars", "Jupiter")
DEFAULT_LINE_TYPES = ("AC", "MC")


def build_map_options(
    ctx: RequestContext,
    *,
    planets: bool = False,
    line_types: bool = False,
    coordinate_precision: bool = False,
) -> Dict[str, Any]:
    """Map options; each flag switches on one key the target endpoint accepts."""

    options: Dict[str, Any] = {}
    if planets:
        options["planets"] = split_csv(ctx.param("acPlanets", DEFAULT_MAP_PLANETS))
    if line_types:
        options["line_types"] = split_csv(ctx.param("lineTypes", DEFAULT_LINE_TYPES))
    if coordinate_precision:
        options["coordinate_precision"] = ctx.param("coordinatePrecision", 4)
    return options


def build_visual_options(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "theme": ctx.param("mapTheme", "light"),
        "width": ctx.param("mapWidth", 1200),
        "height": ctx.param("mapHeight", 800),
    }


def build_target_location(ctx: RequestContext) -> Dict[str, Any]:
    """Relocation target; blank strings and zero coordinates are omitted."""

    location: Dict[str, Any] = {}
    city = read_optional(ctx, "targetCity")
    if city:
        location["city"] = city
    country_code = read_optional(ctx, "targetCountryCode")
    if country_code:
        location["country_code"] = country_code
    latitude = ctx.param("targetLatitude", 0)
    if latitude:
        location["latitude"] = latitude
    longitude = ctx.param("targetLongitude", 0)
    if longitude:
        location["longitude"] = longitude
    return location


# ---- Fixed stars ----


def build_fixed_star_options(ctx: RequestContext, *, custom_orbs: bool = False) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "presets": split_csv(ctx.param("starPresets", ["essential"])),
        "include_interpretations": ctx.param("includeStarInterpretations", True),
    }
    if custom_orbs:
        options["custom_orbs"] = {
            "conjunction": ctx.param("conjunctionOrb", 2.0),
            "opposition": ctx.param("oppositionOrb", 1.5),
        }
    return options


# ---- Insights ----

_OWNER_DEFAULTS = (("year", 1990), ("month", 1), ("day", 1), ("hour", 12), ("minute", 0))


def build_pet_options(ctx: RequestContext) -> Dict[str, Any]:
    options: Dict[str, Any] = {"species": ctx.param("petSpecies", "dog")}
    breed = read_optional(ctx, "petBreed")
    if breed:
        options["breed"] = breed
    return options


def build_owner(ctx: RequestContext) -> Optional[Dict[str, Any]]:
    """Owner birth moment for pet insights, or ``None`` unless ``includeOwner`` is set.

    The API takes the owner's date and time only; no location is sent.
    """

    if not ctx.param("includeOwner", False):
        return None
    birth_data = {
        key: ctx.param(f"ownerBirth{key.capitalize()}", default)
        for key, default in _OWNER_DEFAULTS
    }
    return {"birth_data": birth_data}


# ---- PDF ----

_PDF_SECTIONS = (
    ("general_overview", "sectionGeneralOverview", True),
    ("love_relationships", "sectionLoveRelationships", True),
    ("career_finance", "sectionCareerFinance", True),
    ("health_wellness", "sectionHealthWellness", True),
    ("lucky_elements", "sectionLuckyElements", True),
    ("daily_affirmation", "sectionDailyAffirmation", True),
    ("planetary_influences", "sectionPlanetaryInfluences", True),
    ("moon_phase", "sectionMoonPhase", True),
    ("compatibility_tip", "sectionCompatibilityTip", False),
)


def build_pdf_sections(ctx: RequestContext) -> Dict[str, Any]:
    """Section toggles for horoscope PDFs.

    ``max_planetary_influences`` is only sent while the planetary influences
    section is switched on.
    """

    sections: Dict[str, Any] = {
        key: ctx.param(name, default) for key, name, default in _PDF_SECTIONS
    }
    if sections["planetary_influences"]:
        sections["max_planetary_influences"] = ctx.param("maxPlanetaryInfluences", 5)
    return sections


def build_pdf_options(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "page_settings": {
            "page_size": ctx.param("pageSize", "A4"),
            "margin_mm": ctx.param("marginMm", 15),
            "orientation": ctx.param("orientation", "portrait"),
        },
        "design": {
            "theme": ctx.param("pdfTheme", "modern"),
            "language": read_language(ctx),
        },
    }


# ---- Render ----


def build_render_options(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "format": ctx.param("renderFormat", "svg"),
        "width": ctx.param("renderWidth", 800),
        "height": ctx.param("renderHeight", 800),
        "theme": ctx.param("renderTheme", "light"),
        "background_color": ctx.param("backgroundColor", "#ffffff"),
        "show_aspects": ctx.param("showAspects", True),
        "show_house_numbers": ctx.param("showHouseNumbers", True),
        "show_degrees": ctx.param("showDegrees", True),
    }


# ---- Tarot ----


def build_tarot_options(ctx: RequestContext) -> Dict[str, Any]:
    """Reading options merged at the top level of every tarot report body."""

    return {
        "use_reversals": ctx.param("useReversals", True),
        "tradition": ctx.param("tradition", "universal"),
        "include_dignities": ctx.param("includeDignities", False),
        "include_timing": ctx.param("includeTiming", False),
        "include_astro_context": ctx.param("includeAstroContext", False),
        "include_birth_cards": ctx.param("includeBirthCards", False),
        "interpretation_depth": ctx.param("interpretationDepth", "detailed"),
        "language": read_language(ctx),
    }


# ---- Vedic ----


def build_vedic_options(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "ayanamsa": ctx.param("ayanamsa", "lahiri"),
        "node_type": ctx.param("nodeType", "mean"),
        "precision": ctx.param("precision", 2),
    }


# ---- Charts ----

_CLASSICAL_POINTS = ("Sun", "Moon", "Mercury", "Venus", "Mars", "Jupiter", "Saturn")
_ANGLES = ("Ascendant", "Medium_Coeli")

ACTIVE_POINTS_PRESETS: Dict[str, tuple[str, ...]] = {
    "basic": _CLASSICAL_POINTS + _ANGLES,
    "modern": _CLASSICAL_POINTS + ("Uranus", "Neptune", "Pluto") + _ANGLES,
    "traditional": _CLASSICAL_POINTS
    + ("Mean_Node", "True_Node", "Part_of_Fortune")
    + _ANGLES,
    "full": _CLASSICAL_POINTS
    + ("Uranus", "Neptune", "Pluto", "Earth", "Chiron")
    + ("Ceres", "Pallas", "Juno", "Vesta", "Aphrodite", "Persephone", "Artemis")
    + ("Mean_Node", "True_Node", "Mean_South_Node", "True_South_Node")
    + ("Mean_Lilith", "True_Lilith")
    + _ANGLES
    + ("Descendant", "Imum_Coeli", "Vertex", "Part_of_Fortune", "Part_of_Spirit")
    + (
        "Aldebaran", "Regulus", "Antares", "Fomalhaut", "Sirius", "Arcturus",
        "Vega", "Capella", "Spica", "Procyon", "Algol", "Rigel", "Betelgeuse",
        "Altair", "Pollux", "Deneb", "Castor", "Bellatrix", "Alnilam", "Alioth",
        "Mirach", "Hamal", "Achernar",
    ),
}
DEFAULT_ACTIVE_POINTS_PRESET = "modern"


def resolve_active_points(ctx: RequestContext) -> List[str]:
    """Return the active point list for ``activePointsPreset``.

    ``custom`` reads ``customActivePoints`` (list or comma separated string,
    defaulting to the basic set); unknown preset names fall back to
    ``modern``.
    """

    preset = ctx.param("activePointsPreset", DEFAULT_ACTIVE_POINTS_PRESET)
    if preset == "custom":
        return split_csv(ctx.param("customActivePoints", ACTIVE_POINTS_PRESETS["basic"]))
    points = ACTIVE_POINTS_PRESETS.get(preset, ACTIVE_POINTS_PRESETS[DEFAULT_ACTIVE_POINTS_PRESET])
    return list(points)


def build_chart_options(ctx: RequestContext) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "house_system": ctx.param("houseSystem", "P"),
        "zodiac_type": ctx.param("zodiacType", "Tropic"),
        "active_points": resolve_active_points(ctx),
        "precision": ctx.param("precision", 2),
        "perspective": ctx.param("perspective", "geocentric"),
    }
    if not ctx.param("showAdvancedOptions", False):
        return options
    options["use_cache"] = ctx.param("useCache", True)
    if ctx.param("enableFixedStars", False):
        options["fixed_stars"] = {
            "presets": split_csv(ctx.param("fixedStarPresets", ["essential"])),
            "include_parans": ctx.param("includeParans", False),
            "include_heliacal": ctx.param("includeHeliacal", False),
        }
    return options
