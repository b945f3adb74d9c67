"""Applied insights: relationships, pets, wellness, finance and business."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_date_range,
    build_second_subject_birth_data,
    create_subject_request,
    read_language,
    subjects_list,
)
from ..context import RequestContext
from ..options import build_owner, build_pet_options, split_csv
from ._base import Resource

__all__ = ["InsightsOperation", "resource"]


class InsightsOperation(str, Enum):
    DISCOVER = "discover"
    DISCOVER_RELATIONSHIP = "discoverRelationship"
    RELATIONSHIP_COMPATIBILITY = "relationshipCompatibility"
    RELATIONSHIP_COMPATIBILITY_SCORE = "relationshipCompatibilityScore"
    RELATIONSHIP_LOVE_LANGUAGES = "relationshipLoveLanguages"
    RELATIONSHIP_DAVISON = "relationshipDavison"
    RELATIONSHIP_TIMING = "relationshipTiming"
    RELATIONSHIP_RED_FLAGS = "relationshipRedFlags"
    PET_PERSONALITY = "petPersonality"
    PET_COMPATIBILITY = "petCompatibility"
    PET_TRAINING_WINDOWS = "petTrainingWindows"
    PET_HEALTH_SENSITIVITIES = "petHealthSensitivities"
    PET_MULTI_PET_DYNAMICS = "petMultiPetDynamics"
    WELLNESS_BODY_MAPPING = "wellnessBodyMapping"
    WELLNESS_BIORHYTHMS = "wellnessBiorhythms"
    WELLNESS_TIMING = "wellnessTiming"
    WELLNESS_ENERGY_PATTERNS = "wellnessEnergyPatterns"
    WELLNESS_SCORE = "wellnessScore"
    WELLNESS_MOON_CALENDAR = "wellnessMoonCalendar"
    FINANCIAL_MARKET_TIMING = "financialMarketTiming"
    FINANCIAL_PERSONAL_TRADING = "financialPersonalTrading"
    FINANCIAL_GANN_ANALYSIS = "financialGannAnalysis"
    FINANCIAL_BRADLEY_SIDEROGRAPH = "financialBradleySiderograph"
    FINANCIAL_CRYPTO_TIMING = "financialCryptoTiming"
    FINANCIAL_FOREX_TIMING = "financialForexTiming"
    BUSINESS_TEAM_DYNAMICS = "businessTeamDynamics"
    BUSINESS_HIRING_COMPATIBILITY = "businessHiringCompatibility"
    BUSINESS_LEADERSHIP_STYLE = "businessLeadershipStyle"
    BUSINESS_TIMING = "businessTiming"
    BUSINESS_DEPARTMENT_COMPATIBILITY = "businessDepartmentCompatibility"
    BUSINESS_SUCCESSION_PLANNING = "businessSuccessionPlanning"


_Op = InsightsOperation

_PATHS = {
    _Op.DISCOVER: "",
    _Op.DISCOVER_RELATIONSHIP: "relationship/",
    _Op.RELATIONSHIP_COMPATIBILITY: "relationship/compatibility",
    _Op.RELATIONSHIP_COMPATIBILITY_SCORE: "relationship/compatibility-score",
    _Op.RELATIONSHIP_LOVE_LANGUAGES: "relationship/love-languages",
    _Op.RELATIONSHIP_DAVISON: "relationship/davison",
    _Op.RELATIONSHIP_TIMING: "relationship/timing",
    _Op.RELATIONSHIP_RED_FLAGS: "relationship/red-flags",
    _Op.PET_PERSONALITY: "pet/personality",
    _Op.PET_COMPATIBILITY: "pet/compatibility",
    _Op.PET_TRAINING_WINDOWS: "pet/training-windows",
    _Op.PET_HEALTH_SENSITIVITIES: "pet/health-sensitivities",
    _Op.PET_MULTI_PET_DYNAMICS: "pet/multi-pet-dynamics",
    _Op.WELLNESS_BODY_MAPPING: "wellness/body-mapping",
    _Op.WELLNESS_BIORHYTHMS: "wellness/biorhythms",
    _Op.WELLNESS_TIMING: "wellness/wellness-timing",
    _Op.WELLNESS_ENERGY_PATTERNS: "wellness/energy-patterns",
    _Op.WELLNESS_SCORE: "wellness/wellness-score",
    _Op.WELLNESS_MOON_CALENDAR: "wellness/moon-wellness",
    _Op.FINANCIAL_MARKET_TIMING: "financial/market-timing",
    _Op.FINANCIAL_PERSONAL_TRADING: "financial/personal-trading",
    _Op.FINANCIAL_GANN_ANALYSIS: "financial/gann-analysis",
    _Op.FINANCIAL_BRADLEY_SIDEROGRAPH: "financial/bradley-siderograph",
    _Op.FINANCIAL_CRYPTO_TIMING: "financial/crypto-timing",
    _Op.FINANCIAL_FOREX_TIMING: "financial/forex-timing",
    _Op.BUSINESS_TEAM_DYNAMICS: "business/team-dynamics",
    _Op.BUSINESS_HIRING_COMPATIBILITY: "business/hiring-compatibility",
    _Op.BUSINESS_LEADERSHIP_STYLE: "business/leadership-style",
    _Op.BUSINESS_TIMING: "business/business-timing",
    _Op.BUSINESS_DEPARTMENT_COMPATIBILITY: "business/department-compatibility",
    _Op.BUSINESS_SUCCESSION_PLANNING: "business/succession-planning",
}
INSIGHTS_ENDPOINTS = {op: f"/api/v3/insights/{path}" for op, path in _PATHS.items()}

DISCOVERY_OPERATIONS = (_Op.DISCOVER, _Op.DISCOVER_RELATIONSHIP)
TWO_SUBJECT_OPERATIONS = (
    _Op.BUSINESS_HIRING_COMPATIBILITY,
    _Op.BUSINESS_SUCCESSION_PLANNING,
    _Op.PET_COMPATIBILITY,
    _Op.RELATIONSHIP_COMPATIBILITY,
    _Op.RELATIONSHIP_COMPATIBILITY_SCORE,
    _Op.RELATIONSHIP_LOVE_LANGUAGES,
    _Op.RELATIONSHIP_DAVISON,
    _Op.RELATIONSHIP_RED_FLAGS,
    _Op.RELATIONSHIP_TIMING,
)
SINGLE_SUBJECT_OPERATIONS = tuple(
    op for op in InsightsOperation if op not in DISCOVERY_OPERATIONS + TWO_SUBJECT_OPERATIONS
)
PET_OPERATIONS = frozenset(
    {
        _Op.PET_PERSONALITY,
        _Op.PET_COMPATIBILITY,
        _Op.PET_TRAINING_WINDOWS,
        _Op.PET_HEALTH_SENSITIVITIES,
        _Op.PET_MULTI_PET_DYNAMICS,
    }
)
DATE_RANGE_OPERATIONS = frozenset(
    {
        _Op.BUSINESS_TIMING,
        _Op.FINANCIAL_MARKET_TIMING,
        _Op.FINANCIAL_CRYPTO_TIMING,
        _Op.FINANCIAL_FOREX_TIMING,
        _Op.FINANCIAL_GANN_ANALYSIS,
        _Op.FINANCIAL_BRADLEY_SIDEROGRAPH,
        _Op.RELATIONSHIP_TIMING,
        _Op.WELLNESS_TIMING,
    }
)

resource: Resource[InsightsOperation] = Resource(
    "insights",
    InsightsOperation,
    INSIGHTS_ENDPOINTS,
    description="Relationship, pet, wellness, financial and business insights",
)


def _range(ctx: RequestContext, op: InsightsOperation) -> Dict[str, Any]:
    return build_date_range(ctx) if op in DATE_RANGE_OPERATIONS else {}


@resource.handles(*DISCOVERY_OPERATIONS)
def _discover(ctx: RequestContext, op: InsightsOperation) -> Any:
    return ctx.get(resource.endpoint(op))


@resource.handles(*TWO_SUBJECT_OPERATIONS)
def _pair(ctx: RequestContext, op: InsightsOperation) -> Any:
    body: Dict[str, Any] = {
        "subjects": subjects_list(build_birth_data(ctx), build_second_subject_birth_data(ctx)),
        "options": {"language": read_language(ctx)},
    }
    if op is _Op.PET_COMPATIBILITY:
        body["pet_options"] = build_pet_options(ctx)
    body.update(_range(ctx, op))
    return ctx.post(resource.endpoint(op), body)


@resource.handles(*SINGLE_SUBJECT_OPERATIONS)
def _single(ctx: RequestContext, op: InsightsOperation) -> Any:
    body = create_subject_request(
        build_birth_data(ctx), {"options": {"language": read_language(ctx)}}
    )
    if op in PET_OPERATIONS:
        body["pet_options"] = build_pet_options(ctx)
        owner = build_owner(ctx)
        if owner:
            body["owner"] = owner
    if op is _Op.BUSINESS_TIMING:
        body["activities"] = split_csv(
            ctx.param("businessActivities", ["product_launch", "meetings"])
        )
    if op in (_Op.FINANCIAL_MARKET_TIMING, _Op.FINANCIAL_PERSONAL_TRADING):
        body["market_type"] = ctx.param("marketType", "general")
    if op in (_Op.WELLNESS_TIMING, _Op.WELLNESS_SCORE):
        body["wellness_focus"] = split_csv(ctx.param("wellnessFocus", ["exercise", "sleep"]))
    body.update(_range(ctx, op))
    return ctx.post(resource.endpoint(op), body)
