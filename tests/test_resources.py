from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Dict, Optional

import pytest

from astrology_node.dispatch import dispatch
from astrology_node.errors import ParameterError
from astrology_node.options import ACTIVE_POINTS_PRESETS
from tests.helpers import NATAL_BIRTH_DATA, NATAL_PARAMS, SECOND_SUBJECT_PARAMS

SECOND_BIRTH_DATA = {
    "year": 1992,
    "month": 3,
    "day": 2,
    "hour": 8,
    "minute": 5,
    "latitude": 48.85,
    "longitude": 2.35,
}


def _post(api, make_ctx, resource: str, operation: str, params: Optional[Dict[str, Any]] = None):
    dispatch(resource, operation, make_ctx(params or {}))
    assert api.last.method == "POST"
    return api.last_path, api.last_json()


def _get(api, make_ctx, resource: str, operation: str, params: Optional[Dict[str, Any]] = None):
    dispatch(resource, operation, make_ctx(params or {}))
    assert api.last.method == "GET"
    return api.last_path, api.last_query


# ---- data ----


def test_data_positions(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "data", "positions", NATAL_PARAMS)
    assert path == "/api/v3/data/positions"
    assert body == {"subject": {"birth_data": NATAL_BIRTH_DATA}}


def test_data_global_positions_sends_utc_timestamp(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "data", "globalPositions", NATAL_PARAMS)
    assert path == "/api/v3/data/global-positions"
    assert body == {"datetime": "1990-06-15T14:30:00.000Z"}


# ---- horoscope ----


def test_horoscope_sign_text(api, make_ctx) -> None:
    path, body = _post(
        api, make_ctx, "horoscope", "signWeeklyText", {"sign": "leo", "targetDate": "2024-05-01"}
    )
    assert path == "/api/v3/horoscope/sign/weekly/text"
    assert body == {
        "sign": "leo",
        "language": "en",
        "tradition": "universal",
        "date": "2024-05-01",
        "format": "paragraph",
        "emoji": True,
    }


def test_horoscope_personal_is_never_simplified(api, make_ctx) -> None:
    api.respond(200, {f"k{i}": i for i in range(20)})
    result = dispatch("horoscope", "personalDaily", make_ctx(NATAL_PARAMS))
    assert len(result) == 20
    assert api.last_path == "/api/v3/horoscope/personal/daily"
    body = api.last_json()
    assert body["subject"] == {"birth_data": NATAL_BIRTH_DATA}
    assert "format" not in body


def test_horoscope_bazi(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "horoscope", "chineseBazi", {**NATAL_PARAMS, "baziYear": 2025})
    assert path == "/api/v3/horoscope/chinese/bazi"
    assert body["year"] == 2025


# ---- charts ----


def test_charts_natal_body(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, "second": 20, "subjectName": "Ada"}
    path, body = _post(api, make_ctx, "charts", "natal", params)
    assert path == "/api/v3/charts/natal"
    assert body["subject"] == {"birth_data": {**NATAL_BIRTH_DATA, "second": 20}, "name": "Ada"}
    assert body["options"] == {
        "house_system": "P",
        "zodiac_type": "Tropic",
        "active_points": list(ACTIVE_POINTS_PRESETS["modern"]),
        "precision": 2,
        "perspective": "geocentric",
    }


def test_charts_natal_second_from_text(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "charts", "natal", {**NATAL_PARAMS, "second": "5"})
    assert body["subject"]["birth_data"]["second"] == 5
    with pytest.raises(ParameterError) as excinfo:
        dispatch("charts", "natal", make_ctx({**NATAL_PARAMS, "second": "x"}))
    assert excinfo.value.name == "second"


def test_charts_synastry(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "charts", "synastry", {**NATAL_PARAMS, **SECOND_SUBJECT_PARAMS})
    assert path == "/api/v3/charts/synastry"
    assert body["subject1"] == {"birth_data": NATAL_BIRTH_DATA}
    assert body["subject2"] == {"birth_data": SECOND_BIRTH_DATA}
    assert "options" in body


def test_charts_transit(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, "transitCity": "Tokyo", "transitCountryCode": "JP", "transitYear": 2025}
    _, body = _post(api, make_ctx, "charts", "transit", params)
    assert body["transit_time"]["datetime"]["year"] == 2025
    assert body["transit_time"]["datetime"]["city"] == "Tokyo"


def test_charts_relocated_solar_return_transits(api, make_ctx) -> None:
    params = {
        **NATAL_PARAMS,
        "returnYear": 2025,
        "useRelocatedReturn": True,
        "returnLocationType": "coordinates",
        "returnLatitude": 35.0,
        "returnLongitude": 139.0,
        "startDate": "2025-01-01",
        "endDate": "2025-12-31",
    }
    path, body = _post(api, make_ctx, "charts", "solarReturnTransits", params)
    assert path == "/api/v3/charts/solar-return-transits"
    assert body["return_year"] == 2025
    assert body["return_location"] == {"latitude": 35.0, "longitude": 139.0}
    assert body["start_date"] == "2025-01-01"
    assert body["end_date"] == "2025-12-31"
    assert body["orb"] == 1.0


def test_charts_plain_solar_return_has_no_range(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "charts", "solarReturn", NATAL_PARAMS)
    assert body["return_year"] == 2024
    assert "return_location" not in body
    assert "orb" not in body


def test_charts_progressions_target_date(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "charts", "progressions", {**NATAL_PARAMS, "targetDate": "2030-01-01"})
    assert body["progression_date"] == "2030-01-01"
    _, body = _post(api, make_ctx, "charts", "directions", {**NATAL_PARAMS, "targetDate": "2030-01-01"})
    assert body["direction_date"] == "2030-01-01"


# ---- analysis ----


def test_analysis_single_and_two_subject(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "analysis", "career", NATAL_PARAMS)
    assert path == "/api/v3/analysis/career"
    assert body == {
        "subject": {"birth_data": NATAL_BIRTH_DATA},
        "report_options": {"tradition": "western", "language": "en"},
        "include_aspect_patterns": False,
    }
    path, body = _post(
        api, make_ctx, "analysis", "compatibilityScore", {**NATAL_PARAMS, **SECOND_SUBJECT_PARAMS}
    )
    assert path == "/api/v3/analysis/compatibility-score"
    assert body["subject2"] == {"birth_data": SECOND_BIRTH_DATA}


def test_analysis_transit_report(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, "transitCity": "Paris", "transitCountryCode": "FR"}
    _, body = _post(api, make_ctx, "analysis", "natalTransitReport", params)
    assert body["transit_time"]["datetime"]["city"] == "Paris"
    assert "start_date" not in body


# ---- astrocartography ----


def test_astrocartography_lines(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "astrocartography", "lines", NATAL_PARAMS)
    assert path == "/api/v3/astrocartography/lines"
    assert body["map_options"] == {
        "planets": ["Sun", "Moon", "Venus", "Mars", "Jupiter"],
        "line_types": ["AC", "MC"],
        "coordinate_precision": 4,
    }
    assert body["coordinate_density"] == 100
    assert "visual_options" not in body


def test_astrocartography_location_analysis_target(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, "targetCity": "Lisbon", "targetCountryCode": "PT"}
    _, body = _post(api, make_ctx, "astrocartography", "locationAnalysis", params)
    assert body["target_location"] == {"city": "Lisbon", "country_code": "PT"}
    assert "map_options" not in body


def test_astrocartography_reference_lookup(api, make_ctx) -> None:
    path, _ = _get(api, make_ctx, "astrocartography", "supportedFeatures")
    assert path == "/api/v3/astrocartography/supported-features"


# ---- chinese ----


def test_chinese_zodiac_animal_path(api, make_ctx) -> None:
    path, _ = _get(api, make_ctx, "chinese", "zodiacAnimal")
    assert path == "/api/v3/chinese/zodiac/dragon"
    path, _ = _get(api, make_ctx, "chinese", "solarTerms", {"chineseYear": 2030})
    assert path == "/api/v3/chinese/calendar/solar-terms/2030"


def test_chinese_bazi_body(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "chinese", "bazi", {**NATAL_PARAMS, "gender": "female"})
    assert body == {
        "subject": {"birth_data": NATAL_BIRTH_DATA, "gender": "female"},
        "language": "en",
        "include_luck_pillars": False,
        "include_annual_pillars": False,
        "tradition": "classical",
        "analysis_depth": "standard",
    }


# ---- eclipses ----


def test_eclipses_upcoming(api, make_ctx) -> None:
    path, query = _get(api, make_ctx, "eclipses", "upcoming")
    assert path == "/api/v3/eclipses/upcoming"
    assert query == {"count": "10"}


def test_eclipses_natal_check_range(api, make_ctx) -> None:
    params = {
        **NATAL_PARAMS,
        "startYear": 2024,
        "startMonth": 1,
        "startDay": 1,
        "endYear": 2025,
        "endMonth": 12,
        "endDay": 31,
    }
    _, body = _post(api, make_ctx, "eclipses", "natalCheck", params)
    assert body["date_range"] == {
        "start_date": {"year": 2024, "month": 1, "day": 1},
        "end_date": {"year": 2025, "month": 12, "day": 31},
    }
    assert body["max_orb"] == 5


def test_eclipses_interpretation_requires_id(api, make_ctx) -> None:
    with pytest.raises(ParameterError) as excinfo:
        dispatch("eclipses", "interpretation", make_ctx({"eclipseId": " "}))
    assert excinfo.value.name == "eclipseId"
    assert api.requests == []


# ---- enhanced / fixed stars / fengshui ----


def test_enhanced_personal_analysis(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "enhanced", "chartsPersonalAnalysis", NATAL_PARAMS)
    assert path == "/api/v3/enhanced_charts/personal-analysis"
    assert body["options"] == {
        "house_system": "whole_sign",
        "include_fixed_stars": True,
        "include_traditional": True,
    }
    _, body = _post(api, make_ctx, "enhanced", "globalAnalysis")
    assert body == {}


def test_fixed_stars_report_has_custom_orbs(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "fixedStars", "report", NATAL_PARAMS)
    assert body["fixed_stars"]["custom_orbs"] == {"conjunction": 2.0, "opposition": 1.5}
    _, body = _post(api, make_ctx, "fixedStars", "positions", NATAL_PARAMS)
    assert "custom_orbs" not in body["fixed_stars"]


def test_fengshui_annual_and_chart(api, make_ctx) -> None:
    path, query = _get(api, make_ctx, "fengshui", "flyingStarsAnnual", {"year": 2026})
    assert path == "/api/v3/fengshui/flying-stars/annual/2026"
    assert query == {"language": "en"}
    _, body = _post(api, make_ctx, "fengshui", "flyingStarsChart", {"facingDegrees": 90})
    assert body == {
        "facing_degrees": 90,
        "period": 9,
        "include_annual": True,
        "include_monthly": False,
        "language": "en",
    }


# ---- glossary / horary / human design ----


def test_glossary_cities_query(api, make_ctx) -> None:
    path, query = _get(api, make_ctx, "glossary", "cities", {"search": "Lon", "countryCode": "GB"})
    assert path == "/api/v3/glossary/cities"
    assert query == {
        "search": "Lon",
        "country_code": "GB",
        "limit": "50",
        "offset": "0",
        "sort_by": "name",
        "sort_order": "asc",
        "language": "en",
    }


def test_glossary_languages_has_no_query(api, make_ctx) -> None:
    path, query = _get(api, make_ctx, "glossary", "languages")
    assert path == "/api/v3/glossary/languages"
    assert query == {}


def test_horary_analyze(api, make_ctx) -> None:
    params = {
        "questionYear": 2024,
        "questionMonth": 3,
        "questionDay": 10,
        "questionHour": 9,
        "questionMinute": 15,
        "questionCity": "Dublin",
        "questionCountryCode": "IE",
        "question": "Will I move?",
    }
    path, body = _post(api, make_ctx, "horary", "analyze", params)
    assert path == "/api/v3/horary/analyze"
    assert body["question_time"]["city"] == "Dublin"
    assert body["question"] == "Will I move?"
    assert body["question_category"] == "general"


def test_human_design_compatibility(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, **SECOND_SUBJECT_PARAMS, "subjectName": "A", "subject2Name": "B"}
    path, body = _post(api, make_ctx, "humanDesign", "compatibility", params)
    assert path == "/api/v3/human-design/compatibility"
    assert body["subjects"] == [
        {"birth_data": NATAL_BIRTH_DATA, "name": "A"},
        {"birth_data": SECOND_BIRTH_DATA, "name": "B"},
    ]


# ---- insights ----


def test_insights_pet_personality_with_owner(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, "petSpecies": "cat", "includeOwner": True}
    path, body = _post(api, make_ctx, "insights", "petPersonality", params)
    assert path == "/api/v3/insights/pet/personality"
    assert body["pet_options"] == {"species": "cat"}
    assert body["owner"]["birth_data"]["year"] == 1990


def test_insights_relationship_timing_range(api, make_ctx) -> None:
    params = {
        **NATAL_PARAMS,
        **SECOND_SUBJECT_PARAMS,
        "startDate": "2024-01-01",
        "endDate": "2024-06-30",
    }
    _, body = _post(api, make_ctx, "insights", "relationshipTiming", params)
    assert body["subjects"][1] == {"birth_data": SECOND_BIRTH_DATA}
    assert body["start_date"] == "2024-01-01"


def test_insights_discover_is_a_get(api, make_ctx) -> None:
    path, _ = _get(api, make_ctx, "insights", "discover")
    assert path == "/api/v3/insights/"


# ---- kabbalah / lunar / numerology ----


def test_kabbalah_gematria(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "kabbalah", "gematria", {"gematriaText": "shalom"})
    assert body == {
        "text": "shalom",
        "methods": ["mispar_gadol", "mispar_katan"],
        "find_equivalents": False,
        "language": "en",
    }
    with pytest.raises(ParameterError):
        dispatch("kabbalah", "gematria", make_ctx({}))


def test_kabbalah_tikkun_has_no_system(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "kabbalah", "tikkun", NATAL_PARAMS)
    assert body == {"birth_data": NATAL_BIRTH_DATA, "language": "en"}
    _, body = _post(api, make_ctx, "kabbalah", "treeOfLifeChart", NATAL_PARAMS)
    assert body["system"] == "modern_halevi"
    assert body["include_daat"] is True


def test_lunar_calendar_and_void_of_course(api, make_ctx) -> None:
    path, _ = _get(api, make_ctx, "lunar", "calendar", {"calendarYear": 2025})
    assert path == "/api/v3/lunar/calendar/2025"
    _, body = _post(api, make_ctx, "lunar", "voidOfCourse", NATAL_PARAMS)
    assert body == {
        "datetime_location": NATAL_BIRTH_DATA,
        "days_ahead": 30,
        "use_modern_planets": False,
    }
    _, body = _post(api, make_ctx, "lunar", "mansions", NATAL_PARAMS)
    assert "days_ahead" not in body


def test_numerology_compatibility(api, make_ctx) -> None:
    params = {
        **NATAL_PARAMS,
        "subjectName": "Ada Lovelace",
        "subject2Name": "Charles Babbage",
        "subject2Year": 1791,
        "subject2Month": 12,
        "subject2Day": 26,
    }
    _, body = _post(api, make_ctx, "numerology", "compatibility", params)
    assert body["subjects"] == [
        {"name": "Ada Lovelace", "birth_data": {"year": 1990, "month": 6, "day": 15}},
        {"name": "Charles Babbage", "birth_data": {"year": 1791, "month": 12, "day": 26}},
    ]
    assert body["options"] == {"language": "en", "include_interpretations": True}


def test_numerology_requires_name(api, make_ctx) -> None:
    with pytest.raises(ParameterError) as excinfo:
        dispatch("numerology", "coreNumbers", make_ctx(NATAL_PARAMS))
    assert excinfo.value.name == "subjectName"


# ---- pdf / render ----


def test_pdf_daily_sun_sign(api, make_ctx) -> None:
    api.respond(200, {f"k{i}": i for i in range(12)})
    result = dispatch("pdf", "horoscopeDaily", make_ctx({"sunSign": "Tau"}))
    assert len(result) == 12
    body = api.last_json()
    assert body["sign"] == "Tau"
    assert "birth_data" not in body
    assert body["sections"]["max_planetary_influences"] == 5


def test_pdf_weekly_birth_mode(api, make_ctx) -> None:
    params = {
        "pdfMode": "birthData",
        "pdfBirthYear": 1990,
        "pdfBirthMonth": 6,
        "pdfBirthDay": 15,
        "pdfBirthHour": 14,
        "pdfBirthMinute": 30,
        "pdfBirthCity": "London",
        "pdfBirthCountryCode": "GB",
    }
    _, body = _post(api, make_ctx, "pdf", "horoscopeWeekly", params)
    assert body["birth_data"] == NATAL_BIRTH_DATA
    assert "sign" not in body


def test_pdf_horoscope_data_defaults_to_today(api, make_ctx) -> None:
    path, _ = _get(api, make_ctx, "pdf", "horoscopeData")
    today = datetime.now(UTC).date().isoformat()
    assert path == f"/api/v3/pdf/horoscope/data/Ari/{today}"


def test_render_transit(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, "transitCity": "Oslo", "transitCountryCode": "NO"}
    path, body = _post(api, make_ctx, "render", "transit", params)
    assert path == "/api/v3/render/transit"
    assert body["render_options"]["format"] == "svg"
    assert body["transit_time"]["datetime"]["city"] == "Oslo"


# ---- tarot ----


def test_tarot_daily_card_birth_query(api, make_ctx) -> None:
    params = {"userId": "u-1", "year": 1990, "month": 6, "day": 0, "hour": 0, "minute": 0}
    path, query = _get(api, make_ctx, "tarot", "dailyCard", params)
    assert path == "/api/v3/tarot/cards/daily"
    assert query == {"user_id": "u-1", "birth_year": "1990", "birth_month": "6"}


def test_tarot_daily_card_accepts_numeric_text(api, make_ctx) -> None:
    params = {"userId": "u-1", "year": "1990", "month": "6", "day": ""}
    _, query = _get(api, make_ctx, "tarot", "dailyCard", params)
    assert query == {"user_id": "u-1", "birth_year": "1990", "birth_month": "6"}


def test_tarot_glossary_cards_house_filter(api, make_ctx) -> None:
    _, query = _get(api, make_ctx, "tarot", "glossaryCards", {"house": "4"})
    assert query["house"] == "4"
    with pytest.raises(ParameterError) as excinfo:
        dispatch("tarot", "glossaryCards", make_ctx({"house": "fourth"}))
    assert excinfo.value.name == "house"


def test_tarot_daily_card_requires_user(api, make_ctx) -> None:
    with pytest.raises(ParameterError) as excinfo:
        dispatch("tarot", "dailyCard", make_ctx({}))
    assert excinfo.value.name == "userId"


def test_tarot_synastry_report(api, make_ctx) -> None:
    params = {**NATAL_PARAMS, **SECOND_SUBJECT_PARAMS, "lifeArea": "love"}
    path, body = _post(api, make_ctx, "tarot", "reportSynastry", params)
    assert path == "/api/v3/tarot/reports/synastry"
    assert body["partner_birth_data"] == SECOND_BIRTH_DATA
    assert body["life_area"] == "love"
    assert body["tradition"] == "universal"


def test_tarot_card_analysis(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "tarot", "analysisQuintessence", {"cardIds": "major_00, major_01"})
    assert body["cards"] == ["major_00", "major_01"]


# ---- traditional / vedic / ziwei ----


def test_traditional_dignities(api, make_ctx) -> None:
    _, body = _post(api, make_ctx, "traditional", "dignities", NATAL_PARAMS)
    assert body["options"] == {
        "include_asteroids": False,
        "include_fixed_stars": True,
        "dignity_system": "traditional",
    }
    assert body["orbs"] == {"major_aspects_deg": 2.0}
    _, body = _post(api, make_ctx, "traditional", "profections", NATAL_PARAMS)
    assert body == {"subject": {"birth_data": NATAL_BIRTH_DATA}, "current_age": 30}


def test_vedic_divisional_chart(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "vedic", "divisionalChart", {**NATAL_PARAMS, "divisionalChart": "D10"})
    assert path == "/api/v3/vedic/divisional-chart"
    assert body == {
        "subject": {"birth_data": NATAL_BIRTH_DATA},
        "division": "D10",
        "chart_options": {"ayanamsa": "lahiri", "node_type": "mean", "precision": 2},
    }


def test_vedic_render_and_panchang(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "vedic", "chartRender", NATAL_PARAMS)
    assert path == "/api/v3/vedic/chart/render/svg"
    assert body["style"] == "north_indian"
    _, body = _post(api, make_ctx, "vedic", "panchang", NATAL_PARAMS)
    assert body == {
        "datetime_location": NATAL_BIRTH_DATA,
        "ayanamsa": "lahiri",
        "node_type": "mean",
        "precision": 2,
    }


def test_vedic_varshaphal_requires_year(api, make_ctx) -> None:
    with pytest.raises(ParameterError) as excinfo:
        dispatch("vedic", "varshaphal", make_ctx(NATAL_PARAMS))
    assert excinfo.value.name == "targetYear"


def test_ziwei_chart(api, make_ctx) -> None:
    path, body = _post(api, make_ctx, "ziwei", "chart", {**NATAL_PARAMS, "name": "Li"})
    assert path == "/api/v3/ziwei/chart"
    assert body == {
        "birth_data": NATAL_BIRTH_DATA,
        "gender": "male",
        "language": "en",
        "name": "Li",
    }
