"""Shared payload builders.

Every builder reads named parameters for the current record from a
:class:`~astrology_node.context.RequestContext` and returns plain data or a
validated value object. Builders never talk to the network.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .context import MISSING, RequestContext
from .errors import ParameterError
from .models import (
    BirthData,
    BirthDate,
    DateTimeLocation,
    LocationType,
    Subject,
    TransitTime,
)

__all__ = [
    "build_birth_data",
    "build_birth_date",
    "build_city_moment",
    "build_date_range",
    "build_date_time_location",
    "build_location",
    "build_second_subject_birth_data",
    "build_transit_time",
    "build_utc_datetime",
    "create_subject_request",
    "create_two_subject_request",
    "current_year",
    "param_name",
    "read_int",
    "read_language",
    "read_optional",
    "read_subject_name",
    "subject_payload",
    "subjects_list",
    "to_birth_payload",
]

ModelT = TypeVar("ModelT", bound=BaseModel)

_MOMENT_FIELDS = ("year", "month", "day", "hour", "minute")
_TRANSIT_DEFAULTS = {"year": 2024, "month": 1, "day": 1, "hour": 12, "minute": 0}
_FIELD_PARAMS = {
    "country_code": "countryCode",
    "city": "city",
    "latitude": "latitude",
    "longitude": "longitude",
    "second": "second",
    "timezone": "timezone",
}


def param_name(prefix: str, name: str) -> str:
    """Return the parameter name for ``name`` under ``prefix`` (camelCase join)."""

    if not prefix:
        return name
    return f"{prefix}{name[0].upper()}{name[1:]}"


def current_year() -> int:
    return date.today().year


def read_optional(ctx: RequestContext, name: str) -> Optional[Any]:
    """Return the parameter value, or ``None`` when absent or blank."""

    value = ctx.param(name, None)
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def read_int(ctx: RequestContext, name: str, default: int = 0) -> int:
    """Return the parameter as an ``int``; blank or absent values yield ``default``."""

    value = read_optional(ctx, name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ParameterError(name, ctx.item_index, f"must be an integer, got {value!r}") from None


def read_language(ctx: RequestContext, default: str = "en") -> str:
    return ctx.param("language", default)


def read_subject_name(ctx: RequestContext, name: str = "subjectName") -> Optional[str]:
    return read_optional(ctx, name)


def _validate(
    ctx: RequestContext,
    model: Type[ModelT],
    fields: Mapping[str, Any],
    prefix: str,
) -> ModelT:
    try:
        return model(**fields)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = first.get("loc") or ()
        field = str(loc[0]) if loc else "locationType"
        name = param_name(prefix, _FIELD_PARAMS.get(field, field))
        raise ParameterError(name, ctx.item_index, first.get("msg", str(exc))) from exc


def _read_moment(
    ctx: RequestContext,
    prefix: str,
    defaults: Optional[Mapping[str, Any]] = None,
    fields: Iterable[str] = _MOMENT_FIELDS,
) -> Dict[str, Any]:
    defaults = defaults or {}
    return {
        key: ctx.param(param_name(prefix, key), defaults.get(key, MISSING))
        for key in fields
    }


def _read_location(ctx: RequestContext, prefix: str) -> Dict[str, Any]:
    type_param = param_name(prefix, "locationType")
    raw_type = ctx.param(type_param, LocationType.CITY.value)
    try:
        location_type = LocationType(raw_type)
    except ValueError:
        raise ParameterError(
            type_param, ctx.item_index, f"must be 'city' or 'coordinates', got {raw_type!r}"
        ) from None
    if location_type is LocationType.CITY:
        return {
            "city": ctx.param(param_name(prefix, "city")),
            "country_code": ctx.param(param_name(prefix, "countryCode")),
        }
    return {
        "latitude": ctx.param(param_name(prefix, "latitude")),
        "longitude": ctx.param(param_name(prefix, "longitude")),
    }


def build_birth_data(ctx: RequestContext, prefix: str = "") -> BirthData:
    """Build the primary subject's birth data.

    Reads ``year``, ``month``, ``day``, ``hour``, ``minute`` and the location
    selected by ``locationType`` (``city`` + ``countryCode`` or ``latitude`` +
    ``longitude``). Raises :class:`ParameterError` for absent or invalid values.
    """

    fields = _read_moment(ctx, prefix)
    fields.update(_read_location(ctx, prefix))
    return _validate(ctx, BirthData, fields, prefix)


def build_second_subject_birth_data(ctx: RequestContext) -> BirthData:
    """Birth data for the second person, read from ``subject2*`` parameters."""

    return build_birth_data(ctx, prefix="subject2")


def build_transit_time(ctx: RequestContext) -> TransitTime:
    """Transit moment from ``transit*`` parameters (defaults to 2024-01-01 12:00)."""

    fields = _read_moment(ctx, "transit", _TRANSIT_DEFAULTS)
    fields.update(_read_location(ctx, "transit"))
    return _validate(ctx, TransitTime, fields, "transit")


def build_date_time_location(ctx: RequestContext) -> DateTimeLocation:
    fields = _read_moment(ctx, "")
    fields.update(_read_location(ctx, ""))
    second = ctx.param("second", None)
    if second is not None:
        fields["second"] = second
    if "latitude" in fields:
        timezone = read_optional(ctx, "timezone")
        if timezone:
            fields["timezone"] = timezone
    return _validate(ctx, DateTimeLocation, fields, "")


def build_location(ctx: RequestContext, prefix: str) -> Dict[str, Any]:
    """Location without a moment, in the form selected by ``{prefix}LocationType``.

    Blank strings are rejected the same way :func:`build_birth_data` rejects them.
    """

    location = _read_location(ctx, prefix)
    for key, value in location.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ParameterError(param_name(prefix, _FIELD_PARAMS[key]), ctx.item_index)
    return location


def build_city_moment(
    ctx: RequestContext,
    prefix: str,
    defaults: Optional[Mapping[str, Any]] = None,
) -> BirthData:
    """Moment plus city location read from ``{prefix}Year`` … ``{prefix}CountryCode``.

    Used where the API only accepts the city form (horary questions, eclipse
    and PDF birth data).
    """

    fields = _read_moment(ctx, prefix, defaults)
    fields["city"] = ctx.param(param_name(prefix, "city"), (defaults or {}).get("city", MISSING))
    fields["country_code"] = ctx.param(
        param_name(prefix, "countryCode"), (defaults or {}).get("country_code", MISSING)
    )
    return _validate(ctx, BirthData, fields, prefix)


def build_birth_date(
    ctx: RequestContext,
    prefix: str = "",
    defaults: Optional[Mapping[str, Any]] = None,
) -> BirthDate:
    fields = _read_moment(ctx, prefix, defaults, fields=("year", "month", "day"))
    return _validate(ctx, BirthDate, fields, prefix)


def build_utc_datetime(ctx: RequestContext, prefix: str = "") -> str:
    """ISO-8601 UTC timestamp (``1990-06-15T14:30:00.000Z``) from the moment parameters."""

    fields = _read_moment(ctx, prefix)
    try:
        stamp = datetime(*(int(fields[key]) for key in _MOMENT_FIELDS), tzinfo=UTC)
    except (TypeError, ValueError) as exc:
        names = "/".join(param_name(prefix, key) for key in _MOMENT_FIELDS)
        raise ParameterError(names, ctx.item_index, f"is not a valid date: {exc}") from exc
    return stamp.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def build_date_range(ctx: RequestContext) -> Dict[str, str]:
    """Return ``start_date``/``end_date`` when both are supplied, else ``{}``.

    The range fields only exist for some operations; absence is not an error.
    """

    start = read_optional(ctx, "startDate")
    end = read_optional(ctx, "endDate")
    if start and end:
        return {"start_date": start, "end_date": end}
    return {}


# ---- Subject wrappers ----


def to_birth_payload(birth_data: BirthData | Mapping[str, Any]) -> Dict[str, Any]:
    if isinstance(birth_data, (BirthData, BirthDate)):
        return birth_data.to_payload()
    return dict(birth_data)


def subject_payload(
    birth_data: BirthData | Mapping[str, Any], name: Optional[str] = None
) -> Dict[str, Any]:
    """``{"birth_data": ..., "name"?: ...}``."""

    if isinstance(birth_data, BirthData):
        return Subject(birth_data=birth_data, name=name).to_payload()
    payload: Dict[str, Any] = {"birth_data": to_birth_payload(birth_data)}
    if name:
        payload["name"] = name
    return payload


def create_subject_request(
    birth_data: BirthData | Mapping[str, Any],
    extra_fields: Optional[Mapping[str, Any]] = None,
    *,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """Wrap birth data as ``{"subject": {"birth_data": ...}, **extra_fields}``."""

    return {"subject": subject_payload(birth_data, name), **(extra_fields or {})}


def create_two_subject_request(
    first: BirthData | Mapping[str, Any],
    second: BirthData | Mapping[str, Any],
    extra_fields: Optional[Mapping[str, Any]] = None,
    *,
    names: tuple[Optional[str], Optional[str]] = (None, None),
) -> Dict[str, Any]:
    """``{"subject1": {...}, "subject2": {...}, **extra_fields}``."""

    return {
        "subject1": subject_payload(first, names[0]),
        "subject2": subject_payload(second, names[1]),
        **(extra_fields or {}),
    }


def subjects_list(
    *subjects: BirthData | Mapping[str, Any],
    names: Iterable[Optional[str]] = (),
) -> list[Dict[str, Any]]:
    """``[{"birth_data": ...}, ...]`` for endpoints taking a ``subjects`` array."""

    labels = list(names)
    labels += [None] * (len(subjects) - len(labels))
    return [subject_payload(subject, label) for subject, label in zip(subjects, labels)]
