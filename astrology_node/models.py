"""Pydantic value objects sent to the Astrology API."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

__all__ = [
    "BirthData",
    "BirthDate",
    "DateTimeLocation",
    "LocationType",
    "Subject",
    "TransitTime",
]


class LocationType(str, Enum):
    CITY = "city"
    COORDINATES = "coordinates"


class BirthDate(BaseModel):
    """Calendar date without time or place (numerology inputs)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class BirthData(BaseModel):
    """Date, time and exactly one location form.

    The location is either ``city`` + ``country_code`` or ``latitude`` +
    ``longitude``. Mixing the two forms, or supplying neither, is rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    hour: int = Field(ge=0, le=23)
    minute: int = Field(ge=0, le=59)
    city: Optional[str] = None
    country_code: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    longitude: Optional[float] = Field(default=None, ge=-180.0, le=180.0)

    @field_validator("city", "country_code")
    @classmethod
    def _reject_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @model_validator(mode="after")
    def _single_location_form(self) -> "BirthData":
        city_form = (self.city, self.country_code)
        coordinate_form = (self.latitude, self.longitude)
        uses_city = any(value is not None for value in city_form)
        uses_coordinates = any(value is not None for value in coordinate_form)
        if uses_city and uses_coordinates:
            raise ValueError("city/country_code and latitude/longitude are mutually exclusive")
        if uses_city and None in city_form:
            raise ValueError("city and country_code must be given together")
        if uses_coordinates and None in coordinate_form:
            raise ValueError("latitude and longitude must be given together")
        if not (uses_city or uses_coordinates):
            raise ValueError("a location (city or coordinates) is required")
        return self

    @property
    def location_type(self) -> LocationType:
        return LocationType.CITY if self.city is not None else LocationType.COORDINATES

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class TransitTime(BirthData):
    """Moment and place at which transiting positions are evaluated."""


class DateTimeLocation(BirthData):
    """Moment and place for lunar and panchang calculations.

    Adds an optional ``second`` and, for the coordinate form, an IANA
    ``timezone`` name.
    """

    second: Optional[int] = Field(default=None, ge=0, le=59)
    timezone: Optional[str] = None

    @model_validator(mode="after")
    def _timezone_needs_coordinates(self) -> "DateTimeLocation":
        if self.timezone is not None and self.location_type is LocationType.CITY:
            raise ValueError("timezone is only accepted with latitude/longitude")
        return self


class Subject(BaseModel):
    """A person: birth data plus an optional display name."""

    model_config = ConfigDict(frozen=True)

    birth_data: BirthData
    name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"birth_data": self.birth_data.to_payload()}
        if self.name:
            payload["name"] = self.name
        return payload
