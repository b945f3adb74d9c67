"""Moon phases, void-of-course periods, mansions and calendars."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_date_time_location
from ..context import RequestContext
from ._base import Resource

__all__ = ["LunarOperation", "resource"]


class LunarOperation(str, Enum):
    PHASES = "phases"
    VOID_OF_COURSE = "voidOfCourse"
    MANSIONS = "mansions"
    EVENTS = "events"
    CALENDAR = "calendar"


LUNAR_ENDPOINTS = {
    LunarOperation.PHASES: "/api/v3/lunar/phases",
    LunarOperation.VOID_OF_COURSE: "/api/v3/lunar/void-of-course",
    LunarOperation.MANSIONS: "/api/v3/lunar/mansions",
    LunarOperation.EVENTS: "/api/v3/lunar/events",
    LunarOperation.CALENDAR: "/api/v3/lunar/calendar/{year}",
}

LOOKAHEAD_OPERATIONS = frozenset(
    {LunarOperation.PHASES, LunarOperation.VOID_OF_COURSE, LunarOperation.EVENTS}
)

resource: Resource[LunarOperation] = Resource(
    "lunar",
    LunarOperation,
    LUNAR_ENDPOINTS,
    description="Lunar cycles and calendars",
)


@resource.handles(LunarOperation.CALENDAR)
def _calendar(ctx: RequestContext, op: LunarOperation) -> Any:
    return ctx.get(resource.endpoint(op, year=ctx.param("calendarYear")))


@resource.handles(
    LunarOperation.PHASES,
    LunarOperation.VOID_OF_COURSE,
    LunarOperation.MANSIONS,
    LunarOperation.EVENTS,
)
def _moment(ctx: RequestContext, op: LunarOperation) -> Any:
    body: Dict[str, Any] = {"datetime_location": build_date_time_location(ctx).to_payload()}
    if op in LOOKAHEAD_OPERATIONS:
        body["days_ahead"] = ctx.param("daysAhead", 30)
    if op is LunarOperation.VOID_OF_COURSE:
        body["use_modern_planets"] = ctx.param("useModernPlanets", False)
    return ctx.post(resource.endpoint(op), body)
