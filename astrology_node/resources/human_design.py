"""Human Design bodygraphs, compatibility and glossary."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import (
    build_birth_data,
    build_second_subject_birth_data,
    read_language,
    read_optional,
    read_subject_name,
    subject_payload,
    subjects_list,
)
from ..context import RequestContext
from ._base import Resource

__all__ = ["HumanDesignOperation", "resource"]


class HumanDesignOperation(str, Enum):
    GLOSSARY_CHANNELS = "glossaryChannels"
    GLOSSARY_GATES = "glossaryGates"
    GLOSSARY_TYPES = "glossaryTypes"
    BODYGRAPH = "bodygraph"
    COMPATIBILITY = "compatibility"
    DESIGN_DATE = "designDate"
    TRANSITS = "transits"
    TYPE_ONLY = "typeOnly"


_Op = HumanDesignOperation

HUMAN_DESIGN_ENDPOINTS = {
    _Op.GLOSSARY_CHANNELS: "/api/v3/human-design/glossary/channels",
    _Op.GLOSSARY_GATES: "/api/v3/human-design/glossary/gates",
    _Op.GLOSSARY_TYPES: "/api/v3/human-design/glossary/types",
    _Op.BODYGRAPH: "/api/v3/human-design/bodygraph",
    _Op.COMPATIBILITY: "/api/v3/human-design/compatibility",
    _Op.DESIGN_DATE: "/api/v3/human-design/design-date",
    _Op.TRANSITS: "/api/v3/human-design/transits",
    _Op.TYPE_ONLY: "/api/v3/human-design/type",
}

# Glossary filter parameter per lookup, sent only when non-blank.
_GLOSSARY_FILTERS = {
    _Op.GLOSSARY_CHANNELS: "circuit",
    _Op.GLOSSARY_GATES: "center",
    _Op.GLOSSARY_TYPES: None,
}

resource: Resource[HumanDesignOperation] = Resource(
    "humanDesign",
    HumanDesignOperation,
    HUMAN_DESIGN_ENDPOINTS,
    raw=_GLOSSARY_FILTERS,
    description="Human Design charts",
)


def _options(ctx: RequestContext) -> Dict[str, Any]:
    return {
        "language": read_language(ctx),
        "include_interpretations": ctx.param("includeInterpretations", True),
    }


def _subject(ctx: RequestContext) -> Dict[str, Any]:
    return subject_payload(build_birth_data(ctx), read_subject_name(ctx))


@resource.handles(*_GLOSSARY_FILTERS)
def _glossary(ctx: RequestContext, op: HumanDesignOperation) -> Any:
    query = {"language": read_language(ctx)}
    filter_name = _GLOSSARY_FILTERS[op]
    if filter_name:
        value = read_optional(ctx, filter_name)
        if value:
            query[filter_name] = value
    return ctx.get(resource.endpoint(op), params=query)


@resource.handles(_Op.BODYGRAPH)
def _bodygraph(ctx: RequestContext, op: HumanDesignOperation) -> Any:
    body = {
        "subject": _subject(ctx),
        "options": _options(ctx),
        "hd_options": {
            "include_channels": ctx.param("includeChannels", True),
            "include_design_chart": ctx.param("includeDesignChart", True),
            "include_variables": ctx.param("includeVariables", False),
        },
    }
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.COMPATIBILITY)
def _compatibility(ctx: RequestContext, op: HumanDesignOperation) -> Any:
    body = {
        "subjects": subjects_list(
            build_birth_data(ctx),
            build_second_subject_birth_data(ctx),
            names=(read_subject_name(ctx), read_subject_name(ctx, "subject2Name")),
        ),
        "options": _options(ctx),
        "hd_options": {"include_channels": ctx.param("includeChannels", True)},
    }
    return ctx.post(resource.endpoint(op), body)


@resource.handles(_Op.DESIGN_DATE, _Op.TYPE_ONLY)
def _subject_only(ctx: RequestContext, op: HumanDesignOperation) -> Any:
    return ctx.post(resource.endpoint(op), {"subject": _subject(ctx)})


@resource.handles(_Op.TRANSITS)
def _transits(ctx: RequestContext, op: HumanDesignOperation) -> Any:
    body: Dict[str, Any] = {"subject": _subject(ctx), "options": _options(ctx)}
    transit_datetime = read_optional(ctx, "transitDatetime")
    if transit_datetime:
        body["transit_datetime"] = transit_datetime
    return ctx.post(resource.endpoint(op), body)
