"""Kabbalah: tree of life, birth angels, tikkun and gematria."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..builders import build_birth_data, read_language, read_optional
from ..context import RequestContext
from ..errors import ParameterError
from ..options import split_csv
from ._base import Resource

__all__ = ["KabbalahOperation", "resource"]


class KabbalahOperation(str, Enum):
    GLOSSARY_SEPHIROTH = "glossarySephiroth"
    GLOSSARY_HEBREW_LETTERS = "glossaryHebrewLetters"
    GLOSSARY_ANGELS_72 = "glossaryAngels72"
    TREE_OF_LIFE_CHART = "treeOfLifeChart"
    BIRTH_ANGELS = "birthAngels"
    TIKKUN = "tikkun"
    GEMATRIA = "gematria"


KABBALAH_ENDPOINTS = {
    KabbalahOperation.GLOSSARY_SEPHIROTH: "/api/v3/kabbalah/glossary/sephiroth",
    KabbalahOperation.GLOSSARY_HEBREW_LETTERS: "/api/v3/kabbalah/glossary/hebrew-letters",
    KabbalahOperation.GLOSSARY_ANGELS_72: "/api/v3/kabbalah/glossary/angels-72",
    KabbalahOperation.TREE_OF_LIFE_CHART: "/api/v3/kabbalah/tree-of-life-chart",
    KabbalahOperation.BIRTH_ANGELS: "/api/v3/kabbalah/birth-angels",
    KabbalahOperation.TIKKUN: "/api/v3/kabbalah/tikkun",
    KabbalahOperation.GEMATRIA: "/api/v3/kabbalah/gematria",
}

resource: Resource[KabbalahOperation] = Resource(
    "kabbalah",
    KabbalahOperation,
    KABBALAH_ENDPOINTS,
    description="Kabbalistic charts and gematria",
)


@resource.handles(
    KabbalahOperation.GLOSSARY_SEPHIROTH,
    KabbalahOperation.GLOSSARY_HEBREW_LETTERS,
    KabbalahOperation.GLOSSARY_ANGELS_72,
)
def _glossary(ctx: RequestContext, op: KabbalahOperation) -> Any:
    return ctx.get(resource.endpoint(op))


@resource.handles(KabbalahOperation.GEMATRIA)
def _gematria(ctx: RequestContext, op: KabbalahOperation) -> Any:
    text = read_optional(ctx, "gematriaText")
    if not text:
        raise ParameterError("gematriaText", ctx.item_index)
    body = {
        "text": text,
        "methods": split_csv(ctx.param("gematriaMethods", ["mispar_gadol", "mispar_katan"])),
        "find_equivalents": ctx.param("findEquivalents", False),
        "language": read_language(ctx),
    }
    return ctx.post(resource.endpoint(op), body)


@resource.handles(
    KabbalahOperation.TREE_OF_LIFE_CHART,
    KabbalahOperation.BIRTH_ANGELS,
    KabbalahOperation.TIKKUN,
)
def _birth_chart(ctx: RequestContext, op: KabbalahOperation) -> Any:
    body: Dict[str, Any] = {
        "birth_data": build_birth_data(ctx).to_payload(),
        "language": read_language(ctx),
    }
    if op is not KabbalahOperation.TIKKUN:
        body["system"] = ctx.param("kabbalahSystem", "modern_halevi")
    if op is KabbalahOperation.TREE_OF_LIFE_CHART:
        body["include_daat"] = ctx.param("includeDaat", True)
        body["include_paths"] = ctx.param("includePaths", True)
    return ctx.post(resource.endpoint(op), body)
