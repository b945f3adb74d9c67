"""API resources exposed by the node, one module per domain."""

from __future__ import annotations

from ._base import Handler, Resource
from .analysis import resource as analysis
from .astrocartography import resource as astrocartography
from .charts import resource as charts
from .chinese import resource as chinese
from .data import resource as data
from .eclipses import resource as eclipses
from .enhanced import resource as enhanced
from .fengshui import resource as fengshui
from .fixed_stars import resource as fixed_stars
from .glossary import resource as glossary
from .horary import resource as horary
from .horoscope import resource as horoscope
from .human_design import resource as human_design
from .insights import resource as insights
from .kabbalah import resource as kabbalah
from .lunar import resource as lunar
from .numerology import resource as numerology
from .pdf import resource as pdf
from .render import resource as render
from .tarot import resource as tarot
from .traditional import resource as traditional
from .vedic import resource as vedic
from .ziwei import resource as ziwei

__all__ = ["ALL_RESOURCES", "Handler", "Resource"]

ALL_RESOURCES: tuple[Resource, ...] = (
    data,
    horoscope,
    charts,
    analysis,
    astrocartography,
    chinese,
    eclipses,
    enhanced,
    fengshui,
    fixed_stars,
    glossary,
    horary,
    human_design,
    insights,
    kabbalah,
    lunar,
    numerology,
    pdf,
    render,
    tarot,
    traditional,
    vedic,
    ziwei,
)

for _resource in ALL_RESOURCES:
    _resource.validate()
del _resource
