"""Astrology API node: resource dispatch, payload builders and HTTP transport."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _get_version

try:
    __version__ = _get_version("astrology-node")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

from .config.settings import Credentials, Settings, get_settings, load_settings
from .context import ItemParameters, ParameterSource, RequestContext
from .dispatch import ResourceRegistry, default_registry, dispatch
from .errors import (
    ApiError,
    AstrologyNodeError,
    ConfigurationError,
    ItemExecutionError,
    ParameterError,
    UnsupportedOperationError,
    UnsupportedResourceError,
)
from .executor import Executor
from .simplify import simplify_response
from .transport import ApiClient

__all__ = [
    "__version__",
    "ApiClient",
    "ApiError",
    "AstrologyNodeError",
    "ConfigurationError",
    "Credentials",
    "Executor",
    "ItemExecutionError",
    "ItemParameters",
    "ParameterError",
    "ParameterSource",
    "RequestContext",
    "ResourceRegistry",
    "Settings",
    "UnsupportedOperationError",
    "UnsupportedResourceError",
    "default_registry",
    "dispatch",
    "get_settings",
    "load_settings",
    "simplify_response",
]
