"""Resource registry and the ``dispatch`` entry point.

The registry maps resource names (``"charts"``, ``"humanDesign"`` …) to
:class:`~astrology_node.resources.Resource` objects. Every resource is
checked for completeness when it is registered (the built-in ones on
import of :mod:`astrology_node.resources`), so a missing handler or
endpoint fails at import time rather than on the first request.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache
from typing import Any

from .context import RequestContext
from .errors import UnsupportedResourceError
from .observability.metrics import OPERATION_FAILURES, OPERATIONS_DISPATCHED
from .resources import ALL_RESOURCES, Resource

__all__ = ["ResourceRegistry", "default_registry", "dispatch"]

LOGGER = logging.getLogger(__name__)


class ResourceRegistry:
    """Mutable mapping of resource name to :class:`Resource`."""

    def __init__(self, resources: Iterable[Resource] = ()) -> None:
        self._resources: dict[str, Resource] = {}
        for resource in resources:
            self.register(resource)

    def __contains__(self, name: object) -> bool:
        return name in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def register(self, resource: Resource, *, replace: bool = False) -> Resource:
        resource.validate()
        if resource.name in self._resources and not replace:
            raise ValueError(f"resource {resource.name!r} is already registered")
        self._resources[resource.name] = resource
        return resource

    def get(self, name: str) -> Resource:
        try:
            return self._resources[name]
        except KeyError:
            raise UnsupportedResourceError(str(name)) from None

    def names(self) -> list[str]:
        return list(self._resources)

    def iter_resources(self) -> Iterable[Resource]:
        return self._resources.values()

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Return a serialisable catalogue of resources and their operations."""

        return {
            name: {
                "description": resource.description,
                "operations": resource.operation_names(),
            }
            for name, resource in self._resources.items()
        }

    def dispatch(self, resource_name: str, operation: str, ctx: RequestContext) -> Any:
        """Route ``operation`` on ``resource_name`` and return the response envelope."""

        resource = self.get(resource_name)
        try:
            result = resource(ctx, operation)
        except Exception as exc:
            OPERATION_FAILURES.labels(resource_name, type(exc).__name__).inc()
            raise
        OPERATIONS_DISPATCHED.labels(resource_name, str(operation)).inc()
        return result


@lru_cache(maxsize=1)
def default_registry() -> ResourceRegistry:
    """Registry holding every built-in resource."""

    registry = ResourceRegistry(ALL_RESOURCES)
    LOGGER.debug("registered %d resources", len(registry))
    return registry


def dispatch(resource: str, operation: str, ctx: RequestContext) -> Any:
    return default_registry().dispatch(resource, operation, ctx)
