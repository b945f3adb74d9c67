"""Exception hierarchy for the Astrology API node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

__all__ = [
    "AstrologyNodeError",
    "ApiError",
    "ConfigurationError",
    "ItemExecutionError",
    "ParameterError",
    "UnsupportedOperationError",
    "UnsupportedResourceError",
]


class AstrologyNodeError(Exception):
    """Base class for every error raised by the node."""


class ConfigurationError(AstrologyNodeError):
    """Raised when credentials or settings cannot be resolved."""


class ParameterError(AstrologyNodeError):
    """A required named parameter is absent or holds an unusable value."""

    def __init__(self, name: str, item_index: int, reason: str | None = None) -> None:
        self.name = name
        self.item_index = item_index
        self.reason = reason or "is required"
        super().__init__(f'Parameter "{name}" {self.reason} (item {item_index})')


class UnsupportedResourceError(AstrologyNodeError):
    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f'Resource "{resource}" is not supported')


class UnsupportedOperationError(AstrologyNodeError):
    def __init__(self, resource: str, operation: str) -> None:
        self.resource = resource
        self.operation = operation
        super().__init__(f'Operation "{operation}" is not supported for {resource}')


@dataclass(eq=False)
class ApiError(AstrologyNodeError):
    """Transport failure talking to the Astrology API.

    ``status_code`` is ``None`` when no HTTP response was received (network
    errors, timeouts). The underlying exception is chained as ``__cause__``.
    """

    code: str
    status_code: Optional[int]
    message: str
    payload: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{self.code}: {self.message}"
        return f"{self.status_code} {self.code}: {self.message}"


class ItemExecutionError(AstrologyNodeError):
    """Raised by the executor when one input record fails and aborts the batch."""

    def __init__(
        self,
        item_index: int,
        error: BaseException,
        *,
        resource: str | None = None,
        operation: str | None = None,
    ) -> None:
        self.item_index = item_index
        self.error = error
        self.resource = resource
        self.operation = operation
        target = "/".join(part for part in (resource, operation) if part)
        label = f" [{target}]" if target else ""
        super().__init__(f"Item {item_index}{label} failed: {error}")
