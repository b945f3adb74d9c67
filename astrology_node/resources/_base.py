"""Resource definition shared by every API domain module."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, Mapping, TypeVar
from urllib.parse import quote

from ..context import RequestContext
from ..errors import UnsupportedOperationError
from ..simplify import apply_simplify

__all__ = ["Handler", "Resource"]

LOGGER = logging.getLogger(__name__)

OpT = TypeVar("OpT", bound=Enum)
Handler = Callable[[RequestContext, Any], Any]


class Resource(Generic[OpT]):
    """A closed set of operations bound to endpoints and handlers.

    ``operations`` is an ``Enum`` whose values are the operation names used by
    callers. Every member must be bound to exactly one handler (see
    :meth:`validate`) and one endpoint template. Templates may contain
    ``{placeholders}`` filled by :meth:`endpoint`; substituted values are
    percent-encoded as single path segments.
    """

    def __init__(
        self,
        name: str,
        operations: type[OpT],
        endpoints: Mapping[OpT, str],
        *,
        simplify: bool = True,
        raw: Iterable[OpT] = (),
        description: str = "",
    ) -> None:
        self.name = name
        self.operations = operations
        self.endpoints: Dict[OpT, str] = dict(endpoints)
        self.simplify = simplify
        self.raw_operations = frozenset(raw)
        self.description = description
        self._handlers: Dict[OpT, Handler] = {}

    def __repr__(self) -> str:
        return f"Resource({self.name!r}, operations={len(self.operations)})"

    def handles(self, *operations: OpT) -> Callable[[Handler], Handler]:
        """Decorator binding ``func`` as the handler of ``operations``."""

        def decorator(func: Handler) -> Handler:
            for operation in operations:
                if operation in self._handlers:
                    raise ValueError(f"{self.name}.{operation.value} is already bound")
                self._handlers[operation] = func
            return func

        return decorator

    def parse_operation(self, value: str | OpT) -> OpT:
        if isinstance(value, self.operations):
            return value
        try:
            return self.operations(value)
        except ValueError:
            raise UnsupportedOperationError(self.name, str(value)) from None

    def endpoint(self, operation: OpT, **segments: Any) -> str:
        template = self.endpoints[operation]
        if not segments:
            return template
        encoded = {key: quote(str(value), safe="") for key, value in segments.items()}
        return template.format(**encoded)

    def operation_names(self) -> list[str]:
        return [member.value for member in self.operations]

    def validate(self) -> None:
        """Raise ``RuntimeError`` unless every operation has a handler and an endpoint."""

        members = set(self.operations)
        unbound = sorted(op.value for op in members - set(self._handlers))
        unrouted = sorted(op.value for op in members - set(self.endpoints))
        if unbound or unrouted:
            raise RuntimeError(
                f"resource {self.name!r} is incomplete: "
                f"no handler for {unbound or '-'}, no endpoint for {unrouted or '-'}"
            )

    def __call__(self, ctx: RequestContext, operation: str | OpT) -> Any:
        op = self.parse_operation(operation)
        LOGGER.debug("dispatch %s.%s (item %d)", self.name, op.value, ctx.item_index)
        result = self._handlers[op](ctx, op)
        if self.simplify and op not in self.raw_operations:
            return apply_simplify(ctx, result)
        return result
