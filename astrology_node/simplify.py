"""Response trimming ("simplify")."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .context import RequestContext

__all__ = ["DEFAULT_MAX_KEYS", "apply_simplify", "simplify_response"]

DEFAULT_MAX_KEYS = 10


def simplify_response(response: Any, max_keys: int = DEFAULT_MAX_KEYS) -> Any:
    """Keep only the first ``max_keys`` top-level keys of ``response``.

    Keys are kept in the order the API serialized them; nested values are
    untouched. Objects already within the limit, and non-object responses,
    are returned as-is.
    """

    if max_keys < 0:
        raise ValueError("max_keys must be non-negative")
    if not isinstance(response, dict) or len(response) <= max_keys:
        return response
    return {key: response[key] for key in list(response)[:max_keys]}


def apply_simplify(ctx: "RequestContext", response: Any) -> Any:
    """Apply :func:`simplify_response` when the record's ``simplify`` flag is set."""

    if ctx.param("simplify", True):
        return simplify_response(response, ctx.simplify_max_keys)
    return response
