"""Per-record parameter lookup and request context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol, Sequence

from .errors import ParameterError

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .transport import ApiClient

__all__ = ["MISSING", "ItemParameters", "ParameterSource", "RequestContext"]


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class ParameterSource(Protocol):
    """Host capability returning a named parameter for one input record.

    Implementations raise :class:`~astrology_node.errors.ParameterError`
    when ``name`` is absent and no ``default`` was supplied.
    """

    def get_parameter(self, name: str, item_index: int, default: Any = MISSING) -> Any: ...


class ItemParameters:
    """Parameter source backed by one mapping per input record.

    ``None`` values are treated as absent so sparse YAML/JSON records fall
    through to ``shared`` values and then to the caller's default.
    """

    def __init__(
        self,
        items: Sequence[Mapping[str, Any]],
        *,
        shared: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._items = list(items)
        self._shared = dict(shared or {})

    def __len__(self) -> int:
        return len(self._items)

    def get_parameter(self, name: str, item_index: int, default: Any = MISSING) -> Any:
        try:
            item = self._items[item_index]
        except IndexError:
            raise ParameterError(name, item_index, "refers to a missing input record") from None
        value = item.get(name)
        if value is None:
            value = self._shared.get(name)
        if value is not None:
            return value
        if default is not MISSING:
            return default
        raise ParameterError(name, item_index)


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Everything a handler needs to serve one input record."""

    parameters: ParameterSource
    item_index: int
    base_url: str
    api_key: str
    client: "ApiClient"
    simplify_max_keys: int = 10

    def param(self, name: str, default: Any = MISSING) -> Any:
        return self.parameters.get_parameter(name, self.item_index, default)

    def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.client.request(
            "GET", self.base_url, endpoint, self.api_key, params=params
        )

    def post(self, endpoint: str, body: Mapping[str, Any]) -> Any:
        return self.client.request(
            "POST", self.base_url, endpoint, self.api_key, body=body
        )
