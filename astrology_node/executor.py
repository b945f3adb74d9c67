"""Batch execution: one dispatched request per input record."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .config.settings import Credentials
from .context import ItemParameters, ParameterSource, RequestContext
from .dispatch import ResourceRegistry, default_registry
from .errors import ItemExecutionError
from .simplify import DEFAULT_MAX_KEYS
from .transport import ApiClient

__all__ = ["Executor", "ItemExecutionError"]

LOGGER = logging.getLogger(__name__)


class Executor:
    """Run records through the dispatcher in order, collecting one result per record.

    Any exception raised while serving a record is tied to its index. By
    default the first failure aborts the batch with :class:`ItemExecutionError`.
    With ``continue_on_error`` the failing record's slot holds an error object
    instead and processing continues.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        registry: Optional[ResourceRegistry] = None,
        client: Optional[ApiClient] = None,
        continue_on_error: bool = False,
        simplify_max_keys: int = DEFAULT_MAX_KEYS,
    ) -> None:
        self.credentials = credentials
        self.registry = registry or default_registry()
        self._client = client
        self.continue_on_error = continue_on_error
        self.simplify_max_keys = simplify_max_keys

    def run_items(
        self,
        items: Sequence[Mapping[str, Any]],
        *,
        shared: Optional[Mapping[str, Any]] = None,
    ) -> List[Any]:
        """Run parameter mappings, each naming its own ``resource`` and ``operation``."""

        return self.run(ItemParameters(items, shared=shared), len(items))

    def run(self, parameters: ParameterSource, item_count: int) -> List[Any]:
        owns_client = self._client is None
        client = self._client or ApiClient()
        try:
            return [
                self._run_one(parameters, index, client) for index in range(item_count)
            ]
        finally:
            if owns_client:
                client.close()

    def _run_one(self, parameters: ParameterSource, index: int, client: ApiClient) -> Any:
        resource: Optional[str] = None
        operation: Optional[str] = None
        try:
            resource = parameters.get_parameter("resource", index)
            operation = parameters.get_parameter("operation", index)
            ctx = RequestContext(
                parameters=parameters,
                item_index=index,
                base_url=self.credentials.base_url,
                api_key=self.credentials.token,
                client=client,
                simplify_max_keys=self.simplify_max_keys,
            )
            LOGGER.debug("item %d: %s/%s", index, resource, operation)
            return self.registry.dispatch(resource, operation, ctx)
        except Exception as exc:
            if not self.continue_on_error:
                LOGGER.error("item %d (%s/%s) failed: %s", index, resource, operation, exc)
                raise ItemExecutionError(
                    index, exc, resource=resource, operation=operation
                ) from exc
            LOGGER.warning("item %d (%s/%s) failed, continuing: %s", index, resource, operation, exc)
            return self._error_record(index, exc, resource, operation)

    @staticmethod
    def _error_record(
        index: int,
        exc: BaseException,
        resource: Optional[str],
        operation: Optional[str],
    ) -> Dict[str, Any]:
        return {
            "error": str(exc),
            "error_type": type(exc).__name__,
            "item_index": index,
            "resource": resource,
            "operation": operation,
        }
