"""HTTP transport for the Astrology API."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict, Mapping, Optional

import httpx

from .errors import ApiError
from .observability.metrics import API_REQUEST_DURATION, API_REQUESTS

__all__ = [
    "ApiClient",
    "CREDENTIAL_CHECK_ENDPOINT",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "check_credentials",
    "ensure_plain_json",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.astrology-api.io"
DEFAULT_TIMEOUT = 30.0
CREDENTIAL_CHECK_ENDPOINT = "/api/v3/data/now"

_ALLOWED_METHODS = frozenset({"GET", "POST"})
_SCALARS = (str, int, float, bool, type(None))


def _prepare_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def ensure_plain_json(value: Any) -> Any:
    """Return ``value`` unchanged if it is plain JSON data, else raise ``TypeError``.

    Plain data is built from ``dict`` (string keys), ``list``, ``str``,
    ``int``, ``float``, ``bool`` and ``None``. The check walks the structure
    once without copying it.
    """

    stack = [value]
    while stack:
        current = stack.pop()
        if isinstance(current, _SCALARS):
            continue
        if isinstance(current, dict):
            for key, item in current.items():
                if not isinstance(key, str):
                    raise TypeError(f"non-string object key {key!r}")
                stack.append(item)
            continue
        if isinstance(current, list):
            stack.extend(current)
            continue
        raise TypeError(f"unexpected {type(current).__name__} in response body")
    return value


def _error_from_response(response: httpx.Response) -> ApiError:
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None
    if not isinstance(payload, dict):
        payload = {"body": response.text} if response.text else {}

    code = payload.get("code") or payload.get("error") or f"HTTP_{response.status_code}"
    message = payload.get("message") or payload.get("detail") or response.reason_phrase
    return ApiError(
        code=str(code),
        status_code=response.status_code,
        message=str(message),
        payload=payload,
    )


class ApiClient:
    """Synchronous client reused for every record of a batch.

    Each call is one request/response round trip: no retries, no backoff.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:  # type: ignore[override]
        self.close()

    def request(
        self,
        method: str,
        base_url: str,
        endpoint: str,
        api_key: str,
        *,
        body: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Issue ``method {base_url}{endpoint}`` and return the decoded JSON body.

        Raises
        ------
        ValueError
            If ``method`` is not GET or POST.
        ApiError
            On network failure, non-2xx status, or a body that is not plain
            JSON. The original exception is chained as ``__cause__``.
        """

        verb = method.upper()
        if verb not in _ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method {method!r}; expected GET or POST")

        url = f"{base_url.rstrip('/')}{endpoint}"
        LOGGER.debug("%s %s", verb, endpoint)
        started = time.perf_counter()
        try:
            response = self._client.request(
                verb,
                url,
                params=dict(params) if params else None,
                json=dict(body) if body is not None else None,
                headers=_prepare_headers(api_key),
            )
        except httpx.HTTPError as exc:
            API_REQUESTS.labels(method=verb, outcome="network_error").inc()
            LOGGER.warning("%s %s failed: %s", verb, endpoint, exc)
            raise ApiError(
                code=type(exc).__name__,
                status_code=None,
                message=str(exc) or "request failed",
            ) from exc
        finally:
            API_REQUEST_DURATION.labels(method=verb).observe(time.perf_counter() - started)

        if not response.is_success:
            API_REQUESTS.labels(method=verb, outcome="http_error").inc()
            error = _error_from_response(response)
            LOGGER.warning("%s %s returned %s", verb, endpoint, response.status_code)
            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise error from exc
            raise error

        if response.status_code == 204 or not response.content:
            API_REQUESTS.labels(method=verb, outcome="ok").inc()
            return {}

        try:
            data = ensure_plain_json(response.json())
        except (ValueError, TypeError) as exc:
            API_REQUESTS.labels(method=verb, outcome="decode_error").inc()
            raise ApiError(
                code="INVALID_RESPONSE",
                status_code=response.status_code,
                message=f"Response body is not valid JSON: {exc}",
            ) from exc

        API_REQUESTS.labels(method=verb, outcome="ok").inc()
        return data


def check_credentials(client: ApiClient, base_url: str, api_key: str) -> Any:
    """Probe the API with the lightweight ``now`` endpoint used to test credentials."""

    return client.request("GET", base_url, CREDENTIAL_CHECK_ENDPOINT, api_key)
