from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

import httpx
import pytest

from astrology_node.config.settings import Credentials, get_settings
from astrology_node.context import ItemParameters, RequestContext
from astrology_node.transport import ApiClient
from tests.helpers import API_KEY, BASE_URL, RecordingApi


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ASTROLOGY_NODE_HOME", str(tmp_path / "home"))
    for name in (
        "ASTROLOGY_API_KEY",
        "ASTROLOGY_API_BASE_URL",
        "ASTROLOGY_API_TIMEOUT",
        "ASTROLOGY_SIMPLIFY_MAX_KEYS",
        "ASTROLOGY_CONTINUE_ON_ERROR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api() -> RecordingApi:
    return RecordingApi()


@pytest.fixture
def client(api: RecordingApi):
    with ApiClient(transport=httpx.MockTransport(api)) as api_client:
        yield api_client


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def make_ctx(client: ApiClient) -> Callable[..., RequestContext]:
    def factory(
        params: Optional[Mapping[str, Any]] = None,
        *,
        simplify_max_keys: int = 10,
    ) -> RequestContext:
        return RequestContext(
            parameters=ItemParameters([dict(params or {})]),
            item_index=0,
            base_url=BASE_URL,
            api_key=API_KEY,
            client=client,
            simplify_max_keys=simplify_max_keys,
        )

    return factory
