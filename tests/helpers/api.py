from __future__ import annotations

import json
from collections import deque
from typing import Any, Dict

import httpx

BASE_URL = "https://api.test"
API_KEY = "test-key"

NATAL_PARAMS: Dict[str, Any] = {
    "year": 1990,
    "month": 6,
    "day": 15,
    "hour": 14,
    "minute": 30,
    "locationType": "city",
    "city": "London",
    "countryCode": "GB",
}

NATAL_BIRTH_DATA: Dict[str, Any] = {
    "year": 1990,
    "month": 6,
    "day": 15,
    "hour": 14,
    "minute": 30,
    "city": "London",
    "country_code": "GB",
}

SECOND_SUBJECT_PARAMS: Dict[str, Any] = {
    "subject2Year": 1992,
    "subject2Month": 3,
    "subject2Day": 2,
    "subject2Hour": 8,
    "subject2Minute": 5,
    "subject2LocationType": "coordinates",
    "subject2Latitude": 48.85,
    "subject2Longitude": 2.35,
}


class RecordingApi:
    """``httpx.MockTransport`` handler that records requests and replays queued responses.

    Without a queued response every request is answered with ``200 {"ok": true}``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: deque[httpx.Response | Exception] = deque()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={"ok": True})
        queued = self._responses.popleft()
        if isinstance(queued, Exception):
            raise queued
        return queued

    def respond(self, status_code: int = 200, json_body: Any = None, **kwargs: Any) -> None:
        if json_body is not None:
            kwargs["json"] = json_body
        self._responses.append(httpx.Response(status_code, **kwargs))

    def queue(self, response: httpx.Response) -> None:
        self._responses.append(response)

    def fail(self, exc: Exception) -> None:
        self._responses.append(exc)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was issued"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    @property
    def last_path(self) -> str:
        return self.last.url.raw_path.decode("ascii").split("?", 1)[0]

    @property
    def last_query(self) -> Dict[str, str]:
        return dict(self.last.url.params)
