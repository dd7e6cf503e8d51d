from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from adapters.http_client import ApiClient
from core.config import ClientSettings

BASE_URL = "http://testserver/api/v1"


class RecordingBackend:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, payload: Any, status_code: int = 200) -> "RecordingBackend":
        self._responses.append(httpx.Response(status_code, json=payload))
        return self

    def reply_raw(self, content: bytes, status_code: int = 200) -> "RecordingBackend":
        self._responses.append(httpx.Response(status_code, content=content))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(base_url=BASE_URL, http_timeout_seconds=5, _env_file=None)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def client(settings: ClientSettings, backend: RecordingBackend) -> ApiClient:
    return ApiClient(settings, transport=httpx.MockTransport(backend))


@pytest.fixture
def envelope() -> Callable[..., dict[str, Any]]:
    def _make(data: Any = None, *, success: bool = True, message: str = "ok", error: str | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"success": success, "message": message}
        if data is not None:
            body["data"] = data
        if error is not None:
            body["error"] = error
        return body

    return _make


@pytest.fixture
def student_payload() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": "s1",
            "first_names": "Ana",
            "last_names": "Rojas",
            "birth_date": "2000-05-17T00:00:00Z",
            "nationality_country_id": "co",
            "residence_country_id": "co",
            "emails": ["ana@example.com"],
            "status": "active",
            "cohort": "2024-1",
            "enrollment_date": "2024-02-01T00:00:00Z",
            "created_at": "2024-02-01T10:00:00Z",
            "updated_at": "2024-02-01T10:00:00Z",
        }
        data.update(overrides)
        return data

    return _make
