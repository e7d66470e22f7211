from __future__ import annotations

import json
from types import SimpleNamespace
from urllib.parse import urlencode

import pytest

from hitbtc_client import ClientConfig, HitBtcClient


class StubResponse:
    def __init__(self, payload, status_code: int = 200, headers: dict | None = None):
        if isinstance(payload, bytes):
            self.content = payload
        elif isinstance(payload, str):
            self.content = payload.encode()
        else:
            self.content = json.dumps(payload).encode()
        self.status_code = status_code
        self.headers = headers or {"Content-Type": "application/json"}
        self.request = None


class StubSession:
    def __init__(self, describe_request: bool = True) -> None:
        self.describe_request = describe_request
        self.calls: list[dict] = []
        self.closed = False
        self._responses: list = []

    def queue(self, payload, status_code: int = 200) -> None:
        self._responses.append(StubResponse(payload, status_code))

    def fail_with(self, exc: Exception) -> None:
        self._responses.append(exc)

    def request(self, method, url, *, params=None, data=None, auth=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "data": data,
                "auth": auth,
                "timeout": timeout,
            }
        )
        if not self._responses:
            raise AssertionError("No queued response left for stub session")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if not self.describe_request:
            return response
        headers = {}
        if auth:
            headers["Authorization"] = "Basic <stub>"
        response.request = SimpleNamespace(
            method=method,
            url=f"{url}?{urlencode(params)}" if params else url,
            headers=headers,
            body=urlencode(data) if data else None,
        )
        return response

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def session() -> StubSession:
    return StubSession()


@pytest.fixture()
def client(session: StubSession) -> HitBtcClient:
    return HitBtcClient("key", "secret", session=session, config=ClientConfig(timeout=3.0))


@pytest.fixture()
def bare_session() -> StubSession:
    """Session whose responses carry no ``request`` description."""

    return StubSession(describe_request=False)
