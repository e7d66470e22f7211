"""Protocols describing the HTTP transport consumed by the request executor."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HTTPResponse(Protocol):
    """The subset of :class:`requests.Response` the executor reads."""

    status_code: int
    content: bytes
    headers: Mapping[str, str]
    request: Any


@runtime_checkable
class HTTPSession(Protocol):
    """Anything shaped like :class:`requests.Session` for a single request."""

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
        timeout: float | None = None,
    ) -> HTTPResponse:
        """Send one request and return the response without raising on status."""

    def close(self) -> None:
        """Release pooled connections."""
