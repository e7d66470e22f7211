"""Request executor: turns an endpoint call into raw response bytes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import requests

from ..contracts.transport import HTTPResponse, HTTPSession
from .config import ClientConfig, Credentials
from .errors import CredentialsRequiredError, TransportError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST"})


@dataclass(frozen=True, slots=True)
class RawResponse:
    """Status code plus undecoded body of one exchange reply."""

    status_code: int
    content: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RequestExecutor:
    """Requests-backed executor for public and signed HitBTC calls.

    Non-2xx replies are returned rather than raised: the exchange reports
    failures inside the body and the normalizer decides what they mean.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        session: HTTPSession | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self._credentials = credentials
        self._config = config or ClientConfig()
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._base_url = self._config.base_url.rstrip("/")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def execute(
        self,
        method: str,
        path: str,
        params: Mapping[str, str] | None = None,
        *,
        needs_auth: bool = False,
    ) -> RawResponse:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = f"{self._base_url}/{path.lstrip('/')}"
        params = dict(params) if params else None
        query: dict[str, str] | None = params
        body: dict[str, str] | None = None
        auth: tuple[str, str] | None = None
        if needs_auth:
            if not self._credentials.present:
                raise CredentialsRequiredError(f"HitBTC {method} {path} needs an API key and secret")
            auth = (self._credentials.key, self._credentials.secret)
            if method == "POST":
                query, body = None, params

        if self._config.debug:
            self._dump_request(method, url, query, body, auth)

        try:
            response = self._session.request(
                method,
                url,
                params=query,
                data=body,
                auth=auth,
                timeout=self._config.timeout,
            )
            content = response.content
        except requests.RequestException as exc:
            raise TransportError(f"HitBTC {method} {path} failed: {exc}") from exc

        if self._config.debug:
            self._dump_response(response)

        if not content:
            raise TransportError(f"HitBTC {method} {path} returned an empty body (HTTP {response.status_code})")
        return RawResponse(status_code=response.status_code, content=content)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _dump_request(
        self,
        method: str,
        url: str,
        query: dict[str, str] | None,
        body: dict[str, str] | None,
        auth: tuple[str, str] | None,
    ) -> None:
        try:
            sent = requests.Request(method, url, params=query, data=body, auth=auth).prepare()
            headers = "\n".join(f"{k}: {v}" for k, v in sent.headers.items())
            logger.debug("request:\n%s %s\n%s\n\n%s", sent.method, sent.url, headers, _text(sent.body))
        except Exception:
            logger.warning("Could not dump HitBTC request %s %s", method, url, exc_info=True)

    def _dump_response(self, response: HTTPResponse) -> None:
        try:
            headers = "\n".join(f"{k}: {v}" for k, v in (getattr(response, "headers", None) or {}).items())
            logger.debug(
                "response:\nHTTP %s\n%s\n\n%s",
                getattr(response, "status_code", "?"),
                headers,
                _text(getattr(response, "content", None)),
            )
        except Exception:
            logger.warning("Could not dump HitBTC response", exc_info=True)


def _text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return str(value)
