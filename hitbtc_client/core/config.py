"""Client configuration and credentials."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

API_BASE = "https://api.hitbtc.com/api/2"
DEFAULT_TIMEOUT = 10.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Transport settings fixed for the lifetime of a client."""

    base_url: str = API_BASE
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must be a non-empty string")
        if self.timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``HITBTC_BASE_URL``, ``HITBTC_TIMEOUT`` and ``HITBTC_DEBUG``."""

        env = os.environ if environ is None else environ
        timeout = env.get("HITBTC_TIMEOUT")
        return cls(
            base_url=env.get("HITBTC_BASE_URL") or API_BASE,
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            debug=env.get("HITBTC_DEBUG", "").strip().lower() in _TRUTHY,
        )


@dataclass(frozen=True, slots=True)
class Credentials:
    """API key pair. The secret never shows up in ``repr``."""

    key: str
    secret: str = field(repr=False)

    @property
    def present(self) -> bool:
        return bool(self.key and self.secret)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Credentials:
        env = os.environ if environ is None else environ
        return cls(key=env.get("HITBTC_API_KEY", ""), secret=env.get("HITBTC_API_SECRET", ""))
