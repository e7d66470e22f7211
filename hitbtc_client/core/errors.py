"""Custom exception hierarchy for the HitBTC client."""

from __future__ import annotations


class HitBtcError(RuntimeError):
    """Base class for all client exceptions."""


class TransportError(HitBtcError):
    """Raised when the HTTP exchange itself fails (network, timeout, empty body)."""


class APIError(HitBtcError):
    """Failure reported by the exchange inside a delivered response body.

    ``str(error)`` is the exchange message verbatim unless ``code`` or
    ``description`` were supplied, in which case they are folded in as
    ``"<code> <message> <description>"``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        description: str | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.description = description
        if code is None and not description:
            text = message
        else:
            text = " ".join(str(part) for part in (code, message, description) if part not in (None, ""))
        super().__init__(text)


class ResponseFormatError(HitBtcError):
    """Raised for malformed JSON or a payload whose shape cannot be decoded."""


class CurrencyNotFoundError(HitBtcError, LookupError):
    """Raised when a balance lookup finds no entry for the requested currency."""

    def __init__(self, currency: str) -> None:
        self.currency = currency
        super().__init__(f"Currency not found: {currency}")


class CredentialsRequiredError(HitBtcError, ValueError):
    """Raised before a signed call when the client holds no API key pair."""
