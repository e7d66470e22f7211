"""Response normalizer.

HitBTC does not signal failure through HTTP status codes consistently, so the
shape of the JSON body decides the outcome. Every reply is parsed twice: once
into a generic value for :func:`classify`, and once more from the original
bytes for the caller's decoder. The decoders never have to know about the
error shape.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol, TypeVar

from ..models.trading import ErrorEnvelope
from .errors import APIError, ResponseFormatError

T = TypeVar("T")
M = TypeVar("M", bound="PayloadModel")

Decoder = Callable[[Any], T]


class PayloadModel(Protocol):
    @classmethod
    def from_payload(cls: type[M], raw: dict[str, Any]) -> M: ...


class ResponseShape(StrEnum):
    LIST = "list"
    OBJECT = "object"
    ERROR = "error"
    MALFORMED_ERROR = "malformed_error"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True, slots=True)
class Classification:
    shape: ResponseShape
    message: str | None = None

    @property
    def is_success(self) -> bool:
        return self.shape in (ResponseShape.LIST, ResponseShape.OBJECT)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def classify(payload: Any) -> Classification:
    """Sort an already-parsed JSON value into one :class:`ResponseShape`."""

    if isinstance(payload, list):
        return Classification(ResponseShape.LIST)
    if not isinstance(payload, dict):
        return Classification(
            ResponseShape.UNEXPECTED,
            f"unexpected top-level JSON {_json_type(payload)}",
        )
    error = payload.get("error")
    if error is None:
        return Classification(ResponseShape.OBJECT)
    if not isinstance(error, dict):
        return Classification(
            ResponseShape.MALFORMED_ERROR,
            f"unexpected 'error' value of type {_json_type(error)}",
        )
    message = error.get("message")
    if not isinstance(message, str):
        return Classification(
            ResponseShape.MALFORMED_ERROR,
            f"'error' object has {_json_type(message)} message",
        )
    return Classification(ResponseShape.ERROR, message)


def parse_json(raw: bytes) -> Any:
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise ResponseFormatError(f"HitBTC returned a non-JSON payload: {exc}") from exc


def normalize(raw: bytes, decoder: Decoder[T]) -> T:
    """Return ``decoder``'s result for a success reply or raise the unified error."""

    outcome = classify(parse_json(raw))
    if outcome.shape is ResponseShape.ERROR:
        raise APIError(outcome.message or "")
    if not outcome.is_success:
        raise ResponseFormatError(f"HitBTC response not understood: {outcome.message}")
    try:
        return decoder(parse_json(raw))
    except (KeyError, TypeError, ValueError) as exc:
        raise ResponseFormatError(f"HitBTC payload could not be decoded: {exc!r}") from exc


def decode_error_envelope(raw: bytes, status_code: int) -> APIError:
    """Build the richer ``code message description`` error for a rejected order."""

    try:
        payload = json.loads(raw)
        envelope = ErrorEnvelope.from_payload(payload)
    except (UnicodeDecodeError, ValueError, AttributeError):
        return APIError(f"HTTP {status_code}")
    return APIError(envelope.message, code=envelope.code, description=envelope.description)


def _require_object(item: Any) -> dict[str, Any]:
    if not isinstance(item, dict):
        raise ResponseFormatError(f"expected a JSON object, got {_json_type(item)}")
    return item


def single(model: type[M]) -> Decoder[M]:
    """Decoder for a reply holding one object."""

    def decode(payload: Any) -> M:
        return model.from_payload(_require_object(payload))

    return decode


def list_of(model: type[M]) -> Decoder[list[M]]:
    """Decoder for a reply holding an array of objects."""

    def decode(payload: Any) -> list[M]:
        if not isinstance(payload, list):
            raise ResponseFormatError(f"expected a JSON array, got {_json_type(payload)}")
        return [model.from_payload(_require_object(item)) for item in payload]

    return decode
