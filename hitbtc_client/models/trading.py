"""Order models.

``Order`` carries numeric fields as floats and is what callers build to place
an order. ``CreateOrderResponse`` mirrors the exchange's reply exactly, so
every field stays a string.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .shared import to_datetime, to_float, to_int, to_str


@dataclass(frozen=True, slots=True)
class Order:
    symbol: str
    side: str
    quantity: float
    type: str = ""
    time_in_force: str = ""
    price: float = 0.0
    stop_price: float = 0.0
    cum_quantity: float = 0.0
    id: str = ""
    client_order_id: str = ""
    status: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    expire_time: datetime | None = None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Order:
        return cls(
            id=to_str(raw.get("id")),
            client_order_id=to_str(raw.get("clientOrderId")),
            symbol=to_str(raw.get("symbol")),
            side=to_str(raw.get("side")),
            status=to_str(raw.get("status")),
            type=to_str(raw.get("type")),
            time_in_force=to_str(raw.get("timeInForce")),
            price=to_float(raw.get("price")),
            stop_price=to_float(raw.get("stopPrice")),
            quantity=to_float(raw.get("quantity")),
            cum_quantity=to_float(raw.get("cumQuantity")),
            created_at=to_datetime(raw.get("createdAt")),
            updated_at=to_datetime(raw.get("updatedAt")),
            expire_time=to_datetime(raw.get("expireTime")),
        )


@dataclass(frozen=True, slots=True)
class CreateOrderResponse:
    id: str = ""
    client_order_id: str = ""
    symbol: str = ""
    side: str = ""
    status: str = ""
    type: str = ""
    time_in_force: str = ""
    price: str = ""
    stop_price: str = ""
    quantity: str = ""
    cum_quantity: str = ""
    created_at: str = ""
    updated_at: str = ""
    expire_time: str = ""

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> CreateOrderResponse:
        return cls(
            id=to_str(raw.get("id")),
            client_order_id=to_str(raw.get("clientOrderId")),
            symbol=to_str(raw.get("symbol")),
            side=to_str(raw.get("side")),
            status=to_str(raw.get("status")),
            type=to_str(raw.get("type")),
            time_in_force=to_str(raw.get("timeInForce")),
            price=to_str(raw.get("price")),
            stop_price=to_str(raw.get("stopPrice")),
            quantity=to_str(raw.get("quantity")),
            cum_quantity=to_str(raw.get("cumQuantity")),
            created_at=to_str(raw.get("createdAt")),
            updated_at=to_str(raw.get("updatedAt")),
            expire_time=to_str(raw.get("expireTime")),
        )


@dataclass(frozen=True, slots=True)
class ErrorEnvelope:
    """The ``{"error": {"code", "message", "description"}}`` reply body."""

    code: int = 0
    message: str = ""
    description: str = ""

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> ErrorEnvelope:
        error = raw.get("error")
        if not isinstance(error, dict):
            raise ValueError("error envelope missing 'error' object")
        return cls(
            code=to_int(error.get("code")),
            message=to_str(error.get("message")),
            description=to_str(error.get("description")),
        )
