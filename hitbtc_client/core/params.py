"""Query objects that serialize into HitBTC parameter sets.

Absent or zero values are left out of the serialized mapping entirely; the
exchange treats an empty string differently from a missing key.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from ..models.trading import Order

MAX_LIMIT = 1000
ALL_SYMBOLS = "all"

Timestamp = int | datetime


@dataclass(frozen=True, slots=True)
class CandleQuery:
    """``public/candles/{symbol}`` window."""

    symbol: str
    period: str | None = None
    limit: int = 0

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol must be a non-empty string")
        if self.limit < 0:
            raise ValueError("limit must not be negative")

    @property
    def path(self) -> str:
        return f"public/candles/{self.symbol.upper()}"

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.limit > 0:
            params["limit"] = str(min(self.limit, MAX_LIMIT))
        if self.period:
            params["period"] = str(self.period).upper()
        return params


@dataclass(frozen=True, slots=True)
class TransactionQuery:
    """``account/transactions`` window; ``end`` defaults to the current time."""

    start: Timestamp | None = None
    end: Timestamp | None = None
    limit: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError("limit must not be negative")
        start = _to_milliseconds(self.start)
        end = _to_milliseconds(self.end)
        if start < 0 or end < 0:
            raise ValueError("start and end must not be negative")
        if start and end and start > end:
            raise ValueError("start must not be later than end")

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        start = _to_milliseconds(self.start)
        if start:
            params["from"] = str(start)
        params["till"] = str(_to_milliseconds(self.end) or int(time.time() * 1000))
        if self.limit > 0:
            params["limit"] = str(min(self.limit, MAX_LIMIT))
        return params


@dataclass(frozen=True, slots=True)
class TradeQuery:
    """``history/trades`` filter; ``"all"`` means every symbol."""

    symbol: str = ALL_SYMBOLS

    def to_params(self) -> dict[str, str]:
        if not self.symbol or self.symbol.lower() == ALL_SYMBOLS:
            return {}
        return {"symbol": self.symbol.upper()}


@dataclass(frozen=True, slots=True)
class OrderRequest:
    """Form body for ``POST order``."""

    symbol: str
    side: str
    quantity: float
    type: str | None = None
    time_in_force: str | None = None
    price: float = 0.0

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol must be a non-empty string")
        if not self.side:
            raise ValueError("side must be a non-empty string")
        if self.quantity <= 0:
            raise ValueError("quantity must be positive")

    @classmethod
    def from_order(cls, order: Order) -> OrderRequest:
        return cls(
            symbol=order.symbol,
            side=order.side,
            quantity=order.quantity,
            type=order.type or None,
            time_in_force=order.time_in_force or None,
            price=order.price,
        )

    def to_params(self) -> dict[str, str]:
        params = {
            "symbol": self.symbol.upper(),
            "side": str(self.side),
            "quantity": format_float(self.quantity),
        }
        if self.type:
            params["type"] = str(self.type)
        if self.time_in_force:
            params["timeInForce"] = str(self.time_in_force)
        if self.price > 0:
            params["price"] = format_float(self.price)
        return params


def format_float(value: float) -> str:
    """Shortest round-trip decimal text, never in exponent notation."""

    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _to_milliseconds(value: Timestamp | None) -> int:
    if value is None:
        return 0
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp() * 1000)
    return int(value)
