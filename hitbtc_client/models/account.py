"""Private account models: balances, trade history and transactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from .shared import to_datetime, to_decimal, to_int, to_str


@dataclass(frozen=True, slots=True)
class Balance:
    """Available and reserved amounts of one currency in one wallet."""

    currency: str
    available: Decimal
    reserved: Decimal

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Balance:
        return cls(
            currency=to_str(raw["currency"]),
            available=to_decimal(raw.get("available")),
            reserved=to_decimal(raw.get("reserved")),
        )


@dataclass(frozen=True, slots=True)
class Trade:
    id: int
    client_order_id: str
    order_id: int
    symbol: str
    side: str
    quantity: Decimal
    price: Decimal
    fee: Decimal
    timestamp: datetime | None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Trade:
        return cls(
            id=to_int(raw.get("id")),
            client_order_id=to_str(raw.get("clientOrderId")),
            order_id=to_int(raw.get("orderId")),
            symbol=to_str(raw.get("symbol")),
            side=to_str(raw.get("side")),
            quantity=to_decimal(raw.get("quantity")),
            price=to_decimal(raw.get("price")),
            fee=to_decimal(raw.get("fee")),
            timestamp=to_datetime(raw.get("timestamp")),
        )


@dataclass(frozen=True, slots=True)
class Transaction:
    """Deposit, withdrawal or internal transfer record."""

    id: str
    index: int
    currency: str
    amount: Decimal
    fee: Decimal
    network_fee: Decimal
    address: str
    payment_id: str
    hash: str
    status: str
    type: str
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Transaction:
        return cls(
            id=to_str(raw.get("id")),
            index=to_int(raw.get("index")),
            currency=to_str(raw.get("currency")),
            amount=to_decimal(raw.get("amount")),
            fee=to_decimal(raw.get("fee")),
            network_fee=to_decimal(raw.get("networkFee")),
            address=to_str(raw.get("address")),
            payment_id=to_str(raw.get("paymentId")),
            hash=to_str(raw.get("hash")),
            status=to_str(raw.get("status")),
            type=to_str(raw.get("type")),
            created_at=to_datetime(raw.get("createdAt")),
            updated_at=to_datetime(raw.get("updatedAt")),
        )
