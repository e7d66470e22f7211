"""Public market data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from .shared import to_datetime, to_decimal, to_int, to_optional_decimal, to_str


@dataclass(frozen=True, slots=True)
class Currency:
    """Currency metadata from ``public/currency``."""

    id: str
    full_name: str = ""
    crypto: bool = False
    payin_enabled: bool = False
    payin_payment_id: bool = False
    payin_confirmations: int = 0
    payout_enabled: bool = False
    payout_is_payment_id: bool = False
    transfer_enabled: bool = False
    delisted: bool = False
    payout_fee: Decimal | None = None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Currency:
        return cls(
            id=to_str(raw["id"]),
            full_name=to_str(raw.get("fullName")),
            crypto=bool(raw.get("crypto")),
            payin_enabled=bool(raw.get("payinEnabled")),
            payin_payment_id=bool(raw.get("payinPaymentId")),
            payin_confirmations=to_int(raw.get("payinConfirmations")),
            payout_enabled=bool(raw.get("payoutEnabled")),
            payout_is_payment_id=bool(raw.get("payoutIsPaymentId")),
            transfer_enabled=bool(raw.get("transferEnabled")),
            delisted=bool(raw.get("delisted")),
            payout_fee=to_optional_decimal(raw.get("payoutFee")),
        )


@dataclass(frozen=True, slots=True)
class TradingSymbol:
    """Trading pair metadata from ``public/symbol``."""

    id: str
    base_currency: str
    quote_currency: str
    quantity_increment: Decimal
    tick_size: Decimal
    take_liquidity_rate: Decimal
    provide_liquidity_rate: Decimal
    fee_currency: str

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> TradingSymbol:
        return cls(
            id=to_str(raw["id"]),
            base_currency=to_str(raw.get("baseCurrency")),
            quote_currency=to_str(raw.get("quoteCurrency")),
            quantity_increment=to_decimal(raw.get("quantityIncrement")),
            tick_size=to_decimal(raw.get("tickSize")),
            take_liquidity_rate=to_decimal(raw.get("takeLiquidityRate")),
            provide_liquidity_rate=to_decimal(raw.get("provideLiquidityRate")),
            fee_currency=to_str(raw.get("feeCurrency")),
        )


@dataclass(frozen=True, slots=True)
class Ticker:
    """Ticker snapshot. Prices are ``None`` when the book side is empty."""

    symbol: str
    ask: Decimal | None
    bid: Decimal | None
    last: Decimal | None
    open: Decimal | None
    low: Decimal | None
    high: Decimal | None
    volume: Decimal
    volume_quote: Decimal
    timestamp: datetime | None

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Ticker:
        return cls(
            symbol=to_str(raw.get("symbol")),
            ask=to_optional_decimal(raw.get("ask")),
            bid=to_optional_decimal(raw.get("bid")),
            last=to_optional_decimal(raw.get("last")),
            open=to_optional_decimal(raw.get("open")),
            low=to_optional_decimal(raw.get("low")),
            high=to_optional_decimal(raw.get("high")),
            volume=to_decimal(raw.get("volume")),
            volume_quote=to_decimal(raw.get("volumeQuote")),
            timestamp=to_datetime(raw.get("timestamp")),
        )


@dataclass(frozen=True, slots=True)
class Candle:
    """OHLC candle kept as strings so no precision is lost."""

    timestamp: str
    open: str
    close: str
    low: str
    high: str
    volume: str
    volume_quote: str

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Candle:
        # upstream names the extremes ``min``/``max``
        return cls(
            timestamp=to_str(raw.get("timestamp")),
            open=to_str(raw.get("open")),
            close=to_str(raw.get("close")),
            low=to_str(raw.get("min")),
            high=to_str(raw.get("max")),
            volume=to_str(raw.get("volume")),
            volume_quote=to_str(raw.get("volumeQuote")),
        )
