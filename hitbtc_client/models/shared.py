"""Enumerations and field coercion helpers shared by the typed models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any


class Period(StrEnum):
    """Candle periods accepted by ``public/candles``."""

    MINUTE_1 = "M1"
    MINUTE_3 = "M3"
    MINUTE_5 = "M5"
    MINUTE_15 = "M15"
    MINUTE_30 = "M30"
    HOUR_1 = "H1"
    HOUR_4 = "H4"
    DAY_1 = "D1"
    DAY_7 = "D7"
    MONTH_1 = "1M"


class Side(StrEnum):
    BUY = "buy"
    SELL = "sell"


class OrderType(StrEnum):
    LIMIT = "limit"
    MARKET = "market"
    STOP_LIMIT = "stopLimit"
    STOP_MARKET = "stopMarket"


class TimeInForce(StrEnum):
    """Order lifetime policies.

    ``GTC`` good till cancel, ``IOC`` immediate or cancel, ``FOK`` fill or
    kill, ``DAY`` until end of trading day, ``GTD`` good till ``expireTime``.
    """

    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"
    DAY = "Day"
    GTD = "GTD"


def to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def to_decimal(value: Any) -> Decimal:
    result = to_optional_decimal(value)
    return Decimal("0") if result is None else result


def to_optional_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a decimal value: {value!r}") from exc


def to_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    return float(value)


def to_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def to_datetime(value: Any) -> datetime | None:
    """Parse the exchange's ISO-8601 timestamps (``2017-05-15T17:01:05.092Z``)."""

    if not value:
        return None
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
