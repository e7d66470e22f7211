"""Typed client for the HitBTC REST API.

This module exposes the client, its configuration objects, the error
hierarchy and the result models.
"""

from .client import HitBtcClient
from .core.config import API_BASE, ClientConfig, Credentials
from .core.errors import APIError, CredentialsRequiredError, CurrencyNotFoundError, HitBtcError, ResponseFormatError, TransportError
from .core.params import CandleQuery, OrderRequest, TradeQuery, TransactionQuery
from .models import (
    Balance,
    Candle,
    CreateOrderResponse,
    Currency,
    ErrorEnvelope,
    Order,
    OrderType,
    Period,
    Side,
    Ticker,
    TimeInForce,
    Trade,
    TradingSymbol,
    Transaction,
)

__all__ = [
    "HitBtcClient",
    "API_BASE",
    "ClientConfig",
    "Credentials",
    "CandleQuery",
    "OrderRequest",
    "TradeQuery",
    "TransactionQuery",
    "Balance",
    "Candle",
    "CreateOrderResponse",
    "Currency",
    "ErrorEnvelope",
    "Order",
    "OrderType",
    "Period",
    "Side",
    "Ticker",
    "TimeInForce",
    "Trade",
    "TradingSymbol",
    "Transaction",
    "HitBtcError",
    "TransportError",
    "APIError",
    "ResponseFormatError",
    "CurrencyNotFoundError",
    "CredentialsRequiredError",
]

__version__ = "0.1.0"
