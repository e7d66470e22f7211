"""Typed result models returned by the HitBTC client."""

from .account import Balance, Trade, Transaction
from .market import Candle, Currency, Ticker, TradingSymbol
from .shared import OrderType, Period, Side, TimeInForce
from .trading import CreateOrderResponse, ErrorEnvelope, Order

__all__ = [
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
]
