"""HitBTC REST client exposing typed market and account operations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from .contracts.transport import HTTPSession
from .core.config import ClientConfig, Credentials
from .core.errors import CurrencyNotFoundError
from .core.normalizer import Decoder, decode_error_envelope, list_of, normalize, single
from .core.params import ALL_SYMBOLS, CandleQuery, OrderRequest, Timestamp, TradeQuery, TransactionQuery
from .core.transport import RequestExecutor
from .models import (
    Balance,
    Candle,
    CreateOrderResponse,
    Currency,
    Order,
    Ticker,
    Trade,
    TradingSymbol,
    Transaction,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CURRENCIES_ENDPOINT = "public/currency"
SYMBOLS_ENDPOINT = "public/symbol"
TICKERS_ENDPOINT = "public/ticker"
TRADING_BALANCE_ENDPOINT = "trading/balance"
PAYMENT_BALANCE_ENDPOINT = "payment/balance"
TRADE_HISTORY_ENDPOINT = "history/trades"
TRANSACTIONS_ENDPOINT = "account/transactions"
ORDER_ENDPOINT = "order"


class HitBtcClient:
    """Entry point for HitBTC API v2.

    Credentials and configuration are fixed at construction, so one instance
    can be shared between threads.

    Example::

        with HitBtcClient(api_key, api_secret, timeout=5.0) as client:
            ticker = client.get_ticker("ethbtc")
            balance = client.get_balance("ltc")
    """

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        *,
        session: HTTPSession | None = None,
        config: ClientConfig | None = None,
        timeout: float | None = None,
        debug: bool | None = None,
    ) -> None:
        config = config or ClientConfig()
        if timeout is not None or debug is not None:
            config = ClientConfig(
                base_url=config.base_url,
                timeout=config.timeout if timeout is None else timeout,
                debug=config.debug if debug is None else debug,
            )
        self._executor = RequestExecutor(
            Credentials(key=api_key, secret=api_secret),
            session=session,
            config=config,
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        session: HTTPSession | None = None,
    ) -> HitBtcClient:
        """Build a client from ``HITBTC_*`` environment variables."""

        credentials = Credentials.from_env(environ)
        return cls(
            credentials.key,
            credentials.secret,
            session=session,
            config=ClientConfig.from_env(environ),
        )

    @property
    def config(self) -> ClientConfig:
        return self._executor.config

    def __enter__(self) -> HitBtcClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._executor.close()

    # Public market data -------------------------------------------------
    def get_currencies(self) -> list[Currency]:
        """Return every currency listed on the exchange."""

        return self._call("GET", CURRENCIES_ENDPOINT, list_of(Currency))

    def get_symbols(self) -> list[TradingSymbol]:
        """Return every tradable market."""

        return self._call("GET", SYMBOLS_ENDPOINT, list_of(TradingSymbol))

    def get_symbol(self, symbol: str) -> TradingSymbol:
        return self._call("GET", f"{SYMBOLS_ENDPOINT}/{symbol.upper()}", single(TradingSymbol))

    def get_ticker(self, symbol: str) -> Ticker:
        """Return the current ticker for one market (``ETHBTC``)."""

        return self._call("GET", f"{TICKERS_ENDPOINT}/{symbol.upper()}", single(Ticker))

    def get_tickers(self) -> list[Ticker]:
        return self._call("GET", TICKERS_ENDPOINT, list_of(Ticker))

    def get_candles(self, symbol: str, period: str | None = None, limit: int = 0) -> list[Candle]:
        """Return candles for ``symbol``.

        ``period`` defaults to the exchange's ``M30``; ``limit`` of zero uses the
        exchange default and anything above 1000 is clamped.
        """

        query = CandleQuery(symbol=symbol, period=period, limit=limit)
        return self._call("GET", query.path, list_of(Candle), query.to_params())

    # Account ------------------------------------------------------------
    def get_balances(self) -> list[Balance]:
        """Return every balance held in the trading wallet."""

        return self._call("GET", TRADING_BALANCE_ENDPOINT, list_of(Balance), needs_auth=True)

    def get_balance(self, currency: str) -> Balance:
        """Return the account (payment) wallet balance for one currency code.

        This reads a different wallet than :meth:`get_balances`; funds have to
        be transferred to the trading wallet before they can be traded.
        """

        balances = self._call("GET", PAYMENT_BALANCE_ENDPOINT, list_of(Balance), needs_auth=True)
        code = currency.upper()
        for balance in balances:
            if balance.currency == code:
                return balance
        raise CurrencyNotFoundError(code)

    def get_trades(self, symbol: str = ALL_SYMBOLS) -> list[Trade]:
        """Return trade history, for every market when ``symbol`` is ``"all"``."""

        query = TradeQuery(symbol=symbol)
        return self._call("GET", TRADE_HISTORY_ENDPOINT, list_of(Trade), query.to_params(), needs_auth=True)

    def get_transactions(
        self,
        start: Timestamp | None = None,
        end: Timestamp | None = None,
        limit: int = 0,
    ) -> list[Transaction]:
        """Return deposit and withdrawal history.

        ``start`` and ``end`` are epoch milliseconds or datetimes; a missing
        ``end`` means now. ``limit`` is capped at 1000.
        """

        query = TransactionQuery(start=start, end=end, limit=limit)
        return self._call("GET", TRANSACTIONS_ENDPOINT, list_of(Transaction), query.to_params(), needs_auth=True)

    # Trading ------------------------------------------------------------
    def create_order(self, order: OrderRequest | Order) -> CreateOrderResponse:
        """Place an order.

        A rejected order raises :class:`~hitbtc_client.core.errors.APIError`
        carrying the exchange's ``code`` and ``description`` as well.
        """

        request = order if isinstance(order, OrderRequest) else OrderRequest.from_order(order)
        logger.debug("create_order %s %s", request.side, request.symbol)
        raw = self._executor.execute("POST", ORDER_ENDPOINT, request.to_params(), needs_auth=True)
        if not raw.ok:
            raise decode_error_envelope(raw.content, raw.status_code)
        return normalize(raw.content, single(CreateOrderResponse))

    # Internal -----------------------------------------------------------
    def _call(
        self,
        method: str,
        path: str,
        decoder: Decoder[T],
        params: Mapping[str, Any] | None = None,
        *,
        needs_auth: bool = False,
    ) -> T:
        logger.debug("%s %s", method, path)
        raw = self._executor.execute(method, path, params, needs_auth=needs_auth)
        return normalize(raw.content, decoder)
