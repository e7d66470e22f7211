from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
import requests

from hitbtc_client import (
    APIError,
    ClientConfig,
    CreateOrderResponse,
    CredentialsRequiredError,
    CurrencyNotFoundError,
    HitBtcClient,
    Order,
    OrderRequest,
    ResponseFormatError,
    TransportError,
)
from hitbtc_client import client as client_module
from hitbtc_client.core.config import API_BASE

BALANCES = [
    {"currency": "BTC", "available": "0.0504600", "reserved": "0.0000000"},
    {"currency": "LTC", "available": "12.5", "reserved": "1.25"},
]


def _url(path: str) -> str:
    return f"{API_BASE}/{path}"


def test_get_currencies_returns_typed_list(session, client):
    session.queue([{"id": "BTC", "fullName": "Bitcoin", "crypto": True, "payinConfirmations": 2}])

    currencies = client.get_currencies()

    assert len(currencies) == 1
    assert currencies[0].id == "BTC"
    assert currencies[0].full_name == "Bitcoin"
    assert currencies[0].payin_confirmations == 2
    call = session.calls[-1]
    assert call["url"] == _url(client_module.CURRENCIES_ENDPOINT)
    assert call["auth"] is None


def test_get_symbol_uppercases_path(session, client):
    session.queue(
        {
            "id": "ETHBTC",
            "baseCurrency": "ETH",
            "quoteCurrency": "BTC",
            "quantityIncrement": "0.001",
            "tickSize": "0.000001",
            "takeLiquidityRate": "0.001",
            "provideLiquidityRate": "-0.0001",
            "feeCurrency": "BTC",
        }
    )

    symbol = client.get_symbol("ethbtc")

    assert symbol.tick_size == Decimal("0.000001")
    assert symbol.provide_liquidity_rate == Decimal("-0.0001")
    assert session.calls[-1]["url"] == _url("public/symbol/ETHBTC")


def test_get_symbols(session, client):
    session.queue([{"id": "ETHBTC"}, {"id": "LTCBTC"}])

    symbols = client.get_symbols()

    assert [s.id for s in symbols] == ["ETHBTC", "LTCBTC"]


def test_get_ticker_and_tickers(session, client):
    ticker = {
        "symbol": "ETHBTC",
        "ask": "0.050043",
        "bid": "0.050042",
        "last": "0.050042",
        "open": "0.047800",
        "low": "0.047052",
        "high": "0.051679",
        "volume": "36456.720",
        "volumeQuote": "1782.625000",
        "timestamp": "2017-05-12T14:57:19.999Z",
    }
    session.queue(ticker)
    session.queue([ticker, {**ticker, "symbol": "LTCBTC", "ask": None}])

    single = client.get_ticker("ethbtc")
    many = client.get_tickers()

    assert single.last == Decimal("0.050042")
    assert single.timestamp == datetime(2017, 5, 12, 14, 57, 19, 999000, tzinfo=timezone.utc)
    assert session.calls[0]["url"] == _url("public/ticker/ETHBTC")
    assert [t.symbol for t in many] == ["ETHBTC", "LTCBTC"]
    assert many[1].ask is None


def test_get_candles_builds_params_and_keeps_strings(session, client):
    session.queue(
        [
            {
                "timestamp": "2017-10-20T20:00:00.000Z",
                "open": "0.050459",
                "close": "0.050087",
                "min": "0.050000",
                "max": "0.050511",
                "volume": "1326.628",
                "volumeQuote": "66.555987736",
            }
        ]
    )

    candles = client.get_candles("ethbtc", period="m30", limit=5000)

    assert candles[0].low == "0.050000"
    assert candles[0].high == "0.050511"
    call = session.calls[-1]
    assert call["url"] == _url("public/candles/ETHBTC")
    assert call["params"] == {"limit": "1000", "period": "M30"}


def test_get_candles_without_options_sends_no_params(session, client):
    session.queue([])

    assert client.get_candles("ETHBTC") == []
    assert session.calls[-1]["params"] is None


def test_get_balances_uses_trading_wallet(session, client):
    session.queue(BALANCES)

    balances = client.get_balances()

    assert balances[1].available == Decimal("12.5")
    call = session.calls[-1]
    assert call["url"] == _url(client_module.TRADING_BALANCE_ENDPOINT)
    assert call["auth"] == ("key", "secret")


@pytest.mark.parametrize("currency", ["ltc", "LTC", "Ltc"])
def test_get_balance_is_case_insensitive(session, client, currency):
    session.queue(BALANCES)

    balance = client.get_balance(currency)

    assert balance.currency == "LTC"
    assert balance.reserved == Decimal("1.25")
    assert session.calls[-1]["url"] == _url(client_module.PAYMENT_BALANCE_ENDPOINT)


def test_get_balance_not_found(session, client):
    session.queue(BALANCES)

    with pytest.raises(CurrencyNotFoundError) as excinfo:
        client.get_balance("doge")

    assert excinfo.value.currency == "DOGE"
    assert isinstance(excinfo.value, LookupError)


def test_get_balance_propagates_api_error(session, client):
    session.queue({"error": {"code": 1002, "message": "Authorization is required or has been failed"}}, 401)

    with pytest.raises(APIError, match="Authorization is required"):
        client.get_balance("BTC")


def test_get_trades_all_omits_symbol(session, client):
    session.queue([])
    session.queue(
        [
            {
                "id": 9533117,
                "clientOrderId": "f8dbaab336d44d5ba3ff578098a68454",
                "orderId": 816088377,
                "symbol": "ETHBTC",
                "side": "sell",
                "quantity": "0.061",
                "price": "0.045487",
                "fee": "0.000002775",
                "timestamp": "2017-05-17T12:32:57.848Z",
            }
        ]
    )

    assert client.get_trades() == []
    trades = client.get_trades("ethbtc")

    assert session.calls[0]["params"] is None
    assert session.calls[1]["params"] == {"symbol": "ETHBTC"}
    assert trades[0].order_id == 816088377
    assert trades[0].fee == Decimal("0.000002775")


def test_get_transactions_clamps_limit(session, client):
    session.queue(
        [
            {
                "id": "6a2fb54d-7466-490c-b3a6-95d8c882f7f7",
                "index": 20400458,
                "currency": "ETH",
                "amount": "38.616700000000000000000000",
                "fee": "0.000880000000000000000000",
                "address": "0xfaEF4bE10dDF50B68c220c9ab19381e20B8EEB2B",
                "hash": "eece4c17994798939cea9f6a72ee12faa8e0d2ad8f3d1c8e2f5d7c7c2d7f4d0c",
                "status": "success",
                "type": "payout",
                "createdAt": "2017-05-18T18:05:36.957Z",
                "updatedAt": "2017-05-18T19:21:05.370Z",
            }
        ]
    )

    transactions = client.get_transactions(start=1_495_000_000_000, end=1_496_000_000_000, limit=5000)

    assert transactions[0].type == "payout"
    assert transactions[0].index == 20400458
    call = session.calls[-1]
    assert call["url"] == _url(client_module.TRANSACTIONS_ENDPOINT)
    assert call["params"] == {"from": "1495000000000", "till": "1496000000000", "limit": "1000"}
    assert call["auth"] == ("key", "secret")


def test_create_order_posts_form_and_decodes_strings(session, client):
    session.queue(
        {
            "id": "4345613661",
            "clientOrderId": "57d5525562c945448e3cbd559bd068c3",
            "symbol": "ETHBTC",
            "side": "sell",
            "status": "new",
            "type": "limit",
            "timeInForce": "GTC",
            "quantity": "0.063",
            "price": "0.046016",
            "cumQuantity": "0.000",
            "createdAt": "2017-05-15T17:01:05.092Z",
            "updatedAt": "2017-05-15T17:01:05.092Z",
        }
    )

    response = client.create_order(
        OrderRequest(symbol="ethbtc", side="sell", quantity=0.063, type="limit", time_in_force="GTC", price=0.046016)
    )

    assert response.price == "0.046016"
    assert response.cum_quantity == "0.000"
    assert response.expire_time == ""
    call = session.calls[-1]
    assert call["method"] == "POST"
    assert call["url"] == _url(client_module.ORDER_ENDPOINT)
    assert call["data"] == {
        "symbol": "ETHBTC",
        "side": "sell",
        "quantity": "0.063",
        "type": "limit",
        "timeInForce": "GTC",
        "price": "0.046016",
    }


def test_create_order_rejected_with_envelope(session, client):
    session.queue(
        {"error": {"code": 20001, "message": "Insufficient funds", "description": "Check that the funds are sufficient"}},
        status_code=400,
    )

    with pytest.raises(APIError) as excinfo:
        client.create_order(Order(symbol="ETHBTC", side="buy", quantity=100.0))

    assert "Insufficient funds" in str(excinfo.value)
    assert excinfo.value.code == 20001
    assert excinfo.value.description == "Check that the funds are sufficient"


def test_create_order_error_body_with_success_status(session, client):
    session.queue({"error": {"code": 20001, "message": "Insufficient funds"}})

    with pytest.raises(APIError) as excinfo:
        client.create_order(Order(symbol="ETHBTC", side="buy", quantity=100.0))

    assert str(excinfo.value) == "Insufficient funds"


def test_malformed_json_surfaces_as_format_error(session, client):
    session.queue("not json")

    with pytest.raises(ResponseFormatError):
        client.get_currencies()


def test_transport_error_propagates(session, client):
    session.fail_with(requests.ConnectionError("refused"))

    with pytest.raises(TransportError):
        client.get_tickers()


def test_timeout_and_debug_overrides(session):
    client = HitBtcClient(session=session, config=ClientConfig(timeout=8.0), debug=True)

    assert client.config.timeout == 8.0
    assert client.config.debug is True


def test_from_env_reads_credentials(session):
    env = {"HITBTC_API_KEY": "k", "HITBTC_API_SECRET": "s", "HITBTC_TIMEOUT": "1.5"}
    client = HitBtcClient.from_env(env, session=session)
    session.queue([])

    client.get_balances()

    assert client.config.timeout == 1.5
    assert session.calls[-1]["auth"] == ("k", "s")
    assert session.calls[-1]["timeout"] == 1.5


def test_context_manager_leaves_injected_session_open(session):
    with HitBtcClient(session=session) as client:
        session.queue([])
        client.get_currencies()

    assert not session.closed


def test_create_order_response_type(session, client):
    session.queue({"id": "1"})

    assert isinstance(client.create_order(Order(symbol="X", side="buy", quantity=1.0)), CreateOrderResponse)


def test_signed_operation_without_credentials_fails_locally(session):
    client = HitBtcClient(session=session)

    with pytest.raises(CredentialsRequiredError):
        client.get_balances()

    assert session.calls == []
