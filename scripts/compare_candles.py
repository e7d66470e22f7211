"""Compare recent candles against CCXT OHLCV rows."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import iter_cases, make_client, make_exchange
from hitbtc_client import HitBtcError, Period

LIMIT = 3


def main(targets: Iterable[str] | None = None) -> None:
    client = make_client()
    exchange = make_exchange()
    try:
        for case in iter_cases(targets):
            print(f"\n=== {case.symbol} M1 candles ===")
            try:
                for candle in client.get_candles(case.symbol, period=Period.MINUTE_1, limit=LIMIT):
                    print("client", candle.timestamp, candle.open, candle.high, candle.low, candle.close, candle.volume)
            except HitBtcError as exc:
                print(f"client error: {exc}")

            try:
                for ts, open_, high, low, close, volume in exchange.fetch_ohlcv(case.ccxt_symbol, "1m", limit=LIMIT):
                    when = datetime.fromtimestamp(ts / 1000, tz=timezone.utc).isoformat()
                    print("ccxt", when, open_, high, low, close, volume)
            except ccxt.BaseError as exc:
                print(f"ccxt error: {exc}")
    finally:
        client.close()
        exchange.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
