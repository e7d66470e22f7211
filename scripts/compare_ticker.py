"""Compare ticker snapshots against CCXT tickers."""
from __future__ import annotations

from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import iter_cases, make_client, make_exchange
from hitbtc_client import HitBtcError


def main(targets: Iterable[str] | None = None) -> None:
    client = make_client()
    exchange = make_exchange()
    try:
        for case in iter_cases(targets):
            print(f"\n=== {case.symbol} ticker ===")
            try:
                ticker = client.get_ticker(case.symbol)
                print(
                    "client",
                    f"ts={ticker.timestamp.isoformat() if ticker.timestamp else '<missing>'}",
                    f"last={ticker.last}",
                    f"bid={ticker.bid}",
                    f"ask={ticker.ask}",
                )
            except HitBtcError as exc:
                print(f"client error: {exc}")

            try:
                reference = exchange.fetch_ticker(case.ccxt_symbol)
                print(
                    "ccxt",
                    f"ts={reference.get('datetime')}",
                    f"last={reference.get('last')}",
                    f"bid={reference.get('bid')}",
                    f"ask={reference.get('ask')}",
                )
            except ccxt.BaseError as exc:
                print(f"ccxt error: {exc}")
    finally:
        client.close()
        exchange.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
