"""Compare trading symbol metadata against CCXT market definitions."""
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
            print(f"\n=== {case.symbol} symbol ===")
            try:
                print(f"client {client.get_symbol(case.symbol)}")
            except HitBtcError as exc:
                print(f"client error: {exc}")

            try:
                market = exchange.market(case.ccxt_symbol)
                print(
                    "ccxt",
                    {
                        "id": market.get("id"),
                        "base": market.get("baseId"),
                        "quote": market.get("quoteId"),
                        "tick_size": market.get("precision", {}).get("price"),
                        "quantity_increment": market.get("precision", {}).get("amount"),
                        "taker": market.get("taker"),
                        "maker": market.get("maker"),
                    },
                )
            except ccxt.BaseError as exc:
                print(f"ccxt error: {exc}")
    finally:
        client.close()
        exchange.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
