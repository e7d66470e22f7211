"""Shared helpers for manual client-vs-CCXT comparisons."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Iterable, Sequence

import ccxt  # type: ignore

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hitbtc_client import HitBtcClient


@dataclass(slots=True)
class PairCase:
    symbol: str
    ccxt_symbol: str


CASES: Sequence[PairCase] = (
    PairCase(symbol="BTCUSD", ccxt_symbol="BTC/USDT"),
    PairCase(symbol="ETHBTC", ccxt_symbol="ETH/BTC"),
    PairCase(symbol="LTCBTC", ccxt_symbol="LTC/BTC"),
)


def iter_cases(targets: Iterable[str] | None = None) -> Iterable[PairCase]:
    if not targets:
        yield from CASES
        return
    selected = {t.upper() for t in targets}
    for case in CASES:
        if case.symbol in selected:
            yield case


def make_client() -> HitBtcClient:
    return HitBtcClient.from_env()


def make_exchange() -> ccxt.Exchange:
    exchange = ccxt.hitbtc({"enableRateLimit": True})
    exchange.load_markets()
    return exchange
