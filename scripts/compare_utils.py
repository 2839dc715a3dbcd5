"""Shared helpers for manual client-vs-CCXT comparisons."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
import sys
from typing import Callable, Iterable, Sequence

import ccxt  # type: ignore

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from binance_rest.core.config import Settings
from binance_rest.core.coordinator import BinanceClient
from binance_rest.models.shared import Service, TradePair


@dataclass(slots=True)
class ServiceCase:
    name: str
    service: Service
    ccxt_factory: Callable[[dict[str, object]], ccxt.Exchange]
    price_listing: Callable[[BinanceClient], list]


CASES: Sequence[ServiceCase] = (
    ServiceCase(
        name="spot",
        service=Service.SPOT,
        ccxt_factory=ccxt.binance,
        price_listing=lambda client: client.spot.get_all_prices(),
    ),
    ServiceCase(
        name="futures",
        service=Service.FUTURES,
        ccxt_factory=ccxt.binanceusdm,
        price_listing=lambda client: client.futures.get_symbol_prices(),
    ),
)


def iter_cases(targets: Iterable[str] | None = None) -> Iterable[ServiceCase]:
    if not targets:
        yield from CASES
        return
    selected = {t.lower() for t in targets}
    for case in CASES:
        if case.name.lower() in selected:
            yield case


def make_client() -> BinanceClient:
    return BinanceClient(settings=Settings.from_env())


def iso_ms(ts_ms: int | float | None) -> str:
    if ts_ms is None:
        return "<missing>"
    return datetime.fromtimestamp(float(ts_ms) / 1000, tz=timezone.utc).isoformat()


PAIRS = (TradePair("BTC", "USDT"), TradePair("ETH", "BTC"), TradePair("BNB", "ETH"))
