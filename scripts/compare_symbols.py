"""Compare symbol listings and pair resolution against CCXT market ids."""
from __future__ import annotations

from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import PAIRS, iter_cases, make_client

from binance_rest.core.errors import BinanceError


def main(targets: Iterable[str] | None = None) -> None:
    client = make_client()
    try:
        for case in iter_cases(targets):
            print(f"\n=== {case.name} symbols ===")
            try:
                ours = {entry["symbol"] for entry in case.price_listing(client)}
                print(f"client symbols={len(ours)}")
            except BinanceError as exc:
                print(f"client error: {exc}")
                continue

            exchange = case.ccxt_factory({"enableRateLimit": True})
            try:
                markets = exchange.load_markets()
                theirs = {market["id"] for market in markets.values() if market.get("active")}
                print(f"ccxt active ids={len(theirs)}")
                print(f"missing from client={sorted(theirs - ours)[:20]}")
            except ccxt.BaseError as exc:
                print(f"ccxt error: {exc}")
            finally:
                try:
                    exchange.close()
                except Exception:
                    pass

        print("\n=== pair resolution (spot) ===")
        for pair in PAIRS:
            try:
                print(pair, "->", client.resolve_symbol(pair))
            except BinanceError as exc:
                print(pair, "error:", exc)
    finally:
        client.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
