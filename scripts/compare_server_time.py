"""Compare server time reported through the client and through CCXT."""
from __future__ import annotations

from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import iso_ms, iter_cases, make_client

from binance_rest.core.errors import BinanceError
from binance_rest.models.shared import Service


def main(targets: Iterable[str] | None = None) -> None:
    client = make_client()
    try:
        for case in iter_cases(targets):
            print(f"\n=== {case.name} server time ===")
            wrapper = client.spot if case.service is Service.SPOT else client.futures
            try:
                print("client", iso_ms(wrapper.get_server_time()))
            except BinanceError as exc:
                print(f"client error: {exc}")

            exchange = case.ccxt_factory({"enableRateLimit": True})
            try:
                print("ccxt", iso_ms(exchange.fetch_time()))
            except ccxt.BaseError as exc:
                print(f"ccxt error: {exc}")
            finally:
                try:
                    exchange.close()
                except Exception:
                    pass
    finally:
        client.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
