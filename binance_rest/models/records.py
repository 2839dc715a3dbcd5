"""Typed records for the few payloads the endpoint wrappers convert."""

from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias, TypedDict

# ``(price, quantity)``
PriceLevel: TypeAlias = tuple[Decimal, Decimal]


class SymbolPrice(TypedDict):
    symbol: str
    price: Decimal


class OrderBook(TypedDict):
    """Depth snapshot; levels are sorted best-first as returned by Binance."""

    last_update_id: int
    bids: list[PriceLevel]
    asks: list[PriceLevel]


class Ticker(TypedDict):
    """24 hour rolling window statistics for one symbol."""

    symbol: str
    last_price: Decimal
    bid_price: Decimal
    ask_price: Decimal
    open_price: Decimal
    high_price: Decimal
    low_price: Decimal
    volume: Decimal
    open_time: int
    close_time: int
    count: int


class FuturesBalance(TypedDict):
    account_alias: str
    asset: str
    balance: Decimal
    available_balance: Decimal
