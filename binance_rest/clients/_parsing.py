"""Payload converters shared by the spot and futures wrappers."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from ..core.errors import BinanceError
from ..models.records import OrderBook, PriceLevel, SymbolPrice


def parse_symbol_prices(payload: Any) -> list[SymbolPrice]:
    if not isinstance(payload, list):
        raise BinanceError("Binance returned an unexpected price listing payload")
    return [{"symbol": str(entry["symbol"]), "price": Decimal(str(entry["price"]))} for entry in payload]


def parse_order_book(payload: Any) -> OrderBook:
    if not isinstance(payload, dict) or "bids" not in payload or "asks" not in payload:
        raise BinanceError("Unexpected Binance depth payload structure")
    return {
        "last_update_id": int(payload.get("lastUpdateId") or 0),
        "bids": [_parse_level(level) for level in payload["bids"]],
        "asks": [_parse_level(level) for level in payload["asks"]],
    }


def _parse_level(raw: Sequence[Any]) -> PriceLevel:
    if len(raw) < 2:
        raise BinanceError("Unexpected Binance depth level structure")
    return (Decimal(str(raw[0])), Decimal(str(raw[1])))
