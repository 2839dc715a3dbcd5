"""Domain models for the Binance REST client."""

from .records import FuturesBalance, OrderBook, PriceLevel, SymbolPrice, Ticker
from .shared import BASE_URLS, OrderSide, OrderType, Service, TimeInForce, TradePair

__all__ = [
    "BASE_URLS",
    "Service",
    "OrderSide",
    "OrderType",
    "TimeInForce",
    "TradePair",
    "FuturesBalance",
    "OrderBook",
    "PriceLevel",
    "SymbolPrice",
    "Ticker",
]
