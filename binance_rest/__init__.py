"""Synchronous Binance spot and futures REST client.

This module exposes the public API: the composed client, the signing and
dispatch primitives, symbol resolution, models and the exception hierarchy.
"""

from .clients import FuturesClient, SpotClient
from .core.config import Settings
from .core.coordinator import BinanceClient
from .core.credentials import DEFAULT_SLOT, CredentialSlot, Credentials, DefaultSlot, NamedSlot, resolve_credentials
from .core.dispatcher import HttpDispatcher
from .core.errors import (
    AmbiguousSymbolError,
    BinanceError,
    CacheNotInitializedError,
    ConfigMissingError,
    DecodeError,
    ExchangeError,
    HttpError,
    InsufficientBalanceError,
    SymbolNotFoundError,
)
from .core.params import OrderRequest
from .core.signing import SignedRequest, sign, sign_query
from .core.symbols import SymbolCache, SymbolResolver
from .models.shared import OrderSide, OrderType, Service, TimeInForce, TradePair

__all__ = [
    "BinanceClient",
    "SpotClient",
    "FuturesClient",
    "HttpDispatcher",
    "Settings",
    "Credentials",
    "CredentialSlot",
    "DefaultSlot",
    "NamedSlot",
    "DEFAULT_SLOT",
    "resolve_credentials",
    "SignedRequest",
    "sign",
    "sign_query",
    "SymbolCache",
    "SymbolResolver",
    "OrderRequest",
    "OrderSide",
    "OrderType",
    "Service",
    "TimeInForce",
    "TradePair",
    "BinanceError",
    "ConfigMissingError",
    "HttpError",
    "DecodeError",
    "ExchangeError",
    "InsufficientBalanceError",
    "SymbolNotFoundError",
    "AmbiguousSymbolError",
    "CacheNotInitializedError",
]
