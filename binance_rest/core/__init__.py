"""Core utilities: credentials, signing, dispatch and symbol resolution."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "BinanceClient",
    "HttpDispatcher",
    "Settings",
    "Credentials",
    "DefaultSlot",
    "NamedSlot",
    "resolve_credentials",
    "SignedRequest",
    "sign",
    "SymbolCache",
    "SymbolResolver",
    "OrderRequest",
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

_lazy_targets = {
    "BinanceClient": ("coordinator", "BinanceClient"),
    "HttpDispatcher": ("dispatcher", "HttpDispatcher"),
    "Settings": ("config", "Settings"),
    "Credentials": ("credentials", "Credentials"),
    "DefaultSlot": ("credentials", "DefaultSlot"),
    "NamedSlot": ("credentials", "NamedSlot"),
    "resolve_credentials": ("credentials", "resolve_credentials"),
    "SignedRequest": ("signing", "SignedRequest"),
    "sign": ("signing", "sign"),
    "SymbolCache": ("symbols", "SymbolCache"),
    "SymbolResolver": ("symbols", "SymbolResolver"),
    "OrderRequest": ("params", "OrderRequest"),
    "BinanceError": ("errors", "BinanceError"),
    "ConfigMissingError": ("errors", "ConfigMissingError"),
    "HttpError": ("errors", "HttpError"),
    "DecodeError": ("errors", "DecodeError"),
    "ExchangeError": ("errors", "ExchangeError"),
    "InsufficientBalanceError": ("errors", "InsufficientBalanceError"),
    "SymbolNotFoundError": ("errors", "SymbolNotFoundError"),
    "AmbiguousSymbolError": ("errors", "AmbiguousSymbolError"),
    "CacheNotInitializedError": ("errors", "CacheNotInitializedError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:  # pragma: no cover - defensive
        raise AttributeError(f"module 'binance_rest.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
