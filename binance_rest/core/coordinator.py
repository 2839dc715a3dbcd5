"""High-level client that composes the dispatcher, symbol cache and wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import requests

from ..clients.futures import FuturesClient
from ..clients.spot import SpotClient
from ..models.shared import Service, TradePair
from .config import Settings
from .credentials import DEFAULT_SLOT, CredentialSlot, Credentials
from .dispatcher import DEFAULT_RECV_WINDOW, DEFAULT_TIMEOUT, HttpDispatcher
from .signing import RequestParams
from .symbols import SymbolCache, SymbolResolver


class BinanceClient:
    """Entry point consumed by SDK callers.

    Each instance owns its own symbol cache, so two clients never share
    resolution state. Use as a context manager to release the HTTP session.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        base_urls: Mapping[Service, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        recv_window: int = DEFAULT_RECV_WINDOW,
        symbol_cache: SymbolCache | None = None,
    ) -> None:
        self.dispatcher = HttpDispatcher(
            settings=settings,
            session=session,
            base_urls=base_urls,
            timeout=timeout,
            recv_window=recv_window,
        )
        self.symbol_cache = symbol_cache or SymbolCache()
        self.resolver = SymbolResolver(self.dispatcher, self.symbol_cache)
        self.spot = SpotClient(self.dispatcher, self.resolver)
        self.futures = FuturesClient(self.dispatcher)

    # Core primitives ----------------------------------------------------
    def authenticated_get(
        self,
        service: Service,
        path: str,
        params: RequestParams | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        """Signed GET against ``service``; plain GET when ``params`` is omitted."""

        return self.dispatcher.get(service, path, params, credentials=credentials, slot=slot)

    def authenticated_post(
        self,
        service: Service,
        path: str,
        params: RequestParams,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        """Signed POST against ``service``."""

        return self.dispatcher.post(service, path, params, credentials=credentials, slot=slot)

    def resolve_symbol(self, pair: TradePair) -> str:
        """Return the canonical symbol for ``pair``, populating the cache on first use."""

        return self.resolver.resolve(pair)

    # Lifecycle ----------------------------------------------------------
    def close(self) -> None:
        self.dispatcher.close()

    def __enter__(self) -> BinanceClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
