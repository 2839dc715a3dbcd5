"""Symbol set cache and trade-pair resolution."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future

from ..models.shared import Service, TradePair
from .dispatcher import HttpDispatcher
from .errors import AmbiguousSymbolError, BinanceError, CacheNotInitializedError, SymbolNotFoundError

logger = logging.getLogger(__name__)

ALL_PRICES_ENDPOINT = "/api/v3/ticker/price"

SymbolSet = frozenset[str]
SymbolLoader = Callable[[], Iterable[str]]


class SymbolCache:
    """Process-lifetime set of tradable symbols.

    Starts uninitialized and becomes populated once; there is no way back.
    :meth:`populate` is single-flight: concurrent callers that miss share one
    in-flight load instead of each issuing their own.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._symbols: SymbolSet | None = None
        self._inflight: Future[SymbolSet] | None = None

    @property
    def populated(self) -> bool:
        return self._symbols is not None

    def get(self) -> SymbolSet:
        symbols = self._symbols
        if symbols is None:
            raise CacheNotInitializedError("Symbol cache has not been populated")
        return symbols

    def store(self, symbols: Iterable[str]) -> SymbolSet:
        snapshot = frozenset(symbol.upper() for symbol in symbols)
        with self._lock:
            self._symbols = snapshot
        return snapshot

    def populate(self, loader: SymbolLoader) -> SymbolSet:
        """Return the cached set, running ``loader`` at most once across threads.

        If the load fails every waiting caller sees the same exception and the
        cache stays uninitialized.
        """

        with self._lock:
            if self._symbols is not None:
                return self._symbols
            future = self._inflight
            leader = future is None
            if leader:
                future = Future()
                self._inflight = future
        if not leader:
            return future.result()

        try:
            snapshot = frozenset(symbol.upper() for symbol in loader())
        except BaseException as exc:
            with self._lock:
                self._inflight = None
            future.set_exception(exc)
            raise
        with self._lock:
            self._symbols = snapshot
            self._inflight = None
        future.set_result(snapshot)
        logger.debug("Symbol cache populated", extra={"symbols": len(snapshot)})
        return snapshot


class SymbolResolver:
    """Map a :class:`TradePair` to the exchange's canonical symbol."""

    def __init__(
        self,
        dispatcher: HttpDispatcher,
        cache: SymbolCache,
        *,
        service: Service = Service.SPOT,
        endpoint: str = ALL_PRICES_ENDPOINT,
    ) -> None:
        self._dispatcher = dispatcher
        self._cache = cache
        self._service = service
        self._endpoint = endpoint

    def resolve(self, pair: TradePair) -> str:
        try:
            symbols = self._cache.get()
        except CacheNotInitializedError:
            symbols = self._cache.populate(self._fetch_symbols)
        return self._match(pair, symbols)

    def _match(self, pair: TradePair, symbols: SymbolSet) -> str:
        found = tuple(dict.fromkeys(candidate for candidate in pair.candidates() if candidate in symbols))
        if len(found) == 1:
            return found[0]
        if not found:
            raise SymbolNotFoundError(pair)
        logger.error("Both concatenations listed for pair", extra={"pair": str(pair), "matches": found})
        raise AmbiguousSymbolError(pair, found)

    def _fetch_symbols(self) -> list[str]:
        payload = self._dispatcher.get(self._service, self._endpoint)
        if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
            raise BinanceError("Binance returned an unexpected price listing payload")
        return [str(entry["symbol"]) for entry in payload if isinstance(entry, dict) and "symbol" in entry]
