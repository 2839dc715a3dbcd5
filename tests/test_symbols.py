from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

import binance_rest.core.symbols as symbols_module
from binance_rest.core.errors import (
    AmbiguousSymbolError,
    CacheNotInitializedError,
    HttpError,
    SymbolNotFoundError,
)
from binance_rest.core.symbols import ALL_PRICES_ENDPOINT, SymbolCache, SymbolResolver
from binance_rest.models.shared import Service, TradePair
from tests.stubs import StubSession, make_dispatcher

PRICES = [
    {"symbol": "ETHBTC", "price": "0.06137000"},
    {"symbol": "LTCBTC", "price": "0.01670200"},
    {"symbol": "REQETH", "price": "0.00030000"},
    {"symbol": "BTCUSDT", "price": "8400.00"},
]


@pytest.fixture()
def session_and_resolver():
    session = StubSession()
    resolver = SymbolResolver(make_dispatcher(session), SymbolCache())
    return session, resolver


def test_cache_starts_uninitialized():
    cache = SymbolCache()

    assert cache.populated is False
    with pytest.raises(CacheNotInitializedError):
        cache.get()


def test_store_populates_and_overwrites():
    cache = SymbolCache()

    cache.store(["ethbtc"])
    assert cache.get() == frozenset({"ETHBTC"})

    cache.store(["LTCBTC"])
    assert cache.get() == frozenset({"LTCBTC"})


def test_miss_fetches_listing_once(session_and_resolver):
    session, resolver = session_and_resolver
    session.queue(PRICES)

    assert resolver.resolve(TradePair("eth", "btc")) == "ETHBTC"
    assert resolver.resolve(TradePair("BTC", "ETH")) == "ETHBTC"
    assert resolver.resolve(TradePair("ltc", "BTC")) == "LTCBTC"

    assert len(session.calls) == 1
    assert session.calls[0]["url"].endswith(ALL_PRICES_ENDPOINT)
    assert session.calls[0]["headers"] == {}


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("ETH", "REQ", "REQETH"),
        ("rEq", "eTH", "REQETH"),
        ("usdt", "btc", "BTCUSDT"),
    ],
)
def test_resolution_is_symmetric(first, second, expected):
    cache = SymbolCache()
    cache.store(entry["symbol"] for entry in PRICES)
    resolver = SymbolResolver(make_dispatcher(StubSession()), cache)

    assert resolver.resolve(TradePair(first, second)) == expected
    assert resolver.resolve(TradePair(second, first)) == expected


def test_unknown_pair_fails_both_ways():
    cache = SymbolCache()
    cache.store(entry["symbol"] for entry in PRICES)
    resolver = SymbolResolver(make_dispatcher(StubSession()), cache)

    with pytest.raises(SymbolNotFoundError):
        resolver.resolve(TradePair("DOGE", "XRP"))
    with pytest.raises(SymbolNotFoundError):
        resolver.resolve(TradePair("XRP", "DOGE"))


def test_both_concatenations_listed_is_ambiguous():
    cache = SymbolCache()
    cache.store(["ABCXYZ", "XYZABC"])
    resolver = SymbolResolver(make_dispatcher(StubSession()), cache)

    with pytest.raises(AmbiguousSymbolError) as excinfo:
        resolver.resolve(TradePair("abc", "xyz"))

    assert set(excinfo.value.matches) == {"ABCXYZ", "XYZABC"}


def test_fetch_failure_propagates_and_leaves_cache_empty(session_and_resolver):
    session, resolver = session_and_resolver
    session.queue({"detail": "maintenance"}, status_code=503)
    session.queue(PRICES)

    with pytest.raises(HttpError):
        resolver.resolve(TradePair("ETH", "BTC"))

    assert resolver.resolve(TradePair("ETH", "BTC")) == "ETHBTC"
    assert len(session.calls) == 2


def test_resolver_uses_configured_service():
    session = StubSession()
    resolver = SymbolResolver(
        make_dispatcher(session), SymbolCache(), service=Service.FUTURES, endpoint="/fapi/v1/ticker/price"
    )
    session.queue([{"symbol": "BTCUSDT", "price": "1"}])

    assert resolver.resolve(TradePair("USDT", "BTC")) == "BTCUSDT"
    assert session.calls[0]["url"] == "https://fapi.binance.com/fapi/v1/ticker/price"


class BlockingSession(StubSession):
    """Holds the first listing request open until released."""

    def __init__(self) -> None:
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def get(self, url, headers=None, timeout=0):
        self.entered.set()
        assert self.release.wait(timeout=5)
        return super().get(url, headers=headers, timeout=timeout)


def test_concurrent_misses_issue_a_single_fetch():
    session = BlockingSession()
    session.queue(PRICES)
    resolver = SymbolResolver(make_dispatcher(session), SymbolCache())
    pairs = [TradePair("eth", "btc"), TradePair("BTC", "LTC"), TradePair("req", "eth"), TradePair("usdt", "btc")] * 4
    expected = ["ETHBTC", "LTCBTC", "REQETH", "BTCUSDT"] * 4

    with ThreadPoolExecutor(max_workers=len(pairs)) as pool:
        futures = [pool.submit(resolver.resolve, pair) for pair in pairs]
        assert session.entered.wait(timeout=5)
        session.release.set()
        results = [future.result(timeout=5) for future in futures]

    assert results == expected
    assert len(session.calls) == 1


def test_concurrent_waiters_share_the_failure(monkeypatch):
    waiting = threading.Semaphore(0)

    class CountingFuture(Future):
        def result(self, timeout=None):
            waiting.release()
            return super().result(timeout)

    monkeypatch.setattr(symbols_module, "Future", CountingFuture)
    cache = SymbolCache()
    started = threading.Event()
    release = threading.Event()
    calls = []

    def loader():
        calls.append(1)
        started.set()
        assert release.wait(timeout=5)
        raise HttpError("boom")

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(cache.populate, loader) for _ in range(4)]
        assert started.wait(timeout=5)
        for _ in range(3):
            assert waiting.acquire(timeout=5)
        release.set()
        errors = [future.exception(timeout=5) for future in futures]

    assert all(isinstance(error, HttpError) for error in errors)
    assert cache.populated is False
    assert len(calls) == 1
