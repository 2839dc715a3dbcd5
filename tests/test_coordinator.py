from __future__ import annotations

from binance_rest import BinanceClient, Credentials, Service, Settings, SymbolCache, TradePair
from binance_rest.core.dispatcher import API_KEY_HEADER
from tests.stubs import StubSession, params_of


def _client(session: StubSession, **kwargs) -> BinanceClient:
    settings = Settings({"BINANCE_API_KEY": "dk", "BINANCE_API_SECRET": "ds"})
    return BinanceClient(settings=settings, session=session, **kwargs)


def test_client_wires_shared_dispatcher_and_cache():
    session = StubSession()
    client = _client(session)
    session.queue([{"symbol": "ETHBTC", "price": "0.07"}])
    session.queue({"symbol": "ETHBTC", "lastPrice": "0.07"})

    assert client.resolve_symbol(TradePair("btc", "eth")) == "ETHBTC"
    ticker = client.spot.get_ticker(TradePair("eth", "btc"))

    assert ticker["symbol"] == "ETHBTC"
    assert len(session.calls) == 2
    assert client.symbol_cache.populated


def test_clients_do_not_share_symbol_caches():
    first = _client(StubSession())
    second = _client(StubSession())

    first.symbol_cache.store(["ETHBTC"])

    assert second.symbol_cache.populated is False


def test_injected_cache_is_used():
    cache = SymbolCache()
    cache.store(["LTCBTC"])
    session = StubSession()
    client = _client(session, symbol_cache=cache)

    assert client.resolve_symbol(TradePair("ltc", "btc")) == "LTCBTC"
    assert session.calls == []


def test_authenticated_primitives():
    session = StubSession()
    client = _client(session)
    session.queue({"balances": []})
    session.queue({"orderId": 1})

    client.authenticated_get(Service.SPOT, "/api/v3/account", {})
    client.authenticated_post(
        Service.FUTURES, "/fapi/v1/order", {"symbol": "BTCUSDT"}, credentials=Credentials("k2", "s2")
    )

    assert session.calls[0]["headers"][API_KEY_HEADER] == "dk"
    assert session.calls[1]["headers"][API_KEY_HEADER] == "k2"
    assert session.calls[1]["url"].startswith("https://fapi.binance.com/fapi/v1/order?")
    assert params_of(session.calls[1]["url"])["symbol"] == "BTCUSDT"


def test_context_manager_leaves_injected_session_open():
    session = StubSession()

    with _client(session):
        pass

    assert session.closed is False
