"""Binance spot REST endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.credentials import DEFAULT_SLOT, CredentialSlot, Credentials
from ..core.dispatcher import HttpDispatcher
from ..core.errors import BinanceError, ExchangeError, InsufficientBalanceError
from ..core.params import OrderRequest, Quantity, compact
from ..core.symbols import ALL_PRICES_ENDPOINT, SymbolResolver
from ..models.records import OrderBook, SymbolPrice, Ticker
from ..models.shared import OrderSide, OrderType, Service, TimeInForce, TradePair
from ._parsing import parse_order_book, parse_symbol_prices

PING_ENDPOINT = "/api/v3/ping"
TIME_ENDPOINT = "/api/v3/time"
EXCHANGE_INFO_ENDPOINT = "/api/v3/exchangeInfo"
TICKER_24H_ENDPOINT = "/api/v3/ticker/24hr"
DEPTH_ENDPOINT = "/api/v3/depth"
ACCOUNT_ENDPOINT = "/api/v3/account"
ORDER_ENDPOINT = "/api/v3/order"
WITHDRAW_ENDPOINT = "/sapi/v1/capital/withdraw/apply"
WITHDRAW_HISTORY_ENDPOINT = "/sapi/v1/capital/withdraw/history"
DEPOSIT_HISTORY_ENDPOINT = "/sapi/v1/capital/deposit/hisrec"
DEPOSIT_ADDRESS_ENDPOINT = "/sapi/v1/capital/deposit/address"
SUB_ACCOUNT_LIST_ENDPOINT = "/sapi/v1/sub-account/list"
SUB_ACCOUNT_TRANSFER_HISTORY_ENDPOINT = "/sapi/v1/sub-account/sub/transfer/history"
SUB_ACCOUNT_TRANSFER_ENDPOINT = "/sapi/v1/sub-account/universalTransfer"
SUB_ACCOUNT_ASSETS_ENDPOINT = "/sapi/v3/sub-account/assets"
DEPTH_LIMITS = (5, 10, 20, 50, 100, 500, 1000, 5000)

INSUFFICIENT_BALANCE_CODE = -2010
INSUFFICIENT_BALANCE_MSG = "Account has insufficient balance for requested action."

Symbol = str | TradePair


class SpotClient:
    """Endpoint wrappers for ``api.binance.com``.

    Signed calls accept explicit ``credentials`` or a credential ``slot``;
    without either the default settings keys are used.
    """

    service = Service.SPOT

    def __init__(self, dispatcher: HttpDispatcher, resolver: SymbolResolver) -> None:
        self._dispatcher = dispatcher
        self._resolver = resolver

    # ------------------------------------------------------------------
    # Market data
    def ping(self) -> dict[str, Any]:
        return self._dispatcher.get(self.service, PING_ENDPOINT)

    def get_server_time(self) -> int:
        payload = self._dispatcher.get(self.service, TIME_ENDPOINT)
        return int(payload["serverTime"])

    def get_exchange_info(self) -> dict[str, Any]:
        return self._dispatcher.get(self.service, EXCHANGE_INFO_ENDPOINT)

    def get_all_prices(self) -> list[SymbolPrice]:
        return parse_symbol_prices(self._dispatcher.get(self.service, ALL_PRICES_ENDPOINT))

    def get_ticker(self, symbol: Symbol) -> Ticker:
        """Return 24h statistics for a symbol string or a :class:`TradePair`."""

        payload = self._dispatcher.get_public(
            self.service, TICKER_24H_ENDPOINT, {"symbol": self._symbol(symbol)}
        )
        return _parse_ticker(payload)

    def get_depth(self, symbol: Symbol, limit: int = 100) -> OrderBook:
        if limit not in DEPTH_LIMITS:
            raise ValueError(f"Binance depth limit must be one of {DEPTH_LIMITS}")
        payload = self._dispatcher.get_public(
            self.service, DEPTH_ENDPOINT, {"symbol": self._symbol(symbol), "limit": limit}
        )
        return parse_order_book(payload)

    # ------------------------------------------------------------------
    # Account
    def get_account(
        self,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        return self._dispatcher.get(
            self.service, ACCOUNT_ENDPOINT, {}, credentials=credentials, slot=slot
        )

    # ------------------------------------------------------------------
    # Orders
    def create_order(
        self,
        order: OrderRequest,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        try:
            return self._dispatcher.post(
                self.service, ORDER_ENDPOINT, order.to_params(), credentials=credentials, slot=slot
            )
        except ExchangeError as exc:
            if exc.code == INSUFFICIENT_BALANCE_CODE and exc.message == INSUFFICIENT_BALANCE_MSG:
                raise InsufficientBalanceError(exc.code, exc.message) from exc
            raise

    def order_limit_buy(
        self,
        symbol: Symbol,
        quantity: Quantity,
        price: Quantity,
        time_in_force: TimeInForce = TimeInForce.GTC,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        order = self._limit_order(OrderSide.BUY, symbol, quantity, price, time_in_force)
        return self.create_order(order, credentials=credentials, slot=slot)

    def order_limit_sell(
        self,
        symbol: Symbol,
        quantity: Quantity,
        price: Quantity,
        time_in_force: TimeInForce = TimeInForce.GTC,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        order = self._limit_order(OrderSide.SELL, symbol, quantity, price, time_in_force)
        return self.create_order(order, credentials=credentials, slot=slot)

    def order_market_buy(
        self,
        symbol: Symbol,
        quantity: Quantity,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        order = OrderRequest(self._symbol(symbol), OrderSide.BUY, OrderType.MARKET, quantity)
        return self.create_order(order, credentials=credentials, slot=slot)

    def order_market_sell(
        self,
        symbol: Symbol,
        quantity: Quantity,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        order = OrderRequest(self._symbol(symbol), OrderSide.SELL, OrderType.MARKET, quantity)
        return self.create_order(order, credentials=credentials, slot=slot)

    # ------------------------------------------------------------------
    # Wallet
    def withdraw(
        self,
        coin: str,
        address: str,
        amount: Quantity,
        *,
        network: str | None = None,
        address_tag: str | None = None,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        params = compact(
            {
                "coin": coin,
                "address": address,
                "addressTag": address_tag,
                "network": network,
                "amount": amount,
            }
        )
        payload = self._dispatcher.post(
            self.service, WITHDRAW_ENDPOINT, params, credentials=credentials, slot=slot
        )
        return _raise_for_unsuccessful(payload)

    def get_withdraw_history(
        self,
        params: dict[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        return self._dispatcher.get(
            self.service,
            WITHDRAW_HISTORY_ENDPOINT,
            compact(params or {}),
            credentials=credentials,
            slot=slot,
        )

    def get_deposit_history(
        self,
        params: dict[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        return self._dispatcher.get(
            self.service,
            DEPOSIT_HISTORY_ENDPOINT,
            compact(params or {}),
            credentials=credentials,
            slot=slot,
        )

    def get_deposit_address(
        self,
        coin: str,
        *,
        network: str | None = None,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        params = compact({"coin": coin, "network": network})
        return self._dispatcher.get(
            self.service, DEPOSIT_ADDRESS_ENDPOINT, params, credentials=credentials, slot=slot
        )

    # ------------------------------------------------------------------
    # Sub-accounts
    def sub_accounts_list(
        self,
        params: dict[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        return self._dispatcher.get(
            self.service,
            SUB_ACCOUNT_LIST_ENDPOINT,
            compact(params or {}),
            credentials=credentials,
            slot=slot,
        )

    def sub_accounts_transfer_history(
        self,
        params: dict[str, Any] | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        return self._dispatcher.get(
            self.service,
            SUB_ACCOUNT_TRANSFER_HISTORY_ENDPOINT,
            compact(params or {}),
            credentials=credentials,
            slot=slot,
        )

    def sub_accounts_transfer(
        self,
        params: dict[str, Any],
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        payload = self._dispatcher.post(
            self.service,
            SUB_ACCOUNT_TRANSFER_ENDPOINT,
            compact(params),
            credentials=credentials,
            slot=slot,
        )
        return _raise_for_unsuccessful(payload)

    def sub_accounts_assets(
        self,
        email: str,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        return self._dispatcher.get(
            self.service,
            SUB_ACCOUNT_ASSETS_ENDPOINT,
            {"email": email},
            credentials=credentials,
            slot=slot,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    def _symbol(self, symbol: Symbol) -> str:
        if isinstance(symbol, TradePair):
            return self._resolver.resolve(symbol)
        return symbol

    def _limit_order(
        self,
        side: OrderSide,
        symbol: Symbol,
        quantity: Quantity,
        price: Quantity,
        time_in_force: TimeInForce,
    ) -> OrderRequest:
        return OrderRequest(
            self._symbol(symbol),
            side,
            OrderType.LIMIT,
            quantity,
            price=price,
            time_in_force=time_in_force,
        )


def _raise_for_unsuccessful(payload: Any) -> Any:
    # wallet endpoints report some failures as ``{"success": false, "msg": ...}``
    if isinstance(payload, dict) and payload.get("success") is False:
        raise ExchangeError(None, str(payload.get("msg") or "Binance request was not successful"))
    return payload


def _parse_ticker(raw: Any) -> Ticker:
    if not isinstance(raw, dict) or "symbol" not in raw:
        raise BinanceError("Unexpected Binance ticker payload structure")
    return {
        "symbol": str(raw["symbol"]),
        "last_price": Decimal(raw.get("lastPrice") or "0"),
        "bid_price": Decimal(raw.get("bidPrice") or "0"),
        "ask_price": Decimal(raw.get("askPrice") or "0"),
        "open_price": Decimal(raw.get("openPrice") or "0"),
        "high_price": Decimal(raw.get("highPrice") or "0"),
        "low_price": Decimal(raw.get("lowPrice") or "0"),
        "volume": Decimal(raw.get("volume") or "0"),
        "open_time": int(raw.get("openTime") or 0),
        "close_time": int(raw.get("closeTime") or 0),
        "count": int(raw.get("count") or 0),
    }

