"""Binance USD-M futures REST endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from ..core.credentials import DEFAULT_SLOT, CredentialSlot, Credentials
from ..core.dispatcher import HttpDispatcher
from ..core.errors import BinanceError
from ..core.params import compact
from ..models.records import FuturesBalance, OrderBook, SymbolPrice
from ..models.shared import Service
from ._parsing import parse_order_book, parse_symbol_prices

PING_ENDPOINT = "/fapi/v1/ping"
TIME_ENDPOINT = "/fapi/v1/time"
EXCHANGE_INFO_ENDPOINT = "/fapi/v1/exchangeInfo"
SYMBOL_PRICE_ENDPOINT = "/fapi/v1/ticker/price"
DEPTH_ENDPOINT = "/fapi/v1/depth"
BALANCE_ENDPOINT = "/fapi/v2/balance"
ACCOUNT_ENDPOINT = "/fapi/v2/account"
ALL_ORDERS_ENDPOINT = "/fapi/v1/allOrders"
OPEN_ORDERS_ENDPOINT = "/fapi/v1/openOrders"
ORDER_ENDPOINT = "/fapi/v1/order"
# https://binance-docs.github.io/apidocs/futures/en/#all-orders-user_data
ALL_ORDERS_MAX_LIMIT = 1000


class FuturesClient:
    """Endpoint wrappers for ``fapi.binance.com``."""

    service = Service.FUTURES

    def __init__(self, dispatcher: HttpDispatcher) -> None:
        self._dispatcher = dispatcher

    # ------------------------------------------------------------------
    # Market data
    def ping(self) -> dict[str, Any]:
        return self._dispatcher.get(self.service, PING_ENDPOINT)

    def get_server_time(self) -> int:
        payload = self._dispatcher.get(self.service, TIME_ENDPOINT)
        return int(payload["serverTime"])

    def get_exchange_info(self) -> dict[str, Any]:
        return self._dispatcher.get(self.service, EXCHANGE_INFO_ENDPOINT)

    def get_symbol_prices(self) -> list[SymbolPrice]:
        return parse_symbol_prices(self._dispatcher.get(self.service, SYMBOL_PRICE_ENDPOINT))

    def get_depth(self, symbol: str, limit: int = 100) -> OrderBook:
        payload = self._dispatcher.get_public(
            self.service, DEPTH_ENDPOINT, {"symbol": symbol, "limit": limit}
        )
        return parse_order_book(payload)

    # ------------------------------------------------------------------
    # Account
    def get_balance(
        self,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> list[FuturesBalance]:
        payload = self._dispatcher.get(
            self.service, BALANCE_ENDPOINT, {}, credentials=credentials, slot=slot
        )
        if not isinstance(payload, list):
            raise BinanceError("Unexpected Binance futures balance payload structure")
        return [self._parse_balance(entry) for entry in payload]

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
    def get_all_orders(
        self,
        symbol: str,
        *,
        order_id: int | None = None,
        start_time: int | None = None,
        end_time: int | None = None,
        limit: int | None = None,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Sequence[dict[str, Any]]:
        """Orders for ``symbol``; from ``order_id`` onwards when it is given."""

        if limit is not None and not 0 < limit <= ALL_ORDERS_MAX_LIMIT:
            raise ValueError(f"Binance all orders limit must be within 1..{ALL_ORDERS_MAX_LIMIT}")
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "startTime": start_time,
                "endTime": end_time,
                "limit": limit,
            }
        )
        return self._dispatcher.get(
            self.service, ALL_ORDERS_ENDPOINT, params, credentials=credentials, slot=slot
        )

    def get_open_orders(
        self,
        symbol: str | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Sequence[dict[str, Any]]:
        return self._dispatcher.get(
            self.service,
            OPEN_ORDERS_ENDPOINT,
            compact({"symbol": symbol}),
            credentials=credentials,
            slot=slot,
        )

    def get_order(
        self,
        symbol: str,
        *,
        order_id: int | None = None,
        orig_client_order_id: str | None = None,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> dict[str, Any]:
        if order_id is None and orig_client_order_id is None:
            raise ValueError("Either order_id or orig_client_order_id is required")
        params = compact(
            {
                "symbol": symbol,
                "orderId": order_id,
                "origClientOrderId": orig_client_order_id,
            }
        )
        return self._dispatcher.get(
            self.service, ORDER_ENDPOINT, params, credentials=credentials, slot=slot
        )

    # ------------------------------------------------------------------
    # Internal helpers
    def _parse_balance(self, raw: dict[str, Any]) -> FuturesBalance:
        return {
            "account_alias": str(raw.get("accountAlias") or ""),
            "asset": str(raw["asset"]),
            "balance": Decimal(str(raw.get("balance") or "0")),
            "available_balance": Decimal(str(raw.get("availableBalance") or "0")),
        }
