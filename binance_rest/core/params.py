"""Request helper objects shared by the order endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..models.shared import OrderSide, OrderType, TimeInForce

Quantity = Decimal | int | float


def compact(params: dict[str, Any]) -> dict[str, Any]:
    """Drop absent optional fields so they are never signed as empty values."""

    return {key: value for key, value in params.items() if value is not None}


@dataclass(frozen=True, slots=True)
class OrderRequest:
    """Parameters for ``POST /api/v3/order``."""

    symbol: str
    side: OrderSide
    type: OrderType
    quantity: Quantity
    price: Quantity | None = None
    time_in_force: TimeInForce | None = None
    new_client_order_id: str | None = None
    stop_price: Quantity | None = None
    iceberg_quantity: Quantity | None = None
    recv_window: int | None = None
    timestamp: int | None = None

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("symbol must be a non-empty string")
        if self.quantity <= 0:
            raise ValueError("quantity must be positive")
        if self.type is OrderType.LIMIT:
            if self.price is None:
                raise ValueError("LIMIT orders require a price")
            if self.time_in_force is None:
                object.__setattr__(self, "time_in_force", TimeInForce.GTC)

    def to_params(self) -> dict[str, Any]:
        return compact(
            {
                "symbol": self.symbol,
                "side": self.side,
                "type": self.type,
                "quantity": self.quantity,
                "price": self.price,
                "timeInForce": self.time_in_force,
                "newClientOrderId": self.new_client_order_id,
                "stopPrice": self.stop_price,
                "icebergQty": self.iceberg_quantity,
                "recvWindow": self.recv_window,
                "timestamp": self.timestamp,
            }
        )
