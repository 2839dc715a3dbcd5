"""Shared domain models used by the core and the endpoint wrappers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class Service(StrEnum):
    """Binance API surfaces, each served from its own base URL."""

    SPOT = "spot"
    FUTURES = "futures"


BASE_URLS = MappingProxyType(
    {
        Service.SPOT: "https://api.binance.com",
        Service.FUTURES: "https://fapi.binance.com",
    }
)


class OrderSide(StrEnum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(StrEnum):
    """Order types accepted by ``POST /api/v3/order``."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LOSS = "STOP_LOSS"
    STOP_LOSS_LIMIT = "STOP_LOSS_LIMIT"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_LIMIT = "TAKE_PROFIT_LIMIT"
    LIMIT_MAKER = "LIMIT_MAKER"


class TimeInForce(StrEnum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"


@dataclass(frozen=True, slots=True)
class TradePair:
    """Two asset codes describing a market, regardless of order or case.

    ``TradePair("eth", "req")`` and ``TradePair("REQ", "ETH")`` resolve to the
    same canonical symbol (``REQETH``).
    """

    from_asset: str
    to_asset: str

    def __post_init__(self) -> None:
        if not self.from_asset or not self.to_asset:
            raise ValueError("TradePair assets must be non-empty strings.")

    def candidates(self) -> tuple[str, str]:
        """Return both uppercase concatenations (``from+to``, ``to+from``)."""

        base = self.from_asset.upper()
        quote = self.to_asset.upper()
        return (f"{base}{quote}", f"{quote}{base}")

    def __str__(self) -> str:
        return f"{self.from_asset.upper()}/{self.to_asset.upper()}"
