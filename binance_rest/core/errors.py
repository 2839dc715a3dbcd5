"""Custom exception hierarchy for the Binance REST client."""

from __future__ import annotations

from typing import Any


class BinanceError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class ConfigMissingError(BinanceError):
    """Raised when an API key or secret cannot be resolved before signing."""

    def __init__(self, which: str, message: str | None = None) -> None:
        self.which = which
        super().__init__(message or f"{which} missing")


class HttpError(BinanceError):
    """Transport-level failure: connection errors, timeouts, bare HTTP error statuses."""

    def __init__(self, message: str, *, cause: Any = None, status_code: int | None = None) -> None:
        self.cause = cause
        self.status_code = status_code
        super().__init__(message)


class DecodeError(BinanceError):
    """The response body could not be parsed as JSON."""

    def __init__(self, message: str, *, cause: Any = None, body: str | None = None) -> None:
        self.cause = cause
        self.body = body
        super().__init__(message)


class ExchangeError(BinanceError):
    """A well-formed response in which Binance rejected the request."""

    def __init__(self, code: int | None, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"Binance error {code}: {message}" if code is not None else message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExchangeError):
            return NotImplemented
        return type(self) is type(other) and (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


class InsufficientBalanceError(ExchangeError):
    """Order placement rejected because the account balance is too low."""


class SymbolNotFoundError(BinanceError):
    """Raised when neither concatenation of a trade pair is listed."""

    def __init__(self, pair: Any) -> None:
        self.pair = pair
        super().__init__(f"No Binance symbol found for {pair}")


class AmbiguousSymbolError(BinanceError):
    """Both concatenations of a trade pair are listed; the exchange data is inconsistent."""

    def __init__(self, pair: Any, matches: tuple[str, ...]) -> None:
        self.pair = pair
        self.matches = matches
        super().__init__(f"Ambiguous Binance symbol for {pair}: {', '.join(matches)}")


class CacheNotInitializedError(BinanceError):
    """The symbol cache has not been populated yet."""
