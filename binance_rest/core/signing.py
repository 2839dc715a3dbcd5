"""Canonical query serialization and HMAC-SHA256 request signing.

The query string produced here is both the signed payload and the exact string
sent on the wire, so parameter order is the insertion order of the mapping and
is never re-sorted afterwards.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, TypeAlias
from urllib.parse import urlencode

ParamValue: TypeAlias = str | int | float | Decimal | bool
RequestParams: TypeAlias = Mapping[str, ParamValue | None]


@dataclass(frozen=True, slots=True)
class SignedRequest:
    query_string: str
    signature: str

    def to_query(self) -> str:
        """Return the wire query: the signed string followed by its signature."""

        if not self.query_string:
            return f"signature={self.signature}"
        return f"{self.query_string}&signature={self.signature}"


def timestamp_ms() -> int:
    return int(time.time() * 1000)


def format_value(value: Any) -> str:
    """Render a scalar parameter the way Binance expects it."""

    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # repr() keeps the shortest round-tripping form; Decimal strips exponents.
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        return format(value, "f")
    raise TypeError(f"Unsupported request parameter type: {type(value).__name__}")


def build_query(params: RequestParams | None) -> str:
    """Serialize ``params`` in insertion order, skipping ``None`` values."""

    if not params:
        return ""
    pairs = [(key, format_value(value)) for key, value in params.items() if value is not None]
    return urlencode(pairs)


def sign_query(secret: str, query_string: str) -> str:
    """HMAC-SHA256 of ``query_string`` keyed by ``secret``, as uppercase hex."""

    digest = hmac.new(secret.encode("utf-8"), query_string.encode("utf-8"), hashlib.sha256)
    return digest.hexdigest().upper()


def sign(secret: str, params: RequestParams | None) -> SignedRequest:
    query_string = build_query(params)
    return SignedRequest(query_string=query_string, signature=sign_query(secret, query_string))
