from __future__ import annotations

import hashlib
import hmac
from decimal import Decimal

import pytest

from binance_rest.core.signing import build_query, format_value, sign, sign_query
from binance_rest.models.shared import OrderSide, OrderType, TimeInForce

SECRET = "vmPUZE6mv9SD5VNHk4HlWFsOr6aKE2zvsw0MuIgwCIPy6utIco14y7Ju91duEh8A"
QUERY = (
    "symbol=LTCBTC&side=BUY&type=LIMIT&timeInForce=GTC&quantity=1&price=0.1"
    "&recvWindow=5000&timestamp=1499827319559"
)
# The documented order query signed with SECRET.
EXPECTED_SIGNATURE = "965474FABE1EA3DC485F266DD9FFAC6D24818F243DE5562E95D85A3C34FD5C38"


def test_sign_query_matches_known_vector():
    assert sign_query(SECRET, QUERY) == EXPECTED_SIGNATURE


def test_sign_query_matches_stdlib_hmac():
    expected = hmac.new(SECRET.encode(), QUERY.encode(), hashlib.sha256).hexdigest().upper()

    assert sign_query(SECRET, QUERY) == expected


def test_sign_builds_query_in_insertion_order():
    params = {
        "symbol": "LTCBTC",
        "side": OrderSide.BUY,
        "type": OrderType.LIMIT,
        "timeInForce": TimeInForce.GTC,
        "quantity": 1,
        "price": 0.1,
        "recvWindow": 5000,
        "timestamp": 1499827319559,
    }

    signed = sign(SECRET, params)

    assert signed.query_string == QUERY
    assert signed.signature == EXPECTED_SIGNATURE
    assert signed.to_query() == f"{QUERY}&signature={EXPECTED_SIGNATURE}"


def test_sign_is_deterministic():
    params = {"symbol": "ETHBTC", "quantity": Decimal("0.5"), "timestamp": 1}

    first = sign("secret", params)
    second = sign("secret", dict(params))

    assert first == second


def test_key_order_changes_the_signature():
    forward = sign("secret", {"a": 1, "b": 2})
    backward = sign("secret", {"b": 2, "a": 1})

    assert forward.query_string == "a=1&b=2"
    assert backward.query_string == "b=2&a=1"
    assert forward.signature != backward.signature


def test_build_query_skips_absent_values():
    assert build_query({"symbol": "ETHBTC", "price": None, "limit": 5}) == "symbol=ETHBTC&limit=5"


def test_build_query_encodes_values():
    assert build_query({"email": "a+b@example.com"}) == "email=a%2Bb%40example.com"


def test_build_query_empty():
    assert build_query(None) == ""
    assert build_query({}) == ""
    assert sign("secret", {}).to_query().startswith("signature=")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (5000, "5000"),
        (0.00001, "0.00001"),
        (Decimal("1E-8"), "0.00000001"),
        (Decimal("12.50"), "12.50"),
        (OrderSide.SELL, "SELL"),
        ("LTCBTC", "LTCBTC"),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_format_value_rejects_nested_values():
    with pytest.raises(TypeError):
        format_value(["BTC", "ETH"])
