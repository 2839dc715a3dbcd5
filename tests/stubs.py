from __future__ import annotations

import json
import threading
from urllib.parse import parse_qsl, urlsplit

import requests

from binance_rest.core.config import Settings
from binance_rest.core.dispatcher import HttpDispatcher

FIXED_TIMESTAMP = 1_499_827_319_559

_MISSING = object()


class StubResponse:
    def __init__(self, payload=_MISSING, status_code: int = 200, text: str | None = None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        if self._payload is _MISSING:
            raise requests.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


class StubSession:
    def __init__(self) -> None:
        self.calls: list[dict] = []
        self._responses: list = []
        self._lock = threading.Lock()
        self.closed = False

    def queue(self, payload, status_code: int = 200) -> None:
        self._responses.append(StubResponse(payload, status_code))

    def queue_text(self, text: str, status_code: int = 200) -> None:
        self._responses.append(StubResponse(text=text, status_code=status_code))

    def queue_error(self, exc: Exception) -> None:
        self._responses.append(exc)

    def get(self, url, headers=None, timeout=0):
        return self._record("GET", url, headers, timeout)

    def post(self, url, data=None, headers=None, timeout=0):
        return self._record("POST", url, headers, timeout, data=data)

    def close(self) -> None:
        self.closed = True

    def _record(self, method, url, headers, timeout, data=None):
        with self._lock:
            self.calls.append(
                {"method": method, "url": url, "headers": dict(headers or {}), "timeout": timeout, "data": data}
            )
            if not self._responses:
                raise AssertionError("No queued response left for stub session")
            response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def query_of(url: str) -> str:
    return urlsplit(url).query


def params_of(url: str) -> dict[str, str]:
    return dict(parse_qsl(urlsplit(url).query))


def make_dispatcher(session: StubSession, settings: Settings | None = None) -> HttpDispatcher:
    return HttpDispatcher(
        settings=settings if settings is not None else Settings({}),
        session=session,
        clock=lambda: FIXED_TIMESTAMP,
    )
