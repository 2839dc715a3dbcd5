"""Requests-backed dispatcher shared by every Binance endpoint wrapper."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

import requests

from ..models.shared import BASE_URLS, Service
from .config import Settings
from .credentials import DEFAULT_SLOT, CredentialSlot, Credentials, resolve_credentials
from .errors import DecodeError, ExchangeError, HttpError
from .signing import RequestParams, build_query, sign, timestamp_ms

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-MBX-APIKEY"
DEFAULT_TIMEOUT = 10.0
DEFAULT_RECV_WINDOW = 5000


class HttpDispatcher:
    """Issue signed and unsigned calls and normalize every response.

    Each call performs exactly one outbound request. A JSON object carrying
    an integer ``code`` and a string ``msg`` is an :class:`ExchangeError`
    whatever the HTTP status, so a rejected order is never mistaken for a
    success.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        base_urls: Mapping[Service, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        recv_window: int = DEFAULT_RECV_WINDOW,
        clock: Callable[[], int] = timestamp_ms,
    ) -> None:
        self._settings = settings if settings is not None else Settings.from_env()
        self._session = session or requests.Session()
        self._owns_session = session is None
        urls = dict(BASE_URLS)
        if base_urls:
            urls.update(base_urls)
        self._base_urls = {service: url.rstrip("/") for service, url in urls.items()}
        self._timeout = timeout
        self._recv_window = recv_window
        self._clock = clock

    # ------------------------------------------------------------------
    # Public API
    def get(
        self,
        service: Service,
        path: str,
        params: RequestParams | None = None,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        """Signed GET; without ``params`` this is a plain unsigned GET."""

        if params is None:
            return self.get_public(service, path)
        query, headers = self._signed(params, credentials, slot)
        return self._request("GET", service, path, query, headers)

    def get_public(self, service: Service, path: str, query: RequestParams | None = None) -> Any:
        """Unsigned GET for market data endpoints."""

        return self._request("GET", service, path, build_query(query), {})

    def post(
        self,
        service: Service,
        path: str,
        params: RequestParams,
        *,
        credentials: Credentials | None = None,
        slot: CredentialSlot = DEFAULT_SLOT,
    ) -> Any:
        """Signed POST with the parameters in the query string and an empty body."""

        query, headers = self._signed(params, credentials, slot)
        return self._request("POST", service, path, query, headers)

    def base_url(self, service: Service) -> str:
        return self._base_urls[service]

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    # ------------------------------------------------------------------
    # Internal helpers
    def _signed(
        self,
        params: RequestParams,
        credentials: Credentials | None,
        slot: CredentialSlot,
    ) -> tuple[str, dict[str, str]]:
        if credentials is None:
            credentials = resolve_credentials(self._settings, slot)
        payload = dict(params)
        if payload.get("recvWindow") is None:
            payload["recvWindow"] = self._recv_window
        if payload.get("timestamp") is None:
            payload["timestamp"] = self._clock()
        signed = sign(credentials.api_secret, payload)
        return signed.to_query(), {API_KEY_HEADER: credentials.api_key}

    def _request(
        self,
        method: str,
        service: Service,
        path: str,
        query: str,
        headers: dict[str, str],
    ) -> Any:
        url = f"{self._base_urls[service]}{path}"
        if query:
            url = f"{url}?{query}"
        logger.debug(
            "Dispatching Binance request",
            extra={"method": method, "service": str(service), "path": path, "signed": bool(headers)},
        )
        try:
            if method == "POST":
                response = self._session.post(url, data=b"", headers=headers, timeout=self._timeout)
            else:
                response = self._session.get(url, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise HttpError(f"Failed to call Binance endpoint {path}: {exc}", cause=exc) from exc

        payload = self._decode_response(response, path)
        if self._is_error_payload(payload):
            logger.warning(
                "Binance rejected request",
                extra={"path": path, "code": payload["code"], "status_code": response.status_code},
            )
            raise ExchangeError(payload["code"], payload["msg"])
        if response.status_code >= 400:
            raise HttpError(
                f"Binance endpoint {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return payload

    def _decode_response(self, response: requests.Response, path: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Binance endpoint {path} returned a non-JSON payload",
                cause=exc,
                body=getattr(response, "text", None),
            ) from exc

    def _is_error_payload(self, payload: Any) -> bool:
        if not isinstance(payload, dict):
            return False
        code = payload.get("code")
        return (
            isinstance(code, int)
            and not isinstance(code, bool)
            and isinstance(payload.get("msg"), str)
        )
