"""Synchronous HTTP transport with throttling and HTTP status evaluation."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Callable, Protocol

import httpx

from ..config import MapsClientConfig
from .errors import MapsProtocolError, MapsTransportError
from .response_parsing import parse_json_payload
from .throttling import MinIntervalThrottler

logger = logging.getLogger("maps_api_client")


class TransportResponse(Protocol):
    status_code: int

    def json(self) -> object: ...


class TransportClient(Protocol):
    def get(self, url: str) -> TransportResponse: ...
    def close(self) -> None: ...


def build_default_headers(config: MapsClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: MapsClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


class SyncTransport:
    """Sends one GET per call against ``{base_url}/{endpoint}?{query}``.

    The query string is sent exactly as built; httpx does not re-encode it.
    There is no retry. The URL is never logged because the query carries the
    API key.
    """

    def __init__(
        self,
        config: MapsClientConfig,
        *,
        client: TransportClient | None = None,
        sleeper: Callable[[float], None] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._throttler = MinIntervalThrottler(
            config.throttling.min_wait_interval_seconds,
            clock=clock or time.monotonic,
            sleeper=sleeper or time.sleep,
        )
        self._owns_client = client is None
        normalized_base_url = config.base_url.rstrip("/") + "/"
        self._client = client or httpx.Client(
            base_url=normalized_base_url,
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def request(self, endpoint: str, *, query: str) -> dict[str, object]:
        if self._closed:
            raise MapsTransportError("transport is already closed")

        normalized_endpoint = endpoint.strip("/")
        slept = self._throttler.wait()
        if slept:
            logger.debug("request throttled endpoint=%s slept=%.3f", normalized_endpoint, slept)
        logger.debug("request start endpoint=%s", normalized_endpoint)

        try:
            response = self._client.get(f"{normalized_endpoint}?{query}")
        except Exception as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise MapsTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received endpoint=%s http_status=%s",
            normalized_endpoint,
            http_status,
        )
        if not isinstance(http_status, int) or not 200 <= http_status < 300:
            logger.error(
                "request failed endpoint=%s http_status=%s",
                normalized_endpoint,
                http_status,
            )
            raise MapsTransportError(
                f"unexpected HTTP status {http_status}",
                http_status=http_status if isinstance(http_status, int) else None,
                cause="http_status",
            )

        try:
            payload = parse_json_payload(response)
        except MapsProtocolError:
            logger.error(
                "response parse error endpoint=%s http_status=%s",
                normalized_endpoint,
                http_status,
            )
            raise
        logger.info("request success endpoint=%s", normalized_endpoint)
        return payload


__all__ = [
    "TransportClient",
    "TransportResponse",
    "SyncTransport",
    "build_default_headers",
    "build_default_timeout",
]
