from __future__ import annotations

import logging

import httpx
import pytest

from maps_api_client.core.errors import MapsProtocolError, MapsTransportError
from maps_api_client.core.transport import SyncTransport
from tests.shared.transport import Response, SyncSequencedClient, build_config


def _transport(client: SyncSequencedClient, **kwargs) -> SyncTransport:
    kwargs.setdefault("sleeper", lambda _: None)
    kwargs.setdefault("clock", lambda: 0.0)
    return SyncTransport(build_config(), client=client, **kwargs)


def test_http_200_returns_payload_and_sends_query_verbatim():
    client = SyncSequencedClient([Response(200, {"status": "OK"})])
    transport = _transport(client)
    payload = transport.request("/geocode/json", query="address=1%20Yonge%20St&key=test%2Dkey")
    assert payload == {"status": "OK"}
    assert client.urls == ["geocode/json?address=1%20Yonge%20St&key=test%2Dkey"]


def test_service_status_is_not_interpreted_by_transport():
    client = SyncSequencedClient([Response(200, {"status": "REQUEST_DENIED"})])
    assert _transport(client).request("timezone/json", query="key=k") == {"status": "REQUEST_DENIED"}


@pytest.mark.parametrize("http_status", [400, 403, 500, 503])
def test_non_2xx_is_transport_error(http_status):
    client = SyncSequencedClient([Response(http_status, {"status": "OK"})])
    with pytest.raises(MapsTransportError) as exc_info:
        _transport(client).request("directions/json", query="key=k")
    assert exc_info.value.http_status == http_status
    assert exc_info.value.cause == "http_status"


def test_network_error_is_transport_error_without_retry():
    client = SyncSequencedClient(
        [httpx.ConnectError("boom"), Response(200, {"status": "OK"})]
    )
    with pytest.raises(MapsTransportError) as exc_info:
        _transport(client).request("elevation/json", query="key=k")
    assert exc_info.value.cause == "network"
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert client.calls == 1


def test_non_json_body_is_protocol_error():
    client = SyncSequencedClient([Response(200, ValueError("not json"))])
    with pytest.raises(MapsProtocolError):
        _transport(client).request("geocode/json", query="key=k")


def test_closed_transport_refuses_requests_and_closes_client_only_when_owned():
    client = SyncSequencedClient([])
    transport = _transport(client)
    transport.close()
    assert transport.closed is True
    assert client.closed is False
    with pytest.raises(MapsTransportError):
        transport.request("geocode/json", query="key=k")


def test_min_interval_throttles_consecutive_requests():
    now = [10.0]
    sleeps: list[float] = []

    def sleeper(seconds: float) -> None:
        sleeps.append(seconds)
        now[0] += seconds

    client = SyncSequencedClient([Response(200, {"status": "OK"}), Response(200, {"status": "OK"})])
    transport = SyncTransport(
        build_config(min_wait_interval_seconds=0.5),
        client=client,
        sleeper=sleeper,
        clock=lambda: now[0],
    )
    transport.request("geocode/json", query="key=k")
    transport.request("geocode/json", query="key=k")
    assert sleeps == [0.5]


def test_logs_never_contain_the_query(caplog):
    client = SyncSequencedClient([Response(200, {"status": "OK"}), Response(500, {})])
    transport = _transport(client)
    with caplog.at_level(logging.DEBUG, logger="maps_api_client"):
        transport.request("geocode/json", query="key=super%2Dsecret")
        with pytest.raises(MapsTransportError):
            transport.request("geocode/json", query="key=super%2Dsecret")
    assert "request success endpoint=geocode/json" in caplog.text
    assert "super" not in caplog.text
