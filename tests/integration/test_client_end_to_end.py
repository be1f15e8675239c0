from __future__ import annotations

import logging

import pytest

from maps_api_client import MapsClient, MapsServerError, RequestState
from maps_api_client.core.transport import SyncTransport
from maps_api_client.directions.types import DirectionsStatus
from tests.shared.payloads import make_directions_payload, make_error_payload
from tests.shared.transport import Response, SyncSequencedClient, build_config


def _client(steps) -> tuple[MapsClient, SyncSequencedClient]:
    config = build_config()
    http = SyncSequencedClient(steps)
    transport = SyncTransport(config, client=http, sleeper=lambda _: None, clock=lambda: 0.0)
    return MapsClient(config=config, transport=transport), http


def test_directions_flow_through_real_transport():
    client, http = _client([Response(200, make_directions_payload())])
    with client:
        request = client.directions("Toronto", "Montreal").with_departure_time("now")
        response = request.run()
    assert request.state is RequestState.EXECUTED
    assert response.routes[0].summary == "ON-401 E"
    assert http.urls == [
        "directions/json?origin=Toronto&destination=Montreal&key=test%2Dkey&departure_time=now"
    ]


def test_reexecute_requires_build_and_sends_same_query():
    client, http = _client(
        [Response(200, make_directions_payload()), Response(200, make_directions_payload())]
    )
    request = client.directions("Toronto", "Montreal").validate()
    request.build()
    request.execute()
    request.build()
    request.execute()
    assert http.urls[0] == http.urls[1]


def test_service_error_surfaces_with_warning_log(caplog):
    client, _ = _client([Response(200, make_error_payload("NOT_FOUND"))])
    with caplog.at_level(logging.WARNING, logger="maps_api_client"):
        with pytest.raises(MapsServerError) as exc_info:
            client.directions("Nowhere", "Montreal").run()
    assert exc_info.value.status is DirectionsStatus.NOT_FOUND
    assert "service returned non-OK status endpoint=directions status=NOT_FOUND" in caplog.text
