from __future__ import annotations

import pytest

from maps_api_client.client import MapsClient
from maps_api_client.config import MapsClientConfig
from maps_api_client.core.errors import MapsClientClosedError, MapsValidationError
from maps_api_client.directions.models import DirectionsResponse
from tests.shared.client_fakes import RecordingTransport
from tests.shared.payloads import make_directions_payload, make_ok_payload


def test_client_context_manager_closes_transport():
    transport = RecordingTransport()
    with MapsClient("k", transport=transport) as client:
        assert client.config.api_key == "k"
    assert transport.closed is True


def test_client_requires_an_api_key():
    with pytest.raises(MapsValidationError):
        MapsClient()
    with pytest.raises(MapsValidationError):
        MapsClient("  ")


def test_client_rejects_conflicting_keys():
    with pytest.raises(MapsValidationError):
        MapsClient("a", config=MapsClientConfig(api_key="b"))


def test_client_accepts_matching_key_and_config():
    cfg = MapsClientConfig(api_key="a")
    client = MapsClient("a", config=cfg, transport=RecordingTransport())
    assert client.config is cfg


def test_client_factories_are_blocked_after_close():
    client = MapsClient("k", transport=RecordingTransport())
    client.close()
    with pytest.raises(MapsClientClosedError):
        client.directions("A", "B")
    with pytest.raises(MapsClientClosedError):
        client.geocoding()


def test_request_built_before_close_cannot_execute_after_close():
    transport = RecordingTransport(make_directions_payload())
    client = MapsClient("k", transport=transport)
    request = client.directions("A", "B").validate()
    request.build()
    client.close()
    with pytest.raises(MapsClientClosedError):
        request.execute()
    assert transport.calls == []


def test_close_is_idempotent():
    transport = RecordingTransport()
    client = MapsClient("k", transport=transport)
    client.close()
    client.close()
    assert transport.closed is True


def test_client_routes_each_factory_to_its_endpoint():
    transport = RecordingTransport(make_ok_payload(results=[]))
    with MapsClient("k", transport=transport) as client:
        client.geocoding().with_address("Toronto").run()
        client.reverse_geocoding((43.6532, -79.3832)).run()
        client.elevation().for_positional_request("43.6532,-79.3832").run()
    assert [endpoint for endpoint, _ in transport.calls] == [
        "geocode/json",
        "geocode/json",
        "elevation/json",
    ]


def test_client_directions_run_returns_typed_response():
    transport = RecordingTransport(make_directions_payload())
    with MapsClient("k", transport=transport) as client:
        response = client.directions("Toronto", "Montreal").with_travel_mode("driving").run()
    assert isinstance(response, DirectionsResponse)
    assert transport.calls[0] == (
        "directions/json",
        "origin=Toronto&destination=Montreal&key=k&mode=driving",
    )
