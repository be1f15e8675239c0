from __future__ import annotations

from datetime import datetime, timezone

import pytest

from maps_api_client.core.errors import InvalidLatLngError, MapsServerError
from maps_api_client.time_zone.request import TIME_ZONE_ENDPOINT, TimeZoneRequest
from maps_api_client.time_zone.types import TimeZoneStatus
from tests.shared.client_fakes import RecordingTransport
from tests.shared.payloads import make_error_payload, make_ok_payload


def _payload() -> dict[str, object]:
    return make_ok_payload(
        dstOffset=3600,
        rawOffset=-18000,
        timeZoneId="America/Toronto",
        timeZoneName="Eastern Daylight Time",
    )


def test_query_has_location_timestamp_then_key(transport, config):
    request = TimeZoneRequest(
        transport,
        config,
        (43.6532, -79.3832),
        datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc),
    ).with_language("fr")
    request.validate()
    assert request.build() == (
        "location=43%2E6532%2C%2D79%2E3832&timestamp=1700000000&key=test%2Dkey&language=fr"
    )


def test_naive_timestamp_is_utc(transport, config):
    request = TimeZoneRequest(transport, config, "0,0", datetime(1970, 1, 2))
    request.validate()
    assert "timestamp=86400" in request.build()


def test_location_out_of_range(transport, config):
    with pytest.raises(InvalidLatLngError):
        TimeZoneRequest(transport, config, (91, 0), 0)


def test_decode_offsets():
    response = TIME_ZONE_ENDPOINT.decode(_payload())
    assert response.status is TimeZoneStatus.OK
    assert response.time_zone_id == "America/Toronto"
    assert response.total_offset == -14400


def test_zero_results_is_a_server_error():
    with pytest.raises(MapsServerError) as exc_info:
        TIME_ZONE_ENDPOINT.decode(make_error_payload("ZERO_RESULTS"))
    assert exc_info.value.status is TimeZoneStatus.ZERO_RESULTS


def test_run_sends_timezone_path(config):
    transport = RecordingTransport(_payload())
    TimeZoneRequest(transport, config, "43.6532,-79.3832", 1700000000).run()
    assert transport.calls == [
        ("timezone/json", "location=43%2E6532%2C%2D79%2E3832&timestamp=1700000000&key=test%2Dkey")
    ]
