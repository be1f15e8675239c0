from __future__ import annotations

import pytest

from maps_api_client.core.errors import (
    ArrivalAndDepartureTimeError,
    InvalidCodeError,
    MapsApiError,
    MapsDecodeError,
    MapsProtocolError,
    MapsSequencingError,
    MapsServerError,
    MapsValidationError,
    QueryNotBuiltError,
    RequestNotValidatedError,
    TooManyWaypointsError,
    WaypointsWithTransitError,
    generic_status_message,
)
from maps_api_client.directions.types import DirectionsStatus


@pytest.mark.parametrize(
    ("error", "parent"),
    [
        (WaypointsWithTransitError(2), MapsValidationError),
        (RequestNotValidatedError(), MapsSequencingError),
        (QueryNotBuiltError(), MapsSequencingError),
        (InvalidCodeError("TravelMode", "flying"), MapsDecodeError),
        (MapsProtocolError("bad"), MapsDecodeError),
        (MapsServerError(DirectionsStatus.NOT_FOUND), MapsApiError),
    ],
)
def test_error_hierarchy(error, parent):
    assert isinstance(error, parent)
    assert isinstance(error, MapsApiError)


def test_too_many_waypoints_reports_excess():
    err = TooManyWaypointsError(27, 2)
    assert err.excess == 2
    assert "27 waypoints are set" in str(err)
    assert "2 fewer waypoint(s)" in str(err)


def test_arrival_and_departure_message_names_both_times():
    err = ArrivalAndDepartureTimeError("2023-11-14 10:13:20 PM", "now")
    assert "`2023-11-14 10:13:20 PM`" in str(err)
    assert "`now`" in str(err)


def test_invalid_code_lists_valid_codes():
    err = InvalidCodeError("UnitSystem", "furlongs", valid=("metric", "imperial"))
    assert err.value == "furlongs"
    assert str(err) == "`furlongs` is not a valid UnitSystem code; valid codes are `metric`, `imperial`"


def test_server_error_uses_generic_text_without_service_message():
    err = MapsServerError(DirectionsStatus.OVER_QUERY_LIMIT, endpoint="Directions API")
    assert str(err) == "Directions API service: " + generic_status_message("OVER_QUERY_LIMIT")
    assert err.error_message is None


def test_generic_message_falls_back_for_unknown_status():
    assert generic_status_message("NEW_STATUS") == "Service returned status NEW_STATUS."
