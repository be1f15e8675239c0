from __future__ import annotations

import pytest

from maps_api_client.core.codes import WireCode, join_wire
from maps_api_client.core.errors import InvalidCodeError, MapsDecodeError
from maps_api_client.directions.types import (
    Avoid,
    DirectionsStatus,
    DrivingManeuver,
    GeocoderStatus,
    TrafficModel,
    TransitMode,
    TransitRoutePreference,
    TravelMode,
    UnitSystem,
    VehicleType,
)
from maps_api_client.distance_matrix.types import DistanceMatrixStatus, ElementStatus
from maps_api_client.elevation.types import ElevationStatus
from maps_api_client.geocoding.types import ComponentKind, GeocodingStatus, LocationType
from maps_api_client.time_zone.types import TimeZoneStatus

ALL_CODE_SETS: tuple[type[WireCode], ...] = (
    Avoid,
    DirectionsStatus,
    DrivingManeuver,
    GeocoderStatus,
    TrafficModel,
    TransitMode,
    TransitRoutePreference,
    TravelMode,
    UnitSystem,
    VehicleType,
    DistanceMatrixStatus,
    ElementStatus,
    ElevationStatus,
    ComponentKind,
    GeocodingStatus,
    LocationType,
    TimeZoneStatus,
)


@pytest.mark.parametrize("code_set", ALL_CODE_SETS, ids=lambda cls: cls.__name__)
def test_every_member_round_trips_through_its_wire_string(code_set):
    for member in code_set:
        assert code_set.from_wire(member.wire) is member


@pytest.mark.parametrize("code_set", ALL_CODE_SETS, ids=lambda cls: cls.__name__)
def test_unknown_wire_string_is_rejected(code_set):
    with pytest.raises(InvalidCodeError) as exc_info:
        code_set.from_wire("NOT_A_REAL_CODE")
    assert exc_info.value.kind == code_set.__name__
    assert exc_info.value.value == "NOT_A_REAL_CODE"


def test_decoding_is_case_sensitive():
    with pytest.raises(InvalidCodeError):
        TravelMode.from_wire("DRIVING")
    with pytest.raises(InvalidCodeError):
        DirectionsStatus.from_wire("ok")


def test_non_string_input_is_rejected_without_default():
    with pytest.raises(InvalidCodeError):
        UnitSystem.from_wire(None)
    with pytest.raises(InvalidCodeError):
        UnitSystem.from_wire(1)


def test_invalid_code_error_is_a_decode_error_listing_valid_codes():
    with pytest.raises(MapsDecodeError, match="`metric`, `imperial`"):
        UnitSystem.from_wire("nautical")


def test_from_wire_passes_members_through():
    assert Avoid.from_wire(Avoid.TOLLS) is Avoid.TOLLS


def test_travel_mode_response_codes_are_uppercase_and_exhaustive():
    for mode in TravelMode:
        assert mode.response_code == mode.wire.upper()
        assert TravelMode.from_response_code(mode.response_code) is mode


def test_travel_mode_response_code_rejects_request_wire():
    with pytest.raises(InvalidCodeError):
        TravelMode.from_response_code("driving")


def test_join_wire_uses_pipe():
    assert join_wire((Avoid.TOLLS, Avoid.FERRIES)) == "tolls|ferries"


def test_str_is_wire_string():
    assert str(TrafficModel.BEST_GUESS) == "best_guess"
    assert str(DrivingManeuver.TURN_SLIGHT_LEFT) == "turn-slight-left"
