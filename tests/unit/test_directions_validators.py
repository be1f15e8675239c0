from __future__ import annotations

from datetime import datetime

import pytest

from maps_api_client.core.errors import (
    AlternativesWithWaypointsError,
    ArrivalAndDepartureTimeError,
    ArrivalTimeIsForTransitOnlyError,
    MapsValidationError,
    RestrictionsWithWaypointsError,
    TooManyWaypointsError,
    TransitModeIsForTransitOnlyError,
    TransitRoutePreferenceIsForTransitOnlyError,
    WaypointsWithTransitError,
)
from maps_api_client.core.request import RequestState
from maps_api_client.directions.request import DirectionsRequest


@pytest.fixture
def request_(transport, config) -> DirectionsRequest:
    return DirectionsRequest(transport, config, "Toronto", "Montreal")


def test_transit_with_waypoints_fails_with_waypoint_count(request_):
    request_.with_travel_mode("transit").with_waypoints(["Kingston", "Ottawa"])
    with pytest.raises(WaypointsWithTransitError) as exc_info:
        request_.validate()
    assert exc_info.value.waypoint_count == 2
    assert request_.state is RequestState.BUILDING


def test_arrival_time_requires_transit(request_):
    request_.with_travel_mode("driving").with_arrival_time(datetime(2026, 3, 4, 15, 6, 7))
    with pytest.raises(ArrivalTimeIsForTransitOnlyError) as exc_info:
        request_.validate()
    assert exc_info.value.travel_mode == "driving"
    assert exc_info.value.arrival_time == "2026-03-04 03:06:07 PM"


def test_transit_modes_require_transit(request_):
    request_.with_travel_mode("walking").with_transit_modes(["bus", "rail"])
    with pytest.raises(TransitModeIsForTransitOnlyError) as exc_info:
        request_.validate()
    assert exc_info.value.travel_mode == "walking"
    assert exc_info.value.transit_modes == "bus|rail"


def test_transit_route_preference_requires_transit(request_):
    request_.with_travel_mode("bicycling").with_transit_route_preference("fewer_transfers")
    with pytest.raises(TransitRoutePreferenceIsForTransitOnlyError) as exc_info:
        request_.validate()
    assert exc_info.value.transit_route_preference == "fewer_transfers"


def test_transit_only_fields_are_allowed_without_travel_mode(request_):
    request_.with_transit_modes(["bus"]).with_transit_route_preference("less_walking")
    request_.validate()
    assert request_.validated is True


def test_transit_only_fields_are_allowed_with_transit(request_):
    request_.with_travel_mode("transit").with_arrival_time(1700000000).with_transit_mode("rail")
    request_.validate()
    assert request_.state is RequestState.VALIDATED


def test_alternatives_false_with_waypoints_fails(request_):
    request_.with_waypoint("Kingston").with_alternatives(False)
    with pytest.raises(AlternativesWithWaypointsError) as exc_info:
        request_.validate()
    assert exc_info.value.waypoint_count == 1


def test_alternatives_true_with_waypoints_is_allowed(request_):
    request_.with_waypoint("Kingston").with_alternatives(True)
    request_.validate()


def test_restrictions_with_waypoints_fail(request_):
    request_.with_waypoint("Kingston").with_restrictions(["tolls", "ferries"])
    with pytest.raises(RestrictionsWithWaypointsError) as exc_info:
        request_.validate()
    assert exc_info.value.waypoint_count == 1
    assert exc_info.value.restrictions == "tolls|ferries"


def test_twenty_six_waypoints_fail_with_excess_one(request_):
    request_.with_waypoints([f"Stop {index}" for index in range(26)])
    with pytest.raises(TooManyWaypointsError) as exc_info:
        request_.validate()
    assert exc_info.value.waypoint_count == 26
    assert exc_info.value.excess == 1


def test_twenty_five_waypoints_are_allowed(request_):
    request_.with_waypoints([f"Stop {index}" for index in range(25)])
    request_.validate()


def test_arrival_and_departure_time_conflict_carries_both_values(request_):
    request_.with_travel_mode("transit").with_arrival_time(
        datetime(2026, 3, 4, 9, 0, 0)
    ).with_departure_time(datetime(2026, 3, 4, 8, 0, 0))
    with pytest.raises(ArrivalAndDepartureTimeError) as exc_info:
        request_.validate()
    assert exc_info.value.arrival_time == "2026-03-04 09:00:00 AM"
    assert exc_info.value.departure_time == "2026-03-04 08:00:00 AM"


def test_arrival_and_departure_now_conflict(request_):
    request_.with_arrival_time(1700000000).with_departure_time("now")
    with pytest.raises(ArrivalAndDepartureTimeError) as exc_info:
        request_.validate()
    assert exc_info.value.departure_time == "now"


def test_first_violated_rule_wins(request_):
    # Violates the transit/waypoint rule and the arrival/departure rule.
    request_.with_travel_mode("transit").with_waypoint("Kingston").with_arrival_time(
        1700000000
    ).with_departure_time("now")
    with pytest.raises(WaypointsWithTransitError):
        request_.validate()


def test_driving_now_without_waypoints_validates_and_encodes_now(request_):
    request_.with_travel_mode("driving").with_departure_time("now")
    request_.validate()
    assert "departure_time=now" in request_.build()


def test_fixing_a_violation_and_revalidating_succeeds(request_):
    request_.with_travel_mode("transit").with_waypoint("Kingston")
    with pytest.raises(MapsValidationError):
        request_.validate()
    request_.with_waypoints([])
    request_.validate()
    assert request_.validated is True
