"""Cross-field rules for routing requests.

Each rule reads the request and raises the matching validation error. Rules
run in declaration order and the first violation wins.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..core.codes import join_wire
from ..core.errors import (
    AlternativesWithWaypointsError,
    ArrivalAndDepartureTimeError,
    ArrivalTimeIsForTransitOnlyError,
    RestrictionsWithWaypointsError,
    TooManyWaypointsError,
    TransitModeIsForTransitOnlyError,
    TransitRoutePreferenceIsForTransitOnlyError,
    WaypointsWithTransitError,
)
from ..core.query import format_timestamp
from .types import Avoid, DepartureTime, TransitMode, TransitRoutePreference, TravelMode, Waypoint

MAX_WAYPOINTS = 25


class TransitFields(Protocol):
    @property
    def travel_mode(self) -> TravelMode | None: ...
    @property
    def arrival_time(self) -> datetime | None: ...
    @property
    def departure_time(self) -> DepartureTime | None: ...
    @property
    def transit_modes(self) -> tuple[TransitMode, ...]: ...
    @property
    def transit_route_preference(self) -> TransitRoutePreference | None: ...


class WaypointFields(TransitFields, Protocol):
    @property
    def waypoints(self) -> tuple[Waypoint, ...]: ...
    @property
    def alternatives(self) -> bool | None: ...
    @property
    def restrictions(self) -> tuple[Avoid, ...]: ...


def check_transit_without_waypoints(request: WaypointFields) -> None:
    if request.travel_mode is TravelMode.TRANSIT and request.waypoints:
        raise WaypointsWithTransitError(len(request.waypoints))


def check_transit_only_fields(request: TransitFields) -> None:
    mode = request.travel_mode
    if mode is None or mode is TravelMode.TRANSIT:
        return
    if request.arrival_time is not None:
        raise ArrivalTimeIsForTransitOnlyError(mode.wire, format_timestamp(request.arrival_time))
    if request.transit_modes:
        raise TransitModeIsForTransitOnlyError(mode.wire, join_wire(request.transit_modes))
    if request.transit_route_preference is not None:
        raise TransitRoutePreferenceIsForTransitOnlyError(
            mode.wire,
            request.transit_route_preference.wire,
        )


def check_waypoint_compatibility(request: WaypointFields) -> None:
    count = len(request.waypoints)
    if count == 0:
        return
    if request.alternatives is False:
        raise AlternativesWithWaypointsError(count)
    if request.restrictions:
        raise RestrictionsWithWaypointsError(count, join_wire(request.restrictions))
    if count > MAX_WAYPOINTS:
        raise TooManyWaypointsError(count, count - MAX_WAYPOINTS)


def check_arrival_excludes_departure(request: TransitFields) -> None:
    if request.arrival_time is None or request.departure_time is None:
        return
    raise ArrivalAndDepartureTimeError(
        format_timestamp(request.arrival_time),
        request.departure_time.display(),
    )


DIRECTIONS_RULES = (
    check_transit_without_waypoints,
    check_transit_only_fields,
    check_waypoint_compatibility,
    check_arrival_excludes_departure,
)


__all__ = [
    "MAX_WAYPOINTS",
    "TransitFields",
    "WaypointFields",
    "check_transit_without_waypoints",
    "check_transit_only_fields",
    "check_waypoint_compatibility",
    "check_arrival_excludes_departure",
    "DIRECTIONS_RULES",
]
