"""Directions request builder."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from ..core.query import QueryPairs, to_datetime
from ..core.request import BaseRequest, Endpoint, RequestTransport, as_tuple
from .models import DirectionsResponse
from .params import build_directions_optional_params, build_directions_required_params
from .parser import parse_directions_response
from .types import (
    Avoid,
    DepartureTime,
    DirectionsStatus,
    Location,
    TrafficModel,
    TransitMode,
    TransitRoutePreference,
    TravelMode,
    UnitSystem,
    Waypoint,
)
from .validators import DIRECTIONS_RULES

if TYPE_CHECKING:
    from ..config import MapsClientConfig

DIRECTIONS_ENDPOINT: Endpoint[DirectionsResponse] = Endpoint(
    title="Directions API",
    path="directions",
    status_type=DirectionsStatus,
    parse=parse_directions_response,
    rules=DIRECTIONS_RULES,
)


class DirectionsRequest(BaseRequest[DirectionsResponse]):
    """Route between an origin and a destination.

    Setters return the request so calls can be chained::

        response = (
            client.directions("Toronto", "Montreal")
            .with_travel_mode("driving")
            .with_departure_time("now")
            .run()
        )
    """

    endpoint = DIRECTIONS_ENDPOINT

    def __init__(
        self,
        transport: RequestTransport,
        config: "MapsClientConfig",
        origin: Location | str | object,
        destination: Location | str | object,
    ) -> None:
        super().__init__(transport, config)
        self._origin = Location.coerce(origin)
        self._destination = Location.coerce(destination)
        self._travel_mode: TravelMode | None = None
        self._waypoints: tuple[Waypoint, ...] = ()
        self._waypoint_optimization = False
        self._alternatives: bool | None = None
        self._restrictions: tuple[Avoid, ...] = ()
        self._language: str | None = None
        self._unit_system: UnitSystem | None = None
        self._region: str | None = None
        self._arrival_time: datetime | None = None
        self._departure_time: DepartureTime | None = None
        self._traffic_model: TrafficModel | None = None
        self._transit_modes: tuple[TransitMode, ...] = ()
        self._transit_route_preference: TransitRoutePreference | None = None

    @property
    def origin(self) -> Location:
        return self._origin

    @property
    def destination(self) -> Location:
        return self._destination

    @property
    def travel_mode(self) -> TravelMode | None:
        return self._travel_mode

    @property
    def waypoints(self) -> tuple[Waypoint, ...]:
        return self._waypoints

    @property
    def waypoint_optimization(self) -> bool:
        return self._waypoint_optimization

    @property
    def alternatives(self) -> bool | None:
        return self._alternatives

    @property
    def restrictions(self) -> tuple[Avoid, ...]:
        return self._restrictions

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def unit_system(self) -> UnitSystem | None:
        return self._unit_system

    @property
    def region(self) -> str | None:
        return self._region

    @property
    def arrival_time(self) -> datetime | None:
        return self._arrival_time

    @property
    def departure_time(self) -> DepartureTime | None:
        return self._departure_time

    @property
    def traffic_model(self) -> TrafficModel | None:
        return self._traffic_model

    @property
    def transit_modes(self) -> tuple[TransitMode, ...]:
        return self._transit_modes

    @property
    def transit_route_preference(self) -> TransitRoutePreference | None:
        return self._transit_route_preference

    def with_travel_mode(self, travel_mode: TravelMode | str) -> "DirectionsRequest":
        return self._set("_travel_mode", TravelMode.from_wire(travel_mode))

    def with_waypoint(self, waypoint: Waypoint | Location | str | object) -> "DirectionsRequest":
        return self._set("_waypoints", (Waypoint.coerce(waypoint),))

    def with_waypoints(self, waypoints: Iterable[object] | Waypoint) -> "DirectionsRequest":
        return self._set("_waypoints", as_tuple(waypoints, Waypoint.coerce))

    def with_waypoint_optimization(self, optimize: bool) -> "DirectionsRequest":
        return self._set("_waypoint_optimization", bool(optimize))

    def with_alternatives(self, alternatives: bool) -> "DirectionsRequest":
        return self._set("_alternatives", bool(alternatives))

    def with_restriction(self, restriction: Avoid | str) -> "DirectionsRequest":
        return self._set("_restrictions", (Avoid.from_wire(restriction),))

    def with_restrictions(self, restrictions: Iterable[Avoid | str] | Avoid | str) -> "DirectionsRequest":
        return self._set("_restrictions", as_tuple(restrictions, Avoid.from_wire))

    def with_language(self, language: str) -> "DirectionsRequest":
        return self._set("_language", language)

    def with_unit_system(self, unit_system: UnitSystem | str) -> "DirectionsRequest":
        return self._set("_unit_system", UnitSystem.from_wire(unit_system))

    def with_region(self, region: str) -> "DirectionsRequest":
        return self._set("_region", region)

    def with_arrival_time(self, arrival_time: datetime | int) -> "DirectionsRequest":
        return self._set("_arrival_time", to_datetime(arrival_time))

    def with_departure_time(self, departure_time: DepartureTime | datetime | int | str) -> "DirectionsRequest":
        return self._set("_departure_time", DepartureTime.coerce(departure_time))

    def with_traffic_model(self, traffic_model: TrafficModel | str) -> "DirectionsRequest":
        return self._set("_traffic_model", TrafficModel.from_wire(traffic_model))

    def with_transit_mode(self, transit_mode: TransitMode | str) -> "DirectionsRequest":
        return self._set("_transit_modes", (TransitMode.from_wire(transit_mode),))

    def with_transit_modes(
        self,
        transit_modes: Iterable[TransitMode | str] | TransitMode | str,
    ) -> "DirectionsRequest":
        return self._set("_transit_modes", as_tuple(transit_modes, TransitMode.from_wire))

    def with_transit_route_preference(
        self,
        preference: TransitRoutePreference | str,
    ) -> "DirectionsRequest":
        return self._set("_transit_route_preference", TransitRoutePreference.from_wire(preference))

    def _required_pairs(self) -> QueryPairs:
        return build_directions_required_params(self)

    def _optional_pairs(self) -> QueryPairs:
        return build_directions_optional_params(self)


__all__ = [
    "DIRECTIONS_ENDPOINT",
    "DirectionsRequest",
]
