"""Distance Matrix request builder."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING

from ..core.errors import MapsValidationError
from ..core.query import QueryPairs, to_datetime
from ..core.request import BaseRequest, Endpoint, RequestTransport, as_tuple
from ..directions.types import (
    Avoid,
    DepartureTime,
    TrafficModel,
    TransitMode,
    TransitRoutePreference,
    TravelMode,
    UnitSystem,
    Waypoint,
)
from .models import DistanceMatrixResponse
from .params import build_distance_matrix_optional_params, build_distance_matrix_required_params
from .parser import parse_distance_matrix_response
from .types import DistanceMatrixStatus
from .validators import DISTANCE_MATRIX_RULES

if TYPE_CHECKING:
    from ..config import MapsClientConfig

DISTANCE_MATRIX_ENDPOINT: Endpoint[DistanceMatrixResponse] = Endpoint(
    title="Distance Matrix API",
    path="distancematrix",
    status_type=DistanceMatrixStatus,
    parse=parse_distance_matrix_response,
    rules=DISTANCE_MATRIX_RULES,
)


def _places(values: object, *, name: str) -> tuple[Waypoint, ...]:
    places = as_tuple(values, Waypoint.coerce)
    if not places:
        raise MapsValidationError(f"{name} must not be empty")
    return places


class DistanceMatrixRequest(BaseRequest[DistanceMatrixResponse]):
    """Travel distance and time for every origin/destination pair."""

    endpoint = DISTANCE_MATRIX_ENDPOINT

    def __init__(
        self,
        transport: RequestTransport,
        config: "MapsClientConfig",
        origins: Iterable[object] | object,
        destinations: Iterable[object] | object,
    ) -> None:
        super().__init__(transport, config)
        self._origins = _places(origins, name="origins")
        self._destinations = _places(destinations, name="destinations")
        self._arrival_time: datetime | None = None
        self._departure_time: DepartureTime | None = None
        self._language: str | None = None
        self._region: str | None = None
        self._restrictions: tuple[Avoid, ...] = ()
        self._traffic_model: TrafficModel | None = None
        self._transit_modes: tuple[TransitMode, ...] = ()
        self._transit_route_preference: TransitRoutePreference | None = None
        self._travel_mode: TravelMode | None = None
        self._unit_system: UnitSystem | None = None

    @property
    def origins(self) -> tuple[Waypoint, ...]:
        return self._origins

    @property
    def destinations(self) -> tuple[Waypoint, ...]:
        return self._destinations

    @property
    def arrival_time(self) -> datetime | None:
        return self._arrival_time

    @property
    def departure_time(self) -> DepartureTime | None:
        return self._departure_time

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def region(self) -> str | None:
        return self._region

    @property
    def restrictions(self) -> tuple[Avoid, ...]:
        return self._restrictions

    @property
    def traffic_model(self) -> TrafficModel | None:
        return self._traffic_model

    @property
    def transit_modes(self) -> tuple[TransitMode, ...]:
        return self._transit_modes

    @property
    def transit_route_preference(self) -> TransitRoutePreference | None:
        return self._transit_route_preference

    @property
    def travel_mode(self) -> TravelMode | None:
        return self._travel_mode

    @property
    def unit_system(self) -> UnitSystem | None:
        return self._unit_system

    def with_arrival_time(self, arrival_time: datetime | int) -> "DistanceMatrixRequest":
        return self._set("_arrival_time", to_datetime(arrival_time))

    def with_departure_time(
        self,
        departure_time: DepartureTime | datetime | int | str,
    ) -> "DistanceMatrixRequest":
        return self._set("_departure_time", DepartureTime.coerce(departure_time))

    def with_language(self, language: str) -> "DistanceMatrixRequest":
        return self._set("_language", language)

    def with_region(self, region: str) -> "DistanceMatrixRequest":
        return self._set("_region", region)

    def with_restriction(self, restriction: Avoid | str) -> "DistanceMatrixRequest":
        return self._set("_restrictions", (Avoid.from_wire(restriction),))

    def with_restrictions(
        self,
        restrictions: Iterable[Avoid | str] | Avoid | str,
    ) -> "DistanceMatrixRequest":
        return self._set("_restrictions", as_tuple(restrictions, Avoid.from_wire))

    def with_traffic_model(self, traffic_model: TrafficModel | str) -> "DistanceMatrixRequest":
        return self._set("_traffic_model", TrafficModel.from_wire(traffic_model))

    def with_transit_mode(self, transit_mode: TransitMode | str) -> "DistanceMatrixRequest":
        return self._set("_transit_modes", (TransitMode.from_wire(transit_mode),))

    def with_transit_modes(
        self,
        transit_modes: Iterable[TransitMode | str] | TransitMode | str,
    ) -> "DistanceMatrixRequest":
        return self._set("_transit_modes", as_tuple(transit_modes, TransitMode.from_wire))

    def with_transit_route_preference(
        self,
        preference: TransitRoutePreference | str,
    ) -> "DistanceMatrixRequest":
        return self._set("_transit_route_preference", TransitRoutePreference.from_wire(preference))

    def with_travel_mode(self, travel_mode: TravelMode | str) -> "DistanceMatrixRequest":
        return self._set("_travel_mode", TravelMode.from_wire(travel_mode))

    def with_unit_system(self, unit_system: UnitSystem | str) -> "DistanceMatrixRequest":
        return self._set("_unit_system", UnitSystem.from_wire(unit_system))

    def _required_pairs(self) -> QueryPairs:
        return build_distance_matrix_required_params(self)

    def _optional_pairs(self) -> QueryPairs:
        return build_distance_matrix_optional_params(self)


__all__ = [
    "DISTANCE_MATRIX_ENDPOINT",
    "DistanceMatrixRequest",
]
