"""Query parameter builders for distance matrix requests."""

from __future__ import annotations

from typing import Protocol

from ..core.codes import join_wire
from ..core.query import QueryPairs, join_values, to_epoch_seconds
from ..directions.types import Avoid, TrafficModel, UnitSystem, Waypoint
from ..directions.validators import TransitFields


class DistanceMatrixParams(TransitFields, Protocol):
    @property
    def origins(self) -> tuple[Waypoint, ...]: ...
    @property
    def destinations(self) -> tuple[Waypoint, ...]: ...
    @property
    def restrictions(self) -> tuple[Avoid, ...]: ...
    @property
    def language(self) -> str | None: ...
    @property
    def region(self) -> str | None: ...
    @property
    def traffic_model(self) -> TrafficModel | None: ...
    @property
    def unit_system(self) -> UnitSystem | None: ...


def build_distance_matrix_required_params(request: DistanceMatrixParams) -> QueryPairs:
    return [
        ("origins", join_values(origin.wire for origin in request.origins)),
        ("destinations", join_values(destination.wire for destination in request.destinations)),
    ]


def build_distance_matrix_optional_params(request: DistanceMatrixParams) -> QueryPairs:
    pairs: QueryPairs = []
    if request.arrival_time is not None:
        pairs.append(("arrival_time", str(to_epoch_seconds(request.arrival_time))))
    if request.restrictions:
        pairs.append(("avoid", join_wire(request.restrictions)))
    if request.departure_time is not None:
        pairs.append(("departure_time", request.departure_time.wire))
    if request.language:
        pairs.append(("language", request.language))
    if request.travel_mode is not None:
        pairs.append(("mode", request.travel_mode.wire))
    if request.region:
        pairs.append(("region", request.region))
    if request.traffic_model is not None:
        pairs.append(("traffic_model", request.traffic_model.wire))
    if request.transit_modes:
        pairs.append(("transit_mode", join_wire(request.transit_modes)))
    if request.transit_route_preference is not None:
        pairs.append(("transit_routing_preference", request.transit_route_preference.wire))
    if request.unit_system is not None:
        pairs.append(("units", request.unit_system.wire))
    return pairs


__all__ = [
    "DistanceMatrixParams",
    "build_distance_matrix_required_params",
    "build_distance_matrix_optional_params",
]
