"""Query parameter builders for routing endpoints."""

from __future__ import annotations

from typing import Protocol

from ..core.codes import join_wire
from ..core.query import QueryPairs, join_values, to_epoch_seconds
from .types import Location, TrafficModel, UnitSystem, Waypoint
from .validators import WaypointFields


class DirectionsParams(WaypointFields, Protocol):
    @property
    def origin(self) -> Location: ...
    @property
    def destination(self) -> Location: ...
    @property
    def waypoint_optimization(self) -> bool: ...
    @property
    def language(self) -> str | None: ...
    @property
    def region(self) -> str | None: ...
    @property
    def unit_system(self) -> UnitSystem | None: ...
    @property
    def traffic_model(self) -> TrafficModel | None: ...


def build_waypoints_param(waypoints: tuple[Waypoint, ...], *, optimize: bool) -> str:
    entries = [waypoint.wire for waypoint in waypoints]
    if optimize:
        entries.insert(0, "optimize:true")
    return join_values(entries)


def build_directions_required_params(request: DirectionsParams) -> QueryPairs:
    return [
        ("origin", request.origin.wire),
        ("destination", request.destination.wire),
    ]


def build_directions_optional_params(request: DirectionsParams) -> QueryPairs:
    pairs: QueryPairs = []
    if request.travel_mode is not None:
        pairs.append(("mode", request.travel_mode.wire))
    if request.waypoints:
        pairs.append(
            (
                "waypoints",
                build_waypoints_param(request.waypoints, optimize=request.waypoint_optimization),
            )
        )
    if request.alternatives is not None:
        pairs.append(("alternatives", "true" if request.alternatives else "false"))
    if request.restrictions:
        pairs.append(("avoid", join_wire(request.restrictions)))
    if request.language:
        pairs.append(("language", request.language))
    if request.unit_system is not None:
        pairs.append(("units", request.unit_system.wire))
    if request.region:
        pairs.append(("region", request.region))
    if request.arrival_time is not None:
        pairs.append(("arrival_time", str(to_epoch_seconds(request.arrival_time))))
    if request.departure_time is not None:
        pairs.append(("departure_time", request.departure_time.wire))
    if request.traffic_model is not None:
        pairs.append(("traffic_model", request.traffic_model.wire))
    if request.transit_modes:
        pairs.append(("transit_mode", join_wire(request.transit_modes)))
    if request.transit_route_preference is not None:
        pairs.append(("transit_routing_preference", request.transit_route_preference.wire))
    return pairs


__all__ = [
    "DirectionsParams",
    "build_waypoints_param",
    "build_directions_required_params",
    "build_directions_optional_params",
]
