"""Directions response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.latlng import Bounds, LatLng
from ..core.models import ApiEnvelope, TextValue
from .types import DirectionsStatus, DrivingManeuver, GeocoderStatus, TravelMode, VehicleType


@dataclass(slots=True, frozen=True)
class TransitFare:
    currency: str
    value: int | float
    text: str


@dataclass(slots=True, frozen=True)
class TransitTime:
    text: str
    time_zone: str
    value: int


@dataclass(slots=True, frozen=True)
class TransitStop:
    location: LatLng
    name: str


@dataclass(slots=True, frozen=True)
class TransitAgency:
    name: str | None
    phone: str | None
    url: str | None


@dataclass(slots=True, frozen=True)
class TransitVehicle:
    name: str | None
    vehicle_type: VehicleType
    icon: str | None
    local_icon: str | None


@dataclass(slots=True, frozen=True)
class TransitLine:
    name: str | None
    short_name: str | None
    color: str | None
    agencies: tuple[TransitAgency, ...]
    url: str | None
    icon: str | None
    text_color: str | None
    vehicle: TransitVehicle | None


@dataclass(slots=True, frozen=True)
class TransitDetails:
    arrival_stop: TransitStop
    arrival_time: TransitTime
    departure_stop: TransitStop
    departure_time: TransitTime
    headsign: str | None
    headway: int | None
    line: TransitLine
    num_stops: int | None
    trip_short_name: str | None


@dataclass(slots=True, frozen=True)
class Step:
    distance: TextValue | None
    duration: TextValue | None
    start_location: LatLng
    end_location: LatLng
    html_instructions: str | None
    maneuver: DrivingManeuver | None
    polyline: str | None
    steps: tuple["Step", ...]
    transit_details: TransitDetails | None
    travel_mode: TravelMode


@dataclass(slots=True, frozen=True)
class Leg:
    arrival_time: TransitTime | None
    departure_time: TransitTime | None
    distance: TextValue | None
    duration: TextValue | None
    duration_in_traffic: TextValue | None
    start_address: str | None
    start_location: LatLng
    end_address: str | None
    end_location: LatLng
    steps: tuple[Step, ...]


@dataclass(slots=True, frozen=True)
class Route:
    bounds: Bounds | None
    copyrights: str | None
    fare: TransitFare | None
    legs: tuple[Leg, ...]
    overview_polyline: str | None
    summary: str | None
    warnings: tuple[str, ...]
    waypoint_order: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class GeocodedWaypoint:
    geocoder_status: GeocoderStatus
    partial_match: bool | None
    place_id: str | None
    types: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class DirectionsResponse:
    envelope: ApiEnvelope
    routes: tuple[Route, ...]
    geocoded_waypoints: tuple[GeocodedWaypoint, ...]
    available_travel_modes: tuple[TravelMode, ...]

    @property
    def status(self) -> DirectionsStatus:
        return self.envelope.status  # type: ignore[return-value]

    @property
    def error_message(self) -> str | None:
        return self.envelope.error_message


__all__ = [
    "TransitFare",
    "TransitTime",
    "TransitStop",
    "TransitAgency",
    "TransitVehicle",
    "TransitLine",
    "TransitDetails",
    "Step",
    "Leg",
    "Route",
    "GeocodedWaypoint",
    "DirectionsResponse",
]
