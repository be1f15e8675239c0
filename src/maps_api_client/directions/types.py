"""Parameter and code types shared by the routing endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import ClassVar

from ..core.codes import WireCode
from ..core.errors import InvalidCodeError, MapsValidationError
from ..core.latlng import LatLng
from ..core.query import format_timestamp, to_datetime, to_epoch_seconds


class TravelMode(WireCode):
    """Travel mode; requests use lowercase, responses uppercase."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"

    @property
    def response_code(self) -> str:
        return _TRAVEL_MODE_RESPONSE_CODES[self]

    @classmethod
    def from_response_code(cls, value: object) -> "TravelMode":
        for mode, code in _TRAVEL_MODE_RESPONSE_CODES.items():
            if code == value:
                return mode
        raise InvalidCodeError(
            cls.kind(),
            value,
            valid=tuple(_TRAVEL_MODE_RESPONSE_CODES.values()),
        )


_TRAVEL_MODE_RESPONSE_CODES: Mapping[TravelMode, str] = MappingProxyType(
    {
        TravelMode.DRIVING: "DRIVING",
        TravelMode.WALKING: "WALKING",
        TravelMode.BICYCLING: "BICYCLING",
        TravelMode.TRANSIT: "TRANSIT",
    }
)


class Avoid(WireCode):
    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"
    INDOOR = "indoor"


class TrafficModel(WireCode):
    BEST_GUESS = "best_guess"
    PESSIMISTIC = "pessimistic"
    OPTIMISTIC = "optimistic"


class TransitMode(WireCode):
    BUS = "bus"
    RAIL = "rail"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"


class TransitRoutePreference(WireCode):
    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class UnitSystem(WireCode):
    METRIC = "metric"
    IMPERIAL = "imperial"


class DirectionsStatus(WireCode):
    INVALID_REQUEST = "INVALID_REQUEST"
    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    MAX_WAYPOINTS_EXCEEDED = "MAX_WAYPOINTS_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    OK = "OK"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    ZERO_RESULTS = "ZERO_RESULTS"


class GeocoderStatus(WireCode):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"


class DrivingManeuver(WireCode):
    FERRY = "ferry"
    FERRY_TRAIN = "ferry-train"
    FORK_LEFT = "fork-left"
    FORK_RIGHT = "fork-right"
    KEEP_LEFT = "keep-left"
    KEEP_RIGHT = "keep-right"
    MERGE = "merge"
    RAMP = "ramp"
    RAMP_LEFT = "ramp-left"
    RAMP_RIGHT = "ramp-right"
    ROUNDABOUT_LEFT = "roundabout-left"
    ROUNDABOUT_RIGHT = "roundabout-right"
    STRAIGHT = "straight"
    TURN_LEFT = "turn-left"
    TURN_RIGHT = "turn-right"
    TURN_SHARP_LEFT = "turn-sharp-left"
    TURN_SHARP_RIGHT = "turn-sharp-right"
    TURN_SLIGHT_LEFT = "turn-slight-left"
    TURN_SLIGHT_RIGHT = "turn-slight-right"
    UTURN_LEFT = "uturn-left"
    UTURN_RIGHT = "uturn-right"


class VehicleType(WireCode):
    BUS = "BUS"
    CABLE_CAR = "CABLE_CAR"
    COMMUTER_TRAIN = "COMMUTER_TRAIN"
    FERRY = "FERRY"
    FUNICULAR = "FUNICULAR"
    GONDOLA_LIFT = "GONDOLA_LIFT"
    HEAVY_RAIL = "HEAVY_RAIL"
    HIGH_SPEED_TRAIN = "HIGH_SPEED_TRAIN"
    INTERCITY_BUS = "INTERCITY_BUS"
    LONG_DISTANCE_TRAIN = "LONG_DISTANCE_TRAIN"
    METRO_RAIL = "METRO_RAIL"
    MONORAIL = "MONORAIL"
    OTHER = "OTHER"
    RAIL = "RAIL"
    SHARE_TAXI = "SHARE_TAXI"
    SUBWAY = "SUBWAY"
    TRAM = "TRAM"
    TROLLEYBUS = "TROLLEYBUS"


@dataclass(slots=True, frozen=True)
class Location:
    """Exactly one of an address, a coordinate or a place id."""

    address: str | None = None
    latlng: LatLng | None = None
    place_id: str | None = None

    def __post_init__(self) -> None:
        present = [value for value in (self.address, self.latlng, self.place_id) if value is not None]
        if len(present) != 1:
            raise MapsValidationError(
                "a location must have exactly one of address, latlng or place_id"
            )
        for name in ("address", "place_id"):
            value = getattr(self, name)
            if value is not None and not str(value).strip():
                raise MapsValidationError(f"location {name} must not be empty")

    @classmethod
    def from_address(cls, address: str) -> "Location":
        return cls(address=address)

    @classmethod
    def from_latlng(cls, lat: float, lng: float) -> "Location":
        return cls(latlng=LatLng(lat, lng))

    @classmethod
    def from_place_id(cls, place_id: str) -> "Location":
        return cls(place_id=place_id)

    @classmethod
    def coerce(cls, value: object) -> "Location":
        """Strings are addresses; tuples and ``LatLng`` are coordinates."""

        if isinstance(value, Location):
            return value
        if isinstance(value, str):
            return cls(address=value)
        return cls(latlng=LatLng.coerce(value))

    @property
    def wire(self) -> str:
        if self.latlng is not None:
            return self.latlng.wire
        if self.place_id is not None:
            return f"place_id:{self.place_id}"
        return str(self.address)

    def __str__(self) -> str:
        return self.wire


@dataclass(slots=True, frozen=True)
class Waypoint:
    """An intermediate location or encoded polyline.

    A ``via`` waypoint routes through the point without making a stop.
    """

    location: Location | None = None
    polyline: str | None = None
    via: bool = False

    def __post_init__(self) -> None:
        if (self.location is None) == (self.polyline is None):
            raise MapsValidationError("a waypoint must have exactly one of location or polyline")

    @classmethod
    def from_address(cls, address: str, *, via: bool = False) -> "Waypoint":
        return cls(location=Location.from_address(address), via=via)

    @classmethod
    def from_latlng(cls, lat: float, lng: float, *, via: bool = False) -> "Waypoint":
        return cls(location=Location.from_latlng(lat, lng), via=via)

    @classmethod
    def from_place_id(cls, place_id: str, *, via: bool = False) -> "Waypoint":
        return cls(location=Location.from_place_id(place_id), via=via)

    @classmethod
    def from_polyline(cls, polyline: str, *, via: bool = False) -> "Waypoint":
        return cls(polyline=polyline, via=via)

    @classmethod
    def coerce(cls, value: object) -> "Waypoint":
        if isinstance(value, Waypoint):
            return value
        return cls(location=Location.coerce(value))

    @property
    def wire(self) -> str:
        if self.polyline is not None:
            body = f"enc:{self.polyline}:"
        else:
            body = self.location.wire  # type: ignore[union-attr]
        return f"via:{body}" if self.via else body

    def __str__(self) -> str:
        return self.wire


@dataclass(slots=True, frozen=True)
class DepartureTime:
    """``now`` or an explicit moment."""

    NOW: ClassVar["DepartureTime"]

    at: datetime | None = None

    @classmethod
    def coerce(cls, value: object) -> "DepartureTime":
        if isinstance(value, DepartureTime):
            return value
        if isinstance(value, str):
            if value.strip().lower() == "now":
                return NOW
            raise InvalidCodeError("DepartureTime", value, valid=("now",))
        return cls(at=to_datetime(value))  # type: ignore[arg-type]

    @property
    def is_now(self) -> bool:
        return self.at is None

    @property
    def wire(self) -> str:
        if self.is_now:
            return "now"
        return str(to_epoch_seconds(self.at))  # type: ignore[arg-type]

    def display(self) -> str:
        if self.is_now:
            return "now"
        return format_timestamp(self.at)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.wire


NOW = DepartureTime()
DepartureTime.NOW = NOW


__all__ = [
    "TravelMode",
    "Avoid",
    "TrafficModel",
    "TransitMode",
    "TransitRoutePreference",
    "UnitSystem",
    "DirectionsStatus",
    "GeocoderStatus",
    "DrivingManeuver",
    "VehicleType",
    "Location",
    "Waypoint",
    "DepartureTime",
    "NOW",
]
