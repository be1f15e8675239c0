"""Directions service package."""

from .models import (
    DirectionsResponse,
    GeocodedWaypoint,
    Leg,
    Route,
    Step,
    TransitDetails,
    TransitFare,
    TransitLine,
)
from .request import DirectionsRequest
from .types import (
    NOW,
    Avoid,
    DepartureTime,
    DirectionsStatus,
    DrivingManeuver,
    GeocoderStatus,
    Location,
    TrafficModel,
    TransitMode,
    TransitRoutePreference,
    TravelMode,
    UnitSystem,
    VehicleType,
    Waypoint,
)

__all__ = [
    "DirectionsRequest",
    "DirectionsResponse",
    "DirectionsStatus",
    "Route",
    "Leg",
    "Step",
    "TransitDetails",
    "TransitFare",
    "TransitLine",
    "GeocodedWaypoint",
    "GeocoderStatus",
    "TravelMode",
    "Avoid",
    "TrafficModel",
    "TransitMode",
    "TransitRoutePreference",
    "UnitSystem",
    "DrivingManeuver",
    "VehicleType",
    "Location",
    "Waypoint",
    "DepartureTime",
    "NOW",
]
