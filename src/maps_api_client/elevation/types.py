"""Elevation parameter and status types."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..core.codes import WireCode
from ..core.errors import MapsValidationError
from ..core.latlng import LatLng, is_coordinate_pair
from ..core.query import join_values


class ElevationStatus(WireCode):
    DATA_NOT_AVAILABLE = "DATA_NOT_AVAILABLE"
    INVALID_REQUEST = "INVALID_REQUEST"
    OK = "OK"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


@dataclass(slots=True, frozen=True)
class ElevationLocations:
    """Either a list of points or an encoded polyline."""

    points: tuple[LatLng, ...] = ()
    polyline: str | None = None

    def __post_init__(self) -> None:
        if bool(self.points) == (self.polyline is not None):
            raise MapsValidationError(
                "elevation locations must be either points or an encoded polyline"
            )
        if self.polyline is not None and not self.polyline:
            raise MapsValidationError("encoded polyline must not be empty")

    @classmethod
    def from_points(cls, points: Iterable[object]) -> "ElevationLocations":
        return cls(points=tuple(LatLng.coerce(point) for point in points))

    @classmethod
    def from_polyline(cls, polyline: str) -> "ElevationLocations":
        return cls(polyline=polyline)

    @classmethod
    def coerce(cls, value: object) -> "ElevationLocations":
        """A single point, a ``(lat, lng)`` pair, or an iterable of points."""

        if isinstance(value, ElevationLocations):
            return value
        if isinstance(value, (LatLng, str)) or is_coordinate_pair(value):
            return cls(points=(LatLng.coerce(value),))
        if isinstance(value, Iterable):
            return cls.from_points(value)
        raise MapsValidationError(f"cannot convert {value!r} to elevation locations")

    @property
    def wire(self) -> str:
        if self.polyline is not None:
            return f"enc:{self.polyline}"
        return join_values(point.wire for point in self.points)

    def __str__(self) -> str:
        return self.wire


__all__ = [
    "ElevationStatus",
    "ElevationLocations",
]
