"""Coordinate types."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import InvalidLatLngError


def format_degrees(value: float) -> str:
    """Render decimal degrees with up to 7 places and no exponent."""

    text = f"{value:.7f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _to_float(value: object, *, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidLatLngError(f"{name} must be a number, not bool")
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidLatLngError(f"{name} `{value}` is not a number") from exc
    if not math.isfinite(number):
        raise InvalidLatLngError(f"{name} `{value}` is not finite")
    return number


def is_coordinate_pair(value: object) -> bool:
    """True for a two-item tuple or list of real numbers, such as ``(43.65, -79.38)``."""

    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(isinstance(part, (int, float)) and not isinstance(part, bool) for part in value)
    )


@dataclass(slots=True, frozen=True)
class LatLng:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        lat = _to_float(self.lat, name="latitude")
        lng = _to_float(self.lng, name="longitude")
        if not -90.0 <= lat <= 90.0:
            raise InvalidLatLngError(f"latitude {lat} must be between -90 and 90")
        if not -180.0 <= lng <= 180.0:
            raise InvalidLatLngError(f"longitude {lng} must be between -180 and 180")
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lng", lng)

    @classmethod
    def parse(cls, text: str) -> "LatLng":
        parts = text.strip().split(",")
        if len(parts) != 2:
            raise InvalidLatLngError(f"`{text}` is not a `lat,lng` pair")
        return cls(parts[0].strip(), parts[1].strip())  # type: ignore[arg-type]

    @classmethod
    def coerce(cls, value: object) -> "LatLng":
        if isinstance(value, LatLng):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple | list) and len(value) == 2:
            return cls(value[0], value[1])
        raise InvalidLatLngError(f"cannot convert {value!r} to LatLng")

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "LatLng":
        return cls(payload.get("lat"), payload.get("lng"))  # type: ignore[arg-type]

    @property
    def wire(self) -> str:
        return f"{format_degrees(self.lat)},{format_degrees(self.lng)}"

    def __str__(self) -> str:
        return self.wire


@dataclass(slots=True, frozen=True)
class Bounds:
    southwest: LatLng
    northeast: LatLng

    @property
    def wire(self) -> str:
        return f"{self.southwest.wire}|{self.northeast.wire}"


__all__ = [
    "LatLng",
    "Bounds",
    "format_degrees",
    "is_coordinate_pair",
]
