"""Geocoding parameter and status types."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.codes import WireCode
from ..core.errors import MapsValidationError


class GeocodingStatus(WireCode):
    INVALID_REQUEST = "INVALID_REQUEST"
    OK = "OK"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    ZERO_RESULTS = "ZERO_RESULTS"


class LocationType(WireCode):
    APPROXIMATE = "APPROXIMATE"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    ROOFTOP = "ROOFTOP"


class ComponentKind(WireCode):
    ADMINISTRATIVE_AREA = "administrative_area"
    COUNTRY = "country"
    LOCALITY = "locality"
    POSTAL_CODE = "postal_code"
    ROUTE = "route"


@dataclass(slots=True, frozen=True)
class Component:
    """Component filter such as ``country:CA``."""

    kind: ComponentKind
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ComponentKind.from_wire(self.kind))
        if not isinstance(self.value, str) or not self.value.strip():
            raise MapsValidationError(f"{self.kind.wire} component value must not be empty")

    @classmethod
    def parse(cls, text: str) -> "Component":
        kind, sep, value = text.partition(":")
        if not sep:
            raise MapsValidationError(f"`{text}` is not a `kind:value` component")
        return cls(ComponentKind.from_wire(kind.strip()), value.strip())

    @classmethod
    def coerce(cls, value: object) -> "Component":
        if isinstance(value, Component):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(ComponentKind.from_wire(value[0]), value[1])
        raise MapsValidationError(f"cannot convert {value!r} to a component")

    @property
    def wire(self) -> str:
        return f"{self.kind.wire}:{self.value}"

    def __str__(self) -> str:
        return self.wire


__all__ = [
    "GeocodingStatus",
    "LocationType",
    "ComponentKind",
    "Component",
]
