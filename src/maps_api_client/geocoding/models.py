"""Geocoding response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.latlng import Bounds, LatLng
from ..core.models import ApiEnvelope
from .types import GeocodingStatus, LocationType


@dataclass(slots=True, frozen=True)
class AddressComponent:
    long_name: str
    short_name: str
    types: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class Geometry:
    location: LatLng
    location_type: LocationType | None
    viewport: Bounds | None
    bounds: Bounds | None


@dataclass(slots=True, frozen=True)
class PlusCode:
    global_code: str
    compound_code: str | None


@dataclass(slots=True, frozen=True)
class Geocoding:
    address_components: tuple[AddressComponent, ...]
    formatted_address: str | None
    geometry: Geometry
    partial_match: bool | None
    place_id: str | None
    plus_code: PlusCode | None
    postcode_localities: tuple[str, ...]
    types: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class GeocodingResponse:
    envelope: ApiEnvelope
    results: tuple[Geocoding, ...]

    @property
    def status(self) -> GeocodingStatus:
        return self.envelope.status  # type: ignore[return-value]

    @property
    def error_message(self) -> str | None:
        return self.envelope.error_message


__all__ = [
    "AddressComponent",
    "Geometry",
    "PlusCode",
    "Geocoding",
    "GeocodingResponse",
]
