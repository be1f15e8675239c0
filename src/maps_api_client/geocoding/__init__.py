"""Geocoding service package."""

from .forward import ForwardGeocodingRequest
from .models import AddressComponent, Geocoding, GeocodingResponse, Geometry, PlusCode
from .reverse import ReverseGeocodingRequest
from .types import Component, ComponentKind, GeocodingStatus, LocationType

__all__ = [
    "ForwardGeocodingRequest",
    "ReverseGeocodingRequest",
    "GeocodingResponse",
    "GeocodingStatus",
    "Geocoding",
    "Geometry",
    "AddressComponent",
    "PlusCode",
    "Component",
    "ComponentKind",
    "LocationType",
]
