"""Parsers from Geocoding JSON payload into typed response objects."""

from __future__ import annotations

from ..core.decoding import (
    JsonObject,
    as_object,
    latlng,
    optional_bool,
    optional_bounds,
    optional_object,
    parse_list,
    required_text,
    text,
    text_list,
)
from ..core.models import ApiEnvelope
from .models import AddressComponent, Geocoding, GeocodingResponse, Geometry, PlusCode
from .types import LocationType


def _address_component(payload: JsonObject) -> AddressComponent:
    return AddressComponent(
        long_name=required_text(payload, "long_name"),
        short_name=required_text(payload, "short_name"),
        types=text_list(payload, "types"),
    )


def _geometry(payload: JsonObject) -> Geometry:
    obj = as_object(payload.get("geometry"), name="geometry")
    location_type = obj.get("location_type")
    return Geometry(
        location=latlng(obj, "location"),
        location_type=None if location_type is None else LocationType.from_wire(location_type),
        viewport=optional_bounds(obj, "viewport"),
        bounds=optional_bounds(obj, "bounds"),
    )


def _plus_code(payload: JsonObject) -> PlusCode | None:
    obj = optional_object(payload, "plus_code")
    if obj is None:
        return None
    return PlusCode(
        global_code=required_text(obj, "global_code"),
        compound_code=text(obj.get("compound_code")),
    )


def _geocoding(payload: JsonObject) -> Geocoding:
    return Geocoding(
        address_components=parse_list(payload, "address_components", _address_component),
        formatted_address=text(payload.get("formatted_address")),
        geometry=_geometry(payload),
        partial_match=optional_bool(payload, "partial_match"),
        place_id=text(payload.get("place_id")),
        plus_code=_plus_code(payload),
        postcode_localities=text_list(payload, "postcode_localities"),
        types=text_list(payload, "types"),
    )


def parse_geocoding_response(payload: JsonObject, envelope: ApiEnvelope) -> GeocodingResponse:
    return GeocodingResponse(envelope=envelope, results=parse_list(payload, "results", _geocoding))


__all__ = [
    "parse_geocoding_response",
]
