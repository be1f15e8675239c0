"""Parsers from Elevation JSON payload into typed response objects."""

from __future__ import annotations

from ..core.decoding import JsonObject, number, optional_latlng, optional_number, parse_list
from ..core.models import ApiEnvelope
from .models import ElevationResponse, Point


def _point(payload: JsonObject) -> Point:
    resolution = optional_number(payload, "resolution")
    return Point(
        elevation=float(number(payload.get("elevation"), name="elevation")),
        location=optional_latlng(payload, "location"),
        resolution=None if resolution is None else float(resolution),
    )


def parse_elevation_response(payload: JsonObject, envelope: ApiEnvelope) -> ElevationResponse:
    return ElevationResponse(envelope=envelope, results=parse_list(payload, "results", _point))


__all__ = [
    "parse_elevation_response",
]
