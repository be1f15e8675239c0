"""Parsers from Distance Matrix JSON payload into typed response objects."""

from __future__ import annotations

from ..core.decoding import JsonObject, optional_text_value, parse_list, text_list
from ..core.models import ApiEnvelope
from ..directions.parser import parse_fare
from .models import DistanceMatrixResponse, Element, Row
from .types import ElementStatus


def _element(payload: JsonObject) -> Element:
    return Element(
        status=ElementStatus.from_wire(payload.get("status")),
        distance=optional_text_value(payload, "distance"),
        duration=optional_text_value(payload, "duration"),
        duration_in_traffic=optional_text_value(payload, "duration_in_traffic"),
        fare=parse_fare(payload),
    )


def _row(payload: JsonObject) -> Row:
    return Row(elements=parse_list(payload, "elements", _element))


def parse_distance_matrix_response(
    payload: JsonObject,
    envelope: ApiEnvelope,
) -> DistanceMatrixResponse:
    return DistanceMatrixResponse(
        envelope=envelope,
        origin_addresses=text_list(payload, "origin_addresses"),
        destination_addresses=text_list(payload, "destination_addresses"),
        rows=parse_list(payload, "rows", _row),
    )


__all__ = [
    "parse_distance_matrix_response",
]
