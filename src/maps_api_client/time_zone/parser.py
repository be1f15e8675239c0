"""Parsers from Time Zone JSON payload into typed response objects."""

from __future__ import annotations

from ..core.decoding import JsonObject, optional_number, text
from ..core.models import ApiEnvelope
from .models import TimeZoneResponse


def _offset(payload: JsonObject, key: str) -> int | None:
    value = optional_number(payload, key)
    return None if value is None else int(value)


def parse_time_zone_response(payload: JsonObject, envelope: ApiEnvelope) -> TimeZoneResponse:
    return TimeZoneResponse(
        envelope=envelope,
        dst_offset=_offset(payload, "dstOffset"),
        raw_offset=_offset(payload, "rawOffset"),
        time_zone_id=text(payload.get("timeZoneId")),
        time_zone_name=text(payload.get("timeZoneName")),
    )


__all__ = [
    "parse_time_zone_response",
]
