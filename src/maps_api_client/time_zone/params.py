"""Query parameter builders for time zone requests."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ..core.latlng import LatLng
from ..core.query import QueryPairs, to_epoch_seconds


class TimeZoneParams(Protocol):
    @property
    def location(self) -> LatLng: ...
    @property
    def timestamp(self) -> datetime: ...
    @property
    def language(self) -> str | None: ...


def build_time_zone_required_params(request: TimeZoneParams) -> QueryPairs:
    return [
        ("location", request.location.wire),
        ("timestamp", str(to_epoch_seconds(request.timestamp))),
    ]


def build_time_zone_optional_params(request: TimeZoneParams) -> QueryPairs:
    if request.language:
        return [("language", request.language)]
    return []


__all__ = [
    "TimeZoneParams",
    "build_time_zone_required_params",
    "build_time_zone_optional_params",
]
