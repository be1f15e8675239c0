"""Time Zone request builder."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from ..core.latlng import LatLng
from ..core.query import QueryPairs, to_datetime
from ..core.request import BaseRequest, Endpoint, RequestTransport
from .models import TimeZoneResponse
from .params import build_time_zone_optional_params, build_time_zone_required_params
from .parser import parse_time_zone_response
from .types import TimeZoneStatus

if TYPE_CHECKING:
    from ..config import MapsClientConfig

TIME_ZONE_ENDPOINT: Endpoint[TimeZoneResponse] = Endpoint(
    title="Time Zone API",
    path="timezone",
    status_type=TimeZoneStatus,
    parse=parse_time_zone_response,
)


class TimeZoneRequest(BaseRequest[TimeZoneResponse]):
    """Time zone and UTC offsets for a location at a moment in time."""

    endpoint = TIME_ZONE_ENDPOINT

    def __init__(
        self,
        transport: RequestTransport,
        config: "MapsClientConfig",
        location: LatLng | str | tuple[float, float],
        timestamp: datetime | int,
    ) -> None:
        super().__init__(transport, config)
        self._location = LatLng.coerce(location)
        self._timestamp = to_datetime(timestamp)
        self._language: str | None = None

    @property
    def location(self) -> LatLng:
        return self._location

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def language(self) -> str | None:
        return self._language

    def with_language(self, language: str) -> "TimeZoneRequest":
        return self._set("_language", language)

    def _required_pairs(self) -> QueryPairs:
        return build_time_zone_required_params(self)

    def _optional_pairs(self) -> QueryPairs:
        return build_time_zone_optional_params(self)


__all__ = [
    "TIME_ZONE_ENDPOINT",
    "TimeZoneRequest",
]
