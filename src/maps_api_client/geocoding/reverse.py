"""Reverse geocoding request builder."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..core.latlng import LatLng
from ..core.query import QueryPairs
from ..core.request import BaseRequest, Endpoint, RequestTransport, as_tuple
from .models import GeocodingResponse
from .params import build_reverse_geocoding_optional_params, build_reverse_geocoding_required_params
from .parser import parse_geocoding_response
from .types import GeocodingStatus, LocationType

if TYPE_CHECKING:
    from ..config import MapsClientConfig

REVERSE_GEOCODING_ENDPOINT: Endpoint[GeocodingResponse] = Endpoint(
    title="Geocoding API",
    path="geocode",
    status_type=GeocodingStatus,
    parse=parse_geocoding_response,
)


class ReverseGeocodingRequest(BaseRequest[GeocodingResponse]):
    """Coordinates to human-readable addresses."""

    endpoint = REVERSE_GEOCODING_ENDPOINT

    def __init__(
        self,
        transport: RequestTransport,
        config: "MapsClientConfig",
        latlng: LatLng | str | tuple[float, float],
    ) -> None:
        super().__init__(transport, config)
        self._latlng = LatLng.coerce(latlng)
        self._language: str | None = None
        self._location_types: tuple[LocationType, ...] = ()
        self._result_types: tuple[str, ...] = ()

    @property
    def latlng(self) -> LatLng:
        return self._latlng

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def location_types(self) -> tuple[LocationType, ...]:
        return self._location_types

    @property
    def result_types(self) -> tuple[str, ...]:
        return self._result_types

    def with_language(self, language: str) -> "ReverseGeocodingRequest":
        return self._set("_language", language)

    def with_location_type(self, location_type: LocationType | str) -> "ReverseGeocodingRequest":
        return self._set("_location_types", (LocationType.from_wire(location_type),))

    def with_location_types(
        self,
        location_types: Iterable[LocationType | str] | LocationType | str,
    ) -> "ReverseGeocodingRequest":
        return self._set("_location_types", as_tuple(location_types, LocationType.from_wire))

    def with_result_type(self, result_type: str) -> "ReverseGeocodingRequest":
        return self._set("_result_types", (str(result_type),))

    def with_result_types(self, result_types: Iterable[str] | str) -> "ReverseGeocodingRequest":
        return self._set("_result_types", as_tuple(result_types, str))

    def _required_pairs(self) -> QueryPairs:
        return build_reverse_geocoding_required_params(self)

    def _optional_pairs(self) -> QueryPairs:
        return build_reverse_geocoding_optional_params(self)


__all__ = [
    "REVERSE_GEOCODING_ENDPOINT",
    "ReverseGeocodingRequest",
]
