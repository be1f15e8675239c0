"""Query parameter builders for geocoding requests."""

from __future__ import annotations

from typing import Protocol

from ..core.codes import join_wire
from ..core.latlng import Bounds, LatLng
from ..core.query import QueryPairs, join_values
from .types import LocationType
from .validators import ForwardGeocodingFields


class ForwardGeocodingParams(ForwardGeocodingFields, Protocol):
    @property
    def bounds(self) -> Bounds | None: ...
    @property
    def language(self) -> str | None: ...
    @property
    def region(self) -> str | None: ...


class ReverseGeocodingParams(Protocol):
    @property
    def latlng(self) -> LatLng: ...
    @property
    def language(self) -> str | None: ...
    @property
    def location_types(self) -> tuple[LocationType, ...]: ...
    @property
    def result_types(self) -> tuple[str, ...]: ...


def build_forward_geocoding_params(request: ForwardGeocodingParams) -> QueryPairs:
    pairs: QueryPairs = []
    if request.address:
        pairs.append(("address", request.address))
    if request.place_id:
        pairs.append(("place_id", request.place_id))
    if request.bounds is not None:
        pairs.append(("bounds", request.bounds.wire))
    if request.components:
        pairs.append(("components", join_values(c.wire for c in request.components)))
    if request.language:
        pairs.append(("language", request.language))
    if request.region:
        pairs.append(("region", request.region))
    return pairs


def build_reverse_geocoding_required_params(request: ReverseGeocodingParams) -> QueryPairs:
    return [("latlng", request.latlng.wire)]


def build_reverse_geocoding_optional_params(request: ReverseGeocodingParams) -> QueryPairs:
    pairs: QueryPairs = []
    if request.language:
        pairs.append(("language", request.language))
    if request.location_types:
        pairs.append(("location_type", join_wire(request.location_types)))
    if request.result_types:
        pairs.append(("result_type", join_values(request.result_types)))
    return pairs


__all__ = [
    "ForwardGeocodingParams",
    "ReverseGeocodingParams",
    "build_forward_geocoding_params",
    "build_reverse_geocoding_required_params",
    "build_reverse_geocoding_optional_params",
]
