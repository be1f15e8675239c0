"""Forward geocoding request builder."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..core.latlng import Bounds, LatLng
from ..core.query import QueryPairs
from ..core.request import BaseRequest, Endpoint, RequestTransport, as_tuple
from .models import GeocodingResponse
from .params import build_forward_geocoding_params
from .parser import parse_geocoding_response
from .types import Component, GeocodingStatus
from .validators import FORWARD_GEOCODING_RULES

if TYPE_CHECKING:
    from ..config import MapsClientConfig

FORWARD_GEOCODING_ENDPOINT: Endpoint[GeocodingResponse] = Endpoint(
    title="Geocoding API",
    path="geocode",
    status_type=GeocodingStatus,
    parse=parse_geocoding_response,
    rules=FORWARD_GEOCODING_RULES,
)


class ForwardGeocodingRequest(BaseRequest[GeocodingResponse]):
    """Address, place id or component filter to coordinates."""

    endpoint = FORWARD_GEOCODING_ENDPOINT

    def __init__(self, transport: RequestTransport, config: "MapsClientConfig") -> None:
        super().__init__(transport, config)
        self._address: str | None = None
        self._place_id: str | None = None
        self._bounds: Bounds | None = None
        self._components: tuple[Component, ...] = ()
        self._language: str | None = None
        self._region: str | None = None

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def place_id(self) -> str | None:
        return self._place_id

    @property
    def bounds(self) -> Bounds | None:
        return self._bounds

    @property
    def components(self) -> tuple[Component, ...]:
        return self._components

    @property
    def language(self) -> str | None:
        return self._language

    @property
    def region(self) -> str | None:
        return self._region

    def with_address(self, address: str) -> "ForwardGeocodingRequest":
        return self._set("_address", address)

    def with_place_id(self, place_id: str) -> "ForwardGeocodingRequest":
        return self._set("_place_id", place_id)

    def with_bounds(
        self,
        bounds: Bounds | tuple[object, object],
    ) -> "ForwardGeocodingRequest":
        if not isinstance(bounds, Bounds):
            southwest, northeast = bounds
            bounds = Bounds(LatLng.coerce(southwest), LatLng.coerce(northeast))
        return self._set("_bounds", bounds)

    def with_component(self, component: Component | str) -> "ForwardGeocodingRequest":
        return self._set("_components", (Component.coerce(component),))

    def with_components(
        self,
        components: Iterable[Component | str] | Component | str,
    ) -> "ForwardGeocodingRequest":
        return self._set("_components", as_tuple(components, Component.coerce))

    def with_language(self, language: str) -> "ForwardGeocodingRequest":
        return self._set("_language", language)

    def with_region(self, region: str) -> "ForwardGeocodingRequest":
        return self._set("_region", region)

    def _optional_pairs(self) -> QueryPairs:
        return build_forward_geocoding_params(self)


__all__ = [
    "FORWARD_GEOCODING_ENDPOINT",
    "ForwardGeocodingRequest",
]
