"""Elevation request builder."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..core.errors import MapsValidationError
from ..core.query import QueryPairs
from ..core.request import BaseRequest, Endpoint, RequestTransport
from .models import ElevationResponse
from .params import build_elevation_optional_params
from .parser import parse_elevation_response
from .types import ElevationLocations, ElevationStatus
from .validators import ELEVATION_RULES

if TYPE_CHECKING:
    from ..config import MapsClientConfig

ELEVATION_ENDPOINT: Endpoint[ElevationResponse] = Endpoint(
    title="Elevation API",
    path="elevation",
    status_type=ElevationStatus,
    parse=parse_elevation_response,
    rules=ELEVATION_RULES,
)


class ElevationRequest(BaseRequest[ElevationResponse]):
    """Elevation for discrete points or for samples along a path.

    Exactly one of ``for_positional_request`` and ``for_sampled_path_request``
    should be used; setting both fails validation.
    """

    endpoint = ELEVATION_ENDPOINT

    def __init__(self, transport: RequestTransport, config: "MapsClientConfig") -> None:
        super().__init__(transport, config)
        self._locations: ElevationLocations | None = None
        self._path: ElevationLocations | None = None
        self._samples: int | None = None

    @property
    def locations(self) -> ElevationLocations | None:
        return self._locations

    @property
    def path(self) -> ElevationLocations | None:
        return self._path

    @property
    def samples(self) -> int | None:
        return self._samples

    def for_positional_request(
        self,
        locations: ElevationLocations | Iterable[object] | object,
    ) -> "ElevationRequest":
        return self._set("_locations", ElevationLocations.coerce(locations))

    def for_sampled_path_request(
        self,
        path: ElevationLocations | Iterable[object],
        samples: int,
    ) -> "ElevationRequest":
        if isinstance(samples, bool) or not isinstance(samples, int) or samples < 1:
            raise MapsValidationError("samples must be a positive integer")
        self._set("_path", ElevationLocations.coerce(path))
        return self._set("_samples", samples)

    def _optional_pairs(self) -> QueryPairs:
        return build_elevation_optional_params(self)


__all__ = [
    "ELEVATION_ENDPOINT",
    "ElevationRequest",
]
