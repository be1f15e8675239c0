"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from types import TracebackType

from .client_shared import resolve_client_config
from .config import MapsClientConfig
from .core.errors import MapsClientClosedError
from .core.latlng import LatLng
from .core.request import RequestTransport
from .core.transport import SyncTransport
from .directions.request import DirectionsRequest
from .distance_matrix.request import DistanceMatrixRequest
from .elevation.request import ElevationRequest
from .geocoding.forward import ForwardGeocodingRequest
from .geocoding.reverse import ReverseGeocodingRequest
from .time_zone.request import TimeZoneRequest


class _GuardedTransport:
    """Guard wrapper to block requests after client close."""

    def __init__(self, owner: "MapsClient", delegate: RequestTransport) -> None:
        self._owner = owner
        self._delegate = delegate

    def request(self, endpoint: str, *, query: str) -> dict[str, object]:
        self._owner._ensure_open()
        return self._delegate.request(endpoint, query=query)


class MapsClient:
    """Public Google Maps Platform client.

    Each factory method returns a fresh request bound to this client's
    transport and configuration.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: MapsClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = resolve_client_config(api_key=api_key, config=config)
        self._transport = transport or SyncTransport(self._config)
        self._guarded = _GuardedTransport(self, self._transport)
        self._closed = False

    @property
    def config(self) -> MapsClientConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise MapsClientClosedError("MapsClient is already closed")

    def directions(self, origin: object, destination: object) -> DirectionsRequest:
        self._ensure_open()
        return DirectionsRequest(self._guarded, self._config, origin, destination)

    def distance_matrix(
        self,
        origins: Iterable[object] | object,
        destinations: Iterable[object] | object,
    ) -> DistanceMatrixRequest:
        self._ensure_open()
        return DistanceMatrixRequest(self._guarded, self._config, origins, destinations)

    def elevation(self) -> ElevationRequest:
        self._ensure_open()
        return ElevationRequest(self._guarded, self._config)

    def geocoding(self) -> ForwardGeocodingRequest:
        self._ensure_open()
        return ForwardGeocodingRequest(self._guarded, self._config)

    def reverse_geocoding(self, latlng: LatLng | str | tuple[float, float]) -> ReverseGeocodingRequest:
        self._ensure_open()
        return ReverseGeocodingRequest(self._guarded, self._config, latlng)

    def time_zone(
        self,
        location: LatLng | str | tuple[float, float],
        timestamp: datetime | int,
    ) -> TimeZoneRequest:
        self._ensure_open()
        return TimeZoneRequest(self._guarded, self._config, location, timestamp)

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "MapsClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "MapsClient",
]
