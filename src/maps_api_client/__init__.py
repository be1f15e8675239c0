"""Public package exports for the Google Maps Platform client."""

from .client import MapsClient
from .config import MapsClientConfig, ThrottlingConfig, TransportConfig
from .core.errors import (
    InvalidCodeError,
    MapsApiError,
    MapsClientClosedError,
    MapsDecodeError,
    MapsProtocolError,
    MapsSequencingError,
    MapsServerError,
    MapsTransportError,
    MapsValidationError,
    QueryNotBuiltError,
    RequestNotValidatedError,
)
from .core.latlng import Bounds, LatLng
from .core.request import RequestState

__all__ = [
    "MapsClient",
    "MapsClientConfig",
    "TransportConfig",
    "ThrottlingConfig",
    "LatLng",
    "Bounds",
    "RequestState",
    "MapsApiError",
    "MapsValidationError",
    "MapsSequencingError",
    "RequestNotValidatedError",
    "QueryNotBuiltError",
    "MapsDecodeError",
    "InvalidCodeError",
    "MapsProtocolError",
    "MapsTransportError",
    "MapsClientClosedError",
    "MapsServerError",
]
