"""Elevation service package."""

from .models import ElevationResponse, Point
from .request import ElevationRequest
from .types import ElevationLocations, ElevationStatus

__all__ = [
    "ElevationRequest",
    "ElevationResponse",
    "ElevationStatus",
    "ElevationLocations",
    "Point",
]
