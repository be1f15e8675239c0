"""Elevation response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.latlng import LatLng
from ..core.models import ApiEnvelope
from .types import ElevationStatus


@dataclass(slots=True, frozen=True)
class Point:
    elevation: float
    location: LatLng | None
    resolution: float | None


@dataclass(slots=True, frozen=True)
class ElevationResponse:
    envelope: ApiEnvelope
    results: tuple[Point, ...]

    @property
    def status(self) -> ElevationStatus:
        return self.envelope.status  # type: ignore[return-value]

    @property
    def error_message(self) -> str | None:
        return self.envelope.error_message


__all__ = [
    "Point",
    "ElevationResponse",
]
