"""Distance Matrix response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import ApiEnvelope, TextValue
from ..directions.models import TransitFare
from .types import DistanceMatrixStatus, ElementStatus


@dataclass(slots=True, frozen=True)
class Element:
    status: ElementStatus
    distance: TextValue | None
    duration: TextValue | None
    duration_in_traffic: TextValue | None
    fare: TransitFare | None


@dataclass(slots=True, frozen=True)
class Row:
    elements: tuple[Element, ...]


@dataclass(slots=True, frozen=True)
class DistanceMatrixResponse:
    envelope: ApiEnvelope
    origin_addresses: tuple[str, ...]
    destination_addresses: tuple[str, ...]
    rows: tuple[Row, ...]

    @property
    def status(self) -> DistanceMatrixStatus:
        return self.envelope.status  # type: ignore[return-value]

    @property
    def error_message(self) -> str | None:
        return self.envelope.error_message

    def element(self, origin_index: int, destination_index: int) -> Element:
        return self.rows[origin_index].elements[destination_index]


__all__ = [
    "Element",
    "Row",
    "DistanceMatrixResponse",
]
