"""Time Zone response models."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.models import ApiEnvelope
from .types import TimeZoneStatus


@dataclass(slots=True, frozen=True)
class TimeZoneResponse:
    envelope: ApiEnvelope
    dst_offset: int | None
    raw_offset: int | None
    time_zone_id: str | None
    time_zone_name: str | None

    @property
    def status(self) -> TimeZoneStatus:
        return self.envelope.status  # type: ignore[return-value]

    @property
    def error_message(self) -> str | None:
        return self.envelope.error_message

    @property
    def total_offset(self) -> int | None:
        """Offset from UTC in seconds, daylight saving included."""

        if self.dst_offset is None or self.raw_offset is None:
            return None
        return self.dst_offset + self.raw_offset


__all__ = [
    "TimeZoneResponse",
]
