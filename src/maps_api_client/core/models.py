"""Core response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .codes import WireCode


@dataclass(slots=True, frozen=True)
class ApiEnvelope:
    status: WireCode
    error_message: str | None

    @classmethod
    def from_payload(
        cls,
        payload: Mapping[str, object],
        *,
        status_type: type[WireCode],
    ) -> "ApiEnvelope":
        message = payload.get("error_message")
        return cls(
            status=status_type.from_wire(payload.get("status")),
            error_message=str(message) if message is not None else None,
        )

    @property
    def is_ok(self) -> bool:
        return self.status.wire == "OK"


@dataclass(slots=True, frozen=True)
class TextValue:
    """A ``{"text": ..., "value": ...}`` pair, as used for distances and durations."""

    text: str
    value: int | float


__all__ = [
    "ApiEnvelope",
    "TextValue",
]
