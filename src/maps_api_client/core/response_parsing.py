"""Shared response parsing helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, TypeVar

from .codes import WireCode
from .errors import MapsProtocolError, MapsServerError
from .models import ApiEnvelope

if TYPE_CHECKING:
    from .request import Endpoint

ResponseT = TypeVar("ResponseT")


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def _ensure_object(payload: object) -> dict[str, object]:
    if not isinstance(payload, dict):
        raise MapsProtocolError("response JSON root must be an object")
    if any(not isinstance(key, str) for key in payload):
        raise MapsProtocolError("response JSON object keys must be strings")
    return payload


def parse_json_payload(response: JsonPayloadResponse) -> dict[str, object]:
    """Parse response JSON payload and map parse failures to domain errors."""

    try:
        payload = response.json()
    except Exception as exc:
        raise MapsProtocolError("response body is not valid JSON") from exc
    return _ensure_object(payload)


def classify_payload_outcome(
    payload: Mapping[str, object],
    *,
    status_type: type[WireCode],
    endpoint: str,
) -> tuple[ApiEnvelope, MapsServerError | None]:
    """Read the status field and map non-OK statuses to a server error."""

    envelope = ApiEnvelope.from_payload(payload, status_type=status_type)
    if envelope.is_ok:
        return envelope, None
    return envelope, MapsServerError(
        envelope.status,
        envelope.error_message,
        endpoint=endpoint,
    )


def decode_payload(endpoint: "Endpoint[ResponseT]", payload: Mapping[str, object]) -> ResponseT:
    """Classify ``status`` and hand OK payloads to the endpoint parser."""

    envelope, mapped_error = classify_payload_outcome(
        payload,
        status_type=endpoint.status_type,
        endpoint=endpoint.title,
    )
    if mapped_error is not None:
        raise mapped_error
    return endpoint.parse(dict(payload), envelope)


__all__ = [
    "parse_json_payload",
    "classify_payload_outcome",
    "decode_payload",
]
