"""Distance Matrix status codes."""

from __future__ import annotations

from ..core.codes import WireCode


class DistanceMatrixStatus(WireCode):
    INVALID_REQUEST = "INVALID_REQUEST"
    MAX_ELEMENTS_EXCEEDED = "MAX_ELEMENTS_EXCEEDED"
    MAX_DIMENSIONS_EXCEEDED = "MAX_DIMENSIONS_EXCEEDED"
    OK = "OK"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ElementStatus(WireCode):
    """Per origin/destination pair outcome; a non-OK element is not an error."""

    MAX_ROUTE_LENGTH_EXCEEDED = "MAX_ROUTE_LENGTH_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"


__all__ = [
    "DistanceMatrixStatus",
    "ElementStatus",
]
