"""Time Zone status codes."""

from __future__ import annotations

from ..core.codes import WireCode


class TimeZoneStatus(WireCode):
    INVALID_REQUEST = "INVALID_REQUEST"
    OK = "OK"
    OVER_DAILY_LIMIT = "OVER_DAILY_LIMIT"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    ZERO_RESULTS = "ZERO_RESULTS"


__all__ = [
    "TimeZoneStatus",
]
