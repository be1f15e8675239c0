"""Time Zone service package."""

from .models import TimeZoneResponse
from .request import TimeZoneRequest
from .types import TimeZoneStatus

__all__ = [
    "TimeZoneRequest",
    "TimeZoneResponse",
    "TimeZoneStatus",
]
