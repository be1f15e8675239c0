"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """httpx timeouts, in seconds, for each phase of a request."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for item in fields(self):
            seconds = getattr(self, item.name)
            if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds <= 0:
                raise ValueError(f"transport.{item.name} must be a positive number, got {seconds!r}")


@dataclass(slots=True, frozen=True)
class ThrottlingConfig:
    """Client-side rate limit, as a minimum gap between requests."""

    min_wait_interval_seconds: float = 0.0

    def validate(self) -> None:
        if self.min_wait_interval_seconds < 0:
            raise ValueError("throttling.min_wait_interval_seconds must be >= 0")


@dataclass(slots=True, frozen=True)
class MapsClientConfig:
    """Runtime configuration for the Maps client."""

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    output_format: str = "json"
    user_agent: str = "maps-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    throttling: ThrottlingConfig = field(default_factory=ThrottlingConfig)

    def validate(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ValueError("api_key must not be empty")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.output_format != "json":
            raise ValueError("output_format must be 'json'")
        self.transport.validate()
        self.throttling.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "TransportConfig",
    "ThrottlingConfig",
    "MapsClientConfig",
]
