"""Rate throttling utilities."""

from __future__ import annotations

import time
from typing import Callable


class MinIntervalThrottler:
    """Keeps at least ``min_interval_seconds`` between outbound requests.

    A zero interval never sleeps. ``wait()`` returns the number of seconds
    actually slept so callers can log it.
    """

    def __init__(
        self,
        min_interval_seconds: float,
        *,
        clock: Callable[[], float] | None = None,
        sleeper: Callable[[float], None] | None = None,
    ) -> None:
        self._min_interval_seconds = max(0.0, float(min_interval_seconds))
        self._clock = clock or time.monotonic
        self._sleep = sleeper or time.sleep
        self._last_request_at: float | None = None

    @property
    def min_interval_seconds(self) -> float:
        return self._min_interval_seconds

    def wait(self) -> float:
        now = self._clock()
        slept = 0.0
        if self._last_request_at is not None and self._min_interval_seconds > 0:
            remaining = self._min_interval_seconds - (now - self._last_request_at)
            if remaining > 0:
                self._sleep(remaining)
                slept = remaining
                now = self._clock()
        self._last_request_at = now
        return slept

    def reset(self) -> None:
        self._last_request_at = None


__all__ = [
    "MinIntervalThrottler",
]
