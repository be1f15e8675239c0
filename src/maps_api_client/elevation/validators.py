"""Rules for elevation requests."""

from __future__ import annotations

from typing import Protocol

from ..core.errors import PositionalAndSampledPathError
from .types import ElevationLocations


class ElevationFields(Protocol):
    @property
    def locations(self) -> ElevationLocations | None: ...
    @property
    def path(self) -> ElevationLocations | None: ...


def check_positional_or_sampled_path(request: ElevationFields) -> None:
    if request.locations is not None and request.path is not None:
        raise PositionalAndSampledPathError()


ELEVATION_RULES = (check_positional_or_sampled_path,)


__all__ = [
    "ElevationFields",
    "check_positional_or_sampled_path",
    "ELEVATION_RULES",
]
