"""Query parameter builders for elevation requests."""

from __future__ import annotations

from typing import Protocol

from ..core.query import QueryPairs
from .validators import ElevationFields


class ElevationParams(ElevationFields, Protocol):
    @property
    def samples(self) -> int | None: ...


def build_elevation_optional_params(request: ElevationParams) -> QueryPairs:
    pairs: QueryPairs = []
    if request.locations is not None:
        pairs.append(("locations", request.locations.wire))
    if request.path is not None:
        pairs.append(("path", request.path.wire))
    if request.samples is not None:
        pairs.append(("samples", str(request.samples)))
    return pairs


__all__ = [
    "ElevationParams",
    "build_elevation_optional_params",
]
