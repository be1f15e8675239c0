"""Cross-field rules for distance matrix requests."""

from __future__ import annotations

from ..directions.validators import check_arrival_excludes_departure, check_transit_only_fields

DISTANCE_MATRIX_RULES = (
    check_transit_only_fields,
    check_arrival_excludes_departure,
)


__all__ = [
    "DISTANCE_MATRIX_RULES",
]
