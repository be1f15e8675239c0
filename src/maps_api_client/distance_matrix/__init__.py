"""Distance Matrix service package."""

from .models import DistanceMatrixResponse, Element, Row
from .request import DistanceMatrixRequest
from .types import DistanceMatrixStatus, ElementStatus

__all__ = [
    "DistanceMatrixRequest",
    "DistanceMatrixResponse",
    "DistanceMatrixStatus",
    "Element",
    "ElementStatus",
    "Row",
]
