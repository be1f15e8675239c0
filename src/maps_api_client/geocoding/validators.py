"""Rules for forward geocoding requests."""

from __future__ import annotations

from typing import Protocol

from ..core.errors import AddressOrComponentsRequiredError
from .types import Component


class ForwardGeocodingFields(Protocol):
    @property
    def address(self) -> str | None: ...
    @property
    def place_id(self) -> str | None: ...
    @property
    def components(self) -> tuple[Component, ...]: ...


def check_address_or_components(request: ForwardGeocodingFields) -> None:
    if request.address or request.place_id or request.components:
        return
    raise AddressOrComponentsRequiredError()


FORWARD_GEOCODING_RULES = (check_address_or_components,)


__all__ = [
    "ForwardGeocodingFields",
    "check_address_or_components",
    "FORWARD_GEOCODING_RULES",
]
