"""Closed code sets and their wire strings."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .errors import InvalidCodeError

_CodeT = TypeVar("_CodeT", bound="WireCode")


class WireCode(Enum):
    """Enum whose values are the wire strings used by the service.

    Decoding is exhaustive: an unrecognized string raises ``InvalidCodeError``
    and never falls back to a default member.
    """

    @property
    def wire(self) -> str:
        return self.value

    @classmethod
    def kind(cls) -> str:
        return cls.__name__

    @classmethod
    def wire_codes(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def from_wire(cls: type[_CodeT], value: object) -> _CodeT:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidCodeError(cls.kind(), value, valid=cls.wire_codes())
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidCodeError(cls.kind(), value, valid=cls.wire_codes()) from exc

    def __str__(self) -> str:
        return self.value


def join_wire(values: tuple[WireCode, ...]) -> str:
    return "|".join(value.wire for value in values)


__all__ = [
    "WireCode",
    "join_wire",
]
