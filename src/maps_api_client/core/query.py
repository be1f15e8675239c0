"""Query string encoding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone

_LITERAL_BYTES = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789")

QueryPairs = list[tuple[str, str]]


def percent_encode(text: str) -> str:
    """Percent-encode every byte that is not an ASCII letter or digit."""

    return "".join(
        chr(byte) if byte in _LITERAL_BYTES else f"%{byte:02X}"
        for byte in text.encode("utf-8")
    )


def join_values(values: Iterable[str]) -> str:
    return "|".join(values)


def to_epoch_seconds(value: datetime | int) -> int:
    """Unix seconds; naive datetimes are taken as UTC."""

    if isinstance(value, bool):
        raise TypeError("timestamp must be datetime or int, not bool")
    if isinstance(value, int):
        return value
    if not isinstance(value, datetime):
        raise TypeError("timestamp must be datetime or int")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def to_datetime(value: datetime | int) -> datetime:
    if isinstance(value, bool):
        raise TypeError("timestamp must be datetime or int, not bool")
    if isinstance(value, int):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if not isinstance(value, datetime):
        raise TypeError("timestamp must be datetime or int")
    return value


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %I:%M:%S %p")


def encode_query(pairs: Sequence[tuple[str, str]]) -> str:
    return "&".join(f"{name}={percent_encode(value)}" for name, value in pairs)


__all__ = [
    "QueryPairs",
    "percent_encode",
    "join_values",
    "to_epoch_seconds",
    "to_datetime",
    "format_timestamp",
    "encode_query",
]
