"""Shape checks shared by the endpoint parsers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .errors import InvalidLatLngError, MapsProtocolError
from .latlng import Bounds, LatLng
from .models import TextValue

JsonObject = dict[str, object]
_T = TypeVar("_T")


def as_object(value: object, *, name: str) -> JsonObject:
    if not isinstance(value, dict):
        raise MapsProtocolError(f"{name} must be an object")
    return value


def optional_object(payload: JsonObject, key: str) -> JsonObject | None:
    value = payload.get(key)
    if value is None:
        return None
    return as_object(value, name=key)


def object_list(payload: JsonObject, key: str) -> list[JsonObject]:
    raw = payload.get(key, [])
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise MapsProtocolError(f"{key} must be a list")
    for item in raw:
        if not isinstance(item, dict):
            raise MapsProtocolError(f"{key} element must be an object")
    return raw


def parse_list(
    payload: JsonObject,
    key: str,
    parse: Callable[[JsonObject], _T],
) -> tuple[_T, ...]:
    return tuple(parse(item) for item in object_list(payload, key))


def text(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise MapsProtocolError("expected a scalar value")
    return str(value)


def required_text(payload: JsonObject, key: str) -> str:
    value = text(payload.get(key))
    if value is None:
        raise MapsProtocolError(f"{key} is required")
    return value


def text_list(payload: JsonObject, key: str) -> tuple[str, ...]:
    raw = payload.get(key, [])
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise MapsProtocolError(f"{key} must be a list")
    return tuple(str(item) for item in raw)


def number(value: object, *, name: str) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MapsProtocolError(f"{name} must be a number")
    return value


def optional_number(payload: JsonObject, key: str) -> int | float | None:
    value = payload.get(key)
    if value is None:
        return None
    return number(value, name=key)


def optional_bool(payload: JsonObject, key: str) -> bool | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise MapsProtocolError(f"{key} must be a boolean")
    return value


def latlng(payload: JsonObject, key: str) -> LatLng:
    obj = as_object(payload.get(key), name=key)
    try:
        return LatLng.from_payload(obj)
    except InvalidLatLngError as exc:
        raise MapsProtocolError(f"{key} is not a valid coordinate") from exc


def optional_latlng(payload: JsonObject, key: str) -> LatLng | None:
    if payload.get(key) is None:
        return None
    return latlng(payload, key)


def optional_bounds(payload: JsonObject, key: str) -> Bounds | None:
    obj = optional_object(payload, key)
    if obj is None:
        return None
    return Bounds(
        southwest=latlng(obj, "southwest"),
        northeast=latlng(obj, "northeast"),
    )


def optional_text_value(payload: JsonObject, key: str) -> TextValue | None:
    obj = optional_object(payload, key)
    if obj is None:
        return None
    return TextValue(
        text=required_text(obj, "text"),
        value=number(obj.get("value"), name=f"{key}.value"),
    )


def polyline_points(payload: JsonObject, key: str) -> str | None:
    obj = optional_object(payload, key)
    if obj is None:
        return None
    return text(obj.get("points"))


__all__ = [
    "JsonObject",
    "as_object",
    "optional_object",
    "object_list",
    "parse_list",
    "text",
    "required_text",
    "text_list",
    "number",
    "optional_number",
    "optional_bool",
    "latlng",
    "optional_latlng",
    "optional_bounds",
    "optional_text_value",
    "polyline_points",
]
