"""Parsers from Directions JSON payload into typed response objects."""

from __future__ import annotations

from ..core.decoding import (
    JsonObject,
    as_object,
    latlng,
    number,
    object_list,
    optional_bool,
    optional_bounds,
    optional_number,
    optional_object,
    optional_text_value,
    parse_list,
    polyline_points,
    required_text,
    text,
    text_list,
)
from ..core.errors import MapsProtocolError
from ..core.models import ApiEnvelope
from .models import (
    DirectionsResponse,
    GeocodedWaypoint,
    Leg,
    Route,
    Step,
    TransitAgency,
    TransitDetails,
    TransitFare,
    TransitLine,
    TransitStop,
    TransitTime,
    TransitVehicle,
)
from .types import DrivingManeuver, GeocoderStatus, TravelMode, VehicleType


def _optional_int(payload: JsonObject, key: str) -> int | None:
    value = optional_number(payload, key)
    return None if value is None else int(value)


def _transit_time(payload: JsonObject, key: str) -> TransitTime | None:
    obj = optional_object(payload, key)
    if obj is None:
        return None
    return TransitTime(
        text=required_text(obj, "text"),
        time_zone=required_text(obj, "time_zone"),
        value=int(number(obj.get("value"), name=f"{key}.value")),
    )


def _required_transit_time(payload: JsonObject, key: str) -> TransitTime:
    parsed = _transit_time(payload, key)
    if parsed is None:
        raise MapsProtocolError(f"{key} is required")
    return parsed


def _transit_stop(payload: JsonObject, key: str) -> TransitStop:
    obj = as_object(payload.get(key), name=key)
    return TransitStop(location=latlng(obj, "location"), name=required_text(obj, "name"))


def _agency(payload: JsonObject) -> TransitAgency:
    return TransitAgency(
        name=text(payload.get("name")),
        phone=text(payload.get("phone")),
        url=text(payload.get("url")),
    )


def _vehicle(payload: JsonObject) -> TransitVehicle | None:
    obj = optional_object(payload, "vehicle")
    if obj is None:
        return None
    return TransitVehicle(
        name=text(obj.get("name")),
        vehicle_type=VehicleType.from_wire(obj.get("type")),
        icon=text(obj.get("icon")),
        local_icon=text(obj.get("local_icon")),
    )


def _line(payload: JsonObject) -> TransitLine:
    obj = as_object(payload.get("line"), name="line")
    return TransitLine(
        name=text(obj.get("name")),
        short_name=text(obj.get("short_name")),
        color=text(obj.get("color")),
        agencies=parse_list(obj, "agencies", _agency),
        url=text(obj.get("url")),
        icon=text(obj.get("icon")),
        text_color=text(obj.get("text_color")),
        vehicle=_vehicle(obj),
    )


def _transit_details(payload: JsonObject) -> TransitDetails | None:
    obj = optional_object(payload, "transit_details")
    if obj is None:
        return None
    return TransitDetails(
        arrival_stop=_transit_stop(obj, "arrival_stop"),
        arrival_time=_required_transit_time(obj, "arrival_time"),
        departure_stop=_transit_stop(obj, "departure_stop"),
        departure_time=_required_transit_time(obj, "departure_time"),
        headsign=text(obj.get("headsign")),
        headway=_optional_int(obj, "headway"),
        line=_line(obj),
        num_stops=_optional_int(obj, "num_stops"),
        trip_short_name=text(obj.get("trip_short_name")),
    )


def _maneuver(payload: JsonObject) -> DrivingManeuver | None:
    value = payload.get("maneuver")
    if value is None or value == "":
        return None
    return DrivingManeuver.from_wire(value)


def _step(payload: JsonObject) -> Step:
    return Step(
        distance=optional_text_value(payload, "distance"),
        duration=optional_text_value(payload, "duration"),
        start_location=latlng(payload, "start_location"),
        end_location=latlng(payload, "end_location"),
        html_instructions=text(payload.get("html_instructions")),
        maneuver=_maneuver(payload),
        polyline=polyline_points(payload, "polyline"),
        steps=parse_list(payload, "steps", _step),
        transit_details=_transit_details(payload),
        travel_mode=TravelMode.from_response_code(payload.get("travel_mode")),
    )


def _leg(payload: JsonObject) -> Leg:
    return Leg(
        arrival_time=_transit_time(payload, "arrival_time"),
        departure_time=_transit_time(payload, "departure_time"),
        distance=optional_text_value(payload, "distance"),
        duration=optional_text_value(payload, "duration"),
        duration_in_traffic=optional_text_value(payload, "duration_in_traffic"),
        start_address=text(payload.get("start_address")),
        start_location=latlng(payload, "start_location"),
        end_address=text(payload.get("end_address")),
        end_location=latlng(payload, "end_location"),
        steps=parse_list(payload, "steps", _step),
    )


def parse_fare(payload: JsonObject) -> TransitFare | None:
    obj = optional_object(payload, "fare")
    if obj is None:
        return None
    return TransitFare(
        currency=required_text(obj, "currency"),
        value=number(obj.get("value"), name="fare.value"),
        text=required_text(obj, "text"),
    )


def _waypoint_order(payload: JsonObject) -> tuple[int, ...]:
    raw = payload.get("waypoint_order", [])
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise MapsProtocolError("waypoint_order must be a list")
    return tuple(int(number(item, name="waypoint_order")) for item in raw)


def _route(payload: JsonObject) -> Route:
    return Route(
        bounds=optional_bounds(payload, "bounds"),
        copyrights=text(payload.get("copyrights")),
        fare=parse_fare(payload),
        legs=parse_list(payload, "legs", _leg),
        overview_polyline=polyline_points(payload, "overview_polyline"),
        summary=text(payload.get("summary")),
        warnings=text_list(payload, "warnings"),
        waypoint_order=_waypoint_order(payload),
    )


def _geocoded_waypoint(payload: JsonObject) -> GeocodedWaypoint:
    return GeocodedWaypoint(
        geocoder_status=GeocoderStatus.from_wire(payload.get("geocoder_status")),
        partial_match=optional_bool(payload, "partial_match"),
        place_id=text(payload.get("place_id")),
        types=text_list(payload, "types"),
    )


def parse_directions_response(payload: JsonObject, envelope: ApiEnvelope) -> DirectionsResponse:
    return DirectionsResponse(
        envelope=envelope,
        routes=tuple(_route(item) for item in object_list(payload, "routes")),
        geocoded_waypoints=parse_list(payload, "geocoded_waypoints", _geocoded_waypoint),
        available_travel_modes=tuple(
            TravelMode.from_response_code(code)
            for code in text_list(payload, "available_travel_modes")
        ),
    )


__all__ = [
    "parse_fare",
    "parse_directions_response",
]
