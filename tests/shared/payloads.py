from __future__ import annotations


def make_ok_payload(**fields: object) -> dict[str, object]:
    return {"status": "OK", **fields}


def make_error_payload(status: str, message: str | None = None) -> dict[str, object]:
    payload: dict[str, object] = {"status": status}
    if message is not None:
        payload["error_message"] = message
    return payload


def make_latlng(lat: float, lng: float) -> dict[str, float]:
    return {"lat": lat, "lng": lng}


def make_text_value(text: str, value: int | float) -> dict[str, object]:
    return {"text": text, "value": value}


def make_step_payload(
    *,
    travel_mode: str = "DRIVING",
    maneuver: str | None = None,
    transit_details: dict[str, object] | None = None,
) -> dict[str, object]:
    step: dict[str, object] = {
        "distance": make_text_value("0.3 km", 313),
        "duration": make_text_value("1 min", 52),
        "start_location": make_latlng(43.6532, -79.3832),
        "end_location": make_latlng(43.6555, -79.3802),
        "html_instructions": "Head <b>north</b>",
        "polyline": {"points": "a~l~Fjk~uOwHJy@P"},
        "travel_mode": travel_mode,
    }
    if maneuver is not None:
        step["maneuver"] = maneuver
    if transit_details is not None:
        step["transit_details"] = transit_details
    return step


def make_transit_details_payload() -> dict[str, object]:
    time = {"text": "9:00am", "time_zone": "America/Toronto", "value": 1700000000}
    stop = {"location": make_latlng(43.6453, -79.3806), "name": "Union Station"}
    return {
        "arrival_stop": stop,
        "arrival_time": time,
        "departure_stop": stop,
        "departure_time": time,
        "headsign": "Oshawa",
        "headway": 1800,
        "line": {
            "name": "Lakeshore East",
            "short_name": "LE",
            "color": "#ff0000",
            "agencies": [{"name": "GO Transit", "phone": "1-888-438-6646", "url": "https://gotransit.com"}],
            "vehicle": {"name": "Train", "type": "COMMUTER_TRAIN", "icon": "//maps/rail.png"},
        },
        "num_stops": 4,
    }


def make_route_payload(*, steps: list[dict[str, object]] | None = None) -> dict[str, object]:
    return {
        "bounds": {
            "northeast": make_latlng(45.5017, -73.5673),
            "southwest": make_latlng(43.6532, -79.3832),
        },
        "copyrights": "Map data (c)2026",
        "legs": [
            {
                "distance": make_text_value("541 km", 541000),
                "duration": make_text_value("5 hours 20 mins", 19200),
                "start_address": "Toronto, ON, Canada",
                "start_location": make_latlng(43.6532, -79.3832),
                "end_address": "Montreal, QC, Canada",
                "end_location": make_latlng(45.5017, -73.5673),
                "steps": steps if steps is not None else [make_step_payload()],
            }
        ],
        "overview_polyline": {"points": "a~l~Fjk~uO"},
        "summary": "ON-401 E",
        "warnings": [],
        "waypoint_order": [],
    }


def make_directions_payload(*, routes: list[dict[str, object]] | None = None) -> dict[str, object]:
    return make_ok_payload(
        routes=routes if routes is not None else [make_route_payload()],
        geocoded_waypoints=[
            {"geocoder_status": "OK", "place_id": "ChIJpTvG15DL1IkRd8S0KlBVNTI", "types": ["locality"]},
            {"geocoder_status": "OK", "place_id": "ChIJDbdkHFQayUwR7-8fITgxTmU", "types": ["locality"]},
        ],
    )


def make_geocoding_result_payload() -> dict[str, object]:
    return {
        "address_components": [
            {"long_name": "Toronto", "short_name": "Toronto", "types": ["locality", "political"]},
        ],
        "formatted_address": "Toronto, ON, Canada",
        "geometry": {
            "location": make_latlng(43.6532, -79.3832),
            "location_type": "APPROXIMATE",
            "viewport": {
                "northeast": make_latlng(43.8554, -79.1168),
                "southwest": make_latlng(43.5810, -79.6393),
            },
        },
        "place_id": "ChIJpTvG15DL1IkRd8S0KlBVNTI",
        "plus_code": {"global_code": "87M2MJ3C+7P", "compound_code": "MJ3C+7P Toronto"},
        "types": ["locality", "political"],
    }
