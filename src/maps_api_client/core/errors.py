"""Error types and status messages."""

from __future__ import annotations

from collections.abc import Mapping

_GENERIC_STATUS_MESSAGES: Mapping[str, str] = {
    "DATA_NOT_AVAILABLE": "Data not available. There is no available data for the input location.",
    "INVALID_REQUEST": (
        "Invalid request. A required parameter is missing or a parameter value is invalid."
    ),
    "MAX_DIMENSIONS_EXCEEDED": (
        "Maximum dimensions exceeded. "
        "The number of origins or destinations exceeds the per-query limit."
    ),
    "MAX_ELEMENTS_EXCEEDED": (
        "Maximum elements exceeded. "
        "The product of origins and destinations exceeds the per-query limit."
    ),
    "MAX_ROUTE_LENGTH_EXCEEDED": (
        "Maximum route length exceeded. "
        "Try reducing the number of waypoints, turns, or instructions."
    ),
    "MAX_WAYPOINTS_EXCEEDED": (
        "Maximum waypoints exceeded. "
        "The maximum allowed number of waypoints is 25, plus the origin and destination."
    ),
    "NOT_FOUND": "Not found. An origin, destination, or waypoint could not be geocoded.",
    "OVER_DAILY_LIMIT": (
        "Over daily limit. The API key is missing or invalid, billing has not been enabled, "
        "a usage cap has been exceeded, or the method of payment is no longer valid."
    ),
    "OVER_QUERY_LIMIT": "Over query limit. The requestor has exceeded its quota.",
    "REQUEST_DENIED": "Request denied. The service did not complete the request.",
    "UNKNOWN_ERROR": (
        "Unknown error. The request could not be processed due to a server error."
    ),
    "ZERO_RESULTS": "Zero results. The request was valid but no result was found.",
}


def generic_status_message(status_code: str) -> str:
    return _GENERIC_STATUS_MESSAGES.get(status_code, f"Service returned status {status_code}.")


class MapsApiError(Exception):
    """Base exception for this package."""


class MapsValidationError(MapsApiError):
    """Invalid input or a parameter combination the service refuses."""


class WaypointsWithTransitError(MapsValidationError):
    def __init__(self, waypoint_count: int) -> None:
        super().__init__(
            "waypoints cannot be used when the travel mode is `transit`: "
            f"{waypoint_count} waypoint(s) are set; "
            "try again with a different travel mode or no waypoints"
        )
        self.waypoint_count = waypoint_count


class ArrivalTimeIsForTransitOnlyError(MapsValidationError):
    def __init__(self, travel_mode: str, arrival_time: str) -> None:
        super().__init__(
            "an arrival time may only be used with the `transit` travel mode: "
            f"the travel mode is `{travel_mode}` and the arrival time is `{arrival_time}`"
        )
        self.travel_mode = travel_mode
        self.arrival_time = arrival_time


class TransitModeIsForTransitOnlyError(MapsValidationError):
    def __init__(self, travel_mode: str, transit_modes: str) -> None:
        super().__init__(
            "transit modes may only be used with the `transit` travel mode: "
            f"the travel mode is `{travel_mode}` and the transit mode(s) are `{transit_modes}`"
        )
        self.travel_mode = travel_mode
        self.transit_modes = transit_modes


class TransitRoutePreferenceIsForTransitOnlyError(MapsValidationError):
    def __init__(self, travel_mode: str, transit_route_preference: str) -> None:
        super().__init__(
            "a transit route preference may only be used with the `transit` travel mode: "
            f"the travel mode is `{travel_mode}` and the transit route preference is "
            f"`{transit_route_preference}`"
        )
        self.travel_mode = travel_mode
        self.transit_route_preference = transit_route_preference


class AlternativesWithWaypointsError(MapsValidationError):
    def __init__(self, waypoint_count: int) -> None:
        super().__init__(
            "alternatives cannot be set to `false` when waypoints are set: "
            f"{waypoint_count} waypoint(s) are set"
        )
        self.waypoint_count = waypoint_count


class RestrictionsWithWaypointsError(MapsValidationError):
    def __init__(self, waypoint_count: int, restrictions: str) -> None:
        super().__init__(
            "restrictions cannot be used when waypoints are set: "
            f"{waypoint_count} waypoint(s) are set and the restriction(s) are `{restrictions}`"
        )
        self.waypoint_count = waypoint_count
        self.restrictions = restrictions


class TooManyWaypointsError(MapsValidationError):
    def __init__(self, waypoint_count: int, excess: int) -> None:
        super().__init__(
            "the maximum allowed number of waypoints is 25 plus the origin and destination: "
            f"{waypoint_count} waypoints are set; try again with {excess} fewer waypoint(s)"
        )
        self.waypoint_count = waypoint_count
        self.excess = excess


class ArrivalAndDepartureTimeError(MapsValidationError):
    def __init__(self, arrival_time: str, departure_time: str) -> None:
        super().__init__(
            "a departure time cannot be used when an arrival time is set: "
            f"the arrival time is `{arrival_time}` and the departure time is `{departure_time}`"
        )
        self.arrival_time = arrival_time
        self.departure_time = departure_time


class PositionalAndSampledPathError(MapsValidationError):
    def __init__(self) -> None:
        super().__init__(
            "a positional request and a sampled path request are mutually exclusive"
        )


class AddressOrComponentsRequiredError(MapsValidationError):
    def __init__(self) -> None:
        super().__init__(
            "a geocoding request requires an address, a place id, or at least one component"
        )


class MapsSequencingError(MapsApiError):
    """A request step was invoked out of order."""


class RequestNotValidatedError(MapsSequencingError):
    def __init__(self) -> None:
        super().__init__(
            "the request must be validated before a query string may be built; "
            "call validate() before build()"
        )


class QueryNotBuiltError(MapsSequencingError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "the query string must be built before the request may be sent; "
            "call build() before execute()"
        )


class MapsDecodeError(MapsApiError):
    """A value could not be encoded or decoded."""


class InvalidCodeError(MapsDecodeError):
    """Unrecognized wire string for a closed set."""

    def __init__(self, kind: str, value: object, *, valid: tuple[str, ...] = ()) -> None:
        message = f"`{value}` is not a valid {kind} code"
        if valid:
            message += "; valid codes are " + ", ".join(f"`{code}`" for code in valid)
        super().__init__(message)
        self.kind = kind
        self.value = value


class InvalidLatLngError(MapsDecodeError):
    """Malformed or out-of-range coordinate."""


class MapsProtocolError(MapsDecodeError):
    """Response body is not valid JSON or does not match the expected shape."""


class MapsTransportError(MapsApiError):
    """Network/transport-level failure."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class MapsClientClosedError(MapsApiError):
    """Raised when client is used after close."""


class MapsServerError(MapsApiError):
    """Service answered with a status other than OK."""

    def __init__(
        self,
        status: object,
        error_message: str | None = None,
        *,
        endpoint: str = "Google Maps",
    ) -> None:
        code = getattr(status, "wire", None) or str(status)
        text = error_message or generic_status_message(code)
        super().__init__(f"{endpoint} service: {text}")
        self.status = status
        self.error_message = error_message
        self.endpoint = endpoint


__all__ = [
    "MapsApiError",
    "MapsValidationError",
    "WaypointsWithTransitError",
    "ArrivalTimeIsForTransitOnlyError",
    "TransitModeIsForTransitOnlyError",
    "TransitRoutePreferenceIsForTransitOnlyError",
    "AlternativesWithWaypointsError",
    "RestrictionsWithWaypointsError",
    "TooManyWaypointsError",
    "ArrivalAndDepartureTimeError",
    "PositionalAndSampledPathError",
    "AddressOrComponentsRequiredError",
    "MapsSequencingError",
    "RequestNotValidatedError",
    "QueryNotBuiltError",
    "MapsDecodeError",
    "InvalidCodeError",
    "InvalidLatLngError",
    "MapsProtocolError",
    "MapsTransportError",
    "MapsClientClosedError",
    "MapsServerError",
    "generic_status_message",
]
