"""Request builder and validation state machine shared by every endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Protocol, TypeVar

from .codes import WireCode
from .errors import MapsServerError, MapsValidationError, QueryNotBuiltError, RequestNotValidatedError
from .latlng import is_coordinate_pair
from .models import ApiEnvelope
from .query import QueryPairs, encode_query
from .response_parsing import decode_payload

if TYPE_CHECKING:
    from ..config import MapsClientConfig

logger = logging.getLogger("maps_api_client")

ResponseT = TypeVar("ResponseT")
_RequestT = TypeVar("_RequestT", bound="BaseRequest[Any]")


class RequestState(Enum):
    BUILDING = "building"
    VALIDATED = "validated"
    BUILT = "built"
    EXECUTED = "executed"


class RequestTransport(Protocol):
    def request(self, endpoint: str, *, query: str) -> dict[str, object]: ...


@dataclass(slots=True, frozen=True)
class Endpoint(Generic[ResponseT]):
    """Static description of one service endpoint.

    ``rules`` run in order against the request; the first one that raises
    stops validation.
    """

    title: str
    path: str
    status_type: type[WireCode]
    parse: Callable[[dict[str, object], ApiEnvelope], ResponseT]
    rules: tuple[Callable[[Any], None], ...] = ()

    def decode(self, payload: Mapping[str, object]) -> ResponseT:
        return decode_payload(self, payload)


class BaseRequest(Generic[ResponseT]):
    """Parameter store with ``validate()`` -> ``build()`` -> ``execute()`` sequencing.

    Every setter goes through ``_set`` which drops the validated flag and the
    cached query string, returning the request to ``BUILDING``.
    """

    endpoint: ClassVar[Endpoint[Any]]

    def __init__(self, transport: RequestTransport, config: "MapsClientConfig") -> None:
        self._transport = transport
        self._config = config
        self._state = RequestState.BUILDING
        self._query: str | None = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def validated(self) -> bool:
        return self._state is not RequestState.BUILDING

    @property
    def query(self) -> str | None:
        return self._query

    def _set(self: _RequestT, name: str, value: object) -> _RequestT:
        setattr(self, name, value)
        if self._state is not RequestState.BUILDING:
            logger.debug(
                "request invalidated endpoint=%s field=%s state=%s",
                self.endpoint.path,
                name.lstrip("_"),
                self._state.value,
            )
        self._state = RequestState.BUILDING
        self._query = None
        return self

    def validate(self: _RequestT) -> _RequestT:
        try:
            for rule in self.endpoint.rules:
                rule(self)
        except MapsValidationError as exc:
            logger.warning(
                "request validation failed endpoint=%s error=%s",
                self.endpoint.path,
                exc.__class__.__name__,
            )
            raise
        if self._state is RequestState.BUILDING:
            self._state = RequestState.VALIDATED
        return self

    def _required_pairs(self) -> QueryPairs:
        return []

    def _optional_pairs(self) -> QueryPairs:
        return []

    def query_pairs(self) -> QueryPairs:
        """Unencoded parameters: required fields, ``key``, then optional fields."""

        return [
            *self._required_pairs(),
            ("key", self._config.api_key),
            *self._optional_pairs(),
        ]

    def build(self) -> str:
        if not self.validated:
            raise RequestNotValidatedError()
        if self._query is None:
            self._query = encode_query(self.query_pairs())
        self._state = RequestState.BUILT
        return self._query

    @property
    def endpoint_path(self) -> str:
        return f"{self.endpoint.path}/{self._config.output_format}"

    def query_url(self) -> str:
        if self._query is None:
            raise QueryNotBuiltError()
        base_url = self._config.base_url.rstrip("/")
        return f"{base_url}/{self.endpoint_path}?{self._query}"

    def execute(self) -> ResponseT:
        if self._state is RequestState.EXECUTED:
            raise QueryNotBuiltError(
                "the request was already executed; call build() again before execute()"
            )
        if self._state is not RequestState.BUILT or self._query is None:
            raise QueryNotBuiltError()
        self._state = RequestState.EXECUTED
        payload = self._transport.request(self.endpoint_path, query=self._query)
        try:
            return self.endpoint.decode(payload)
        except MapsServerError as exc:
            logger.warning(
                "service returned non-OK status endpoint=%s status=%s",
                self.endpoint.path,
                getattr(exc.status, "wire", exc.status),
            )
            raise

    def run(self) -> ResponseT:
        """Validate, build and execute in one call."""

        self.validate()
        self.build()
        return self.execute()


def as_tuple(value: object, convert: Callable[[Any], Any]) -> tuple[Any, ...]:
    """Wrap a single value or convert each item of a sequence.

    A numeric ``(lat, lng)`` pair counts as a single value.
    """

    if (
        isinstance(value, (str, bytes, Mapping))
        or is_coordinate_pair(value)
        or not isinstance(value, Iterable)
    ):
        return (convert(value),)
    return tuple(convert(item) for item in value)


__all__ = [
    "RequestState",
    "RequestTransport",
    "Endpoint",
    "BaseRequest",
    "as_tuple",
]
