"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import MapsClientConfig
from .core.errors import MapsValidationError


def validate_client_config(config: MapsClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise MapsValidationError(str(exc)) from exc


def resolve_client_config(
    *,
    api_key: str | None,
    config: MapsClientConfig | None,
) -> MapsClientConfig:
    if config is not None:
        if api_key is not None and api_key != config.api_key:
            raise MapsValidationError("pass the API key either directly or in config, not both")
        resolved = config
    elif api_key is None:
        raise MapsValidationError("api_key is required")
    else:
        resolved = MapsClientConfig(api_key=api_key)
    validate_client_config(resolved)
    return resolved


__all__ = [
    "validate_client_config",
    "resolve_client_config",
]
