"""Shared helpers for the requests-based adapters."""

import logging
import os
from typing import Any

import requests
from domain.exceptions import UpstreamError

_LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def get_default_timeout() -> float:
    """Read the outbound request timeout from HTTP_TIMEOUT_SECONDS.

    Returns:
        Timeout in seconds, DEFAULT_TIMEOUT_SECONDS if unset or invalid
    """
    raw = os.getenv("HTTP_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError:
        _LOGGER.warning("Invalid HTTP_TIMEOUT_SECONDS %r, using %.0fs", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    if timeout <= 0:
        _LOGGER.warning("HTTP_TIMEOUT_SECONDS must be positive, using %.0fs", DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def decode_json(response: requests.Response, service: str) -> Any:
    """Decode a JSON body, turning decode failures into UpstreamError."""
    try:
        return response.json()
    except ValueError as e:
        raise UpstreamError(f"invalid JSON from {service}: {e}", service=service) from e
