"""Helpers shared by the gateway and resolver Flask servers."""

import asyncio
import logging
import os
from datetime import datetime
from functools import wraps
from typing import Any, Callable

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    """Configure root logging from the LOG_LEVEL environment variable."""
    log_level = os.getenv("LOG_LEVEL", "info").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
    )


def async_route(f: Callable) -> Callable:
    """Decorator to run async functions in Flask routes.

    Uses asyncio.run() so each request gets its own event loop.
    """
    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return asyncio.run(f(*args, **kwargs))
    return wrapper


def health_payload(service_name: str) -> dict[str, str]:
    """Body of the /health endpoint."""
    return {
        "status": "healthy",
        "service": service_name,
        "timestamp": datetime.now().isoformat(),
    }


def get_listen_address(default_port: int) -> tuple[str, int]:
    """Read API_HOST and API_PORT, falling back to the service's port."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", str(default_port)))
    return host, port
