"""
Rain SDK - Three-layer client for the Rain card-issuing API.

Layers:
- core: Raw types and HTTP clients (blocking and async)
- sdk: High-level RainClient / AsyncRainClient with nice ergonomics
- cli: Command-line interface
"""

import logging

from rain_sdk.core.config import SDK_VERSION, Config, Environment
from rain_sdk.core.errors import (
    APIError,
    ConfigurationError,
    DeserializationError,
    HTTPError,
    RainError,
    TransportError,
    ValidationError,
)
from rain_sdk.core.types import ACCEPTED, NO_CONTENT
from rain_sdk.sdk import AsyncRainClient, RainClient

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = SDK_VERSION
__all__ = [
    "ACCEPTED",
    "APIError",
    "AsyncRainClient",
    "Config",
    "ConfigurationError",
    "DeserializationError",
    "Environment",
    "HTTPError",
    "NO_CONTENT",
    "RainClient",
    "RainError",
    "TransportError",
    "ValidationError",
]
