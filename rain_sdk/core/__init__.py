"""
Core layer - Raw types and HTTP client.

This layer provides:
- Typed dataclasses matching the Rain API schema
- Low-level HTTP clients (blocking and async) with auth and error handling
"""

from rain_sdk.core.auth import AuthConfig
from rain_sdk.core.client import APIClient, AsyncAPIClient, BaseAPIClient
from rain_sdk.core.config import Config, Environment
from rain_sdk.core.errors import (
    APIError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    DeserializationError,
    ForbiddenError,
    HTTPError,
    InternalServerError,
    LockedError,
    NotFoundError,
    RainError,
    TransportError,
    UnauthorizedError,
    ValidationError,
)
from rain_sdk.core.transport import FilePart, LocalFile

__all__ = [
    "APIClient",
    "APIError",
    "AsyncAPIClient",
    "AuthConfig",
    "BadRequestError",
    "BaseAPIClient",
    "Config",
    "ConfigurationError",
    "ConflictError",
    "DeserializationError",
    "Environment",
    "FilePart",
    "ForbiddenError",
    "HTTPError",
    "InternalServerError",
    "LocalFile",
    "LockedError",
    "NotFoundError",
    "RainError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]
