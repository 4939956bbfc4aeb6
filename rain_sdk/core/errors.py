"""
Error taxonomy for the Rain SDK.

Every failure reaches the caller as a RainError subclass. Nothing is retried
or swallowed inside the library.
"""

from typing import Any

# Longest slice of an unparseable error body kept on HTTPError
MAX_ERROR_TEXT = 200


class RainError(Exception):
    """Base error class for SDK errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message, "type": type(self).__name__}
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(RainError):
    """Client cannot be built or cannot address the API (bad base URL, missing key)."""


class TransportError(RainError):
    """Connection, TLS, timeout or redirect failure; no HTTP response was interpreted."""


class ValidationError(RainError):
    """Local failure around a call: bad header, unreadable file, unencodable body or query."""


class DeserializationError(RainError):
    """Response body was present but did not match the expected type."""


class HTTPError(RainError):
    """Non-2xx response whose body is not a structured API error."""

    def __init__(self, message: str, status: int, text: str = ""):
        super().__init__(message)
        self.status = status
        self.text = text

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status
        return result


class APIError(RainError):
    """Structured API error response: {message?, code?, details?} plus the HTTP status."""

    def __init__(
        self,
        message: str,
        status: int = 0,
        code: str | None = None,
        details: Any = None,
    ):
        super().__init__(message, details)
        self.status = status
        self.code = code

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        if self.status:
            result["status"] = self.status
        if self.code:
            result["code"] = self.code
        return result


class BadRequestError(APIError):
    """400 - the request was malformed or failed server-side validation."""


class UnauthorizedError(APIError):
    """401 - missing or invalid API key."""


class ForbiddenError(APIError):
    """403 - the key may not access this resource."""


class NotFoundError(APIError):
    """404 - the resource does not exist."""


class ConflictError(APIError):
    """409 - the resource is in a conflicting state."""


class LockedError(APIError):
    """423 - the resource is locked."""


class InternalServerError(APIError):
    """500 - the API failed internally."""


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    423: LockedError,
    500: InternalServerError,
}


def is_api_error_body(body: Any) -> bool:
    """True for a JSON object whose message and code, when present, are strings."""
    if not isinstance(body, dict):
        return False
    return all(body.get(key) is None or isinstance(body[key], str) for key in ("message", "code"))


def api_error_for(status: int, body: dict[str, Any]) -> APIError:
    """Build the most specific APIError for a parsed error body."""
    message = body.get("message")
    code = body.get("code")

    error_cls = _STATUS_ERRORS.get(status, APIError)
    return error_cls(
        message or code or "API error",
        status=status,
        code=code,
        details=body.get("details"),
    )


def truncate_text(text: str, limit: int = MAX_ERROR_TEXT) -> str:
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text
