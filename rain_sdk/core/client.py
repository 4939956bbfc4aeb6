"""
Core HTTP client for the Rain API.

Handles URL building, authentication headers, request bodies and response
interpretation. The blocking and async clients share all of it and differ
only in how the prepared request reaches the transport.
"""

import json
import logging
import urllib.parse
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import replace as replace_config
from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar, Union

import httpx

from rain_sdk.core.auth import API_KEY_HEADER, AuthConfig
from rain_sdk.core.config import Config
from rain_sdk.core.errors import (
    ConfigurationError,
    DeserializationError,
    HTTPError,
    RainError,
    ValidationError,
    api_error_for,
    is_api_error_body,
    truncate_text,
)
from rain_sdk.core.transport import (
    AsyncTransport,
    FilePart,
    LocalFile,
    SyncTransport,
    TransportRequest,
    TransportResponse,
)
from rain_sdk.core.types.common import ACCEPTED, NO_CONTENT

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A blocking client hands back the value, an async client a coroutine for it
Result = Union[T, Awaitable[T]]

RESPONSE_JSON = "json"
RESPONSE_BYTES = "bytes"
RESPONSE_EMPTY = "empty"

_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)

# Characters kept as-is when quoting a single path segment
_SEGMENT_SAFE = "-._~!$&'()*+,;=:@"


# =============================================================================
# Encoding helpers
# =============================================================================


def check_header(name: str, value: Any) -> str:
    """
    Validate a header value.

    Raises:
        ValidationError: If the value is not a string of printable ASCII

    """
    if not isinstance(value, str):
        raise ValidationError(f"Invalid header value for {name}: expected str, got {type(value).__name__}")
    for char in value:
        if char != "\t" and not (" " <= char <= "~"):
            raise ValidationError(f"Invalid header value for {name}: {char!r} is not allowed")
    return value


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ValidationError(f"URL encoding error: cannot encode {type(value).__name__} in a query string")


def encode_query(params: dict[str, Any] | None) -> str:
    """
    Encode query parameters.

    None values are dropped, lists become repeated keys.
    """
    if not params:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _query_value(value)))
    return urllib.parse.urlencode(pairs)


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(body: Any) -> bytes:
    """
    Serialize a request body.

    Raises:
        ValidationError: If the body cannot be represented as JSON

    """
    if hasattr(body, "to_dict"):
        body = body.to_dict()
    try:
        return json.dumps(body, default=_json_default).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ValidationError(f"JSON encoding error: {e}") from e


# =============================================================================
# Clients
# =============================================================================


class BaseAPIClient(ABC):
    """
    Shared half of the Rain HTTP client.

    Handles:
    - Authentication via the Api-Key header
    - URL construction against the configured base URL
    - JSON and multipart request bodies
    - Status-driven response interpretation and the error taxonomy
    """

    def __init__(
        self,
        api_key: str | None = None,
        config: Config | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the API client.

        Args:
            api_key: Rain API key (or RAIN_API_KEY env var)
            config: Full configuration (defaults to Config.from_env())
            base_url: Base URL override
            timeout: Request timeout override in seconds

        Raises:
            ConfigurationError: If no API key is available
            ValidationError: If the API key or user agent is not a valid header value

        """
        config = config or Config.from_env()
        if base_url:
            config = replace_config(config, base_url=base_url)
        if timeout is not None:
            config = config.with_timeout(timeout)
        self.config = config
        self.auth = AuthConfig.with_api_key(api_key)

        check_header("User-Agent", self.config.user_agent)
        check_header(API_KEY_HEADER, self.auth.api_key)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def build_url(self, path: str, query: str = "") -> str:
        """
        Append path segments to the base URL.

        Any path already on the base URL is kept and empty segments are dropped.
        Every segment is percent-encoded, so a "?" or "#" in an id stays in the
        path. The encoded ``query`` is attached as-is.

        Raises:
            ConfigurationError: If the base URL has no scheme or host

        """
        base = urllib.parse.urlsplit(self.config.base_url)
        if not base.scheme or not base.netloc:
            raise ConfigurationError(f"Invalid base URL: {self.config.base_url!r}")

        segments = [s for s in base.path.split("/") if s]
        segments.extend(urllib.parse.quote(s, safe=_SEGMENT_SAFE) for s in path.split("/") if s)
        return urllib.parse.urlunsplit((base.scheme, base.netloc, "/" + "/".join(segments), query, ""))

    def _headers(self, extra: dict[str, str] | None = None, multipart: bool = False) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }
        if not multipart:
            headers["Content-Type"] = "application/json"
        headers.update(self.auth.headers())
        for name, value in (extra or {}).items():
            headers[name] = check_header(name, value)
        return headers

    def _prepare(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        files: list[LocalFile | FilePart] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportRequest:
        """Build a complete request. Nothing here touches the network."""
        url = self.build_url(path, encode_query(params))

        if files is not None:
            parts = [f.read() if isinstance(f, LocalFile) else f for f in files]
            return TransportRequest(
                method=method,
                url=url,
                headers=self._headers(headers, multipart=True),
                data={k: str(v) for k, v in (data or {}).items() if v is not None},
                files=parts,
            )

        return TransportRequest(
            method=method,
            url=url,
            headers=self._headers(headers),
            content=encode_json(body) if body is not None else None,
        )

    def _log_request(self, request: TransportRequest) -> None:
        if self.config.enable_logging:
            logger.debug("%s %s", request.method, request.url)

    def _log_response(self, request: TransportRequest, response: TransportResponse) -> None:
        if self.config.enable_logging:
            logger.debug(
                "%s %s -> %d (%d bytes, %.1f ms)",
                request.method,
                request.url,
                response.status_code,
                len(response.content),
                response.elapsed_ms,
            )

    def _interpret(
        self,
        response: TransportResponse,
        response_type: str = RESPONSE_JSON,
        parser: Callable[[Any], Any] | None = None,
        allow_empty: bool = False,
    ) -> Any:
        """
        Turn a response into a value or an error.

        Returns:
            The parsed value, raw bytes, ACCEPTED or NO_CONTENT

        Raises:
            APIError: On a non-2xx response with a JSON object body
            HTTPError: On any other non-2xx response
            ValidationError: On an empty body where a value is required
            DeserializationError: On a body of the wrong shape

        """
        if response_type == RESPONSE_BYTES:
            if not response.is_success:
                raise self._plain_error(response)
            return response.content

        if response_type == RESPONSE_EMPTY:
            if not response.is_success:
                raise self._plain_error(response)
            return ACCEPTED if response.status_code == 202 else NO_CONTENT

        if not response.is_success:
            raise self._error_from_response(response)

        if not response.content:
            return self._empty_result(response, parser, allow_empty)

        try:
            payload = json.loads(response.content)
        except ValueError as e:
            raise DeserializationError(
                f"Invalid JSON response: {e}",
                details={"body": truncate_text(response.text)},
            ) from e
        return _parse(payload, parser)

    def _empty_result(
        self,
        response: TransportResponse,
        parser: Callable[[Any], Any] | None,
        allow_empty: bool,
    ) -> Any:
        if response.status_code == 202 and parser is not None:
            try:
                return parser({})
            except _DECODE_ERRORS:
                # Type needs fields; fall through to ACCEPTED
                pass
        if parser is None or allow_empty:
            return ACCEPTED if response.status_code == 202 else NO_CONTENT
        raise ValidationError("Empty response body", details={"status": response.status_code})

    def _error_from_response(self, response: TransportResponse) -> RainError:
        text = response.text
        try:
            body = json.loads(text) if text else None
        except ValueError:
            body = None
        if is_api_error_body(body):
            return api_error_for(response.status_code, body)

        text = truncate_text(text)
        return HTTPError(
            f"HTTP {response.status_code} from {response.url}: {text}",
            status=response.status_code,
            text=text,
        )

    @staticmethod
    def _plain_error(response: TransportResponse) -> HTTPError:
        return HTTPError(
            f"HTTP {response.status_code}: {response.text}",
            status=response.status_code,
            text=response.text,
        )

    @abstractmethod
    def request(self, method: str, path: str, **kwargs: Any) -> Result[Any]:
        """Send a request; returns the value, or an awaitable for it."""

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        parser: Callable[[Any], T] | None = None,
        headers: dict[str, str] | None = None,
        allow_empty: bool = False,
    ) -> Result[T]:
        """Make a GET request."""
        return self.request("GET", path, params=params, parser=parser, headers=headers, allow_empty=allow_empty)

    def get_bytes(self, path: str, params: dict[str, Any] | None = None) -> Result[bytes]:
        """Make a GET request for a binary body."""
        return self.request("GET", path, params=params, response_type=RESPONSE_BYTES)

    def post(
        self,
        path: str,
        body: Any = None,
        parser: Callable[[Any], T] | None = None,
        allow_empty: bool = False,
    ) -> Result[T]:
        """Make a POST request."""
        return self.request("POST", path, body=body, parser=parser, allow_empty=allow_empty)

    def patch(
        self,
        path: str,
        body: Any = None,
        parser: Callable[[Any], T] | None = None,
        allow_empty: bool = False,
    ) -> Result[T]:
        """Make a PATCH request."""
        return self.request("PATCH", path, body=body, parser=parser, allow_empty=allow_empty)

    def put(
        self,
        path: str,
        body: Any = None,
        parser: Callable[[Any], T] | None = None,
        headers: dict[str, str] | None = None,
        allow_empty: bool = False,
    ) -> Result[T]:
        """Make a PUT request."""
        return self.request("PUT", path, body=body, parser=parser, headers=headers, allow_empty=allow_empty)

    def delete(self, path: str) -> Result[Any]:
        """Make a DELETE request. The response body is ignored."""
        return self.request("DELETE", path, response_type=RESPONSE_EMPTY)

    def put_multipart(
        self,
        path: str,
        files: list[LocalFile | FilePart],
        data: dict[str, str] | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> Result[T]:
        """Make a multipart PUT request and decode the JSON reply, if any."""
        return self.request("PUT", path, files=files, data=data, parser=parser, allow_empty=True)

    def put_multipart_no_content(
        self,
        path: str,
        files: list[LocalFile | FilePart],
        data: dict[str, str] | None = None,
    ) -> Result[Any]:
        """Make a multipart PUT request. The response body is ignored."""
        return self.request("PUT", path, files=files, data=data, response_type=RESPONSE_EMPTY)


def _parse(payload: Any, parser: Callable[[Any], Any] | None) -> Any:
    if parser is None:
        return payload
    try:
        return parser(payload)
    except RainError:
        raise
    except _DECODE_ERRORS as e:
        raise DeserializationError(f"Unexpected response shape: {e!r}", details={"body": payload}) from e


class APIClient(BaseAPIClient):
    """
    Blocking HTTP client for the Rain API.

    Example:
        with APIClient(api_key="...") as client:
            user = client.get("/users/123", parser=User.from_dict)

    """

    def __init__(
        self,
        api_key: str | None = None,
        config: Config | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(api_key=api_key, config=config, base_url=base_url, timeout=timeout)
        self._transport = SyncTransport(self.config.timeout, transport=transport)

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        files: list[LocalFile | FilePart] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        parser: Callable[[Any], Any] | None = None,
        allow_empty: bool = False,
        response_type: str = RESPONSE_JSON,
    ) -> Any:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method
            path: API path relative to the base URL (e.g. /users/{id})
            params: Query parameters
            body: JSON body, a dict or a model with to_dict()
            files: Multipart file parts; makes this a multipart request
            data: Multipart text fields
            headers: Extra headers (e.g. SessionId)
            parser: Converts the decoded JSON into the result type
            allow_empty: Accept an empty body where a value is expected
            response_type: "json", "bytes" or "empty"

        Returns:
            The parsed value, raw bytes, ACCEPTED or NO_CONTENT

        Raises:
            RainError: See the error taxonomy in rain_sdk.core.errors

        """
        prepared = self._prepare(method, path, params, body, files, data, headers)
        self._log_request(prepared)
        response = self._transport.send(prepared)
        self._log_response(prepared, response)
        return self._interpret(response, response_type, parser, allow_empty)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncAPIClient(BaseAPIClient):
    """
    Async HTTP client for the Rain API.

    Example:
        async with AsyncAPIClient(api_key="...") as client:
            user = await client.get("/users/123", parser=User.from_dict)

    """

    def __init__(
        self,
        api_key: str | None = None,
        config: Config | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(api_key=api_key, config=config, base_url=base_url, timeout=timeout)
        self._transport = AsyncTransport(self.config.timeout, transport=transport)

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        files: list[LocalFile | FilePart] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        parser: Callable[[Any], Any] | None = None,
        allow_empty: bool = False,
        response_type: str = RESPONSE_JSON,
    ) -> Any:
        """Async counterpart of APIClient.request."""
        prepared = self._prepare(method, path, params, body, files, data, headers)
        self._log_request(prepared)
        response = await self._transport.send(prepared)
        self._log_response(prepared, response)
        return self._interpret(response, response_type, parser, allow_empty)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "AsyncAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
