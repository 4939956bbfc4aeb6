"""
HTTP transport adapters.

The dispatcher talks to a minimal send(request) -> response interface. Two
thin adapters implement it over httpx, one blocking and one async. They are
the only code that differs between the two execution modes.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

import httpx

from rain_sdk.core.errors import TransportError, ValidationError

MAX_REDIRECTS = 10


@dataclass
class FilePart:
    """Binary part of a multipart form."""

    field_name: str
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass
class LocalFile:
    """A file on disk to send as the binary part of a multipart upload."""

    field_name: str
    path: str | Path
    filename: str | None = None
    content_type: str = "application/octet-stream"

    def read(self) -> FilePart:
        """
        Load the file into a multipart part.

        Raises:
            ValidationError: If the file cannot be read

        """
        path = Path(self.path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ValidationError(f"Failed to read file {str(path)!r}: {e.strerror or e}") from e
        return FilePart(
            field_name=self.field_name,
            filename=self.filename or path.name or "document",
            content=content,
            content_type=self.content_type,
        )


@dataclass
class TransportRequest:
    """Fully prepared outbound request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None
    data: dict[str, str] | None = None
    files: list[FilePart] | None = None


@dataclass
class TransportResponse:
    """Status and raw body of a completed exchange."""

    status_code: int
    content: bytes = b""
    url: str = ""
    elapsed_ms: float = 0.0

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


def _request_kwargs(request: TransportRequest) -> dict:
    kwargs: dict = {"headers": request.headers}
    if request.files is not None:
        kwargs["files"] = [(p.field_name, (p.filename, p.content, p.content_type)) for p in request.files]
        if request.data:
            kwargs["data"] = request.data
    elif request.content is not None:
        kwargs["content"] = request.content
    return kwargs


def _wrap_error(error: Exception, request: TransportRequest, timeout: float) -> Exception:
    """Translate an httpx exception into the SDK taxonomy."""
    if isinstance(error, httpx.TimeoutException):
        return TransportError(f"Request timed out after {timeout} seconds", details={"url": request.url})
    if isinstance(error, httpx.UnsupportedProtocol):
        return ValidationError(f"Unsupported URL: {request.url}")
    if isinstance(error, httpx.TooManyRedirects):
        return TransportError(f"Exceeded {MAX_REDIRECTS} redirects", details={"url": request.url})
    if isinstance(error, httpx.InvalidURL):
        return ValidationError(f"Invalid URL: {error}")
    return TransportError(f"Connection error: {error}", details={"url": request.url})


_HTTPX_ERRORS = (httpx.RequestError, httpx.InvalidURL)


def _build_response(response: httpx.Response, start: float) -> TransportResponse:
    return TransportResponse(
        status_code=response.status_code,
        content=response.content,
        url=str(response.url),
        elapsed_ms=round((time.monotonic() - start) * 1000, 2),
    )


class SyncTransport:
    """Blocking transport over a pooled ``httpx.Client``."""

    def __init__(self, timeout: float, transport: httpx.BaseTransport | None = None):
        self._timeout = timeout
        self._client = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            transport=transport,
        )

    def send(self, request: TransportRequest) -> TransportResponse:
        start = time.monotonic()
        try:
            response = self._client.request(request.method, request.url, **_request_kwargs(request))
        except _HTTPX_ERRORS as e:
            raise _wrap_error(e, request, self._timeout) from e
        return _build_response(response, start)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Non-blocking transport over a pooled ``httpx.AsyncClient``."""

    def __init__(self, timeout: float, transport: httpx.AsyncBaseTransport | None = None):
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            transport=transport,
        )

    async def send(self, request: TransportRequest) -> TransportResponse:
        start = time.monotonic()
        try:
            response = await self._client.request(request.method, request.url, **_request_kwargs(request))
        except _HTTPX_ERRORS as e:
            raise _wrap_error(e, request, self._timeout) from e
        return _build_response(response, start)

    async def aclose(self) -> None:
        await self._client.aclose()
