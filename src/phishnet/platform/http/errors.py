"""Where: src/phishnet/platform/http/errors.py
What: Exception hierarchy raised by the request dispatcher.
Why: Callers distinguish encoding, transport and API failures without parsing text.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictInt, StrictStr

from phishnet.shared.payload import PayloadModel


class PhishNetError(Exception):
    """Base exception for every failure surfaced by the client.

    Attributes:
        method: HTTP method of the failed call, when known.
        path: API path of the failed call, when known.
    """

    def __init__(self, message: str, *, method: str | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.method: str | None = method
        self.path: str | None = path


class EncodingError(PhishNetError):
    """Raised when a request object cannot be turned into query parameters."""


class RequestConstructionError(PhishNetError):
    """Raised when the HTTP method or target URL is invalid."""


class NetworkError(PhishNetError):
    """Raised on transport failures such as DNS, refused connections or timeouts."""


class ResponseReadError(PhishNetError):
    """Raised when the response body cannot be fully read."""


class DecodingError(PhishNetError):
    """Raised when a response body does not match the expected JSON shape."""


class ErrorResponseBody(PayloadModel):
    """Message and free-form context returned with an API error."""

    message: StrictStr = ""
    body: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(PayloadModel):
    """Standard error envelope returned with non-200 statuses."""

    error_code: StrictInt = Field(0, alias="error")
    response: ErrorResponseBody | None = None


class ApiError(PhishNetError):
    """Raised when the API answers with a well-formed error envelope."""

    def __init__(
        self,
        envelope: ErrorResponse,
        *,
        status_code: int,
        method: str | None = None,
        path: str | None = None,
    ) -> None:
        self.envelope: ErrorResponse = envelope
        self.status_code: int = status_code
        super().__init__(
            f"API Error: code={self.code} message={self.message!r} (HTTP {status_code})",
            method=method,
            path=path,
        )

    @property
    def code(self) -> int:
        return self.envelope.error_code

    @property
    def message(self) -> str:
        if self.envelope.response is None:
            return ""
        return self.envelope.response.message

    @property
    def body(self) -> dict[str, Any]:
        if self.envelope.response is None:
            return {}
        return self.envelope.response.body


__all__ = [
    "ApiError",
    "DecodingError",
    "EncodingError",
    "ErrorResponse",
    "ErrorResponseBody",
    "NetworkError",
    "PhishNetError",
    "RequestConstructionError",
    "ResponseReadError",
]
