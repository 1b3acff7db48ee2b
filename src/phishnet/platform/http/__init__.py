"""HTTP platform package.

Where: platform/http/__init__.py
What: Re-export the dispatcher, throttle, query encoder and error hierarchy.
Why: Endpoint code imports transport concerns from a single path.
"""

from __future__ import annotations

from .dispatcher import Dispatcher
from .errors import (
    ApiError,
    DecodingError,
    EncodingError,
    ErrorResponse,
    ErrorResponseBody,
    NetworkError,
    PhishNetError,
    RequestConstructionError,
    ResponseReadError,
)
from .query import encode_query, query_field
from .throttle import Clock, PermitSource, SystemClock, Throttle

__all__ = [
    "ApiError",
    "Clock",
    "DecodingError",
    "Dispatcher",
    "EncodingError",
    "ErrorResponse",
    "ErrorResponseBody",
    "NetworkError",
    "PermitSource",
    "PhishNetError",
    "RequestConstructionError",
    "ResponseReadError",
    "SystemClock",
    "Throttle",
    "encode_query",
    "query_field",
]
