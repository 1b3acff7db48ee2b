"""Python client for the Phish.Net v3 API.

The package exposes ``PhishNetClient`` together with the request and response
types of each endpoint, the error hierarchy, and date helpers for the API's
``YYYY-MM-DD`` format.
"""

from __future__ import annotations

from phishnet.client import PhishNetClient
from phishnet.config import BASE_URL, DEFAULT_QUERY_RATE, ClientConfig, load_client_config
from phishnet.models import (
    ResponseHeader,
    Setlist,
    SetlistsGetRequest,
    SetlistsRecentRequest,
    SetlistsResponse,
    SetlistsResponseBody,
    Show,
    ShowsQueryRequest,
    ShowsQueryResponse,
    ShowsQueryResponseBody,
)
from phishnet.platform.http import (
    ApiError,
    Clock,
    DecodingError,
    EncodingError,
    ErrorResponse,
    ErrorResponseBody,
    NetworkError,
    PermitSource,
    PhishNetError,
    RequestConstructionError,
    ResponseReadError,
    SystemClock,
    Throttle,
)
from phishnet.platform.logging import setup_logger
from phishnet.shared.dates import format_date, parse_date

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BASE_URL",
    "ClientConfig",
    "Clock",
    "DEFAULT_QUERY_RATE",
    "DecodingError",
    "EncodingError",
    "ErrorResponse",
    "ErrorResponseBody",
    "NetworkError",
    "PermitSource",
    "PhishNetClient",
    "PhishNetError",
    "RequestConstructionError",
    "ResponseHeader",
    "ResponseReadError",
    "Setlist",
    "SetlistsGetRequest",
    "SetlistsRecentRequest",
    "SetlistsResponse",
    "SetlistsResponseBody",
    "Show",
    "ShowsQueryRequest",
    "ShowsQueryResponse",
    "ShowsQueryResponseBody",
    "SystemClock",
    "Throttle",
    "format_date",
    "load_client_config",
    "parse_date",
    "setup_logger",
]
