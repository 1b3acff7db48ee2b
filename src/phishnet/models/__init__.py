"""Typed request and response shapes for each endpoint."""

from .envelope import ResponseHeader
from .setlists import (
    Setlist,
    SetlistsGetRequest,
    SetlistsRecentRequest,
    SetlistsResponse,
    SetlistsResponseBody,
)
from .shows import Show, ShowsQueryRequest, ShowsQueryResponse, ShowsQueryResponseBody

__all__ = [
    "ResponseHeader",
    "Setlist",
    "SetlistsGetRequest",
    "SetlistsRecentRequest",
    "SetlistsResponse",
    "SetlistsResponseBody",
    "Show",
    "ShowsQueryRequest",
    "ShowsQueryResponse",
    "ShowsQueryResponseBody",
]
