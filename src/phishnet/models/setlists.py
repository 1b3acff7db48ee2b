"""Where: src/phishnet/models/setlists.py
What: Request and response types for the ``setlists/*`` endpoints.
Why: Every setlist endpoint shares one envelope and record layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pydantic import Field, StrictInt, StrictStr

from phishnet.platform.http import query_field
from phishnet.shared.payload import PayloadModel

from .envelope import ResponseHeader


@dataclass(slots=True)
class SetlistsGetRequest:
    """Select a setlist by show id or by show date."""

    show_id: int = query_field("showid", default=0)
    show_date: str | date = query_field("showdate", default="")


@dataclass(slots=True)
class SetlistsRecentRequest:
    limit: int = query_field("limit", default=0)


class Setlist(PayloadModel):
    """A setlist record; ``setlist_data`` holds the API's HTML rendering."""

    show_id: StrictInt = Field(0, alias="showid")
    show_date: StrictStr = Field("", alias="showdate")
    short_date: StrictStr = ""
    long_date: StrictStr = ""
    relative_date: StrictStr = ""
    url: StrictStr = ""
    gap_chart: StrictStr = Field("", alias="gapchart")
    artist: StrictStr = ""
    artist_id: StrictInt = Field(0, alias="artistid")
    venue_id: StrictInt = Field(0, alias="venueid")
    venue: StrictStr = ""
    location: StrictStr = ""
    setlist_data: StrictStr = Field("", alias="setlistdata")
    setlist_notes: StrictStr = Field("", alias="setlistnotes")
    rating: StrictStr = ""


class SetlistsResponseBody(PayloadModel):
    count: StrictInt = 0
    data: list[Setlist] = Field(default_factory=list)


class SetlistsResponse(ResponseHeader):
    response: SetlistsResponseBody | None = None


__all__ = [
    "Setlist",
    "SetlistsGetRequest",
    "SetlistsRecentRequest",
    "SetlistsResponse",
    "SetlistsResponseBody",
]
