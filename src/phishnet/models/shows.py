"""Where: src/phishnet/models/shows.py
What: Request and response types for the ``shows/query`` endpoint.
Why: Pair the query filters with the show records the endpoint returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pydantic import Field, StrictInt, StrictStr

from phishnet.platform.http import query_field
from phishnet.shared.payload import PayloadModel

from .envelope import ResponseHeader


@dataclass(slots=True)
class ShowsQueryRequest:
    """Filters accepted by ``shows/query``. Unset filters are not sent."""

    show_ids: list[str] = query_field("showids", default_factory=list)
    year: int = query_field("year", default=0)
    month: int = query_field("month", default=0)
    day: int = query_field("day", default=0)
    venue_id: int = query_field("venueid", default=0)
    tour_id: int = query_field("tourid", default=0)
    country: str = query_field("country", default="")
    city: str = query_field("city", default="")
    state: str = query_field("state", default="")
    showdate_gt: str | date = query_field("showdate_gt", default="")
    showdate_gte: str | date = query_field("showdate_gte", default="")
    showdate_lt: str | date = query_field("showdate_lt", default="")
    showdate_lte: str | date = query_field("showdate_lte", default="")
    showyear_gt: int = query_field("showyear_gt", default=0)
    showyear_gte: int = query_field("showyear_gte", default=0)
    showyear_lt: int = query_field("showyear_lt", default=0)
    showyear_lte: int = query_field("showyear_lte", default=0)
    limit: int = query_field("limit", default=0)
    order: str = query_field("order", default="")


class Show(PayloadModel):
    """A single show record."""

    show_id: StrictInt = Field(0, alias="showid")
    show_date: StrictStr = Field("", alias="showdate")
    artist_id: StrictInt = Field(0, alias="artistid")
    billed_as: StrictStr = ""
    link: StrictStr = ""
    location: StrictStr = ""
    venue: StrictStr = ""
    setlist_notes: StrictStr = Field("", alias="setlistnotes")
    venue_id: StrictInt = Field(0, alias="venueid")
    tour_id: StrictInt = Field(0, alias="tourid")
    tour_name: StrictStr = Field("", alias="tourname")
    tour_when: StrictStr = ""
    artist_link: StrictStr = Field("", alias="artistlink")


class ShowsQueryResponseBody(PayloadModel):
    count: StrictInt = 0
    data: list[Show] = Field(default_factory=list)


class ShowsQueryResponse(ResponseHeader):
    response: ShowsQueryResponseBody | None = None


__all__ = [
    "Show",
    "ShowsQueryRequest",
    "ShowsQueryResponse",
    "ShowsQueryResponseBody",
]
