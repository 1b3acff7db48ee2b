"""Tests for request-to-query-parameter encoding."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest

from phishnet.models import SetlistsGetRequest, ShowsQueryRequest
from phishnet.platform.http import EncodingError, encode_query, query_field


def test_default_request_encodes_to_nothing() -> None:
    assert encode_query(ShowsQueryRequest()) == []


def test_none_request_encodes_to_nothing() -> None:
    assert encode_query(None) == []


def test_only_populated_fields_are_encoded() -> None:
    pairs = encode_query(ShowsQueryRequest(limit=5, order="ASC"))

    assert sorted(pairs) == [("limit", "5"), ("order", "ASC")]


def test_declared_parameter_names_are_used() -> None:
    pairs = encode_query(ShowsQueryRequest(venue_id=142, showyear_gte=1990, city="Seattle"))

    assert sorted(pairs) == [("city", "Seattle"), ("showyear_gte", "1990"), ("venueid", "142")]


def test_sequences_repeat_the_parameter() -> None:
    pairs = encode_query(ShowsQueryRequest(show_ids=["1", "2"]))

    assert pairs == [("showids", "1"), ("showids", "2")]


def test_dates_are_formatted() -> None:
    pairs = encode_query(SetlistsGetRequest(show_date=date(1992, 4, 23)))

    assert pairs == [("showdate", "1992-04-23")]


def test_undeclared_fields_use_attribute_name() -> None:
    @dataclass
    class Request:
        artist: str = ""
        verbose: bool = False

    assert encode_query(Request(artist="phish", verbose=True)) == [
        ("artist", "phish"),
        ("verbose", "true"),
    ]


def test_rejects_non_dataclass_request() -> None:
    with pytest.raises(EncodingError):
        _ = encode_query({"limit": 5})


def test_rejects_dataclass_type_instead_of_instance() -> None:
    with pytest.raises(EncodingError):
        _ = encode_query(ShowsQueryRequest)


def test_rejects_unsupported_field_type() -> None:
    @dataclass
    class Request:
        rating: float = query_field("rating", default=0.0)

    with pytest.raises(EncodingError, match="rating"):
        _ = encode_query(Request(rating=4.5))


def test_rejects_unsupported_sequence_item() -> None:
    @dataclass
    class Request:
        ids: list[object] = query_field("ids", default_factory=list)

    with pytest.raises(EncodingError, match="ids"):
        _ = encode_query(Request(ids=[{"nested": True}]))
