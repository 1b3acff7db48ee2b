# Where: phishnet.shared.dates
# What: Parse and format the YYYY-MM-DD dates used by the API.
# Why: Both request filters and response records share the same layout.

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Final

from phishnet.config.settings import DATE_FORMAT

# strptime tolerates unpadded fields; the API format does not.
_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` string into a ``date``.

    Args:
        text: Date string as sent or returned by the API.

    Returns:
        date: The calendar date.

    Raises:
        ValueError: If ``text`` is not a valid ``YYYY-MM-DD`` date.
    """
    if not _DATE_PATTERN.fullmatch(text):
        raise ValueError(f"date {text!r} does not match YYYY-MM-DD")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_date(value: date) -> str:
    """Format a ``date`` (or ``datetime``) the way the API expects."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


__all__ = ["format_date", "parse_date"]
