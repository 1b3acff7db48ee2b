"""Where: src/phishnet/config/settings.py
What: Fixed constants describing the Phish.Net v3 API.
Why: Keep protocol defaults in one place for the client, dispatcher and tests.
"""

from __future__ import annotations

from typing import Final

# Root of every endpoint path; may be overridden per client.
BASE_URL: Final[str] = "https://api.phish.net/v3"

# Literal date layout used in both query parameters and response bodies.
DATE_FORMAT: Final[str] = "%Y-%m-%d"

# Query parameter carrying the API key.
API_KEY_PARAM: Final[str] = "apikey"

# By default requests are limited to 120 per minute.
DEFAULT_REQUESTS_PER_MINUTE: Final[int] = 120
DEFAULT_QUERY_RATE: Final[float] = 60.0 / DEFAULT_REQUESTS_PER_MINUTE


__all__ = [
    "API_KEY_PARAM",
    "BASE_URL",
    "DATE_FORMAT",
    "DEFAULT_QUERY_RATE",
    "DEFAULT_REQUESTS_PER_MINUTE",
]
