"""Where: src/phishnet/client.py
What: Public Phish.Net client exposing one method per API endpoint.
Why: Pair each endpoint with its request and response types over a shared dispatcher.

Each client owns its own throttle, so independently configured clients never
share a rate budget. All endpoint methods are safe to call from several
threads at once.
"""

from __future__ import annotations

from types import TracebackType
from typing import TypeVar

import requests
from pydantic import BaseModel

from phishnet.config.client_config import ClientConfig
from phishnet.config.settings import BASE_URL, DEFAULT_QUERY_RATE
from phishnet.models import (
    SetlistsGetRequest,
    SetlistsRecentRequest,
    SetlistsResponse,
    ShowsQueryRequest,
    ShowsQueryResponse,
)
from phishnet.platform.http import Clock, Dispatcher, PermitSource, Throttle

M = TypeVar("M", bound=BaseModel)


class PhishNetClient:
    """Rate-limited client for the Phish.Net v3 API.

    Example::

        with PhishNetClient("my-key", timeout=10) as client:
            shows = client.shows_query(ShowsQueryRequest(year=1997, limit=5))
    """

    def __init__(
        self,
        api_key: str,
        *,
        query_rate: float = DEFAULT_QUERY_RATE,
        timeout: float | None = None,
        base_url: str = BASE_URL,
        session: requests.Session | None = None,
        clock: Clock | None = None,
        permits: PermitSource | None = None,
    ) -> None:
        self.config: ClientConfig = ClientConfig(
            api_key=api_key,
            query_rate=query_rate,
            timeout=timeout,
            base_url=base_url,
        )
        self._owns_session: bool = session is None
        self._session: requests.Session = session or requests.Session()
        self._dispatcher: Dispatcher = Dispatcher(
            self._session,
            permits or Throttle(self.config.query_rate, clock),
            base_url=self.config.base_url,
            api_key=self.config.api_key,
            timeout=self.config.timeout,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        session: requests.Session | None = None,
        clock: Clock | None = None,
        permits: PermitSource | None = None,
    ) -> PhishNetClient:
        """Create a client from a prepared ``ClientConfig``.

        Args:
            config: Validated settings.
            session: Transport to share; closed only if the client created it.
            clock: Time source for the default ``Throttle``.
            permits: Permit source replacing the default ``Throttle``.
        """
        return cls(
            config.api_key,
            query_rate=config.query_rate,
            timeout=config.timeout,
            base_url=config.base_url,
            session=session,
            clock=clock,
            permits=permits,
        )

    def close(self) -> None:
        """Release the HTTP transport if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> PhishNetClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def do(self, method: str, path: str, request: object | None, response_type: type[M]) -> M:
        """Dispatch an arbitrary endpoint; see ``Dispatcher.do``."""
        return self._dispatcher.do(method, path, request, response_type)

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """Send a prepared request through the client's throttle."""
        return self._dispatcher.send(request)

    def shows_query(self, request: ShowsQueryRequest) -> ShowsQueryResponse:
        return self.do("POST", "/shows/query", request, ShowsQueryResponse)

    def setlists_get(self, request: SetlistsGetRequest) -> SetlistsResponse:
        return self.do("GET", "/setlists/get", request, SetlistsResponse)

    def setlists_latest(self) -> SetlistsResponse:
        return self.do("GET", "/setlists/latest", None, SetlistsResponse)

    def setlists_recent(self, request: SetlistsRecentRequest) -> SetlistsResponse:
        return self.do("GET", "/setlists/recent", request, SetlistsResponse)

    def setlists_tiph(self) -> SetlistsResponse:
        """Setlists played on this day in Phish history."""
        return self.do("GET", "/setlists/tiph", None, SetlistsResponse)

    def setlists_random(self) -> SetlistsResponse:
        return self.do("GET", "/setlists/random", None, SetlistsResponse)


__all__ = ["PhishNetClient"]
