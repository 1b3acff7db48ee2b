"""Where: src/phishnet/platform/http/dispatcher.py
What: Throttled request dispatcher shared by every endpoint method.
Why: Keep encoding, rate limiting, transport and decoding in one pipeline.
"""

from __future__ import annotations

import re
from typing import Final, TypeVar
from urllib.parse import urlencode

import requests
from pydantic import BaseModel, ValidationError

from phishnet.config.settings import API_KEY_PARAM
from phishnet.platform.logging import logger

from .errors import (
    ApiError,
    DecodingError,
    EncodingError,
    ErrorResponse,
    NetworkError,
    RequestConstructionError,
    ResponseReadError,
)
from .query import encode_query
from .throttle import PermitSource

M = TypeVar("M", bound=BaseModel)

# RFC 7230 token characters.
_METHOD_PATTERN: Final[re.Pattern[str]] = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_SUCCESS_STATUS: Final[int] = 200


class Dispatcher:
    """Encode, throttle, send and decode a single API call.

    The dispatcher never retries: each ``do`` call issues at most one HTTP
    request and either returns a decoded response or raises a
    ``PhishNetError`` subclass.
    """

    def __init__(
        self,
        session: requests.Session,
        permits: PermitSource,
        *,
        base_url: str,
        api_key: str,
        timeout: float | None = None,
    ) -> None:
        self._session: Final[requests.Session] = session
        self._permits: Final[PermitSource] = permits
        self._base_url: Final[str] = base_url
        self._api_key: Final[str] = api_key
        self._timeout: Final[float | None] = timeout

    def do(
        self,
        method: str,
        path: str,
        request: object | None,
        response_type: type[M],
    ) -> M:
        """Perform one throttled API call and decode its JSON body.

        Args:
            method: HTTP method, e.g. ``"GET"``.
            path: Path relative to the base URL, e.g. ``"/shows/query"``.
            request: Request dataclass whose fields become query parameters,
                or ``None`` for endpoints without filters.
            response_type: Pydantic model the success body is decoded into.

        Returns:
            The decoded response.

        Raises:
            EncodingError: The request could not be encoded.
            RequestConstructionError: The method or URL is invalid.
            NetworkError: The transport failed.
            ResponseReadError: The body could not be read.
            DecodingError: The body did not match the expected shape.
            ApiError: The API answered with an error envelope.
        """
        try:
            params = encode_query(request)
        except EncodingError as exc:
            raise EncodingError(str(exc), method=method, path=path) from exc
        params.append((API_KEY_PARAM, self._api_key))
        params.sort(key=lambda pair: pair[0])
        url = f"{self._base_url}{path}?{urlencode(params)}"

        prepared = self._prepare(method, url, path)
        logger.debug("Dispatching %s %s", method.upper(), path)
        status, body = self._send_and_read(prepared, method, path)
        logger.debug("Received HTTP %s for %s %s", status, method.upper(), path)

        if status != _SUCCESS_STATUS:
            envelope = self._decode(body, ErrorResponse, method, path, "unable to unmarshal json error")
            raise ApiError(envelope, status_code=status, method=method, path=path)
        return self._decode(body, response_type, method, path, "unable to unmarshal json response")

    def send(self, prepared: requests.PreparedRequest) -> requests.Response:
        """Send a caller-built request after waiting for a permit.

        Raises:
            NetworkError: The transport failed.
        """
        self._permits.acquire()
        try:
            return self._session.send(prepared, timeout=self._timeout)
        except requests.RequestException as exc:
            raise NetworkError(
                f"unable to perform the API lookup: {exc}",
                method=prepared.method,
                path=prepared.path_url,
            ) from exc

    def _prepare(self, method: str, url: str, path: str) -> requests.PreparedRequest:
        if not _METHOD_PATTERN.fullmatch(method):
            raise RequestConstructionError(
                f"invalid HTTP method {method!r}", method=method, path=path
            )
        try:
            prepared = self._session.prepare_request(requests.Request(method.upper(), url))
            self._session.get_adapter(prepared.url or url)
        except (requests.RequestException, ValueError) as exc:
            raise RequestConstructionError(
                f"unable to create http request for {method.upper()} {path}: {exc}",
                method=method,
                path=path,
            ) from exc
        return prepared

    def _send_and_read(
        self, prepared: requests.PreparedRequest, method: str, path: str
    ) -> tuple[int, bytes]:
        self._permits.acquire()
        try:
            response = self._session.send(prepared, timeout=self._timeout, stream=True)
        except requests.RequestException as exc:
            raise NetworkError(
                f"unable to perform the API lookup: {exc}", method=method, path=path
            ) from exc

        try:
            body = response.content
        except (requests.RequestException, OSError) as exc:
            raise ResponseReadError(
                f"unable to read body: {exc}", method=method, path=path
            ) from exc
        finally:
            response.close()
        return response.status_code, body

    @staticmethod
    def _decode(body: bytes, target: type[M], method: str, path: str, context: str) -> M:
        try:
            return target.model_validate_json(body)
        except ValidationError as exc:
            raise DecodingError(f"{context}: {exc}", method=method, path=path) from exc


__all__ = ["Dispatcher"]
