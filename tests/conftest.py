"""Shared pytest fixtures: a local stand-in for the API and throttle clocks."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from phishnet.platform.http import SystemClock, Throttle


@dataclass
class RecordedRequest:
    """A request received by the stub server."""

    method: str
    path: str


@dataclass
class StubAPI:
    """Canned response served for every request, plus a request log."""

    base_url: str
    status: int = 200
    body: bytes = b'{"error_code":0,"error_message":null,"response":{"count":0,"data":[]}}'
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(self, body: str | bytes, status: int = 200) -> None:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status = status


@pytest.fixture
def stub_api() -> Iterator[StubAPI]:
    """Run a threaded HTTP server answering with ``StubAPI.body``."""

    state: dict[str, StubAPI] = {}

    class Handler(BaseHTTPRequestHandler):
        def _reply(self) -> None:
            api = state["api"]
            api.requests.append(RecordedRequest(method=self.command, path=self.path))
            self.send_response(api.status)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(api.body)))
            self.end_headers()
            self.wfile.write(api.body)

        do_GET = _reply
        do_POST = _reply

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            return None

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    host, port = server.server_address[:2]
    state["api"] = StubAPI(base_url=f"http://{host}:{port}")
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield state["api"]
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


class FakeClock:
    """Deterministic clock whose ``sleep`` advances time instantly."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now: float = start
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


class RecordingThrottle(Throttle):
    """Real-time throttle that records when each permit was granted.

    The timestamp is taken before the next caller can enter the throttle, so
    consecutive entries in ``grants`` reflect the spacing callers observed.
    """

    def __init__(self, interval: float) -> None:
        super().__init__(interval, SystemClock())
        self._guard: threading.Lock = threading.Lock()
        self.grants: list[float] = []

    def acquire(self) -> None:
        with self._guard:
            super().acquire()
            self.grants.append(time.monotonic())

    def gaps(self) -> list[float]:
        return [later - earlier for earlier, later in zip(self.grants, self.grants[1:])]


@pytest.fixture
def recording_throttle() -> Callable[[float], RecordingThrottle]:
    return RecordingThrottle
