"""Where: src/phishnet/platform/http/throttle.py
What: Thread-safe throttle granting one request permit per fixed interval.
Why: Phish.Net asks clients to stay under a fixed request rate per API key.
"""

from __future__ import annotations

import math
import threading
import time
from typing import Final, Protocol


class Clock(Protocol):
    """Time source consulted by the throttle."""

    def monotonic(self) -> float:
        ...

    def sleep(self, seconds: float) -> None:
        ...


class PermitSource(Protocol):
    """Anything able to hand out request permits."""

    def acquire(self) -> None:
        ...


class SystemClock:
    """Wall-clock implementation backed by ``time.monotonic`` and ``time.sleep``."""

    def monotonic(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


class Throttle:
    """Serialize callers so consecutive permits are at least ``interval`` apart.

    The lock is held while waiting, so only one caller can be between its
    request for a permit and the grant at any time. The first permit is
    granted immediately.
    """

    def __init__(self, interval: float, clock: Clock | None = None) -> None:
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"throttle interval must be a positive finite number, got {interval!r}")
        self._interval: Final[float] = float(interval)
        self._clock: Final[Clock] = clock or SystemClock()
        self._lock: Final[threading.Lock] = threading.Lock()
        self._last_grant: float | None = None

    @property
    def interval(self) -> float:
        return self._interval

    def acquire(self) -> None:
        """Block the caller until the next permit is due, then take it."""

        with self._lock:
            if self._last_grant is not None:
                wait = self._last_grant + self._interval - self._clock.monotonic()
                if wait > 0:
                    self._clock.sleep(wait)
            self._last_grant = self._clock.monotonic()


__all__ = [
    "Clock",
    "PermitSource",
    "SystemClock",
    "Throttle",
]
