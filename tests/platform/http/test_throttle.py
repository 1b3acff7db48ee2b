"""Tests for the per-client request throttle."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from phishnet.platform.http import Throttle

if TYPE_CHECKING:
    from conftest import FakeClock, RecordingThrottle


def test_first_permit_is_granted_immediately(fake_clock: FakeClock) -> None:
    throttle = Throttle(0.5, fake_clock)

    throttle.acquire()

    assert fake_clock.sleeps == []


def test_consecutive_permits_are_spaced_by_interval(fake_clock: FakeClock) -> None:
    """N instantaneous permits span at least (N - 1) intervals."""

    throttle = Throttle(0.5, fake_clock)
    start = fake_clock.monotonic()

    for _ in range(5):
        throttle.acquire()

    assert fake_clock.monotonic() - start >= 4 * 0.5
    assert fake_clock.sleeps == pytest.approx([0.5, 0.5, 0.5, 0.5])


def test_no_wait_after_idle_period(fake_clock: FakeClock) -> None:
    throttle = Throttle(0.5, fake_clock)
    throttle.acquire()

    fake_clock.now += 2.0
    throttle.acquire()

    assert fake_clock.sleeps == []


def test_partial_wait_when_interval_partly_elapsed(fake_clock: FakeClock) -> None:
    throttle = Throttle(0.5, fake_clock)
    throttle.acquire()

    fake_clock.now += 0.2
    throttle.acquire()

    assert fake_clock.sleeps == pytest.approx([0.3])


@pytest.mark.parametrize("interval", [0, -1.0, float("nan"), float("inf")])
def test_rejects_non_positive_or_non_finite_interval(interval: float) -> None:
    with pytest.raises(ValueError):
        _ = Throttle(interval)


def test_independent_throttles_do_not_share_budget(fake_clock: FakeClock) -> None:
    first = Throttle(0.5, fake_clock)
    second = Throttle(0.5, fake_clock)

    first.acquire()
    second.acquire()

    assert fake_clock.sleeps == []


def test_concurrent_permits_are_serialized(
    recording_throttle: Callable[[float], RecordingThrottle],
) -> None:
    """Every pair of consecutive grants across contending threads is an interval apart."""

    interval = 0.05
    callers = 6
    throttle = recording_throttle(interval)

    threads = [threading.Thread(target=throttle.acquire) for _ in range(callers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert len(throttle.grants) == callers
    assert all(gap >= interval - 1e-3 for gap in throttle.gaps()), throttle.gaps()
