"""Polled tick source."""

from __future__ import annotations

from backend.engine.gameclock.clock import PolledTicker


class _FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _ticker() -> tuple[PolledTicker, _FakeClock, list[int]]:
    clock = _FakeClock()
    fired: list[int] = []
    ticker = PolledTicker(interval=1.0, clock=clock)
    ticker.start(lambda: fired.append(1))
    return ticker, clock, fired


def test_fires_once_per_whole_second() -> None:
    ticker, clock, fired = _ticker()
    clock.now = 0.5
    assert ticker.poll() == 0
    clock.now = 1.0
    assert ticker.poll() == 1
    clock.now = 1.9
    assert ticker.poll() == 0
    assert len(fired) == 1


def test_catches_up_after_a_slow_frame() -> None:
    ticker, clock, fired = _ticker()
    clock.now = 3.2
    assert ticker.poll() == 3
    clock.now = 4.0
    assert ticker.poll() == 1
    assert len(fired) == 4


def test_stop_suppresses_ticks_and_is_idempotent() -> None:
    ticker, clock, fired = _ticker()
    ticker.stop()
    ticker.stop()
    clock.now = 10.0
    assert ticker.poll() == 0
    assert fired == []
    assert not ticker.active
    assert ticker.until_next() is None


def test_poll_without_start_is_a_no_op() -> None:
    ticker = PolledTicker(clock=_FakeClock())
    assert ticker.poll() == 0
    ticker.stop()


def test_restart_counts_from_the_new_start() -> None:
    ticker, clock, fired = _ticker()
    clock.now = 5.5
    ticker.stop()
    ticker.start(lambda: fired.append(2))
    clock.now = 6.0
    assert ticker.poll() == 0
    assert ticker.until_next() == 0.5
    clock.now = 6.5
    assert ticker.poll() == 1
    assert fired == [2]


def test_callback_may_stop_the_ticker() -> None:
    clock = _FakeClock()
    ticker = PolledTicker(clock=clock)
    ticker.start(ticker.stop)
    clock.now = 5.0
    assert ticker.poll() == 1
    assert not ticker.active
