"""Tick sources that drive the session's elapsed-time counter."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol

TickCallback = Callable[[], None]


class TickSource(Protocol):
    """A cancellable repeating task, nominally firing once per second."""

    @property
    def active(self) -> bool: ...

    def start(self, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...


class PolledTicker:
    """Tick source for loops that poll (terminal key loop, pygame frame loop).

    ``poll()`` must be called regularly from the owning loop; it fires the
    callback once for every whole interval elapsed since the last fire, so
    a slow frame never drops a second.
    """

    def __init__(
        self,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._callback: TickCallback | None = None
        self._next_fire: float = 0.0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback
        self._next_fire = self._clock() + self.interval

    def stop(self) -> None:
        self._callback = None

    def poll(self) -> int:
        """Fire any due ticks and return how many fired."""
        fired = 0
        while self._callback is not None and self._clock() >= self._next_fire:
            self._next_fire += self.interval
            self._callback()
            fired += 1
        return fired

    def until_next(self) -> float | None:
        """Seconds until the next tick, or ``None`` when stopped."""
        if self._callback is None:
            return None
        return max(0.0, self._next_fire - self._clock())
