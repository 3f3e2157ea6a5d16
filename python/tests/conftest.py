"""Shared test doubles."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.models.board import Board


class ManualTicker:
    """Tick source the test fires by hand."""

    def __init__(self) -> None:
        self._callback: Callable[[], None] | None = None
        self.starts = 0
        self.stops = 0

    @property
    def active(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.starts += 1

    def stop(self) -> None:
        self._callback = None
        self.stops += 1

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self._callback is not None:
                self._callback()


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()


@pytest.fixture
def make_game(ticker: ManualTicker) -> Callable[..., GamePlay]:
    """Build a session around a fixed layout, wired to the manual ticker."""

    def _make(rows: int, columns: int, flat: list[int]) -> GamePlay:
        board = Board.from_flat(rows, columns, flat)
        return GamePlay.from_board(board, ticker=ticker)

    return _make
