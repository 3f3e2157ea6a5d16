"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from enum import StrEnum

from backend.models.board import Board


class Status(StrEnum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    CLEARED = "cleared"


class GameState:
    """Holds the current board, move counter, and elapsed time.

    A fresh ``GameState`` is built for every new board so that the board
    and its counters are always replaced together.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.time: int = 0
        self.started: bool = False
        self.cleared: bool = False
        self._running: bool = False

    # -- time tracking --------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._running

    def start_clock(self) -> None:
        if not self.cleared:
            self._running = True

    def stop_clock(self) -> None:
        self._running = False

    def advance(self) -> bool:
        """Add one second if the clock is running. Returns True if counted."""
        if not self._running:
            return False
        self.time += 1
        return True

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def status(self) -> Status:
        if self.cleared:
            return Status.CLEARED
        if self.started:
            return Status.IN_PROGRESS
        return Status.IDLE

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
