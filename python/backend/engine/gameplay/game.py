"""Session logic driving one puzzle from its first move to the clear."""

from __future__ import annotations

import logging
from typing import Any

from backend.engine.gameclock import TickSource
from backend.engine.gamegenerator import GameGenerator, RandomSource
from backend.engine.gamemoves import MoveEngine
from backend.engine.gamestate import GameState, Status
from backend.models.board import (
    DEFAULT_SIZE,
    Board,
    Direction,
    Position,
    check_dimensions,
)
from backend.models.display import DisplayConfig, Mode, grid_for_image
from backend.models.ranking import RankingBoard, RankingEntry

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a play session: one board at a time, rankings across boards.

    The elapsed-time counter only moves when ``on_tick`` is called. If a
    *ticker* is supplied, the session starts it on the first accepted move
    and stops it on a win or whenever the board is replaced.
    """

    def __init__(
        self,
        rows: int = DEFAULT_SIZE,
        columns: int = DEFAULT_SIZE,
        *,
        rng: RandomSource | None = None,
        ticker: TickSource | None = None,
        display: DisplayConfig | None = None,
    ) -> None:
        check_dimensions(rows, columns)
        self.rows = rows
        self.columns = columns
        self.display = display if display is not None else DisplayConfig()
        self._rng = rng
        self._ticker = ticker
        self._rankings = RankingBoard()
        self.state = GameState(GameGenerator.generate(rows, columns, rng))

    @classmethod
    def from_board(
        cls,
        board: Board,
        *,
        ticker: TickSource | None = None,
        display: DisplayConfig | None = None,
    ) -> GamePlay:
        """Create a game session from an existing board (e.g. a test fixture)."""
        obj = object.__new__(cls)
        obj.rows = board.rows
        obj.columns = board.columns
        obj.display = display if display is not None else DisplayConfig()
        obj._rng = None
        obj._ticker = ticker
        obj._rankings = RankingBoard()
        obj.state = GameState(board)
        return obj

    # -- session events -------------------------------------------------------

    def new_game(self) -> None:
        """Stop the clock and start over on a fresh board of the current size."""
        self._stop_clock()
        board = GameGenerator.generate(self.rows, self.columns, self._rng)
        self.state = GameState(board)

    def reset(self) -> None:
        """Like ``new_game``, but also drop the picture and go back to 4×4."""
        self.display.image = None
        self.rows = self.columns = DEFAULT_SIZE
        logger.info("Session reset")
        self.new_game()

    def resize(self, rows: int, columns: int) -> None:
        check_dimensions(rows, columns)
        self.rows = rows
        self.columns = columns
        logger.info("Resized to %dx%d", rows, columns)
        self.new_game()

    def set_mode(self, mode: Mode) -> None:
        """Switch between numbered and picture tiles; always starts a 4×4 game."""
        self.display.mode = Mode(mode)
        self.display.image = None
        self.rows = self.columns = DEFAULT_SIZE
        logger.info("Mode set to %s", self.display.mode)
        self.new_game()

    def set_image(self, image: Any, width: int, height: int) -> None:
        """Use *image* for the tiles and size the grid to its aspect ratio."""
        rows, columns = grid_for_image(width, height)
        self.display.mode = Mode.IMAGE
        self.display.image = image
        self.resize(rows, columns)

    def set_assist(self, assist: bool) -> None:
        self.display.assist = assist

    def clear_rankings(self) -> None:
        self._rankings.clear()

    def on_tick(self) -> None:
        """Advance the elapsed time by one second while a game is running."""
        self.state.advance()

    # -- movement -------------------------------------------------------------

    def apply_move(self, position: Position) -> bool:
        """Slide the line of tiles from *position* toward the blank.

        Returns True if the move was applied. Rejected moves change nothing.
        """
        state = self.state
        if state.cleared or self.display.awaiting_image:
            return False

        result = MoveEngine.apply_move(state.board, position)
        if not result.accepted:
            return False

        state.increment_moves()
        if not state.started:
            state.started = True
            self._start_clock()

        if state.board.is_solved():
            self._stop_clock()
            self._rankings.add(
                RankingEntry(
                    moves=state.moves,
                    time=state.time,
                    rows=self.rows,
                    columns=self.columns,
                )
            )
            state.cleared = True
            logger.info(
                "Cleared %dx%d in %d moves, %ds",
                self.rows, self.columns, state.moves, state.time,
            )
        return True

    def move_tile(self, row: int, col: int) -> bool:
        return self.apply_move((row, col))

    def move(self, direction: Direction) -> bool:
        """Slide the tile next to the blank in *direction* (where the tile goes).

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        target = MoveEngine.target_for_direction(self.state.board, direction)
        if target is None:
            return False
        return self.apply_move(target)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def time(self) -> int:
        return self.state.time

    @property
    def started(self) -> bool:
        return self.state.started

    @property
    def cleared(self) -> bool:
        return self.state.cleared

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def rankings(self) -> tuple[RankingEntry, ...]:
        return self._rankings.entries

    @property
    def is_won(self) -> bool:
        return self.state.cleared

    # -- helpers --------------------------------------------------------------

    def _start_clock(self) -> None:
        self.state.start_clock()
        if self._ticker is not None:
            self._ticker.start(self.on_tick)

    def _stop_clock(self) -> None:
        self.state.stop_clock()
        if self._ticker is not None:
            self._ticker.stop()
