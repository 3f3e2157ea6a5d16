"""Move validation and line slides."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.models.board import BLANK, Board, Direction, Position

logger = logging.getLogger(__name__)

# The offset points from the blank to the tile that will slide into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


@dataclass(frozen=True)
class MoveResult:
    board: Board
    accepted: bool
    shifted: int = 0


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


class MoveEngine:
    """Stateless move rules — all methods are static."""

    @staticmethod
    def is_valid_move(board: Board, target: Position) -> bool:
        """A tile can move if it shares the blank's row or column."""
        row, col = target
        if not board.contains(row, col):
            return False
        br, bc = board.blank_pos
        if (row, col) == (br, bc):
            return False
        return row == br or col == bc

    @staticmethod
    def apply_move(board: Board, target: Position) -> MoveResult:
        """Slide every tile between the blank and *target* one step.

        The tiles from *target* up to (but excluding) the blank shift one
        cell toward the blank, and *target* becomes the new blank. An
        adjacent target is an ordinary single-tile move.

        *board* is mutated in place. Invalid targets leave it untouched and
        return ``accepted=False``.
        """
        if not MoveEngine.is_valid_move(board, target):
            logger.debug("Rejected move to %s (blank at %s)", target, board.blank_pos)
            return MoveResult(board=board, accepted=False)

        tr, tc = target
        r, c = board.blank_pos
        dr, dc = _sign(tr - r), _sign(tc - c)
        shifted = 0
        while (r, c) != (tr, tc):
            nr, nc = r + dr, c + dc
            board.tiles[r][c] = board.tiles[nr][nc]
            r, c = nr, nc
            shifted += 1
        board.tiles[tr][tc] = BLANK
        board.blank_pos = (tr, tc)
        return MoveResult(board=board, accepted=True, shifted=shifted)

    @staticmethod
    def target_for_direction(board: Board, direction: Direction) -> Position | None:
        """Return the cell whose tile would slide in *direction*.

        E.g. ``Direction.UP`` picks the tile **below** the blank. Returns
        ``None`` when there is no such tile.
        """
        br, bc = board.blank_pos
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not board.contains(tr, tc):
            return None
        return (tr, tc)

    @staticmethod
    def line_targets(board: Board) -> list[Position]:
        """Every cell that is currently a legal target."""
        br, bc = board.blank_pos
        cells = [(br, c) for c in range(board.columns) if c != bc]
        cells += [(r, bc) for r in range(board.rows) if r != br]
        return sorted(cells)
