"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import InvalidBoardError, InvalidDimensionsError

BLANK = 0

MIN_SIZE = 2
MAX_SIZE = 10
DEFAULT_SIZE = 4

Position = tuple[int, int]


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def check_dimensions(rows: int, columns: int) -> None:
    """Raise ``InvalidDimensionsError`` unless both sides are in range."""
    for name, value in (("rows", rows), ("columns", columns)):
        if not MIN_SIZE <= value <= MAX_SIZE:
            raise InvalidDimensionsError(
                f"{name} must be between {MIN_SIZE} and {MAX_SIZE}, got {value}."
            )


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a 2D list of ints, ``rows`` lists of ``columns``
    values each. ``BLANK`` (0) represents the empty slot.
    """

    rows: int
    columns: int
    tiles: list[list[int]]
    blank_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, columns: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        check_dimensions(rows, columns)
        if len(flat) != rows * columns:
            raise InvalidBoardError(
                f"Expected {rows * columns} tiles for a {rows}×{columns} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(rows * columns)):
            raise InvalidBoardError(
                f"Tiles must be 1..{rows * columns - 1} plus one blank."
            )
        tiles: list[list[int]] = []
        blank_pos: Position = (0, 0)
        for r in range(rows):
            row = list(flat[r * columns : (r + 1) * columns])
            for c, v in enumerate(row):
                if v == BLANK:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(rows=rows, columns=columns, tiles=tiles, blank_pos=blank_pos)

    # -- queries --------------------------------------------------------------

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def flatten(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def find_blank(self) -> Position:
        """Scan the grid for the blank; ``blank_pos`` caches this."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == BLANK:
                    return (r, c)
        raise InvalidBoardError("Board has no blank tile.")

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions.

        The row-major sequence must read ``1, 2, ..., N-1`` followed by the
        blank in the last cell.
        """
        flat = self.flatten()
        for i, v in enumerate(flat[:-1]):
            if v != i + 1:
                return False
        return flat[-1] == BLANK

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == self.rows - 1 and col == self.columns - 1
        expected_row = (val - 1) // self.columns
        expected_col = (val - 1) % self.columns
        return row == expected_row and col == expected_col

    def copy(self) -> Board:
        return Board(
            rows=self.rows,
            columns=self.columns,
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )
