"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from backend.models.board import BLANK, Board, check_dimensions

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randrange(self, stop: int, /) -> int: ...


class GameGenerator:
    """Creates solvable puzzles by shuffling and rejecting unsolvable layouts."""

    @staticmethod
    def solved(rows: int, columns: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        check_dimensions(rows, columns)
        return Board.from_flat(rows, columns, GameGenerator._ordered(rows, columns))

    @staticmethod
    def shuffle(flat: list[int], rng: RandomSource | None = None) -> list[int]:
        """Return a Fisher–Yates shuffled copy of *flat*."""
        rng = rng or random
        shuffled = flat[:]
        for i in range(len(shuffled) - 1, 0, -1):
            j = rng.randrange(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled

    @staticmethod
    def generate(
        rows: int, columns: int, rng: RandomSource | None = None
    ) -> Board:
        """Return a random *solvable*, not yet solved board of the given shape."""
        check_dimensions(rows, columns)
        ordered = GameGenerator._ordered(rows, columns)

        attempts = 0
        while True:
            attempts += 1
            flat = GameGenerator.shuffle(ordered, rng)
            if flat == ordered:
                continue
            if GameGenerator.is_solvable(flat, columns):
                break

        logger.debug(
            "Generated %dx%d board after %d attempt(s)", rows, columns, attempts
        )
        return Board.from_flat(rows, columns, flat)

    # -- solvability ----------------------------------------------------------

    @staticmethod
    def count_inversions(flat: list[int]) -> int:
        """Count pairs ``i < j`` of non-blank tiles with ``flat[i] > flat[j]``."""
        tiles = [v for v in flat if v != BLANK]
        inversions = 0
        for i in range(len(tiles) - 1):
            for j in range(i + 1, len(tiles)):
                if tiles[i] > tiles[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(flat: list[int], columns: int) -> bool:
        """Return True if the row-major layout *flat* can reach the goal state.

        With an odd number of columns a layout is solvable when its
        inversion count is even. With an even number of columns the blank's
        row (counted from the top) joins the parity: the sum must be odd.
        """
        inversions = GameGenerator.count_inversions(flat)
        if columns % 2 == 1:
            return inversions % 2 == 0
        blank_row = flat.index(BLANK) // columns
        return (inversions + blank_row) % 2 == 1

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _ordered(rows: int, columns: int) -> list[int]:
        return [*range(1, rows * columns), BLANK]
