"""Board generation and the solvability parity rule."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator.generator import GameGenerator
from backend.models.board import BLANK
from backend.models.errors import InvalidDimensionsError

_SHAPES = [(2, 2), (2, 3), (3, 3), (4, 4), (3, 5), (4, 6), (2, 10), (10, 10)]


class _AlwaysZero:
    def randrange(self, stop: int) -> int:
        return 0


def _ids(shape: tuple[int, int]) -> str:
    return f"{shape[0]}x{shape[1]}"


# -- generate -----------------------------------------------------------------


@pytest.mark.parametrize("shape", _SHAPES, ids=_ids)
def test_generated_board_is_a_permutation(shape: tuple[int, int]) -> None:
    rows, columns = shape
    rng = random.Random(1234)
    for _ in range(20):
        board = GameGenerator.generate(rows, columns, rng)
        assert board.shape == (rows, columns)
        assert all(len(row) == columns for row in board.tiles)
        assert sorted(board.flatten()) == list(range(rows * columns))
        assert board.get_tile(*board.blank_pos) == BLANK


@pytest.mark.parametrize("shape", _SHAPES, ids=_ids)
def test_generated_board_is_solvable_and_unsolved(shape: tuple[int, int]) -> None:
    rows, columns = shape
    rng = random.Random(99)
    for _ in range(20):
        board = GameGenerator.generate(rows, columns, rng)
        assert GameGenerator.is_solvable(board.flatten(), columns)
        assert not board.is_solved()


def test_same_seed_same_board() -> None:
    a = GameGenerator.generate(4, 4, random.Random(42))
    b = GameGenerator.generate(4, 4, random.Random(42))
    assert a.tiles == b.tiles


@pytest.mark.parametrize("rows,columns", [(1, 4), (4, 1), (0, 3), (11, 4), (4, 11)])
def test_generate_refuses_bad_dimensions(rows: int, columns: int) -> None:
    with pytest.raises(InvalidDimensionsError):
        GameGenerator.generate(rows, columns)


def test_solved_board() -> None:
    board = GameGenerator.solved(3, 4)
    assert board.flatten() == [*range(1, 12), BLANK]
    assert board.blank_pos == (2, 3)
    assert board.is_solved()


# -- shuffle ------------------------------------------------------------------


def test_shuffle_is_fisher_yates() -> None:
    # j is always 0: swap last↔0, then 2↔0, then 1↔0
    assert GameGenerator.shuffle([1, 2, 3, BLANK], _AlwaysZero()) == [2, 3, BLANK, 1]


def test_shuffle_does_not_mutate_input() -> None:
    flat = [1, 2, 3, BLANK]
    GameGenerator.shuffle(flat, random.Random(0))
    assert flat == [1, 2, 3, BLANK]


# -- solvability --------------------------------------------------------------


def test_count_inversions_ignores_blank() -> None:
    assert GameGenerator.count_inversions([1, 2, 3, BLANK]) == 0
    assert GameGenerator.count_inversions([BLANK, 3, 2, 1]) == 3
    assert GameGenerator.count_inversions([2, BLANK, 1, 3]) == 1


@pytest.mark.parametrize(
    "flat,columns,expected",
    [
        # odd width: parity of inversions only
        ([1, 2, 3, 4, 5, 6, 7, 8, BLANK], 3, True),
        ([1, 2, 3, 4, 5, 6, 8, 7, BLANK], 3, False),
        ([BLANK, 1, 2, 3, 4, 5, 6, 7, 8], 3, True),
        # even width: inversions + blank row must be odd
        ([*range(1, 16), BLANK], 4, True),
        ([*range(1, 14), 15, 14, BLANK], 4, False),
        ([1, 2, 3, BLANK], 2, True),
        ([BLANK, 1, 2, 3], 2, False),
        ([BLANK, 1, 3, 2], 2, True),
    ],
)
def test_is_solvable(flat: list[int], columns: int, expected: bool) -> None:
    assert GameGenerator.is_solvable(flat, columns) is expected
