"""Board model and win detection."""

from __future__ import annotations

import pytest

from backend.models.board import BLANK, Board
from backend.models.errors import InvalidBoardError, InvalidDimensionsError

_SOLVED_3x3 = [1, 2, 3, 4, 5, 6, 7, 8, BLANK]


def test_from_flat_reshapes_row_major() -> None:
    board = Board.from_flat(2, 3, [1, 2, 3, 4, BLANK, 5])
    assert board.tiles == [[1, 2, 3], [4, BLANK, 5]]
    assert board.blank_pos == (1, 1)
    assert board.shape == (2, 3)
    assert board.cell_count == 6


def test_from_flat_rejects_wrong_length() -> None:
    with pytest.raises(InvalidBoardError, match="Expected 9 tiles"):
        Board.from_flat(3, 3, [1, 2, 3, BLANK])


def test_from_flat_rejects_duplicates() -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(2, 2, [1, 1, 2, BLANK])


@pytest.mark.parametrize("rows,columns", [(1, 4), (4, 1), (0, 0), (11, 3)])
def test_from_flat_rejects_bad_dimensions(rows: int, columns: int) -> None:
    with pytest.raises(InvalidDimensionsError):
        Board.from_flat(rows, columns, list(range(max(rows * columns, 0))))


def test_flatten_round_trips() -> None:
    flat = [3, 1, BLANK, 2]
    assert Board.from_flat(2, 2, flat).flatten() == flat


def test_solved_3x3() -> None:
    assert Board.from_flat(3, 3, _SOLVED_3x3).is_solved()


def test_swapping_7_and_8_is_not_solved() -> None:
    flat = [1, 2, 3, 4, 5, 6, 8, 7, BLANK]
    assert not Board.from_flat(3, 3, flat).is_solved()


def test_blank_must_be_last() -> None:
    flat = [1, 2, 3, 4, 5, 6, 7, BLANK, 8]
    assert not Board.from_flat(3, 3, flat).is_solved()


def test_is_solved_is_idempotent() -> None:
    for flat in (_SOLVED_3x3, [1, 2, 3, 4, 5, 6, 8, 7, BLANK]):
        board = Board.from_flat(3, 3, flat)
        first = board.is_solved()
        assert board.is_solved() == first
        assert board.flatten() == flat


def test_solved_rectangular_board() -> None:
    board = Board.from_flat(2, 4, [1, 2, 3, 4, 5, 6, 7, BLANK])
    assert board.is_solved()
    assert all(
        board.is_tile_correct(r, c)
        for r in range(board.rows)
        for c in range(board.columns)
    )


def test_is_tile_correct_uses_column_count() -> None:
    # tile 4 belongs at (1, 0) on a 3-column board
    board = Board.from_flat(2, 3, [1, 2, 3, 4, BLANK, 5])
    assert board.is_tile_correct(1, 0)
    assert not board.is_tile_correct(1, 2)
    assert not board.is_tile_correct(1, 1)


def test_find_blank_matches_cached_position() -> None:
    board = Board.from_flat(3, 3, [4, 1, 3, 7, 2, 6, BLANK, 5, 8])
    assert board.find_blank() == board.blank_pos == (2, 0)


def test_copy_is_independent() -> None:
    board = Board.from_flat(2, 2, [1, 2, 3, BLANK])
    clone = board.copy()
    clone.tiles[0][0] = 9
    assert board.tiles[0][0] == 1
