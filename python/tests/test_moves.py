"""Move validation and line slides."""

from __future__ import annotations

import pytest

from backend.engine.gamemoves.engine import MoveEngine
from backend.models.board import BLANK, Board, Direction

# 4×4 with the blank at (1, 1):
#    1  2  3  4
#    5  .  6  7
#    8  9 10 11
#   12 13 14 15
_FLAT_4x4 = [1, 2, 3, 4, 5, BLANK, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15]


def _board() -> Board:
    return Board.from_flat(4, 4, _FLAT_4x4)


def test_diagonal_target_is_rejected() -> None:
    board = _board()
    result = MoveEngine.apply_move(board, (2, 2))
    assert not result.accepted
    assert result.shifted == 0
    assert board.flatten() == _FLAT_4x4
    assert board.blank_pos == (1, 1)


@pytest.mark.parametrize("target", [(1, 1), (-1, 1), (1, 4), (4, 1)])
def test_blank_and_off_board_targets_are_rejected(target: tuple[int, int]) -> None:
    board = _board()
    assert not MoveEngine.is_valid_move(board, target)
    assert not MoveEngine.apply_move(board, target).accepted
    assert board.flatten() == _FLAT_4x4


def test_adjacent_move() -> None:
    board = _board()
    result = MoveEngine.apply_move(board, (1, 2))
    assert result.accepted
    assert result.shifted == 1
    assert board.tiles[1] == [5, 6, BLANK, 7]
    assert board.blank_pos == (1, 2)


def test_row_slide_right_to_left() -> None:
    board = _board()
    result = MoveEngine.apply_move(board, (1, 3))
    assert result.shifted == 2
    assert board.tiles[1] == [5, 6, 7, BLANK]
    assert board.blank_pos == (1, 3)


def test_row_slide_left_to_right() -> None:
    board = _board()
    MoveEngine.apply_move(board, (1, 0))
    assert board.tiles[1] == [BLANK, 5, 6, 7]


def test_column_slide_upward() -> None:
    board = _board()
    result = MoveEngine.apply_move(board, (3, 1))
    assert result.shifted == 2
    assert [board.tiles[r][1] for r in range(4)] == [2, 9, 13, BLANK]
    assert board.blank_pos == (3, 1)


def test_column_slide_downward() -> None:
    board = _board()
    MoveEngine.apply_move(board, (0, 1))
    assert [board.tiles[r][1] for r in range(4)] == [BLANK, 2, 9, 13]


def test_slide_leaves_other_lines_alone() -> None:
    board = _board()
    MoveEngine.apply_move(board, (3, 1))
    assert board.tiles[0] == [1, 2, 3, 4]
    assert [board.tiles[r][0] for r in range(4)] == [1, 5, 8, 12]
    assert [board.tiles[r][3] for r in range(4)] == [4, 7, 11, 15]


@pytest.mark.parametrize("target", MoveEngine.line_targets(_board()))
def test_slide_preserves_tiles(target: tuple[int, int]) -> None:
    board = _board()
    assert MoveEngine.apply_move(board, target).accepted
    assert sorted(board.flatten()) == sorted(_FLAT_4x4)
    assert board.get_tile(*target) == BLANK
    assert board.find_blank() == board.blank_pos == target


def test_slide_then_back_restores_board() -> None:
    board = _board()
    MoveEngine.apply_move(board, (1, 3))
    MoveEngine.apply_move(board, (1, 1))
    assert board.flatten() == _FLAT_4x4


def test_line_targets() -> None:
    targets = MoveEngine.line_targets(_board())
    assert len(targets) == 3 + 3
    assert (1, 1) not in targets
    assert all(r == 1 or c == 1 for r, c in targets)


def test_line_targets_rectangular() -> None:
    board = Board.from_flat(2, 5, [1, 2, 3, 4, 5, 6, 7, 8, 9, BLANK])
    assert len(MoveEngine.line_targets(board)) == 4 + 1


@pytest.mark.parametrize(
    "direction,expected",
    [
        (Direction.UP, (2, 1)),
        (Direction.DOWN, (0, 1)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (1, 0)),
    ],
)
def test_target_for_direction(direction: Direction, expected: tuple[int, int]) -> None:
    assert MoveEngine.target_for_direction(_board(), direction) == expected


def test_target_for_direction_at_edge() -> None:
    board = Board.from_flat(2, 2, [1, 2, 3, BLANK])
    assert MoveEngine.target_for_direction(board, Direction.UP) is None
    assert MoveEngine.target_for_direction(board, Direction.LEFT) is None
    assert MoveEngine.target_for_direction(board, Direction.DOWN) == (0, 1)
    assert MoveEngine.target_for_direction(board, Direction.RIGHT) == (1, 0)
