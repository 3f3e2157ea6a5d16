"""Terminal frontend: key mapping and board rendering."""

from __future__ import annotations

import pytest

from backend.models.board import BLANK, Board
from backend.models.ranking import RankingEntry
from frontend.cli.input_handler import resolve
from frontend.cli.rich.app import _render_board, _render_rankings, _step_cursor


@pytest.mark.parametrize(
    "ch,action",
    [
        ("w", "up"),
        ("W", "up"),
        ("d", "right"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("\r", "select"),
        (" ", "select"),
        ("N", "new"),
        ("x", "reset"),
        ("7", "7"),
        ("\x01", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action


def test_cursor_stays_on_board() -> None:
    board = Board.from_flat(2, 3, [1, 2, 3, 4, 5, BLANK])
    assert _step_cursor(board, (0, 0), "cursor_up") == (0, 0)
    assert _step_cursor(board, (0, 0), "cursor_left") == (0, 0)
    assert _step_cursor(board, (0, 0), "cursor_right") == (0, 1)
    assert _step_cursor(board, (1, 2), "cursor_down") == (1, 2)
    assert _step_cursor(board, (1, 2), "cursor_right") == (1, 2)


def test_render_board_shape() -> None:
    board = Board.from_flat(2, 3, [1, 2, 3, 4, 5, BLANK])
    table = _render_board(board, cursor=(1, 0))
    assert table.row_count == 2
    assert len(table.columns) == 3


def test_render_rankings() -> None:
    entries = (RankingEntry(moves=10, time=7, rows=3, columns=3),)
    table = _render_rankings(entries)
    assert table.row_count == 1
