"""Session ranking list."""

from __future__ import annotations

import dataclasses

import pytest

from backend.models.ranking import RankingBoard, RankingEntry


def test_entries_keep_insertion_order() -> None:
    board = RankingBoard()
    slow = RankingEntry(moves=120, time=300)
    fast = RankingEntry(moves=20, time=15)
    board.add(slow)
    board.add(fast)
    board.add(slow)
    assert board.entries == (slow, fast, slow)
    assert board.ranked() == [(1, slow), (2, fast), (3, slow)]
    assert len(board) == 3


def test_entries_are_immutable() -> None:
    entry = RankingEntry(moves=3, time=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.moves = 1  # type: ignore[misc]


def test_entries_view_is_a_snapshot() -> None:
    board = RankingBoard()
    board.add(RankingEntry(moves=1, time=1))
    snapshot = board.entries
    board.add(RankingEntry(moves=2, time=2))
    assert len(snapshot) == 1
    assert [e.moves for e in board] == [1, 2]


def test_clear() -> None:
    board = RankingBoard()
    board.add(RankingEntry(moves=1, time=1))
    board.clear()
    assert board.entries == ()
