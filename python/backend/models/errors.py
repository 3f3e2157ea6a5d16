"""Exceptions raised by the puzzle backend.

Rejected moves are not errors: the move engine reports them through its
return value and leaves the board untouched.
"""

from __future__ import annotations


class InvalidDimensionsError(ValueError):
    """Grid rows or columns fall outside the supported range."""


class InvalidBoardError(ValueError):
    """A tile layout is not a permutation of ``1..N-1`` plus one blank."""
