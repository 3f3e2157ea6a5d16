"""Session rankings — kept in memory for the lifetime of the process."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class RankingEntry:
    moves: int
    time: int
    rows: int = 0
    columns: int = 0


class RankingBoard:
    """Append-only list of cleared games, in the order they were cleared.

    Entries are never sorted or de-duplicated; position in the list is the
    rank shown to the player.
    """

    def __init__(self) -> None:
        self._entries: list[RankingEntry] = []

    def add(self, entry: RankingEntry) -> None:
        self._entries.append(entry)

    def clear(self) -> None:
        self._entries.clear()

    # -- queries --------------------------------------------------------------

    @property
    def entries(self) -> tuple[RankingEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RankingEntry]:
        return iter(tuple(self._entries))

    def ranked(self) -> list[tuple[int, RankingEntry]]:
        """Return ``(rank, entry)`` pairs, rank starting at 1."""
        return list(enumerate(self._entries, 1))
