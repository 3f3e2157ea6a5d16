"""Display options handed to the rendering frontends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from backend.models.board import DEFAULT_SIZE, MAX_SIZE, MIN_SIZE


class Mode(StrEnum):
    NORMAL = "normal"
    IMAGE = "image"


@dataclass
class DisplayConfig:
    """How tiles are drawn.

    ``image`` is an opaque reference owned by the frontend (a file path, a
    ``QPixmap``, a ``pygame.Surface``...). The backend only ever stores or
    clears it.
    """

    mode: Mode = Mode.NORMAL
    image: Any = None
    assist: bool = False

    @property
    def awaiting_image(self) -> bool:
        return self.mode is Mode.IMAGE and self.image is None

    @property
    def show_numbers(self) -> bool:
        return self.mode is Mode.NORMAL or self.assist


def grid_for_image(width: int, height: int) -> tuple[int, int]:
    """Return ``(rows, columns)`` matching a picture's aspect ratio.

    Rows are fixed at the default size; columns follow the aspect ratio
    and are clamped to the supported range.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}×{height}.")
    columns = round(DEFAULT_SIZE * width / height)
    columns = max(MIN_SIZE, min(MAX_SIZE, columns))
    return DEFAULT_SIZE, columns
