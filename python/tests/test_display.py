"""Picture-mode helpers: grid sizing and tile slicing."""

from __future__ import annotations

import pytest

from backend.models.display import DisplayConfig, Mode, grid_for_image
from frontend.gui.slicing import fit_size, tile_source_rect


@pytest.mark.parametrize(
    "size,expected",
    [
        ((800, 800), (4, 4)),
        ((800, 600), (4, 5)),
        ((600, 800), (4, 3)),
        ((1920, 1080), (4, 7)),
        ((100, 1000), (4, 2)),  # very tall: clamped up
        ((3000, 100), (4, 10)),  # very wide: clamped down
    ],
)
def test_grid_for_image(size: tuple[int, int], expected: tuple[int, int]) -> None:
    assert grid_for_image(*size) == expected


def test_grid_for_image_rejects_empty_picture() -> None:
    with pytest.raises(ValueError):
        grid_for_image(0, 100)


def test_display_flags() -> None:
    config = DisplayConfig()
    assert config.show_numbers and not config.awaiting_image

    config.mode = Mode.IMAGE
    assert config.awaiting_image and not config.show_numbers

    config.assist = True
    config.image = object()
    assert config.show_numbers and not config.awaiting_image


def test_tile_rect_square() -> None:
    assert tile_source_rect(1, 4, 4, 400, 400) == (0, 0, 100, 100)
    assert tile_source_rect(6, 4, 4, 400, 400) == (100, 100, 100, 100)
    assert tile_source_rect(15, 4, 4, 400, 400) == (200, 300, 100, 100)


def test_tile_rect_rectangular_board() -> None:
    # 2 rows × 3 columns over 100×50: tile 6 would be the blank cell
    assert tile_source_rect(3, 2, 3, 100, 50) == (66, 0, 34, 25)
    assert tile_source_rect(4, 2, 3, 100, 50) == (0, 25, 33, 25)


def test_tiles_cover_picture_without_gaps() -> None:
    rows, columns, width, height = 3, 7, 500, 301
    widths = [tile_source_rect(c + 1, rows, columns, width, height)[2] for c in range(columns)]
    assert sum(widths) == width
    heights = [
        tile_source_rect(r * columns + 1, rows, columns, width, height)[3]
        for r in range(rows)
    ]
    assert sum(heights) == height


@pytest.mark.parametrize("tile", [0, 16, -1])
def test_tile_rect_rejects_unknown_tiles(tile: int) -> None:
    with pytest.raises(ValueError):
        tile_source_rect(tile, 4, 4, 400, 400)


def test_fit_size_keeps_ratio() -> None:
    assert fit_size(800, 400, 420, 420) == (420, 210)
    assert fit_size(300, 600, 420, 420) == (210, 420)
