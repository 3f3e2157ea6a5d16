"""Picture slicing shared by the GUI frontends.

Tile ``v`` shows the piece of the picture that sits at its solved cell
``((v-1) // columns, (v-1) % columns)``.
"""

from __future__ import annotations

Rect = tuple[int, int, int, int]


def tile_source_rect(
    tile: int, rows: int, columns: int, width: int, height: int
) -> Rect:
    """Return ``(x, y, w, h)`` of *tile*'s piece in a ``width×height`` picture.

    Edges are computed from integer division of the full size so that the
    pieces tile the picture exactly, with no gaps or overlap.
    """
    if not 1 <= tile < rows * columns:
        raise ValueError(f"Tile {tile} is not on a {rows}×{columns} board.")
    row, col = divmod(tile - 1, columns)
    x0 = col * width // columns
    x1 = (col + 1) * width // columns
    y0 = row * height // rows
    y1 = (row + 1) * height // rows
    return x0, y0, x1 - x0, y1 - y0


def fit_size(width: int, height: int, max_w: int, max_h: int) -> tuple[int, int]:
    """Scale ``width×height`` to fit inside ``max_w×max_h``, keeping its ratio."""
    scale = min(max_w / width, max_h / height)
    return max(1, int(width * scale)), max(1, int(height * scale))
