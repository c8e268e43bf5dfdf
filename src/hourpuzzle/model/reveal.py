"""
Reveal Engine
=============
Decides which puzzle cells are still covered at a given instant, and the
geometry/colours needed to draw them.

Rules:
    - instant = minute * 60 + second
    - a cell is revealed when its threshold < instant
    - a cell is covered when its threshold >= instant (equal stays covered)

All functions here are pure; nothing is cached between frames.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from hourpuzzle.model.tile_order import TileOrder

if TYPE_CHECKING:
    import numpy.typing as npt

SECONDS_PER_MINUTE = 60

BASE_CHANNEL = 50.0
CHANNEL_SPAN = 150.0
HOURS_PER_HALF_DAY = 12
OVERLAY_ALPHA = 200

# (red, green, blue, alpha) in 0..255, floats allowed
Color = tuple[float, float, float, float]
Point = tuple[float, float]

BLACK: Color = (0.0, 0.0, 0.0, 255.0)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


def instant(minute: int, second: int) -> int:
    """Elapsed seconds within the hour."""
    return minute * SECONDS_PER_MINUTE + second


def is_revealed(column: int, row: int, tile_order: TileOrder, current: int) -> bool:
    """True when the cell's threshold has been passed by the ``current`` instant."""
    return tile_order.threshold(column, row) < current


def covered_mask(tile_order: TileOrder, current: int) -> npt.NDArray[np.bool_]:
    """
    Covered state of every cell at once.

    Returns:
        (height, width) boolean array, True where the cell still needs an overlay.
    """
    return tile_order.as_grid() >= current


def covered_cells(tile_order: TileOrder, current: int) -> list[tuple[int, int]]:
    """(column, row) pairs of the covered cells, row-major order."""
    rows, columns = np.nonzero(covered_mask(tile_order, current))
    return [(int(c), int(r)) for r, c in zip(rows, columns)]


def overlay_color(hour: int) -> Color:
    """
    Colour of the covering tiles for the given hour.

    Blue dominates before noon, red after; green is constant.
    """
    step = CHANNEL_SPAN / HOURS_PER_HALF_DAY
    red = BASE_CHANNEL if hour < 12 else BASE_CHANNEL + (hour - 11) * step
    blue = BASE_CHANNEL if hour >= 12 else BASE_CHANNEL + (12 - hour) * step
    return (red, BASE_CHANNEL, blue, float(OVERLAY_ALPHA))


# -------------------------------------------------------------------------------
# Geometry
# -------------------------------------------------------------------------------

def cell_rect(x_index: int, y_index: int, canvas_width: float, canvas_height: float,
              across: int, down: int) -> Rect:
    """Screen rect of a cell on a canvas split into ``across`` x ``down`` cells."""
    cell_w = canvas_width / across
    cell_h = canvas_height / down
    return Rect(cell_w * x_index, cell_h * y_index, cell_w, cell_h)


def tile_rect(column: int, row: int, canvas_width: float, canvas_height: float,
              columns: int, rows: int) -> Rect:
    """
    Screen rect of tile (column, row).

    The minute (row) runs along x and the second (column) along y, so the
    tiles of one minute form a vertical strip.
    """
    return cell_rect(row, column, canvas_width, canvas_height, across=rows, down=columns)


def grid_lines(canvas_width: float, canvas_height: float,
               across: int, down: int) -> list[tuple[Point, Point]]:
    """
    Separator lines of the grid: down + 1 horizontal lines followed by
    across + 1 vertical lines, borders included.
    """
    lines: list[tuple[Point, Point]] = []
    for i in range(down + 1):
        y = (canvas_height / down) * i
        lines.append(((0.0, y), (canvas_width, y)))
    for i in range(across + 1):
        x = (canvas_width / across) * i
        lines.append(((x, 0.0), (x, canvas_height)))
    return lines


def cover_source_rect(src_width: float, src_height: float,
                      dst_width: float, dst_height: float) -> Rect:
    """
    Part of the source image to draw so it fills the destination while
    keeping its aspect ratio (COVER fit). The crop is centred.
    """
    if src_width <= 0 or src_height <= 0 or dst_width <= 0 or dst_height <= 0:
        return Rect(0.0, 0.0, float(src_width), float(src_height))

    scale = max(dst_width / src_width, dst_height / src_height)
    crop_w = dst_width / scale
    crop_h = dst_height / scale
    return Rect((src_width - crop_w) / 2, (src_height - crop_h) / 2, crop_w, crop_h)
