"""
Frame Renderer
==============
Draws one frame of the puzzle onto an abstract drawing surface.

Why is this file needed?
------------------------
The drawing order and the per-cell reveal check live here, independent of
Qt. The canvas widget supplies a QPainter-backed `DrawSurface`; tests supply
a recording fake.

Frame order:
    1. clear
    2. background image for the current hour (cover fit)
    3. grid lines (columns + 1 horizontal, rows + 1 vertical)
    4. covered cells, filled with the hour's overlay colour
    5. time fields synchronised with the clock
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

from hourpuzzle import config
from hourpuzzle.model import reveal
from hourpuzzle.model.reveal import Color, Point, Rect
from hourpuzzle.model.state import PuzzleSession

logger = logging.getLogger(__name__)


class DrawSurface(Protocol):
    def clear(self) -> None: ...
    def draw_image(self, image: Any, dest: Rect, src: Rect) -> None: ...
    def draw_line(self, p1: Point, p2: Point, color: Color, width: float) -> None: ...
    def draw_rect(self, rect: Rect, color: Color) -> None: ...


def draw_background(session: PuzzleSession, surface: DrawSurface, hour: int) -> None:
    image = session.image_for(hour)
    dest = Rect(0.0, 0.0, float(session.canvas_width), float(session.canvas_height))
    src = reveal.cover_source_rect(image.width(), image.height(), dest.width, dest.height)
    surface.draw_image(image, dest, src)


def draw_grid(session: PuzzleSession, surface: DrawSurface) -> None:
    # minutes run across, seconds down
    for p1, p2 in reveal.grid_lines(session.canvas_width, session.canvas_height,
                                    across=session.rows, down=session.columns):
        surface.draw_line(p1, p2, reveal.BLACK, config.GRID_LINE_WIDTH)


def draw_covered(session: PuzzleSession, surface: DrawSurface, hour: int, instant: int) -> int:
    """Fill every still-covered cell. Returns the number of cells drawn."""
    color = reveal.overlay_color(hour)
    cells = reveal.covered_cells(session.tile_order, instant)
    for column, row in cells:
        rect = reveal.tile_rect(column, row, session.canvas_width, session.canvas_height,
                                session.columns, session.rows)
        surface.draw_rect(rect, color)
    return len(cells)


def render_frame(session: PuzzleSession, surface: DrawSurface) -> Optional[int]:
    """
    Render one frame.

    Returns:
        Number of covered cells drawn, or None when the images are not loaded
        yet (only the clear step runs in that case).
    """
    surface.clear()

    if not session.images_ready:
        logger.debug("Images not loaded yet, skipping frame.")
        return None

    clock = session.clock
    hour = clock.hour()
    current = reveal.instant(clock.minute(), clock.second())

    draw_background(session, surface, hour)
    draw_grid(session, surface)
    covered = draw_covered(session, surface, hour, current)

    clock.normalize()
    return covered
