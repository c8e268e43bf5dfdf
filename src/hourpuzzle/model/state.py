"""
Puzzle Session (Data Model)
===========================
This module defines the central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the tile order, the clock and the hourly images
   in one place instead of module-level globals.
2. Decoupling: The render driver owns one session and passes it by reference
   into every frame; the views read from it, the buttons write to its clock.

Classes:
    PuzzleSession: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
import logging
from typing import Any, Callable, Optional, Sequence

import numpy as np

from hourpuzzle import config
from hourpuzzle.model import reveal
from hourpuzzle.model.clock import ClockSource, TimeFieldPort
from hourpuzzle.model.tile_order import TileOrder, generate

logger = logging.getLogger(__name__)


@dataclass
class PuzzleSession:
    """
    Everything a frame needs. Pass this instance to the renderer and views.
    Images are opaque to the model; only their index (the hour) matters here.
    """
    tile_order: TileOrder
    clock: ClockSource
    images: list[Any] = field(default_factory=list)

    canvas_width: float = config.CANVAS_WIDTH
    canvas_height: float = config.CANVAS_HEIGHT

    @classmethod
    def create(
        cls,
        fields: Optional[TimeFieldPort] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        now: Callable[[], datetime] = datetime.now,
        columns: int = config.GRID_COLUMNS,
        rows: int = config.GRID_ROWS,
    ) -> PuzzleSession:
        """Build a session with a freshly shuffled tile order and a live clock."""
        tile_order = generate(columns, rows, rng=rng, seed=seed)
        clock = ClockSource(fields=fields, now=now)
        logger.info(f"Puzzle session created ({columns}x{rows} tiles).")
        return cls(tile_order=tile_order, clock=clock)

    # --- GRID ---

    @property
    def columns(self) -> int:
        return self.tile_order.width

    @property
    def rows(self) -> int:
        return self.tile_order.height

    # --- IMAGES ---

    def set_images(self, images: Sequence[Any]) -> None:
        if len(images) != config.HOURS_PER_DAY:
            raise ValueError(f"Expected {config.HOURS_PER_DAY} images, got {len(images)}.")
        self.images = list(images)

    @property
    def images_ready(self) -> bool:
        return len(self.images) == config.HOURS_PER_DAY

    def image_for(self, hour: int) -> Any:
        if not 0 <= hour < len(self.images):
            raise IndexError(f"No image for hour {hour}.")
        return self.images[hour]

    # --- TIME ---

    def current_instant(self) -> int:
        return reveal.instant(self.clock.minute(), self.clock.second())

    def revealed_count(self) -> int:
        """Number of cells uncovered at the current instant."""
        return int(np.count_nonzero(~reveal.covered_mask(self.tile_order, self.current_instant())))
