"""
Tile Order
==========
Shuffled permutation that decides when each puzzle tile is uncovered.

Why is this file needed?
------------------------
Every cell of the grid gets a "threshold": the instant (seconds elapsed in the
current hour) from which the cell stops being covered. The thresholds are a
uniform random permutation of [0, width*height), so exactly one tile is
revealed per second.

The linear index of a cell is ``row * width + column`` where the row is the
minute and the column is the second.

Classes:
    TileOrder: Immutable permutation bound to its grid dimensions.
Functions:
    generate: Fisher-Yates shuffle producing a TileOrder.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

MAX_SAFE_INTEGER = 2**53 - 1


@dataclass(frozen=True, eq=False)
class TileOrder:
    """
    Read-only permutation of thresholds for a width x height grid.
    """
    width: int
    height: int
    thresholds: npt.NDArray[np.int64]

    def __post_init__(self) -> None:
        if self.thresholds.shape != (self.width * self.height,):
            raise ValueError(
                f"Expected {self.width * self.height} thresholds, got shape {self.thresholds.shape}."
            )
        self.thresholds.setflags(write=False)

    def __len__(self) -> int:
        return self.thresholds.shape[0]

    def __getitem__(self, index: int) -> int:
        return int(self.thresholds[index])

    def index_of(self, column: int, row: int) -> int:
        """Linear index of the cell (column, row)."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(f"Cell ({column}, {row}) outside {self.width}x{self.height} grid.")
        return row * self.width + column

    def threshold(self, column: int, row: int) -> int:
        return int(self.thresholds[self.index_of(column, row)])

    def as_grid(self) -> npt.NDArray[np.int64]:
        """(height, width) view of the thresholds, rows first."""
        return self.thresholds.reshape(self.height, self.width)


def generate(
    width: int,
    height: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> TileOrder:
    """
    Build a uniformly shuffled tile order with a Fisher-Yates shuffle.

    Args:
        width: Number of columns (seconds).
        height: Number of rows (minutes).
        rng: Random source. Takes precedence over ``seed``.
        seed: Seed for a fresh ``numpy.random.default_rng`` when no rng is given.

    Returns:
        TileOrder holding each integer of [0, width*height) exactly once.

    Raises:
        ValueError: If a dimension is negative or the cell count is not a safe integer.
    """
    if width < 0 or height < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}.")

    size = width * height
    if size > MAX_SAFE_INTEGER:
        raise ValueError(f"Grid of {size} cells exceeds the safe integer range.")

    if rng is None:
        rng = np.random.default_rng(seed)

    order = np.arange(size, dtype=np.int64)
    # walk from the last slot down, swapping with a uniform index in [0, i]
    for i in range(size - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        order[i], order[j] = order[j], order[i]

    logger.debug(f"Generated tile order for a {width}x{height} grid.")
    return TileOrder(width=width, height=height, thresholds=order)
