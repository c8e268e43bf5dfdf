"""
Hourly Image Provider
=====================
Loads the 24 background images (one per hour of the day) before the first
frame is drawn.

A missing or unreadable file does not stop the puzzle: it is reported in the
log and replaced by a flat grey placeholder of the canvas size.
"""
from __future__ import annotations

import logging
import os

from PySide6.QtGui import QColor, QImage

from hourpuzzle import config

logger = logging.getLogger(__name__)

PLACEHOLDER_COLOR = QColor(128, 128, 128)


class HourlyImageProvider:
    def __init__(
        self,
        directory: str = config.PUZZLE_IMAGES_PATH,
        filename_template: str = config.IMAGE_FILENAME_TEMPLATE,
        placeholder_size: tuple[int, int] = (config.CANVAS_WIDTH, config.CANVAS_HEIGHT),
    ) -> None:
        self.directory = directory
        self.filename_template = filename_template
        self.placeholder_size = placeholder_size

    def path_for(self, hour: int) -> str:
        return os.path.join(self.directory, self.filename_template.format(hour=hour))

    def load_image(self, hour: int) -> QImage:
        """
        Load the image for one hour.

        Raises:
            IndexError: If hour is outside [0, 23].
        """
        if not 0 <= hour < config.HOURS_PER_DAY:
            raise IndexError(f"Hour must be in [0, {config.HOURS_PER_DAY - 1}], got {hour}.")

        path = self.path_for(hour)
        image = QImage(path)
        if image.isNull():
            logger.warning(f"Could not load puzzle image '{path}', using a placeholder.")
            return self._placeholder()
        return image

    def load_all(self) -> list[QImage]:
        logger.info(f"Loading hourly images from: {self.directory}")
        images = [self.load_image(hour) for hour in range(config.HOURS_PER_DAY)]
        logger.info(f"Loaded {len(images)} images.")
        return images

    def _placeholder(self) -> QImage:
        width, height = self.placeholder_size
        image = QImage(width, height, QImage.Format.Format_RGB32)
        image.fill(PLACEHOLDER_COLOR)
        return image
