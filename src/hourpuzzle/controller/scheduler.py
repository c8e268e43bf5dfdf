"""
Frame Scheduler
===============
Drives the render loop at a fixed, configurable rate on the Qt event loop.

All frame callbacks and user events (typing in the time fields, clicking
stop/resume) run on the GUI thread, so the session is never touched
concurrently.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from hourpuzzle import config

logger = logging.getLogger(__name__)


def fps_to_interval_ms(fps: float) -> int:
    if fps <= 0:
        raise ValueError(f"Frame rate must be positive, got {fps}.")
    return max(1, round(1000.0 / fps))


class FrameScheduler(QObject):
    """Emits `frame_due` at the configured frame rate."""
    frame_due = Signal()

    def __init__(self, fps: float = config.DEFAULT_FPS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._fps = fps
        self._timer = QTimer(self)
        self._timer.setInterval(fps_to_interval_ms(fps))
        self._timer.timeout.connect(self.frame_due)

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def set_fps(self, fps: float) -> None:
        self._timer.setInterval(fps_to_interval_ms(fps))
        self._fps = fps
        logger.info(f"Frame rate set to {fps:g} fps.")

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()
            logger.info(f"Render loop started at {self._fps:g} fps.")

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            logger.info("Render loop stopped.")
