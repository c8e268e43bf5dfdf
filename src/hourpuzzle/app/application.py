from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import logging
import os
import sys

from hourpuzzle import config

logger = logging.getLogger(__name__)

ORG_ID = "hourpuzzle"
APP_ID = "hourpuzzle"
ORG_DOMAIN = "hourpuzzle.local"

VISIBLE_APP_NAME = "Puzle Horario"

SETTINGS_FPS_KEY = "render/fps"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app


def configured_fps() -> float:
    """Frame rate from the settings file, falling back to the default."""
    raw = QSettings().value(SETTINGS_FPS_KEY, config.DEFAULT_FPS)
    try:
        fps = float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid '{SETTINGS_FPS_KEY}' setting: {raw!r}")
        return config.DEFAULT_FPS
    if fps <= 0:
        logger.warning(f"Ignoring non-positive '{SETTINGS_FPS_KEY}' setting: {fps}")
        return config.DEFAULT_FPS
    return fps
