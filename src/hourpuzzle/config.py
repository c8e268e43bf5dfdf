"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (grid size,
   canvas size, frame rate) scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the hourly images) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    PUZZLE_IMAGES_PATH (str): Directory holding the 24 hourly images.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/hourpuzzle/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Puzzle grid: one column per second, one row per minute
GRID_COLUMNS: int = 60
GRID_ROWS: int = 60

# Logical canvas size (px)
CANVAS_WIDTH: int = 700
CANVAS_HEIGHT: int = 360

# Render loop
DEFAULT_FPS: float = 5.0

# Drawing
GRID_LINE_WIDTH: float = 0.1
HOURS_PER_DAY: int = 24
IMAGE_FILENAME_TEMPLATE: str = "{hour}.jpg"

# Global Paths
ASSETS_PATH: str = get_resource_path("assets")
PUZZLE_IMAGES_PATH: str = os.environ.get(
    "HOURPUZZLE_IMAGES", os.path.join(ASSETS_PATH, "images", "puzzle")
)

# Logging
LOG_LEVEL_ENV: str = "HOURPUZZLE_LOG_LEVEL"

if not os.path.exists(PUZZLE_IMAGES_PATH):
    logger.warning(f"Puzzle images path not found at {PUZZLE_IMAGES_PATH}")
