"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the time fields and the Puzzle Session (Model) bound to them.
2. Preloads the 24 hourly images before the first frame.
3. Instantiates the Main Window (View) and the render loop (Controller).
"""
import logging
import sys

from hourpuzzle.app.application import configured_fps, create_app
from hourpuzzle.controller.images import HourlyImageProvider
from hourpuzzle.controller.scheduler import FrameScheduler
from hourpuzzle.logging_config import resolve_level, setup_logging
from hourpuzzle.model.state import PuzzleSession
from hourpuzzle.view.main_window import MainWindow
from hourpuzzle.view.widgets.time_fields import TimeFieldEditor

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (level from HOURPUZZLE_LOG_LEVEL, INFO by default)
    setup_logging(level=resolve_level())

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model, bound to the editable time fields
    time_fields = TimeFieldEditor()
    session = PuzzleSession.create(fields=time_fields)

    # 4. Preload images, the first frame needs all of them
    session.set_images(HourlyImageProvider().load_all())

    # 5. Initialize the Main Window and the render loop
    scheduler = FrameScheduler(fps=configured_fps())
    window = MainWindow(session, time_fields, scheduler=scheduler)
    window.show()
    window.start()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
