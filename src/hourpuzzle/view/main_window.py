"""
Main Application Window
=======================
The primary GUI container: the puzzle canvas, the time fields and the
stop/resume buttons.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the buttons and the render timer to the session's
   clock and to the canvas.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QByteArray, QSettings, Qt
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QFileDialog, QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from hourpuzzle.app.application import VISIBLE_APP_NAME
from hourpuzzle.controller.scheduler import FrameScheduler
from hourpuzzle.model.state import PuzzleSession
from hourpuzzle.view.widgets.puzzle_canvas import PuzzleCanvas, render_image
from hourpuzzle.view.widgets.time_fields import TimeFieldEditor

logger = logging.getLogger(__name__)

SETTINGS_GEOMETRY_KEY = "ui/geometry"


class MainWindow(QMainWindow):
    def __init__(
        self,
        session: PuzzleSession,
        time_fields: TimeFieldEditor,
        scheduler: Optional[FrameScheduler] = None,
    ) -> None:
        super().__init__()
        self.session = session
        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. CANVAS ---
        self.canvas = PuzzleCanvas(session)
        main_layout.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignHCenter)

        # --- 2. TIME FIELDS + BUTTONS ---
        controls = QHBoxLayout()
        self.time_fields = time_fields
        controls.addWidget(self.time_fields, 1)

        self.btn_stop = QPushButton("Detener")
        self.btn_stop.clicked.connect(self.on_stop_clicked)
        controls.addWidget(self.btn_stop)

        self.btn_resume = QPushButton("Reanudar")
        self.btn_resume.clicked.connect(self.on_resume_clicked)
        self.btn_resume.setVisible(False)
        controls.addWidget(self.btn_resume)

        main_layout.addLayout(controls)

        # --- 3. STATUS ---
        self.lbl_progress = QLabel("")
        self.statusBar().addPermanentWidget(self.lbl_progress)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.time_fields.edited.connect(self.on_time_edited)

        self.scheduler = scheduler if scheduler is not None else FrameScheduler(parent=self)
        self.scheduler.frame_due.connect(self.on_frame_due)

        self._restore_geometry()

    def _create_actions(self) -> None:
        self.act_snapshot = QAction("Guardar imagen...", self)
        self.act_snapshot.setShortcut("Ctrl+S")
        self.act_snapshot.triggered.connect(self.on_save_snapshot)

        self.act_exit = QAction("Salir", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&Archivo")
        file_menu.addAction(self.act_snapshot)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---

    def _restore_geometry(self) -> None:
        geometry = QSettings().value(SETTINGS_GEOMETRY_KEY)
        if isinstance(geometry, QByteArray):
            self.restoreGeometry(geometry)

    def _update_buttons(self) -> None:
        paused = self.session.clock.is_overridden
        self.btn_stop.setVisible(not paused)
        self.btn_resume.setVisible(paused)

    def _update_progress(self) -> None:
        total = len(self.session.tile_order)
        self.lbl_progress.setText(f"Piezas descubiertas: {self.session.revealed_count()} / {total}")

    def start(self) -> None:
        """Start the render loop. Images must be loaded before this is called."""
        self.scheduler.start()

    def save_snapshot(self, path: str) -> bool:
        """Render the current frame off-screen and write it to ``path``."""
        if not render_image(self.session).save(path):
            logger.error(f"Failed to save snapshot to {path}")
            return False
        logger.info(f"Snapshot saved to {path}")
        return True

    # --- SLOTS ---

    def on_frame_due(self) -> None:
        self.canvas.update()
        self._update_progress()

    def on_stop_clicked(self) -> None:
        self.session.clock.pause()
        self._update_buttons()
        self.canvas.update()

    def on_resume_clicked(self) -> None:
        self.session.clock.resume()
        self._update_buttons()
        self.canvas.update()

    def on_time_edited(self, field: str, text: str) -> None:
        logger.debug(f"Time field '{field}' edited: {text!r}")
        self.canvas.update()

    def on_save_snapshot(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Guardar imagen", "puzle.png", "PNG (*.png)")
        if not path:
            return
        if not self.save_snapshot(path):
            QMessageBox.critical(self, "Error", f"No se pudo guardar la imagen en:\n{path}")
            return
        self.statusBar().showMessage(f"Imagen guardada: {path}", 5000)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.scheduler.stop()
        QSettings().setValue(SETTINGS_GEOMETRY_KEY, self.saveGeometry())
        super().closeEvent(event)
