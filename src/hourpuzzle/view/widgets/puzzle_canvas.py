"""
Puzzle Canvas
=============
QWidget that paints the puzzle, plus the QPainter implementation of the
renderer's drawing surface.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, QSize, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from hourpuzzle.controller.renderer import render_frame
from hourpuzzle.model.reveal import Color, Point, Rect
from hourpuzzle.model.state import PuzzleSession


def to_qcolor(color: Color) -> QColor:
    r, g, b, a = color
    return QColor.fromRgbF(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def to_qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


class QPainterSurface:
    """`DrawSurface` backed by an active QPainter."""

    def __init__(self, painter: QPainter, bounds: QRectF) -> None:
        self.painter = painter
        self.bounds = bounds

    def clear(self) -> None:
        self.painter.save()
        self.painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
        self.painter.fillRect(self.bounds, Qt.GlobalColor.transparent)
        self.painter.restore()

    def draw_image(self, image: QImage, dest: Rect, src: Rect) -> None:
        self.painter.drawImage(to_qrect(dest), image, to_qrect(src))

    def draw_line(self, p1: Point, p2: Point, color: Color, width: float) -> None:
        pen = QPen(to_qcolor(color))
        pen.setWidthF(width)
        self.painter.setPen(pen)
        self.painter.drawLine(QPointF(*p1), QPointF(*p2))

    def draw_rect(self, rect: Rect, color: Color) -> None:
        self.painter.fillRect(to_qrect(rect), to_qcolor(color))


def render_image(session: PuzzleSession) -> QImage:
    """Render the current frame off-screen (used for snapshots)."""
    image = QImage(int(session.canvas_width), int(session.canvas_height),
                   QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        render_frame(session, QPainterSurface(painter, QRectF(image.rect())))
    finally:
        painter.end()
    return image


class PuzzleCanvas(QWidget):
    """Fixed-size canvas; every repaint renders one frame of the session."""

    def __init__(self, session: PuzzleSession, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
        self.last_covered: int | None = None
        self.setFixedSize(self.sizeHint())
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def sizeHint(self) -> QSize:
        return QSize(int(self.session.canvas_width), int(self.session.canvas_height))

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
            surface = QPainterSurface(painter, QRectF(self.rect()))
            self.last_covered = render_frame(self.session, surface)
        finally:
            painter.end()
