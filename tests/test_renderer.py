"""Tests for the frame renderer and the puzzle session."""
from datetime import datetime

import numpy as np
import pytest

from hourpuzzle.controller.renderer import render_frame
from hourpuzzle.model import reveal
from hourpuzzle.model.clock import TimeField
from hourpuzzle.model.state import PuzzleSession
from hourpuzzle.model.tile_order import TileOrder


class RecordingSurface:
    """Records every drawing call in order."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_image(self, image, dest, src):
        self.calls.append(("image", image, dest, src))

    def draw_line(self, p1, p2, color, width):
        self.calls.append(("line", p1, p2, color, width))

    def draw_rect(self, rect, color):
        self.calls.append(("rect", rect, color))

    def kinds(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def session(fields, now, fake_images):
    s = PuzzleSession.create(fields=fields, now=now, seed=7)
    s.set_images(fake_images)
    return s


class TestRenderFrame:
    """Drawing order and contents of a frame."""

    def test_draw_order(self, session):
        surface = RecordingSurface()
        covered = render_frame(session, surface)

        kinds = surface.kinds()
        assert kinds[0] == "clear"
        assert kinds[1] == "image"
        assert kinds[2:124] == ["line"] * 122
        assert kinds[124:] == ["rect"] * covered

    def test_covered_count_matches_instant(self, session):
        # 14:07:09 -> instant 429
        surface = RecordingSurface()
        assert render_frame(session, surface) == 3600 - 429

    def test_background_is_image_for_current_hour(self, session):
        surface = RecordingSurface()
        render_frame(session, surface)

        _, image, dest, src = surface.calls[1]
        assert image.hour == 14
        assert dest == reveal.Rect(0.0, 0.0, 700.0, 360.0)
        # 1400x720 has the canvas aspect ratio, the whole image is used
        assert src == reveal.Rect(0.0, 0.0, 1400.0, 720.0)

    def test_rects_use_hour_color_and_covered_cells(self, session):
        surface = RecordingSurface()
        render_frame(session, surface)

        rects = [c for c in surface.calls if c[0] == "rect"]
        assert {c[2] for c in rects} == {reveal.overlay_color(14)}

        mask = reveal.covered_mask(session.tile_order, 429)
        row, column = np.argwhere(mask)[0]
        expected = reveal.tile_rect(int(column), int(row), 700, 360, 60, 60)
        assert rects[0][1] == expected

    def test_grid_lines_are_black_hairlines(self, session):
        surface = RecordingSurface()
        render_frame(session, surface)

        lines = [c for c in surface.calls if c[0] == "line"]
        assert all(c[3] == reveal.BLACK for c in lines)
        assert all(c[4] == pytest.approx(0.1) for c in lines)

    def test_frame_normalizes_time_fields(self, session, fields):
        render_frame(session, RecordingSurface())
        assert fields.get(TimeField.HOUR) == "14"
        assert fields.get(TimeField.MINUTE) == "07"
        assert fields.get(TimeField.SECOND) == "09"

    def test_overridden_time_drives_the_frame(self, session, fields):
        session.clock.pause()
        fields.set(TimeField.HOUR, "3")
        fields.set(TimeField.MINUTE, "0")
        fields.set(TimeField.SECOND, "abc")

        surface = RecordingSurface()
        covered = render_frame(session, surface)

        assert covered == 3600
        assert surface.calls[1][1].hour == 3
        assert fields.get(TimeField.SECOND) == "00"
        assert fields.get(TimeField.HOUR) == "3"

    def test_nothing_drawn_before_images_load(self, fields, now):
        session = PuzzleSession.create(fields=fields, now=now, seed=1)
        surface = RecordingSurface()

        assert render_frame(session, surface) is None
        assert surface.kinds() == ["clear"]

    def test_every_cell_covered_at_start_of_hour(self, fields, fake_images):
        session = PuzzleSession.create(fields=fields, now=lambda: datetime(2024, 1, 1, 9, 0, 0), seed=3)
        session.set_images(fake_images)
        assert render_frame(session, RecordingSurface()) == 3600


class TestPuzzleSession:
    def test_create_defaults(self, fields, now):
        session = PuzzleSession.create(fields=fields, now=now, seed=0)
        assert (session.columns, session.rows) == (60, 60)
        assert (session.canvas_width, session.canvas_height) == (700, 360)
        assert not session.images_ready

    def test_set_images_requires_24(self, session, fake_images):
        with pytest.raises(ValueError):
            session.set_images(fake_images[:23])

    def test_image_for_out_of_range(self, session):
        with pytest.raises(IndexError):
            session.image_for(24)

    def test_revealed_count(self, session):
        assert session.current_instant() == 429
        assert session.revealed_count() == 429

    def test_custom_tile_order(self, clock, fake_images):
        order = TileOrder(width=2, height=2, thresholds=np.array([3, 2, 1, 0], dtype=np.int64))
        session = PuzzleSession(tile_order=order, clock=clock)
        session.set_images(fake_images)

        surface = RecordingSurface()
        # instant 429 reveals the whole 2x2 grid
        assert render_frame(session, surface) == 0
        assert surface.kinds().count("line") == 6

    def test_minutes_run_across_and_seconds_down(self, clock, fields, fake_images):
        # one second column, two minute rows
        order = TileOrder(width=1, height=2, thresholds=np.array([0, 1], dtype=np.int64))
        session = PuzzleSession(tile_order=order, clock=clock)
        session.set_images(fake_images)
        clock.pause()
        fields.set(TimeField.MINUTE, "0")
        fields.set(TimeField.SECOND, "0")

        surface = RecordingSurface()
        assert render_frame(session, surface) == 2

        rects = [c[1] for c in surface.calls if c[0] == "rect"]
        assert rects == [reveal.Rect(0.0, 0.0, 350.0, 360.0), reveal.Rect(350.0, 0.0, 350.0, 360.0)]

        lines = [c for c in surface.calls if c[0] == "line"]
        horizontal, vertical = lines[:2], lines[2:]
        assert [c[1][1] for c in horizontal] == [0.0, 360.0]
        assert [c[1][0] for c in vertical] == [0.0, 350.0, 700.0]
