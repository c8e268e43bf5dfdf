"""Shared fixtures for the hourpuzzle test-suite."""
import os
from datetime import datetime

import numpy as np
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hourpuzzle.model.clock import ClockSource, InMemoryTimeFields


class FakeNow:
    """Settable wall clock."""

    def __init__(self, value: datetime) -> None:
        self.value = value

    def __call__(self) -> datetime:
        return self.value


class FakeImage:
    """Stand-in for QImage exposing only its size."""

    def __init__(self, width: int = 1400, height: int = 720, hour: int = 0) -> None:
        self._width = width
        self._height = height
        self.hour = hour

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def now():
    return FakeNow(datetime(2024, 5, 17, 14, 7, 9))


@pytest.fixture
def fields():
    return InMemoryTimeFields()


@pytest.fixture
def clock(fields, now):
    return ClockSource(fields=fields, now=now)


@pytest.fixture
def fake_images():
    return [FakeImage(hour=h) for h in range(24)]


@pytest.fixture(scope="session")
def qapp():
    """A single offscreen QApplication for the widget tests."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
