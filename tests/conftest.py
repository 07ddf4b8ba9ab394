"""Shared pytest fixtures for Pomodoro Focus tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from pomodorofocus.settings import Settings
from pomodorofocus.timer.engine import TimerEngine

from helpers import AlertRecorder


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def alerts():
    """Records every alert the engine fires."""
    return AlertRecorder()


@pytest.fixture
def engine(qapp, alerts):
    """Fresh TimerEngine with default settings, auto-start OFF."""
    e = TimerEngine(parent=None, alert=alerts)
    yield e
    e.dispose()


@pytest.fixture
def engine_auto(qapp, alerts):
    """Fresh TimerEngine with auto-start ON."""
    e = TimerEngine(parent=None, settings=Settings(auto_start_next=True), alert=alerts)
    yield e
    e.dispose()
