"""Shared fixtures for the calendar app tests."""

import os
from datetime import date

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from calendar_app.core.controller import CalendarController
from calendar_app.core.store import EventStore


@pytest.fixture(scope="session")
def app():
    """Create QApplication for testing."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def events_path(tmp_path):
    return tmp_path / "calendar_events.json"


@pytest.fixture
def store(events_path):
    store = EventStore(str(events_path))
    store.load()
    return store


@pytest.fixture
def controller(store):
    return CalendarController(store, today=date(2024, 3, 15))
