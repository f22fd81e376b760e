"""
Achievify Doodle - Test Configuration and Fixtures
"""
import os

import pytest

# Headless Qt for widget tests
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from PyQt6.QtWidgets import QApplication, QWidget

from achievify_doodle.events.event_bus import EventBus
from achievify_doodle.widgets.drawing_surface import DrawingSurface


@pytest.fixture(scope='session')
def qapp():
    """Create the QApplication once per test session"""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def event_bus() -> EventBus:
    """Fresh event bus per test (not the global singleton)"""
    return EventBus()


@pytest.fixture
def host(qapp):
    """Visible parent widget so child resizes are delivered synchronously"""
    widget = QWidget()
    widget.resize(400, 300)
    yield widget
    widget.close()
    widget.deleteLater()


@pytest.fixture
def surface(qapp, host, event_bus) -> DrawingSurface:
    """200x100 drawing surface, shown and allocated"""
    canvas = DrawingSurface(host, event_bus)
    canvas.setGeometry(0, 0, 200, 100)
    host.show()
    qapp.processEvents()
    yield canvas
    canvas.release()
