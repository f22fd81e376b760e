"""
Doodle panel - card hosting the toolbar and drawing surface.
"""

from typing import Optional

from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from ..config import Config
from ..events.event_bus import EventBus, get_event_bus
from .doodle_toolbar import DoodleToolbar
from .drawing_surface import DrawingSurface


class DoodlePanel(QFrame):
    """Canvas Doodle card: heading, toolbar and a fixed-height surface."""

    def __init__(self, parent: Optional[QWidget] = None, event_bus: Optional[EventBus] = None):
        super().__init__(parent)
        self._event_bus = event_bus or get_event_bus()

        self.setObjectName("doodlePanel")
        self.setStyleSheet("""
            QFrame#doodlePanel {
                background-color: #111f35;
                border: 1px solid #22344f;
                border-radius: 12px;
            }
            QLabel#title { color: #88ccff; font-size: 22px; font-weight: bold; }
            QLabel#subtitle { color: #8a9ab5; }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(8)

        title = QLabel("Canvas Doodle")
        title.setObjectName("title")
        layout.addWidget(title)

        subtitle = QLabel("Express your creativity! Draw freely on the canvas")
        subtitle.setObjectName("subtitle")
        layout.addWidget(subtitle)

        self._toolbar = DoodleToolbar(self, self._event_bus)
        layout.addWidget(self._toolbar)

        self._surface = DrawingSurface(self, self._event_bus)
        self._surface.setFixedHeight(Config.CANVAS_HEIGHT)
        layout.addWidget(self._surface)

    @property
    def toolbar(self) -> DoodleToolbar:
        return self._toolbar

    @property
    def surface(self) -> DrawingSurface:
        return self._surface

    def release(self):
        """Detach child widgets from the event bus."""
        self._surface.release()
        self._toolbar.release()


__all__ = ['DoodlePanel']
