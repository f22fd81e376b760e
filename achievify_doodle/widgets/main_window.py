"""
Main window for Achievify Doodle
"""

import logging

from PyQt6.QtWidgets import QMainWindow

from ..config import Config
from .doodle_panel import DoodlePanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window holding the doodle panel."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"{Config.APP_NAME} v{Config.APP_VERSION}")
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)
        self.setStyleSheet("QMainWindow { background-color: #0a1628; }")

        self._panel = DoodlePanel(self)
        self.setCentralWidget(self._panel)

    @property
    def panel(self) -> DoodlePanel:
        return self._panel

    def closeEvent(self, event):
        logger.info("Closing main window")
        self._panel.release()
        super().closeEvent(event)


__all__ = ['MainWindow']
