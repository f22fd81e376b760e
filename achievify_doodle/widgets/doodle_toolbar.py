"""
Doodle Toolbar Widget

Single-row toolbar for the drawing surface with:
- Tool selection (draw, erase)
- Palette button opening a 10-swatch colour popup
- Clear button

Selections are published on the EventBus; the surface subscribes there.
"""

from typing import Optional, Dict, List

from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QGridLayout, QPushButton, QFrame, QButtonGroup,
    QMenu, QWidgetAction
)
from PyQt6.QtCore import pyqtSignal, QPoint

from ..config import Config
from ..events.event_bus import EventBus, get_event_bus
from ..surface.tools import DrawingTool


SWATCH_STYLE = """
    QPushButton {{
        background-color: {color};
        border: 2px solid {border};
        border-radius: {radius}px;
    }}
    QPushButton:hover {{ border-color: #ffffff; }}
"""


def swatch_style(color: str, selected: bool = False, size: int = Config.SWATCH_SIZE) -> str:
    """Stylesheet for a round colour swatch button."""
    border = "#ffffff" if selected else "rgba(255, 255, 255, 77)"
    return SWATCH_STYLE.format(color=color, border=border, radius=size // 2)


class PalettePopup(QMenu):
    """Popup menu with one swatch per palette colour."""

    color_selected = pyqtSignal(str)  # hex colour

    COLUMNS = 5

    def __init__(self, current_color: str = Config.DEFAULT_COLOR, parent=None):
        super().__init__(parent)
        self.setStyleSheet("""
            QMenu {
                background-color: #1b2a40;
                border: 1px solid #2f4260;
                padding: 8px;
            }
        """)

        self._current_color = current_color
        self._swatches: Dict[str, QPushButton] = {}

        self._build_ui()

    def _build_ui(self):
        """Build the popup UI."""
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        for index, color in enumerate(Config.PALETTE):
            btn = QPushButton()
            btn.setFixedSize(Config.SWATCH_SIZE, Config.SWATCH_SIZE)
            btn.setToolTip(color)
            btn.clicked.connect(lambda checked, c=color: self._on_swatch_clicked(c))
            self._swatches[color] = btn
            layout.addWidget(btn, index // self.COLUMNS, index % self.COLUMNS)

        self._refresh_swatches()

        action = QWidgetAction(self)
        action.setDefaultWidget(container)
        self.addAction(action)

    def _refresh_swatches(self):
        for color, btn in self._swatches.items():
            btn.setStyleSheet(swatch_style(color, color == self._current_color))

    def _on_swatch_clicked(self, color: str):
        self.set_current_color(color)
        self.color_selected.emit(color)
        self.hide()

    @property
    def swatches(self) -> List[QPushButton]:
        return list(self._swatches.values())

    def set_current_color(self, color: str):
        """Mark a swatch as selected (no signal)."""
        self._current_color = color.lower()
        self._refresh_swatches()


class DoodleToolbar(QWidget):
    """Single-row toolbar for the doodle surface."""

    # Tool definitions: (label, DrawingTool, tooltip)
    TOOLS = [
        ("Draw", DrawingTool.PEN, "Freehand pen (3px)"),
        ("Erase", DrawingTool.ERASER, "Eraser (20px)"),
    ]

    def __init__(self, parent: Optional[QWidget] = None, event_bus: Optional[EventBus] = None):
        super().__init__(parent)
        self._event_bus = event_bus or get_event_bus()
        self._tool_buttons: Dict[DrawingTool, QPushButton] = {}
        self._released = False

        self._setup_ui()
        self._connect_signals()
        self._sync_from_bus()

    def _setup_ui(self):
        """Build the single-row toolbar UI."""
        self.setFixedHeight(40)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        self._tool_btn_style = """
            QPushButton {
                background: #1b2a40; color: #e0e0e0;
                border: 1px solid #2f4260; border-radius: 3px; padding: 4px 10px;
            }
            QPushButton:hover { background: #243753; border-color: #3d5478; }
            QPushButton:checked { background: #88ccff; color: #0a1628; border-color: #88ccff; }
        """

        # Tool button group (exclusive selection)
        self._tool_group = QButtonGroup(self)
        self._tool_group.setExclusive(True)

        for label, tool, tooltip in self.TOOLS:
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setToolTip(tooltip)
            btn.setStyleSheet(self._tool_btn_style)
            self._tool_group.addButton(btn)
            self._tool_buttons[tool] = btn
            layout.addWidget(btn)

        layout.addWidget(self._create_separator())

        # Palette button (shows current colour)
        self._palette_btn = QPushButton()
        self._palette_btn.setFixedSize(28, 28)
        self._palette_btn.setToolTip("Pick a pen colour")
        layout.addWidget(self._palette_btn)

        self._palette_popup = PalettePopup(self._event_bus.get_color(), self)

        layout.addStretch()

        # Clear button
        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setToolTip("Clear the canvas")
        clear_style = self._tool_btn_style.replace("#1b2a40", "#8b1e1e").replace("#2f4260", "#b33a3a")
        self._clear_btn.setStyleSheet(clear_style)
        layout.addWidget(self._clear_btn)

    def _create_separator(self) -> QFrame:
        """Create a vertical separator."""
        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.VLine)
        sep.setStyleSheet("background: #2f4260; max-width: 1px;")
        return sep

    def _connect_signals(self):
        """Connect internal signals."""
        for tool, btn in self._tool_buttons.items():
            btn.clicked.connect(lambda checked, t=tool: self._on_tool_clicked(t))

        self._palette_btn.clicked.connect(self._show_palette)
        self._palette_popup.color_selected.connect(self._on_color_selected)
        self._clear_btn.clicked.connect(self._event_bus.request_clear)

        # Keep buttons in sync when the tool or colour changes elsewhere
        self._event_bus.tool_changed.connect(self._on_bus_tool_changed)
        self._event_bus.color_changed.connect(self._on_bus_color_changed)

    def _sync_from_bus(self):
        self._on_bus_tool_changed(self._event_bus.get_tool())
        self._on_bus_color_changed(self._event_bus.get_color())

    def _on_tool_clicked(self, tool: DrawingTool):
        """Handle tool button click."""
        self._event_bus.set_tool(tool.value)

    def _on_color_selected(self, color: str):
        """Picking a colour switches back to the pen."""
        self._event_bus.set_color(color)
        self._event_bus.set_tool(DrawingTool.PEN.value)

    def _show_palette(self):
        pos = self._palette_btn.mapToGlobal(QPoint(0, self._palette_btn.height()))
        self._palette_popup.popup(pos)

    def _on_bus_tool_changed(self, tool: str):
        btn = self._tool_buttons.get(DrawingTool(tool))
        if btn is not None:
            btn.setChecked(True)

    def _on_bus_color_changed(self, color: str):
        self._palette_btn.setStyleSheet(swatch_style(color, True, 28))
        self._palette_popup.set_current_color(color)

    # ==================== PUBLIC API ====================

    @property
    def current_tool(self) -> DrawingTool:
        """Get the currently selected tool."""
        return DrawingTool(self._event_bus.get_tool())

    @property
    def current_color(self) -> str:
        """Get the currently selected colour."""
        return self._event_bus.get_color()

    @property
    def palette_popup(self) -> PalettePopup:
        return self._palette_popup

    def tool_button(self, tool: DrawingTool) -> QPushButton:
        """Get the button for a tool."""
        return self._tool_buttons[tool]

    @property
    def clear_button(self) -> QPushButton:
        return self._clear_btn

    def release(self):
        """Stop listening to the event bus."""
        if self._released:
            return
        self._event_bus.tool_changed.disconnect(self._on_bus_tool_changed)
        self._event_bus.color_changed.disconnect(self._on_bus_color_changed)
        self._released = True


__all__ = ['DoodleToolbar', 'PalettePopup']
