"""
EventBus - Central event system for doodle tool state

Pattern: Observer/Publisher-Subscriber

The toolbar publishes tool, colour and clear requests here; the drawing
surface subscribes. Neither widget holds a reference to the other.
"""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import Config


class EventBus(QObject):
    """
    Central event bus for decoupled communication between components

    Usage:
        event_bus = get_event_bus()
        event_bus.tool_changed.connect(some_handler)
        event_bus.set_tool("eraser")
    """

    # Tool selection events
    tool_changed = pyqtSignal(str)  # "pen" or "eraser"
    color_changed = pyqtSignal(str)  # hex colour from the palette

    # Canvas events
    clear_requested = pyqtSignal()

    def __init__(self):
        super().__init__()

        # State storage
        self._tool: str = "pen"
        self._color: str = Config.DEFAULT_COLOR

    # Getters (read current state)

    def get_tool(self) -> str:
        """Get currently selected tool name"""
        return self._tool

    def get_color(self) -> str:
        """Get currently selected pen colour"""
        return self._color

    # Setters (update state and emit signals)

    def set_tool(self, tool: str):
        """
        Set the active tool

        Args:
            tool: "pen" or "eraser"
        """
        if tool not in ("pen", "eraser"):
            raise ValueError(f"Invalid tool: {tool}")

        if tool != self._tool:
            self._tool = tool
            self.tool_changed.emit(tool)

    def set_color(self, color: str):
        """
        Set the active pen colour

        Args:
            color: Hex colour from the palette
        """
        if not Config.is_palette_color(color):
            raise ValueError(f"Invalid colour: {color}")

        color = color.lower()
        if color != self._color:
            self._color = color
            self.color_changed.emit(color)

    def request_clear(self):
        """Ask the surface to repaint its background"""
        self.clear_requested.emit()


# Singleton instance
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get global EventBus singleton instance

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


__all__ = ['EventBus', 'get_event_bus']
