"""
DrawingSurface - Freehand doodle canvas

Translates mouse and touch input into strokes on a pixel buffer:
- Pen (3px, palette colour)
- Eraser (20px, overpaints with the background colour)
- Clear

The buffer is reallocated and repainted whenever the widget is resized or
its device pixel ratio changes; earlier strokes are not kept.
"""

import logging
from typing import Optional, Tuple, Union

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, QEvent, QPointF, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QCursor

from ..events.event_bus import EventBus, get_event_bus
from ..surface.pixel_buffer import PixelBuffer
from ..surface.stroke_state import StrokeState, Segment
from ..surface.tools import DrawingTool, parse_tool
from ..utils.coordinate_utils import point_from_event

logger = logging.getLogger(__name__)


class DrawingSurface(QWidget):
    """
    Freehand drawing surface.

    Features:
    - Pointer state machine (Idle / Drawing) shared by mouse and touch
    - Incremental segment rendering, anchored at the previous point
    - High-DPI pixel buffer in logical units
    - Tool and colour driven through the EventBus
    """

    # Signals
    stroke_started = pyqtSignal(float, float)  # x, y
    segment_rendered = pyqtSignal(object)  # Segment
    stroke_finished = pyqtSignal(int)  # segment count
    cleared = pyqtSignal()
    surface_reset = pyqtSignal(int, int, float)  # logical width, height, dpr

    def __init__(self, parent: Optional[QWidget] = None, event_bus: Optional[EventBus] = None):
        super().__init__(parent)

        self._event_bus = event_bus or get_event_bus()
        self._buffer = PixelBuffer()
        self._state = StrokeState(
            tool=self._event_bus.get_tool(),
            color=self._event_bus.get_color()
        )
        self._released = False

        self._setup_view()
        self._connect_event_bus()

    def _setup_view(self):
        """Configure the widget."""
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(QCursor(Qt.CursorShape.CrossCursor))

    def _connect_event_bus(self):
        """Subscribe to tool selection events."""
        self._event_bus.tool_changed.connect(self._on_tool_changed)
        self._event_bus.color_changed.connect(self._on_color_changed)
        self._event_bus.clear_requested.connect(self.clear)

    # ==================== Properties ====================

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    @property
    def stroke_state(self) -> StrokeState:
        return self._state

    @property
    def current_tool(self) -> DrawingTool:
        return self._state.selected_tool

    @property
    def color(self) -> str:
        return self._state.selected_color

    @property
    def is_drawing(self) -> bool:
        return self._state.is_drawing

    # ==================== Tool Management ====================

    def set_tool(self, tool: Union[str, DrawingTool]):
        """Set the tool for the next stroke."""
        self._event_bus.set_tool(parse_tool(tool).value)

    def set_color(self, color: str):
        """Set the pen colour for the next stroke (must be a palette colour)."""
        self._event_bus.set_color(color)

    def _on_tool_changed(self, tool: str):
        self._state.select_tool(tool)

    def _on_color_changed(self, color: str):
        self._state.select_color(color)

    # ==================== Buffer ====================

    def _device_pixel_ratio(self) -> float:
        return self.devicePixelRatioF()

    def reset_surface(self):
        """Reallocate the buffer for the current size and pixel ratio, then fill it."""
        if self._released:
            return

        width = self.width()
        height = self.height()
        dpr = self._device_pixel_ratio()

        if self._buffer.allocate(width, height, dpr):
            logger.debug("Surface reset to %dx%d @%.2f", width, height, dpr)
            self.surface_reset.emit(width, height, dpr)
        self.update()

    def clear(self):
        """Repaint the whole surface with the background colour.

        The stroke state is left alone: a stroke in progress continues
        from its last anchor on the cleared buffer.
        """
        if not self._buffer.is_ready:
            return
        self._buffer.fill()
        self.update()
        self.cleared.emit()

    def release(self):
        """Detach from the event bus and drop the buffer. Further input is ignored."""
        if self._released:
            return

        self._event_bus.tool_changed.disconnect(self._on_tool_changed)
        self._event_bus.color_changed.disconnect(self._on_color_changed)
        self._event_bus.clear_requested.disconnect(self.clear)

        self._state.end()
        self._buffer.release()
        self._released = True
        logger.debug("Drawing surface released")

    # ==================== Stroke Lifecycle ====================

    def pointer_down(self, point: Optional[Tuple[float, float]]):
        """Idle -> Drawing: anchor a new stroke at point."""
        if point is None:
            return
        if not self._buffer.is_ready:
            logger.debug("Ignoring pointer-down: no pixel buffer")
            return

        self._state.begin(point)
        self.stroke_started.emit(float(point[0]), float(point[1]))

    def pointer_move(self, point: Optional[Tuple[float, float]]):
        """Drawing -> Drawing: render the segment from the last anchor to point."""
        if point is None or not self._buffer.is_ready:
            return

        segment = self._state.extend(point)
        if segment is None:
            return

        self._render_segment(segment)
        self.segment_rendered.emit(segment)

    def pointer_up(self):
        """Drawing -> Idle. Safe to call while idle."""
        if self._state.end():
            self.stroke_finished.emit(self._state.segment_count)

    def _render_segment(self, segment: Segment):
        self._buffer.stroke_segment(segment)

        # Repaint only the segment's bounding box (plus pen radius)
        margin = segment.width / 2 + 2
        left = min(segment.start[0], segment.end[0]) - margin
        top = min(segment.start[1], segment.end[1]) - margin
        right = max(segment.start[0], segment.end[0]) + margin
        bottom = max(segment.start[1], segment.end[1]) + margin
        self.update(int(left), int(top), int(right - left) + 1, int(bottom - top) + 1)

    def _origin(self) -> QPointF:
        """Surface top-left in global coordinates."""
        return self.mapToGlobal(QPointF(0, 0))

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.pointer_down(point_from_event(event, self._origin()))
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if not self._state.is_drawing:
            super().mouseMoveEvent(event)
            return

        # The pressed mouse is grabbed, so leaving shows up as a move outside
        if not QRectF(self.rect()).contains(event.position()):
            self.pointer_up()
        else:
            self.pointer_move(point_from_event(event, self._origin()))
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.pointer_up()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        self.pointer_up()
        super().leaveEvent(event)

    # ==================== Touch / Notification Events ====================

    def event(self, event):
        """Route touch and pixel-ratio notifications."""
        event_type = event.type()

        if event_type == QEvent.Type.TouchBegin:
            self.pointer_down(point_from_event(event, self._origin()))
            event.accept()
            return True
        elif event_type == QEvent.Type.TouchUpdate:
            self.pointer_move(point_from_event(event, self._origin()))
            event.accept()
            return True
        elif event_type in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            self.pointer_up()
            event.accept()
            return True
        elif event_type == QEvent.Type.DevicePixelRatioChange:
            self.reset_surface()

        return super().event(event)

    # ==================== Qt Overrides ====================

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.reset_surface()

    def paintEvent(self, event):
        painter = QPainter(self)
        if self._buffer.is_ready:
            painter.drawImage(QPointF(0, 0), self._buffer.image)
        else:
            painter.fillRect(self.rect(), self._buffer.background)
        painter.end()

    def hideEvent(self, event):
        self.pointer_up()
        super().hideEvent(event)

    def closeEvent(self, event):
        self.release()
        super().closeEvent(event)


__all__ = ['DrawingSurface']
