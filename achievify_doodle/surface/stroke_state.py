"""
Stroke state machine for the drawing surface.

Tracks the pointer lifecycle (Idle <-> Drawing) and turns each pointer move
into one incremental Segment anchored at the previous point. Rendering is
left to the caller, so this module has no Qt dependency.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import Config
from .tools import DrawingTool, ToolSettings, parse_tool, normalize_color, settings_for

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class StrokePhase(Enum):
    """Pointer lifecycle phase."""
    IDLE = 0
    DRAWING = 1


@dataclass(frozen=True)
class Segment:
    """One rendered increment of a stroke, in logical coordinates."""
    start: Point
    end: Point
    width: int
    color: str
    tool: DrawingTool


class StrokeState:
    """
    Explicit {Idle, Drawing} state machine owned by one surface.

    The selected tool/colour can change at any time; they are copied into
    the active tool/colour only when a stroke begins, so a stroke in
    progress never changes appearance.

    Usage:
        state = StrokeState()
        state.begin((10, 10))
        segment = state.extend((20, 10))   # (10,10) -> (20,10)
        state.end()
    """

    def __init__(self, tool: DrawingTool = DrawingTool.PEN, color: str = Config.DEFAULT_COLOR):
        self._phase = StrokePhase.IDLE
        self._selected_tool = parse_tool(tool)
        self._selected_color = normalize_color(color)

        # Captured at stroke start
        self._last_point: Optional[Point] = None
        self._active_tool: Optional[DrawingTool] = None
        self._active_color: Optional[str] = None
        self._settings: Optional[ToolSettings] = None
        self._segment_count = 0

    # ==================== Properties ====================

    @property
    def phase(self) -> StrokePhase:
        return self._phase

    @property
    def is_drawing(self) -> bool:
        return self._phase == StrokePhase.DRAWING

    @property
    def last_point(self) -> Optional[Point]:
        return self._last_point

    @property
    def active_tool(self) -> Optional[DrawingTool]:
        return self._active_tool

    @property
    def active_color(self) -> Optional[str]:
        return self._active_color

    @property
    def selected_tool(self) -> DrawingTool:
        return self._selected_tool

    @property
    def selected_color(self) -> str:
        return self._selected_color

    @property
    def segment_count(self) -> int:
        """Segments rendered by the current (or last) stroke."""
        return self._segment_count

    # ==================== Tool Selection ====================

    def select_tool(self, tool: Union[str, DrawingTool]):
        """Select the tool used by the next stroke."""
        self._selected_tool = parse_tool(tool)

    def select_color(self, color: str):
        """Select the pen colour used by the next stroke."""
        self._selected_color = normalize_color(color)

    # ==================== Transitions ====================

    def begin(self, point: Point):
        """
        Idle -> Drawing: anchor a new path at point.

        Nothing is rendered yet. A begin while already drawing restarts the
        path at the new anchor.
        """
        self._phase = StrokePhase.DRAWING
        self._last_point = (float(point[0]), float(point[1]))
        self._active_tool = self._selected_tool
        self._active_color = self._selected_color
        self._settings = settings_for(self._active_tool, self._active_color)
        self._segment_count = 0
        logger.debug("Stroke started at %s with %s", self._last_point, self._active_tool.value)

    def extend(self, point: Point) -> Optional[Segment]:
        """
        Drawing -> Drawing: produce the segment from the anchor to point and
        re-anchor at point.

        Returns:
            The segment to render, or None while idle
        """
        if self._phase != StrokePhase.DRAWING or self._last_point is None:
            return None

        end = (float(point[0]), float(point[1]))
        segment = Segment(
            start=self._last_point,
            end=end,
            width=self._settings.width,
            color=self._settings.color,
            tool=self._active_tool,
        )
        self._last_point = end
        self._segment_count += 1
        return segment

    def end(self) -> bool:
        """
        Drawing -> Idle. Idempotent.

        Returns:
            True if a stroke was in progress
        """
        if self._phase == StrokePhase.IDLE:
            return False

        logger.debug("Stroke finished after %d segments", self._segment_count)
        self._phase = StrokePhase.IDLE
        self._last_point = None
        self._active_tool = None
        self._active_color = None
        self._settings = None
        return True


__all__ = ['StrokePhase', 'Segment', 'StrokeState', 'Point']
