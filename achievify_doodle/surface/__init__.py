"""
Drawing surface core.

Provides the Qt-independent pieces and the pixel buffer:
- tools: DrawingTool enum and per-tool stroke settings
- stroke_state: Idle/Drawing state machine producing segments
- pixel_buffer: QImage-backed buffer with device pixel ratio scaling
"""

from .tools import DrawingTool, ToolSettings, parse_tool, normalize_color, settings_for
from .stroke_state import StrokePhase, Segment, StrokeState
from .pixel_buffer import PixelBuffer

__all__ = [
    # Tools
    'DrawingTool',
    'ToolSettings',
    'parse_tool',
    'normalize_color',
    'settings_for',
    # State machine
    'StrokePhase',
    'Segment',
    'StrokeState',
    # Buffer
    'PixelBuffer',
]
