"""
Drawing tools and their stroke settings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..config import Config


class DrawingTool(Enum):
    """Available drawing tools."""
    PEN = 'pen'        # Freehand, selected palette colour
    ERASER = 'eraser'  # Overpaints with the background colour


@dataclass(frozen=True)
class ToolSettings:
    """Stroke parameters resolved for one tool at stroke start."""
    width: int
    color: str


def parse_tool(value: Union[str, DrawingTool]) -> DrawingTool:
    """
    Resolve a tool from its enum member or its name.

    Args:
        value: DrawingTool or 'pen' / 'eraser'

    Returns:
        Matching DrawingTool

    Raises:
        ValueError: If the name is not a known tool
    """
    if isinstance(value, DrawingTool):
        return value
    return DrawingTool(str(value).lower())


def normalize_color(color: str) -> str:
    """
    Validate a pen colour against the palette.

    Returns:
        Lower-case hex colour

    Raises:
        ValueError: If the colour is not a palette entry
    """
    if not Config.is_palette_color(color):
        raise ValueError(f"Colour {color!r} is not in the palette")
    return color.lower()


def settings_for(tool: DrawingTool, color: str) -> ToolSettings:
    """Get the width and ink colour a stroke with this tool is drawn with."""
    if tool == DrawingTool.ERASER:
        return ToolSettings(width=Config.ERASER_WIDTH, color=Config.CANVAS_BACKGROUND)
    return ToolSettings(width=Config.PEN_WIDTH, color=color)


__all__ = ['DrawingTool', 'ToolSettings', 'parse_tool', 'normalize_color', 'settings_for']
