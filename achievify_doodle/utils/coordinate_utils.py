"""
Coordinate conversion utilities for the drawing surface.

Input events are resolved to logical (device-independent) coordinates
relative to the surface's top-left corner. Physical pixel sizes are only
computed when the pixel buffer is allocated.
"""

import math
from typing import Optional, Tuple

from PyQt6.QtCore import QEvent, QPointF, QSize
from PyQt6.QtGui import QMouseEvent, QTouchEvent


def logical_point(client_pos: QPointF, origin: QPointF) -> Tuple[float, float]:
    """
    Convert a global pointer position to surface-relative logical coordinates.

    Args:
        client_pos: Pointer position in global (screen) logical coordinates
        origin: Surface top-left in the same coordinate space

    Returns:
        (x, y) relative to the surface
    """
    return (client_pos.x() - origin.x(), client_pos.y() - origin.y())


def point_from_event(event: QEvent, origin: QPointF) -> Optional[Tuple[float, float]]:
    """
    Resolve logical coordinates from a mouse or touch event.

    Touch events use the first touch point. A touch event without points,
    or any other event type, yields None.

    Args:
        event: QMouseEvent or QTouchEvent
        origin: Surface top-left in global coordinates

    Returns:
        (x, y) or None if the event carries no usable position
    """
    if isinstance(event, QTouchEvent):
        points = event.points()
        if not points:
            return None
        return logical_point(points[0].globalPosition(), origin)

    if isinstance(event, QMouseEvent):
        return logical_point(event.globalPosition(), origin)

    return None


def physical_size(width: int, height: int, dpr: float) -> QSize:
    """
    Get the physical pixel size for a logical size.

    Args:
        width: Logical width
        height: Logical height
        dpr: Device pixel ratio

    Returns:
        QSize of round(width * dpr) x round(height * dpr)
    """
    return QSize(int(round(width * dpr)), int(round(height * dpr)))


def logical_to_physical(x: float, y: float, dpr: float) -> Tuple[int, int]:
    """Get the physical pixel index containing a logical point."""
    return (math.floor(x * dpr), math.floor(y * dpr))


__all__ = ['logical_point', 'point_from_event', 'physical_size', 'logical_to_physical']
