"""
Pixel buffer backing the drawing surface.

Wraps a QImage sized in physical pixels. The device pixel ratio is set on
the image once at allocation time, so every QPainter opened on it works in
logical units and strokes stay crisp on high-DPI screens.
"""

import logging
from typing import Optional, Tuple

import numpy as np
from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QColor, QImage, QPainter, QPen

from ..config import Config
from ..utils.coordinate_utils import physical_size, logical_to_physical
from .stroke_state import Segment

logger = logging.getLogger(__name__)


class PixelBuffer:
    """
    Physical pixel buffer with a flat background.

    A buffer that has not been allocated (or was released) has no
    rendering context; fill and stroke calls on it return immediately.
    """

    def __init__(self, background: str = Config.CANVAS_BACKGROUND):
        self._background = QColor(background)
        self._image: Optional[QImage] = None
        self._logical_size: Tuple[int, int] = (0, 0)
        self._dpr = 1.0

    # ==================== Properties ====================

    @property
    def is_ready(self) -> bool:
        """True when the buffer can be painted on."""
        return self._image is not None and not self._image.isNull()

    @property
    def image(self) -> Optional[QImage]:
        return self._image

    @property
    def background(self) -> QColor:
        return QColor(self._background)

    @property
    def logical_size(self) -> Tuple[int, int]:
        return self._logical_size

    @property
    def device_pixel_ratio(self) -> float:
        return self._dpr

    @property
    def physical_size(self) -> Tuple[int, int]:
        if not self.is_ready:
            return (0, 0)
        return (self._image.width(), self._image.height())

    # ==================== Allocation ====================

    def allocate(self, width: int, height: int, dpr: float) -> bool:
        """
        (Re)allocate the buffer for a logical size and pixel ratio.

        Prior content is discarded and the buffer is filled with the
        background colour.

        Args:
            width: Logical width
            height: Logical height
            dpr: Device pixel ratio (physical = logical x dpr)

        Returns:
            True if a paintable buffer was allocated
        """
        if width <= 0 or height <= 0 or dpr <= 0:
            logger.debug("Skipping allocation for empty surface %sx%s @%s", width, height, dpr)
            self._image = None
            return False

        image = QImage(physical_size(width, height, dpr), QImage.Format.Format_ARGB32_Premultiplied)
        if image.isNull():
            logger.warning("Could not allocate %sx%s pixel buffer", width, height)
            self._image = None
            return False

        image.setDevicePixelRatio(dpr)
        self._image = image
        self._logical_size = (width, height)
        self._dpr = dpr
        self.fill()

        logger.debug(
            "Allocated pixel buffer %dx%d (logical %dx%d @%.2f)",
            image.width(), image.height(), width, height, dpr
        )
        return True

    def release(self):
        """Drop the pixel buffer."""
        self._image = None

    # ==================== Painting ====================

    def fill(self):
        """Repaint the whole buffer with the background colour."""
        if not self.is_ready:
            return
        self._image.fill(self._background)

    def stroke_segment(self, segment: Segment):
        """Render one segment with round caps and joins, normal compositing."""
        if not self.is_ready:
            return

        pen = QPen(QColor(segment.color), segment.width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)

        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_SourceOver)
            painter.setPen(pen)
            painter.drawLine(QPointF(*segment.start), QPointF(*segment.end))
        finally:
            painter.end()

    # ==================== Inspection ====================

    def pixel_at(self, x: float, y: float) -> Optional[QColor]:
        """Get the colour under a logical point, or None outside the buffer."""
        if not self.is_ready:
            return None
        px, py = logical_to_physical(x, y, self._dpr)
        if not self._image.valid(px, py):
            return None
        return self._image.pixelColor(px, py)

    def to_array(self) -> Optional[np.ndarray]:
        """Copy the buffer into an (height, width, 4) RGBA uint8 array."""
        if not self.is_ready:
            return None

        rgba = self._image.convertToFormat(QImage.Format.Format_RGBA8888)
        width = rgba.width()
        height = rgba.height()
        stride = rgba.bytesPerLine()

        ptr = rgba.constBits()
        ptr.setsize(stride * height)
        array = np.array(ptr, dtype=np.uint8).reshape((height, stride))
        return array[:, :width * 4].reshape((height, width, 4)).copy()

    def is_blank(self) -> bool:
        """True when every pixel equals the background colour."""
        array = self.to_array()
        if array is None:
            return True
        bg = self._background
        expected = np.array([bg.red(), bg.green(), bg.blue(), bg.alpha()], dtype=np.uint8)
        return bool(np.all(array == expected))


__all__ = ['PixelBuffer']
