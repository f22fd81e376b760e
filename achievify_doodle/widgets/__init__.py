"""
UI widgets for Achievify Doodle
"""

from .drawing_surface import DrawingSurface
from .doodle_toolbar import DoodleToolbar, PalettePopup
from .doodle_panel import DoodlePanel

__all__ = ['DrawingSurface', 'DoodleToolbar', 'PalettePopup', 'DoodlePanel']
