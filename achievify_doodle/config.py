"""
Global configuration for Achievify Doodle

Drawing constants, palette and user data locations.
"""

import os
import sys
from pathlib import Path
from typing import Final


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Achievify Doodle"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Achievify"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Tool settings (logical units)
    PEN_WIDTH: Final[int] = 3
    ERASER_WIDTH: Final[int] = 20

    # Flat opaque fill; the eraser paints with it
    CANVAS_BACKGROUND: Final[str] = "#0a1628"

    # Pen palette (fixed, 10 entries)
    PALETTE: Final[tuple] = (
        "#88ccff", "#cc88ff", "#88ffcc", "#ffcc88", "#ff88cc",
        "#ffffff", "#ff6b6b", "#4ecdc4", "#ffe66d", "#a8e6cf",
    )
    DEFAULT_COLOR: Final[str] = "#88ccff"

    # UI settings
    CANVAS_HEIGHT: Final[int] = 400
    SWATCH_SIZE: Final[int] = 32

    # Window settings
    DEFAULT_WINDOW_WIDTH: Final[int] = 900
    DEFAULT_WINDOW_HEIGHT: Final[int] = 620

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux). A 'portable.txt' file next to the package
        switches to a local 'data' folder instead.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'AchievifyDoodle'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'AchievifyDoodle'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'AchievifyDoodle'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the folder log files are written to."""
        return cls.get_user_data_dir() / 'logs'

    @classmethod
    def is_palette_color(cls, color: str) -> bool:
        """Check whether a hex colour is one of the palette entries (case-insensitive)."""
        return color.lower() in cls.PALETTE


__all__ = ['Config']
