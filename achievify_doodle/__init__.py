"""
Achievify Doodle

A freehand doodle pad with pen, eraser and a 10-colour palette, built on Qt6.
"""

__version__ = "1.0.0"
__author__ = "Achievify"

from .config import Config
from .events.event_bus import EventBus, get_event_bus

__all__ = [
    'Config',
    'EventBus',
    'get_event_bus',
]
