"""Utility functions for Achievify Doodle"""

from .coordinate_utils import logical_point, point_from_event, physical_size, logical_to_physical
from .logging_config import LoggingConfig

__all__ = [
    # Coordinate utilities
    'logical_point',
    'point_from_event',
    'physical_size',
    'logical_to_physical',
    # Logging
    'LoggingConfig',
]
