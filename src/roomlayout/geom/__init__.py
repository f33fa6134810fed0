"""Geometry utilities for room layout.

This module provides the wall arithmetic shared by placement and
rendering: wall lengths, along-wall positions and elevation projections.
"""

from .walls import (
    along_wall_position,
    distance_to_wall,
    elevation_start,
    projection_on_wall,
    wall_length,
)

__all__ = [
    "wall_length",
    "along_wall_position",
    "elevation_start",
    "distance_to_wall",
    "projection_on_wall",
]
