"""Room Layout - A Python library for placing furniture, doors and windows in a room."""

__version__ = "0.1.0"

from .core.errors import (
    DoesNotFitError,
    DoesNotFitOnWallError,
    DoesNotFitVerticallyError,
    IllegalWallError,
    IncompleteBuilderError,
    InvalidDimensionError,
    PlacementError,
)
from .core.model import Corner, Door, Furniture, Gap, Point, Side, Wall, WallAlignment, Window
from .core.room import Room

__all__ = [
    "Corner",
    "Door",
    "Furniture",
    "Gap",
    "Point",
    "Room",
    "Side",
    "Wall",
    "WallAlignment",
    "Window",
    "PlacementError",
    "InvalidDimensionError",
    "IllegalWallError",
    "DoesNotFitError",
    "DoesNotFitVerticallyError",
    "DoesNotFitOnWallError",
    "IncompleteBuilderError",
]
