"""Core data models for room layout."""

from .errors import (
    DoesNotFitError,
    DoesNotFitOnWallError,
    DoesNotFitVerticallyError,
    IllegalWallError,
    IncompleteBuilderError,
    InvalidDimensionError,
    PlacementError,
)
from .model import (
    SIDE_WALLS,
    Corner,
    Door,
    Furniture,
    Gap,
    Point,
    Side,
    Wall,
    WallAlignment,
    WallItem,
    Window,
)
from .room import Room

__all__ = [
    "Corner",
    "Door",
    "Furniture",
    "Gap",
    "Point",
    "Room",
    "Side",
    "SIDE_WALLS",
    "Wall",
    "WallAlignment",
    "WallItem",
    "Window",
    "PlacementError",
    "InvalidDimensionError",
    "IllegalWallError",
    "DoesNotFitError",
    "DoesNotFitVerticallyError",
    "DoesNotFitOnWallError",
    "IncompleteBuilderError",
]
