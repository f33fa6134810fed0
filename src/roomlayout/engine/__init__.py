"""Engine module for room layout placement.

This module provides the placement strategies, the position resolver and
the fluent builders returned by ``Room.place``, ``Room.place_door`` and
``Room.place_window``.
"""

from .builders import (
    CenterPlacementBuilder,
    CornerPlacementBuilder,
    FurniturePlacementBuilder,
    RelativePlacementBuilder,
    WallPlacementBuilder,
)
from .resolver import create_furniture_at, resolve
from .strategies import (
    CenterStrategy,
    CornerStrategy,
    PlacementContext,
    PlacementStrategy,
    RelativeStrategy,
    WallStrategy,
    compute_position,
)
from .wall_items import WallItemPlacementBuilder, WallItemType, WallItemWallPlacementBuilder

__all__ = [
    "PlacementContext",
    "PlacementStrategy",
    "CornerStrategy",
    "WallStrategy",
    "RelativeStrategy",
    "CenterStrategy",
    "compute_position",
    "resolve",
    "create_furniture_at",
    "FurniturePlacementBuilder",
    "CornerPlacementBuilder",
    "WallPlacementBuilder",
    "RelativePlacementBuilder",
    "CenterPlacementBuilder",
    "WallItemPlacementBuilder",
    "WallItemWallPlacementBuilder",
    "WallItemType",
]
