"""Position resolution for furniture placement.

This module turns a placement strategy into a concrete furniture: it runs
the strategy against a provisional item, checks that the resulting
footprint lies on the floor and materializes the final immutable item.
Vertical fit is left to the room, which checks it on admission.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..core.model import Furniture, Point
from .strategies import PlacementContext, PlacementStrategy
from .validators import validate_position

if TYPE_CHECKING:
    from ..core.room import Room

LOGGER = logging.getLogger(__name__)


def resolve(strategy: PlacementStrategy, room: Room, furniture: Furniture) -> Point:
    """Resolve and validate the position a strategy assigns to a furniture.

    Args:
        strategy: The placement strategy to run.
        room: The room the furniture is placed in.
        furniture: Provisional furniture carrying the target extents.

    Returns:
        The validated north-west corner.

    Raises:
        DoesNotFitError: If the computed footprint leaves the floor.
    """
    context = PlacementContext(room, furniture)
    position = strategy.calculate_position(context)

    validate_position(room, position, furniture.width, furniture.length)
    return position


def create_furniture_at(
    name: str,
    width: float,
    length: float,
    height: float,
    strategy: PlacementStrategy,
    room: Room,
    rotation: float = 0.0,
) -> Furniture:
    """Create a furniture at the position chosen by ``strategy``.

    Args:
        name: Display name of the furniture.
        width: Extent along x.
        length: Extent along y.
        height: Extent along z.
        strategy: The placement strategy to run.
        room: The room the furniture is placed in.
        rotation: Stored rotation in degrees; does not affect placement.

    Returns:
        A new Furniture at the resolved position. It is not added to the room.

    Raises:
        InvalidDimensionError: If any extent is not positive.
        DoesNotFitError: If the computed footprint leaves the floor.
    """
    provisional = Furniture(name, width, length, height, 0.0, 0.0, rotation)
    position = resolve(strategy, room, provisional)

    LOGGER.debug("Resolved '%s' to %s using %s", name, position, type(strategy).__name__)
    return Furniture(name, width, length, height, position.x, position.y, rotation)
