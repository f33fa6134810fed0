"""Fit validation for room layout items.

This module provides the checks run before an item is accepted: the
planar check applied by the position resolver and the full checks the room
applies on every admission. Each check raises a ``PlacementError`` subclass
describing the violated bound.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import config
from ..core.errors import (
    DoesNotFitError,
    DoesNotFitOnWallError,
    DoesNotFitVerticallyError,
    IllegalWallError,
    IncompleteBuilderError,
    InvalidDimensionError,
    PlacementError,
)
from ..core.model import Furniture, Point, Wall, WallItem
from ..geom.walls import wall_length

if TYPE_CHECKING:
    from ..core.room import Room

__all__ = [
    "PlacementError",
    "InvalidDimensionError",
    "IllegalWallError",
    "DoesNotFitError",
    "DoesNotFitVerticallyError",
    "DoesNotFitOnWallError",
    "IncompleteBuilderError",
    "validate_position",
    "validate_furniture",
    "validate_wall_span",
    "validate_wall_item",
]


def _exceeds(value: float, limit: float) -> bool:
    # NaN exceeds every limit
    return not value <= limit + config.TOLERANCE


def _below_zero(value: float) -> bool:
    return not value >= -config.TOLERANCE


def validate_position(room: Room, position: Point, width: float, length: float) -> None:
    """Validate that a footprint anchored at ``position`` lies on the floor.

    Args:
        room: The room to validate against.
        position: North-west corner of the footprint.
        width: Footprint extent along x.
        length: Footprint extent along y.

    Raises:
        DoesNotFitError: If any edge of the footprint leaves the floor.
    """
    if _below_zero(position.x) or _below_zero(position.y):
        raise DoesNotFitError(
            f"Furniture position {position} cannot be negative "
            f"(x={position.x:g}, y={position.y:g})"
        )

    if _exceeds(position.x + width, room.width) or _exceeds(position.y + length, room.length):
        raise DoesNotFitError(
            f"Furniture of {width:g} x {length:g} at (x={position.x:g}, y={position.y:g}) "
            f"doesn't fit in the {room.width:g} x {room.length:g} room"
        )


def validate_furniture(room: Room, furniture: Furniture) -> None:
    """Validate planar and vertical fit of a furniture piece.

    Raises:
        DoesNotFitError: If the footprint leaves the floor.
        DoesNotFitVerticallyError: If the furniture is taller than the room.
    """
    validate_position(room, furniture.position, furniture.width, furniture.length)

    if _exceeds(furniture.height, room.height):
        raise DoesNotFitVerticallyError(
            f"'{furniture.name}' is {furniture.height:g} high, "
            f"the room is only {room.height:g}"
        )


def validate_wall_span(
    room: Room,
    wall: Wall,
    position: float,
    width: float,
    height: float,
    bottom_height: float,
) -> None:
    """Validate an along-wall span and vertical extent before building an item.

    Raises:
        IllegalWallError: If ``wall`` is FLOOR or CEILING.
        DoesNotFitOnWallError: If the span runs past either end of the wall.
        DoesNotFitVerticallyError: If the item rises above the ceiling or
            starts below the floor.
    """
    if not wall.is_side:
        raise IllegalWallError(f"Invalid wall for door/window: {wall}")

    length = wall_length(room, wall)
    if _below_zero(position) or _exceeds(position + width, length):
        raise DoesNotFitOnWallError(
            f"Item of width {width:g} at position {position:g} doesn't fit on "
            f"{wall} wall of length {length:g}"
        )

    if not bottom_height >= 0 or _exceeds(bottom_height + height, room.height):
        raise DoesNotFitVerticallyError(
            f"Item of height {height:g} at {bottom_height:g} from the floor doesn't fit "
            f"vertically under a {room.height:g} ceiling"
        )


def validate_wall_item(room: Room, item: WallItem) -> None:
    """Validate a constructed door or window against its wall."""
    validate_wall_span(
        room, item.wall, item.position, item.width, item.height, item.bottom_height
    )
