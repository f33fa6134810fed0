"""Wall geometry utilities.

This module holds the one-dimensional arithmetic shared by wall placement
of furniture, wall item placement and the renderers: wall lengths, the
along-wall position formula and the mapping of floor coordinates onto a
wall elevation seen from inside the room.

Wall-start convention: NORTH and SOUTH walls start at their west end and
the along-wall coordinate grows eastward; EAST and WEST walls start at
their north end and the coordinate grows southward.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from ..core.errors import IllegalWallError
from ..core.model import Furniture, Wall, WallAlignment, WallItem

if TYPE_CHECKING:
    from ..core.room import Room


def wall_length(room: Room, wall: Wall) -> float:
    """Return the length of a side wall.

    Args:
        room: Room owning the wall.
        wall: One of the four side walls.

    Returns:
        ``room.width`` for NORTH/SOUTH, ``room.length`` for EAST/WEST.

    Raises:
        IllegalWallError: If ``wall`` is FLOOR or CEILING.
    """
    if wall in (Wall.NORTH, Wall.SOUTH):
        return room.width
    if wall in (Wall.EAST, Wall.WEST):
        return room.length
    raise IllegalWallError(f"{wall} is not a side wall")


def along_wall_position(
    alignment: WallAlignment, wall_len: float, extent: float, offset: float
) -> float:
    """Compute the start coordinate of an item along a wall.

    Args:
        alignment: CENTERED, FROM_START or FROM_END.
        wall_len: Length of the wall.
        extent: Item extent parallel to the wall.
        offset: Signed offset; for FROM_END it is measured back from the end.

    Returns:
        The along-wall start coordinate. No clamping is applied.
    """
    if alignment is WallAlignment.CENTERED:
        return (wall_len - extent) / 2.0 + offset
    if alignment is WallAlignment.FROM_START:
        return offset
    if alignment is WallAlignment.FROM_END:
        return wall_len - extent - offset
    raise ValueError(f"Unknown wall alignment: {alignment}")


def elevation_start(room: Room, item: WallItem) -> float:
    """Horizontal start of a wall item in its wall's elevation.

    Elevations are drawn from inside the room. Looking at the west wall
    the north end is on the right, so the along-wall coordinate is
    mirrored there.
    """
    if item.wall is Wall.WEST:
        return wall_length(room, item.wall) - item.position - item.width
    return item.position


def distance_to_wall(room: Room, furniture: Furniture, wall: Wall) -> float:
    """Return the clear distance between a furniture footprint and a wall."""
    if wall is Wall.NORTH:
        return furniture.y
    if wall is Wall.SOUTH:
        return room.length - (furniture.y + furniture.length)
    if wall is Wall.EAST:
        return room.width - (furniture.x + furniture.width)
    if wall is Wall.WEST:
        return furniture.x
    raise IllegalWallError(f"{wall} is not a side wall")


def projection_on_wall(room: Room, furniture: Furniture, wall: Wall) -> Tuple[float, float]:
    """Project a furniture footprint onto a wall elevation.

    Returns:
        Tuple of (start, width) in elevation coordinates, mirrored for the
        west wall like ``elevation_start``.
    """
    if wall in (Wall.NORTH, Wall.SOUTH):
        return furniture.x, furniture.width
    if wall is Wall.EAST:
        return furniture.y, furniture.length
    if wall is Wall.WEST:
        return room.length - (furniture.y + furniture.length), furniture.length
    raise IllegalWallError(f"{wall} is not a side wall")
