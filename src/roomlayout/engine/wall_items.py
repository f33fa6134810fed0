"""Fluent door and window placement.

Doors and windows are one-dimensional along their wall: the builder
computes the start position with the same formula as wall placement of
furniture, applied to the item width against the wall length, and checks
the vertical extent against the room height.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Union

from ..core.model import Door, Wall, WallAlignment, Window
from ..geom.walls import along_wall_position, wall_length
from .builders import WallAlignmentMixin, check_side_wall
from .validators import validate_wall_span

if TYPE_CHECKING:
    from ..core.room import Room

LOGGER = logging.getLogger(__name__)


class WallItemType(Enum):
    DOOR = "door"
    WINDOW = "window"


class WallItemPlacementBuilder:
    """Entry point of a door or window placement chain."""

    def __init__(
        self,
        name: str,
        width: float,
        height: float,
        bottom_height: float,
        room: Room,
        item_type: WallItemType,
    ):
        self.name = name
        self.width = width
        self.height = height
        self.bottom_height = bottom_height
        self.room = room
        self.item_type = item_type

    def on_wall(self, wall: Wall) -> WallItemWallPlacementBuilder:
        """Select the side wall carrying the item.

        Raises:
            IllegalWallError: If ``wall`` is FLOOR or CEILING.
        """
        return WallItemWallPlacementBuilder(self, check_side_wall(wall))


class WallItemWallPlacementBuilder(WallAlignmentMixin):
    """Along-wall alignment of a door or window. There is no gap."""

    def __init__(self, target: WallItemPlacementBuilder, wall: Wall):
        self._target = target
        self.wall = wall
        self.alignment = WallAlignment.CENTERED
        self.offset = 0.0

    def position(self) -> float:
        """Along-wall start position for the current alignment and offset."""
        length = wall_length(self._target.room, self.wall)
        return along_wall_position(self.alignment, length, self._target.width, self.offset)

    def build(self) -> Union[Door, Window]:
        """Build the item, add it to the room and return it.

        Raises:
            InvalidDimensionError: If width or height is not positive, or the
                bottom height is negative.
            DoesNotFitOnWallError: If the item runs past an end of the wall.
            DoesNotFitVerticallyError: If the item rises above the ceiling.
        """
        target = self._target
        room = target.room
        position = self.position()

        item: Union[Door, Window]
        if target.item_type is WallItemType.DOOR:
            item = Door(self.wall, position, target.width, target.height, type=target.name)
        else:
            item = Window(
                self.wall,
                position,
                target.width,
                target.height,
                target.bottom_height,
                type=target.name,
            )

        validate_wall_span(
            room, self.wall, position, item.width, item.height, item.bottom_height
        )

        if isinstance(item, Door):
            room.add_door(item)
        else:
            room.add_window(item)

        LOGGER.debug("Placed %s '%s' on %s wall at %.3f", item.kind, target.name, self.wall, position)
        return item
