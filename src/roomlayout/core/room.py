"""Room container.

The room owns its dimensions and three ordered sequences of accepted
items (furniture, doors, windows). Every item is validated on admission,
whether it comes from a builder or is added directly. Overlap between items
is never checked.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from .errors import InvalidDimensionError
from .model import Door, Furniture, Wall, WallItem, Window

if TYPE_CHECKING:
    from ..engine.builders import FurniturePlacementBuilder
    from ..engine.wall_items import WallItemPlacementBuilder

LOGGER = logging.getLogger(__name__)


class Room:
    """A rectangular room with natural furniture and wall item placement.

    Coordinate system: the origin is the north-west corner of the floor, x
    grows eastward and y grows southward. All dimensions are in meters.

    Example::

        room = Room(6.0, 4.0, 2.7)
        sofa = room.place("Sofa", 2.0, 0.8, 0.8).in_corner(Corner.SOUTH_WEST).with_gap(0.2).build()
        door = room.place_door("Main Door", 0.9, 2.1).on_wall(Wall.NORTH).centered().build()
        window = room.place_window("Bay Window", 2.4, 1.4, 0.8).on_wall(Wall.EAST).build()

    Args:
        width: East-west extent.
        length: North-south extent.
        height: Floor to ceiling.

    Raises:
        InvalidDimensionError: If any dimension is not positive.
    """

    def __init__(self, width: float, length: float, height: float):
        if not (width > 0 and length > 0 and height > 0):
            raise InvalidDimensionError(
                f"Room dimensions must be positive, got {width} x {length} x {height}"
            )
        self._width = float(width)
        self._length = float(length)
        self._height = float(height)
        self._furniture: List[Furniture] = []
        self._doors: List[Door] = []
        self._windows: List[Window] = []

    @property
    def width(self) -> float:
        return self._width

    @property
    def length(self) -> float:
        return self._length

    @property
    def height(self) -> float:
        return self._height

    @property
    def furniture(self) -> List[Furniture]:
        """Snapshot of the placed furniture, in insertion order."""
        return list(self._furniture)

    @property
    def doors(self) -> List[Door]:
        """Snapshot of the placed doors, in insertion order."""
        return list(self._doors)

    @property
    def windows(self) -> List[Window]:
        """Snapshot of the placed windows, in insertion order."""
        return list(self._windows)

    @property
    def wall_items(self) -> List[WallItem]:
        """Doors followed by windows."""
        return [*self._doors, *self._windows]

    def wall_length(self, wall: Wall) -> float:
        from ..geom.walls import wall_length

        return wall_length(self, wall)

    def add_furniture(self, item: Furniture) -> None:
        """Add a furniture after checking it fits on the floor and under the ceiling.

        Raises:
            DoesNotFitError: If the footprint leaves the floor.
            DoesNotFitVerticallyError: If the furniture is taller than the room.
        """
        from ..engine.validators import validate_furniture

        validate_furniture(self, item)
        self._furniture.append(item)
        LOGGER.debug("Added furniture %s", item)

    def add_door(self, door: Door) -> None:
        """Add a door after checking it fits on its wall.

        Raises:
            DoesNotFitOnWallError: If the door runs past an end of its wall.
            DoesNotFitVerticallyError: If the door is taller than the room.
        """
        from ..engine.validators import validate_wall_item

        validate_wall_item(self, door)
        self._doors.append(door)
        LOGGER.debug("Added door %s", door)

    def add_window(self, window: Window) -> None:
        """Add a window after checking it fits on its wall.

        Raises:
            DoesNotFitOnWallError: If the window runs past an end of its wall.
            DoesNotFitVerticallyError: If the window rises above the ceiling.
        """
        from ..engine.validators import validate_wall_item

        validate_wall_item(self, window)
        self._windows.append(window)
        LOGGER.debug("Added window %s", window)

    def place(
        self, name: str, width: float, length: float, height: float, rotation: float = 0.0
    ) -> FurniturePlacementBuilder:
        """Start a fluent furniture placement.

        Follow with ``in_corner``, ``on_wall``, ``next_to`` or ``in_center``
        and finish with ``build()``.
        """
        from ..engine.builders import FurniturePlacementBuilder

        return FurniturePlacementBuilder(name, width, length, height, self, rotation)

    def place_in_center(self, name: str, width: float, length: float, height: float) -> Furniture:
        """Place a furniture at the room center and return it."""
        return self.place(name, width, length, height).in_center().build()

    def place_door(self, name: str, width: float, height: float) -> WallItemPlacementBuilder:
        """Start a fluent door placement; ``name`` becomes the door type."""
        from ..engine.wall_items import WallItemPlacementBuilder, WallItemType

        return WallItemPlacementBuilder(name, width, height, 0.0, self, WallItemType.DOOR)

    def place_window(
        self, name: str, width: float, height: float, bottom_height: float
    ) -> WallItemPlacementBuilder:
        """Start a fluent window placement; ``name`` becomes the window type."""
        from ..engine.wall_items import WallItemPlacementBuilder, WallItemType

        return WallItemPlacementBuilder(
            name, width, height, bottom_height, self, WallItemType.WINDOW
        )

    def __str__(self) -> str:
        return f"Room: {self._width:.1f}m x {self._length:.1f}m x {self._height:.1f}m (W x L x H)"

    def __repr__(self) -> str:
        return (
            f"Room(width={self._width!r}, length={self._length!r}, height={self._height!r}, "
            f"furniture={len(self._furniture)}, doors={len(self._doors)}, "
            f"windows={len(self._windows)})"
        )
