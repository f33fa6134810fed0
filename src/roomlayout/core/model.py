"""Core data models for room layout.

This module defines the value types used to describe a furnished room:
compass enumerations, planar points, gaps, furniture and the items that
live on a wall (doors and windows).

Coordinate system: the origin is the north-west corner of the floor, x
grows eastward, y grows southward and z (wall items only) grows upward from
the floor. All dimensions are in meters.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .. import config
from .errors import IllegalWallError, InvalidDimensionError


class Corner(Enum):
    """The four floor corners of a rectangular room."""

    NORTH_WEST = "NORTH_WEST"
    NORTH_EAST = "NORTH_EAST"
    SOUTH_WEST = "SOUTH_WEST"
    SOUTH_EAST = "SOUTH_EAST"

    @property
    def is_north(self) -> bool:
        return self in (Corner.NORTH_WEST, Corner.NORTH_EAST)

    @property
    def is_west(self) -> bool:
        return self in (Corner.NORTH_WEST, Corner.SOUTH_WEST)

    def __str__(self) -> str:
        return self.value


class Side(Enum):
    """Compass sides used for relative placement."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    def __str__(self) -> str:
        return self.value


class Wall(Enum):
    """The six surfaces of a room.

    Only the four side walls admit furniture and wall items; FLOOR and
    CEILING exist so that callers can name them and be rejected.
    """

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    FLOOR = "Floor"
    CEILING = "Ceiling"

    @property
    def is_side(self) -> bool:
        return self not in (Wall.FLOOR, Wall.CEILING)

    @property
    def runs_east_west(self) -> bool:
        """True for walls whose along-wall coordinate is an x coordinate."""
        return self in (Wall.NORTH, Wall.SOUTH)

    def __str__(self) -> str:
        return self.value


SIDE_WALLS: tuple[Wall, ...] = (Wall.NORTH, Wall.SOUTH, Wall.EAST, Wall.WEST)


class WallAlignment(Enum):
    """Where an item sits along a wall.

    FROM_START and FROM_END measure from the wall's start and end
    endpoints respectively (see ``geom.walls.wall_length``).
    """

    CENTERED = "centered"
    FROM_START = "from_start"
    FROM_END = "from_end"


@dataclass(frozen=True)
class Point:
    """Represents a 2D point on the floor.

    Attributes:
        x: Distance east of the north-west corner.
        y: Distance south of the north-west corner.
    """

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:.1f}, {self.y:.1f})"


@dataclass(frozen=True)
class Gap:
    """A non-negative distance kept from a wall or a neighbouring item."""

    value: float = 0.0

    NO_GAP: ClassVar[Gap]

    def __post_init__(self) -> None:
        if not self.value >= 0:
            raise InvalidDimensionError(f"Gap cannot be negative, got {self.value}")

    @classmethod
    def of(cls, value: float) -> Gap:
        """Return a gap of ``value`` meters, sharing the canonical zero gap."""
        if value == 0.0:
            return cls.NO_GAP
        return cls(float(value))

    def __str__(self) -> str:
        return f"Gap({self.value:.2f}m)"


Gap.NO_GAP = Gap(0.0)


@dataclass(frozen=True)
class Furniture:
    """Represents a piece of furniture standing on the floor.

    Attributes:
        name: Display name.
        width: Extent along x (east-west).
        length: Extent along y (north-south).
        height: Extent along z.
        x: x coordinate of the north-west floor corner.
        y: y coordinate of the north-west floor corner.
        rotation: Angle in degrees, normalized to [0, 360). It is stored
            for consumers only; the footprint is always width x length.
    """

    name: str
    width: float
    length: float
    height: float
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.length > 0 and self.height > 0):
            raise InvalidDimensionError(
                f"Furniture dimensions must be positive, got "
                f"{self.width} x {self.length} x {self.height} for '{self.name}'"
            )
        if not math.isfinite(self.rotation):
            raise InvalidDimensionError(
                f"Rotation must be a finite angle, got {self.rotation} for '{self.name}'"
            )
        rotation = self.rotation % 360.0
        # Tiny negative angles round up to exactly 360.0
        if rotation >= 360.0:
            rotation = 0.0
        object.__setattr__(self, "rotation", rotation)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.length / 2)

    def __str__(self) -> str:
        return (
            f"{self.name}: {self.width:.1f}x{self.length:.1f}x{self.height:.1f}m "
            f"at ({self.x:.1f}, {self.y:.1f})"
        )


@dataclass(frozen=True)
class WallItem(ABC):
    """Represents an opening set into one of the four side walls.

    Attributes:
        wall: The wall carrying the item.
        position: Start of the item along the wall, measured from the wall's
            start endpoint (west end for NORTH/SOUTH, north end for EAST/WEST).
        width: Extent along the wall.
        height: Vertical extent.
        bottom_height: Distance from the floor to the item's lower edge.
        type: Free-form label such as "Main" or "Bay". Pass it by keyword;
            a door takes no bottom height argument.
    """

    wall: Wall
    position: float
    width: float
    height: float
    bottom_height: float
    type: str = config.DEFAULT_ITEM_TYPE

    def __post_init__(self) -> None:
        if not (self.width > 0 and self.height > 0):
            raise InvalidDimensionError(
                f"Wall item dimensions must be positive, got {self.width} x {self.height}"
            )
        if not self.bottom_height >= 0:
            raise InvalidDimensionError(
                f"Bottom height cannot be negative, got {self.bottom_height}"
            )
        if not isinstance(self.wall, Wall) or not self.wall.is_side:
            raise IllegalWallError(
                f"Wall items cannot be placed on {self.wall}; use a side wall"
            )
        if not isinstance(self.type, str):
            raise TypeError(f"Wall item type must be a string, got {self.type!r}")

    @property
    @abstractmethod
    def kind(self) -> str:
        """Human-readable item kind ("Door", "Window")."""

    @property
    def top_height(self) -> float:
        return self.bottom_height + self.height


@dataclass(frozen=True)
class Door(WallItem):
    """A door: always starts at floor level."""

    bottom_height: float = field(default=0.0, init=False)

    @property
    def kind(self) -> str:
        return "Door"

    def __str__(self) -> str:
        return (
            f"{self.type} Door on {self.wall} wall: {self.width:.1f}m wide x "
            f"{self.height:.1f}m high at position {self.position:.1f}m"
        )


@dataclass(frozen=True)
class Window(WallItem):
    """A window hung at an explicit height above the floor."""

    @property
    def kind(self) -> str:
        return "Window"

    def __str__(self) -> str:
        return (
            f"{self.type} Window on {self.wall} wall: {self.width:.1f}m wide x "
            f"{self.height:.1f}m high at position {self.position:.1f}m, "
            f"{self.bottom_height:.1f}m from floor"
        )
