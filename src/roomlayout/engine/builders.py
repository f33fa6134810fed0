"""Fluent furniture placement.

This module provides the builder returned by ``Room.place``. A chain picks
exactly one placement mode, refines it with modifiers and ends in
``build()``, which resolves the position, registers the furniture with the
room and returns it::

    sofa = (
        room.place("Sofa", 2.0, 0.8, 0.8)
        .in_corner(Corner.SOUTH_WEST)
        .with_gap(0.2)
        .shift_east(0.3)
        .build()
    )

    table = (
        room.place("Coffee Table", 1.0, 0.6, 0.4)
        .next_to(sofa)
        .on_side(Side.NORTH)
        .with_gap(0.4)
        .build()
    )

Shift directions follow the compass: north is negative y, south positive
y, west negative x, east positive x.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..core.errors import IllegalWallError, IncompleteBuilderError, InvalidDimensionError
from ..core.model import Corner, Furniture, Gap, Side, Wall, WallAlignment
from .resolver import create_furniture_at
from .strategies import (
    CenterStrategy,
    CornerStrategy,
    PlacementStrategy,
    RelativeStrategy,
    WallStrategy,
)

if TYPE_CHECKING:
    from ..core.room import Room


def _distance(distance: float) -> float:
    if not distance >= 0:
        raise InvalidDimensionError(f"Shift distance cannot be negative, got {distance}")
    return float(distance)


def check_side_wall(wall: Wall) -> Wall:
    if not isinstance(wall, Wall) or not wall.is_side:
        raise IllegalWallError(f"Expected NORTH, SOUTH, EAST or WEST, got {wall}")
    return wall


class WallAlignmentMixin:
    """Alignment and shift vocabulary shared by the wall sub-builders.

    The builder starts CENTERED with a zero offset. Every alignment call
    replaces the alignment and resets the offset to its own distance, so
    shifts issued before the last alignment call are discarded. Shifts
    then move the offset along the wall.
    """

    alignment: WallAlignment
    offset: float

    def _align(self, alignment: WallAlignment, offset: float):
        self.alignment = alignment
        self.offset = float(offset)
        return self

    def centered(self):
        """Center on the wall."""
        return self._align(WallAlignment.CENTERED, 0.0)

    def from_north(self, distance: float):
        """Start ``distance`` meters from the north end of an east or west wall."""
        return self._align(WallAlignment.FROM_START, distance)

    def from_south(self, distance: float):
        """End ``distance`` meters from the south end of an east or west wall."""
        return self._align(WallAlignment.FROM_END, distance)

    def from_east(self, distance: float):
        """End ``distance`` meters from the east end of a north or south wall."""
        return self._align(WallAlignment.FROM_END, distance)

    def from_west(self, distance: float):
        """Start ``distance`` meters from the west end of a north or south wall."""
        return self._align(WallAlignment.FROM_START, distance)

    def shift_north(self, distance: float):
        self.offset -= _distance(distance)
        return self

    def shift_south(self, distance: float):
        self.offset += _distance(distance)
        return self

    def shift_east(self, distance: float):
        self.offset += _distance(distance)
        return self

    def shift_west(self, distance: float):
        self.offset -= _distance(distance)
        return self


class FurniturePlacementBuilder:
    """Entry point of a furniture placement chain.

    Holds the target extents and the room; the selectors below return the
    sub-builder for the chosen placement mode.
    """

    def __init__(
        self,
        name: str,
        width: float,
        length: float,
        height: float,
        room: Room,
        rotation: float = 0.0,
    ):
        self.name = name
        self.width = width
        self.length = length
        self.height = height
        self.room = room
        self.rotation = rotation

    def in_corner(self, corner: Corner) -> CornerPlacementBuilder:
        """Place the furniture in one of the four room corners."""
        return CornerPlacementBuilder(self, corner)

    def on_wall(self, wall: Wall) -> WallPlacementBuilder:
        """Place the furniture against a side wall."""
        return WallPlacementBuilder(self, check_side_wall(wall))

    def next_to(self, reference: Furniture) -> RelativePlacementBuilder:
        """Place the furniture next to an already placed piece."""
        return RelativePlacementBuilder(self, reference)

    def in_center(self) -> CenterPlacementBuilder:
        """Place the furniture at the center of the room."""
        return CenterPlacementBuilder(self)

    def _place(self, strategy: PlacementStrategy) -> Furniture:
        furniture = create_furniture_at(
            self.name,
            self.width,
            self.length,
            self.height,
            strategy,
            self.room,
            self.rotation,
        )
        self.room.add_furniture(furniture)
        return furniture


class _SubBuilder:
    def __init__(self, target: FurniturePlacementBuilder):
        self._target = target

    def strategy(self) -> PlacementStrategy:
        """Return the strategy this chain would build with."""
        raise NotImplementedError

    def build(self) -> Furniture:
        """Resolve the position, add the furniture to the room and return it.

        Raises:
            InvalidDimensionError: If an extent is not positive.
            DoesNotFitError: If the furniture would leave the floor or rise
                above the ceiling. Nothing is added to the room.
        """
        return self._target._place(self.strategy())


class CornerPlacementBuilder(_SubBuilder):
    """Corner placement: gap from both walls plus free compass shifts."""

    def __init__(self, target: FurniturePlacementBuilder, corner: Corner):
        super().__init__(target)
        self.corner = corner
        self.gap = Gap.NO_GAP
        self.shift_x = 0.0
        self.shift_y = 0.0

    def with_gap(self, gap: float) -> CornerPlacementBuilder:
        self.gap = Gap.of(gap)
        return self

    def shift_north(self, distance: float) -> CornerPlacementBuilder:
        self.shift_y -= _distance(distance)
        return self

    def shift_south(self, distance: float) -> CornerPlacementBuilder:
        self.shift_y += _distance(distance)
        return self

    def shift_east(self, distance: float) -> CornerPlacementBuilder:
        self.shift_x += _distance(distance)
        return self

    def shift_west(self, distance: float) -> CornerPlacementBuilder:
        self.shift_x -= _distance(distance)
        return self

    def strategy(self) -> CornerStrategy:
        return CornerStrategy(self.corner, self.gap, self.shift_x, self.shift_y)


class WallPlacementBuilder(WallAlignmentMixin, _SubBuilder):
    """Wall placement: flush against a wall, aligned along it."""

    def __init__(self, target: FurniturePlacementBuilder, wall: Wall):
        super().__init__(target)
        self.wall = wall
        self.alignment = WallAlignment.CENTERED
        self.gap = Gap.NO_GAP
        self.offset = 0.0

    def with_gap(self, gap: float) -> WallPlacementBuilder:
        self.gap = Gap.of(gap)
        return self

    def strategy(self) -> WallStrategy:
        return WallStrategy(self.wall, self.alignment, self.gap, self.offset)


class RelativePlacementBuilder(_SubBuilder):
    """Relative placement: flush against one side of a reference piece."""

    def __init__(self, target: FurniturePlacementBuilder, reference: Furniture):
        super().__init__(target)
        self.reference = reference
        self.side: Optional[Side] = None
        self.gap = Gap.NO_GAP

    def on_side(self, side: Side) -> RelativePlacementBuilder:
        self.side = side
        return self

    def with_gap(self, gap: float) -> RelativePlacementBuilder:
        self.gap = Gap.of(gap)
        return self

    def strategy(self) -> RelativeStrategy:
        if self.side is None:
            raise IncompleteBuilderError(
                f"Side must be specified for relative placement of '{self._target.name}'"
            )
        return RelativeStrategy(self.reference, self.side, self.gap)


class CenterPlacementBuilder(_SubBuilder):
    """Center placement with compass shifts away from the exact center."""

    def __init__(self, target: FurniturePlacementBuilder):
        super().__init__(target)
        self.x_offset = 0.0
        self.y_offset = 0.0

    def shift_north(self, distance: float) -> CenterPlacementBuilder:
        self.y_offset -= _distance(distance)
        return self

    def shift_south(self, distance: float) -> CenterPlacementBuilder:
        self.y_offset += _distance(distance)
        return self

    def shift_east(self, distance: float) -> CenterPlacementBuilder:
        self.x_offset += _distance(distance)
        return self

    def shift_west(self, distance: float) -> CenterPlacementBuilder:
        self.x_offset -= _distance(distance)
        return self

    def strategy(self) -> CenterStrategy:
        return CenterStrategy(self.x_offset, self.y_offset)
