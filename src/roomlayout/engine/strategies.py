"""Placement strategies for room layout.

A strategy is an immutable configuration that, given a placement context
(the room and a provisional furniture of known size), returns the position
of the furniture's north-west corner. Strategies are pure and never check
fit themselves; the position resolver does.

The set of strategies is closed: corner, wall, relative and center. Each
one maps to a position function through ``_POSITION_FUNCTIONS``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Protocol

from ..core.errors import IllegalWallError
from ..core.model import Corner, Furniture, Gap, Point, Side, Wall, WallAlignment
from ..geom.walls import along_wall_position

if TYPE_CHECKING:
    from ..core.room import Room


@dataclass(frozen=True)
class PlacementContext:
    """What a strategy may look at: the room and the item being placed."""

    room: Room
    furniture: Furniture


class PlacementStrategy(Protocol):
    """Protocol for placement strategies."""

    def calculate_position(self, context: PlacementContext) -> Point:
        """Return the north-west corner for ``context.furniture``."""
        ...


@dataclass(frozen=True)
class CornerStrategy:
    """Anchor the item in a corner, then apply a gap and free shifts.

    Attributes:
        corner: Target corner.
        gap: Distance kept from both walls meeting at the corner.
        shift_x: Signed shift applied after anchoring (positive = east).
        shift_y: Signed shift applied after anchoring (positive = south).
    """

    corner: Corner
    gap: Gap = Gap.NO_GAP
    shift_x: float = 0.0
    shift_y: float = 0.0

    def calculate_position(self, context: PlacementContext) -> Point:
        return compute_position(self, context)


@dataclass(frozen=True)
class WallStrategy:
    """Flush the item against a wall and align it along that wall.

    Attributes:
        wall: Target side wall.
        alignment: CENTERED, FROM_START or FROM_END.
        gap: Distance kept from the wall.
        offset: Signed along-wall offset.
    """

    wall: Wall
    alignment: WallAlignment = WallAlignment.CENTERED
    gap: Gap = Gap.NO_GAP
    offset: float = 0.0

    def __post_init__(self) -> None:
        if not self.wall.is_side:
            raise IllegalWallError(f"Cannot place furniture against the {self.wall}")

    def calculate_position(self, context: PlacementContext) -> Point:
        return compute_position(self, context)


@dataclass(frozen=True)
class RelativeStrategy:
    """Place the item flush against one side of a reference furniture."""

    reference: Furniture
    side: Side
    gap: Gap = Gap.NO_GAP

    def calculate_position(self, context: PlacementContext) -> Point:
        return compute_position(self, context)


@dataclass(frozen=True)
class CenterStrategy:
    """Center the item in the room, then apply signed offsets."""

    x_offset: float = 0.0
    y_offset: float = 0.0

    def calculate_position(self, context: PlacementContext) -> Point:
        return compute_position(self, context)


def _corner_position(strategy: CornerStrategy, context: PlacementContext) -> Point:
    room, furniture = context.room, context.furniture
    gap = strategy.gap.value

    if strategy.corner.is_west:
        x = gap
    else:
        x = room.width - furniture.width - gap

    if strategy.corner.is_north:
        y = gap
    else:
        y = room.length - furniture.length - gap

    return Point(x + strategy.shift_x, y + strategy.shift_y)


def _wall_position(strategy: WallStrategy, context: PlacementContext) -> Point:
    room, furniture = context.room, context.furniture
    gap = strategy.gap.value

    if strategy.wall.runs_east_west:
        x = along_wall_position(strategy.alignment, room.width, furniture.width, strategy.offset)
        if strategy.wall is Wall.NORTH:
            y = gap
        else:
            y = room.length - furniture.length - gap
    else:
        y = along_wall_position(strategy.alignment, room.length, furniture.length, strategy.offset)
        if strategy.wall is Wall.EAST:
            x = room.width - furniture.width - gap
        else:
            x = gap

    return Point(x, y)


def _relative_position(strategy: RelativeStrategy, context: PlacementContext) -> Point:
    reference, furniture = strategy.reference, context.furniture
    gap = strategy.gap.value

    if strategy.side is Side.NORTH:
        return Point(reference.x, reference.y - furniture.length - gap)
    if strategy.side is Side.SOUTH:
        return Point(reference.x, reference.y + reference.length + gap)
    if strategy.side is Side.EAST:
        return Point(reference.x + reference.width + gap, reference.y)
    if strategy.side is Side.WEST:
        return Point(reference.x - furniture.width - gap, reference.y)
    raise ValueError(f"Unknown side: {strategy.side}")


def _center_position(strategy: CenterStrategy, context: PlacementContext) -> Point:
    room, furniture = context.room, context.furniture
    return Point(
        (room.width - furniture.width) / 2.0 + strategy.x_offset,
        (room.length - furniture.length) / 2.0 + strategy.y_offset,
    )


# Strategy dispatch table
_POSITION_FUNCTIONS: Dict[type, Callable[..., Point]] = {
    CornerStrategy: _corner_position,
    WallStrategy: _wall_position,
    RelativeStrategy: _relative_position,
    CenterStrategy: _center_position,
}


def compute_position(strategy: PlacementStrategy, context: PlacementContext) -> Point:
    """Compute the position a strategy assigns to the context's furniture.

    Args:
        strategy: One of the four strategy configurations.
        context: Room and provisional furniture.

    Returns:
        North-west corner of the furniture. Not validated against the room.

    Raises:
        ValueError: If ``strategy`` is not a known strategy type.
    """
    try:
        position_fn = _POSITION_FUNCTIONS[type(strategy)]
    except KeyError:
        raise ValueError(f"Unknown placement strategy: {type(strategy).__name__}") from None
    return position_fn(strategy, context)
