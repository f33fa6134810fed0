"""Image generation for room layout visualization.

This module provides functions to generate PNG images of a furnished room:
a floor plan, one elevation per side wall and a ceiling view.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from .. import config
from ..core.model import SIDE_WALLS, Wall
from ..core.room import Room
from ..geom.walls import distance_to_wall, elevation_start, projection_on_wall, wall_length

LOGGER = logging.getLogger(__name__)


def _pyplot():
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    return plt


def _rect(x: float, y: float, width: float, height: float) -> Tuple[List[float], List[float]]:
    """Corner coordinates of an axis-aligned rectangle, ready for ``plt.fill``."""
    return [x, x + width, x + width, x], [y, y, y + height, y + height]


def _figure_size(width: float, height: float) -> Tuple[float, float]:
    margin = 2 * config.IMAGE_MARGIN
    return ((width + margin) * config.IMAGE_SCALE + 1, (height + margin) * config.IMAGE_SCALE + 1)


def _finish(plt, width: float, height: float, output_path: Path) -> Path:
    plt.xlim(-config.IMAGE_MARGIN, width + config.IMAGE_MARGIN)
    plt.ylim(-config.IMAGE_MARGIN, height + config.IMAGE_MARGIN)
    plt.gca().set_aspect("equal", adjustable="box")
    plt.axis("off")
    plt.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(output_path, dpi=config.IMAGE_DPI)
    plt.close()
    LOGGER.info("Image saved: %s", output_path)
    return output_path


def draw_floor_plan(room: Room, output_path: Union[str, Path]) -> Path:
    """Draw the room seen from above.

    Args:
        room: The room to draw.
        output_path: Path where to save the PNG image.

    Returns:
        The path written.
    """
    plt = _pyplot()
    width, length = room.width, room.length

    def invert_y(y: float) -> float:
        return length - y

    plt.figure(figsize=_figure_size(width, length))
    plt.title("Floor Plan", fontsize=12, fontweight="bold")

    xs, ys = _rect(0, 0, width, length)
    plt.fill(xs, ys, facecolor=config.FLOOR_COLOR, edgecolor=config.WALL_COLOR, linewidth=3)

    for furniture in room.furniture:
        xs, ys = _rect(furniture.x, invert_y(furniture.y + furniture.length),
                       furniture.width, furniture.length)
        plt.fill(xs, ys, facecolor=config.FURNITURE_COLOR, alpha=0.7, edgecolor="black", linewidth=1)
        center = furniture.center
        plt.text(center.x, invert_y(center.y), furniture.name,
                 ha="center", va="center", fontsize=8, fontweight="bold")

    for item in room.wall_items:
        color = config.DOOR_COLOR if item.kind == "Door" else config.WINDOW_COLOR
        start, end = item.position, item.position + item.width
        if item.wall is Wall.NORTH:
            plt.plot([start, end], [length, length], color=color, linewidth=6)
        elif item.wall is Wall.SOUTH:
            plt.plot([start, end], [0, 0], color=color, linewidth=6)
        elif item.wall is Wall.WEST:
            plt.plot([0, 0], [invert_y(start), invert_y(end)], color=color, linewidth=6)
        else:
            plt.plot([width, width], [invert_y(start), invert_y(end)], color=color, linewidth=6)

    offset = config.IMAGE_MARGIN / 2
    plt.text(width / 2, length + offset, "N", ha="center", va="center", fontweight="bold")
    plt.text(width / 2, -offset, "S", ha="center", va="center", fontweight="bold")
    plt.text(-offset, length / 2, "W", ha="center", va="center", fontweight="bold")
    plt.text(width + offset, length / 2, "E", ha="center", va="center", fontweight="bold")

    return _finish(plt, width, length, Path(output_path))


def draw_wall(room: Room, wall: Wall, output_path: Union[str, Path]) -> Path:
    """Draw the elevation of a side wall seen from inside the room.

    Doors and windows are drawn at their real height; furniture near the
    wall is drawn as a translucent silhouette that fades with distance.

    Raises:
        IllegalWallError: If ``wall`` is FLOOR or CEILING.
    """
    plt = _pyplot()
    length = wall_length(room, wall)
    height = room.height
    depth = room.length * config.IMAGE_PROJECTION_DEPTH_RATIO

    plt.figure(figsize=_figure_size(length, height))
    plt.title(f"{wall} Wall View", fontsize=12, fontweight="bold")

    xs, ys = _rect(0, 0, length, height)
    plt.fill(xs, ys, facecolor=config.ELEVATION_COLOR, edgecolor=config.WALL_COLOR, linewidth=3)

    for furniture in room.furniture:
        distance = distance_to_wall(room, furniture, wall)
        if distance >= depth:
            continue
        start, span = projection_on_wall(room, furniture, wall)
        xs, ys = _rect(start, 0, span, min(furniture.height, height))
        plt.fill(xs, ys, facecolor=config.FURNITURE_COLOR, alpha=0.3 * (1 - distance / depth),
                 edgecolor="gray", linewidth=1)

    for item in room.wall_items:
        if item.wall is not wall:
            continue
        start = elevation_start(room, item)
        xs, ys = _rect(start, item.bottom_height, item.width, item.height)
        if item.kind == "Door":
            plt.fill(xs, ys, facecolor=config.DOOR_COLOR, edgecolor="black", linewidth=2)
        else:
            plt.fill(xs, ys, facecolor=config.WINDOW_COLOR, alpha=0.7, edgecolor="black", linewidth=2)
            middle_x = start + item.width / 2
            middle_y = item.bottom_height + item.height / 2
            plt.plot([middle_x, middle_x], [item.bottom_height, item.top_height], color="black", linewidth=1)
            plt.plot([start, start + item.width], [middle_y, middle_y], color="black", linewidth=1)

    return _finish(plt, length, height, Path(output_path))


def draw_ceiling(room: Room, output_path: Union[str, Path]) -> Path:
    """Draw the ceiling seen from below; only tall furniture shows through."""
    plt = _pyplot()
    width, length = room.width, room.length

    def invert_y(y: float) -> float:
        return length - y

    plt.figure(figsize=_figure_size(width, length))
    plt.title("Ceiling View", fontsize=12, fontweight="bold")

    xs, ys = _rect(0, 0, width, length)
    plt.fill(xs, ys, facecolor=config.CEILING_COLOR, edgecolor=config.WALL_COLOR, linewidth=3)

    for furniture in room.furniture:
        if furniture.height <= room.height * config.TALL_FURNITURE_RATIO:
            continue
        xs, ys = _rect(furniture.x, invert_y(furniture.y + furniture.length),
                       furniture.width, furniture.length)
        plt.fill(xs, ys, facecolor=config.FURNITURE_COLOR, alpha=0.3, edgecolor="gray", linewidth=1)
        center = furniture.center
        plt.text(center.x, invert_y(center.y), furniture.name, ha="center", va="center", fontsize=8)

    return _finish(plt, width, length, Path(output_path))


def generate_room_images(room: Room, output_dir: Union[str, Path]) -> List[Path]:
    """Generate every PNG view of a room.

    Args:
        room: The room to visualize.
        output_dir: Directory where to save the images. Created if missing.

    Returns:
        Paths of floor_plan.png, one <wall>_wall.png per side wall and
        ceiling.png, in that order.
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)

    images = [draw_floor_plan(room, directory / "floor_plan.png")]
    for wall in SIDE_WALLS:
        images.append(draw_wall(room, wall, directory / f"{wall.name.lower()}_wall.png"))
    images.append(draw_ceiling(room, directory / "ceiling.png"))
    return images
