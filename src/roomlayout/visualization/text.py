"""Text rendering of room layouts.

This module draws a room as character grids: a top-down floor plan, one
elevation per side wall (seen from inside the room) and a ceiling view.
Every view is returned as a string; ``save_all`` also writes them to text
files.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from .. import config
from ..core.errors import IllegalWallError
from ..core.model import SIDE_WALLS, Furniture, Wall, WallItem
from ..core.room import Room
from ..geom.walls import distance_to_wall, elevation_start, projection_on_wall, wall_length

LOGGER = logging.getLogger(__name__)

Grid = List[List[str]]


def optimal_scale(room: Room) -> int:
    """Characters per meter keeping the drawing readable but under the width limit."""
    max_dimension = max(room.width, room.length)
    max_scale = math.floor(config.TEXT_MAX_WIDTH / max_dimension)
    return max(config.TEXT_MIN_SCALE, min(max_scale, config.TEXT_MAX_SCALE))


def _blank_grid(columns: int, rows: int, fill: str) -> Grid:
    """Grid of ``rows`` x ``columns`` interior cells surrounded by wall characters."""
    grid = [[fill] * (columns + 2) for _ in range(rows + 2)]
    for j in range(columns + 2):
        grid[0][j] = config.WALL_CHAR
        grid[-1][j] = config.WALL_CHAR
    for row in grid:
        row[0] = config.WALL_CHAR
        row[-1] = config.WALL_CHAR
    return grid


def _join(grid: Grid) -> str:
    return "\n".join("".join(row) for row in grid)


class TextRenderer:
    """Renders a room as text.

    Args:
        room: The room to draw. It is only read.
        chars_per_meter: Horizontal and vertical resolution. Defaults to
            ``optimal_scale(room)``.
    """

    def __init__(self, room: Room, chars_per_meter: Optional[int] = None):
        self.room = room
        if chars_per_meter is None:
            chars_per_meter = optimal_scale(room)
        self.scale = max(1, int(chars_per_meter))

    def _cells(self, meters: float) -> int:
        return int(meters * self.scale)

    def _draw_furniture(self, grid: Grid, furniture: Furniture, symbol: str) -> None:
        start_x = self._cells(furniture.x) + 1
        start_y = self._cells(furniture.y) + 1
        end_x = min(start_x + self._cells(furniture.width), len(grid[0]) - 1)
        end_y = min(start_y + self._cells(furniture.length), len(grid) - 1)
        initial = furniture.name[:1].upper() or symbol

        if end_x - start_x <= 2 and end_y - start_y <= 2:
            # Too small for an outline: fill it and mark the center
            for i in range(start_y, end_y):
                for j in range(start_x, end_x):
                    grid[i][j] = symbol
            if end_x > start_x and end_y > start_y:
                grid[start_y + (end_y - start_y) // 2][start_x + (end_x - start_x) // 2] = initial
            return

        for i in range(start_y, end_y):
            for j in range(start_x, end_x):
                if i in (start_y, end_y - 1) or j in (start_x, end_x - 1):
                    grid[i][j] = symbol
                elif i == start_y + 1 and j == start_x + 1:
                    grid[i][j] = initial

    def _draw_on_boundary(self, grid: Grid, item: WallItem, symbol: str) -> None:
        start = self._cells(item.position) + 1
        stop = start + self._cells(item.width)

        if item.wall in (Wall.NORTH, Wall.SOUTH):
            row = grid[0] if item.wall is Wall.NORTH else grid[-1]
            for j in range(start, min(stop, len(row) - 1)):
                row[j] = symbol
        else:
            column = 0 if item.wall is Wall.WEST else len(grid[0]) - 1
            for i in range(start, min(stop, len(grid) - 1)):
                grid[i][column] = symbol

    def _draw_on_elevation(self, grid: Grid, item: WallItem, symbol: str) -> None:
        start = self._cells(elevation_start(self.room, item)) + 1
        stop = min(start + self._cells(item.width), len(grid[0]) - 1)
        # Row len(grid) - 2 is the floor level
        bottom_row = len(grid) - 1 - self._cells(item.bottom_height)
        top_row = bottom_row - self._cells(item.height)

        for i in range(max(top_row, 1), min(bottom_row, len(grid) - 1)):
            for j in range(start, stop):
                grid[i][j] = symbol

    def _project_furniture(self, grid: Grid, wall: Wall) -> None:
        floor_row = len(grid) - 2
        for furniture in self.room.furniture:
            distance = distance_to_wall(self.room, furniture, wall)
            if distance >= self.room.length * config.PROJECTION_DEPTH_RATIO:
                continue

            start, width = projection_on_wall(self.room, furniture, wall)
            first = self._cells(start) + 1
            last = min(first + self._cells(width), len(grid[0]) - 1)
            top_row = floor_row + 1 - self._cells(furniture.height)
            if distance < config.NEAR_PROJECTION_DISTANCE:
                symbol = config.NEAR_PROJECTION_CHAR
            else:
                symbol = config.FAR_PROJECTION_CHAR

            for i in range(max(top_row, 1), floor_row + 1):
                for j in range(first, last):
                    if grid[i][j] == config.EMPTY_CHAR:
                        grid[i][j] = symbol

    def floor_plan(self) -> str:
        """Top-down view with furniture outlines, doors and windows on the walls."""
        grid = _blank_grid(
            self._cells(self.room.width), self._cells(self.room.length), config.EMPTY_CHAR
        )
        for furniture in self.room.furniture:
            self._draw_furniture(grid, furniture, config.FURNITURE_CHAR)
        for door in self.room.doors:
            self._draw_on_boundary(grid, door, config.DOOR_CHAR)
        for window in self.room.windows:
            self._draw_on_boundary(grid, window, config.WINDOW_CHAR)

        lines = [
            "--- FLOOR PLAN (Top-down view) ---",
            f"Scale: {self.scale} characters per meter "
            f"(1 character = {1.0 / self.scale:.2f} meters)",
            "   N",
            "W     E",
            "   S",
            "",
            _join(grid),
            "",
            self.legend(),
        ]
        return "\n".join(lines)

    def wall_view(self, wall: Wall) -> str:
        """Elevation of a side wall seen from inside the room.

        Raises:
            IllegalWallError: If ``wall`` is FLOOR or CEILING.
        """
        if not wall.is_side:
            raise IllegalWallError(f"No elevation for {wall}; use ceiling() or floor_plan()")

        grid = _blank_grid(
            self._cells(wall_length(self.room, wall)),
            self._cells(self.room.height),
            config.EMPTY_CHAR,
        )
        for door in self.room.doors:
            if door.wall is wall:
                self._draw_on_elevation(grid, door, config.DOOR_CHAR)
        for window in self.room.windows:
            if window.wall is wall:
                self._draw_on_elevation(grid, window, config.WINDOW_CHAR)
        self._project_furniture(grid, wall)

        return f"--- {wall.name} WALL VIEW ---\n{_join(grid)}"

    def ceiling(self) -> str:
        """View looking up: only furniture taller than half the room shows."""
        grid = _blank_grid(
            self._cells(self.room.width), self._cells(self.room.length), config.CEILING_CHAR
        )
        for furniture in self.room.furniture:
            if furniture.height > self.room.height * config.TALL_FURNITURE_RATIO:
                self._draw_furniture(grid, furniture, config.TALL_CHAR)

        return (
            f"--- CEILING VIEW (Looking up) ---\n{_join(grid)}\n\n"
            f"{config.TALL_CHAR} = Tall furniture visible from ceiling"
        )

    def legend(self) -> str:
        lines = [
            "Legend:",
            f"  {config.WALL_CHAR} = Wall",
            f"  {config.DOOR_CHAR} = Door",
            f"  {config.WINDOW_CHAR} = Window",
            f"  {config.FURNITURE_CHAR} = Furniture outline",
            "  [Letter] = First letter of furniture name",
            f"  {config.NEAR_PROJECTION_CHAR} = Close furniture projection",
            f"  {config.FAR_PROJECTION_CHAR} = Distant furniture projection",
        ]
        sections = (
            ("Furniture", self.room.furniture),
            ("Doors", self.room.doors),
            ("Windows", self.room.windows),
        )
        for title, items in sections:
            if items:
                lines.append("")
                lines.append(f"{title}:")
                lines.extend(f"  {item}" for item in items)
        return "\n".join(lines)

    def views(self) -> dict:
        """Every view keyed by the file name ``save_all`` uses for it."""
        views = {"floor_plan.txt": self.floor_plan()}
        for wall in SIDE_WALLS:
            views[f"{wall.name.lower()}_wall.txt"] = self.wall_view(wall)
        views["ceiling.txt"] = self.ceiling()
        return views

    def render_all(self) -> str:
        """Every view in one document, headed by the room summary."""
        rule = "=" * 80
        header = [
            rule,
            "ROOM LAYOUT VISUALIZATION",
            f"Generated: {datetime.now():%Y-%m-%d %H:%M:%S}",
            rule,
            str(self.room),
        ]
        return "\n".join(header) + "\n\n" + "\n\n".join(self.views().values()) + "\n"

    def save_all(self, output_dir: Union[str, Path]) -> List[Path]:
        """Write each view and the complete document to ``output_dir``.

        Returns:
            Paths of the written files, complete_layout.txt last.
        """
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)

        written = []
        for filename, content in self.views().items():
            written.append(_write(directory / filename, content + "\n"))
        written.append(_write(directory / "complete_layout.txt", self.render_all()))
        return written


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    LOGGER.info("Text visualization saved: %s", path)
    return path
