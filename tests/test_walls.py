"""Tests for roomlayout/geom/walls.py: wall arithmetic."""
import pytest

from roomlayout import Door, Furniture, IllegalWallError, Wall, WallAlignment, Window
from roomlayout.geom import (
    along_wall_position,
    distance_to_wall,
    elevation_start,
    projection_on_wall,
    wall_length,
)


class TestWallLength:
    def test_side_walls(self, room):
        assert wall_length(room, Wall.NORTH) == 6.0
        assert wall_length(room, Wall.EAST) == 4.0

    @pytest.mark.parametrize("wall", [Wall.FLOOR, Wall.CEILING])
    def test_floor_and_ceiling(self, room, wall):
        with pytest.raises(IllegalWallError):
            wall_length(room, wall)


class TestAlongWallPosition:
    def test_centered(self):
        assert along_wall_position(WallAlignment.CENTERED, 6.0, 0.9, 0.0) == pytest.approx(2.55)

    def test_centered_with_offset(self):
        assert along_wall_position(WallAlignment.CENTERED, 6.0, 1.0, -0.5) == pytest.approx(2.0)

    def test_from_start(self):
        assert along_wall_position(WallAlignment.FROM_START, 6.0, 0.8, 1.5) == pytest.approx(1.5)

    def test_from_end(self):
        assert along_wall_position(WallAlignment.FROM_END, 6.0, 1.6, 0.8) == pytest.approx(3.6)

    def test_no_clamping(self):
        assert along_wall_position(WallAlignment.CENTERED, 6.0, 7.0, 0.0) == pytest.approx(-0.5)


class TestElevation:
    def test_west_wall_is_mirrored(self, room):
        window = Window(Wall.WEST, 0.5, 1.0, 1.0, 1.0)
        assert elevation_start(room, window) == pytest.approx(2.5)

    @pytest.mark.parametrize("wall", [Wall.NORTH, Wall.SOUTH, Wall.EAST])
    def test_other_walls_are_not(self, room, wall):
        door = Door(wall, 0.5, 0.9, 2.1)
        assert elevation_start(room, door) == pytest.approx(0.5)


class TestProjection:
    @pytest.fixture
    def desk(self):
        return Furniture("Desk", 1.2, 0.6, 0.75, 1.0, 0.5)

    @pytest.mark.parametrize("wall, expected", [
        (Wall.NORTH, 0.5),
        (Wall.SOUTH, 2.9),
        (Wall.EAST, 3.8),
        (Wall.WEST, 1.0),
    ])
    def test_distance_to_wall(self, room, desk, wall, expected):
        assert distance_to_wall(room, desk, wall) == pytest.approx(expected)

    @pytest.mark.parametrize("wall, expected", [
        (Wall.NORTH, (1.0, 1.2)),
        (Wall.SOUTH, (1.0, 1.2)),
        (Wall.EAST, (0.5, 0.6)),
        (Wall.WEST, (2.9, 0.6)),
    ])
    def test_projection_on_wall(self, room, desk, wall, expected):
        assert projection_on_wall(room, desk, wall) == pytest.approx(expected)

    def test_floor_has_no_projection(self, room, desk):
        with pytest.raises(IllegalWallError):
            projection_on_wall(room, desk, Wall.FLOOR)
        with pytest.raises(IllegalWallError):
            distance_to_wall(room, desk, Wall.CEILING)
