"""Tests for roomlayout/core/model.py: value types."""
import dataclasses

import pytest

from roomlayout import (
    Corner,
    Door,
    Furniture,
    Gap,
    IllegalWallError,
    InvalidDimensionError,
    Point,
    Side,
    Wall,
    Window,
)
from roomlayout.core.model import SIDE_WALLS, WallItem


class TestEnums:
    def test_corner_halves(self):
        assert Corner.NORTH_WEST.is_north and Corner.NORTH_WEST.is_west
        assert Corner.NORTH_EAST.is_north and not Corner.NORTH_EAST.is_west
        assert not Corner.SOUTH_WEST.is_north and Corner.SOUTH_WEST.is_west
        assert not Corner.SOUTH_EAST.is_north and not Corner.SOUTH_EAST.is_west

    def test_side_walls(self):
        assert SIDE_WALLS == (Wall.NORTH, Wall.SOUTH, Wall.EAST, Wall.WEST)
        assert all(w.is_side for w in SIDE_WALLS)
        assert not Wall.FLOOR.is_side
        assert not Wall.CEILING.is_side

    def test_side_is_not_wall(self):
        assert Side.NORTH != Wall.NORTH

    def test_str(self):
        assert str(Wall.NORTH) == "North"
        assert str(Side.SOUTH) == "South"
        assert str(Corner.SOUTH_EAST) == "SOUTH_EAST"


class TestPoint:
    def test_str_one_decimal(self):
        assert str(Point(3.14, 2.66)) == "(3.1, 2.7)"

    def test_value_equality(self):
        assert Point(1.0, 2.0) == Point(1.0, 2.0)


class TestGap:
    def test_default_is_zero(self):
        assert Gap().value == 0.0

    def test_of_zero_is_shared(self):
        assert Gap.of(0.0) is Gap.NO_GAP

    def test_of_value(self):
        assert Gap.of(0.25).value == 0.25
        assert str(Gap.of(0.25)) == "Gap(0.25m)"

    def test_negative_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Gap.of(-0.1)

    def test_nan_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Gap.of(float("nan"))


class TestFurniture:
    def test_defaults(self):
        f = Furniture("Chair", 0.5, 0.5, 0.9)
        assert (f.x, f.y, f.rotation) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("rotation, expected", [
        (90, 90.0),
        (360, 0.0),
        (450, 90.0),
        (-90, 270.0),
        (720.5, 0.5),
    ])
    def test_rotation_normalized(self, rotation, expected):
        f = Furniture("Chair", 0.5, 0.5, 0.9, rotation=rotation)
        assert f.rotation == pytest.approx(expected)
        assert 0.0 <= f.rotation < 360.0

    def test_tiny_negative_rotation_stays_in_range(self):
        f = Furniture("Chair", 0.5, 0.5, 0.9, rotation=-1e-20)
        assert 0.0 <= f.rotation < 360.0

    @pytest.mark.parametrize("size", [(0, 1, 1), (1, -1, 1), (1, 1, 0), (float("nan"), 1, 1)])
    def test_non_positive_extent_rejected(self, size):
        with pytest.raises(InvalidDimensionError):
            Furniture("Bad", *size)

    @pytest.mark.parametrize("rotation", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rotation_rejected(self, rotation):
        with pytest.raises(InvalidDimensionError):
            Furniture("Chair", 0.5, 0.5, 0.9, rotation=rotation)

    def test_position_and_center(self):
        f = Furniture("Table", 2.0, 1.0, 0.7, 1.0, 0.5)
        assert f.position == Point(1.0, 0.5)
        assert f.center == Point(2.0, 1.0)

    def test_immutable(self):
        f = Furniture("Table", 2.0, 1.0, 0.7)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.x = 3.0

    def test_str(self):
        assert str(Furniture("Sofa", 2, 1, 0.8, 4, 0)) == "Sofa: 2.0x1.0x0.8m at (4.0, 0.0)"


class TestWallItems:
    def test_wall_item_is_abstract(self):
        with pytest.raises(TypeError):
            WallItem(Wall.NORTH, 0.0, 1.0, 1.0, 0.0)

    def test_door_starts_at_floor(self):
        door = Door(Wall.NORTH, 1.0, 0.9, 2.1)
        assert door.bottom_height == 0.0
        assert door.top_height == pytest.approx(2.1)
        assert door.type == "Standard"
        assert door.kind == "Door"

    def test_window_fields(self):
        window = Window(Wall.EAST, 1.4, 1.2, 1.0, 1.0, type="Bay")
        assert window.top_height == pytest.approx(2.0)
        assert window.type == "Bay"
        assert window.kind == "Window"

    @pytest.mark.parametrize("wall", [Wall.FLOOR, Wall.CEILING])
    def test_floor_and_ceiling_rejected(self, wall):
        with pytest.raises(IllegalWallError):
            Door(wall, 0.0, 0.9, 2.1)
        with pytest.raises(IllegalWallError):
            Window(wall, 0.0, 1.0, 1.0, 1.0)

    def test_invalid_dimensions(self):
        with pytest.raises(InvalidDimensionError):
            Door(Wall.NORTH, 0.0, 0.0, 2.1)
        with pytest.raises(InvalidDimensionError):
            Window(Wall.NORTH, 0.0, 1.0, -1.0, 1.0)
        with pytest.raises(InvalidDimensionError):
            Window(Wall.NORTH, 0.0, 1.0, 1.0, -0.1)
        with pytest.raises(InvalidDimensionError):
            Window(Wall.NORTH, 0.0, 1.0, 1.0, float("nan"))

    def test_type_must_be_a_string(self):
        with pytest.raises(TypeError):
            Door(Wall.NORTH, 1.0, 0.9, 2.1, 0.5)
        assert Door(Wall.NORTH, 1.0, 0.9, 2.1, "Main").type == "Main"

    def test_str(self):
        door = Door(Wall.SOUTH, 1.5, 0.9, 2.1, type="Main")
        assert str(door) == "Main Door on South wall: 0.9m wide x 2.1m high at position 1.5m"
        window = Window(Wall.EAST, 1.4, 1.2, 1.0, 1.0)
        assert str(window) == (
            "Standard Window on East wall: 1.2m wide x 1.0m high at position 1.4m, "
            "1.0m from floor"
        )
