"""Tests for roomlayout/engine/resolver.py."""
import pytest

from roomlayout import Corner, DoesNotFitError, Furniture, Gap, InvalidDimensionError, Wall
from roomlayout.engine.resolver import create_furniture_at, resolve
from roomlayout.engine.strategies import CenterStrategy, CornerStrategy, WallStrategy


class TestResolve:
    def test_returns_validated_position(self, room):
        p = resolve(CornerStrategy(Corner.NORTH_EAST), room, Furniture("Sofa", 2.0, 1.0, 0.8))
        assert (p.x, p.y) == pytest.approx((4.0, 0.0))

    def test_rejects_position_off_the_floor(self, room):
        strategy = CornerStrategy(Corner.NORTH_EAST, shift_x=0.5)
        with pytest.raises(DoesNotFitError):
            resolve(strategy, room, Furniture("Sofa", 2.0, 1.0, 0.8))

    def test_rejects_item_larger_than_room(self, room):
        with pytest.raises(DoesNotFitError):
            resolve(CenterStrategy(), room, Furniture("Stage", 7.0, 1.0, 0.5))

    def test_ignores_height(self, room):
        p = resolve(CenterStrategy(), room, Furniture("Tower", 1.0, 1.0, 10.0))
        assert (p.x, p.y) == pytest.approx((2.5, 1.5))


class TestCreateFurnitureAt:
    def test_builds_item_at_resolved_position(self, room):
        sofa = create_furniture_at(
            "Sofa", 2.0, 0.8, 0.8, WallStrategy(Wall.SOUTH, gap=Gap.of(0.1)), room, rotation=180
        )
        assert sofa.name == "Sofa"
        assert (sofa.x, sofa.y) == pytest.approx((2.0, 3.1))
        assert sofa.rotation == 180.0

    def test_does_not_add_to_room(self, room):
        create_furniture_at("Chair", 0.5, 0.5, 0.9, CenterStrategy(), room)
        assert room.furniture == []

    def test_invalid_extent(self, room):
        with pytest.raises(InvalidDimensionError):
            create_furniture_at("Chair", 0.0, 0.5, 0.9, CenterStrategy(), room)
