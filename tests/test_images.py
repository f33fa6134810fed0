"""Tests for roomlayout/visualization/generator.py: PNG views."""
import pytest

from roomlayout import IllegalWallError, Wall
from roomlayout.cli import build_demo_room
from roomlayout.visualization import draw_floor_plan, draw_wall, generate_room_images

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def demo_room():
    return build_demo_room()


def test_generate_room_images(demo_room, tmp_path):
    paths = generate_room_images(demo_room, tmp_path / "images")
    assert [p.name for p in paths] == [
        "floor_plan.png",
        "north_wall.png",
        "south_wall.png",
        "east_wall.png",
        "west_wall.png",
        "ceiling.png",
    ]
    for path in paths:
        assert path.read_bytes().startswith(PNG_SIGNATURE)


def test_draw_floor_plan_creates_parents(demo_room, tmp_path):
    path = draw_floor_plan(demo_room, tmp_path / "a" / "b" / "plan.png")
    assert path.exists()


def test_draw_wall_rejects_ceiling(demo_room, tmp_path):
    with pytest.raises(IllegalWallError):
        draw_wall(demo_room, Wall.CEILING, tmp_path / "ceiling.png")
    assert not (tmp_path / "ceiling.png").exists()


def test_empty_room(room, tmp_path):
    paths = generate_room_images(room, tmp_path)
    assert len(paths) == 6
