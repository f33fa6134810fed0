"""Shared fixtures for the room layout tests."""
import json

import pytest

from roomlayout import Room


@pytest.fixture
def room():
    """Living room used by most placement scenarios."""
    return Room(6.0, 4.0, 2.5)


@pytest.fixture
def high_room():
    """Room with a 2.7 m ceiling, used by the door and window scenarios."""
    return Room(6.0, 4.0, 2.7)


@pytest.fixture
def layout_data():
    return {
        "room": {"width": 6, "length": 4, "height": 2.7},
        "furniture": [
            {"name": "Sofa", "size": [2, 0.8, 0.8], "corner": "SOUTH_WEST", "gap": 0.2,
             "shift": {"east": 0.3}},
            {"name": "TV", "size": [1.5, 0.3, 0.6], "wall": "NORTH", "align": "centered"},
            {"name": "Table", "size": [1, 0.6, 0.4], "next_to": "Sofa", "side": "NORTH",
             "gap": 0.4},
            {"name": "Rug", "size": [2, 1.5, 0.01], "center": True},
            {"name": "Lamp", "size": [0.3, 0.3, 1.5], "at": [0.1, 0.1], "rotation": 45},
        ],
        "doors": [{"name": "Main", "size": [0.9, 2.1], "wall": "SOUTH",
                   "align": {"from_east": 0.5}}],
        "windows": [{"name": "Bay", "size": [1.2, 1.0], "bottom": 1.0, "wall": "EAST",
                     "align": {"from_north": 0.5}}],
    }


@pytest.fixture
def layout_file(tmp_path, layout_data):
    path = tmp_path / "living.json"
    path.write_text(json.dumps(layout_data), encoding="utf-8")
    return path
