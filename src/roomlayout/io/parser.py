"""Parser for room layout JSON files.

This module loads a room from a JSON description of placement intents,
replaying every entry through the fluent builders, and saves a resolved
room back to JSON.

Layout format::

    {
      "room": {"width": 6, "length": 4, "height": 2.7},
      "furniture": [
        {"name": "Sofa", "size": [2, 0.8, 0.8], "corner": "SOUTH_WEST",
         "gap": 0.2, "shift": {"east": 0.3}},
        {"name": "TV", "size": [1.5, 0.3, 0.6], "wall": "NORTH", "align": "centered"},
        {"name": "Table", "size": [1, 0.6, 0.4], "next_to": "Sofa", "side": "NORTH"},
        {"name": "Rug", "size": [2, 1.5, 0.01], "center": true},
        {"name": "Lamp", "size": [0.3, 0.3, 1.5], "at": [0.1, 0.1], "rotation": 45}
      ],
      "doors": [{"name": "Main", "size": [0.9, 2.1], "wall": "SOUTH"}],
      "windows": [{"name": "Bay", "size": [1.2, 1.0], "bottom": 1.0, "wall": "EAST",
                   "align": {"from_north": 0.5}}]
    }

Malformed entries raise ``LayoutFormatError``; placement failures
(``PlacementError``) propagate unchanged.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Type, TypeVar, Union

from ..core.model import Corner, Furniture, Side, Wall
from ..core.room import Room

LOGGER = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

_PLACEMENT_MODES = ("at", "corner", "wall", "next_to", "center")
_SHIFT_DIRECTIONS = ("north", "south", "east", "west")
_ALIGN_KEYWORDS = ("from_north", "from_south", "from_east", "from_west")


class LayoutFormatError(ValueError):
    """Raised when a layout document is malformed."""

    pass


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool):
        raise LayoutFormatError(f"{what}: expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise LayoutFormatError(f"{what}: expected a number, got {value!r}") from e


def _numbers(value: Any, count: int, what: str) -> List[float]:
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != count:
        raise LayoutFormatError(f"{what}: expected a list of {count} numbers, got {value!r}")
    return [_number(v, what) for v in value]


def _member(enum_cls: Type[E], value: Any, what: str) -> E:
    """Look up an enum member by name, case-insensitively ("south-west" works)."""
    if not isinstance(value, str):
        raise LayoutFormatError(f"{what}: expected a {enum_cls.__name__} name, got {value!r}")
    key = value.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return enum_cls[key]
    except KeyError:
        names = ", ".join(m.name for m in enum_cls)
        raise LayoutFormatError(f"{what}: unknown {enum_cls.__name__} '{value}' (expected one of {names})") from None


def _required(entry: Mapping[str, Any], key: str, what: str) -> Any:
    if key not in entry:
        raise LayoutFormatError(f"{what}: missing '{key}'")
    return entry[key]


def _apply_shifts(builder: Any, shifts: Any, what: str) -> None:
    if not isinstance(shifts, Mapping):
        raise LayoutFormatError(f"{what}: 'shift' must be an object, got {shifts!r}")
    for direction, distance in shifts.items():
        if direction not in _SHIFT_DIRECTIONS:
            raise LayoutFormatError(f"{what}: unknown shift direction '{direction}'")
        getattr(builder, f"shift_{direction}")(_number(distance, what))


def _apply_alignment(builder: Any, align: Any, what: str) -> None:
    if align == "centered":
        builder.centered()
        return
    if not isinstance(align, Mapping) or len(align) != 1:
        raise LayoutFormatError(
            f"{what}: 'align' must be \"centered\" or a single from_* entry, got {align!r}"
        )
    keyword, distance = next(iter(align.items()))
    if keyword not in _ALIGN_KEYWORDS:
        raise LayoutFormatError(f"{what}: unknown alignment '{keyword}'")
    getattr(builder, keyword)(_number(distance, what))


def _place_furniture(room: Room, entry: Any, index: int, placed: Dict[str, Furniture]) -> Furniture:
    if not isinstance(entry, Mapping):
        raise LayoutFormatError(f"furniture[{index}]: expected an object, got {entry!r}")

    name = _required(entry, "name", f"furniture[{index}]")
    what = f"furniture '{name}'"
    width, length, height = _numbers(_required(entry, "size", what), 3, what)
    rotation = _number(entry.get("rotation", 0.0), what)

    modes = [mode for mode in _PLACEMENT_MODES if mode in entry]
    if len(modes) != 1:
        raise LayoutFormatError(
            f"{what}: expected exactly one of {', '.join(_PLACEMENT_MODES)}, got {modes or 'none'}"
        )
    mode = modes[0]

    if mode == "at":
        x, y = _numbers(entry["at"], 2, what)
        furniture = Furniture(name, width, length, height, x, y, rotation)
        room.add_furniture(furniture)
        return furniture

    placement = room.place(name, width, length, height, rotation)

    if mode == "corner":
        builder = placement.in_corner(_member(Corner, entry["corner"], what))
    elif mode == "wall":
        builder = placement.on_wall(_member(Wall, entry["wall"], what))
        if "align" in entry:
            _apply_alignment(builder, entry["align"], what)
    elif mode == "next_to":
        reference_name = entry["next_to"]
        if reference_name not in placed:
            raise LayoutFormatError(f"{what}: no furniture named '{reference_name}' placed before it")
        builder = placement.next_to(placed[reference_name])
        if "side" in entry:
            builder.on_side(_member(Side, entry["side"], what))
    else:
        builder = placement.in_center()

    if "gap" in entry:
        if mode == "center":
            raise LayoutFormatError(f"{what}: center placement takes no gap")
        builder.with_gap(_number(entry["gap"], what))

    if "shift" in entry:
        if mode == "next_to":
            raise LayoutFormatError(f"{what}: relative placement takes no shift")
        _apply_shifts(builder, entry["shift"], what)

    return builder.build()


def _place_wall_item(room: Room, entry: Any, index: int, kind: str):
    if not isinstance(entry, Mapping):
        raise LayoutFormatError(f"{kind}s[{index}]: expected an object, got {entry!r}")

    name = _required(entry, "name", f"{kind}s[{index}]")
    what = f"{kind} '{name}'"
    width, height = _numbers(_required(entry, "size", what), 2, what)
    wall = _member(Wall, _required(entry, "wall", what), what)

    if kind == "door":
        placement = room.place_door(name, width, height)
    else:
        bottom = _number(_required(entry, "bottom", what), what)
        placement = room.place_window(name, width, height, bottom)

    builder = placement.on_wall(wall)
    if "align" in entry:
        _apply_alignment(builder, entry["align"], what)
    if "shift" in entry:
        _apply_shifts(builder, entry["shift"], what)
    return builder.build()


def room_from_dict(data: Mapping[str, Any]) -> Room:
    """Build a room from a parsed layout document.

    Entries are replayed in document order: furniture first, then doors,
    then windows. ``next_to`` refers to the most recent furniture placed
    under that name.

    Raises:
        LayoutFormatError: If the document is malformed.
        PlacementError: If an entry cannot be placed.
    """
    if not isinstance(data, Mapping):
        raise LayoutFormatError(f"Layout must be an object, got {type(data).__name__}")

    room_data = _required(data, "room", "layout")
    if not isinstance(room_data, Mapping):
        raise LayoutFormatError(f"room: expected an object, got {room_data!r}")
    room = Room(
        _number(_required(room_data, "width", "room"), "room width"),
        _number(_required(room_data, "length", "room"), "room length"),
        _number(_required(room_data, "height", "room"), "room height"),
    )

    placed: Dict[str, Furniture] = {}
    for index, entry in enumerate(data.get("furniture", [])):
        furniture = _place_furniture(room, entry, index, placed)
        placed[furniture.name] = furniture

    for index, entry in enumerate(data.get("doors", [])):
        _place_wall_item(room, entry, index, "door")

    for index, entry in enumerate(data.get("windows", [])):
        _place_wall_item(room, entry, index, "window")

    return room


def load_room(path: Union[str, Path]) -> Room:
    """Load a room layout from a JSON file.

    Args:
        path: Path to the JSON file containing the layout.

    Returns:
        Room with every entry placed.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        LayoutFormatError: If the JSON data is malformed.
        PlacementError: If an entry cannot be placed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise LayoutFormatError(f"Invalid JSON in {path}: {e}") from e

    room = room_from_dict(data)
    LOGGER.info("Loaded %s from %s", room, file_path)
    return room


def _along_wall_keyword(wall: Wall) -> str:
    return "from_west" if wall.runs_east_west else "from_north"


def room_to_dict(room: Room) -> Dict[str, Any]:
    """Convert a room to a layout document with every position resolved."""
    return {
        "room": {"width": room.width, "length": room.length, "height": room.height},
        "furniture": [
            {
                "name": f.name,
                "size": [f.width, f.length, f.height],
                "at": [f.x, f.y],
                "rotation": f.rotation,
            }
            for f in room.furniture
        ],
        "doors": [
            {
                "name": d.type,
                "size": [d.width, d.height],
                "wall": d.wall.name,
                "align": {_along_wall_keyword(d.wall): d.position},
            }
            for d in room.doors
        ],
        "windows": [
            {
                "name": w.type,
                "size": [w.width, w.height],
                "bottom": w.bottom_height,
                "wall": w.wall.name,
                "align": {_along_wall_keyword(w.wall): w.position},
            }
            for w in room.windows
        ],
    }


def save_room(room: Room, output_path: Union[str, Path]) -> Path:
    """Save a room to a JSON layout file.

    Args:
        room: The room to save.
        output_path: Path where to save the JSON file.

    Returns:
        The path written.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(room_to_dict(room), f, indent=2)

    LOGGER.info("Saved layout to %s", path)
    return path
