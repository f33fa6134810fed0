"""Reading and writing room layout documents."""

from .parser import LayoutFormatError, load_room, room_from_dict, room_to_dict, save_room

__all__ = ["LayoutFormatError", "load_room", "room_from_dict", "room_to_dict", "save_room"]
