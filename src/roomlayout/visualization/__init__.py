"""Text and image views of a room."""

from .generator import draw_ceiling, draw_floor_plan, draw_wall, generate_room_images
from .text import TextRenderer, optimal_scale

__all__ = [
    "TextRenderer",
    "draw_ceiling",
    "draw_floor_plan",
    "draw_wall",
    "generate_room_images",
    "optimal_scale",
]
