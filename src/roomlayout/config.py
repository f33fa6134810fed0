"""
Configuration for Room Layout
"""

# Placement
TOLERANCE = 1e-9  # Floating point slack on fit comparisons (meters)
DEFAULT_ITEM_TYPE = "Standard"

# Text renderer
WALL_CHAR = "#"
EMPTY_CHAR = " "
DOOR_CHAR = "D"
WINDOW_CHAR = "W"
FURNITURE_CHAR = "F"
CEILING_CHAR = "."
TALL_CHAR = "*"
NEAR_PROJECTION_CHAR = "+"
FAR_PROJECTION_CHAR = "."
TEXT_MIN_SCALE = 12  # Characters per meter
TEXT_MAX_SCALE = 40
TEXT_MAX_WIDTH = 150  # Characters

# Wall elevations
PROJECTION_DEPTH_RATIO = 1 / 3  # Furniture within this share of the room length is projected
NEAR_PROJECTION_DISTANCE = 1.0  # Meters
TALL_FURNITURE_RATIO = 0.5  # Share of room height visible from the ceiling

# Image renderer
IMAGE_DPI = 140
IMAGE_SCALE = 1.2  # Inches per meter
IMAGE_MARGIN = 0.4  # Meters around the room outline
FLOOR_COLOR = "#d3d3d3"
WALL_COLOR = "#000000"
FURNITURE_COLOR = "#ff2e63"
DOOR_COLOR = "#252a34"
WINDOW_COLOR = "#08d9d6"
CEILING_COLOR = "#eaeaea"
ELEVATION_COLOR = "#faf0e6"
IMAGE_PROJECTION_DEPTH_RATIO = 0.5  # Furniture within this share of the room length shows on an elevation
