# config.py
import os

# Window
WINDOW_TITLE = "Raster Lab"
WINDOW_GEOMETRY = "760x560"
APPEARANCE_MODE = "Dark"
COLOR_THEME = "blue"
UI_FONT = ("Microsoft YaHei", 14)

# Surface (engine origin sits at the centre, y axis points up)
CANVAS_SIZE = 50
DISPLAY_ZOOM = 8             # nearest-neighbour enlargement for the preview

# Colors
CANVAS_BG_COLOR = "#1a1a1a"
VIEWPORT_BG_COLOR = "#202020"
POINT_COLOR = "#ff69b4"      # neon pink
AXIS_COLOR = "#808080"

# Algorithm selected on startup
DEFAULT_ALGORITHM = "bresenham"

# Default field values shown in the form
DEFAULT_FIELDS = {
    "x0": "0",
    "y0": "0",
    "x1": "10",
    "y1": "5",
    "radius": "10",
}

# Logging
LOG_LEVEL = os.environ.get("RASTER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
