# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
They describe the look of the effect (theme colors, color tags, watermark)
and the fixed rules used to size the walker population and step length.
Tunable parameters live in `config.json` instead.
"""

# --- Theme colors (single source of truth) ---
DARK_BACKGROUND_COLOR = (26, 26, 26)
LIGHT_BACKGROUND_COLOR = (255, 255, 255)

# Watermark text gray level for each theme
DARK_WATERMARK_GRAY = 180
LIGHT_WATERMARK_GRAY = 90

# --- Walker population ---
# Viewports narrower than this (pixels) get a reduced walker count.
NARROW_VIEWPORT_WIDTH = 576
NARROW_VIEWPORT_WALKER_SCALE = 0.6

# --- Path colors ---
# Hue advances by this many degrees per walker index.
HUE_STEP_DEGREES = 47
PATH_SATURATION = 0.65
PATH_LIGHTNESS = 0.52

# --- Step length scaling ---
# Canvas min-dimension (pixels) at which the base step length is used as-is.
STEP_REFERENCE_DIMENSION = 800
STEP_MIN_SCALE = 0.8
STEP_MIN_LENGTH = 1.5

# --- Watermark ---
WATERMARK_TEXT = "2D Brownian Motion"
WATERMARK_FONT_SIZE = 15
# Offset from the top-right corner of the canvas.
WATERMARK_RIGHT_OFFSET = 160
WATERMARK_TOP_OFFSET = 20

# --- Window ---
WINDOW_TITLE = "Brownian Motion"
DEFAULT_WINDOW_SIZE = (1280, 800)
