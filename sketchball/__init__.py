
# ── Central defaults (tune here, not scattered across files) ──

# Canvas
WIDTH = 1024
HEIGHT = 768
BG_COLOR = (245, 244, 239)

# Ball
RADIUS_RANGE = (10.0, 30.0)
MAX_SPEED = 5.0
BALL_SATURATION = 100
BALL_LIGHTNESS = 50

# Strokes
STROKE_COLOR = (0, 0, 0)
STROKE_WIDTH = 2

# Decorative text
WORDS = ("Imagine",)
FONT_NAME = "arial"
FONT_SIZE_RANGE = (60, 80)
TEXT_SATURATION = 70
TEXT_LIGHTNESS = 80
TEXT_HEIGHT_FRACTION = 1 / 6

# Loop
FPS = 60
SEED = 42
