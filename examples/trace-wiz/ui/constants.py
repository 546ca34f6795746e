"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
CANVAS_W = 420
CANVAS_H = 760
STATUS_H = 40

SCREEN_W = CANVAS_W
SCREEN_H = CANVAS_H + STATUS_H

GRID_STEP = 40
ARROW_SIZE = 12
START_RADIUS = 9

# Colors
BG_COLOR = (246, 244, 238)
GRID_COLOR = (228, 225, 216)
FIELD_COLOR = (214, 236, 214)
LINE_COLOR = (20, 20, 20)
TRAIL_COLOR = (40, 110, 230)
FINISH_COLOR = (210, 60, 60)
START_COLOR = (60, 170, 90)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
OVERLAY_COLOR = (0, 0, 0, 110)
WIN_COLOR = (100, 230, 120)
LOSE_COLOR = (240, 110, 100)
