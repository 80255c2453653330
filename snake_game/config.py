"""
Board size, level table and palette for Víbora.

Level 1 has no obstacles; every level after that adds one (up to 12).
Food disappears after a level-dependent lifetime and respawns elsewhere,
and the snake speeds up as the score climbs.
"""

# ---------- Config ----------
GRID = 20                 # cells per row / column
CELL = 30                 # pixels per grid cell
BOARD_PX = GRID * CELL    # 600
HUD_H = 44                # HUD strip above the board
WINDOW_W, WINDOW_H = BOARD_PX, BOARD_PX + HUD_H

GROW_PER_FOOD = 1         # grow credits per food
POINTS_PER_FOOD = 10
POINTS_PER_LEVEL = 30
MAX_OBSTACLES = 12

# Speed per level (cells per second)
SPEEDS = (8, 8, 10, 10, 14, 14, 16, 16, 18, 20)

START_SNAKE = ((5, 10), (4, 10), (3, 10))
START_DIR = (1, 0)

UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Colors (R, G, B, A) as floats in [0, 1]
COL_SNAKE = (0.20, 0.95, 0.70, 1.0)       # mint body
COL_HEAD = (0.98, 0.86, 0.25, 1.0)        # amber head
COL_EYE = (0.06, 0.10, 0.20, 1.0)
COL_FOOD = (0.95, 0.35, 0.65, 1.0)        # neon pink
COL_FOOD_INNER = (1.0, 0.92, 0.98, 0.9)
COL_OBS = (0.50, 0.65, 1.0, 0.35)         # translucent rim
COL_OBS_INNER = (0.32, 0.55, 1.0, 0.85)

BG = (10, 12, 22)
TEXT = (230, 234, 245)
TEXT_DIM = (140, 150, 180)
HUD_BG = (16, 20, 36)
BUTTON = (44, 56, 96)
BUTTON_HOVER = (64, 80, 132)


def food_ttl(level):
    """Seconds a food item lives at ``level`` (never below 3)."""
    return max(3, 9 - level)


def obstacles_for(level):
    return max(0, min(level - 1, MAX_OBSTACLES))


def level_for_score(score):
    return min(1 + score // POINTS_PER_LEVEL, len(SPEEDS))


def speed_for_level(level):
    """Cells per second; levels outside the table clamp to its ends."""
    return SPEEDS[max(0, min(level - 1, len(SPEEDS) - 1))]


START_FOOD_TTL = food_ttl(1)
