"""
Fixed game constants.

Grid size, cell size and timing are not configurable at runtime.
"""

# Grid
GRID_WIDTH = 40
GRID_HEIGHT = 30
DOT_SIZE = 20  # pixels per grid cell

WINDOW_WIDTH = GRID_WIDTH * DOT_SIZE
WINDOW_HEIGHT = GRID_HEIGHT * DOT_SIZE
WINDOW_TITLE = "Snake game"

# Timing
FPS = 60
TICK_INTERVAL = 10  # frames per simulation tick (~6 ticks per second)

# Colors
BLACK = (0, 0, 0)
DARK_GRAY = (30, 30, 30)
GREEN = (0, 255, 0)
RED = (255, 0, 0)

RUNNING_BACKGROUND = BLACK
PAUSED_BACKGROUND = DARK_GRAY
SNAKE_COLOR = GREEN
FOOD_COLOR = RED

# Starting body, head first
START_POSITIONS = ((3, 1), (2, 1), (1, 1))
