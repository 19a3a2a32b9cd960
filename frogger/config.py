"""Board geometry and timing constants for the desktop build of the game."""

LANES_COUNT = 16
MAX_OBJECTS_PER_LANE = 5

SHORT_SIZE = 8
NORMAL_SIZE = 16
BIG_SIZE = 32
GIGANT_SIZE = 48
WALL_SIZE = 24
BOTTOM_SIZE = 32
TOTAL_ROWS = 16
TOTAL_COLUMNS = 12

SCALE = 2.75


def resize(x: float) -> float:
    """Scale a sprite-sheet measure to screen pixels."""
    return SCALE * x


def row(x: float) -> float:
    """Screen y coordinate of the top of board row ``x``."""
    return resize(SHORT_SIZE + NORMAL_SIZE * x)


TOTAL_WIDTH = resize(TOTAL_COLUMNS * NORMAL_SIZE)
TOTAL_HEIGHT = resize(BOTTOM_SIZE + SHORT_SIZE + TOTAL_ROWS * NORMAL_SIZE)

LANE_X_PIXELS = int(TOTAL_WIDTH)
LANE_Y_PIXELS = int(resize(NORMAL_SIZE * LANES_COUNT))
LANE_PIXEL_HEIGHT = LANE_Y_PIXELS // LANES_COUNT

FROG_MOVEMENT_COOLDOWN_MS = 20
BASE_OBJECT_SPEED_MS = 30
TIME_PER_LEVEL_MS = 60000
TIME_MICROSECONDS = 10000