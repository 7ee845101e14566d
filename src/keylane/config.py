"""Global constants and default settings."""

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
FPS = 60
WINDOW_TITLE = "KeyLane"

# Lanes
NUM_COLUMNS = 4

# Hit evaluation timing windows (milliseconds of absolute offset)
PERFECT_WINDOW_MS = 100
GREAT_WINDOW_MS = 200
GOOD_WINDOW_MS = 300
BAD_WINDOW_MS = 500

MAX_SCORE_PER_HIT = 100

# Fraction of MAX_SCORE_PER_HIT awarded per grade
GREAT_SCORE_RATIO = 0.75
GOOD_SCORE_RATIO = 0.45

# Layout, in normalized device coordinates ([-1, 1] on both axes)
BASE_X = -0.85
COLUMN_SPACING = 0.5
TARGET_Y = 0.25  # offset of the targets from the bottom edge
BASE_Y = TARGET_Y - 1
NOTE_SIZE = 0.25

# Notes clear the visible area in this many seconds
SONG_DURATION_S = 5.0

# Keep drawing this long after the last note is done (milliseconds)
END_GRACE_MS = 1500

# (column, scheduled_ms)
DEMO_NOTES: list[tuple[int, float]] = [
    (0, 4000),
    (1, 5000),
    (2, 7000),
    (3, 8000),
    (3, 10000),
    (2, 11000),
    (1, 13000),
    (0, 14000),
]


class ConfigError(ValueError):
    """Raised when tolerances, notes or settings are invalid."""
