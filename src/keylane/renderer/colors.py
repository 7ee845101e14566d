"""Color palette."""

# RGB(A) tuples
BG = (0, 0, 0)
TARGET = (255, 255, 255, 64)
TARGET_HELD = (255, 255, 255, 140)
NOTE = (0, 0, 255)
HUD_TEXT = (220, 220, 220)
GRADE_COLORS = {
    "perfect": (80, 220, 100),
    "great": (180, 220, 80),
    "good": (240, 200, 60),
    "bad": (240, 140, 60),
    "miss": (220, 60, 60),
}
