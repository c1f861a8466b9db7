"""
Configuration constants for Guess the Flag.

Country data, round and scoring rules, and the window layout used by
the pygame front end.
"""

# ---------------------------------------------------------------------------
# Countries
# ---------------------------------------------------------------------------
COUNTRIES: list[str] = [
    "Estonia",
    "France",
    "Germany",
    "Ireland",
    "Italy",
    "Nigeria",
    "Poland",
    "Russia",
    "Spain",
    "UK",
    "US",
]

# Spoken descriptions for screen readers, one per flag
FLAG_LABELS: dict[str, str] = {
    "Estonia": "Flag with three horizontal stripes of equal size. Top stripe blue, middle stripe black, bottom stripe white",
    "France": "Flag with three vertical stripes of equal size. Left stripe blue, middle stripe white, right stripe red",
    "Germany": "Flag with three horizontal stripes of equal size. Top stripe black, middle stripe red, bottom stripe gold",
    "Ireland": "Flag with three vertical stripes of equal size. Left stripe green, middle stripe white, right stripe orange",
    "Italy": "Flag with three vertical stripes of equal size. Left stripe green, middle stripe white, right stripe red",
    "Nigeria": "Flag with three vertical stripes of equal size. Left stripe green, middle stripe white, right stripe green",
    "Poland": "Flag with two horizontal stripes of equal size. Top stripe white, bottom stripe red",
    "Russia": "Flag with three horizontal stripes of equal size. Top stripe white, middle stripe blue, bottom stripe red",
    "Spain": "Flag with three horizontal stripes. Top thin stripe red, middle thick stripe gold with a crest on the left, bottom thin stripe red",
    "UK": "Flag with overlapping red and white crosses, both straight and diagonally, on a blue background",
    "US": "Flag with red and white stripes of equal size, with white stars on a blue background in the top-left corner",
}
UNKNOWN_FLAG_LABEL: str = "Unknown flag"

# ---------------------------------------------------------------------------
# Rounds and scoring
# ---------------------------------------------------------------------------
TOTAL_ROUNDS: int = 3
CHOICES_PER_ROUND: int = 3  # flags shown per round; pool must be at least this big
POINTS_CORRECT: int = 5
POINTS_WRONG: int = -2  # no floor, score can go negative

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
SCREEN_WIDTH: int = 240
SCREEN_HEIGHT: int = 420
UPDATE_RATE: int = 30  # Hz, the game only reacts to input

FLAG_WIDTH: int = 120
FLAG_HEIGHT: int = 60
FLAG_SPACING: int = 12
FLAG_TOP: int = 110  # Y of the first flag
FLAGS_DIR: str = "data/flags"

# ---------------------------------------------------------------------------
# Colors (RGB)
# ---------------------------------------------------------------------------
COLOR_BACKGROUND_TOP: tuple[int, int, int] = (26, 51, 115)
COLOR_BACKGROUND_BOTTOM: tuple[int, int, int] = (194, 38, 66)
COLOR_PANEL: tuple[int, int, int] = (235, 235, 240)
COLOR_TEXT: tuple[int, int, int] = (255, 255, 255)
COLOR_TEXT_DARK: tuple[int, int, int] = (40, 40, 40)
COLOR_TITLE: tuple[int, int, int] = (30, 90, 220)
COLOR_DIM_ALPHA: int = 64  # alpha applied to flags that were not picked
