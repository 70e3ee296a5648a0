from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
TITLE = "Snake"
WIDTH, HEIGHT = 800, 600
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Colors -----
BG_LIGHT = (175, 215, 70)
BG_DARK  = (167, 209, 61)
SNAKE_COLOR = (0, 117, 44)
FOOD_COLOR  = (230, 41, 55)
TEXT = (0, 0, 0)

# ----- Text sizes (px) -----
SCORE_SIZE = 36
TITLE_SIZE = 48
HINT_SIZE  = 24

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> nondeterministic food
    tick_interval_ms: int = 150    # one snake step every N ms
    fps: int = 60                  # render rate; movement is gated separately

    def __post_init__(self):
        if self.tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {self.tick_interval_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")

CFG = Config()
