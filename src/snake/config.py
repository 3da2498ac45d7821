from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ----- Window -----
WIDTH, HEIGHT = 560, 700
HUD_HEIGHT = 56
DPAD_HEIGHT = 132

# ----- Colors -----
GRID_A     = (14, 22, 35)
GRID_B     = (12, 19, 32)
SNAKE      = (34, 211, 238)
SNAKE_HEAD = (110, 231, 183)
FOOD       = (245, 158, 11)
PANEL      = (20, 28, 42)
BUTTON     = (36, 48, 68)
TEXT       = (226, 232, 240)
MUTED      = (148, 163, 184)
SHADE      = (0, 0, 0, 150)  # RGBA

# ----- Persistence -----
BEST_SCORE_KEY = "snake-high-score"
BEST_SCORE_FILE = Path("snake_highscores.json")

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    columns: int = 21
    rows: int = 21
    initial_length: int = 4
    base_speed_ms: int = 120          # lower is faster
    speedup_every: int = 5            # points per speed-up
    speedup_factor: float = 0.92      # interval multiplier per speed-up
    min_speed_ms: int = 45
    max_speed_multiplier: float = 3.0  # display cap
    fps: int = 60
    seed: Optional[int] = None
    best_score_file: Path = BEST_SCORE_FILE
    debug: bool = False

CFG = Config()
