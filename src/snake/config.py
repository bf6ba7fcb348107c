from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os

# ----- Grid -----
GRID_SIZE = 20
CELL_SIZE = 24

# ----- Window layout (header / board / d-pad) -----
HEADER_H = 64
BOARD_PX = GRID_SIZE * CELL_SIZE
PAD_H = 190
WIDTH = BOARD_PX
HEIGHT = HEADER_H + BOARD_PX + PAD_H

# ----- Colors -----
BG        = (20, 20, 24)
BOARD_BG  = (12, 14, 18)
GRID_LINE = (28, 32, 38)
HEAD      = (120, 255, 120)
BODY      = (60, 180, 60)
FOOD      = (220, 60, 60)
TEXT      = (220, 220, 230)
MUTED     = (140, 140, 150)
BUTTON    = (48, 52, 64)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = {"UP": UP, "DOWN": DOWN, "LEFT": LEFT, "RIGHT": RIGHT}

# ----- Run states -----
RUNNING, PAUSED, OVER = "RUNNING", "PAUSED", "OVER"

# ----- Starting position -----
START_CELL = (10, 10)
START_FOOD = (15, 15)

# ----- Speed (tick interval in ms) -----
INITIAL_SPEED = 150
SPEED_INCREMENT = 2
MIN_SPEED = 50

# ----- Persistence -----
HIGH_SCORE_KEY = "snakeHighScore"
SCORES_ENV = "SNAKE_SCORES_FILE"


def default_scores_path() -> Path:
    env = os.environ.get(SCORES_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".snake" / "scores.json"


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    initial_speed: int = INITIAL_SPEED
    speed_increment: int = SPEED_INCREMENT
    min_speed: int = MIN_SPEED
    fps: int = 60
    scores_path: Optional[Path] = None    # None -> default_scores_path() when the store is made

    def __post_init__(self):
        if self.min_speed <= 0:
            raise ValueError("min_speed must be positive")
        if self.initial_speed < self.min_speed:
            raise ValueError(
                f"initial_speed {self.initial_speed}ms is below min_speed {self.min_speed}ms"
            )


CFG = Config()
