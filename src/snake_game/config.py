from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import NamedTuple

# ----- Grid & window -----
GRID_SIZE = 20
CELL_SIZE = 24
BOARD_PX = GRID_SIZE * CELL_SIZE
HUD_H = 40
DPAD_H = 120
WIDTH, HEIGHT = BOARD_PX, HUD_H + BOARD_PX + DPAD_H

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (30, 30, 36)
GREEN = (80, 200, 80)
HEAD  = (130, 240, 130)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)
BUTTON = (60, 60, 72)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Start position: head first, aligned horizontally -----
START_SNAKE = [(10, 10), (9, 10), (8, 10)]
START_DIRECTION = RIGHT

# Speed only ramps after this many points
SPEED_GRACE_SCORE = 3
SWIPE_MIN_DISTANCE = 30


class SpeedProfile(NamedTuple):
    base_ms: int
    min_ms: int
    step_ms: int


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: str | Difficulty) -> Difficulty:
        """Accept an enum member, its value or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown difficulty: {value!r}")

    @property
    def profile(self) -> SpeedProfile:
        return DIFFICULTY_PROFILES[self]


DIFFICULTY_PROFILES = {
    Difficulty.EASY:   SpeedProfile(base_ms=230, min_ms=120, step_ms=6),
    Difficulty.MEDIUM: SpeedProfile(base_ms=190, min_ms=80,  step_ms=7),
    Difficulty.HARD:   SpeedProfile(base_ms=160, min_ms=60,  step_ms=8),
}


# ----- Tunables (filled from the command line) -----
@dataclass
class Config:
    seed: int | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    high_score_path: Path = Path.home() / ".snake_game" / "highscore.json"
    swipe_min_distance: int = SWIPE_MIN_DISTANCE
    fps: int = 60
