# speed.py
from __future__ import annotations
import logging

from .config import Difficulty, SpeedProfile, SPEED_GRACE_SCORE

logger = logging.getLogger(__name__)


def interval_for(profile: SpeedProfile, score: int) -> int:
    """Tick interval (ms) for a score: ramps by step_ms per point after the grace score, floored at min_ms."""
    effective = max(0, score - SPEED_GRACE_SCORE)
    target = profile.base_ms - effective * profile.step_ms
    return max(target, profile.min_ms)


class SpeedController:
    """
    Tracks the current tick interval for the selected difficulty.

    The interval is recomputed from the score after each point, but a
    difficulty change always drops back to the new profile's base interval.
    """

    def __init__(self, difficulty: Difficulty | str = Difficulty.MEDIUM):
        self.difficulty = Difficulty.parse(difficulty)
        self.interval_ms = self.difficulty.profile.base_ms

    def reset(self) -> int:
        self.interval_ms = self.difficulty.profile.base_ms
        return self.interval_ms

    def update(self, score: int) -> int:
        new_ms = interval_for(self.difficulty.profile, score)
        if new_ms != self.interval_ms:
            logger.debug("Interval %d ms -> %d ms (score %d)", self.interval_ms, new_ms, score)
        self.interval_ms = new_ms
        return self.interval_ms

    def set_difficulty(self, difficulty: Difficulty | str) -> int:
        self.difficulty = Difficulty.parse(difficulty)
        logger.info("Difficulty set to %s", self.difficulty.value)
        return self.reset()

    @property
    def moves_per_second(self) -> float:
        return 1000 / self.interval_ms

    @property
    def label(self) -> str:
        return f"{self.moves_per_second:.1f} moves/s"
