# controls.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union
import logging

import pygame  # type: ignore

from .config import (
    UP, DOWN, LEFT, RIGHT,
    WIDTH, HEIGHT, SWIPE_MIN_DISTANCE,
    Difficulty,
)
from .game import GameState, Direction, is_opposite

logger = logging.getLogger(__name__)


# ---------- Intents ----------
@dataclass(frozen=True)
class DirectionIntent:
    direction: Direction

@dataclass(frozen=True)
class RestartIntent:
    # on-screen button restarts even mid-game; keys only act on game over
    force: bool = False

@dataclass(frozen=True)
class DifficultyIntent:
    difficulty: Difficulty

@dataclass(frozen=True)
class QuitIntent:
    pass

Intent = Union[DirectionIntent, RestartIntent, DifficultyIntent, QuitIntent]


# ---------- Raw input -> intent ----------
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
RESTART_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
}
BUTTON_DIRECTIONS = {"up": UP, "down": DOWN, "left": LEFT, "right": RIGHT}


def key_to_intent(key: int) -> Optional[Intent]:
    if key in KEY_DIRECTIONS:
        return DirectionIntent(KEY_DIRECTIONS[key])
    if key in RESTART_KEYS:
        return RestartIntent()
    if key in DIFFICULTY_KEYS:
        return DifficultyIntent(DIFFICULTY_KEYS[key])
    if key == pygame.K_ESCAPE:
        return QuitIntent()
    return None

def swipe_to_direction(dx: float, dy: float,
                       min_distance: float = SWIPE_MIN_DISTANCE) -> Optional[Direction]:
    """Pick the dominant axis of a swipe; it must travel more than min_distance px."""
    if abs(dx) > abs(dy):
        if abs(dx) > min_distance:
            return RIGHT if dx > 0 else LEFT
    elif abs(dy) > min_distance:
        return DOWN if dy > 0 else UP
    return None

def button_to_intent(button_id: Optional[str]) -> Optional[Intent]:
    if button_id in BUTTON_DIRECTIONS:
        return DirectionIntent(BUTTON_DIRECTIONS[button_id])
    if button_id == "restart":
        return RestartIntent(force=True)
    return None

def apply_direction(state: GameState, candidate: Direction) -> bool:
    """Set the pending direction unless it reverses the committed one (no 180° turns)."""
    if not state.running or is_opposite(candidate, state.direction):
        return False
    state.pending = candidate
    return True


class InputRouter:
    """Turns pygame events into intents; tracks finger-down points for swipes."""

    def __init__(self, hit_test: Callable[[Tuple[int, int]], Optional[str]] = lambda pos: None,
                 size: Tuple[int, int] = (WIDTH, HEIGHT),
                 min_swipe: float = SWIPE_MIN_DISTANCE):
        self.hit_test = hit_test
        self.size = size
        self.min_swipe = min_swipe
        self._touches: Dict[int, Tuple[float, float]] = {}

    def translate(self, event) -> Optional[Intent]:
        if event.type == pygame.QUIT:
            return QuitIntent()
        if event.type == pygame.KEYDOWN:
            return key_to_intent(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return button_to_intent(self.hit_test(event.pos))
        if event.type == pygame.FINGERDOWN:
            self._touches[event.finger_id] = self._to_px(event.x, event.y)
            return None
        if event.type == pygame.FINGERUP:
            start = self._touches.pop(event.finger_id, None)
            if start is None:
                return None
            end = self._to_px(event.x, event.y)
            direction = swipe_to_direction(end[0] - start[0], end[1] - start[1], self.min_swipe)
            if direction is not None:
                logger.debug("Swipe %s -> %s", start, end)
                return DirectionIntent(direction)
        return None

    def _to_px(self, nx: float, ny: float) -> Tuple[float, float]:
        # finger coordinates are normalised to [0, 1]
        return nx * self.size[0], ny * self.size[1]
