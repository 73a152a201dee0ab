# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
import logging
import random

from .config import GRID_SIZE, START_SNAKE, START_DIRECTION

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]


# ---------- Helpers ----------
def in_bounds(cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def spawn_food(snake: List[Cell], rng=random) -> Cell:
    """Sample cells uniformly until one is not covered by the snake."""
    while True:
        fx = rng.randrange(GRID_SIZE)
        fy = rng.randrange(GRID_SIZE)
        if (fx, fy) not in snake:
            return (fx, fy)


# ---------- State ----------
class StepOutcome(Enum):
    IDLE = "idle"                      # game already over, nothing happened
    MOVED = "moved"
    ATE = "ate"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"

    @property
    def fatal(self) -> bool:
        return self in (StepOutcome.WALL_COLLISION, StepOutcome.SELF_COLLISION)

    @property
    def ate(self) -> bool:
        return self is StepOutcome.ATE


@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    food: Cell
    direction: Direction           # applied on the last tick
    pending: Direction             # requested by input, applied on the next tick
    score: int = 0
    running: bool = True

    @property
    def head(self) -> Cell:
        return self.snake[0]


def new_game_state(rng=random) -> GameState:
    snake = list(START_SNAKE)
    return GameState(
        snake=snake,
        food=spawn_food(snake, rng),
        direction=START_DIRECTION,
        pending=START_DIRECTION,
        score=0,
        running=True,
    )


# ---------- Update ----------
def step_game(state: GameState, rng=random) -> StepOutcome:
    """
    Advance the game by one tick.
    - Commits the pending direction, then moves the head one cell.
    - Walls and the pre-move body (tail included) are fatal; positions are
      left as they were so the final frame can be drawn.
    - Eating grows the snake by one and replaces the food.
    """
    if not state.running:
        return StepOutcome.IDLE

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.snake[0]
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head):
        state.running = False
        logger.debug("Wall collision at %s", new_head)
        return StepOutcome.WALL_COLLISION

    # Self collision (checked before the tail moves)
    if new_head in state.snake:
        state.running = False
        logger.debug("Self collision at %s", new_head)
        return StepOutcome.SELF_COLLISION

    # Move / grow
    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += 1
        state.food = spawn_food(state.snake, rng)
        return StepOutcome.ATE

    state.snake.pop()
    return StepOutcome.MOVED
