# session.py
from __future__ import annotations
import logging
import random

from .clock import GameClock
from .config import Difficulty
from .controls import (
    Intent, DirectionIntent, RestartIntent, DifficultyIntent,
    apply_direction,
)
from .game import GameState, StepOutcome, new_game_state, step_game
from .speed import SpeedController
from .storage import HighScoreStore

logger = logging.getLogger(__name__)


class SnakeSession:
    """
    One player's run of games: the current GameState plus everything that
    outlives a single game (high score, difficulty, tick clock).
    """

    def __init__(self, clock: GameClock, store: HighScoreStore,
                 difficulty: Difficulty | str = Difficulty.MEDIUM, rng=None):
        self.clock = clock
        self.store = store
        self.speed = SpeedController(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.high_score = store.load()
        self.state: GameState | None = None
        self.last_outcome: StepOutcome | None = None

    @property
    def running(self) -> bool:
        return self.state is not None and self.state.running

    def start(self) -> GameState:
        """Begin a fresh game at the difficulty's base speed."""
        self.state = new_game_state(self.rng)
        self.last_outcome = None
        self.clock.restart(self.speed.reset())
        logger.info("New game (%s, %s)", self.speed.difficulty.value, self.speed.label)
        return self.state

    restart = start

    def on_tick(self) -> StepOutcome:
        if not self.running:
            return StepOutcome.IDLE

        outcome = step_game(self.state, self.rng)
        self.last_outcome = outcome

        if outcome.ate:
            self._record_score(self.state.score)
            self.clock.restart(self.speed.update(self.state.score))
        elif outcome.fatal:
            self.clock.stop()
            logger.info("Game over (%s), score %d", outcome.value, self.state.score)
        return outcome

    def handle(self, intent: Intent) -> None:
        if isinstance(intent, RestartIntent):
            if intent.force or not self.running:
                self.restart()
        elif isinstance(intent, DirectionIntent):
            if self.state is not None:
                apply_direction(self.state, intent.direction)
        elif isinstance(intent, DifficultyIntent):
            self.set_difficulty(intent.difficulty)

    def set_difficulty(self, difficulty: Difficulty | str) -> None:
        interval = self.speed.set_difficulty(difficulty)
        if self.running:
            self.clock.restart(interval)

    def _record_score(self, score: int) -> None:
        if score > self.high_score:
            self.high_score = score
            self.store.save(score)
            logger.debug("New high score %d", score)
