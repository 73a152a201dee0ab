import random

import pytest

from snake_game.clock import GameClock
from snake_game.game import GameState
from snake_game.config import RIGHT


class FakeTimer:
    """Stands in for pygame.time.set_timer and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, event_type, millis):
        self.calls.append((event_type, millis))

    @property
    def armed(self):
        # net number of live timers implied by the call log
        live = 0
        for _, ms in self.calls:
            live = 1 if ms > 0 else 0
        return live


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def clock(timer):
    return GameClock(set_timer=timer)


@pytest.fixture
def rng():
    return random.Random(1234)


def make_state(snake, food=(0, 0), direction=RIGHT, pending=None, score=0):
    return GameState(
        snake=list(snake),
        food=food,
        direction=direction,
        pending=direction if pending is None else pending,
        score=score,
        running=True,
    )
