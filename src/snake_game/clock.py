# clock.py
from __future__ import annotations
from enum import Enum
from typing import Callable
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)

# Posted to the pygame event queue once per tick
TICK_EVENT = pygame.USEREVENT + 1


class ClockState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class GameClock:
    """
    Repeating tick timer backed by pygame.time.set_timer.

    set_timer(event, 0) disarms the timer, so every (re)start cancels the
    active timer before arming the new one and only one is ever alive.
    """

    def __init__(self, set_timer: Callable[[int, int], None] = pygame.time.set_timer,
                 event_type: int = TICK_EVENT):
        self._set_timer = set_timer
        self.event_type = event_type
        self.state = ClockState.STOPPED
        self.interval_ms: int | None = None

    @property
    def running(self) -> bool:
        return self.state is ClockState.RUNNING

    def start(self, interval_ms: int) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}")
        if self.running:
            self._set_timer(self.event_type, 0)
        self._set_timer(self.event_type, interval_ms)
        self.state = ClockState.RUNNING
        self.interval_ms = interval_ms
        logger.debug("Clock armed at %d ms", interval_ms)

    # Resetting the interval forgives any partially elapsed tick
    restart = start

    def stop(self) -> None:
        if self.running:
            self._set_timer(self.event_type, 0)
            logger.debug("Clock stopped")
        self.state = ClockState.STOPPED
