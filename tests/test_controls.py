import pygame

from snake_game.config import UP, DOWN, LEFT, RIGHT, Difficulty
from snake_game.controls import (
    DirectionIntent, RestartIntent, DifficultyIntent, QuitIntent,
    InputRouter, button_to_intent, key_to_intent, swipe_to_direction,
)


def test_arrow_and_wasd_keys():
    assert key_to_intent(pygame.K_UP) == DirectionIntent(UP)
    assert key_to_intent(pygame.K_a) == DirectionIntent(LEFT)
    assert key_to_intent(pygame.K_SPACE) == RestartIntent()
    assert key_to_intent(pygame.K_RETURN) == RestartIntent()
    assert key_to_intent(pygame.K_3) == DifficultyIntent(Difficulty.HARD)
    assert key_to_intent(pygame.K_ESCAPE) == QuitIntent()
    assert key_to_intent(pygame.K_z) is None


def test_swipe_needs_more_than_threshold():
    assert swipe_to_direction(30, 0) is None
    assert swipe_to_direction(31, 0) == RIGHT
    assert swipe_to_direction(-40, 10) == LEFT
    assert swipe_to_direction(10, -50) == UP
    assert swipe_to_direction(5, 12) is None


def test_swipe_tie_goes_vertical():
    assert swipe_to_direction(40, 40) == DOWN
    assert swipe_to_direction(-40, -40) == UP


def test_buttons():
    assert button_to_intent("down") == DirectionIntent(DOWN)
    assert button_to_intent("restart") == RestartIntent(force=True)
    assert button_to_intent(None) is None


def test_router_translates_keys_and_quit():
    router = InputRouter()
    assert router.translate(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RIGHT)) == DirectionIntent(RIGHT)
    assert router.translate(pygame.event.Event(pygame.QUIT)) == QuitIntent()


def test_router_finger_swipe():
    router = InputRouter(size=(400, 400))
    down = pygame.event.Event(pygame.FINGERDOWN, finger_id=0, x=0.5, y=0.5)
    up = pygame.event.Event(pygame.FINGERUP, finger_id=0, x=0.6, y=0.52)
    assert router.translate(down) is None
    assert router.translate(up) == DirectionIntent(RIGHT)


def test_router_short_swipe_ignored():
    router = InputRouter(size=(400, 400))
    router.translate(pygame.event.Event(pygame.FINGERDOWN, finger_id=3, x=0.5, y=0.5))
    up = pygame.event.Event(pygame.FINGERUP, finger_id=3, x=0.5, y=0.45)
    assert router.translate(up) is None


def test_router_click_uses_hit_test():
    router = InputRouter(hit_test=lambda pos: "up" if pos == (5, 5) else None)
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5))
    miss = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(50, 50))
    assert router.translate(click) == DirectionIntent(UP)
    assert router.translate(miss) is None
