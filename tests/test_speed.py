import pytest

from snake_game.config import Difficulty, DIFFICULTY_PROFILES
from snake_game.speed import SpeedController, interval_for


def test_medium_ramp():
    medium = DIFFICULTY_PROFILES[Difficulty.MEDIUM]
    assert interval_for(medium, 0) == 190
    assert interval_for(medium, 3) == 190
    assert interval_for(medium, 4) == 183
    assert interval_for(medium, 10) == 141
    assert interval_for(medium, 25) == 80


def test_every_profile_floors_at_min():
    for profile in DIFFICULTY_PROFILES.values():
        assert interval_for(profile, 1000) == profile.min_ms


def test_controller_update_and_reset():
    speed = SpeedController("medium")
    assert speed.interval_ms == 190
    assert speed.update(10) == 141
    assert speed.reset() == 190


def test_difficulty_change_resets_to_base_not_score():
    speed = SpeedController(Difficulty.MEDIUM)
    speed.update(12)
    assert speed.set_difficulty(Difficulty.HARD) == 160
    assert speed.interval_ms == 160
    assert speed.update(12) == 160 - 9 * 8


def test_label():
    speed = SpeedController(Difficulty.EASY)
    assert speed.label == "4.3 moves/s"


def test_unknown_difficulty():
    with pytest.raises(ValueError):
        SpeedController("nightmare")
    assert Difficulty.parse("HARD") is Difficulty.HARD
