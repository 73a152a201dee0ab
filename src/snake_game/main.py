# main.py
from __future__ import annotations
import argparse
import logging
import random
from pathlib import Path

import pygame # type: ignore

from .clock import GameClock
from .config import WIDTH, HEIGHT, Config, Difficulty
from .controls import InputRouter, QuitIntent
from .render import Renderer
from .session import SnakeSession
from .storage import HighScoreStore

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> Config:
    defaults = Config()
    parser = argparse.ArgumentParser(description="Classic Snake on a 20x20 grid.")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=defaults.difficulty.value,
        choices=[d.value for d in Difficulty],
        help="Starting speed profile (switch in-game with 1/2/3)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed food placement")
    parser.add_argument(
        "--high-score-file",
        type=Path,
        default=defaults.high_score_path,
        help="Where the best score is kept",
    )
    parser.add_argument("--fps", type=int, default=defaults.fps, help="Redraw rate")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return Config(
        seed=args.seed,
        difficulty=Difficulty.parse(args.difficulty),
        high_score_path=args.high_score_file,
        fps=args.fps,
    )


def main(argv=None):
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    frame_clock = pygame.time.Clock()

    tick_clock = GameClock()
    session = SnakeSession(
        clock=tick_clock,
        store=HighScoreStore(cfg.high_score_path),
        difficulty=cfg.difficulty,
        rng=random.Random(cfg.seed),
    )
    renderer = Renderer(screen, font)
    router = InputRouter(hit_test=renderer.button_at, size=(WIDTH, HEIGHT),
                         min_swipe=cfg.swipe_min_distance)

    session.start()
    running = True

    while running:
        # 1) input + ticks, in arrival order
        for event in pygame.event.get():
            if event.type == tick_clock.event_type:
                session.on_tick()
                continue
            intent = router.translate(event)
            if isinstance(intent, QuitIntent):
                running = False
                break
            if intent is not None:
                session.handle(intent)

        # 2) render
        renderer.draw(session.state, session.high_score,
                      session.speed.label, session.speed.difficulty.value)
        pygame.display.flip()
        frame_clock.tick(cfg.fps)  # movement is paced by the tick timer, not the frame rate

    tick_clock.stop()
    pygame.quit()
    logger.info("Best score: %d", session.high_score)

if __name__ == "__main__":
    main()
