# main.py
from __future__ import annotations
import argparse
import logging
from pathlib import Path
import pygame # type: ignore

from .config import WIDTH, HEIGHT, MIN_SPEED, CFG, Config, default_scores_path
from .controls import handle_event, QUIT, FULLSCREEN
from .render import draw_game
from .session import GameSession
from .storage import HighScoreStore


def _interval_ms(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < MIN_SPEED:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_SPEED} ms (got {value})")
    return value


def _positive(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive (got {value})")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (random if omitted)")
    parser.add_argument("--scores-file", type=Path, default=None,
                        help=f"where the high score is kept (default: {default_scores_path()})")
    parser.add_argument("--initial-speed", type=_interval_ms, default=CFG.initial_speed,
                        help="starting tick interval in ms")
    parser.add_argument("--fps", type=_positive, default=CFG.fps)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    cfg = Config(seed=args.seed, initial_speed=args.initial_speed, fps=args.fps)
    if args.scores_file is not None:
        cfg.scores_path = args.scores_file
    return cfg


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = config_from_args(args)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    try:
        with GameSession(HighScoreStore(cfg.scores_path), cfg, now_ms=pygame.time.get_ticks()) as session:
            running = True
            while running:
                # 1) input
                now = pygame.time.get_ticks()
                for event in pygame.event.get():
                    action = handle_event(session, event, now)
                    if action == QUIT:
                        running = False
                    elif action == FULLSCREEN:
                        pygame.display.toggle_fullscreen()

                # 2) update (movement gated by the session clock)
                session.update(pygame.time.get_ticks())

                # 3) render
                draw_game(screen, font, session.snapshot())
                pygame.display.flip()
                clock.tick(cfg.fps)

            print(f"Score: {session.state.score}  High score: {session.high_score}")
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
