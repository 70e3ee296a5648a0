# main.py
from __future__ import annotations
import argparse
import logging
import random
from typing import Iterable, List, Optional, Sequence

import pygame # type: ignore

from .config import WIDTH, HEIGHT, TITLE, Config
from .game import Direction, FrameInput, Game, step_game
from .render import draw_frame, load_fonts

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}
RESTART_KEY = pygame.K_SPACE

def read_input(events: Iterable[pygame.event.Event]) -> FrameInput:
    """Fold one frame's events into a FrameInput (directions kept in arrival order)."""
    directions: List[Direction] = []
    restart = False
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in KEY_DIRECTIONS:
                directions.append(KEY_DIRECTIONS[event.key])
            elif event.key == RESTART_KEY:
                restart = True
            elif event.key == pygame.K_ESCAPE:
                quit_requested = True
    return FrameInput(tuple(directions), restart, quit_requested)

def poll_input() -> FrameInput:
    return read_input(pygame.event.get())

def run(config: Config) -> int:
    """Open the window and run the frame loop until quit. Returns the last score."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        fonts = load_fonts()
        clock = pygame.time.Clock()

        rng = random.Random(config.seed)
        game = Game.new(pygame.time.get_ticks(), config, rng)
        logger.info("starting (seed=%s, tick=%dms)", config.seed, config.tick_interval_ms)

        while True:
            # 1) input
            frame = poll_input()
            if frame.quit:
                break

            # 2) update, one clock read per frame
            game = step_game(game, frame, pygame.time.get_ticks())

            # 3) render
            draw_frame(screen, fonts, game)
            pygame.display.flip()
            clock.tick(config.fps)
        logger.info("window closed, final score %d", game.score)
        return game.score
    finally:
        pygame.quit()

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play grid snake.")
    p.add_argument("--seed", type=int, default=None, help="seed for food placement")
    p.add_argument("--tick-ms", type=int, default=Config.tick_interval_ms,
                   help="milliseconds between snake steps")
    p.add_argument("--fps", type=int, default=Config.fps, help="render frame rate")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p

def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = Config(seed=args.seed, tick_interval_ms=args.tick_ms, fps=args.fps)
    except ValueError as e:
        parser.error(str(e))
    run(config)

if __name__ == "__main__":
    main()
