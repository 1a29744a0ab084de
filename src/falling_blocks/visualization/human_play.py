from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Sequence

import pygame

from falling_blocks.config import DEFAULT_CONFIG
from falling_blocks.game import Command, FallingBlocksGame, TickClock
from falling_blocks.storage import JsonHighScoreStore
from .renderer import Renderer

logger = logging.getLogger(__name__)


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.ROTATE_LEFT,
    pygame.K_RIGHT: Command.ROTATE_RIGHT,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_r: Command.RESTART,
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks")
    p.add_argument("--seed", type=int, default=DEFAULT_CONFIG.seed)
    p.add_argument("--cell-size", type=int, default=24)
    p.add_argument("--high-score-file", type=str, default="~/.falling_blocks/high_score.json")
    p.add_argument("--log-level", type=str, default="WARNING")
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    try:
        config = replace(DEFAULT_CONFIG, seed=args.seed)
        store = JsonHighScoreStore(Path(args.high_score_file).expanduser())
        game = FallingBlocksGame(config, store=store)
        clock_source = TickClock(game.tick_rate)
        game.tick_rate.subscribe(lambda interval: logger.debug("Tick interval now %d ms", interval))

        renderer = Renderer(cell_size=args.cell_size)
        screen = pygame.display.set_mode(renderer.window_size(game.state))
        pygame.display.set_caption("Falling Blocks")
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            game.command(command)

            # Gravity
            for tick in clock_source.advance(clock.get_time()):
                game.dispatch(tick)

            renderer.draw(screen, game.state)
            clock.tick(60)
        clock_source.close()
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
