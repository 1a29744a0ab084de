from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import DEFAULT_CONFIG, GameConfig
from .grid import Grid
from .movement import project
from .pieces import Points, spawn_piece
from .rng import LCG


class Status(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """One immutable snapshot of a game.

    ``points`` and ``ghost_points`` are absolute grid coordinates of the
    active piece and of its landing projection. ``generator`` is the
    random state that the next piece draw consumes. ``locked`` is true only
    on the snapshot produced by the transition that merged a piece.
    """

    grid: Grid
    points: Points
    colour: str
    next_points: Points
    next_colour: str
    ghost_points: Points
    generator: LCG
    score: int = 0
    lines_cleared: int = 0
    level: int = 0
    tick_interval: int = DEFAULT_CONFIG.base_tick_ms
    high_score: int = 0
    status: Status = Status.PLAYING
    locked: bool = False

    @property
    def game_end(self) -> bool:
        return self.status is Status.GAME_OVER


def initial_state(config: Optional[GameConfig] = None, high_score: int = 0) -> GameState:
    config = config or DEFAULT_CONFIG
    grid = Grid.empty(config.width, config.height)
    points, colour, generator = spawn_piece(LCG(config.seed), config.spawn_offset)
    next_points, next_colour, generator = spawn_piece(generator, config.spawn_offset)
    return GameState(
        grid=grid,
        points=points,
        colour=colour,
        next_points=next_points,
        next_colour=next_colour,
        ghost_points=project(points, grid),
        generator=generator,
        tick_interval=config.base_tick_ms,
        high_score=high_score,
    )
