from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..config import DEFAULT_CONFIG, GameConfig
from ..storage import HighScoreStore, InMemoryHighScoreStore
from .events import Command, Event, HardDrop, Move, Restart, Rotate, Tick, event_for_command
from .grid import clear_lines, collides, place_block, top_row_filled
from .movement import Direction, drop, move, project, rotate
from .pieces import Points, spawn_piece
from .rules import ScoringRules
from .scheduler import TickRateChannel
from .state import GameState, Status, initial_state

logger = logging.getLogger(__name__)


def _with_points(state: GameState, points: Points) -> GameState:
    return replace(state, points=points, ghost_points=project(points, state.grid), locked=False)


def _lock(state: GameState, points: Points, config: GameConfig, rules: ScoringRules) -> GameState:
    """Merge the active piece at ``points`` and bring in the next one.

    The lock bonus is paid on every lock. The game ends when the top row
    holds a block after the merge or when the promoted piece cannot spawn;
    no lines are cleared on that transition.
    """
    grid = place_block(state.grid, points, state.colour)
    score = state.score + rules.lock_bonus
    active, colour = state.next_points, state.next_colour
    next_points, next_colour, generator = spawn_piece(state.generator, config.spawn_offset)
    locked = replace(
        state,
        grid=grid,
        points=active,
        colour=colour,
        next_points=next_points,
        next_colour=next_colour,
        ghost_points=active,
        generator=generator,
        score=score,
        high_score=max(state.high_score, score),
        locked=True,
    )

    if top_row_filled(grid) or collides(active, grid):
        logger.info("Game over with score %d after %d lines", score, state.lines_cleared)
        return replace(locked, status=Status.GAME_OVER)

    grid, cleared = clear_lines(grid)
    if cleared:
        logger.debug("Cleared %d line(s)", cleared)
    score += rules.score_for_lines(cleared)
    lines = state.lines_cleared + cleared
    level = rules.level_for_lines(lines)
    return replace(
        locked,
        grid=grid,
        ghost_points=project(active, grid),
        score=score,
        high_score=max(state.high_score, score),
        lines_cleared=lines,
        level=level,
        tick_interval=rules.tick_interval(level),
    )


def _fall(state: GameState, config: GameConfig, rules: ScoringRules) -> GameState:
    lower = move(state.points, Direction.DOWN, state.grid.width)
    if not collides(lower, state.grid):
        return _with_points(state, lower)
    return _lock(state, state.points, config, rules)


def reduce(
    state: GameState,
    event: Event,
    config: Optional[GameConfig] = None,
    rules: Optional[ScoringRules] = None,
) -> GameState:
    """Fold one event into ``state`` and return the next snapshot.

    Total for every event: moves and rotations that do not fit leave the
    snapshot as it was, and a finished game ignores everything but
    ``Restart``.
    """
    config = config or DEFAULT_CONFIG
    rules = rules or ScoringRules.from_config(config)

    if isinstance(event, Restart):
        high_score = event.high_score
        if high_score is None:
            high_score = max(state.high_score, state.score)
        logger.info("Restarting game (high score %d)", high_score)
        return initial_state(config, high_score=high_score)

    if state.status is Status.GAME_OVER:
        return state

    match event:
        case Tick():
            return _fall(state, config, rules)
        case Move(direction=Direction.DOWN):
            return _fall(state, config, rules)
        case Move(direction=direction):
            shifted = move(state.points, direction, state.grid.width)
            if collides(shifted, state.grid):
                return state
            return _with_points(state, shifted)
        case Rotate(rotation=rotation):
            rotated = rotate(state.points, state.grid, rotation)
            if rotated == state.points:
                return state
            return _with_points(state, rotated)
        case HardDrop():
            return _lock(state, drop(state.points, state.grid), config, rules)
        case _:
            return state


class FallingBlocksGame:
    """Owns the current snapshot and talks to the outside world.

    Each dispatched event replaces ``state``; afterwards the high score is
    written back when beaten and the tick interval is published on
    ``tick_rate``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        store: Optional[HighScoreStore] = None,
        tick_rate: Optional[TickRateChannel] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.rules = rules or ScoringRules.from_config(self.config)
        self.store = store if store is not None else InMemoryHighScoreStore()
        self.tick_rate = tick_rate if tick_rate is not None else TickRateChannel()
        self.state = initial_state(self.config, high_score=self.store.get_high_score())
        self.tick_rate.publish(self.state.tick_interval)

    @property
    def game_over(self) -> bool:
        return self.state.game_end

    def dispatch(self, event: Event) -> GameState:
        if isinstance(event, Restart) and event.high_score is None:
            event = Restart(self.store.get_high_score())
        self.state = reduce(self.state, event, self.config, self.rules)
        if self.state.score > self.store.get_high_score():
            self.store.set_high_score(self.state.score)
        self.tick_rate.publish(self.state.tick_interval)
        return self.state

    def command(self, command: Command) -> GameState:
        return self.dispatch(event_for_command(command))

    def tick(self, elapsed: int = 0) -> GameState:
        return self.dispatch(Tick(elapsed))

    def reset(self) -> GameState:
        return self.dispatch(Restart())
