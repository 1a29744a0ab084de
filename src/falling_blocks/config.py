from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    width: int = 10
    height: int = 20
    base_tick_ms: int = 500
    tick_step_ms: int = 100
    min_tick_ms: int = 100
    lock_bonus: int = 8
    line_score: int = 100
    lines_per_level: int = 5
    spawn_offset: int = 4
    seed: int = 8


DEFAULT_CONFIG = GameConfig()
