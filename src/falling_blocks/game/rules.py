from __future__ import annotations

from dataclasses import dataclass

from ..config import GameConfig


@dataclass(frozen=True)
class ScoringRules:
    line_score: int = 100
    lock_bonus: int = 8
    lines_per_level: int = 5
    base_tick_ms: int = 500
    tick_step_ms: int = 100
    min_tick_ms: int = 100

    @classmethod
    def from_config(cls, config: GameConfig) -> "ScoringRules":
        return cls(
            line_score=config.line_score,
            lock_bonus=config.lock_bonus,
            lines_per_level=config.lines_per_level,
            base_tick_ms=config.base_tick_ms,
            tick_step_ms=config.tick_step_ms,
            min_tick_ms=config.min_tick_ms,
        )

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return self.line_score * lines

    def level_for_lines(self, total_lines: int) -> int:
        if total_lines < self.lines_per_level:
            return 0
        return total_lines // self.lines_per_level

    def tick_interval(self, level: int) -> int:
        """Milliseconds between gravity ticks; faster every two levels from 5."""
        if level < 5:
            return self.base_tick_ms
        interval = self.base_tick_ms - self.tick_step_ms * ((level - 5) // 2 + 1)
        return max(interval, self.min_tick_ms)
