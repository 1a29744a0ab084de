from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.config import DEFAULT_CONFIG, GameConfig
from falling_blocks.game import Command, FallingBlocksGame, GameState, TetrominoType
from falling_blocks.game.pieces import COLOUR_CODES


NOOP = len(Command)


def observation_grid(state: GameState) -> np.ndarray:
    """Locked cells as colour codes with the active piece overlaid as negatives."""
    grid = state.grid.cells.copy()
    if not state.game_end:
        code = -COLOUR_CODES[state.colour]
        for x, y in state.points:
            if 0 <= y < grid.shape[0] and 0 <= x < grid.shape[1]:
                grid[y, x] = code
    return grid


class FallingBlocksEnv(gym.Env):
    """Headless harness over the reducer.

    Actions 0-6 are the seven player commands (``Command`` order) and 7 is a
    no-op. Every ``gravity_every`` steps a tick follows the action. Reward is
    the score gained on the step.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        gravity_every: int = 1,
        max_episode_steps: int = 10000,
    ) -> None:
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.render_mode = render_mode
        self.gravity_every = max(1, int(gravity_every))
        self.max_episode_steps = int(max_episode_steps)
        self.game = FallingBlocksGame(self.config)
        self._steps = 0

        h, w = self.config.height, self.config.width
        n_kinds = len(TetrominoType)
        self.observation_space = spaces.Dict(
            {
                "grid": spaces.Box(low=-n_kinds, high=n_kinds, shape=(h, w), dtype=np.int8),
                "next": spaces.Discrete(n_kinds + 1),
            }
        )
        self.action_space = spaces.Discrete(len(Command) + 1)

    def _get_obs(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "grid": observation_grid(state),
            "next": COLOUR_CODES[state.next_colour],
        }

    def _get_info(self) -> Dict[str, Any]:
        state = self.game.state
        return {
            "score": state.score,
            "lines_cleared": state.lines_cleared,
            "level": state.level,
            "tick_interval": state.tick_interval,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is not None:
            self.config = replace(self.config, seed=int(seed))
            self.game = FallingBlocksGame(self.config, store=self.game.store)
        else:
            self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = int(action)
        score_before = self.game.state.score
        if action != NOOP:
            self.game.command(Command(action))
        self._steps += 1
        if not self.game.game_over and self._steps % self.gravity_every == 0:
            self.game.tick(self._steps)

        # Restart drops the score back to zero; that is not a penalty.
        reward = float(max(0, self.game.state.score - score_before))
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        from falling_blocks.visualization.renderer import rgb_for_code

        grid = observation_grid(self.game.state)
        cell = 12
        h, w = grid.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = rgb_for_code(int(grid[y, x]))
        return img

    def close(self) -> None:
        pass
