from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from falling_blocks.game import GameState
from falling_blocks.game.pieces import CODE_COLOURS, Points


RGB = Tuple[int, int, int]

PALETTE: Dict[str, RGB] = {
    "cyan": (0, 240, 240),
    "blue": (0, 0, 240),
    "orange": (240, 160, 0),
    "yellow": (240, 240, 0),
    "green": (0, 240, 0),
    "magenta": (160, 0, 240),
    "red": (240, 0, 0),
}
EMPTY: RGB = (20, 20, 26)
GHOST: RGB = (90, 90, 100)
TEXT: RGB = (230, 230, 230)


def rgb_for_code(code: int) -> RGB:
    if code == 0:
        return EMPTY
    return PALETTE.get(CODE_COLOURS.get(abs(code), ""), (200, 200, 200))


class Renderer:
    """Draws a snapshot: board, ghost, active piece and a side panel."""

    def __init__(self, cell_size: int = 20, margin: int = 20, panel_width: int = 160) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, state: GameState) -> Tuple[int, int]:
        board_w = state.grid.width * self.cell_size
        board_h = state.grid.height * self.cell_size
        return board_w + self.panel_width + self.margin * 3, board_h + self.margin * 2

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(None, 24)
        return self._font

    def _cell_rect(self, x0: int, y0: int, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(
            x0 + x * self.cell_size,
            y0 + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _draw_points(self, surface: pygame.Surface, x0: int, y0: int, points: Points, color: RGB, width: int = 0) -> None:
        for x, y in points:
            pygame.draw.rect(surface, color, self._cell_rect(x0, y0, x, y), width)

    def render(self, surface: pygame.Surface, state: GameState) -> None:
        surface.fill((10, 10, 14))
        x0 = y0 = self.margin
        for y in range(state.grid.height):
            for x in range(state.grid.width):
                pygame.draw.rect(surface, EMPTY, self._cell_rect(x0, y0, x, y))
        for x, y, colour in state.grid.filled_cells():
            pygame.draw.rect(surface, PALETTE.get(colour, TEXT), self._cell_rect(x0, y0, x, y))

        if not state.game_end:
            self._draw_points(surface, x0, y0, state.ghost_points, GHOST, width=2)
        self._draw_points(surface, x0, y0, state.points, PALETTE.get(state.colour, TEXT))

        # Side panel: next piece preview and counters
        panel_x = x0 * 2 + state.grid.width * self.cell_size
        font = self._get_font()
        surface.blit(font.render("Next", True, TEXT), (panel_x, y0))
        offset_x = min(x for x, _ in state.next_points) if state.next_points else 0
        preview = tuple((x - offset_x, y) for x, y in state.next_points)
        self._draw_points(surface, panel_x, y0 + 24, preview, PALETTE.get(state.next_colour, TEXT))

        lines = [
            f"Score: {state.score}",
            f"Level: {state.level}",
            f"Lines: {state.lines_cleared}",
            f"High score: {state.high_score}",
        ]
        for i, txt in enumerate(lines):
            surface.blit(font.render(txt, True, TEXT), (panel_x, y0 + 24 + 3 * self.cell_size + i * 22))

        if state.game_end:
            over = font.render("Game Over - R to restart", True, (255, 100, 100))
            rect = over.get_rect(center=(x0 + state.grid.width * self.cell_size // 2, y0 + state.grid.height * self.cell_size // 2))
            surface.blit(over, rect)

    def draw(self, screen: pygame.Surface, state: GameState) -> None:
        self.render(screen, state)
        pygame.display.flip()
