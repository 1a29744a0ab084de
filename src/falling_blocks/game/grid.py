from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

import numpy as np

from ..config import DEFAULT_CONFIG
from .pieces import CODE_COLOURS, COLOUR_CODES, Point


@dataclass(frozen=True)
class Cell:
    filled: bool
    colour: Optional[str] = None


EMPTY_CELL = Cell(False)


def _readonly(cells: np.ndarray) -> np.ndarray:
    cells.setflags(write=False)
    return cells


@dataclass(frozen=True, eq=False)
class Grid:
    """Fixed-size occupancy board.

    Cells are held in a read-only ``int8`` array indexed ``[row, column]``;
    0 marks an empty cell and any other value is the colour code of the
    piece that filled it. Every operation returns a new ``Grid``.
    """

    cells: np.ndarray

    @classmethod
    def empty(cls, width: int = DEFAULT_CONFIG.width, height: int = DEFAULT_CONFIG.height) -> "Grid":
        return cls(_readonly(np.zeros((height, width), dtype=np.int8)))

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "Grid":
        return cls(_readonly(np.array(cells, dtype=np.int8, copy=True)))

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, x: int, y: int) -> bool:
        return bool(self.cells[y, x] != 0)

    def cell(self, row: int, column: int) -> Cell:
        code = int(self.cells[row, column])
        if code == 0:
            return EMPTY_CELL
        return Cell(True, CODE_COLOURS.get(code))

    def filled_cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, colour)`` for every filled cell, row by row."""
        for y, x in zip(*np.nonzero(self.cells)):
            yield int(x), int(y), CODE_COLOURS.get(int(self.cells[y, x]), "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]


def place_block(grid: Grid, points: Iterable[Point], colour: str) -> Grid:
    """Fill every in-range point with ``colour``; out-of-range points are ignored."""
    cells = grid.cells.copy()
    code = COLOUR_CODES[colour]
    for x, y in points:
        if grid.is_inside(x, y):
            cells[y, x] = code
    return Grid(_readonly(cells))


def clear_lines(grid: Grid) -> Tuple[Grid, int]:
    full_rows = np.all(grid.cells != 0, axis=1)
    count = int(np.count_nonzero(full_rows))
    if count == 0:
        return grid, 0
    kept = grid.cells[~full_rows]
    new_rows = np.zeros((count, grid.width), dtype=np.int8)
    return Grid(_readonly(np.vstack((new_rows, kept)))), count


def collides(points: Iterable[Point], grid: Grid) -> bool:
    for x, y in points:
        if not grid.is_inside(x, y):
            return True
        if grid.is_filled(x, y):
            return True
    return False


def top_row_filled(grid: Grid) -> bool:
    return bool(np.any(grid.cells[0] != 0))
