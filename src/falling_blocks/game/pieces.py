from __future__ import annotations

import math
from enum import IntEnum
from typing import Dict, List, Tuple

import numpy as np

from ..config import DEFAULT_CONFIG
from .rng import LCG


Point = Tuple[int, int]
Points = Tuple[Point, ...]


class TetrominoType(IntEnum):
    J = 1
    I = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


Shape = np.ndarray


def _frozen(rows: List[List[int]]) -> Shape:
    mask = np.array(rows, dtype=np.int8)
    mask.setflags(write=False)
    return mask


BASE_SHAPES: Dict[TetrominoType, Shape] = {
    TetrominoType.J: _frozen([[0, 0, 1], [1, 1, 1]]),
    TetrominoType.I: _frozen([[1, 1, 1, 1]]),
    TetrominoType.L: _frozen([[1, 0, 0], [1, 1, 1]]),
    TetrominoType.O: _frozen([[1, 1], [1, 1]]),
    TetrominoType.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    TetrominoType.T: _frozen([[0, 1, 0], [1, 1, 1]]),
    TetrominoType.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
}

COLOURS: Dict[TetrominoType, str] = {
    TetrominoType.I: "cyan",
    TetrominoType.J: "blue",
    TetrominoType.L: "orange",
    TetrominoType.O: "yellow",
    TetrominoType.S: "green",
    TetrominoType.T: "magenta",
    TetrominoType.Z: "red",
}

# Grid cells store these codes; 0 is reserved for empty.
COLOUR_CODES: Dict[str, int] = {colour: int(kind) for kind, colour in COLOURS.items()}
CODE_COLOURS: Dict[int, str] = {code: colour for colour, code in COLOUR_CODES.items()}


def shape_for_value(value: float) -> TetrominoType:
    """Map a generator value in [-1, 1) onto one of the seven kinds."""
    kinds = list(TetrominoType)
    index = math.floor((value + 1) / 2 * len(kinds))
    return kinds[min(max(index, 0), len(kinds) - 1)]


def relative_cells(kind: TetrominoType) -> Points:
    mask = BASE_SHAPES[kind]
    h, w = mask.shape
    return tuple((x, y) for y in range(h) for x in range(w) if mask[y, x])


def spawn_points(kind: TetrominoType, offset: int = DEFAULT_CONFIG.spawn_offset) -> Points:
    return tuple((x + offset, y) for x, y in relative_cells(kind))


def spawn_piece(generator: LCG, offset: int = DEFAULT_CONFIG.spawn_offset) -> Tuple[Points, str, LCG]:
    value, generator = generator.scale()
    kind = shape_for_value(value)
    return spawn_points(kind, offset), COLOURS[kind], generator
