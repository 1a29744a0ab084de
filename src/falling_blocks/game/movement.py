from __future__ import annotations

from enum import Enum, IntEnum

from ..config import DEFAULT_CONFIG
from .grid import Grid, collides
from .pieces import Points


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


class Rotation(IntEnum):
    COUNTER_CLOCKWISE = -1
    CLOCKWISE = 1


_SHIFTS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}


def check_within_grid(points: Points, direction: Direction, width: int = DEFAULT_CONFIG.width) -> bool:
    """True when a horizontal shift keeps every point inside the columns."""
    dx, _ = _SHIFTS[direction]
    return all(0 <= x + dx < width for x, _ in points)


def within_bounds(points: Points, grid: Grid) -> bool:
    return all(grid.is_inside(x, y) for x, y in points)


def shift(points: Points, dx: int, dy: int) -> Points:
    return tuple((x + dx, y + dy) for x, y in points)


def move(points: Points, direction: Direction, width: int = DEFAULT_CONFIG.width) -> Points:
    # Downward moves are only bounded later by the collision check.
    if direction is not Direction.DOWN and not check_within_grid(points, direction, width):
        return points
    dx, dy = _SHIFTS[direction]
    return shift(points, dx, dy)


def rotate_points(points: Points, rotation: Rotation) -> Points:
    """Quarter-turn every point around the one at index ``len(points) // 2``."""
    if not points:
        return points
    px, py = points[len(points) // 2]
    rotated = []
    for x, y in points:
        dx, dy = x - px, y - py
        if rotation is Rotation.CLOCKWISE:
            dx, dy = dy, -dx
        else:
            dx, dy = -dy, dx
        rotated.append((px + dx, py + dy))
    return tuple(rotated)


def _valid(points: Points, grid: Grid) -> bool:
    return within_bounds(points, grid) and not collides(points, grid)


def rotate(points: Points, grid: Grid, rotation: Rotation) -> Points:
    """Rotate with a one-column wall kick, right first then left.

    Returns ``points`` untouched when neither the plain rotation nor either
    kicked candidate fits.
    """
    rotated = rotate_points(points, rotation)
    for candidate in (rotated, shift(rotated, 1, 0), shift(rotated, -1, 0)):
        if _valid(candidate, grid):
            return candidate
    return points


def project(points: Points, grid: Grid) -> Points:
    """Lowest non-colliding position reachable by falling straight down."""
    if not points:
        return points
    resting = points
    while True:
        lower = move(resting, Direction.DOWN, grid.width)
        if collides(lower, grid):
            return resting
        resting = lower


def drop(points: Points, grid: Grid) -> Points:
    """Resting position for a hard drop."""
    return project(points, grid)
