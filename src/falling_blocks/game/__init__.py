"""Game module for Falling Blocks.

Exports the pure rules engine and its value types:
- LCG: Seed-threaded pseudo-random generator
- TetrominoType / spawn_piece: Piece catalog and spawning
- Grid: Immutable board with placement, line clearing and collision checks
- ScoringRules: Score, level and tick-interval formulas
- GameState / reduce: Snapshot type and the event reducer
- TickRateChannel / TickClock: Tick cadence feedback and tick production
- FallingBlocksGame: Stateful owner of the current snapshot
"""

from .rng import LCG
from .pieces import COLOURS, TetrominoType, spawn_piece
from .grid import Cell, Grid, clear_lines, collides, place_block
from .movement import Direction, Rotation, move, project, rotate
from .rules import ScoringRules
from .events import Command, Event, HardDrop, Move, Restart, Rotate, Tick, event_for_command
from .state import GameState, Status, initial_state
from .scheduler import TickClock, TickRateChannel
from .core import FallingBlocksGame, reduce

__all__ = [
    "LCG",
    "COLOURS",
    "TetrominoType",
    "spawn_piece",
    "Cell",
    "Grid",
    "clear_lines",
    "collides",
    "place_block",
    "Direction",
    "Rotation",
    "move",
    "project",
    "rotate",
    "ScoringRules",
    "Command",
    "Event",
    "HardDrop",
    "Move",
    "Restart",
    "Rotate",
    "Tick",
    "event_for_command",
    "GameState",
    "Status",
    "initial_state",
    "TickClock",
    "TickRateChannel",
    "FallingBlocksGame",
    "reduce",
]
