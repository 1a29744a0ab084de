"""Events folded into the game state.

``Event`` is a closed union: the reducer matches on these classes
exhaustively. ``Command`` names the seven player inputs and maps each to
its event.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional, Union

from .movement import Direction, Rotation


@dataclass(frozen=True)
class Tick:
    elapsed: int = 0


@dataclass(frozen=True)
class Move:
    direction: Direction


@dataclass(frozen=True)
class Rotate:
    rotation: Rotation


@dataclass(frozen=True)
class HardDrop:
    pass


@dataclass(frozen=True)
class Restart:
    # Filled in by whoever owns the high-score store; None keeps the
    # best score already held in the snapshot.
    high_score: Optional[int] = None


Event = Union[Tick, Move, Rotate, HardDrop, Restart]


class Command(IntEnum):
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    ROTATE_LEFT = 3
    ROTATE_RIGHT = 4
    HARD_DROP = 5
    RESTART = 6


_COMMAND_EVENTS: Dict[Command, Event] = {
    Command.MOVE_LEFT: Move(Direction.LEFT),
    Command.MOVE_RIGHT: Move(Direction.RIGHT),
    Command.MOVE_DOWN: Move(Direction.DOWN),
    Command.ROTATE_LEFT: Rotate(Rotation.COUNTER_CLOCKWISE),
    Command.ROTATE_RIGHT: Rotate(Rotation.CLOCKWISE),
    Command.HARD_DROP: HardDrop(),
    Command.RESTART: Restart(),
}


def event_for_command(command: Command) -> Event:
    return _COMMAND_EVENTS[Command(command)]
